"""Buying and selling shares with first-in, first-out lot accounting."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

from linearstructs.dollars import Dollars
from linearstructs.queue import Queue

OVERSELL_MESSAGE = "ERROR: That's more stock than you have"

_INSTRUCTIONS = (
    "This program will allow you to buy and sell stocks. The actions are:\n"
    "  buy 200 $1.57   - Buy 200 shares at $1.57\n"
    "  sell 150 $2.15  - Sell 150 shares at $2.15\n"
    "  display         - Display your current stock portfolio\n"
    "  quit            - Display a final report and quit the program\n"
)

_LEADING_INT = re.compile(r"[+-]?\d+")


@dataclass
class Lot:
    """Shares bought together at one price."""

    quantity: int
    cost: Dollars


@dataclass(frozen=True)
class Sale:
    """Shares sold from one lot, with the profit the sale made."""

    quantity: int
    price: Dollars
    profit: Dollars


class StockError(ValueError):
    """Raised when a sale asks for more shares than are held."""


class Portfolio:
    """Held lots and the history of sales, sold oldest lot first."""

    def __init__(self) -> None:
        self.holdings: Queue[Lot] = Queue()
        self.history: Queue[Sale] = Queue()
        self.shares = 0

    def buy(self, quantity: int, price: Dollars) -> None:
        """Record the purchase of a lot of shares."""
        self.shares += quantity
        self.holdings.push(Lot(quantity, price))

    def sell(self, quantity: int, price: Dollars) -> None:
        """Sell shares from the oldest lots first, recording each sale."""
        if quantity > self.shares:
            raise StockError(OVERSELL_MESSAGE)
        self.shares -= quantity

        remaining = quantity
        while remaining > 0:
            lot = self.holdings.front()
            if remaining >= lot.quantity:
                sold = lot.quantity
                self.holdings.pop()
            else:
                sold = remaining
                lot.quantity -= remaining
            remaining -= sold
            self.history.push(Sale(sold, price, (price - lot.cost) * sold))

    def proceeds(self) -> Dollars:
        """Return the total profit over every sale."""
        total = Dollars()
        for sale in self.history:
            total += sale.profit
        return total

    def report(self) -> str:
        """Describe the held lots, the sales and the proceeds."""
        lines = []
        if self.holdings:
            lines.append("Currently held:")
            lines.extend(
                f"\tBought {lot.quantity} shares at {lot.cost}"
                for lot in self.holdings
            )
        if self.history:
            lines.append("Sell History:")
            lines.extend(
                f"\tSold {sale.quantity} shares at {sale.price}"
                f" for a profit of {sale.profit}"
                for sale in self.history
            )
        lines.append(f"Proceeds: {self.proceeds()}")
        return "\n".join(lines) + "\n"


def _parse_quantity(token: str) -> int | None:
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else None


def run(lines: Iterable[str], out: TextIO) -> Portfolio:
    """Carry out buy, sell, display and quit commands, one per line."""
    out.write(_INSTRUCTIONS)
    portfolio = Portfolio()
    for line in lines:
        out.write("> ")
        tokens = line.split()
        if not tokens:
            continue
        command = tokens[0]
        quantity = _parse_quantity(tokens[1]) if len(tokens) > 1 else None
        if quantity is None:
            quantity, price = 0, Dollars()
        else:
            price = Dollars.parse(tokens[2]) if len(tokens) > 2 else Dollars()

        if command == "buy":
            portfolio.buy(quantity, price)
        elif command == "sell":
            try:
                portfolio.sell(quantity, price)
            except StockError as error:
                out.write(str(error))
        elif command == "display":
            out.write(portfolio.report())
        elif command == "quit":
            break
    return portfolio


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive stock buy and sell session on standard input."""
    parser = argparse.ArgumentParser(
        description="Buy and sell stocks with first-in, first-out accounting."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())