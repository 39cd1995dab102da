"""A five-round guessing game of Go Fish against a hand read from a file."""

from __future__ import annotations

import argparse
import copy
import sys
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, TextIO, Union

from linearstructs.ordered_set import OrderedSet

ROUNDS = 5


@dataclass(frozen=True)
class GoFishResult:
    """How many guesses matched and which cards were left in the hand."""

    matches: int
    remaining: List[str]


def load_hand(path: Union[str, Path]) -> OrderedSet[str]:
    """Read the whitespace-separated card names in a file into a hand."""
    with open(path, encoding="utf-8") as handle:
        return OrderedSet(handle.read().split())


def play(hand: OrderedSet[str], guesses: Iterable[str], out: TextIO) -> GoFishResult:
    """Play up to five rounds, removing each guessed card from a copy of the hand."""
    cards = copy.copy(hand)
    out.write(f"We will play {ROUNDS} rounds of Go Fish.  Guess the card in the hand\n")

    matches = 0
    for round_number, guess in enumerate(islice(guesses, ROUNDS), start=1):
        out.write(f"round {round_number}: ")
        if guess in cards:
            out.write("\tYou got a match!\n")
            cards.erase(guess)
            matches += 1
        else:
            out.write("\tGo Fish!\n")

    remaining = list(cards)
    out.write(f"You have {matches} matches!\nThe remaining cards: ")
    if remaining:
        out.write(", ".join(remaining) + "\n")
    return GoFishResult(matches, remaining)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Play Go Fish with guesses read from standard input."""
    parser = argparse.ArgumentParser(description="Guess the cards in a hand.")
    parser.add_argument(
        "hand",
        nargs="?",
        default="hand.txt",
        help="file holding the card names of the hand",
    )
    args = parser.parse_args(argv)
    try:
        hand = load_hand(args.hand)
    except OSError:
        return 1
    play(hand, _tokens(sys.stdin), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())