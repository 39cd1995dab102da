"""An amount of money held as a whole number of cents."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Union

_DIGITS = frozenset(string.digits)


@dataclass(frozen=True, order=True)
class Dollars:
    """Money stored as integer cents.

    Displayed with a leading "$", exactly two decimal places, and
    parentheses rather than a minus sign for negative amounts.
    """

    cents: int = 0

    @classmethod
    def parse(cls, text: str) -> "Dollars":
        """Read an amount such as "$1.34", "-1.2", "$(4.211)" or "-6".

        Leading whitespace and "$" signs are skipped, "-" or "(" marks a
        negative value, at most two decimal places are used and a trailing
        ")" is allowed. Text that holds no digits reads as zero.
        """
        pos, end = 0, len(text)
        while pos < end and (text[pos].isspace() or text[pos] == "$"):
            pos += 1

        negative = False
        while pos < end and text[pos] in "-(":
            negative = True
            pos += 1

        whole = 0
        while pos < end and text[pos] in _DIGITS:
            whole = whole * 10 + int(text[pos])
            pos += 1
        cents = whole * 100

        if pos < end and text[pos] == ".":
            pos += 1
            for weight in (10, 1):
                if pos < end and text[pos] in _DIGITS:
                    cents += int(text[pos]) * weight
                    pos += 1
                else:
                    break

        return cls(-cents if negative else cents)

    @classmethod
    def from_amount(cls, dollars: Union[int, float]) -> "Dollars":
        """Convert a dollar amount, truncating anything below a cent."""
        return cls(int(float(dollars) * 100.0))

    def __str__(self) -> str:
        magnitude = abs(self.cents)
        body = f"{magnitude // 100}.{magnitude % 100:02d}"
        return f"$({body})" if self.cents < 0 else f"${body}"

    def __add__(self, other: "Dollars") -> "Dollars":
        if not isinstance(other, Dollars):
            return NotImplemented
        return Dollars(self.cents + other.cents)

    def __sub__(self, other: "Dollars") -> "Dollars":
        if not isinstance(other, Dollars):
            return NotImplemented
        return Dollars(self.cents - other.cents)

    def __mul__(self, factor: Union[int, float]) -> "Dollars":
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        if isinstance(factor, int):
            return Dollars(self.cents * factor)
        return Dollars(int(self.cents * factor))

    __rmul__ = __mul__