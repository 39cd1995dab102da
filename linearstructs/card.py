"""Playing cards for the children's version of Go Fish."""

from __future__ import annotations

from dataclasses import dataclass

CARD_NAMES = (
    "-INVALID-",
    "AngleFish",
    "Cod",
    "Crab",
    "Dolphin",
    "SeaHorse",
    "Shark",
)

INVALID = 0
INDEX_FIRST = 1
INDEX_LAST = len(CARD_NAMES) - 1


@dataclass(frozen=True, order=True)
class Card:
    """A Go Fish card, compared by its position in the card list."""

    value: int = INVALID

    def __post_init__(self) -> None:
        if not (self.value == INVALID or INDEX_FIRST <= self.value <= INDEX_LAST):
            raise ValueError(f"invalid card value: {self.value}")

    @classmethod
    def from_name(cls, name: str) -> "Card":
        """Return the card with this exact name, or an invalid card."""
        for value in range(INDEX_FIRST, INDEX_LAST + 1):
            if CARD_NAMES[value] == name:
                return cls(value)
        return cls(INVALID)

    def is_invalid(self) -> bool:
        """Tell whether the card names none of the real cards."""
        return self.value == INVALID

    def __str__(self) -> str:
        return CARD_NAMES[self.value]