"""Card and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    """Card colors."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"


SKIP = "Skip"
REVERSE = "Reverse"
DRAW_TWO = "Draw Two"

NUMBER_VALUES = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
ACTION_VALUES = (SKIP, REVERSE, DRAW_TWO)
CARD_VALUES = NUMBER_VALUES + ACTION_VALUES


@dataclass(frozen=True)
class Card:
    """A UNO card.

    color is one of the four Colors, value is "0"-"9", "Skip", "Reverse" or "Draw Two".
    Cards compare by (color, value); the deck holds duplicates.
    """

    color: Color
    value: str

    def __post_init__(self) -> None:
        if self.value not in CARD_VALUES:
            raise ValueError(f"Invalid card value: {self.value}")
        if not isinstance(self.color, Color):
            raise ValueError(f"Invalid card color: {self.color!r}")

    @property
    def is_action(self) -> bool:
        return self.value in ACTION_VALUES

    def __str__(self) -> str:
        return f"{self.color.value} {self.value}"
