"""Defines the content of a single cell: empty, or a red / green piece"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Color

CHAR_TO_COLOR: dict[str, Color] = {
    ".": Color.NONE,
    "r": Color.RED,
    "g": Color.GREEN,
}

COLOR_TO_CHAR: dict[Color, str] = {value: key for key, value in CHAR_TO_COLOR.items()}


@dataclass
class Cell:
    color: Color
    # NOTE: no promotion rules exist, so this is always False. Kept so the cell data keeps its full shape.
    king: bool = False

    @classmethod
    def empty(cls) -> Self:
        return cls(Color.NONE)

    @classmethod
    def from_char(cls, character: str) -> Self:
        if character not in CHAR_TO_COLOR:
            raise InvalidBoardError(
                f"Unknown cell character {character!r}. Use one of {''.join(CHAR_TO_COLOR)}"
            )
        return cls(CHAR_TO_COLOR[character])

    def to_char(self) -> str:
        return COLOR_TO_CHAR[self.color]

    def is_empty(self) -> bool:
        return self.color == Color.NONE
