"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is always 8x8 (rows, cols)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_tuple(cls, coordinates: tuple[int, int]) -> Square:
        row, col = coordinates
        return cls(row, col)

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def is_dark(self) -> bool:
        """Only dark squares ever hold a piece."""
        return (self.row + self.col) % 2 == 1


def all_squares() -> list[Square]:
    """Row-major order, top-left first"""
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
