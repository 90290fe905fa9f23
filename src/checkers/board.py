"""The Game board: an 8x8 grid of cells plus the invariants on where pieces may stand."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Self

from src.checkers.cell import Cell
from src.checkers.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import InvalidBoardError, OutOfBoundsError
from src.core.shared_types import PLAYER_COLORS, Color

# Green starts on the top rows, Red on the bottom rows. Rows 3 and 4 start empty.
GREEN_START_ROWS = range(0, 3)
RED_START_ROWS = range(5, 8)


@dataclass
class Board:
    grid: list[list[Cell]]

    @classmethod
    def initialize(cls) -> Self:
        """Seeded starting position. Returns a fresh board on every call."""
        grid: list[list[Cell]] = []
        for row in range(BOARD_DIMENSIONS[0]):
            grid_row: list[Cell] = []
            for col in range(BOARD_DIMENSIONS[1]):
                color = Color.NONE
                if Square(row, col).is_dark():
                    if row in GREEN_START_ROWS:
                        color = Color.GREEN
                    if row in RED_START_ROWS:
                        color = Color.RED
                grid_row.append(Cell(color))
            grid.append(grid_row)
        return cls(grid)

    @classmethod
    def empty(cls) -> Self:
        return cls(
            [
                [Cell.empty() for _ in range(BOARD_DIMENSIONS[1])]
                for _ in range(BOARD_DIMENSIONS[0])
            ]
        )

    @classmethod
    def from_rows(cls, rows: list[str]) -> Self:
        """Construct a board from its text notation.

        One string per row (top row first), one character per cell:
        ex. the starting position reads
        .g.g.g.g
        g.g.g.g.
        .g.g.g.g
        ........
        ........
        r.r.r.r.
        .r.r.r.r
        r.r.r.r.
        """
        if len(rows) != BOARD_DIMENSIONS[0]:
            raise InvalidBoardError(
                f"Board needs {BOARD_DIMENSIONS[0]} rows, got {len(rows)}."
            )
        grid: list[list[Cell]] = []
        for row, text in enumerate(rows):
            if len(text) != BOARD_DIMENSIONS[1]:
                raise InvalidBoardError(
                    f"Row {row} needs {BOARD_DIMENSIONS[1]} cells, got {text!r}."
                )
            grid_row = [Cell.from_char(character) for character in text]
            for col, cell in enumerate(grid_row):
                if not cell.is_empty() and not Square(row, col).is_dark():
                    raise InvalidBoardError(
                        f"Pieces can only stand on dark squares. Found one on ({row}, {col})."
                    )
            grid.append(grid_row)
        return cls(grid)

    def to_rows(self) -> list[str]:
        return ["".join(cell.to_char() for cell in grid_row) for grid_row in self.grid]

    def get(self, square: Square) -> Cell:
        self._assert_within_bounds(square)
        return self.grid[square.row][square.col]

    def set(self, square: Square, cell: Cell) -> None:
        self._assert_within_bounds(square)
        self.grid[square.row][square.col] = cell

    def snapshot(self) -> list[list[Cell]]:
        """Read-only copy for whoever draws the board"""
        return deepcopy(self.grid)

    def locate_color(self, color: Color) -> list[Square]:
        return [square for square in all_squares() if self.get(square).color == color]

    def count_pieces(self) -> dict[Color, int]:
        """Full board scan, tallied per player"""
        return {color: len(self.locate_color(color)) for color in PLAYER_COLORS}

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise OutOfBoundsError(
                f"Square ({square.row}, {square.col}) is not on the board."
            )
