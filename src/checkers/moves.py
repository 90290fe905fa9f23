"""
Movement and capturing rules

Only two kinds of moves exist: a diagonal step onto a neighboring square, and a jump over an opponent's piece.
There are no kings, no chained jumps and no forced captures.
"""

from dataclasses import dataclass
from typing import Protocol

from src.checkers.cell import Cell
from src.checkers.square import Square
from src.core.shared_types import Color

STEP_DISTANCE = 1
JUMP_DISTANCE = 2


class Board(Protocol):
    """Just the parts the movement rules need"""

    def get(self, square: Square) -> Cell: ...
    def set(self, square: Square, cell: Cell) -> None: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @property
    def row_diff(self) -> int:
        return abs(self.to_square.row - self.from_square.row)

    @property
    def col_diff(self) -> int:
        return abs(self.to_square.col - self.from_square.col)

    @property
    def is_step(self) -> bool:
        return self.row_diff == STEP_DISTANCE and self.col_diff == STEP_DISTANCE

    @property
    def is_jump(self) -> bool:
        return self.row_diff == JUMP_DISTANCE and self.col_diff == JUMP_DISTANCE

    @property
    def midpoint(self) -> Square:
        """Square being jumped over. Only meaningful for jumps."""
        return Square(
            (self.from_square.row + self.to_square.row) // 2,
            (self.from_square.col + self.to_square.col) // 2,
        )


def is_legal(board: Board, turn: Color, move: Move) -> bool:
    """
    Decide if a move is allowed for the player on turn.
    ----

    1. destination must be on the board
    2. destination must be a dark square
    3. destination must be empty
    4. a diagonal step (in any direction) is fine
    5. a jump is fine if it goes over a piece of the opponent

    NOTE: does not check who owns the piece on the starting square. Whoever selects the piece does that.
    """
    destination = move.to_square
    if not destination.is_within_bounds() or not destination.is_dark():
        return False

    if not board.get(destination).is_empty():
        return False

    if move.is_step:
        return True

    # a start square off the board can put the jumped square off the board too
    if move.is_jump and move.midpoint.is_within_bounds():
        jumped = board.get(move.midpoint)
        return not jumped.is_empty() and jumped.color != turn

    return False


def apply_move(board: Board, move: Move) -> Board:
    """Update the board. The move must already have passed is_legal (no checks are repeated here)."""
    if move.is_jump:
        board.set(move.midpoint, Cell.empty())

    piece_that_moved = board.get(move.from_square)
    board.set(move.to_square, piece_that_moved)
    board.set(move.from_square, Cell.empty())
    return board
