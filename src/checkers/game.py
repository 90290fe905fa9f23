"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns the board, whose turn it is, the selected piece and the game status.
After every move it checks for the end condition, and passes this information on as a GameModel.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.moves import Move, apply_move, is_legal
from src.checkers.square import Square
from src.core.exceptions import (
    GameAlreadyOverError,
    GameStateError,
    IllegalMoveError,
    InvalidBoardError,
    OutOfBoundsError,
)
from src.core.models import GameModel
from src.core.shared_types import PLAYER_COLORS, Color, Status, opponent

STARTING_TURN = Color.RED


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Color
    status: Status
    winner: Optional[Color] = None
    selected: Optional[Square] = None

    @classmethod
    def new_game(cls) -> Self:
        return cls(
            board=Board.initialize(),
            turn=STARTING_TURN,
            status=Status.IN_PROGRESS,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        if model.turn not in {color.value for color in PLAYER_COLORS}:
            raise GameStateError(f"Invalid color to move: {model.turn!r}")
        if model.winner is not None and model.winner not in {
            color.value for color in PLAYER_COLORS
        }:
            raise GameStateError(f"Invalid winner: {model.winner!r}")

        try:
            board = Board.from_rows(model.board)
        except InvalidBoardError as e:
            raise GameStateError(f"Invalid board in game model: {e}") from e

        # create the Game
        return cls(
            board=board,
            turn=Color(model.turn),
            status=Status(model.status),
            winner=Color(model.winner) if model.winner else None,
            selected=Square.from_tuple(model.selected) if model.selected else None,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_rows(),
            turn=self.turn.value,
            status=self.status.value,
            winner=self.winner.value if self.winner else None,
            selected=self.selected.to_tuple() if self.selected else None,
        )

    @property
    def is_over(self) -> bool:
        return self.status == Status.OVER

    def piece_counts(self) -> dict[Color, int]:
        return self.board.count_pieces()

    def attempt_move(self, from_square: Square, to_square: Square) -> None:
        """
        Attempt to make a move
        -----

        1. refuse if a winner is already known
        2. check the move against the movement rules (nothing changes if it is illegal)
        3. update the board
        4. update game status / hand the turn to the opponent
        """
        if self.is_over:
            raise GameAlreadyOverError(
                f"Game is over. {self.winner} already won. Reset to play again."
            )

        if not from_square.is_within_bounds():
            raise OutOfBoundsError(
                f"Square ({from_square.row}, {from_square.col}) is not on the board."
            )

        move = Move(from_square, to_square)
        if not is_legal(self.board, self.turn, move):
            raise IllegalMoveError(
                f"Move not allowed: ({from_square.row}, {from_square.col}) -> ({to_square.row}, {to_square.col})"
            )

        apply_move(self.board, move)
        self.selected = None
        self._update_game_status()

    def select(self, square: Square) -> bool:
        """Pick up a piece. Only one of your own pieces, and only if nothing was picked up already."""
        if self.is_over or self.selected is not None:
            return False
        if self.board.get(square).color != self.turn:
            return False
        self.selected = square
        return True

    def click(self, square: Square) -> None:
        """
        A click on a square: with a piece selected this is the destination of a move, otherwise it tries to select.

        NOTE: an illegal destination keeps the selection, so the player can simply click another destination.
        """
        if self.selected is None:
            self.select(square)
            return
        self.attempt_move(self.selected, square)

    def reset(self) -> None:
        """Throw away the board and start over"""
        self.board = Board.initialize()
        self.turn = STARTING_TURN
        self.status = Status.IN_PROGRESS
        self.winner = None
        self.selected = None

    # -- PRIVATE HELPERS ---
    def _update_game_status(self) -> None:
        """Game is over when one of the players has no pieces left. The player still holding pieces wins."""
        counts = self.piece_counts()
        if any(count == 0 for count in counts.values()):
            self.status = Status.OVER
            self.winner = next(
                (color for color, count in counts.items() if count > 0), self.turn
            )
            return
        self.turn = opponent(self.turn)
