"""Orchestration of communication from API router to business logic and storage layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CellModel,
    ClickRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    ResetGameRequest,
    SquareModel,
)
from src.checkers.game import Game
from src.checkers.square import Square
from src.core.exceptions import IllegalMoveError, NotYourPieceError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for checkers game.

    Also plays the part of the user input handler: it makes sure only the pieces of the player on turn get moved.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Set up a fresh board, Red to move."""
        new_game = Game.new_game()
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to redraw the board.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Move the piece on from_square to to_square (the selection is skipped)."""

        # Retrieve stored GameModel from repository
        game = Game.from_model(self._fetch_game(request.game_id))

        from_square = _to_square(request.from_square)
        to_square = _to_square(request.to_square)

        # Only the player on turn may move, and only with their own pieces
        if not game.is_over and game.board.get(from_square).color != game.turn:
            raise NotYourPieceError(
                f"No {game.turn} piece on ({from_square.row}, {from_square.col})."
            )

        self._attempt(game, request.game_id, from_square, to_square)
        return self._store_and_respond(request.game_id, game)

    def click(self, request: ClickRequest) -> GameResponse:
        """One click on the board: either selects a piece or moves the selected one there."""

        game = Game.from_model(self._fetch_game(request.game_id))
        square = _to_square(request.square)

        try:
            game.click(square)
        except IllegalMoveError:
            # the selection stays as it was, so nothing needs storing
            logger.debug(
                "Rejected click in game %s on %s", request.game_id, square.to_tuple()
            )
            raise

        self._log_if_over(request.game_id, game)
        return self._store_and_respond(request.game_id, game)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Start over on the same game ID."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.reset()
        logger.info("Reset game %s", request.game_id)
        return self._store_and_respond(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _attempt(
        self, game: Game, game_id: UUID, from_square: Square, to_square: Square
    ) -> None:
        """Run the move on the Game. A rejected move is logged and re-raised, nothing gets stored."""
        try:
            game.attempt_move(from_square, to_square)
        except IllegalMoveError:
            logger.debug(
                "Rejected move in game %s: %s -> %s",
                game_id,
                from_square.to_tuple(),
                to_square.to_tuple(),
            )
            raise

        self._log_if_over(game_id, game)

    def _log_if_over(self, game_id: UUID, game: Game) -> None:
        if game.is_over:
            logger.info("Game %s is over. %s wins", game_id, game.winner)

    def _store_and_respond(self, game_id: UUID, game: Game) -> GameResponse:
        updated = game.to_model()
        self.repo.update_game(game_id, updated)
        return self._create_game_response(game_id, updated)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        return GameResponse(
            game_id=game_id,
            board=[
                [CellModel(color=cell.color, king=cell.king) for cell in row]
                for row in game.board.snapshot()
            ],
            turn=game.turn,
            status=game.status,
            winner=game.winner,
            selected=SquareModel(row=game.selected.row, col=game.selected.col)
            if game.selected
            else None,
            piece_counts={
                color.value: count for color, count in game.piece_counts().items()
            },
            message=status_message(game.turn, game.status, game.winner),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model


def status_message(turn: Color, status: Status, winner: Color | None) -> str:
    """Status line shown above the board, ex. "Red's Turn" or "Green wins!" """
    if status == Status.OVER and winner is not None:
        return f"{winner.value.capitalize()} wins!"
    return f"{turn.value.capitalize()}'s Turn"


def _to_square(square: SquareModel) -> Square:
    return Square(square.row, square.col)
