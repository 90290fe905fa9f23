"""Where games are kept between requests. The service only depends on this interface."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Game records by ID. Implementations hand out copies, so a record only changes through update_game."""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The stored record, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Keep a freshly set up game under a new ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the record after a move / reset. None if the ID is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop the record and return what was stored (None if there was nothing)."""
        ...
