"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.checkers.board import Board
from src.checkers.game import Game
from src.core.shared_types import Color, Status
from src.db.memory_repository import InMemoryGameRepository

STARTING_ROWS = [
    ".g.g.g.g",
    "g.g.g.g.",
    ".g.g.g.g",
    "........",
    "........",
    "r.r.r.r.",
    ".r.r.r.r",
    "r.r.r.r.",
]


@pytest.fixture
def starting_rows() -> list[str]:
    return list(STARTING_ROWS)


@pytest.fixture
def game_from_rows() -> Callable[..., Game]:
    """Call the inner function with the board rows (and optionally whose turn it is)."""

    def _create_game(rows: list[str], turn: Color = Color.RED) -> Game:
        return Game(board=Board.from_rows(rows), turn=turn, status=Status.IN_PROGRESS)

    return _create_game


@pytest.fixture
def repository() -> Generator[InMemoryGameRepository, None, None]:
    """A fresh in-memory repository for every test"""
    repo = InMemoryGameRepository()
    yield repo
