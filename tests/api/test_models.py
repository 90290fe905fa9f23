from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import CellModel, ClickRequest, MoveRequest, SquareModel
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - MoveRequest --
def test_valid_move_request(mock_id: UUID) -> None:
    request = MoveRequest(
        game_id=mock_id,
        from_square={"row": 5, "col": 0},
        to_square={"row": 4, "col": 1},
    )
    assert request.from_square == SquareModel(row=5, col=0)
    assert request.to_square == SquareModel(row=4, col=1)


def test_out_of_range_squares_are_left_to_the_game(mock_id: UUID) -> None:
    """Range checks belong to the board (OutOfBoundsError), the request only checks the shape."""
    request = MoveRequest(
        game_id=mock_id,
        from_square={"row": 8, "col": -1},
        to_square={"row": 9, "col": 0},
    )
    assert request.from_square.row == 8


def test_move_onto_own_square(mock_id: UUID) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(
            game_id=mock_id,
            from_square={"row": 5, "col": 0},
            to_square={"row": 5, "col": 0},
        )


@pytest.mark.parametrize(
    "square",
    [
        {"row": "a", "col": 1},  # not a number
        {"row": 1},  # missing column
        "e2",  # chess notation
    ],
)
def test_invalid_square(mock_id: UUID, square: object) -> None:
    with pytest.raises(ValidationError):
        _ = ClickRequest(game_id=mock_id, square=square)


def test_invalid_game_id() -> None:
    with pytest.raises(ValidationError):
        _ = ClickRequest(game_id="not-a-uuid", square={"row": 1, "col": 0})


# -- CellModel --
def test_cell_model_colors() -> None:
    assert CellModel(color="red").color == Color.RED
    assert CellModel(color="").color == Color.NONE
    with pytest.raises(ValidationError):
        _ = CellModel(color="blue")
