"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ValidationInfo, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Status

PieceColor = str


# --- SHARED ---
class SquareModel(BaseModel):
    """Coordinates only. Whether the square is actually on the board is decided by the game rules."""

    row: int
    col: int


class CellModel(BaseModel):
    color: Color
    king: bool = False


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareModel
    to_square: SquareModel

    @field_validator("to_square")
    @classmethod
    def validate_not_same_square(
        cls, value: SquareModel, info: ValidationInfo
    ) -> SquareModel:
        from_square = info.data.get("from_square")
        if from_square is not None and from_square == value:
            raise InvalidRequestError(
                f"Cannot move a piece onto its own square: ({value.row}, {value.col})."
            )
        return value


class ClickRequest(BaseModel):
    game_id: UUID
    square: SquareModel


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    """Snapshot of the game, everything a frontend needs to draw the board and the status line."""

    game_id: UUID
    board: list[list[CellModel]]
    turn: Color
    status: Status
    winner: Optional[Color]
    selected: Optional[SquareModel]
    piece_counts: dict[PieceColor, int]
    message: str
