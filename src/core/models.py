"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the storage, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
BoardRow = str
PieceColor = str
Coordinates = tuple[int, int]


@dataclass
class GameModel:
    """Transport-safe representation of a checkers game used between API, Service, storage, and Game layers.

    The board is written as 8 rows of 8 characters: 'r' (red), 'g' (green), '.' (empty).
    """

    board: list[BoardRow]
    turn: PieceColor
    status: str
    winner: Optional[PieceColor] = None
    selected: Optional[Coordinates] = None
