"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    OVER = "over"


# --- NOTE: Color.NONE marks an empty cell. The players are RED and GREEN only.
class Color(StrEnum):
    NONE = ""
    RED = "red"
    GREEN = "green"


PLAYER_COLORS: tuple[Color, Color] = (Color.RED, Color.GREEN)


def opponent(color: Color) -> Color:
    return Color.GREEN if color == Color.RED else Color.RED
