"""Custom exceptions. Every layer raises a subclass of GameError so the API can catch them in one place."""


class GameError(Exception):
    """Base class for all errors raised by this backend."""


class OutOfBoundsError(GameError):
    """A coordinate outside the 8x8 board was supplied."""


class IllegalMoveError(GameError):
    """The requested move is not allowed in the current position."""


class GameAlreadyOverError(GameError):
    """A move was attempted after a winner was determined."""


class GameStateError(GameError):
    """The game (or its transport model) is in a state that does not allow the request."""


class InvalidBoardError(GameError):
    """A board description could not be parsed, or it breaks the board invariants."""


class NotYourPieceError(GameError):
    """The piece on the starting square does not belong to the player on turn."""


class InvalidRequestError(GameError):
    """Request data is structurally invalid."""


class RepositoryError(GameError):
    """Game record could not be found / stored."""
