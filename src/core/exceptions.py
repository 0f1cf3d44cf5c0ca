"""Custom exceptions raised by the domain and service layers"""

from src.core.shared_types import MoveError


class ChessError(Exception):
    """Base class for all errors the caller is expected to handle"""


class IllegalMoveError(ChessError):
    """The move was rejected. The game is left exactly as it was before the attempt."""

    def __init__(self, reason: MoveError, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or f"Move not allowed: {reason}")


class GameOverError(IllegalMoveError):
    """Any move submitted after the game has finished"""

    def __init__(self, message: str = "") -> None:
        super().__init__(MoveError.GAME_OVER, message or "Game is over.")


class InvalidFENError(ChessError):
    pass


class InvalidRequestError(ChessError):
    pass


class GameNotFoundError(ChessError):
    pass
