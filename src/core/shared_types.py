"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW_FIFTY_MOVE_RULE = "draw by 50 half-moves"


class Outcome(StrEnum):
    """Only produced when a move ends the game"""

    WIN_WHITE = "white wins"
    WIN_BLACK = "black wins"
    TIE = "tie"


class MoveClassification(StrEnum):
    """Recorded for every committed move. The draw rule only needs to know if a move was reversible."""

    CAPTURE_OR_PAWN = "capture or pawn"
    OTHER = "other"


class MoveError(StrEnum):
    """Reasons a move gets rejected"""

    OUTSIDE_BOARD = "outside board"
    NO_PIECE = "no piece"
    WRONG_COLOR_PIECE = "wrong color piece"
    FRIENDLY_FIRE = "friendly fire"
    MOVEMENT = "movement"
    BLOCKED_PATH = "blocked path"
    SELF_CHECK = "self check"
    GAME_OVER = "game over"
