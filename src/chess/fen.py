"""
Board import: the subset of FEN the engine understands.
"""

from dataclasses import dataclass, field
from typing import Self

from src.chess.pieces import FEN_TO_PIECE, Side
from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidFENError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
STARTING_POSITION = STARTING_FEN.split(" ")[0]

# placement + side to move are required. castling rights, en passant square and both move counters may follow
MIN_FEN_FIELDS = 2
MAX_FEN_FIELDS = 6


def is_valid_fen(fen: str) -> bool:
    """
    Check if given string follows (our subset of) FEN notation.
    """
    parts = fen.split()
    if not (MIN_FEN_FIELDS <= len(parts) <= MAX_FEN_FIELDS):
        return False

    position, color = parts[0], parts[1]
    return is_valid_position(position) and is_valid_color_code(color)


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character.isdigit():
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_files:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in {"w", "b"}


def side_to_fen(side: Side) -> str:
    return "w" if side == Side.WHITE else "b"


@dataclass
class FENState:
    """
    Data that can be constructed from a FEN string.
    ----

    <board position string> <active color> [<castling rights> <en passant square> <# half move clock> <number turns played>]

    * The string to describe the board position is parsed by the Board class
    * The active color is either "w" or "b"
    * The remaining fields are kept verbatim. Castling, en passant and the move counters are not part of the rules engine.
    """

    position: str
    side_to_move: Side
    uninterpreted: list[str] = field(default_factory=list)

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data"""

        # raise an exception if invalid FEN:
        if not is_valid_fen(fen):
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen}")

        position, active_color, *uninterpreted = fen.split()
        side_to_move = Side.WHITE if active_color == "w" else Side.BLACK
        return cls(position, side_to_move, uninterpreted)

    def to_fen(self) -> str:
        """reverse operation: write a FEN from the given data"""
        return " ".join(
            [self.position, side_to_fen(self.side_to_move), *self.uninterpreted]
        )

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)
