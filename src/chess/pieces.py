"""Defines the types of chess pieces"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceKind(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Side(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> Side:
        return Side.BLACK if self == Side.WHITE else Side.WHITE

    @property
    def forward(self) -> int:
        """White moves UP the board, black moves DOWN"""
        return 1 if self == Side.WHITE else -1

    @property
    def pawn_rank(self) -> int:
        """Rank the pawns of this side start on"""
        return 1 if self == Side.WHITE else 6


FEN_TO_PIECE: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "r": PieceKind.ROOK,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

PIECE_TO_FEN: dict[PieceKind, str] = {value: key for key, value in FEN_TO_PIECE.items()}


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    side: Side

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        side = Side.WHITE if character.isupper() else Side.BLACK
        kind = FEN_TO_PIECE[character.lower()]
        return cls(kind, side)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.kind].upper()
            if self.side == Side.WHITE
            else PIECE_TO_FEN[self.kind]
        )
