"""The Game board: the configuration of pieces on the board. Pure data, the rules live in moves.py / check.py / game.py"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Self

from src.chess.fen import STARTING_POSITION, is_valid_position
from src.chess.pieces import Piece, PieceKind, Side
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import InvalidFENError

NUM_CELLS = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


def _empty_cells() -> list[Optional[Piece]]:
    return [None] * NUM_CELLS


@dataclass
class Board:
    """
    Flat list of 64 cells, indexed by rank * 8 + file. Each cell is either empty (None) or holds one Piece.

    Pieces are immutable values, so copying the list is enough to get an independent scratch board.
    """

    cells: list[Optional[Piece]] = field(default_factory=_empty_cells)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (rank index 7)
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.

        NOTE: Every FEN rank reads a-file to h-file, which is file 7 down to file 0 (see Square).
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(f"Cannot interpret piece placement: {fen_str!r}")

        board = cls()
        for rank_idx, fen_one_rank in enumerate(fen_str.split("/")):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - 1 - rank_idx
            file = BOARD_DIMENSIONS[0] - 1
            for character in fen_one_rank:
                if character.isalpha():
                    board.place_piece(Piece.from_fen(character), Square(file, rank))
                    file -= 1
                else:
                    # A number denotes the amount of empty squares after each other
                    file -= int(character)
        return board

    @classmethod
    def standard(cls) -> Self:
        """The opening layout"""
        return cls.from_fen(STARTING_POSITION)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(BOARD_DIMENSIONS[0] - 1, -1, -1):
            piece = self.piece(Square(file, rank))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.cells[square.index]

    def is_empty(self, square: Square) -> bool:
        return self.cells[square.index] is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.cells[square.index] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        piece = self.cells[square.index]
        self.cells[square.index] = None
        return piece

    def move_piece(self, start: Square, end: Square) -> None:
        """Clear the start square and place whatever stood there on the end square (overwriting a captured piece)"""
        piece_that_moved = self.remove_piece(start)
        self.cells[end.index] = piece_that_moved

    def copy(self) -> Board:
        return Board(list(self.cells))

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        for square in all_squares():
            piece = self.piece(square)
            if piece is not None:
                yield square, piece

    def locate_side(self, side: Side) -> list[Square]:
        return [square for square, piece in self.occupied() if piece.side == side]

    def locate_king(self, side: Side) -> Square:
        """
        Exactly one king per side is a board invariant.
        A missing king means the move application logic is broken, not that the caller made a mistake --> fail fast.
        """
        king = Piece(PieceKind.KING, side)
        for square, piece in self.occupied():
            if piece == king:
                return square
        raise ValueError(f"No {side.name.lower()} king on the board: {self.to_fen()}")
