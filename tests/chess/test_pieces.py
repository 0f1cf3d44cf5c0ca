"""Unit tests for /src/chess/pieces.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.chess.pieces import FEN_TO_PIECE, PIECE_TO_FEN, Piece, PieceKind, Side


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.kind == FEN_TO_PIECE[char.lower()]
    assert piece.side == Side.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.kind == FEN_TO_PIECE[char]
    assert piece.side == Side.BLACK


@pytest.mark.parametrize("kind", list(PieceKind))
def test_pieces_to_fen(kind: PieceKind) -> None:
    assert Piece(kind, Side.WHITE).to_fen() == PIECE_TO_FEN[kind].upper()
    assert Piece(kind, Side.BLACK).to_fen() == PIECE_TO_FEN[kind].lower()


def test_piece_is_an_immutable_value() -> None:
    """Pieces are shared freely between board copies, so they must not change"""
    piece = Piece(PieceKind.PAWN, Side.WHITE)
    with pytest.raises(FrozenInstanceError):
        piece.kind = PieceKind.QUEEN  # type: ignore[misc]
    assert piece == Piece.from_fen("P")


def test_side_helpers() -> None:
    assert Side.WHITE.opponent == Side.BLACK
    assert Side.BLACK.opponent == Side.WHITE
    assert Side.WHITE.forward == 1
    assert Side.BLACK.forward == -1
    assert Side.WHITE.pawn_rank == 1
    assert Side.BLACK.pawn_rank == 6
