"""Unit tests for /src/chess/board.py"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Piece, PieceKind, Side
from src.chess.square import Square
from src.core.exceptions import InvalidFENError

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_FEN = "/".join(["8"] * 8)


def test_empty_board() -> None:
    board = Board()
    assert all(cell is None for cell in board.cells)
    assert len(board.cells) == 64
    assert board == Board.from_fen(EMPTY_FEN)
    assert board.to_fen() == EMPTY_FEN


def test_standard_layout_equals_parsed_starting_position() -> None:
    """The opening board must be the same as the one parsed from the standard FEN"""
    assert Board.standard() == Board.from_fen(STARTING_POSITION_FEN)


def test_standard_layout_back_rank() -> None:
    """Files are counted from the h-file: king on file 3, queen on file 4"""
    board = Board.standard()
    expected_back_rank = [
        PieceKind.ROOK,
        PieceKind.KNIGHT,
        PieceKind.BISHOP,
        PieceKind.KING,
        PieceKind.QUEEN,
        PieceKind.BISHOP,
        PieceKind.KNIGHT,
        PieceKind.ROOK,
    ]
    for file, kind in enumerate(expected_back_rank):
        assert board.piece(Square(file, 0)) == Piece(kind, Side.WHITE)
        assert board.piece(Square(file, 7)) == Piece(kind, Side.BLACK)
        assert board.piece(Square(file, 1)) == Piece(PieceKind.PAWN, Side.WHITE)
        assert board.piece(Square(file, 6)) == Piece(PieceKind.PAWN, Side.BLACK)
        for rank in range(2, 6):
            assert board.is_empty(Square(file, rank))


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION_FEN,
        EMPTY_FEN,
        "rnbqkbnr/ppppp2p/5p2/6pQ/3PP3/8/PPP2PPP/RNB1KBNR",
        "r3k2r/pppq1ppp/2npbn2/4p3/2B1P3/2NP1N2/PPP2PPP/R1BQ1RK1",
        "k7/8/1K6/8/8/8/8/2Q5",
    ],
)
def test_fen_roundtrip(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP",  # only 7 ranks
        "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR",  # 9 files
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX",  # unknown piece
    ],
)
def test_invalid_placement(fen: str) -> None:
    with pytest.raises(InvalidFENError):
        Board.from_fen(fen)


def test_move_piece(board_with_pieces: Callable[[dict[str, str]], Board]) -> None:
    board = board_with_pieces({"d1": "Q", "h5": "p"})
    board.move_piece(Square.from_algebraic("d1"), Square.from_algebraic("h5"))
    assert board.is_empty(Square.from_algebraic("d1"))
    assert board.piece(Square.from_algebraic("h5")) == Piece(PieceKind.QUEEN, Side.WHITE)


def test_place_and_remove_piece() -> None:
    board = Board()
    square = Square(2, 5)
    board.place_piece(Piece.from_fen("n"), square)
    assert board.piece(square) == Piece(PieceKind.KNIGHT, Side.BLACK)
    assert board.remove_piece(square) == Piece(PieceKind.KNIGHT, Side.BLACK)
    assert board.is_empty(square)


def test_copy_is_independent() -> None:
    """Changing a scratch copy never shows up on the original board"""
    board = Board.standard()
    scratch = board.copy()
    scratch.move_piece(Square(3, 1), Square(3, 3))
    assert board == Board.standard()
    assert scratch != board


def test_locate_side() -> None:
    board = Board.standard()
    white_squares = board.locate_side(Side.WHITE)
    assert len(white_squares) == 16
    assert all(square.rank in (0, 1) for square in white_squares)


def test_locate_king(board_with_pieces: Callable[[dict[str, str]], Board]) -> None:
    board = board_with_pieces({"e1": "K", "c6": "k"})
    assert board.locate_king(Side.WHITE) == Square(3, 0)
    assert board.locate_king(Side.BLACK) == Square.from_algebraic("c6")


def test_missing_king_fails_fast(board_with_pieces: Callable[[dict[str, str]], Board]) -> None:
    """A board without a king breaks an invariant. Not a typed (caller) error."""
    board = board_with_pieces({"e1": "K"})
    with pytest.raises(ValueError):
        board.locate_king(Side.BLACK)
