"""Unit tests for src/chess/fen.py"""

import pytest

from src.chess.fen import (
    STARTING_FEN,
    STARTING_POSITION,
    FENState,
    InvalidFENError,
    is_valid_color_code,
    is_valid_fen,
    is_valid_position,
    side_to_fen,
)
from src.chess.pieces import Side


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_FEN,
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w",
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq",
        "rnbqkbnr/ppppp2p/5p2/6pQ/3PP3/8/PPP2PPP/RNB1KBNR b KQkq - 1 3",
    ],
)
def test_valid_fen(fen: str) -> None:
    """Placement and side to move are required, the other fields are optional"""
    assert is_valid_fen(fen)


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",  # no side to move
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",  # unknown side
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 extra",  # too many fields
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPP/RNBQKBNR w KQkq - 0 1",  # 7 files on rank 2
        "",
    ],
)
def test_invalid_fen(fen: str) -> None:
    assert not is_valid_fen(fen)
    with pytest.raises(InvalidFENError):
        FENState.from_fen(fen)


def test_valid_position() -> None:
    assert is_valid_position(STARTING_POSITION)
    assert not is_valid_position("8/8/8/8/8/8/8/7")
    assert not is_valid_position("8/8/8/8/8/8/8/8/8")


def test_color_codes() -> None:
    assert is_valid_color_code("w")
    assert is_valid_color_code("b")
    assert not is_valid_color_code("W")
    assert side_to_fen(Side.WHITE) == "w"
    assert side_to_fen(Side.BLACK) == "b"


def test_parse_starting_fen() -> None:
    state = FENState.starting_position()
    assert state.position == STARTING_POSITION
    assert state.side_to_move == Side.WHITE
    assert state.uninterpreted == ["KQkq", "-", "0", "1"]


def test_parse_black_to_move() -> None:
    state = FENState.from_fen("8/8/8/8/8/8/8/8 b")
    assert state.side_to_move == Side.BLACK
    assert state.uninterpreted == []


@pytest.mark.parametrize(
    "fen", [STARTING_FEN, "8/8/8/8/8/8/8/8 b", "k7/8/1K6/8/8/8/8/2Q5 w - - 12 40"]
)
def test_fen_state_roundtrip(fen: str) -> None:
    assert FENState.from_fen(fen).to_fen() == fen
