"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement shape for each piece type.

Whether a move leaves your own king in check is decided later by Game
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import Piece, PieceKind, Side
from src.chess.square import Square
from src.core.shared_types import MoveError


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made. Piece type and capture are derived from the board, not stored."""

    start: Square
    end: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface:
        ---
        One of the standard chess notations for moves

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "g1f3": the knight jumps from g1 to f3
        """
        return cls(Square.from_algebraic(uci[:2]), Square.from_algebraic(uci[2:4]))

    def to_uci(self) -> str:
        return f"{self.start.to_algebraic()}{self.end.to_algebraic()}"

    @property
    def delta(self) -> Vector:
        return self.end.file - self.start.file, self.end.rank - self.start.rank


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(start: Square, end: Square) -> list[Square]:
    """
    Squares strictly between start and end, walking along the unit step (sign of delta file, sign of delta rank).

    Only meaningful for squares on a shared rank, file or diagonal.
    """
    df, dr = end.file - start.file, end.rank - start.rank
    if not (df == 0 or dr == 0 or abs(df) == abs(dr)):
        raise ValueError(
            f"squares_between requires both squares to share a line. \n start: {start}\n end:{end}"
        )
    step_file, step_rank = _sign(df), _sign(dr)
    squares_found: list[Square] = []
    square = start.offset(step_file, step_rank)
    while square != end:
        squares_found.append(square)
        square = square.offset(step_file, step_rank)
    return squares_found


def is_path_clear(board: Board, start: Square, end: Square) -> bool:
    return all(board.is_empty(square) for square in squares_between(start, end))


# --- SHAPE RULES ---
# Each rule receives the move, the moving side, whether the move captures, and the board (read only)
ShapeRuleFn = Callable[[Move, Side, bool, Board], Optional[MoveError]]


def pawn_shape(
    move: Move, side: Side, is_capture: bool, board: Board
) -> Optional[MoveError]:
    """
    A pawn:
    - moves by a single square forward.
    - It can move by two in their first move (so when on their starting rank), provided the square it passes is empty
    - takes diagonally, a single square forward
    """
    df, dr = move.delta
    forward = dr * side.forward

    if is_capture:
        if abs(df) != 1 or forward != 1:
            return MoveError.MOVEMENT
        return None

    if df != 0:
        return MoveError.MOVEMENT
    if forward == 1:
        return None
    if forward == 2 and move.start.rank == side.pawn_rank:
        if not is_path_clear(board, move.start, move.end):
            return MoveError.BLOCKED_PATH
        return None
    return MoveError.MOVEMENT


def knight_shape(
    move: Move, side: Side, is_capture: bool, board: Board
) -> Optional[MoveError]:
    """Knights always jump such that {|delta_rank|, |delta_file|} = {1, 2}"""
    df, dr = move.delta
    if {abs(df), abs(dr)} != {1, 2}:
        return MoveError.MOVEMENT
    return None


def _is_diagonal(move: Move) -> bool:
    df, dr = move.delta
    return abs(df) == abs(dr)


def _is_straight(move: Move) -> bool:
    df, dr = move.delta
    return (df == 0) != (dr == 0)


def _sliding(move: Move, board: Board) -> Optional[MoveError]:
    if not is_path_clear(board, move.start, move.end):
        return MoveError.BLOCKED_PATH
    return None


def bishop_shape(
    move: Move, side: Side, is_capture: bool, board: Board
) -> Optional[MoveError]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    if not _is_diagonal(move):
        return MoveError.MOVEMENT
    return _sliding(move, board)


def rook_shape(
    move: Move, side: Side, is_capture: bool, board: Board
) -> Optional[MoveError]:
    """Rooks move either horizontally or vertically"""
    if not _is_straight(move):
        return MoveError.MOVEMENT
    return _sliding(move, board)


def queen_shape(
    move: Move, side: Side, is_capture: bool, board: Board
) -> Optional[MoveError]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    if not (_is_diagonal(move) or _is_straight(move)):
        return MoveError.MOVEMENT
    return _sliding(move, board)


def king_shape(
    move: Move, side: Side, is_capture: bool, board: Board
) -> Optional[MoveError]:
    """The king can move by a single square at the time, in any direction."""
    df, dr = move.delta
    if max(abs(df), abs(dr)) != 1:
        return MoveError.MOVEMENT
    return None


# -- STRATEGY PATTERN: SHAPE RULES ---
SHAPE_RULES: dict[PieceKind, ShapeRuleFn] = {
    PieceKind.PAWN: pawn_shape,
    PieceKind.KNIGHT: knight_shape,
    PieceKind.BISHOP: bishop_shape,
    PieceKind.ROOK: rook_shape,
    PieceKind.QUEEN: queen_shape,
    PieceKind.KING: king_shape,
}


def validate_move(
    board: Board,
    side: Side,
    move: Move,
    moving_piece: Piece,
    target_piece: Optional[Piece],
    is_capture: bool,
) -> Optional[MoveError]:
    """
    Legality at the geometry/obstruction level only
    ----

    1. start and end must differ
    2. both squares on the board
    3. the shape rule of the moving piece (incl. the sliding path check)

    Returns the first rule violated, None when the move is fine.
    `target_piece` is the piece on the end square (if any); the capture flag is derived from it by the caller.
    """
    if move.start == move.end:
        return MoveError.MOVEMENT
    if not (move.start.is_within_bounds() and move.end.is_within_bounds()):
        return MoveError.OUTSIDE_BOARD

    shape_rule = SHAPE_RULES[moving_piece.kind]
    return shape_rule(move, side, is_capture, board)
