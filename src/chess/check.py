"""
Attacking rules: is a king (or any square) in the line-of-sight of an enemy piece?

Ray casting from the attacked square outwards, instead of generating every enemy move.
"""

from typing import Optional, Protocol

from src.chess.pieces import Piece, PieceKind, Side
from src.chess.square import Square

Vector = tuple[int, int]


class Board(Protocol):
    """Just the parts the attack rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def locate_king(self, side: Side) -> Square: ...


STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (-1, 1), (1, -1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]

STRAIGHT_ATTACKERS = {PieceKind.ROOK, PieceKind.QUEEN}
DIAGONAL_ATTACKERS = {PieceKind.BISHOP, PieceKind.QUEEN}


def first_piece_on_ray(
    square: Square, board: Board, direction: Vector
) -> Optional[tuple[Piece, int]]:
    """
    Raycasting algorithm
    -----
    Step along the direction until we hit a piece or the edge of the board.

    Returns the piece found and its distance (in steps) from the square, or None if the ray is empty.
    """
    df, dr = direction
    target_square = square.offset(df, dr)
    distance = 1
    while target_square.is_within_bounds():
        piece_found = board.piece(target_square)
        if piece_found is not None:
            return piece_found, distance
        target_square = target_square.offset(df, dr)
        distance += 1
    return None


def threatens_along_ray(piece: Piece, distance: int, direction: Vector) -> bool:
    """
    Can the (enemy) piece found on the ray reach back along it?

    NOTE: Pawn moves are not symmetric. A white pawn takes UP the board, so it attacks a king that sits
    one rank ABOVE it --> from the king, the pawn is found one step along a diagonal pointing DOWN the board.
    """
    _, dr = direction
    is_diagonal = direction in DIAGONALS

    if piece.kind in STRAIGHT_ATTACKERS and not is_diagonal:
        return True
    if piece.kind in DIAGONAL_ATTACKERS and is_diagonal:
        return True
    if piece.kind == PieceKind.KING:
        return distance == 1
    if piece.kind == PieceKind.PAWN:
        return distance == 1 and is_diagonal and dr == -piece.side.forward
    return False


def is_square_attacked(board: Board, square: Square, by_side: Side) -> bool:
    """Is the square in the line-of-sight of any piece of `by_side`?"""
    for direction in STRAIGHTS + DIAGONALS:
        found = first_piece_on_ray(square, board, direction)
        if found is None:
            continue
        piece, distance = found
        # a piece of the other color blocks the ray
        if piece.side != by_side:
            continue
        if threatens_along_ray(piece, distance, direction):
            return True

    enemy_knight = Piece(PieceKind.KNIGHT, by_side)
    for df, dr in KNIGHT_DELTAS:
        target_square = square.offset(df, dr)
        if (
            target_square.is_within_bounds()
            and board.piece(target_square) == enemy_knight
        ):
            return True
    return False


def is_in_check(board: Board, side: Side) -> bool:
    """Is the king of `side` attacked? Reads the board only."""
    king_square = board.locate_king(side)
    return is_square_attacked(board, king_square, side.opponent)
