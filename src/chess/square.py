"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """
    0-indexed coordinate: (file, rank), both in [0, 8).

    Rank 0 is White's back rank. File 0 is the file of White's king-side rook in the starting position,
    so the white king starts on file 3 and the queen on file 4.
    NOTE: In algebraic notation that makes file 0 the h-file and file 7 the a-file.
    """

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'h1' - 'a8' get converted to (0,0) - (7,7)"""
        file = ord("h") - ord(sq[0])
        rank = int(sq[1:]) - 1
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(ord('h') - self.file)}{self.rank + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )

    @property
    def index(self) -> int:
        """Position in the flat cell list of the Board"""
        return self.rank * BOARD_DIMENSIONS[0] + self.file

    def offset(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)


def all_squares() -> list[Square]:
    """Every square on the board, in index order"""
    return [
        Square(file, rank)
        for rank in range(BOARD_DIMENSIONS[1])
        for file in range(BOARD_DIMENSIONS[0])
    ]
