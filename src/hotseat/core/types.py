"""Square value type and coordinate helpers.

Board layout follows the on-screen grid, rows from the top:
    rank index 0 = 8th rank (black's back rank)
    rank index 7 = 1st rank (white's back rank)
    file index 0..7 = files a..h

    a8=(0,0) ... h8=(7,0)
    ...
    a1=(0,7) ... h1=(7,7)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"


def is_on_board(file: int, rank: int) -> bool:
    """Whether (file, rank) lies on the 8x8 grid."""
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Square:
    """A board coordinate. Both components lie in ``[0, 8)``."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_on_board(self.file, self.rank):
            raise ValueError(f"Square out of range: ({self.file}, {self.rank})")

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by (df, dr), or None when that falls off the board."""
        file = self.file + df
        rank = self.rank + dr
        if not is_on_board(file, rank):
            return None
        return Square(file, rank)

    @property
    def name(self) -> str:
        return square_name(self)

    def __str__(self) -> str:
        return square_name(self)


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. Square(4, 4) -> 'e4'."""
    return f"{_FILES[sq.file]}{BOARD_SIZE - sq.rank}"


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. 'e4' -> Square(4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILES.index(name[0]), BOARD_SIZE - int(name[1]))


def all_squares() -> Iterator[Square]:
    """All 64 squares, row by row from a8 to h1."""
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            yield Square(file, rank)
