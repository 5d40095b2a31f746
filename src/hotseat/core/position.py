"""Position - the slice of game state the move rules look at."""

from __future__ import annotations

from dataclasses import dataclass, field

from hotseat.core.board import Board
from hotseat.core.enums import Color
from hotseat.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Board + side to move + en passant target.

    ``en_passant`` names the square skipped by the pawn that advanced two
    squares on the immediately preceding move, and is None otherwise.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    en_passant: Square | None = None

    @classmethod
    def initial(cls) -> Position:
        return cls()
