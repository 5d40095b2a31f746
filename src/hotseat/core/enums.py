"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank-index step of this side's pawns (rank index 0 is the 8th rank)."""
        return -1 if self == Color.WHITE else 1

    @property
    def pawn_rank(self) -> int:
        """Rank index the pawns start on."""
        return 6 if self == Color.WHITE else 1

    @property
    def back_rank(self) -> int:
        """Rank index of the king and rooks at the start of the game."""
        return 7 if self == Color.WHITE else 0

    @property
    def promotion_rank(self) -> int:
        """Farthest rank index, where this side's pawns promote."""
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class GameEndReason(IntEnum):
    """Why a game stopped."""

    NONE = 0
    CHECKMATE = auto()
    STALEMATE = auto()
    TIMEOUT = auto()
