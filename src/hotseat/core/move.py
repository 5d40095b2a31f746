"""Move record value object."""

from __future__ import annotations

from dataclasses import dataclass

from hotseat.core.enums import PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """An executed move as kept in the game history.

    ``piece`` is the moving piece as it stood *before* the move, so a
    takeback can put it back verbatim (including ``has_moved`` and the
    pre-promotion pawn). ``clock_debit_ms`` is the time charged to the
    mover when the move was made, and ``en_passant_before`` the en passant
    target that stood before it.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: Piece | None = None
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    is_castling: bool = False
    is_en_passant: bool = False
    promotion: PieceType | None = None
    clock_debit_ms: int = 0
    en_passant_before: Square | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def capture_square(self) -> Square:
        """Where the captured piece stood (differs from ``to_sq`` for en passant)."""
        if self.is_en_passant:
            return Square(self.to_sq.file, self.from_sq.rank)
        return self.to_sq

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
