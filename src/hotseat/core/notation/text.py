"""Human-readable move text for move logs and clock displays."""

from __future__ import annotations

from collections.abc import Sequence

from hotseat.core.enums import PieceType
from hotseat.core.move import Move
from hotseat.core.types import square_name

_PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def move_to_text(move: Move) -> str:
    """Short algebraic text for an executed move, e.g. ``Nxe5+`` or ``exd6``.

    No disambiguation between two like pieces reaching the same square.
    """
    if move.is_castling:
        text = "O-O" if move.to_sq.file > move.from_sq.file else "O-O-O"
    else:
        text = _PIECE_LETTERS[move.piece.piece_type]
        if move.is_capture:
            if move.piece.piece_type == PieceType.PAWN:
                text += square_name(move.from_sq)[0]
            text += "x"
        text += square_name(move.to_sq)
        if move.promotion is not None:
            text += f"={_PIECE_LETTERS[move.promotion]}"

    if move.is_checkmate:
        text += "#"
    elif move.is_check:
        text += "+"
    return text


def move_log(history: Sequence[Move]) -> list[str]:
    """Numbered move pairs, e.g. ``["1. e4 e5", "2. Nf3"]``."""
    lines: list[str] = []
    for index in range(0, len(history), 2):
        pair = [move_to_text(m) for m in history[index : index + 2]]
        lines.append(f"{index // 2 + 1}. {' '.join(pair)}")
    return lines


def format_clock(ms: float) -> str:
    """Remaining time as ``mm:ss`` (rounded down, never negative)."""
    total_seconds = int(max(0.0, ms) // 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"
