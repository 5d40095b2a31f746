"""Notation package: square names, FEN and move text."""

from hotseat.core.notation.fen import (
    STARTING_FEN,
    board_to_placement,
    castling_field,
    position_from_fen,
    position_to_fen,
)
from hotseat.core.notation.text import format_clock, move_log, move_to_text
from hotseat.core.types import parse_square, square_name

__all__ = [
    "STARTING_FEN",
    "board_to_placement",
    "castling_field",
    "format_clock",
    "move_log",
    "move_to_text",
    "parse_square",
    "position_from_fen",
    "position_to_fen",
    "square_name",
]
