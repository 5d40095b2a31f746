"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from hotseat.core import MoveGenerator, Position, parse_square

    pos = Position.initial()
    gen = MoveGenerator(pos)
    gen.legal_destinations(parse_square("g1"))  # {f3, h3}
"""

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameEndReason, GameResult, PieceType
from hotseat.core.exceptions import IllegalMoveError
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator, legal_destinations
from hotseat.core.notation import (
    STARTING_FEN,
    format_clock,
    move_log,
    move_to_text,
    position_from_fen,
    position_to_fen,
)
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.rules import (
    PositionStatus,
    Rules,
    evaluate,
    is_attacked,
    is_in_check,
    is_legal,
)
from hotseat.core.types import Square, all_squares, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameEndReason",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "IllegalMoveError",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "PositionStatus",
    "Rules",
    # Rules
    "evaluate",
    "is_attacked",
    "is_in_check",
    "is_legal",
    "legal_destinations",
    # Notation
    "STARTING_FEN",
    "format_clock",
    "move_log",
    "move_to_text",
    "position_from_fen",
    "position_to_fen",
]
