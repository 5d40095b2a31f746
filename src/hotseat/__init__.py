"""hotseat - rules engine for two players sharing one device.

Quick start::

    import hotseat
    from hotseat import parse_square

    state = hotseat.initialize_game()
    hotseat.legal_destinations(state, parse_square("e2"))  # {e3, e4}
    state = hotseat.apply_move(state, parse_square("e2"), parse_square("e4"), now=0)
    state = hotseat.undo_move(state, now=1500)
"""

from hotseat.core import (
    Color,
    GameEndReason,
    GameResult,
    IllegalMoveError,
    Move,
    Piece,
    PieceType,
    Square,
    parse_square,
    square_name,
)
from hotseat.engine import (
    apply_move,
    initialize_game,
    is_legal,
    legal_destinations,
    set_timeout,
    toggle_clock,
    undo_move,
)
from hotseat.game import DEFAULT_TIME_CONTROL, GameController, GameState, TimeControl

__all__ = [
    # Operations
    "apply_move",
    "initialize_game",
    "is_legal",
    "legal_destinations",
    "set_timeout",
    "toggle_clock",
    "undo_move",
    # Types
    "Color",
    "DEFAULT_TIME_CONTROL",
    "GameController",
    "GameEndReason",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "Move",
    "Piece",
    "PieceType",
    "Square",
    "TimeControl",
    "parse_square",
    "square_name",
]
