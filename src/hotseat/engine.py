"""Public engine operations over :class:`GameState`.

Each one is old state in, new state out; nothing here keeps state of its
own or reads the system clock.
"""

from __future__ import annotations

from hotseat.core.types import Square
from hotseat.game.executor import apply_move
from hotseat.game.interfaces import DEFAULT_TIME_CONTROL, TimeControl
from hotseat.game.state import GameState
from hotseat.game.takeback import undo_move
from hotseat.game.timekeeping import set_timeout, toggle_clock


def initialize_game(time_control: TimeControl = DEFAULT_TIME_CONTROL) -> GameState:
    """Fresh game: standard position, white to move, clocks full and stopped."""
    return GameState.new(time_control)


def is_legal(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    return state.is_legal(from_sq, to_sq)


def legal_destinations(state: GameState, from_sq: Square) -> frozenset[Square]:
    return state.legal_destinations(from_sq)


__all__ = [
    "apply_move",
    "initialize_game",
    "is_legal",
    "legal_destinations",
    "set_timeout",
    "toggle_clock",
    "undo_move",
]
