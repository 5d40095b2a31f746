"""Game management layer - state snapshots, execution, takeback, clock.

Quick start::

    from hotseat.core import parse_square
    from hotseat.game import GameState, apply_move

    state = GameState.new()
    state = apply_move(state, parse_square("e2"), parse_square("e4"), now=0)
"""

from hotseat.game.clock import ClockState
from hotseat.game.controller import GameController, GameEvents
from hotseat.game.executor import PROMOTION_PIECE, apply_move
from hotseat.game.interfaces import DEFAULT_TIME_CONTROL, TimeControl
from hotseat.game.state import GameState
from hotseat.game.takeback import undo_move
from hotseat.game.timekeeping import check_flag, set_timeout, toggle_clock

__all__ = [
    # Configuration
    "DEFAULT_TIME_CONTROL",
    "PROMOTION_PIECE",
    "TimeControl",
    # State
    "ClockState",
    "GameState",
    # Transitions
    "apply_move",
    "check_flag",
    "set_timeout",
    "toggle_clock",
    "undo_move",
    # Orchestration
    "GameController",
    "GameEvents",
]
