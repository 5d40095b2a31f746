"""Clock transitions on a whole GameState."""

from __future__ import annotations

import logging
from dataclasses import replace

from hotseat.core.enums import Color
from hotseat.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def toggle_clock(state: GameState, now: int) -> GameState:
    """Start or pause the clock at instant *now*.

    Pausing charges the side to move for the time it has used so far.
    """
    clock = state.clock.toggled(state.current_player, now)
    _LOGGER.debug("Clock %s at %d", "started" if clock.running else "paused", now)
    return replace(state, clock=clock)


def set_timeout(state: GameState, color: Color) -> GameState:
    """*color* ran out of time: the game ends and the clock stops."""
    _LOGGER.info("%s lost on time", color)
    clock = state.clock.with_remaining(color, 0).stopped()
    return replace(state, clock=clock, flagged=color)


def check_flag(state: GameState, now: int) -> GameState:
    """Apply :func:`set_timeout` if the side to move has no time left."""
    if state.is_game_over or not state.clock.running:
        return state
    color = state.current_player
    if state.clock.is_flag_fallen(color, color, now):
        return set_timeout(state, color)
    return state
