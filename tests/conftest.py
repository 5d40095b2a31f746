"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hotseat.core.types import parse_square
from hotseat.game.executor import apply_move
from hotseat.game.state import GameState

PlayFn = Callable[..., GameState]


@pytest.fixture
def new_state() -> GameState:
    """A freshly initialised game."""
    return GameState.new()


@pytest.fixture
def play() -> PlayFn:
    """Apply moves given as 'e2e4'-style strings, all at instant *now*."""

    def _play(state: GameState, *moves: str, now: int = 0) -> GameState:
        for text in moves:
            state = apply_move(
                state, parse_square(text[:2]), parse_square(text[2:4]), now
            )
        return state

    return _play
