"""GameController - keeps the current GameState for a presentation layer.

The engine functions are pure; something still has to hold "the game" and
tell the UI when it changes. The controller threads state through
:func:`apply_move`, :func:`undo_move` and the clock transitions, and emits
events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hotseat.core.enums import GameResult
from hotseat.core.move import Move
from hotseat.core.notation import move_log, move_to_text
from hotseat.core.types import Square
from hotseat.game.executor import apply_move
from hotseat.game.interfaces import DEFAULT_TIME_CONTROL, TimeControl
from hotseat.game.state import GameState
from hotseat.game.takeback import undo_move
from hotseat.game.timekeeping import check_flag, toggle_clock

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, GameState], None]  # move, text, new state
UndoCallback = Callable[[Move, GameState], None]  # undone move, new state
GameOverCallback = Callable[[GameResult, GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Holds one two-player game on one device.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). ``now`` is always supplied by the caller.
    """

    __slots__ = ("_state", "_time_control", "events")

    def __init__(self, time_control: TimeControl = DEFAULT_TIME_CONTROL) -> None:
        self._time_control = time_control
        self._state = GameState.new(time_control)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def move_log(self) -> list[str]:
        return move_log(self._state.move_history)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(
        self, time_control: TimeControl | None = None, fen: str | None = None
    ) -> GameState:
        """Discard the current game and start another."""
        if time_control is not None:
            self._time_control = time_control
        if fen is None:
            self._state = GameState.new(self._time_control)
        else:
            self._state = GameState.from_fen(fen, self._time_control)
        _LOGGER.debug("New game (%r)", self._time_control)
        return self._state

    def legal_destinations(self, from_sq: Square) -> frozenset[Square]:
        if self._state.is_game_over:
            return frozenset()
        return self._state.legal_destinations(from_sq)

    def submit_move(self, from_sq: Square, to_sq: Square, now: int) -> bool:
        """Play a move. Returns True if it was legal and applied."""
        if self.check_flag(now):
            return False
        if self._state.is_game_over:
            return False
        if not self._state.is_legal(from_sq, to_sq):
            _LOGGER.debug("Rejected %s%s", from_sq, to_sq)
            return False

        self._state = apply_move(self._state, from_sq, to_sq, now)
        move = self._state.move_history[-1]
        self._emit_move(move)

        if self._state.is_game_over:
            self._emit_game_over()
        return True

    def undo(self, now: int) -> bool:
        """Take back the last move. Not available after a loss on time."""
        if self._state.flagged is not None or not self._state.move_history:
            return False

        move = self._state.move_history[-1]
        self._state = undo_move(self._state, now)
        for cb in self.events.on_undo:
            cb(move, self._state)
        return True

    def toggle_clock(self, now: int) -> GameState:
        if not self._state.is_game_over:
            self._state = toggle_clock(self._state, now)
        return self._state

    def check_flag(self, now: int) -> bool:
        """Poll the clock; ends the game if the side to move ran out.

        Returns True when this call ended the game.
        """
        before = self._state
        self._state = check_flag(before, now)
        if self._state is before:
            return False
        self._emit_game_over()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move) -> None:
        text = move_to_text(move)
        for cb in self.events.on_move:
            cb(move, text, self._state)

    def _emit_game_over(self) -> None:
        result = self._state.result
        for cb in self.events.on_game_over:
            cb(result, self._state)
