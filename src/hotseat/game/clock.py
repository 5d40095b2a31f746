"""Chess clock state for both players.

Time never comes from the system here: every transition takes ``now``, an
instant in milliseconds on whatever monotonic scale the caller uses.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from hotseat.core.enums import Color
from hotseat.game.interfaces import TimeControl


@dataclass(frozen=True, slots=True)
class ClockState:
    """Remaining time per side plus the running flag and last timestamp."""

    white_ms: int
    black_ms: int
    last_tick: int | None = None
    running: bool = False

    @classmethod
    def from_time_control(cls, time_control: TimeControl) -> ClockState:
        return cls(time_control.initial_ms, time_control.initial_ms)

    def stored(self, color: Color) -> int:
        """Remaining time for *color* as of the last transition."""
        return self.white_ms if color == Color.WHITE else self.black_ms

    def with_remaining(self, color: Color, ms: int) -> ClockState:
        if color == Color.WHITE:
            return replace(self, white_ms=ms)
        return replace(self, black_ms=ms)

    # ── Transitions ──────────────────────────────────────────────────────

    def elapsed(self, now: int) -> int:
        """Milliseconds since the last tick while running, else zero."""
        if not self.running or self.last_tick is None:
            return 0
        return max(0, now - self.last_tick)

    def debit(self, color: Color, now: int) -> tuple[ClockState, int]:
        """Charge elapsed running time to *color* (floored at zero) and
        restamp. Returns the new clock and the amount actually charged."""
        remaining = self.stored(color)
        charged = min(self.elapsed(now), remaining)
        clock = self.with_remaining(color, remaining - charged)
        return replace(clock, last_tick=now), charged

    def credit(self, color: Color, ms: int, now: int) -> ClockState:
        """Give *ms* back to *color* and restamp."""
        clock = self.with_remaining(color, self.stored(color) + ms)
        return replace(clock, last_tick=now)

    def toggled(self, active: Color, now: int) -> ClockState:
        """Pause or resume. Pausing charges *active* for the time it used."""
        if self.running:
            clock, _ = self.debit(active, now)
            return replace(clock, running=False)
        return replace(self, running=True, last_tick=now)

    def stopped(self) -> ClockState:
        return replace(self, running=False)

    # ── Queries ──────────────────────────────────────────────────────────

    def remaining(self, color: Color, active: Color, now: int) -> int:
        """Live remaining time for display; only *active* is ticking."""
        stored = self.stored(color)
        if color != active:
            return stored
        return max(0, stored - self.elapsed(now))

    def is_flag_fallen(self, color: Color, active: Color, now: int) -> bool:
        return self.remaining(color, active, now) <= 0
