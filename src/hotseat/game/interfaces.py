"""Time-control definition shared by the game layer."""

from __future__ import annotations

_MS_PER_MINUTE = 60_000


class TimeControl:
    """Immutable time-control definition.

    Args:
        initial_ms: Starting time per player, in milliseconds.
    """

    __slots__ = ("initial_ms",)

    def __init__(self, initial_ms: int) -> None:
        if initial_ms < 0:
            raise ValueError(f"Time control must not be negative: {initial_ms!r}")
        self.initial_ms = initial_ms

    # Common presets
    @classmethod
    def bullet_1m(cls) -> TimeControl:
        return cls(1 * _MS_PER_MINUTE)

    @classmethod
    def blitz_3m(cls) -> TimeControl:
        return cls(3 * _MS_PER_MINUTE)

    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(5 * _MS_PER_MINUTE)

    @classmethod
    def rapid_10m(cls) -> TimeControl:
        return cls(10 * _MS_PER_MINUTE)

    @classmethod
    def classical_30m(cls) -> TimeControl:
        return cls(30 * _MS_PER_MINUTE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.initial_ms == other.initial_ms

    def __hash__(self) -> int:
        return hash(self.initial_ms)

    def __repr__(self) -> str:
        return f"TimeControl({self.initial_ms / _MS_PER_MINUTE:g}m)"


DEFAULT_TIME_CONTROL = TimeControl.blitz_5m()
