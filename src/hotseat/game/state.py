"""GameState - immutable snapshot of a game in progress."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hotseat.core.board import Board
from hotseat.core.enums import Color, GameEndReason, GameResult
from hotseat.core.move import Move
from hotseat.core.move_generator import MoveGenerator
from hotseat.core.notation import position_from_fen
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.rules import PositionStatus, evaluate, is_legal
from hotseat.core.types import Square
from hotseat.game.clock import ClockState
from hotseat.game.interfaces import DEFAULT_TIME_CONTROL, TimeControl


@dataclass(frozen=True, slots=True)
class GameState:
    """A complete game snapshot.

    Never edited in place: moves, takebacks, clock toggles and timeouts
    each return a new ``GameState``. Captured pieces are kept per capturing
    side.
    """

    position: Position = field(default_factory=Position.initial)
    move_history: tuple[Move, ...] = ()
    captured_by_white: tuple[Piece, ...] = ()
    captured_by_black: tuple[Piece, ...] = ()
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    is_draw: bool = False
    clock: ClockState = field(
        default_factory=lambda: ClockState.from_time_control(DEFAULT_TIME_CONTROL)
    )
    flagged: Color | None = None

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new(cls, time_control: TimeControl = DEFAULT_TIME_CONTROL) -> GameState:
        """Initial position, full clocks, no timestamp, clock stopped."""
        return cls(clock=ClockState.from_time_control(time_control))

    @classmethod
    def from_fen(
        cls, fen: str, time_control: TimeControl = DEFAULT_TIME_CONTROL
    ) -> GameState:
        """Start from an arbitrary position; flags are evaluated for it."""
        state = cls(
            position=position_from_fen(fen),
            clock=ClockState.from_time_control(time_control),
        )
        return state.with_status(evaluate(state.position))

    def with_status(self, status: PositionStatus) -> GameState:
        return replace(
            self,
            is_check=status.is_check,
            is_checkmate=status.is_checkmate,
            is_stalemate=status.is_stalemate,
            is_draw=status.is_draw,
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def current_player(self) -> Color:
        return self.position.side_to_move

    @property
    def en_passant_target(self) -> Square | None:
        return self.position.en_passant

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1] if self.move_history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def captured_by(self, color: Color) -> tuple[Piece, ...]:
        """Pieces *color* has taken from the opponent, in capture order."""
        return self.captured_by_white if color == Color.WHITE else self.captured_by_black

    @property
    def end_reason(self) -> GameEndReason:
        if self.flagged is not None:
            return GameEndReason.TIMEOUT
        if self.is_checkmate:
            return GameEndReason.CHECKMATE
        if self.is_stalemate:
            return GameEndReason.STALEMATE
        return GameEndReason.NONE

    @property
    def is_game_over(self) -> bool:
        return self.end_reason != GameEndReason.NONE

    @property
    def winner(self) -> Color | None:
        """The side that won, or None while playing or after a draw."""
        if self.flagged is not None:
            return self.flagged.opposite
        if self.is_checkmate:
            return self.current_player.opposite
        return None

    @property
    def result(self) -> GameResult:
        winner = self.winner
        if winner is not None:
            return GameResult.WHITE_WINS if winner == Color.WHITE else GameResult.BLACK_WINS
        if self.is_draw:
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def remaining_ms(self, color: Color, now: int) -> int:
        """Live clock reading for *color* at instant *now*."""
        return self.clock.remaining(color, self.current_player, now)

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Move legality; nothing is legal once a side has lost on time."""
        if self.flagged is not None:
            return False
        return is_legal(self.position, from_sq, to_sq)

    def legal_destinations(self, from_sq: Square) -> frozenset[Square]:
        if self.flagged is not None:
            return frozenset()
        return MoveGenerator(self.position).legal_destinations(from_sq)
