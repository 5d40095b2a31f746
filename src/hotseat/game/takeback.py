"""Takeback - reverse the most recent move."""

from __future__ import annotations

import logging
from dataclasses import replace

from hotseat.core.enums import Color
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.rules import castling_rook_squares, evaluate
from hotseat.core.types import Square
from hotseat.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def undo_move(state: GameState, now: int) -> GameState:
    """Return the state before the last move, or *state* itself when the
    history is empty.

    Check, checkmate and stalemate flags are re-evaluated for the restored
    position. A lost-on-time marker is left as it is.
    """
    if not state.move_history:
        return state

    move = state.move_history[-1]
    history = state.move_history[:-1]
    mover = move.piece.color
    board = state.position.board

    # The snapshot restores has_moved and turns a promoted queen back into a pawn.
    changes: dict[Square, Piece | None] = {
        move.to_sq: None,
        move.from_sq: move.piece,
    }
    if move.captured is not None:
        changes[move.capture_square] = move.captured

    if move.is_castling:
        rook_from, rook_to = castling_rook_squares(move.from_sq, move.to_sq)
        rook = board[rook_to]
        assert rook is not None
        changes[rook_to] = None
        changes[rook_from] = replace(rook, has_moved=False)

    position = Position(
        board=board.with_changes(changes),
        side_to_move=mover,
        en_passant=move.en_passant_before,
    )

    restored = replace(
        state,
        position=position,
        move_history=history,
        clock=state.clock.credit(mover, move.clock_debit_ms, now),
    )
    if move.captured is not None:
        restored = _without_last_capture(restored, mover)

    _LOGGER.debug("Took back %s %s", mover, move.uci)
    return restored.with_status(evaluate(position))

def _without_last_capture(state: GameState, capturer: Color) -> GameState:
    if capturer == Color.WHITE:
        return replace(state, captured_by_white=state.captured_by_white[:-1])
    return replace(state, captured_by_black=state.captured_by_black[:-1])
