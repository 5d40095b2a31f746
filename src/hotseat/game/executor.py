"""Move execution - turns a legal (from, to) pair into the next GameState."""

from __future__ import annotations

import logging
from dataclasses import replace

from hotseat.core.enums import Color, PieceType
from hotseat.core.exceptions import IllegalMoveError
from hotseat.core.move import Move
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.rules import (
    castling_rook_squares,
    evaluate,
    is_castling_move,
    is_en_passant_capture,
)
from hotseat.core.types import Square
from hotseat.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# Pawns reaching the far rank always become queens.
PROMOTION_PIECE = PieceType.QUEEN


def apply_move(state: GameState, from_sq: Square, to_sq: Square, now: int) -> GameState:
    """Play the piece on *from_sq* to *to_sq* at instant *now* (ms).

    Callers are expected to have asked :meth:`GameState.is_legal` first.
    The move is checked again here and :class:`IllegalMoveError` raised if
    it fails, which includes any move after a side has lost on time;
    *state* is left untouched either way.
    """
    position = state.position
    if not state.is_legal(from_sq, to_sq):
        raise IllegalMoveError(f"Illegal move: {from_sq}{to_sq}")

    board = position.board
    mover = position.side_to_move

    # Clock: charge the mover and restamp.
    clock, debit_ms = state.clock.debit(mover, now)

    # Snapshot of the moving piece before anything changes.
    piece = board[from_sq]
    assert piece is not None

    changes: dict[Square, Piece | None] = {}
    castling = is_castling_move(piece, from_sq, to_sq)
    en_passant = is_en_passant_capture(position, from_sq, to_sq)
    captured: Piece | None = None

    # Castling: the rook lands next to the king, on the side it came from.
    if castling:
        rook_from, rook_to = castling_rook_squares(from_sq, to_sq)
        rook = board[rook_from]
        assert rook is not None
        changes[rook_from] = None
        changes[rook_to] = rook.moved()

    # Captures.
    if en_passant:
        victim_sq = Square(to_sq.file, from_sq.rank)
        captured = board[victim_sq]
        changes[victim_sq] = None
    elif board[to_sq] is not None:
        captured = board[to_sq]

    # En passant target for the reply.
    next_en_passant: Square | None = None
    if piece.piece_type == PieceType.PAWN and abs(to_sq.rank - from_sq.rank) == 2:
        next_en_passant = Square(from_sq.file, (from_sq.rank + to_sq.rank) // 2)

    # Relocate, promoting on the far rank.
    placed = piece.moved()
    promotion: PieceType | None = None
    if piece.piece_type == PieceType.PAWN and to_sq.rank == mover.promotion_rank:
        promotion = PROMOTION_PIECE
        placed = placed.promoted(promotion)
    changes[from_sq] = None
    changes[to_sq] = placed

    # Hand the turn over.
    next_position = Position(
        board=board.with_changes(changes),
        side_to_move=mover.opposite,
        en_passant=next_en_passant,
    )

    # Check / checkmate / stalemate for the side now to move.
    status = evaluate(next_position)

    # History and captured lists.
    record = Move(
        piece=piece,
        from_sq=from_sq,
        to_sq=to_sq,
        captured=captured,
        is_check=status.is_check,
        is_checkmate=status.is_checkmate,
        is_stalemate=status.is_stalemate,
        is_castling=castling,
        is_en_passant=en_passant,
        promotion=promotion,
        clock_debit_ms=debit_ms,
        en_passant_before=position.en_passant,
    )
    next_state = replace(
        state,
        position=next_position,
        move_history=state.move_history + (record,),
        clock=clock,
    ).with_status(status)
    if captured is not None:
        next_state = _with_capture(next_state, mover, captured)

    _LOGGER.debug("Applied %s %s (debit %d ms)", mover, record.uci, debit_ms)
    if status.is_checkmate:
        _LOGGER.info("Checkmate: %s wins", mover)
    elif status.is_stalemate:
        _LOGGER.info("Stalemate after %s", record.uci)
    return next_state


def _with_capture(state: GameState, capturer: Color, piece: Piece) -> GameState:
    if capturer == Color.WHITE:
        return replace(state, captured_by_white=state.captured_by_white + (piece,))
    return replace(state, captured_by_black=state.captured_by_black + (piece,))
