"""Legal move enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hotseat.core.rules import is_legal
from hotseat.core.types import Square, all_squares

if TYPE_CHECKING:
    from hotseat.core.position import Position

_ALL_SQUARES: tuple[Square, ...] = tuple(all_squares())


class MoveGenerator:
    """Enumerates legal moves for a given :class:`Position`.

    Every destination is vetted by :func:`hotseat.core.rules.is_legal`, so
    nothing returned here can leave the mover's king in check.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, from_sq: Square) -> frozenset[Square]:
        """Squares the piece on *from_sq* may legally move to.

        Empty when the square is vacant or holds a piece of the side not
        to move.
        """
        piece = self._pos.board[from_sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return frozenset()
        return frozenset(
            to_sq for to_sq in _ALL_SQUARES if is_legal(self._pos, from_sq, to_sq)
        )

    def generate_legal_moves(self) -> list[tuple[Square, Square]]:
        """All strictly legal (from, to) pairs for the side to move."""
        moves: list[tuple[Square, Square]] = []
        for from_sq, _ in self._pos.board.pieces(self._pos.side_to_move):
            for to_sq in _ALL_SQUARES:
                if is_legal(self._pos, from_sq, to_sq):
                    moves.append((from_sq, to_sq))
        return moves

    def has_legal_move(self) -> bool:
        """Whether the side to move has at least one legal move."""
        for from_sq, _ in self._pos.board.pieces(self._pos.side_to_move):
            for to_sq in _ALL_SQUARES:
                if is_legal(self._pos, from_sq, to_sq):
                    return True
        return False


def legal_destinations(position: Position, from_sq: Square) -> frozenset[Square]:
    """Functional shortcut for :meth:`MoveGenerator.legal_destinations`."""
    return MoveGenerator(position).legal_destinations(from_sq)
