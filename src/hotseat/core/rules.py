"""Move legality: per-piece shape rules, attack detection, self-check filter.

Each piece type has a shape rule ``(position, from_sq, to_sq, piece) -> bool``
that only answers "can this piece travel that way right now?". :func:`is_legal`
adds the turn/ownership preconditions and then filters out any move that
would leave the mover's own king attacked.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.types import Square

KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {(1, 2), (2, 1), (-1, 2), (-2, 1), (1, -2), (2, -1), (-1, -2), (-2, -1)}
)

ShapeRule = Callable[[Position, Square, Square, Piece], bool]


@dataclass(frozen=True, slots=True)
class PositionStatus:
    """Check / checkmate / stalemate flags for the side to move."""

    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False

    @property
    def is_draw(self) -> bool:
        return self.is_stalemate


# -- Geometry helpers -------------------------------------------------------


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """No piece strictly between two squares on a shared line."""
    df = _sign(to_sq.file - from_sq.file)
    dr = _sign(to_sq.rank - from_sq.rank)
    file = from_sq.file + df
    rank = from_sq.rank + dr
    while (file, rank) != (to_sq.file, to_sq.rank):
        if board[Square(file, rank)] is not None:
            return False
        file += df
        rank += dr
    return True


def _is_straight(from_sq: Square, to_sq: Square) -> bool:
    return from_sq != to_sq and (
        from_sq.file == to_sq.file or from_sq.rank == to_sq.rank
    )


def _is_diagonal(from_sq: Square, to_sq: Square) -> bool:
    df = abs(to_sq.file - from_sq.file)
    return df != 0 and df == abs(to_sq.rank - from_sq.rank)


def _is_king_step(from_sq: Square, to_sq: Square) -> bool:
    df = abs(to_sq.file - from_sq.file)
    dr = abs(to_sq.rank - from_sq.rank)
    return max(df, dr) == 1


def _is_knight_jump(from_sq: Square, to_sq: Square) -> bool:
    return (to_sq.file - from_sq.file, to_sq.rank - from_sq.rank) in KNIGHT_OFFSETS


def _pawn_attacks(from_sq: Square, to_sq: Square, color: Color) -> bool:
    return (
        to_sq.rank - from_sq.rank == color.forward
        and abs(to_sq.file - from_sq.file) == 1
    )


# -- Attack detection -------------------------------------------------------


def _attacks(board: Board, from_sq: Square, piece: Piece, target: Square) -> bool:
    """Could *piece* on *from_sq* strike *target*?

    Pawns threaten both forward diagonals whether or not anything stands
    there. Kings threaten adjacent squares only; castling never attacks.
    """
    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        return _pawn_attacks(from_sq, target, piece.color)
    if ptype == PieceType.KNIGHT:
        return _is_knight_jump(from_sq, target)
    if ptype == PieceType.KING:
        return _is_king_step(from_sq, target)
    if ptype == PieceType.ROOK:
        return _is_straight(from_sq, target) and _path_clear(board, from_sq, target)
    if ptype == PieceType.BISHOP:
        return _is_diagonal(from_sq, target) and _path_clear(board, from_sq, target)
    # Queen
    return (
        _is_straight(from_sq, target) or _is_diagonal(from_sq, target)
    ) and _path_clear(board, from_sq, target)


def is_attacked(board: Board, target: Square, by_color: Color) -> bool:
    """Is *target* attacked by any piece of *by_color*?"""
    return any(
        _attacks(board, sq, piece, target) for sq, piece in board.pieces(by_color)
    )


def is_in_check(position: Position, color: Color | None = None) -> bool:
    """Is *color*'s king (default: side to move) attacked by the opponent?"""
    if color is None:
        color = position.side_to_move
    king_sq = position.board.king_square(color)
    return is_attacked(position.board, king_sq, color.opposite)


# -- Shape rules ------------------------------------------------------------


def _pawn_shape(position: Position, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    board = position.board
    step = piece.color.forward
    df = to_sq.file - from_sq.file
    dr = to_sq.rank - from_sq.rank

    if df == 0:
        if dr == step:
            return board.is_empty(to_sq)
        if dr == 2 * step and from_sq.rank == piece.color.pawn_rank:
            middle = Square(from_sq.file, from_sq.rank + step)
            return board.is_empty(middle) and board.is_empty(to_sq)
        return False

    if abs(df) != 1 or dr != step:
        return False

    target = board[to_sq]
    if target is not None:
        return target.color != piece.color
    return is_en_passant_capture(position, from_sq, to_sq)


def _rook_shape(position: Position, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    return _is_straight(from_sq, to_sq) and _path_clear(position.board, from_sq, to_sq)


def _knight_shape(position: Position, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    return _is_knight_jump(from_sq, to_sq)


def _bishop_shape(position: Position, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    return _is_diagonal(from_sq, to_sq) and _path_clear(position.board, from_sq, to_sq)


def _queen_shape(position: Position, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    return _rook_shape(position, from_sq, to_sq, piece) or _bishop_shape(
        position, from_sq, to_sq, piece
    )


def _king_shape(position: Position, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    if _is_king_step(from_sq, to_sq):
        return True
    return _castling_allowed(position, from_sq, to_sq, piece)


SHAPE_RULES: dict[PieceType, ShapeRule] = {
    PieceType.PAWN: _pawn_shape,
    PieceType.ROOK: _rook_shape,
    PieceType.KNIGHT: _knight_shape,
    PieceType.BISHOP: _bishop_shape,
    PieceType.QUEEN: _queen_shape,
    PieceType.KING: _king_shape,
}


# -- Special moves ----------------------------------------------------------


def castling_rook_squares(king_from: Square, king_to: Square) -> tuple[Square, Square]:
    """(rook origin, rook destination) for a castling king move."""
    direction = _sign(king_to.file - king_from.file)
    rook_file = 7 if direction > 0 else 0
    return (
        Square(rook_file, king_from.rank),
        Square(king_to.file - direction, king_from.rank),
    )


def is_castling_move(piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """King moving two files along its rank."""
    return (
        piece.piece_type == PieceType.KING
        and from_sq.rank == to_sq.rank
        and abs(to_sq.file - from_sq.file) == 2
    )


def is_en_passant_capture(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """A pawn's diagonal step onto the empty en passant target, with the
    enemy pawn that just advanced standing beside *from_sq*."""
    board = position.board
    piece = board[from_sq]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return False
    if position.en_passant is None or to_sq != position.en_passant:
        return False
    if not _pawn_attacks(from_sq, to_sq, piece.color) or not board.is_empty(to_sq):
        return False
    victim = board[Square(to_sq.file, from_sq.rank)]
    return (
        victim is not None
        and victim.piece_type == PieceType.PAWN
        and victim.color != piece.color
    )


def _castling_allowed(
    position: Position, from_sq: Square, to_sq: Square, king: Piece
) -> bool:
    if king.has_moved or not is_castling_move(king, from_sq, to_sq):
        return False

    board = position.board
    rook_sq, _ = castling_rook_squares(from_sq, to_sq)
    rook = board[rook_sq]
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != king.color
        or rook.has_moved
    ):
        return False

    if not _path_clear(board, from_sq, rook_sq):
        return False

    opponent = king.color.opposite
    direction = _sign(to_sq.file - from_sq.file)
    transit = from_sq.offset(direction, 0)
    assert transit is not None
    return not any(
        is_attacked(board, sq, opponent) for sq in (from_sq, transit, to_sq)
    )


# -- Simulation / legality --------------------------------------------------


def board_after(position: Position, from_sq: Square, to_sq: Square) -> Board:
    """Scratch board with the move played (en passant victim removed and
    castling rook slid). No promotion or bookkeeping."""
    board = position.board
    piece = board[from_sq]
    assert piece is not None
    changes: dict[Square, Piece | None] = {from_sq: None, to_sq: piece}
    if is_en_passant_capture(position, from_sq, to_sq):
        changes[Square(to_sq.file, from_sq.rank)] = None
    elif is_castling_move(piece, from_sq, to_sq):
        rook_from, rook_to = castling_rook_squares(from_sq, to_sq)
        changes[rook_from] = None
        changes[rook_to] = board[rook_from]
    return board.with_changes(changes)


def is_pseudo_legal(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """Turn, ownership and shape checks, without the self-check filter."""
    board = position.board
    piece = board[from_sq]
    if piece is None or piece.color != position.side_to_move:
        return False
    target = board[to_sq]
    if target is not None and target.color == piece.color:
        return False
    return SHAPE_RULES[piece.piece_type](position, from_sq, to_sq, piece)


def is_legal(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """Full legality of moving the piece on *from_sq* to *to_sq*."""
    if not is_pseudo_legal(position, from_sq, to_sq):
        return False
    mover = position.side_to_move
    scratch = board_after(position, from_sq, to_sq)
    return not is_attacked(scratch, scratch.king_square(mover), mover.opposite)


def evaluate(position: Position) -> PositionStatus:
    """Check, checkmate and stalemate for the side to move."""
    from hotseat.core.move_generator import MoveGenerator

    in_check = is_in_check(position)
    if MoveGenerator(position).has_legal_move():
        return PositionStatus(is_check=in_check)
    if in_check:
        return PositionStatus(is_check=True, is_checkmate=True)
    return PositionStatus(is_stalemate=True)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    is_legal = staticmethod(is_legal)
    is_attacked = staticmethod(is_attacked)
    is_in_check = staticmethod(is_in_check)
    evaluate = staticmethod(evaluate)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return evaluate(position).is_checkmate

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return evaluate(position).is_stalemate
