"""FEN parsing and serialization.

The engine tracks castling eligibility through each king's and rook's
``has_moved`` flag rather than a rights bitmask. On parsing, the castling
field decides those flags; on serialising, the flags decide the field.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.types import BOARD_SIZE, Square, parse_square, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# castling letter -> (color, rook file)
_CASTLING_CHARS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}
_KING_FILE = 4

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
_SIDE_CHARS: dict[Color, str] = {color: ch for ch, color in _SIDES.items()}


def _parse_placement(placement: str, fen: str) -> dict[Square, Piece]:
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"FEN placement needs 8 ranks: {fen!r}")
    pieces: dict[Square, Piece] = {}
    # FEN lists the 8th rank first, which is rank index 0.
    for rank, rank_text in enumerate(ranks):
        cells: list[str | None] = []
        for ch in rank_text:
            if ch in "12345678":
                cells.extend([None] * int(ch))
            else:
                cells.append(ch)
        if len(cells) != BOARD_SIZE:
            raise ValueError(f"FEN rank {rank_text!r} is not 8 squares wide: {fen!r}")
        for file, ch in enumerate(cells):
            if ch is not None:
                pieces[Square(file, rank)] = Piece.from_char(ch)
    return pieces


def _parse_castling(castling_part: str) -> set[str]:
    if castling_part == "-":
        return set()
    seen: set[str] = set()
    for ch in castling_part:
        if ch not in _CASTLING_CHARS or ch in seen:
            raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
        seen.add(ch)
    return seen


def _with_move_flags(pieces: dict[Square, Piece], castling: set[str]) -> Board:
    """Mark pieces as moved unless they can be proven to sit unmoved."""
    unmoved_rooks: set[Square] = set()
    unmoved_kings: set[Square] = set()
    for ch in castling:
        color, rook_file = _CASTLING_CHARS[ch]
        unmoved_rooks.add(Square(rook_file, color.back_rank))
        unmoved_kings.add(Square(_KING_FILE, color.back_rank))

    changes: dict[Square, Piece | None] = {}
    for sq, piece in pieces.items():
        if piece.piece_type == PieceType.KING:
            moved = sq not in unmoved_kings
        elif piece.piece_type == PieceType.ROOK:
            moved = sq not in unmoved_rooks
        elif piece.piece_type == PieceType.PAWN:
            moved = sq.rank != piece.color.pawn_rank
        else:
            moved = False
        changes[sq] = Piece(piece.color, piece.piece_type, moved)
    return Board.empty().with_changes(changes)


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Half-move and full-move counters are accepted but not kept.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    pieces = _parse_placement(placement, fen)
    for color in Color:
        kings = [
            sq
            for sq, p in pieces.items()
            if p.color == color and p.piece_type == PieceType.KING
        ]
        if len(kings) != 1:
            raise ValueError(f"Invalid FEN: need exactly one {color} king: {fen!r}")

    # 2. Side to move
    side = _SIDES.get(side_part)
    if side is None:
        raise ValueError(f"FEN side to move must be 'w' or 'b': {side_part!r}")

    # 3. Castling
    board = _with_move_flags(pieces, _parse_castling(castling_part))

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        # The skipped square lies just behind the opponent's double-stepped pawn.
        expected_rank = side.opposite.pawn_rank + side.opposite.forward
        if ep.rank != expected_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    return Position(board, side, ep)


def castling_field(board: Board) -> str:
    """FEN castling availability derived from the king and rook flags."""
    field = ""
    for ch, (color, rook_file) in _CASTLING_CHARS.items():
        king = board[Square(_KING_FILE, color.back_rank)]
        rook = board[Square(rook_file, color.back_rank)]
        if (
            king is not None
            and king.color == color
            and king.piece_type == PieceType.KING
            and not king.has_moved
            and rook is not None
            and rook.color == color
            and rook.piece_type == PieceType.ROOK
            and not rook.has_moved
        ):
            field += ch
    return field or "-"


def _rank_to_text(row: Sequence[Piece | None]) -> str:
    text = ""
    for vacant, run in groupby(row, key=lambda piece: piece is None):
        cells = list(run)
        text += str(len(cells)) if vacant else "".join(map(str, cells))
    return text


def board_to_placement(board: Board) -> str:
    """First FEN field for *board*."""
    return "/".join(_rank_to_text(row) for row in board.rows)


def position_to_fen(pos: Position, halfmove_clock: int = 0, fullmove_number: int = 1) -> str:
    """Serialise a :class:`Position` to FEN."""
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"
    return (
        f"{board_to_placement(pos.board)} {_SIDE_CHARS[pos.side_to_move]} "
        f"{castling_field(pos.board)} {ep_str} {halfmove_clock} {fullmove_number}"
    )
