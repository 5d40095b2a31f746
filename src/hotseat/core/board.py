"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import BOARD_SIZE, Square

Row = tuple[Piece | None, ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable grid of optional pieces indexed ``[rank][file]``.

    A board is never edited in place. :meth:`with_changes` builds a fresh
    board and shares the untouched rows with the source board.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[Row, ...] | None = None) -> None:
        if rows is None:
            rows = tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE))
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("Board must be 8x8")
        self._rows: tuple[Row, ...] = rows

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq.rank][sq.file]

    def is_empty(self, sq: Square) -> bool:
        return self._rows[sq.rank][sq.file] is None

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Every (square, piece) pair on the board."""
        for rank, row in enumerate(self._rows):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield Square(file, rank), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All of *color*'s pieces with their squares."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def find(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, p in self.occupied()
            if p.color == color and p.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = self.find(color, PieceType.KING)
        if not kings:
            raise ValueError(f"No {color.name} king on board")
        return kings[0]

    # -- Derivation ---------------------------------------------------------

    def with_changes(self, changes: Mapping[Square, Piece | None]) -> Board:
        """A new board with each square in *changes* set to its piece."""
        if not changes:
            return self
        rows = list(self._rows)
        touched: dict[int, list[Piece | None]] = {}
        for sq, piece in changes.items():
            row = touched.get(sq.rank)
            if row is None:
                row = touched[sq.rank] = list(rows[sq.rank])
            row[sq.file] = piece
        for rank, row in touched.items():
            rows[rank] = tuple(row)
        return Board(tuple(rows))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, every piece unmoved."""
        changes: dict[Square, Piece | None] = {}
        for color in Color:
            for f, pt in enumerate(_BACK_RANK):
                changes[Square(f, color.back_rank)] = Piece(color, pt)
                changes[Square(f, color.pawn_rank)] = Piece(color, PieceType.PAWN)
        return cls().with_changes(changes)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for rank, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{BOARD_SIZE - rank} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
