"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from hotseat.core.enums import Color, PieceType

# Letters and glyphs in PieceType order (pawn .. king).
_LETTERS = "PNBRQK"
_GLYPHS = {Color.WHITE: "♙♘♗♖♕♔", Color.BLACK: "♟♞♝♜♛♚"}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {
    (color, pt): letter if color == Color.WHITE else letter.lower()
    for color in Color
    for pt, letter in zip(PieceType, _LETTERS)
}
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {v: k for k, v in _FEN_CHARS.items()}
_UNICODE: dict[tuple[Color, PieceType], str] = {
    (color, pt): glyph
    for color, glyphs in _GLYPHS.items()
    for pt, glyph in zip(PieceType, glyphs)
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing one physical chess piece.

    ``has_moved`` belongs to the piece, not to the square: relocating a piece
    carries the flag along, and castling eligibility reads it directly.
    """

    color: Color
    piece_type: PieceType
    has_moved: bool = False

    # ── Derived copies ───────────────────────────────────────────────────

    def moved(self) -> Piece:
        """The same piece after it has made a move."""
        if self.has_moved:
            return self
        return replace(self, has_moved=True)

    def promoted(self, piece_type: PieceType) -> Piece:
        """The same piece turned into *piece_type* (keeps color and flag)."""
        return replace(self, piece_type=piece_type)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, has_moved: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' -> white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, has_moved)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
