"""Tests for legal move enumeration."""

from hotseat.core.enums import Color
from hotseat.core.move_generator import MoveGenerator, legal_destinations
from hotseat.core.notation import position_from_fen
from hotseat.core.position import Position
from hotseat.core.rules import is_in_check
from hotseat.core.types import parse_square


def _names(squares: frozenset) -> set[str]:
    return {sq.name for sq in squares}


class TestStartingPosition:
    def test_twenty_moves(self) -> None:
        assert len(MoveGenerator(Position.initial()).generate_legal_moves()) == 20

    def test_pawn(self) -> None:
        dests = legal_destinations(Position.initial(), parse_square("e2"))
        assert _names(dests) == {"e3", "e4"}

    def test_knight(self) -> None:
        dests = legal_destinations(Position.initial(), parse_square("b1"))
        assert _names(dests) == {"a3", "c3"}

    def test_boxed_in_pieces(self) -> None:
        pos = Position.initial()
        for name in ("e1", "d1", "a1", "c1"):
            assert legal_destinations(pos, parse_square(name)) == frozenset()

    def test_opponent_piece_has_none(self) -> None:
        assert legal_destinations(Position.initial(), parse_square("e7")) == frozenset()

    def test_empty_square_has_none(self) -> None:
        assert legal_destinations(Position.initial(), parse_square("e4")) == frozenset()


class TestConstrainedPositions:
    def test_pinned_bishop_frozen(self) -> None:
        pos = position_from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        assert legal_destinations(pos, parse_square("e2")) == frozenset()
        assert _names(legal_destinations(pos, parse_square("e1"))) == {
            "d1",
            "d2",
            "f1",
            "f2",
        }

    def test_king_avoids_attacked_file(self) -> None:
        pos = position_from_fen("3rk3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert _names(legal_destinations(pos, parse_square("e1"))) == {
            "e2",
            "f1",
            "f2",
        }

    def test_castling_destinations_included(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        dests = _names(legal_destinations(pos, parse_square("e1")))
        assert {"c1", "g1"} <= dests

    def test_no_destination_leaves_king_in_check(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/2N5/P7/4K3 w - - 0 1")
        gen = MoveGenerator(pos)
        moves = gen.generate_legal_moves()
        assert moves
        assert gen.has_legal_move()
        for from_sq, to_sq in moves:
            piece = pos.board[from_sq]
            board = pos.board.with_changes({from_sq: None, to_sq: piece})
            assert not is_in_check(Position(board, Color.WHITE))

    def test_checkmated_side_has_nothing(self) -> None:
        pos = position_from_fen(
            "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
        )
        gen = MoveGenerator(pos)
        assert gen.generate_legal_moves() == []
        assert not gen.has_legal_move()
