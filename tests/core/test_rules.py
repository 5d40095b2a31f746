"""Tests for move legality: piece shapes, castling, en passant, self-check."""

import pytest

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.notation import position_from_fen
from hotseat.core.piece import Piece
from hotseat.core.position import Position
from hotseat.core.rules import (
    Rules,
    castling_rook_squares,
    evaluate,
    is_attacked,
    is_en_passant_capture,
    is_in_check,
    is_legal,
)
from hotseat.core.types import parse_square


def _legal(fen_or_pos: str | Position, move: str) -> bool:
    pos = (
        position_from_fen(fen_or_pos) if isinstance(fen_or_pos, str) else fen_or_pos
    )
    return is_legal(pos, parse_square(move[:2]), parse_square(move[2:4]))


def _lone(piece_sq: str, piece: Piece, side: Color = Color.WHITE) -> Position:
    """Kings on a1/h8 plus one extra piece."""
    board = Board.empty().with_changes(
        {
            parse_square("a1"): Piece(Color.WHITE, PieceType.KING, True),
            parse_square("h8"): Piece(Color.BLACK, PieceType.KING, True),
            parse_square(piece_sq): piece,
        }
    )
    return Position(board, side)


class TestPreconditions:
    def test_empty_origin(self) -> None:
        assert not _legal(Position.initial(), "e4e5")

    def test_wrong_side(self) -> None:
        assert not _legal(Position.initial(), "e7e5")

    def test_own_piece_on_target(self) -> None:
        assert not _legal(Position.initial(), "a1a2")

    def test_null_move(self) -> None:
        assert not _legal(Position.initial(), "e2e2")


class TestPawn:
    def test_single_and_double_step(self) -> None:
        pos = Position.initial()
        assert _legal(pos, "e2e3")
        assert _legal(pos, "e2e4")
        assert not _legal(pos, "e2e5")

    def test_black_moves_down(self) -> None:
        pos = Position(Board.initial(), Color.BLACK)
        assert _legal(pos, "d7d5")
        assert not _legal(pos, "d7d8")

    def test_no_backward_step(self) -> None:
        assert not _legal("4k3/8/8/8/4P3/8/8/4K3 w - - 0 1", "e4e3")

    def test_double_step_only_from_start(self) -> None:
        assert not _legal("4k3/8/8/8/8/4P3/8/4K3 w - - 0 1", "e3e5")

    def test_blocked_directly_ahead(self) -> None:
        fen = "4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1"
        assert not _legal(fen, "e2e3")
        assert not _legal(fen, "e2e4")

    def test_double_step_blocked_on_landing(self) -> None:
        fen = "4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1"
        assert _legal(fen, "e2e3")
        assert not _legal(fen, "e2e4")

    def test_cannot_capture_forward(self) -> None:
        assert not _legal("4k3/8/8/4p3/4P3/8/8/4K3 w - - 0 1", "e4e5")

    def test_diagonal_needs_enemy(self) -> None:
        fen = "4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1"
        assert _legal(fen, "e4d5")
        assert not _legal(fen, "e4f5")


class TestSlidersAndJumpers:
    def test_rook_lines(self) -> None:
        pos = _lone("d4", Piece(Color.WHITE, PieceType.ROOK))
        assert _legal(pos, "d4d8")
        assert _legal(pos, "d4h4")
        assert not _legal(pos, "d4e5")

    def test_rook_blocked(self) -> None:
        fen = "4k3/8/8/3P4/3R4/8/8/4K3 w - - 0 1"
        assert _legal(fen, "d4a4")
        assert not _legal(fen, "d4d6")

    def test_bishop_diagonals(self) -> None:
        pos = _lone("c1", Piece(Color.WHITE, PieceType.BISHOP))
        assert _legal(pos, "c1g5")
        assert not _legal(pos, "c1c4")

    def test_queen_combines(self) -> None:
        pos = _lone("d4", Piece(Color.WHITE, PieceType.QUEEN))
        assert _legal(pos, "d4d7")
        assert _legal(pos, "d4g7")
        assert not _legal(pos, "d4e6")

    def test_knight_jumps_over(self) -> None:
        pos = Position.initial()
        assert _legal(pos, "b1c3")
        assert _legal(pos, "g1h3")
        assert not _legal(pos, "b1b3")

    def test_king_one_step(self) -> None:
        pos = _lone("d4", Piece(Color.WHITE, PieceType.ROOK))
        assert _legal(pos, "a1b2")
        assert not _legal(pos, "a1a3")


class TestAttack:
    def test_pawn_attacks_empty_diagonals(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4p3/8/8/4K3 w - - 0 1")
        assert is_attacked(pos.board, parse_square("d3"), Color.BLACK)
        assert is_attacked(pos.board, parse_square("f3"), Color.BLACK)
        assert not is_attacked(pos.board, parse_square("e3"), Color.BLACK)

    def test_blocked_slider_does_not_attack(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/8/4P3/4K3 w - - 0 1")
        assert not is_in_check(pos)
        assert is_attacked(pos.board, parse_square("e2"), Color.BLACK)

    def test_in_check(self) -> None:
        pos = position_from_fen("4r1k1/8/8/8/8/8/8/4K3 w - - 0 1")
        assert is_in_check(pos)
        assert not is_in_check(pos, Color.BLACK)


class TestSelfCheck:
    def test_pinned_piece_cannot_leave_line(self) -> None:
        fen = "4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1"
        assert not _legal(fen, "e2d3")
        assert not _legal(fen, "e2f1")

    def test_pinned_rook_slides_along_pin(self) -> None:
        fen = "4k3/4r3/8/8/8/8/4R3/4K3 w - - 0 1"
        assert _legal(fen, "e2e7")
        assert _legal(fen, "e2e4")
        assert not _legal(fen, "e2d2")

    def test_king_cannot_step_into_attack(self) -> None:
        fen = "3rk3/8/8/8/8/8/8/4K3 w - - 0 1"
        assert not _legal(fen, "e1d1")
        assert not _legal(fen, "e1d2")
        assert _legal(fen, "e1f1")

    def test_must_answer_check(self) -> None:
        fen = "4r1k1/8/8/8/8/8/P7/4K3 w - - 0 1"
        assert not _legal(fen, "a2a3")
        assert _legal(fen, "e1d1")

    def test_king_may_capture_unprotected_attacker(self) -> None:
        assert _legal("6k1/8/8/8/8/8/4r3/4K3 w - - 0 1", "e1e2")

    def test_king_may_not_capture_protected_attacker(self) -> None:
        assert not _legal("4r1k1/8/8/8/8/8/4r3/4K3 w - - 0 1", "e1e2")


class TestCastling:
    BOTH = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

    def test_both_sides_available(self) -> None:
        assert _legal(self.BOTH, "e1g1")
        assert _legal(self.BOTH, "e1c1")

    def test_black_castles(self) -> None:
        fen = self.BOTH.replace(" w ", " b ")
        assert _legal(fen, "e8g8")
        assert _legal(fen, "e8c8")

    def test_no_rights_when_flags_moved(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R w - - 0 1"
        assert not _legal(fen, "e1g1")
        assert not _legal(fen, "e1c1")

    def test_moved_rook_only_blocks_its_side(self) -> None:
        fen = "r3k2r/8/8/8/8/8/8/R3K2R w Q - 0 1"
        assert not _legal(fen, "e1g1")
        assert _legal(fen, "e1c1")

    def test_path_must_be_empty(self) -> None:
        assert not _legal("4k3/8/8/8/8/8/8/R3K1NR w KQ - 0 1", "e1g1")
        # b1 is between king and rook even though the king never crosses it
        assert not _legal("4k3/8/8/8/8/8/8/RN2K2R w KQ - 0 1", "e1c1")

    def test_not_out_of_check(self) -> None:
        fen = "4k3/4r3/8/8/8/8/8/R3K2R w KQ - 0 1"
        assert not _legal(fen, "e1g1")
        assert not _legal(fen, "e1c1")

    def test_not_through_attacked_square(self) -> None:
        fen = "4kr2/8/8/8/8/8/8/R3K2R w KQ - 0 1"
        assert not _legal(fen, "e1g1")
        assert _legal(fen, "e1c1")

    def test_not_into_attacked_square(self) -> None:
        assert not _legal("4k1r1/8/8/8/8/8/8/R3K2R w KQ - 0 1", "e1g1")

    def test_attacked_b_file_does_not_stop_long_castling(self) -> None:
        assert _legal("1r2k3/8/8/8/8/8/8/R3K2R w KQ - 0 1", "e1c1")

    def test_rook_squares(self) -> None:
        e1 = parse_square("e1")
        assert castling_rook_squares(e1, parse_square("g1")) == (
            parse_square("h1"),
            parse_square("f1"),
        )
        assert castling_rook_squares(e1, parse_square("c1")) == (
            parse_square("a1"),
            parse_square("d1"),
        )


class TestEnPassant:
    WHITE_EP = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"

    def test_capture_onto_target(self) -> None:
        pos = position_from_fen(self.WHITE_EP)
        assert is_en_passant_capture(pos, parse_square("e5"), parse_square("d6"))
        assert _legal(pos, "e5d6")

    def test_no_target_no_capture(self) -> None:
        fen = self.WHITE_EP.replace(" d6 ", " - ")
        assert not _legal(fen, "e5d6")

    def test_black_side(self) -> None:
        fen = "4k3/8/8/8/3pP3/8/8/4K3 b - e3 0 1"
        assert _legal(fen, "d4e3")

    def test_exposing_own_king_is_illegal(self) -> None:
        # Both pawns leave rank 5 and open the rook's line to the king.
        fen = "8/8/8/K2pP2r/8/8/8/7k w - d6 0 1"
        assert not _legal(fen, "e5d6")
        assert _legal(fen, "e5e6")


class TestEvaluate:
    def test_start_is_quiet(self) -> None:
        status = evaluate(Position.initial())
        assert not (status.is_check or status.is_checkmate or status.is_stalemate)

    def test_checkmate(self) -> None:
        pos = position_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        status = evaluate(pos)
        assert status.is_check and status.is_checkmate
        assert Rules.is_checkmate(pos)

    def test_stalemate(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        status = evaluate(pos)
        assert status.is_stalemate and status.is_draw
        assert not status.is_check
        assert Rules.is_stalemate(pos)

    def test_check_with_escape(self) -> None:
        status = evaluate(position_from_fen("4k3/8/8/8/8/8/8/4K2r w - - 0 1"))
        assert status.is_check
        assert not status.is_checkmate


@pytest.mark.parametrize(
    "fen",
    [
        "4k3/8/8/8/8/8/8/4K3 w - - 0 1",
        "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1",
    ],
)
def test_rules_facade_matches_functions(fen: str) -> None:
    pos = position_from_fen(fen)
    assert Rules.is_in_check(pos) == is_in_check(pos)
    assert Rules.evaluate(pos) == evaluate(pos)
