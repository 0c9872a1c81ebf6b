"""Tests for Rules: check, checkmate, stalemate and state classification."""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameState, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import board_from_fen
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import D1, D8, E4, E8


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_rook_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)


class TestCheckmate:
    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8")
        assert Rules.is_checkmate(board, Color.BLACK)
        assert not Rules.is_stalemate(board, Color.BLACK)

    def test_protected_attacker(self) -> None:
        board = board_from_fen("4r2k/8/8/8/8/8/4q3/4K3")
        assert Rules.is_checkmate(board, Color.WHITE)

    def test_not_checkmate_when_can_escape(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3")
        assert not Rules.is_checkmate(board, Color.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)

    def test_not_stalemate_when_has_moves(self) -> None:
        board = board_from_fen("7k/8/5K2/8/8/8/8/8")
        assert not Rules.is_stalemate(board, Color.BLACK)

    def test_has_legal_move(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        assert not Rules.has_legal_move(board, Color.BLACK)
        assert Rules.has_legal_move(board, Color.WHITE)
        assert Rules.has_legal_move(Board.initial(), Color.WHITE)


class TestPromotionPending:
    def test_white_pawn_on_last_rank(self) -> None:
        board = board_from_fen("3kP3/8/8/8/8/8/8/3K4")
        assert Rules.is_promotion_pending(board, E8)

    def test_black_pawn_on_first_rank(self) -> None:
        board = board_from_fen("3k4/8/8/8/8/8/8/3Kp3")
        assert Rules.is_promotion_pending(board, 4)

    def test_other_piece_on_last_rank(self) -> None:
        board = board_from_fen("3kQ3/8/8/8/8/8/8/3K4")
        assert not Rules.is_promotion_pending(board, E8)

    def test_pawn_elsewhere(self) -> None:
        board = Board.initial()
        board.move_piece(12, E4)
        assert not Rules.is_promotion_pending(board, E4)

    def test_nothing_moved_yet(self) -> None:
        assert not Rules.is_promotion_pending(Board.initial(), None)


class TestClassify:
    def test_in_progress_at_start(self) -> None:
        assert Rules.classify(Board.initial(), Color.WHITE) == GameState.IN_PROGRESS

    def test_check(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.classify(board, Color.WHITE) == GameState.CHECK

    def test_checkmate_is_game_over(self) -> None:
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8")
        assert Rules.classify(board, Color.BLACK) == GameState.GAME_OVER

    def test_stalemate_is_game_over(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        assert Rules.classify(board, Color.BLACK) == GameState.GAME_OVER

    def test_promotion_takes_precedence(self) -> None:
        # Black would be stalemated, but the promotion choice comes first.
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8")
        board[D8] = Piece(Color.WHITE, PieceType.PAWN)
        assert (
            Rules.classify(board, Color.BLACK, D8)
            == GameState.WAITING_ON_PROMOTION_CHOICE
        )

    def test_last_moved_non_pawn_is_ignored(self) -> None:
        board = Board.initial()
        assert Rules.classify(board, Color.WHITE, D1) == GameState.IN_PROGRESS

    def test_pinned_attacker_does_not_give_check(self) -> None:
        # The c3 bishop eyes a1 but is pinned to its own king by the c1 rook.
        board = board_from_fen("2k5/8/8/8/8/2b5/8/K1R5")
        generator = MoveGenerator(board)
        assert generator.is_in_check(Color.WHITE, depth=1)
        assert not generator.is_in_check(Color.WHITE)
        assert Rules.classify(board, Color.WHITE) == GameState.IN_PROGRESS
