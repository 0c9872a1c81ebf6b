"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import BoardCorruptedError
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2, E4,
    A8, B8, C8, D8, E8, F8, G8, H8,
)

STARTING_GRID = """\
|:------------------------------:|
| wR  wKn wB  wK  wQ  wB  wKn wR |
| wP  wP  wP  wP  wP  wP  wP  wP |
| *   *   *   *   *   *   *   *  |
| *   *   *   *   *   *   *   *  |
| *   *   *   *   *   *   *   *  |
| *   *   *   *   *   *   *   *  |
| bP  bP  bP  bP  bP  bP  bP  bP |
| bR  bKn bB  bK  bQ  bB  bKn bR |
|:------------------------------:|"""


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[D1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E1] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[D8] == Piece(Color.BLACK, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.KING), (E1, PieceType.QUEEN), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.KING), (E8, PieceType.QUEEN), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        assert board.pieces(Color.WHITE, PieceType.PAWN) == list(range(8, 16))
        assert board.pieces(Color.BLACK, PieceType.PAWN) == list(range(48, 56))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is None

    def test_occupied(self) -> None:
        board = Board.initial()
        assert board.occupied(Color.WHITE) == list(range(0, 16))
        assert board.occupied(Color.BLACK) == list(range(48, 64))


class TestBoardRender:
    def test_starting_grid(self) -> None:
        assert Board.initial().render() == STARTING_GRID
        assert str(Board.initial()) == STARTING_GRID

    def test_empty_board(self) -> None:
        lines = Board().render().splitlines()
        assert len(lines) == 10
        assert lines[0] == lines[-1] == "|:------------------------------:|"
        assert all(line == "|" + " *  " * 8 + "|" for line in lines[1:-1])


class TestBoardMutation:
    def test_move_piece_returns_capture(self) -> None:
        board = Board.initial()
        captured = board.move_piece(E2, E4)
        assert captured is None
        assert board[E2] is None
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)

        captured = board.move_piece(A1, A8)
        assert captured == Piece(Color.BLACK, PieceType.ROOK)
        assert board[A8] == Piece(Color.WHITE, PieceType.ROOK)

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        assert clone == board
        clone.move_piece(E2, E4)
        assert clone != board
        assert board[E2] is not None

    def test_wrong_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board([None] * 63)


class TestKingSquare:
    def test_found(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == D1
        assert board.king_square(Color.BLACK) == D8

    def test_missing_king_is_fatal(self) -> None:
        board = Board()
        board[E1] = Piece(Color.WHITE, PieceType.KING)
        with pytest.raises(BoardCorruptedError):
            board.king_square(Color.BLACK)
