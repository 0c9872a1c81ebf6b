"""High-level chess rules: check, checkmate/stalemate and game-state classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameState, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square, rank_of

if TYPE_CHECKING:
    from chessrules.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Checkmate and stalemate both end in GameState.GAME_OVER; castling and
    # en passant are not part of the movement rules.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return not gen.is_in_check(color) and not gen.has_legal_move(color)

    @staticmethod
    def is_promotion_pending(board: Board, last_moved_to: Square | None) -> bool:
        """Whether the piece just moved is a pawn standing on its last rank."""
        if last_moved_to is None:
            return False
        piece = board[last_moved_to]
        return (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and rank_of(last_moved_to) == piece.color.last_rank
        )

    @staticmethod
    def classify(
        board: Board, side_to_move: Color, last_moved_to: Square | None = None
    ) -> GameState:
        """Derive the game state for *side_to_move*.

        A pending promotion takes precedence over everything else; otherwise
        check and mobility decide between the remaining three states.
        """
        if Rules.is_promotion_pending(board, last_moved_to):
            return GameState.WAITING_ON_PROMOTION_CHOICE

        gen = MoveGenerator(board)
        can_move = gen.has_legal_move(side_to_move)
        if gen.is_in_check(side_to_move):
            return GameState.CHECK if can_move else GameState.GAME_OVER
        return GameState.IN_PROGRESS if can_move else GameState.GAME_OVER
