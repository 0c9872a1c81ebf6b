"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, MoveGenerator, parse_position

    gen = MoveGenerator(Board.initial())
    print(gen.legal_moves(parse_position("b1")))
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameState, PieceType
from chessrules.core.errors import (
    BoardCorruptedError,
    ChessError,
    IllegalMoveError,
    InvalidStateError,
    ParseError,
    PromotionError,
)
from chessrules.core.move_generator import MAX_CHECK_DEPTH, MoveGenerator, Trial
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    format_position,
    parse_position,
    parse_promotion_choice,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    offset_square,
    rank_of,
    square_from_index,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameState",
    "PieceType",
    # Errors
    "BoardCorruptedError",
    "ChessError",
    "IllegalMoveError",
    "InvalidStateError",
    "ParseError",
    "PromotionError",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "offset_square",
    "rank_of",
    "square_from_index",
    "square_name",
    # Domain objects
    "Board",
    "MAX_CHECK_DEPTH",
    "MoveGenerator",
    "Piece",
    "Rules",
    "Trial",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "format_position",
    "parse_position",
    "parse_promotion_choice",
    "position_from_fen",
    "position_to_fen",
]
