"""Square names, promotion choices and FEN piece placement."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import ParseError, PromotionError
from chessrules.core.piece import Piece
from chessrules.core.types import FILES, RANKS, Square, make_square, square_name

STARTING_FEN = "rnbkqbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBKQBNR w"

_PROMOTION_CHOICES: dict[str, PieceType] = {
    "queen": PieceType.QUEEN,
    "rook": PieceType.ROOK,
    "bishop": PieceType.BISHOP,
    "knight": PieceType.KNIGHT,
}


# ── Squares ─────────────────────────────────────────────────────────────────


def parse_position(text: str) -> Square:
    """Parse a square name such as ``'e4'`` or ``' E4 '`` into a square."""
    chars = text.strip().lower()
    if len(chars) != 2:
        raise ParseError(f"Input {text} is of invalid length.")

    file_char, rank_char = chars
    if file_char not in FILES:
        raise ParseError(
            f"First character '{file_char}' of string invalid, "
            "should be some character between a-h"
        )
    if rank_char not in RANKS:
        raise ParseError(
            f"Second character '{rank_char}' of string invalid, "
            "should be some number between 1-8"
        )
    return make_square(FILES.index(file_char), RANKS.index(rank_char))


def format_position(sq: Square) -> str:
    """Inverse of :func:`parse_position`, always lower case."""
    return square_name(sq)


# ── Promotion ───────────────────────────────────────────────────────────────


def parse_promotion_choice(text: str) -> PieceType:
    """Map ``'queen'``/``'rook'``/``'bishop'``/``'knight'`` to a piece type."""
    name = text.strip().lower()
    try:
        return _PROMOTION_CHOICES[name]
    except KeyError:
        pass
    if name == "king":
        raise PromotionError("You can't promote a pawn to a king!")
    if name == "pawn":
        raise PromotionError("You can't promote a pawn to a pawn!")
    raise PromotionError(f"Invalid input '{name}'.")


# ── FEN ─────────────────────────────────────────────────────────────────────


def board_from_fen(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ParseError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ParseError(f"Invalid FEN digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ParseError(f"Invalid FEN rank width: {placement!r}")
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise ParseError(f"{exc} in FEN {placement!r}") from None
                file += 1
            if file > 8:
                raise ParseError(f"Invalid FEN rank width: {placement!r}")
        if file != 8:
            raise ParseError(f"Invalid FEN rank width: {placement!r}")
    return board


def position_from_fen(fen: str) -> tuple[Board, Color]:
    """Parse a FEN string into a board and the side to move.

    Castling, en-passant and clock fields are accepted but ignored.
    """
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ParseError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ParseError(f"Invalid FEN side-to-move field: {side_part!r}")
    return board, side


def board_to_fen(board: Board) -> str:
    """Serialise piece placement (rank 8 first)."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        row = ""
        empty = 0
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_to_fen(board: Board, side_to_move: Color) -> str:
    side = "w" if side_to_move == Color.WHITE else "b"
    return f"{board_to_fen(board)} {side}"
