"""Per-piece movement rules.

Every piece type maps to a tuple of *lines*: sequences of offsets from the
origin that are scanned in order until the first blocked square. Single-step
pieces (king, knight) get one-offset lines, sliders get one seven-offset
line per direction. Pawns are asymmetric and handled separately.

These tables say where a piece may *look*; occupancy and self-check are
decided by the legality filter in :mod:`chessrules.core.move_generator`.
"""

from __future__ import annotations

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Offset

Line = tuple[Offset, ...]

KNIGHT_OFFSETS: tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Offset, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Offset, ...] = BISHOP_DIRS + ROOK_DIRS

_MAX_DISTANCE = 7


def _steps(offsets: tuple[Offset, ...]) -> tuple[Line, ...]:
    return tuple((offset,) for offset in offsets)


def _rays(directions: tuple[Offset, ...]) -> tuple[Line, ...]:
    return tuple(
        tuple((d_rank * n, d_file * n) for n in range(1, _MAX_DISTANCE + 1))
        for d_rank, d_file in directions
    )


PIECE_LINES: dict[PieceType, tuple[Line, ...]] = {
    PieceType.KING: _steps(KING_OFFSETS),
    PieceType.QUEEN: _rays(QUEEN_DIRS),
    PieceType.ROOK: _rays(ROOK_DIRS),
    PieceType.BISHOP: _rays(BISHOP_DIRS),
    PieceType.KNIGHT: _steps(KNIGHT_OFFSETS),
}


def lines_for(piece_type: PieceType) -> tuple[Line, ...]:
    """Scan lines for a non-pawn piece type."""
    try:
        return PIECE_LINES[piece_type]
    except KeyError:
        raise ValueError(f"{piece_type.name} has no line-based movement") from None


def pawn_pushes(color: Color, rank: int) -> Line:
    """Forward steps: one square, plus a second from the starting rank."""
    forward = color.forward
    if rank == color.pawn_start_rank:
        return ((forward, 0), (2 * forward, 0))
    return ((forward, 0),)


def pawn_captures(color: Color) -> tuple[Offset, Offset]:
    """Diagonal forward steps, legal only onto an enemy piece."""
    forward = color.forward
    return ((forward, 1), (forward, -1))
