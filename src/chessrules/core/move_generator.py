"""Legal move generation, the trial-move filter and check detection.

Legality is decided by simulation: a candidate move is played on a copy
of the board and the mover's king is tested for attack. Testing for
attack generates the enemy's moves, which would in turn filter their own
candidates the same way. The ``depth`` argument bounds this mutual
recursion: each hop from a trial move into check detection costs one
unit, and a trial move made with ``depth <= 1`` skips the self-check
test entirely. With the default budget of 2 the filter sees exactly one
ply of enemy replies, which is all "would my king be capturable" needs.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import BoardCorruptedError
from chessrules.core.movement import lines_for, pawn_captures, pawn_pushes
from chessrules.core.types import Offset, Square, offset_square, rank_of, square_name

_LOGGER = logging.getLogger(__name__)

MAX_CHECK_DEPTH = 2


class Trial(NamedTuple):
    """Outcome of trying one offset from an occupied square.

    ``legal``: the destination may be moved to without leaving the
    mover's king in check (within the depth budget).
    ``keep_scanning``: the destination was empty, so a sliding piece may
    look further along the same line.
    """

    legal: bool
    keep_scanning: bool


_REJECTED = Trial(legal=False, keep_scanning=False)


class MoveGenerator:
    """Generates legal destinations on a given :class:`Board`.

    The generator never mutates the board it wraps; hypothetical
    positions are explored on copies.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square, depth: int = MAX_CHECK_DEPTH) -> list[Square]:
        """Legal destinations for the piece on *sq* (empty if *sq* is empty)."""
        piece = self._board[sq]
        if piece is None:
            return []
        if piece.piece_type == PieceType.PAWN:
            return self._pawn_moves(sq, piece.color, depth)

        moves: list[Square] = []
        for line in lines_for(piece.piece_type):
            for offset in line:
                trial = self.try_move(sq, offset, depth)
                if trial.legal:
                    moves.append(offset_square(sq, offset))
                if not trial.keep_scanning:
                    break
        return moves

    def all_legal_moves(
        self, color: Color, depth: int = MAX_CHECK_DEPTH
    ) -> dict[Square, list[Square]]:
        """Legal destinations for every piece of *color* that has any."""
        result: dict[Square, list[Square]] = {}
        for sq in self._board.occupied(color):
            moves = self.legal_moves(sq, depth)
            if moves:
                result[sq] = moves
        return result

    def has_legal_move(self, color: Color, depth: int = MAX_CHECK_DEPTH) -> bool:
        """Whether any piece of *color* can move; stops at the first hit."""
        return any(self.legal_moves(sq, depth) for sq in self._board.occupied(color))

    # -- Trial move --------------------------------------------------------

    def try_move(self, origin: Square, offset: Offset, depth: int) -> Trial:
        """Try moving the piece on *origin* by *offset*.

        Raises :class:`BoardCorruptedError` if *origin* is empty.
        """
        board = self._board
        piece = board[origin]
        if piece is None:
            raise BoardCorruptedError(
                f"Trial move from empty square {square_name(origin)}"
            )

        try:
            target_sq = offset_square(origin, offset)
        except ValueError:
            return _REJECTED

        target = board[target_sq]
        if target is not None and target.color == piece.color:
            return _REJECTED

        keep_scanning = target is None
        if depth <= 1:
            return Trial(legal=True, keep_scanning=keep_scanning)

        hypothetical = board.copy()
        hypothetical.move_piece(origin, target_sq)
        exposed = MoveGenerator(hypothetical).is_in_check(piece.color, depth - 1)
        return Trial(legal=not exposed, keep_scanning=keep_scanning)

    # -- Attack detection ----------------------------------------------------

    def is_in_check(self, color: Color, depth: int = MAX_CHECK_DEPTH) -> bool:
        """Is *color*'s king reachable by any enemy piece?

        Enemy moves are generated with the same *depth*, so at ``depth=2``
        an enemy piece that is itself pinned does not count as attacking.
        """
        king_sq = self._board.king_square(color)
        for sq in self._board.occupied(color.opposite):
            if king_sq in self.legal_moves(sq, depth):
                _LOGGER.debug(
                    "%s king on %s attacked from %s",
                    color.name,
                    square_name(king_sq),
                    square_name(sq),
                )
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _pawn_moves(self, sq: Square, color: Color, depth: int) -> list[Square]:
        moves: list[Square] = []

        # Forward steps count only onto empty squares.
        for offset in pawn_pushes(color, rank_of(sq)):
            trial = self.try_move(sq, offset, depth)
            if trial.legal and trial.keep_scanning:
                moves.append(offset_square(sq, offset))
            if not trial.keep_scanning:
                break

        # Diagonal steps count only as captures.
        for offset in pawn_captures(color):
            trial = self.try_move(sq, offset, depth)
            if trial.legal and not trial.keep_scanning:
                moves.append(offset_square(sq, offset))

        return moves
