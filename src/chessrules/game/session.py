"""Game session — owns the board, the side to move and the game state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameState, PieceType
from chessrules.core.errors import IllegalMoveError, InvalidStateError, ParseError
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    parse_position,
    parse_promotion_choice,
    position_from_fen,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, square_from_index, square_name

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None
    state_after: GameState
    promotion: PieceType | None = None

    def __str__(self) -> str:
        text = f"{square_name(self.from_sq)} {square_name(self.to_sq)}"
        if self.promotion is not None:
            text += f" ={self.promotion.name.lower()}"
        return text


def _to_square(value: Square | str) -> Square:
    if isinstance(value, str):
        return parse_position(value)
    try:
        return square_from_index(value)
    except ValueError as exc:
        raise ParseError(str(exc)) from None


class Session:
    """A single game, the only mutable object in the engine.

    Every public mutator either fully succeeds or raises a
    :class:`~chessrules.core.errors.ChessError` and leaves the session
    untouched.
    """

    __slots__ = ("_board", "_active_colour", "_state", "_last_moved_to", "_history")

    def __init__(
        self, board: Board | None = None, active_colour: Color = Color.WHITE
    ) -> None:
        self._board = Board.initial() if board is None else board.copy()
        self._active_colour = active_colour
        self._last_moved_to: Square | None = None
        self._history: list[MoveRecord] = []
        self._state = Rules.classify(self._board, self._active_colour)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new(cls) -> Session:
        """Standard starting position, White to move."""
        return cls()

    @classmethod
    def from_fen(cls, fen: str) -> Session:
        board, side = position_from_fen(fen)
        return cls(board, side)

    # ── Queries ──────────────────────────────────────────────────────────

    def get_game_state(self) -> GameState:
        return self._state

    def get_active_colour(self) -> Color:
        return self._active_colour

    def get_board(self) -> Board:
        """A copy of the current board."""
        return self._board.copy()

    def get_piece(self, square: Square | str) -> Piece | None:
        return self._board[_to_square(square)]

    def get_possible_moves(self, square: Square | str) -> list[Square]:
        """Legal destinations for whatever stands on *square*.

        Turn order is not checked here; that is :meth:`make_move`'s job.
        """
        return MoveGenerator(self._board).legal_moves(_to_square(square))

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def last_moved_to(self) -> Square | None:
        return self._last_moved_to

    def to_fen(self) -> str:
        return position_to_fen(self._board, self._active_colour)

    # ── Mutators ─────────────────────────────────────────────────────────

    def make_move(self, from_sq: Square | str, to_sq: Square | str) -> GameState:
        """Move a piece and return the resulting game state."""
        if not self._state.accepts_moves:
            raise InvalidStateError(
                "The game is not in a state where a move can be made. "
                f"Currently, the state is {self._state}."
            )

        origin = _to_square(from_sq)
        target = _to_square(to_sq)

        piece = self._board[origin]
        if piece is None:
            raise IllegalMoveError(
                "There is no piece on the square you are trying to move from."
            )
        if piece.color != self._active_colour:
            raise IllegalMoveError("It is not this colour's turn!")

        if target not in self.get_possible_moves(origin):
            _LOGGER.debug(
                "Rejected %s %s -> %s",
                piece.piece_type.name,
                square_name(origin),
                square_name(target),
            )
            raise IllegalMoveError(
                "Illegal move. (This might mean that this piece cannot move this way, "
                "or that it puts your king in check!)"
            )

        captured = self._board.move_piece(origin, target)
        self._last_moved_to = target
        self._active_colour = self._active_colour.opposite
        self._update_state()

        self._history.append(
            MoveRecord(
                from_sq=origin,
                to_sq=target,
                piece=piece,
                captured=captured,
                state_after=self._state,
            )
        )
        _LOGGER.debug(
            "%s %s %s -> %s",
            piece.color.name,
            piece.piece_type.name,
            square_name(origin),
            square_name(target),
        )
        return self._state

    def set_promotion(self, piece_name: str) -> GameState:
        """Replace the pawn awaiting promotion and reclassify the game."""
        if self._state != GameState.WAITING_ON_PROMOTION_CHOICE:
            raise InvalidStateError(
                "The game is not currently waiting on a promotion. "
                f"Currently, the state is {self._state}."
            )
        piece_type = parse_promotion_choice(piece_name)

        # A pending promotion implies a pawn on the last-moved square.
        sq = self._last_moved_to
        assert sq is not None
        pawn = self._board[sq]
        assert pawn is not None

        self._board[sq] = Piece(pawn.color, piece_type)
        self._active_colour = self._active_colour.opposite
        self._update_state()

        if self._history:
            self._history[-1] = replace(
                self._history[-1], promotion=piece_type, state_after=self._state
            )
        _LOGGER.debug(
            "Promoted %s pawn on %s to %s",
            pawn.color.name,
            square_name(sq),
            piece_type.name,
        )
        return self._state

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_state(self) -> None:
        previous = self._state
        self._state = Rules.classify(
            self._board, self._active_colour, self._last_moved_to
        )
        if self._state != previous:
            _LOGGER.info("Game state %s -> %s", previous, self._state)

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __str__(self) -> str:
        return self._board.render()

    def __repr__(self) -> str:
        return (
            f"Session(state={self._state}, active_colour={self._active_colour}, "
            f"fen={self.to_fen()!r})"
        )
