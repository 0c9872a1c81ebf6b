"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row direction a pawn of this color advances in."""
        return 1 if self is Color.WHITE else -1

    @property
    def pawn_start_rank(self) -> int:
        return 1 if self is Color.WHITE else 6

    @property
    def last_rank(self) -> int:
        """Farthest rank from this color's own back rank."""
        return 7 if self is Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    """Closed set of piece kinds. The ordering carries no value semantics."""

    KING = auto()
    QUEEN = auto()
    ROOK = auto()
    KNIGHT = auto()
    BISHOP = auto()
    PAWN = auto()


class GameState(IntEnum):
    """Status of a game after the last applied move.

    ``GAME_OVER`` covers both checkmate and stalemate and is absorbing.
    """

    IN_PROGRESS = auto()
    CHECK = auto()
    WAITING_ON_PROMOTION_CHOICE = auto()
    GAME_OVER = auto()

    @property
    def accepts_moves(self) -> bool:
        return self in (GameState.IN_PROGRESS, GameState.CHECK)

    def __str__(self) -> str:
        return "".join(word.capitalize() for word in self.name.split("_"))
