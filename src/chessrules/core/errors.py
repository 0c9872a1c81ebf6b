"""Exception hierarchy.

Everything derived from :class:`ChessError` is a recoverable, user-facing
failure that leaves the game untouched. :class:`BoardCorruptedError` marks
a broken board invariant and is meant to propagate.
"""

from __future__ import annotations


class ChessError(Exception):
    """Base class for rejected user actions."""


class ParseError(ChessError, ValueError):
    """Position or FEN text could not be parsed."""


class IllegalMoveError(ChessError):
    """The requested move is not in the piece's legal-move set."""


class InvalidStateError(ChessError):
    """The action is not allowed in the current game state."""


class PromotionError(ChessError, ValueError):
    """Invalid promotion target."""


class BoardCorruptedError(RuntimeError):
    """Board invariant violated: missing king or moving from an empty square."""
