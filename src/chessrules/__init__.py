"""Chess rules engine: legal moves, check detection and game-state tracking."""

from chessrules.core import Color, GameState, PieceType, parse_position
from chessrules.game import Session

__all__ = ["Color", "GameState", "PieceType", "Session", "parse_position"]
