"""Game session layer.

Quick start::

    from chessrules.game import Session

    session = Session.new()
    session.make_move("d2", "d3")
    print(session)
"""

from chessrules.game.session import MoveRecord, Session

__all__ = [
    "MoveRecord",
    "Session",
]
