"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.enums import GameState
from chessrules.game.session import Session

Play = Callable[[Session, str], GameState]


def _play(session: Session, moves: str) -> GameState:
    tokens = moves.split()
    state = session.get_game_state()
    for from_text, to_text in zip(tokens[::2], tokens[1::2]):
        state = session.make_move(from_text, to_text)
    return state


@pytest.fixture()
def play() -> Play:
    """Apply whitespace-separated ``from to`` pairs to a session."""
    return _play


@pytest.fixture()
def session() -> Session:
    return Session.new()
