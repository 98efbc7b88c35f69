"""
Pytest configuration and shared fixtures.
"""

import pytest

from isola.core.board import Board
from isola.game.state import GameState, Player
from isola.types import Occupied, Tile


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    """No ANSI escapes in captured output."""
    monkeypatch.setattr("isola.ui.render.CLEAR_SCREEN", False)
    monkeypatch.setattr("isola.config.USE_COLOR", False)


class ScriptedInput:
    """Stands in for input(): hands out canned answers and records prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {prompt!r}")
        return self.answers.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def make_state():
    """
    Build a GameState with pieces at arbitrary squares and an optional set of
    dead squares.
    """
    def _make(p1=(0, 3), p2=(6, 3), dead=(), current="P1"):
        board = Board()
        for r, c in dead:
            board.set(r, c, Tile.DEAD)
        players = {
            "P1": Player("P1", "B", *p1),
            "P2": Player("P2", "W", *p2),
        }
        for pid, p in players.items():
            board.set(p.row, p.col, Occupied(pid))
        return GameState(board=board, players=players, current=current)

    return _make
