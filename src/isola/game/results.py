from __future__ import annotations
from typing import Optional, Tuple

from isola.core.rules import has_legal_move, other
from isola.game.state import GameState
from isola.types import PlayerId


def loser(state: GameState) -> Optional[PlayerId]:
    """The active player, if they are boxed in at the start of their turn."""
    if has_legal_move(state.board, state.active.position):
        return None
    return state.current


def outcome(state: GameState) -> Optional[Tuple[PlayerId, PlayerId]]:
    """(loser, winner) once the game is over, else None."""
    lost = loser(state)
    if lost is None:
        return None
    return lost, other(lost)
