from .game.controller import run_game
from .game.state import GameState, Player, new_game

__all__ = [
    "GameState",
    "Player",
    "new_game",
    "run_game",
]
