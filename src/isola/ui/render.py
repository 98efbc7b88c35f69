from __future__ import annotations

from isola.config import CLEAR_SCREEN
from isola.game.state import GameState
from isola.ui.colors import status as status_line

KEYPAD_LEGEND = "7-8-9\n4---6\n1-2-3\n"

RULES = (
    "********** Isola Game **********\n"
    "Each player has one piece.\n"
    "The Board has 7 by 7 positions, which initially contain\n"
    "free spaces ('+') except for the initial positions\n"
    "of the players. A Move consists of two subsequent actions:\n"
    "\n"
    "1. Moving one's piece to a neighboring (horizontally, vertically,\n"
    "diagonally) field that contains a '+' but not the opponents piece.\n"
    "\n"
    "2. Removing any '+' with no piece on it (Replacing it with an 'A').\n"
    "\n"
    "If a player cannot move at the beginning of their turn, that player loses the game."
)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(state: GameState, status: str = "") -> None:
    clear_screen()

    print("ISOLA")
    if status:
        print(status_line(status))
    else:
        print()

    print(state.board.render(state.symbols()))
    print(KEYPAD_LEGEND)


def show_rules() -> None:
    print(RULES)
