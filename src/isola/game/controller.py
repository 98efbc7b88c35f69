from __future__ import annotations
import logging
from typing import Callable, Optional, Tuple, TypeVar

from isola.core.rules import IllegalMove, IllegalShot
from isola.game.actions import apply_move, apply_shot, switch_player
from isola.game.results import outcome
from isola.game.state import GameState, new_game
from isola.types import PlayerId
from isola.ui.colors import rejection
from isola.ui.prompts import parse_coordinate, parse_direction
from isola.ui.render import render

log = logging.getLogger(__name__)

Ask = Callable[[str], str]
T = TypeVar("T")

MOVE_PROMPT = "Use the number pad to move in a direction 1-9, but not 5 (see key): "


def _reject(message: str) -> None:
    print(rejection(message))


def request(ask: Ask, prompt: str, parse: Callable[[str], T]) -> T:
    """
    Ask until `parse` accepts the answer. A parser signals a bad answer by
    raising ValueError; the message is shown and the same prompt repeats.
    """
    while True:
        raw = ask(prompt)
        try:
            return parse(raw)
        except ValueError as e:
            log.debug("rejected input %r: %s", raw, e)
            _reject(str(e))


def take_move(state: GameState, ask: Ask) -> None:
    player = state.active
    prompt = f"Turn: {player.symbol}\n{MOVE_PROMPT}"

    while True:
        direction = request(ask, prompt, parse_direction)
        try:
            apply_move(state, direction)
        except IllegalMove as e:
            log.debug("%s: illegal move %s: %s", player.symbol, direction.name, e)
            _reject(str(e))
            continue
        break

    state.last_status = "Valid move"
    render(state, state.last_status)


def take_shot(state: GameState, ask: Ask) -> None:
    player = state.active
    size = state.board.size
    print(f"{player.symbol} time to fire an arrow!")

    while True:
        row = request(ask, "Please select a row: ", lambda raw: parse_coordinate(raw, size))
        col = request(ask, "Please select a column: ", lambda raw: parse_coordinate(raw, size))
        try:
            apply_shot(state, row, col)
        except IllegalShot as e:
            log.debug("%s: illegal shot (%d, %d): %s", player.symbol, row, col, e)
            _reject(str(e))
            continue
        break

    state.last_status = f"{player.symbol} shot row {row + 1}, column {col + 1}"
    render(state, state.last_status)


def play_turn(state: GameState, ask: Optional[Ask] = None) -> Optional[Tuple[PlayerId, PlayerId]]:
    """
    One full turn for the active player: move, shoot, hand over.
    Returns (loser, winner) instead if the active player is already boxed in;
    in that case nothing is asked and nothing changes.
    """
    result = outcome(state)
    if result is not None:
        return result

    ask = ask or input
    take_move(state, ask)
    take_shot(state, ask)
    switch_player(state)
    return None


def run_game(state: Optional[GameState] = None, ask: Optional[Ask] = None) -> Tuple[PlayerId, PlayerId]:
    if state is None:
        state = new_game()

    render(state, state.last_status)

    while True:
        result = play_turn(state, ask)
        if result is not None:
            break

    lost, won = result
    loser_sym = state.players[lost].symbol
    winner_sym = state.players[won].symbol
    log.info("game over: %s boxed in, %s wins", loser_sym, winner_sym)

    print(f"{loser_sym} is no longer able to move.")
    print(f"{winner_sym} is the winner!")
    return result
