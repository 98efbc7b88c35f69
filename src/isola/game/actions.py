from __future__ import annotations
import logging

from isola.core.rules import check_move, check_shot, other
from isola.game.state import GameState
from isola.types import Coord, Direction, Occupied, PlayerId, Tile

log = logging.getLogger(__name__)


def validate_move(state: GameState, direction: Direction) -> Coord:
    return check_move(state.board, state.active.position, direction)


def validate_shot(state: GameState, row: int, col: int) -> Coord:
    return check_shot(state.board, row, col)


def apply_move(state: GameState, direction: Direction) -> Coord:
    """
    Move the active player one square. The square it leaves becomes dead.
    Raises IllegalMove (state untouched) if the destination cannot be entered.
    """
    player = state.active
    row, col = validate_move(state, direction)

    state.board.set(player.row, player.col, Tile.DEAD)
    player.set_position(row, col)
    state.board.set(row, col, Occupied(player.id))

    log.debug("%s moved %s to (%d, %d)", player.symbol, direction.name, row, col)
    return row, col


def apply_shot(state: GameState, row: int, col: int) -> Coord:
    validate_shot(state, row, col)
    state.board.set(row, col, Tile.DEAD)
    log.debug("%s shot (%d, %d)", state.active.symbol, row, col)
    return row, col


def switch_player(state: GameState) -> PlayerId:
    state.current = other(state.current)
    return state.current
