from __future__ import annotations
from typing import Dict

from isola.core.board import Board
from isola.types import Coord, Direction, Occupied, PlayerId, Tile

# (d_row, d_col) per keypad code; row 0 is the top of the board
DELTAS: Dict[Direction, Coord] = {
    Direction.DOWN_LEFT: (1, -1),
    Direction.DOWN: (1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP_LEFT: (-1, -1),
    Direction.UP: (-1, 0),
    Direction.UP_RIGHT: (-1, 1),
}


class IllegalMove(ValueError):
    pass


class IllegalShot(ValueError):
    pass


def other(player: PlayerId) -> PlayerId:
    return "P2" if player == "P1" else "P1"


def destination(origin: Coord, direction: Direction) -> Coord:
    dr, dc = DELTAS[direction]
    return origin[0] + dr, origin[1] + dc


def check_move(board: Board, origin: Coord, direction: Direction) -> Coord:
    """
    Return the square a piece at `origin` would land on, or raise IllegalMove.
    The board is not modified.
    """
    row, col = destination(origin, direction)

    if not board.in_bounds(row, col):
        raise IllegalMove("Invalid move, please try again.")

    target = board.get(row, col)
    if target is Tile.DEAD:
        raise IllegalMove("That space is dead, please try again.")
    if isinstance(target, Occupied):
        raise IllegalMove("That space is occupied by the opponent, please try again.")

    return row, col


def check_shot(board: Board, row: int, col: int) -> Coord:
    if not board.in_bounds(row, col):
        raise IllegalShot("Invalid coordinate!")
    if board.get(row, col) is not Tile.EMPTY:
        raise IllegalShot("That location cannot be destroyed.")
    return row, col


def has_legal_move(board: Board, position: Coord) -> bool:
    return any(board.get(r, c) is Tile.EMPTY for r, c in board.neighbors(*position))
