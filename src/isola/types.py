# src/isola/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Literal, Tuple, Union

PlayerId = Literal["P1", "P2"]
Coord = Tuple[int, int]   # (row, col), 0-indexed


class Tile(Enum):
    EMPTY = "+"
    DEAD = "A"


@dataclass(frozen=True, slots=True)
class Occupied:
    player: PlayerId


Cell = Union[Tile, Occupied]


class Direction(IntEnum):
    """Numeric keypad codes. 5 (centre) is deliberately absent."""

    DOWN_LEFT = 1
    DOWN = 2
    DOWN_RIGHT = 3
    LEFT = 4
    RIGHT = 6
    UP_LEFT = 7
    UP = 8
    UP_RIGHT = 9
