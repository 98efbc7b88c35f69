from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

from isola.config import FIRST_PLAYER, SIZE, START_POSITIONS, SYMBOLS
from isola.core.board import Board
from isola.types import Coord, Occupied, PlayerId


@dataclass(slots=True)
class Player:
    id: PlayerId
    symbol: str
    row: int
    col: int

    @property
    def position(self) -> Coord:
        return self.row, self.col

    def set_position(self, row: int, col: int) -> None:
        self.row = row
        self.col = col


@dataclass(slots=True)
class GameState:
    board: Board
    players: Dict[PlayerId, Player]
    current: PlayerId
    last_status: str = field(default="")

    @property
    def active(self) -> Player:
        return self.players[self.current]

    def symbols(self) -> Dict[PlayerId, str]:
        return {pid: p.symbol for pid, p in self.players.items()}


def new_game() -> GameState:
    board = Board(SIZE)
    players: Dict[PlayerId, Player] = {}
    for pid in ("P1", "P2"):
        row, col = START_POSITIONS[pid]
        players[pid] = Player(pid, SYMBOLS[pid], row, col)
        board.set(row, col, Occupied(pid))

    first = players[FIRST_PLAYER]
    return GameState(board=board, players=players, current=first.id,
                     last_status=f"Player {first.symbol} starts.")
