# src/isola/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Mapping

from isola.config import SIZE
from isola.types import Cell, Coord, Occupied, PlayerId, Tile

NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


@dataclass(slots=True)
class Board:
    size: int = SIZE
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Tile.EMPTY for _ in range(self.size)] for _ in range(self.size)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell:
        assert self.in_bounds(row, col), f"cell ({row}, {col}) is off the board"
        return self.grid[row][col]

    def set(self, row: int, col: int, cell: Cell) -> None:
        assert self.in_bounds(row, col), f"cell ({row}, {col}) is off the board"
        self.grid[row][col] = cell

    def neighbors(self, row: int, col: int) -> List[Coord]:
        out = []
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if self.in_bounds(r, c):
                out.append((r, c))
        return out

    def render(self, symbols: Mapping[PlayerId, str]) -> str:
        """
        Plain-text grid: a header of column numbers, then one line per row
        prefixed by its 1-based label. '+' is empty, 'A' is dead.
        """
        lines = ["  " + "".join(str(c + 1) for c in range(self.size))]
        for r in range(self.size):
            chars = []
            for c in range(self.size):
                cell = self.grid[r][c]
                if isinstance(cell, Occupied):
                    chars.append(symbols[cell.player])
                else:
                    chars.append(cell.value)
            lines.append(f"{r + 1} " + "".join(chars))
        return "\n".join(lines) + "\n"
