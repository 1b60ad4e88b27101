# src/gridsnake/grid.py
from __future__ import annotations
import random
from typing import Iterator

from .config import Cell


class GridModel:
    """Square N x N board geometry. Pure arithmetic, no state besides N."""

    def __init__(self, size: int):
        self.size = size

    @property
    def area(self) -> int:
        return self.size * self.size

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def wrap(self, cell: Cell) -> Cell:
        """Fold a cell back onto the board; Python's % already maps -1 to N-1."""
        x, y = cell
        return (x % self.size, y % self.size)

    def cells(self) -> Iterator[Cell]:
        """All cells, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randrange(self.size), rng.randrange(self.size))
