# src/gridsnake/food.py
from __future__ import annotations
import random
from typing import Collection, Optional

from .config import Cell
from .grid import GridModel


class FoodPlacer:
    """
    Picks the next food cell.

    Samples uniformly random cells until one is free of the snake. Sampling is
    capped at `max_attempts`; after that the board is scanned row by row and
    the first free cell wins. Returns None only when the snake covers the
    whole board.
    """

    def __init__(self, grid: GridModel, rng: Optional[random.Random] = None, max_attempts: Optional[int] = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts if max_attempts is not None else 4 * grid.area

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def place(self, snake: Collection[Cell]) -> Optional[Cell]:
        occupied = set(snake)
        if len(occupied) >= self.grid.area:
            return None

        for _ in range(self.max_attempts):
            cell = self.grid.random_cell(self.rng)
            if cell not in occupied:
                return cell

        return self._first_free(occupied)

    def _first_free(self, occupied) -> Optional[Cell]:
        for cell in self.grid.cells():
            if cell not in occupied:
                return cell
        return None
