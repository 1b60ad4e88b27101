# src/gridsnake/collision.py
from __future__ import annotations
from typing import Collection, Optional

from .config import Cell, Mode
from .grid import GridModel


class CollisionDetector:
    """Decides whether a prospective head position ends the game."""

    def __init__(self, grid: GridModel):
        self.grid = grid

    def reason(self, next_head: Cell, body: Collection[Cell], mode: Mode) -> Optional[str]:
        """
        Returns "self", "wall" or None.

        `body` is the snake before the move, head and tail included, so
        stepping onto the cell the tail is about to leave still counts as a
        self collision.
        """
        if mode == Mode.TOROIDAL:
            next_head = self.grid.wrap(next_head)

        if next_head in body:
            return "self"
        if mode == Mode.BOUNDED and not self.grid.in_bounds(next_head):
            return "wall"
        return None

    def check(self, next_head: Cell, body: Collection[Cell], mode: Mode) -> bool:
        return self.reason(next_head, body, mode) is not None
