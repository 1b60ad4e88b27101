# src/gridsnake/snake.py
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import Cell


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


@dataclass
class SnakeState:
    body: List[Cell] = field(default_factory=list)   # head at index 0
    direction: Tuple[int, int] = (1, 0)             # applied on the last tick
    pending: Tuple[int, int] = (1, 0)               # applied on the next tick

    @classmethod
    def spawn(cls, start: Cell, direction: Tuple[int, int]) -> "SnakeState":
        return cls(body=[start], direction=direction, pending=direction)

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, cell) -> bool:
        return cell in self.body

    def reset(self, start: Cell, direction: Tuple[int, int]) -> None:
        self.body = [start]
        self.direction = direction
        self.pending = direction

    def steer(self, direction: Tuple[int, int]) -> bool:
        """Queue a turn for the next tick. Exact reversals of the applied direction are refused."""
        if is_opposite(direction, self.direction):
            return False
        self.pending = direction
        return True

    def next_head(self) -> Cell:
        """Raw (unwrapped) head position after the pending turn is applied."""
        hx, hy = self.head
        dx, dy = self.pending
        return (hx + dx, hy + dy)

    def advance(self, new_head: Cell, grow: bool) -> None:
        """Commit the pending turn and move one cell; keep the tail when growing."""
        self.direction = self.pending
        self.body.insert(0, new_head)
        if not grow:
            self.body.pop()
