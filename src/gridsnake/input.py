# src/gridsnake/input.py
from __future__ import annotations
from typing import Optional, Tuple, Union

import pygame  # type: ignore

from .config import DIRECTIONS, UP, DOWN, LEFT, RIGHT, GameStatus, Mode
from .engine import GameEngine

# Arrow keys and WASD steer the same four ways.
KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

DirectionIntent = Union[str, Tuple[int, int]]


def _resolve(requested: DirectionIntent) -> Optional[Tuple[int, int]]:
    """Intent name or (dx, dy) -> one of the four directions, else None."""
    if isinstance(requested, str):
        return DIRECTIONS.get(requested.lower())
    try:
        cand = (int(requested[0]), int(requested[1]))
    except (TypeError, ValueError, IndexError):
        return None
    return cand if cand in DIRECTIONS.values() else None


class InputRouter:
    """Turns discrete intents (directions, pause, start, reset, mode) into engine calls."""

    def __init__(self, engine: GameEngine):
        self.engine = engine

    def on_direction(self, requested: DirectionIntent) -> bool:
        cand = _resolve(requested)
        if cand is None:
            return False
        return self.engine.request_direction(cand)

    def on_toggle(self) -> bool:
        return self.engine.toggle_pause()

    def on_start(self) -> bool:
        return self.engine.start()

    def on_reset(self) -> None:
        self.engine.reset()

    def on_switch_mode(self) -> bool:
        nxt = Mode.TOROIDAL if self.engine.mode == Mode.BOUNDED else Mode.BOUNDED
        return self.engine.set_mode(nxt)

    def handle_key(self, key: int) -> bool:
        """Route one key code. Returns True if the key meant something."""
        if key in KEY_DIRECTIONS:
            self.on_direction(KEY_DIRECTIONS[key])
            return True
        if key == pygame.K_SPACE:
            self.on_toggle()
            return True
        if key == pygame.K_RETURN:
            self.on_start()
            return True
        if key == pygame.K_r:
            if self.engine.status != GameStatus.IDLE:
                self.on_reset()
            return True
        if key == pygame.K_m:
            self.on_switch_mode()
            return True
        return False
