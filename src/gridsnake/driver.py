# src/gridsnake/driver.py
from __future__ import annotations

from .config import GameStatus
from .engine import GameEngine


class TickDriver:
    """
    Calls engine.step() every engine.speed_ms milliseconds of caller time.

    The interval is read on every poll, so when eating speeds the game up the
    next tick is scheduled with the new interval. Only one step happens per
    poll, even if the caller fell behind. While the engine is not playing the
    clock is held at `now`, so a start or resume gets a full interval before
    its first move.
    """

    def __init__(self, engine: GameEngine, now_ms: int = 0):
        self.engine = engine
        self.last_tick = now_ms

    def due(self, now_ms: int) -> bool:
        return now_ms - self.last_tick >= self.engine.speed_ms

    def poll(self, now_ms: int) -> bool:
        """Step if a tick is due. Returns True when a step was taken."""
        if self.engine.status != GameStatus.PLAYING:
            self.last_tick = now_ms
            return False
        if not self.due(now_ms):
            return False
        self.engine.step()
        self.last_tick = now_ms
        return True
