# tests/conftest.py
import os
import sys
from dataclasses import replace

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so src.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from src.gridsnake.config import CFG
from src.gridsnake.engine import GameEngine
from src.gridsnake.food import FoodPlacer
from src.gridsnake.grid import GridModel
from src.gridsnake.highscore import MemoryHighScore


class ScriptedFood(FoodPlacer):
    """Hands out food cells from a list, then falls back to the first free cell."""

    def __init__(self, grid, cells):
        super().__init__(grid, max_attempts=0)
        self.queue = list(cells)

    def place(self, snake):
        occupied = set(snake)
        if len(occupied) >= self.grid.area:
            return None
        while self.queue:
            cell = self.queue.pop(0)
            if cell not in occupied:
                return cell
        return self._first_free(occupied)


@pytest.fixture
def store():
    return MemoryHighScore()


@pytest.fixture
def make_engine(store):
    """make_engine(food=[...], **config_overrides) -> GameEngine (idle)."""
    def make(food=None, **overrides):
        cfg = replace(CFG, seed=1234, **overrides)
        placer = None
        if food is not None:
            placer = ScriptedFood(GridModel(cfg.grid_size), food)
        return GameEngine(cfg, store, placer)
    return make


@pytest.fixture
def playing(make_engine):
    """An engine already started with food parked far from row 10."""
    def make(food=((0, 0),), **overrides):
        engine = make_engine(food=list(food), **overrides)
        engine.start()
        return engine
    return make
