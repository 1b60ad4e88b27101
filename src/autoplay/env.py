# src/autoplay/env.py
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np  # type: ignore
import pygame       # type: ignore

from src.gridsnake.config import CFG, Config, GameStatus, Mode, UP, DOWN, LEFT, RIGHT
from src.gridsnake.engine import GameEngine
from src.gridsnake.game import board_size, draw_game, draw_overlay
from src.gridsnake.highscore import MemoryHighScore

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions (dx, dy)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: UP,
    1: DOWN,
    2: LEFT,
    3: RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction):
    """Rotate a direction 90° CCW (screen y grows downward)."""
    dx, dy = direction
    return (dy, -dx)

def right_of(direction):
    """Rotate a direction 90° CW (screen y grows downward)."""
    dx, dy = direction
    return (-dy, dx)

def would_hit(engine: GameEngine, direction) -> bool:
    """
    True if moving the head one cell in 'direction' would end the game,
    under the engine's current boundary mode.
    """
    hx, hy = engine.head
    nxt = (hx + direction[0], hy + direction[1])
    return engine.collisions.check(nxt, engine.snake, engine.mode)

def manhattan(engine: GameEngine, a, b) -> int:
    """L1 distance; in wall pass mode the shorter way round each axis counts."""
    dx, dy = abs(a[0] - b[0]), abs(a[1] - b[1])
    if engine.mode == Mode.TOROIDAL:
        n = engine.grid.size
        dx, dy = min(dx, n - dx), min(dy, n - dy)
    return dx + dy

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(engine: GameEngine) -> np.ndarray:
    """
    Compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1]
      3: fy_n  - food y normalized in [0, 1]
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward would be fatal
      7: danger_left   - 1.0 if the next cell to the left would be fatal
      8: danger_right  - 1.0 if the next cell to the right would be fatal
    """
    hx, hy = engine.head
    fx, fy = engine.food
    denom = max(engine.grid.size - 1, 1)
    direction = engine.direction

    return np.array(
        [
            hx / denom, hy / denom, fx / denom, fy / denom,
            float(direction[0]), float(direction[1]),
            float(would_hit(engine, direction)),
            float(would_hit(engine, left_of(direction))),
            float(would_hit(engine, right_of(direction))),
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Gym-like wrapper that plays the real GameEngine one tick per step().

    Rewards:
      + eat_reward  when food is eaten
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
      + step_penalty per step (tiny negative to discourage dithering)
      + death_reward on death
    """
    cfg: Config = field(default_factory=lambda: CFG)
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    debug: bool         = False  # print per-step distances
    render_enabled: bool = False

    def __post_init__(self):
        # Policy randomness lives here, not in numpy's global state.
        self.rng = np.random.default_rng(self.cfg.seed)
        self.high_scores = MemoryHighScore()
        self.engine = GameEngine(self.cfg, self.high_scores)
        self._started = False

        self.screen = None
        self.font = None
        self.clock = None
        if self.render_enabled:
            pygame.init()
            self.screen = pygame.display.set_mode(board_size(self.engine.snapshot()))
            pygame.display.set_caption("Snake autoplay")
            self.font = pygame.font.SysFont(None, 24)
            self.clock = pygame.time.Clock()

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new game and return the first observation."""
        if seed is not None:
            self.engine.food_placer.seed(seed)
            self.rng = np.random.default_rng(seed)
        self.engine.reset()
        self.engine.start()
        self._started = True
        return observe(self.engine)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, reward, terminated, info)
        """
        assert self._started, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"

        engine = self.engine
        # Reversals are refused by the engine, exactly as for a human player.
        engine.request_direction(ACTIONS[action])

        d_before = manhattan(engine, engine.head, engine.food)
        score_before = engine.score
        engine.step()

        if engine.status == GameStatus.GAME_OVER:
            reward = self.eat_reward if engine.reason == "full" else self.death_reward
            info = {"reason": engine.reason, "score": engine.score}
            return observe(engine), reward, True, info

        reward = self.step_penalty
        if engine.score > score_before:
            reward += self.eat_reward

        d_after = manhattan(engine, engine.head, engine.food)
        if self.debug:
            print(f"[ENV] tick={engine.tick} dist {d_before} -> {d_after}")
        reward += self.shaping_coef * (d_before - d_after)

        return observe(engine), reward, False, {"score": engine.score}

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self) -> None:
        """Draw the current game; only does anything if render_enabled=True."""
        if not self.render_enabled or self.screen is None:
            return

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        snap = self.engine.snapshot()
        draw_game(self.screen, self.font, snap)
        draw_overlay(self.screen, self.font, snap)
        pygame.display.flip()

        # Limit FPS so it's actually watchable
        if self.clock is not None:
            self.clock.tick(15)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    def legal_actions(self) -> list:
        """Every action except the reversal the engine would ignore."""
        dx, dy = self.engine.direction
        return [a for a, d in ACTIONS.items() if d != (-dx, -dy)]

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        # 9 features defined in observe()
        return (9,)
