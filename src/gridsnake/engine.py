# src/gridsnake/engine.py
from __future__ import annotations
from dataclasses import dataclass
import random
import threading
from typing import Callable, List, Optional, Tuple

from .config import CFG, DIRECTIONS, Cell, Config, GameStatus, Mode
from .grid import GridModel
from .food import FoodPlacer
from .collision import CollisionDetector
from .highscore import HighScoreStore, MemoryHighScore
from .snake import SnakeState


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]   # head first
    food: Cell
    direction: Tuple[int, int]
    score: int
    high_score: int
    speed_ms: int
    status: GameStatus
    mode: Mode
    grid_size: int
    tick: int
    reason: Optional[str]     # None, "wall", "self" or "full"


Listener = Callable[[Snapshot], None]


class GameEngine:
    """
    Owns one snake session: body, food, score, speed and status.

    The only mutators are start(), step(), toggle_pause(), reset(),
    set_mode() and request_direction(). They all take the same lock, so an
    intent delivered from an input thread is applied either before or after
    a tick, never halfway through one. Listeners get a Snapshot after every
    effective step and every status change, called under the same lock so
    they see changes in the order they happened.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        high_scores: Optional[HighScoreStore] = None,
        food_placer: Optional[FoodPlacer] = None,
    ):
        self.cfg = cfg
        self.grid = GridModel(cfg.grid_size)
        self.collisions = CollisionDetector(self.grid)
        if food_placer is None:
            food_placer = FoodPlacer(self.grid, random.Random(cfg.seed), cfg.max_food_attempts)
        self.food_placer = food_placer
        self.high_scores = high_scores if high_scores is not None else MemoryHighScore()

        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

        self._mode = cfg.mode
        self._high_score = int(self.high_scores.read())
        self._snake = SnakeState.spawn(cfg.start, cfg.start_direction)
        self._reset_session()
        self._status = GameStatus.IDLE

    # ---- read-only view ----
    @property
    def snake(self) -> Tuple[Cell, ...]:
        return tuple(self._snake.body)

    @property
    def head(self) -> Cell:
        return self._snake.head

    @property
    def direction(self) -> Tuple[int, int]:
        return self._snake.direction

    @property
    def pending_direction(self) -> Tuple[int, int]:
        return self._snake.pending

    @property
    def food(self) -> Cell:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def speed_ms(self) -> int:
        return self._speed_ms

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def snapshot(self) -> Snapshot:
        with self._lock:
            return Snapshot(
                snake=tuple(self._snake.body),
                food=self._food,
                direction=self._snake.direction,
                score=self._score,
                high_score=self._high_score,
                speed_ms=self._speed_ms,
                status=self._status,
                mode=self._mode,
                grid_size=self.grid.size,
                tick=self._tick,
                reason=self._reason,
            )

    # ---- observers ----
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self) -> None:
        # Called with the lock held, so listeners see snapshots in mutation order.
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    # ---- session lifecycle ----
    def _reset_session(self) -> None:
        self._snake.reset(self.cfg.start, self.cfg.start_direction)
        self._food = self.cfg.idle_food
        self._score = 0
        self._speed_ms = self.cfg.initial_speed_ms
        self._tick = 0
        self._reason = None

    def start(self) -> bool:
        """Begin a fresh game. Only from IDLE; a finished game needs reset() first."""
        with self._lock:
            if self._status != GameStatus.IDLE:
                return False
            self._reset_session()
            self._food = self.food_placer.place(self._snake.body)
            self._status = GameStatus.PLAYING
            self._publish()
        return True

    def toggle_pause(self) -> bool:
        with self._lock:
            if self._status == GameStatus.PLAYING:
                self._status = GameStatus.PAUSED
            elif self._status == GameStatus.PAUSED:
                self._status = GameStatus.PLAYING
            else:
                return False
            self._publish()
        return True

    def reset(self) -> None:
        """Back to IDLE with initial session values. The high score is kept."""
        with self._lock:
            self._reset_session()
            self._status = GameStatus.IDLE
            self._publish()

    def set_mode(self, mode: Mode) -> bool:
        with self._lock:
            if self._status == GameStatus.PLAYING:
                return False
            self._mode = Mode(mode)
            self._publish()
        return True

    def request_direction(self, direction: Tuple[int, int]) -> bool:
        """Replace the pending direction unless not playing or it reverses the applied one."""
        with self._lock:
            if self._status != GameStatus.PLAYING or direction not in DIRECTIONS.values():
                return False
            return self._snake.steer(tuple(direction))

    # ---- simulation ----
    def step(self) -> bool:
        """
        Advance exactly one tick. Returns True while the game is still running.
        Does nothing outside PLAYING.
        """
        with self._lock:
            if self._status != GameStatus.PLAYING:
                return False

            new_head = self._snake.next_head()
            if self._mode == Mode.TOROIDAL:
                new_head = self.grid.wrap(new_head)

            # Checked against the whole pre-move body, tail included.
            reason = self.collisions.reason(new_head, self._snake.body, self._mode)
            if reason is not None:
                self._game_over(reason)
            else:
                self._tick += 1
                ate = new_head == self._food
                self._snake.advance(new_head, grow=ate)
                if ate:
                    self._eat()
            self._publish()
            return self._status == GameStatus.PLAYING

    def _eat(self) -> None:
        self._score += self.cfg.food_reward
        self._speed_ms = max(self.cfg.min_speed_ms, self._speed_ms - self.cfg.speed_step_ms)
        food = self.food_placer.place(self._snake.body)
        if food is None:
            # Board is full: nothing left to eat.
            self._game_over("full")
            return
        self._food = food

    def _game_over(self, reason: str) -> None:
        self._status = GameStatus.GAME_OVER
        self._reason = reason
        if self._score > self._high_score:
            self._high_score = self._score
            self.high_scores.write(self._score)
