"""Authoritative Cyber Snake state and the transitions that advance it.

The engine knows nothing about pygame: renderers read :class:`GameSnapshot`
objects and input sources call :meth:`GameEngine.request_direction`. A clock
calls :meth:`GameEngine.tick` once per ``speed`` milliseconds.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from .settings import DIRECTIONS, EngineConfig
from .storage import HighScoreStore

logger = logging.getLogger(__name__)

Point = tuple[int, int]


class Direction(Enum):
    UP = DIRECTIONS["UP"]
    DOWN = DIRECTIONS["DOWN"]
    LEFT = DIRECTIONS["LEFT"]
    RIGHT = DIRECTIONS["RIGHT"]

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))

    @classmethod
    def from_vector(cls, dx: int, dy: int) -> Direction | None:
        """Return the direction for a unit vector, or None for anything else."""
        try:
            return cls((dx, dy))
        except ValueError:
            return None


class GameStatus(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only copy of everything a renderer may look at."""

    snake: tuple[Point, ...]
    food: Point | None
    direction: Direction
    score: int
    high_score: int
    status: GameStatus
    speed: int

    @property
    def head(self) -> Point:
        return self.snake[0]


class GameEngine:
    """Owns the snake, food, score and speed, and steps them one cell at a time."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        store: HighScoreStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.store = store
        self.rng = rng or random.Random()

        self.high_score: int = self._load_high_score()
        self.status = GameStatus.IDLE
        self._reset_game_state()

    # --- High score ----------------------------------------------------

    def _load_high_score(self) -> int:
        if self.store is None:
            return 0
        stored = self.store.load()
        return stored if stored and stored > 0 else 0

    def _record_high_score(self) -> None:
        if self.score <= self.high_score:
            return
        self.high_score = self.score
        logger.info("New high score: %d", self.high_score)
        if self.store is not None:
            self.store.save(self.high_score)

    # --- Lifecycle -----------------------------------------------------

    def _reset_game_state(self) -> None:
        """Lay out the initial board without touching status or high score."""
        cfg = self.config
        start = Direction(cfg.initial_direction)
        self.snake: list[Point] = [tuple(p) for p in cfg.initial_snake]
        self.direction = start
        self.pending_direction = start
        self.last_applied_direction = start
        self.score = 0
        self.speed = cfg.initial_speed
        self.food: Point | None = self.place_food(self.snake)

    def reset(self) -> None:
        """Start a fresh game; valid from any status."""
        self._reset_game_state()
        self.status = GameStatus.PLAYING
        logger.info("Game started (high score %d)", self.high_score)

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    @property
    def foods_eaten(self) -> int:
        return self.score // self.config.score_increment

    # --- Food ----------------------------------------------------------

    def place_food(self, snake: list[Point]) -> Point | None:
        """Return a random free cell, or None when the snake fills the grid."""
        size = self.config.grid_size
        occupied = set(snake)
        for _ in range(self.config.food_sample_attempts):
            pos = (self.rng.randrange(size), self.rng.randrange(size))
            if pos not in occupied:
                return pos
        free = [
            (x, y)
            for x in range(size)
            for y in range(size)
            if (x, y) not in occupied
        ]
        if not free:
            return None
        return self.rng.choice(free)

    # --- Input ---------------------------------------------------------

    def request_direction(self, dx: int | Direction, dy: int | None = None) -> bool:
        """Queue a turn for the next tick. Returns whether it was accepted."""
        if not self.is_playing:
            logger.debug("Ignoring direction request while %s", self.status.value)
            return False
        if isinstance(dx, Direction):
            requested = dx
        else:
            requested = Direction.from_vector(dx, dy)
        if requested is None:
            logger.debug("Ignoring non-unit direction (%s, %s)", dx, dy)
            return False
        if requested is self.last_applied_direction.opposite:
            logger.debug("Ignoring reversal to %s", requested.name)
            return False
        self.pending_direction = requested
        self.direction = requested
        return True

    # --- Logic step ----------------------------------------------------

    def tick(self) -> GameStatus:
        """Advance the game by exactly one grid cell."""
        if not self.is_playing:
            return self.status

        self.last_applied_direction = self.pending_direction
        head_x, head_y = self.snake[0]
        step = self.last_applied_direction
        new_head = (head_x + step.dx, head_y + step.dy)

        size = self.config.grid_size
        if not (0 <= new_head[0] < size and 0 <= new_head[1] < size):
            self.game_over("wall")
            return self.status
        if new_head in self.snake:
            self.game_over("self")
            return self.status

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self._eat()
        else:
            self.snake.pop()
        return self.status

    def _eat(self) -> None:
        cfg = self.config
        self.score += cfg.score_increment
        if self.foods_eaten % cfg.food_threshold == 0:
            faster = max(cfg.min_speed, self.speed - cfg.speed_decrement)
            if faster != self.speed:
                logger.info("Speed up: %d ms -> %d ms", self.speed, faster)
                self.speed = faster
        self.food = self.place_food(self.snake)
        if self.food is None:
            self.game_over("board full")

    def game_over(self, reason: str = "") -> None:
        """Freeze play and register the high score."""
        if self.status is GameStatus.GAME_OVER:
            return
        self.status = GameStatus.GAME_OVER
        logger.info("Game over (%s) with score %d", reason or "stopped", self.score)
        self._record_high_score()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=tuple(self.snake),
            food=self.food,
            direction=self.direction,
            score=self.score,
            high_score=self.high_score,
            status=self.status,
            speed=self.speed,
        )
