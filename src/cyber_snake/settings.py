"""Pygame-free settings for Cyber Snake: data paths, logging, engine rules."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for the high score."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "cyber-snake"


DATA_DIR = Path(os.getenv("CYBER_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("CYBER_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
LOG_LEVEL: str = os.getenv("CYBER_SNAKE_LOG_LEVEL", "WARNING").upper()

# --- Engine rules ---------------------------------------------------------

GRID_SIZE: int = 25  # 25x25 cells
INITIAL_SPEED: int = 130  # ms per tick
SPEED_DECREMENT: int = 10  # ms faster per threshold
FOOD_THRESHOLD: int = 5  # speed up every 5 foods
MIN_SPEED: int = 40
SCORE_INCREMENT: int = 10
INITIAL_SNAKE: tuple[tuple[int, int], ...] = ((10, 10), (10, 11), (10, 12))
INITIAL_DIRECTION: tuple[int, int] = (0, -1)  # UP
# Rejected draws before food placement scans the free cells instead
FOOD_SAMPLE_ATTEMPTS: int = 256
# Longest burst of ticks replayed after a frame hitch
MAX_CATCH_UP_TICKS: int = 4

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}

class ConfigError(ValueError):
    """Raised when engine parameters cannot describe a playable board."""


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Named engine parameters, defaulting to the module constants."""

    grid_size: int = GRID_SIZE
    initial_speed: int = INITIAL_SPEED
    speed_decrement: int = SPEED_DECREMENT
    food_threshold: int = FOOD_THRESHOLD
    min_speed: int = MIN_SPEED
    score_increment: int = SCORE_INCREMENT
    initial_snake: tuple[tuple[int, int], ...] = INITIAL_SNAKE
    initial_direction: tuple[int, int] = INITIAL_DIRECTION
    food_sample_attempts: int = FOOD_SAMPLE_ATTEMPTS

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ConfigError(f"grid_size must be positive, got {self.grid_size}")
        if self.min_speed <= 0 or self.initial_speed <= 0:
            raise ConfigError("speeds must be positive")
        if self.min_speed > self.initial_speed:
            raise ConfigError(
                f"min_speed {self.min_speed} exceeds initial_speed {self.initial_speed}"
            )
        if self.speed_decrement < 0:
            raise ConfigError("speed_decrement cannot be negative")
        if self.food_threshold < 1 or self.score_increment < 1:
            raise ConfigError("food_threshold and score_increment must be positive")
        if self.food_sample_attempts < 0:
            raise ConfigError("food_sample_attempts cannot be negative")
        if self.initial_direction not in DIRECTIONS.values():
            raise ConfigError(f"invalid initial_direction {self.initial_direction}")
        self._check_initial_snake()

    def _check_initial_snake(self) -> None:
        body = [tuple(p) for p in self.initial_snake]
        if not body:
            raise ConfigError("initial_snake cannot be empty")
        for x, y in body:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ConfigError(f"initial_snake segment {(x, y)} is off the grid")
        if len(set(body)) != len(body):
            raise ConfigError("initial_snake segments overlap")
        for (ax, ay), (bx, by) in zip(body, body[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ConfigError("initial_snake segments must be adjacent")
