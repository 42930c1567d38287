from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from cyber_snake.settings import EngineConfig  # noqa: E402
from cyber_snake.engine import GameEngine  # noqa: E402
from cyber_snake.storage import MemoryHighScoreStore  # noqa: E402


@pytest.fixture
def store() -> MemoryHighScoreStore:
    return MemoryHighScoreStore()


@pytest.fixture
def make_engine(store):
    def factory(**overrides) -> GameEngine:
        config = EngineConfig(**overrides)
        return GameEngine(config, store, rng=random.Random(1234))

    return factory


@pytest.fixture
def engine(make_engine) -> GameEngine:
    game = make_engine()
    game.reset()
    return game
