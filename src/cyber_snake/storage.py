"""High score persistence for Cyber Snake."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .settings import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    """Anything that can remember one integer between sessions."""

    def load(self) -> int | None: ...

    def save(self, score: int) -> None: ...


class FileHighScoreStore:
    """Keep the high score as plain text in a single file."""

    def __init__(self, path: Path | str = HIGHSCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return None
        try:
            value = int(text.strip() or "0")
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s", self.path)
            return None
        return max(0, value)

    def save(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(score)), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return
        logger.debug("Saved high score %d to %s", score, self.path)


class MemoryHighScoreStore:
    """In-process store for headless runs and tests."""

    def __init__(self, value: int | None = None) -> None:
        self.value = value
        self.saves: list[int] = []

    def load(self) -> int | None:
        return self.value

    def save(self, score: int) -> None:
        self.value = score
        self.saves.append(score)
