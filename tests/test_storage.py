from __future__ import annotations

import logging

from cyber_snake.engine import GameEngine
from cyber_snake.storage import FileHighScoreStore, MemoryHighScoreStore


def test_missing_file_loads_nothing(tmp_path) -> None:
    store = FileHighScoreStore(tmp_path / "highscore.txt")
    assert store.load() is None
    assert GameEngine(store=store).high_score == 0


def test_save_creates_parent_and_round_trips(tmp_path) -> None:
    path = tmp_path / "nested" / "dir" / "highscore.txt"
    store = FileHighScoreStore(path)
    store.save(120)

    assert path.read_text(encoding="utf-8") == "120"
    assert FileHighScoreStore(path).load() == 120
    assert GameEngine(store=FileHighScoreStore(path)).high_score == 120


def test_corrupt_file_is_ignored(tmp_path, caplog) -> None:
    path = tmp_path / "highscore.txt"
    path.write_text("lots", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="cyber_snake.storage"):
        assert FileHighScoreStore(path).load() is None
    assert "corrupt" in caplog.text


def test_negative_value_clamps_to_zero(tmp_path) -> None:
    path = tmp_path / "highscore.txt"
    path.write_text("-40\n", encoding="utf-8")
    assert FileHighScoreStore(path).load() == 0


def test_unwritable_path_is_logged_not_raised(tmp_path, caplog) -> None:
    store = FileHighScoreStore(tmp_path)

    with caplog.at_level(logging.WARNING, logger="cyber_snake.storage"):
        store.save(50)
        assert store.load() is None
    assert "Could not save" in caplog.text
    assert "Could not read" in caplog.text


def test_memory_store_tracks_saves() -> None:
    store = MemoryHighScoreStore(5)
    assert store.load() == 5
    store.save(30)
    assert store.load() == 30
    assert store.saves == [30]
