from __future__ import annotations

import pytest

from cyber_snake.scheduler import TickScheduler


def test_waits_for_a_full_interval() -> None:
    ticks: list[int] = []
    scheduler = TickScheduler()

    assert scheduler.advance(100, lambda: ticks.append(1) or True, lambda: 130) == 0
    assert scheduler.advance(40, lambda: ticks.append(1) or True, lambda: 130) == 1
    assert len(ticks) == 1
    assert scheduler.accumulator == pytest.approx(10)


def test_new_interval_applies_from_next_tick() -> None:
    interval = {"ms": 100}

    def tick() -> bool:
        interval["ms"] = 50
        return True

    scheduler = TickScheduler(max_catch_up=10)
    assert scheduler.advance(200, tick, lambda: interval["ms"]) == 3
    assert scheduler.accumulator == pytest.approx(0)


def test_stopped_game_discards_leftover_time() -> None:
    scheduler = TickScheduler()
    assert scheduler.advance(500, lambda: False, lambda: 100) == 1
    assert scheduler.accumulator == 0


def test_catch_up_is_capped_after_a_hitch() -> None:
    scheduler = TickScheduler(max_catch_up=3)
    assert scheduler.advance(1050, lambda: True, lambda: 100) == 3
    assert scheduler.accumulator == pytest.approx(50)


def test_negative_elapsed_is_ignored_and_reset_clears() -> None:
    scheduler = TickScheduler()
    scheduler.advance(60, lambda: True, lambda: 100)
    scheduler.advance(-30, lambda: True, lambda: 100)
    assert scheduler.accumulator == pytest.approx(60)

    scheduler.reset()
    assert scheduler.accumulator == 0
