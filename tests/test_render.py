from __future__ import annotations

import pygame
import pytest

from cyber_snake.config import PALETTE, WINDOW_HEIGHT, WINDOW_WIDTH
from cyber_snake.engine import Direction, GameEngine, GameStatus
from cyber_snake.render import Renderer, body_opacity, glow_radius


@pytest.fixture(scope="module")
def renderer():
    pygame.font.init()
    yield Renderer()
    pygame.font.quit()


def test_body_fades_towards_the_tail() -> None:
    assert body_opacity(1, 3) == pytest.approx(0.875)
    assert body_opacity(1, 3) > body_opacity(2, 3)
    assert body_opacity(200, 201) == 0.3


def test_only_front_segments_glow() -> None:
    assert glow_radius(0) > glow_radius(4) > 0
    assert glow_radius(5) == 0


def test_eyes_follow_direction(renderer) -> None:
    rect = pygame.Rect(0, 0, 20, 20)
    (ax, ay), (bx, by) = renderer.eye_positions(rect, Direction.UP)
    assert ay == by < rect.centery
    (ax, ay), (bx, by) = renderer.eye_positions(rect, Direction.RIGHT)
    assert ax == bx > rect.centerx


def test_overlay_text_per_status(renderer) -> None:
    engine = GameEngine()
    assert "INITIALIZE" in renderer.overlay_lines(engine.snapshot())[0]

    engine.reset()
    assert renderer.overlay_lines(engine.snapshot()) == []
    assert renderer.overlay_lines(engine.snapshot(), paused=True)[0] == "PAUSED"

    engine.game_over()
    lines = renderer.overlay_lines(engine.snapshot())
    assert lines[0] == "CRITICAL FAILURE"
    assert "REBOOT" in lines[-1]


def test_draw_every_screen_without_touching_state(renderer) -> None:
    target = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    engine = GameEngine()
    renderer.draw(target, engine.snapshot(), time_ms=500)

    engine.reset()
    engine.food = (3, 3)
    snapshot = engine.snapshot()
    renderer.draw(target, snapshot, paused=True)
    renderer.draw(target, snapshot, time_ms=0)

    head = target.get_at(renderer.cell_rect(snapshot.head).center)
    food = target.get_at(renderer.cell_rect((3, 3)).center)
    assert (head.r, head.g, head.b) == (PALETTE["head"].r, PALETTE["head"].g, PALETTE["head"].b)
    assert (food.r, food.g, food.b) == (PALETTE["food"].r, PALETTE["food"].g, PALETTE["food"].b)
    assert engine.snapshot() == snapshot

    engine.game_over()
    renderer.draw(target, engine.snapshot())
    assert engine.status is GameStatus.GAME_OVER
