"""Keyboard and on-screen D-pad input for Cyber Snake."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame

from .config import (
    BOARD_SIZE,
    HUD_HEIGHT,
    KEY_TO_DIRECTION,
    PAD_BUTTON,
    PAD_GAP,
    PAD_HEIGHT,
    PAUSE_KEYS,
    QUIT_KEYS,
    START_KEYS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .engine import Direction
from .settings import DIRECTIONS


class Intent(Enum):
    TURN = "turn"
    START = "start"
    PAUSE = "pause"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class InputAction:
    intent: Intent
    direction: Direction | None = None


def pad_layout() -> dict[Direction, pygame.Rect]:
    """Return the screen rects of the four D-pad buttons below the board."""
    center_x = WINDOW_WIDTH // 2
    center_y = HUD_HEIGHT + BOARD_SIZE + PAD_HEIGHT // 2
    step = PAD_BUTTON + PAD_GAP
    layout: dict[Direction, pygame.Rect] = {}
    for name, (dx, dy) in DIRECTIONS.items():
        rect = pygame.Rect(0, 0, PAD_BUTTON, PAD_BUTTON)
        rect.center = (center_x + dx * step, center_y + dy * step)
        layout[Direction[name]] = rect
    return layout


def board_rect() -> pygame.Rect:
    return pygame.Rect(0, HUD_HEIGHT, BOARD_SIZE, BOARD_SIZE)


class Controls:
    """Translate pygame events into :class:`InputAction` intents."""

    def __init__(self) -> None:
        self.pad = pad_layout()
        self.board = board_rect()

    def direction_at(self, pos: tuple[int, int]) -> Direction | None:
        for direction, rect in self.pad.items():
            if rect.collidepoint(pos):
                return direction
        return None

    def translate(self, event: pygame.event.Event) -> InputAction | None:
        if event.type == pygame.QUIT:
            return InputAction(Intent.QUIT)
        if event.type == pygame.KEYDOWN:
            return self._translate_key(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._translate_pointer(event.pos)
        if event.type == pygame.FINGERDOWN:
            # Touch coordinates are normalized; map them onto the unscaled layout
            pos = (int(event.x * WINDOW_WIDTH), int(event.y * WINDOW_HEIGHT))
            return self._translate_pointer(pos)
        return None

    def _translate_key(self, key: int) -> InputAction | None:
        name = KEY_TO_DIRECTION.get(key)
        if name:
            return InputAction(Intent.TURN, Direction[name])
        if key in START_KEYS:
            return InputAction(Intent.START)
        if key in PAUSE_KEYS:
            return InputAction(Intent.PAUSE)
        if key in QUIT_KEYS:
            return InputAction(Intent.QUIT)
        return None

    def _translate_pointer(self, pos: tuple[int, int]) -> InputAction | None:
        direction = self.direction_at(pos)
        if direction is not None:
            return InputAction(Intent.TURN, direction)
        if self.board.collidepoint(pos):
            # Clicking the board works as the overlay's start/restart button
            return InputAction(Intent.START)
        return None
