"""Window layout, palette, and key bindings for the pygame front end."""

from __future__ import annotations

import pygame

from .settings import GRID_SIZE

# --- Window / layout ------------------------------------------------------

CELL: int = 20
BOARD_SIZE: int = GRID_SIZE * CELL  # 500 px
HUD_HEIGHT: int = 56
PAD_HEIGHT: int = 164
WINDOW_WIDTH: int = BOARD_SIZE
WINDOW_HEIGHT: int = HUD_HEIGHT + BOARD_SIZE + PAD_HEIGHT
PAD_BUTTON: int = 48
PAD_GAP: int = 6
FONT_NAME: str = "consolas"
FONT_SIZE: int = 22
SMALL_FONT_SIZE: int = 14

FPS: int = 120

KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)
PAUSE_KEYS = (pygame.K_p,)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

PALETTE = {
    "bg_top": pygame.Color(2, 6, 23),
    "bg_bottom": pygame.Color(8, 14, 32),
    "grid": pygame.Color(26, 26, 26),
    "border": pygame.Color(57, 255, 20, 90),
    "head": pygame.Color(57, 255, 20),
    "body": pygame.Color(44, 176, 26),
    "food": pygame.Color(255, 0, 255),
    "eyes": pygame.Color(0, 0, 0),
    "text": pygame.Color(57, 255, 20),
    "muted": pygame.Color(100, 116, 139),
    "danger": pygame.Color(239, 68, 68),
    "overlay": pygame.Color(0, 0, 0, 190),
    "button": pygame.Color(15, 23, 42),
    "button_edge": pygame.Color(57, 255, 20, 120),
}
