"""Pygame drawing for Cyber Snake snapshots (HUD, board, overlays, D-pad)."""

from __future__ import annotations

import pygame

from .config import (
    BOARD_SIZE,
    FONT_NAME,
    FONT_SIZE,
    HUD_HEIGHT,
    PALETTE,
    SMALL_FONT_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .controls import board_rect, pad_layout
from .engine import Direction, GameSnapshot, GameStatus
from .settings import GRID_SIZE

GLOW_SEGMENTS = 5


def body_opacity(index: int, length: int) -> float:
    """Fade body segments towards the tail, never below 30%."""
    return max(0.3, 1.0 - index / (length + 5))


def glow_radius(index: int) -> int:
    """Glow halo size in pixels; only the segments nearest the head glow."""
    if index >= GLOW_SEGMENTS:
        return 0
    return max(0, (10 - index) // 2)


class Renderer:
    """Draws a :class:`GameSnapshot`; never touches the engine."""

    def __init__(self, grid_size: int = GRID_SIZE) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.grid_size = grid_size
        self.cell = BOARD_SIZE // grid_size
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        self.small_font = pygame.font.SysFont(FONT_NAME, SMALL_FONT_SIZE)
        self.board = board_rect()
        self.pad = pad_layout()
        self.background = self._build_background()

    # --- Static layers ---------------------------------------------------

    def _build_background(self) -> pygame.Surface:
        """Create the gradient grid once to keep draw() light."""
        surface = pygame.Surface((BOARD_SIZE, BOARD_SIZE))
        top, bottom = PALETTE["bg_top"], PALETTE["bg_bottom"]
        for y in range(BOARD_SIZE):
            t = y / BOARD_SIZE
            color = (
                int(top.r + (bottom.r - top.r) * t),
                int(top.g + (bottom.g - top.g) * t),
                int(top.b + (bottom.b - top.b) * t),
            )
            pygame.draw.line(surface, color, (0, y), (BOARD_SIZE, y))
        for i in range(0, BOARD_SIZE, self.cell):
            pygame.draw.line(surface, PALETTE["grid"], (i, 0), (i, BOARD_SIZE), 1)
            pygame.draw.line(surface, PALETTE["grid"], (0, i), (BOARD_SIZE, i), 1)
        return surface

    def cell_rect(self, point: tuple[int, int]) -> pygame.Rect:
        x, y = point
        return pygame.Rect(
            self.board.left + x * self.cell,
            self.board.top + y * self.cell,
            self.cell,
            self.cell,
        )

    # --- Board contents --------------------------------------------------

    def _pulse_offset(self, time_ms: int) -> int:
        """Small oscillating value (0..2) used by the food animation."""
        frame = (time_ms // 70) % 6
        return frame if frame < 3 else 5 - frame

    def _draw_food(self, target: pygame.Surface, food, time_ms: int) -> None:
        if food is None:
            return
        rect = self.cell_rect(food)
        pulse = self._pulse_offset(time_ms)
        halo_size = self.cell + 8 + pulse * 2
        halo = pygame.Surface((halo_size, halo_size), pygame.SRCALPHA)
        glow = pygame.Color(PALETTE["food"])
        glow.a = 80
        pygame.draw.circle(halo, glow, (halo_size // 2, halo_size // 2), halo_size // 2)
        target.blit(halo, halo.get_rect(center=rect.center))
        pygame.draw.rect(target, PALETTE["food"], rect.inflate(-4, -4), border_radius=4)

    def _draw_body(self, target: pygame.Surface, snake) -> None:
        length = len(snake)
        layer = pygame.Surface(target.get_size(), pygame.SRCALPHA)
        for idx in range(length - 1, 0, -1):
            rect = self.cell_rect(snake[idx])
            radius = glow_radius(idx)
            if radius:
                halo = pygame.Color(PALETTE["head"])
                halo.a = 60
                pygame.draw.rect(layer, halo, rect.inflate(radius, radius), border_radius=5)
            color = pygame.Color(PALETTE["body"])
            color.a = int(255 * body_opacity(idx, length))
            pygame.draw.rect(layer, color, rect.inflate(-2, -2), border_radius=3)
            edge = pygame.Color(PALETTE["head"])
            edge.a = int(255 * max(0.1, 0.5 - idx / 10))
            pygame.draw.rect(layer, edge, rect.inflate(-2, -2), width=1, border_radius=3)
        target.blit(layer, (0, 0))

    def _draw_head(
        self, target: pygame.Surface, head, direction: Direction
    ) -> None:
        rect = self.cell_rect(head)
        pygame.draw.rect(target, PALETTE["head"], rect.inflate(-1, -1), border_radius=4)
        for eye in self.eye_positions(rect, direction):
            pygame.draw.circle(target, PALETTE["eyes"], eye, max(1, self.cell // 8))

    def eye_positions(
        self, rect: pygame.Rect, direction: Direction
    ) -> tuple[tuple[int, int], tuple[int, int]]:
        """Place the two eyes on the leading edge of the head."""
        inset = max(2, self.cell // 4)
        if direction.dy:
            y = rect.top + inset if direction.dy < 0 else rect.bottom - inset
            return (rect.left + inset, y), (rect.right - inset, y)
        x = rect.left + inset if direction.dx < 0 else rect.right - inset
        return (x, rect.top + inset), (x, rect.bottom - inset)

    # --- HUD, overlays, pad ----------------------------------------------

    def _draw_hud(self, target: pygame.Surface, snapshot: GameSnapshot) -> None:
        title = self.font.render("NEO SNAKE", True, PALETTE["text"])
        target.blit(title, (12, (HUD_HEIGHT - title.get_height()) // 2))

        session = self.font.render(f"{snapshot.score:04}", True, PALETTE["text"])
        record = self.font.render(f"{snapshot.high_score:04}", True, PALETTE["muted"])
        right = WINDOW_WIDTH - 12
        record_rect = record.get_rect(topright=(right, 22))
        session_rect = session.get_rect(topright=(record_rect.left - 20, 22))
        for label, rect in (("SESSION", session_rect), ("RECORD", record_rect)):
            caption = self.small_font.render(label, True, PALETTE["muted"])
            target.blit(caption, caption.get_rect(bottomright=(rect.right, rect.top)))
        target.blit(session, session_rect)
        target.blit(record, record_rect)

    def _draw_overlay(self, target: pygame.Surface, lines: list[str]) -> None:
        overlay = pygame.Surface(self.board.size, pygame.SRCALPHA)
        overlay.fill(PALETTE["overlay"])
        center_x = self.board.width // 2
        start_y = self.board.height // 2 - (len(lines) - 1) * (FONT_SIZE + 8) // 2
        for idx, text in enumerate(lines):
            color = PALETTE["danger"] if idx == 0 and "FAILURE" in text else PALETTE["text"]
            surf = self.font.render(text, True, color)
            overlay.blit(surf, surf.get_rect(center=(center_x, start_y + idx * (FONT_SIZE + 8))))
        target.blit(overlay, self.board.topleft)

    def overlay_lines(self, snapshot: GameSnapshot, paused: bool = False) -> list[str]:
        if snapshot.status is GameStatus.IDLE:
            return [
                "[ SPACE ] INITIALIZE",
                "USE ARROWS, WASD, OR CONTROLS",
                "DO NOT COLLIDE WITH WALLS",
            ]
        if snapshot.status is GameStatus.GAME_OVER:
            return [
                "CRITICAL FAILURE",
                f"FINAL SCORE {snapshot.score}",
                f"RECORD {snapshot.high_score}",
                "[ SPACE ] REBOOT",
            ]
        if paused:
            return ["PAUSED", "P to resume"]
        return []

    def _draw_pad(self, target: pygame.Surface) -> None:
        for direction, rect in self.pad.items():
            pygame.draw.rect(target, PALETTE["button"], rect, border_radius=8)
            pygame.draw.rect(target, PALETTE["button_edge"], rect, width=2, border_radius=8)
            cx, cy = rect.center
            reach = rect.width // 4
            tip = (cx + direction.dx * reach, cy + direction.dy * reach)
            side = (direction.dy, -direction.dx)
            base_x = cx - direction.dx * reach // 2
            base_y = cy - direction.dy * reach // 2
            left = (base_x + side[0] * reach, base_y + side[1] * reach)
            right = (base_x - side[0] * reach, base_y - side[1] * reach)
            pygame.draw.polygon(target, PALETTE["text"], (tip, left, right))

    # --- Draw ------------------------------------------------------------

    def draw(
        self,
        target: pygame.Surface,
        snapshot: GameSnapshot,
        *,
        paused: bool = False,
        time_ms: int = 0,
    ) -> None:
        """Render one frame of ``snapshot`` onto ``target``."""
        target.fill((0, 0, 0))
        self._draw_hud(target, snapshot)
        target.blit(self.background, self.board.topleft)
        pygame.draw.rect(target, PALETTE["border"], self.board, width=1)

        self._draw_food(target, snapshot.food, time_ms)
        self._draw_body(target, snapshot.snake)
        self._draw_head(target, snapshot.head, snapshot.direction)

        lines = self.overlay_lines(snapshot, paused)
        if lines:
            self._draw_overlay(target, lines)
        self._draw_pad(target)


def make_window() -> pygame.Surface:
    window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SCALED)
    pygame.display.set_caption("Cyber Snake")
    return window
