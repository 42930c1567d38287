"""Cyber Snake application: pygame window, event pump, fixed-step loop."""

from __future__ import annotations

import logging

import pygame

from .config import FPS
from .controls import Controls, InputAction, Intent
from .engine import GameEngine, GameStatus
from .render import Renderer, make_window
from .scheduler import TickScheduler
from .settings import EngineConfig
from .storage import FileHighScoreStore, HighScoreStore

logger = logging.getLogger(__name__)


class CyberSnake:
    """Wires the engine to pygame input, a tick clock, and the renderer."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        store: HighScoreStore | None = None,
    ) -> None:
        if store is None:
            store = FileHighScoreStore()
        self.engine = GameEngine(config, store)
        self.controls = Controls()
        self.scheduler = TickScheduler()
        self.paused: bool = False
        self.running: bool = True

    # --- Input / events -------------------------------------------------

    def apply(self, action: InputAction | None) -> None:
        """Forward one translated input to the engine or the loop state."""
        if action is None:
            return
        if action.intent is Intent.QUIT:
            self.running = False
        elif action.intent is Intent.START:
            if self.engine.status is not GameStatus.PLAYING:
                self.restart()
        elif action.intent is Intent.PAUSE:
            self._toggle_pause()
        elif action.intent is Intent.TURN and not self.paused:
            self.engine.request_direction(action.direction)

    def restart(self) -> None:
        self.engine.reset()
        self.scheduler.reset()
        self.paused = False

    def _toggle_pause(self) -> None:
        """Toggle pause while playing; ignored on the idle/game over screens."""
        if not self.engine.is_playing:
            return
        self.paused = not self.paused
        self.scheduler.reset()
        logger.debug("Paused" if self.paused else "Resumed")

    def handle_events(self) -> None:
        for event in pygame.event.get():
            self.apply(self.controls.translate(event))

    # --- Logic step -----------------------------------------------------

    def update(self, elapsed_ms: float) -> int:
        """Advance the engine by whatever ticks ``elapsed_ms`` covers."""
        if self.paused or not self.engine.is_playing:
            return 0
        return self.scheduler.advance(
            elapsed_ms,
            lambda: self.engine.tick() is GameStatus.PLAYING,
            lambda: self.engine.speed,
        )

    # --- Main loop ------------------------------------------------------

    def start(self) -> None:
        """Run the main loop: handle events, tick at the current speed, render."""
        pygame.init()
        window = make_window()
        renderer = Renderer(self.engine.config.grid_size)
        clock = pygame.time.Clock()
        logger.info("Cyber Snake window opened")

        try:
            while self.running:
                elapsed = clock.tick(FPS)
                self.handle_events()
                self.update(elapsed)
                renderer.draw(
                    window,
                    self.engine.snapshot(),
                    paused=self.paused,
                    time_ms=pygame.time.get_ticks(),
                )
                pygame.display.flip()
        finally:
            pygame.quit()
