"""Entry point for the Cyber Snake game."""

from __future__ import annotations

import logging

from cyber_snake.game import CyberSnake
from cyber_snake.settings import LOG_LEVEL


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = CyberSnake()
    game.start()


if __name__ == "__main__":
    main()
