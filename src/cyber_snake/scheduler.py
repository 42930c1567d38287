"""Fixed-step tick scheduling driven by frame deltas."""

from __future__ import annotations

from typing import Callable

from .settings import MAX_CATCH_UP_TICKS


class TickScheduler:
    """Accumulate elapsed frame time and run ticks at the current interval.

    The interval is re-read after every tick, so a speed change takes effect
    from the next tick boundary while leftover time carries over.
    """

    def __init__(self, max_catch_up: int = MAX_CATCH_UP_TICKS) -> None:
        self.max_catch_up = max(1, max_catch_up)
        self.accumulator: float = 0.0

    def reset(self) -> None:
        self.accumulator = 0.0

    def advance(
        self,
        elapsed_ms: float,
        tick: Callable[[], bool],
        interval_of: Callable[[], float],
    ) -> int:
        """Run as many ticks as ``elapsed_ms`` covers and return how many ran.

        ``tick`` returns False once the game stopped; the remaining time is
        then discarded.
        """
        if elapsed_ms > 0:
            self.accumulator += elapsed_ms
        ticks = 0
        interval = interval_of()
        while self.accumulator >= interval:
            self.accumulator -= interval
            ticks += 1
            if not tick():
                self.reset()
                break
            if ticks >= self.max_catch_up:
                # Drop the backlog after a long hitch instead of fast-forwarding
                self.accumulator %= interval_of()
                break
            interval = interval_of()
        return ticks
