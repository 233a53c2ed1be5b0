"""Fixed-quantum countdown clock.

The clock owns no timer.  Whoever owns the periodic tick source calls
``tick()`` once per period; each call removes exactly one quantum, so a
pause/resume pair never drifts.
"""

from __future__ import annotations


TICK_MS = 10  # matches the display's millisecond resolution


class Clock:
    """Millisecond countdown advanced by ``tick()``."""

    def __init__(self, tick_ms: int = TICK_MS) -> None:
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self._tick_ms = tick_ms
        self._remaining_ms = 0
        self._running = False

    @property
    def tick_ms(self) -> int:
        return self._tick_ms

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    @property
    def running(self) -> bool:
        return self._running

    def start(self, initial_ms: int) -> None:
        self._remaining_ms = max(0, initial_ms)
        self._running = True

    def pause(self) -> None:
        self._running = False

    def resume(self) -> None:
        """Restart counting.  A no-op once the clock has run out."""
        if self._remaining_ms > 0:
            self._running = True

    def stop(self) -> None:
        self._running = False
        self._remaining_ms = 0

    def tick(self) -> bool:
        """Advance one quantum.

        Returns ``True`` on the zero-crossing, i.e. the tick that leaves a
        running clock at 0.  A running clock started at 0 reports it on
        its first tick.
        """
        if not self._running:
            return False
        if self._remaining_ms == 0:
            return True
        self._remaining_ms = max(0, self._remaining_ms - self._tick_ms)
        return self._remaining_ms == 0
