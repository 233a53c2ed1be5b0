"""Shared test helpers for HIIT Timer."""

from hiittimer.timer.config import Configuration
from hiittimer.timer.engine import SessionController
from hiittimer.timer.sequencer import Phase


SCENARIO = Configuration(
    set_count=2,
    exercise_duration_ms=20_000,
    rest_between_exercises_ms=10_000,
    rest_between_sets_ms=120_000,
    exercises=("A", "B"),
)


class SignalCollector:
    """Records every emission of the signals it is connected to."""

    def __init__(self):
        self.items: list = []

    def __call__(self, *args):
        # single-argument signals are stored unwrapped
        self.items.append(args[0] if len(args) == 1 else args)

    def __len__(self):
        return len(self.items)


def complete_phase(controller: SessionController) -> None:
    """Fast-complete the current phase by jumping to the last tick."""
    controller._clock._remaining_ms = controller.tick_ms
    controller._on_tick()


def tick_until_idle(controller: SessionController, limit: int = 10_000_000) -> int:
    """Drive ``_on_tick`` until the session ends; return the tick count."""
    ticks = 0
    while controller.phase != Phase.IDLE:
        controller._on_tick()
        ticks += 1
        assert ticks <= limit, "session did not terminate"
    return ticks
