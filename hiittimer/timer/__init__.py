"""Timer package."""

from .clock import Clock, TICK_MS
from .config import Configuration, ConfigurationError, DEFAULT_EXERCISES
from .sequencer import Phase, SessionState, next_phase, GET_READY_MS
from .engine import SessionController, format_time, phase_label

__all__ = [
    "Clock",
    "TICK_MS",
    "Configuration",
    "ConfigurationError",
    "DEFAULT_EXERCISES",
    "Phase",
    "SessionState",
    "next_phase",
    "GET_READY_MS",
    "SessionController",
    "format_time",
    "phase_label",
]
