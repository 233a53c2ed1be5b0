"""UI package."""

from .timer_widget import TimerWidget
from .settings_dialog import SettingsDialog, EXERCISE_CATALOG

__all__ = [
    "TimerWidget",
    "SettingsDialog",
    "EXERCISE_CATALOG",
]
