"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/HIITTimer/settings.json

Durations are kept in the units the settings dialog shows (seconds for
exercises and short rests, minutes between sets) and converted to a
millisecond ``Configuration`` on demand.

Usage::

    settings = load_settings()
    settings.set_count = 4
    save_settings(settings)
    controller.reconfigure(settings.to_configuration())
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path

from .timer.config import Configuration, DEFAULT_EXERCISES

logger = logging.getLogger(__name__)


APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "HIITTimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

# Upper bounds shared with the settings dialog's spin boxes.
MAX_SET_COUNT = 99
MAX_EXERCISE_SECONDS = 600
MAX_REST_SECONDS = 600
MAX_SET_REST_MINUTES = 60

_LIMITS = {
    "set_count": MAX_SET_COUNT,
    "exercise_duration": MAX_EXERCISE_SECONDS,
    "rest_between_exercises": MAX_REST_SECONDS,
    "rest_between_sets": MAX_SET_REST_MINUTES,
}


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── session ───────────────────────────────────────────────────────
    set_count: int = 3
    exercise_duration: int = 20            # seconds
    rest_between_exercises: int = 10       # seconds
    rest_between_sets: int = 2             # minutes
    exercises: list[str] = field(default_factory=lambda: list(DEFAULT_EXERCISES))

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 520
    always_on_top: bool = False

    def check_limits(self) -> None:
        """Raise ``ValueError`` for values the settings dialog cannot show."""
        for name, limit in _LIMITS.items():
            value = getattr(self, name)
            if isinstance(value, int) and value > limit:
                raise ValueError(f"{name} must be <= {limit}, got {value}")

    def to_configuration(self) -> Configuration:
        """Raises ``ConfigurationError`` for negative or non-integer values."""
        return Configuration.from_user_units(
            sets=self.set_count,
            exercise_seconds=self.exercise_duration,
            rest_seconds=self.rest_between_exercises,
            set_rest_minutes=self.rest_between_sets,
            exercises=self.exercises,
        )


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    A file that cannot be read or describes an invalid session is
    ignored with a warning.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        settings = Settings(**filtered)
        settings.to_configuration()
        settings.check_limits()
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring settings file %s: %s", SETTINGS_PATH, exc)
        return Settings()
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
    logger.debug("Settings saved to %s", SETTINGS_PATH)
