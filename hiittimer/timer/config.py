"""Session configuration value object.

A ``Configuration`` is frozen: the controller never edits one in place,
it swaps in a new instance through ``SessionController.reconfigure``.
All durations are milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


DEFAULT_EXERCISES: tuple[str, ...] = (
    "Jumping Jack",
    "Squat Jump",
    "High Knees",
    "Burpee",
    "Russian Twist",
    "Leg Lift",
    "Plank",
    "V Holds",
    "Lunge",
    "Pushups",
)

_NUMERIC_FIELDS = (
    "set_count",
    "exercise_duration_ms",
    "rest_between_exercises_ms",
    "rest_between_sets_ms",
)


class ConfigurationError(ValueError):
    """Raised when session parameters are not non-negative integers."""


@dataclass(frozen=True)
class Configuration:
    """Immutable parameter bundle for one training run."""

    set_count: int = 3
    exercise_duration_ms: int = 20_000
    rest_between_exercises_ms: int = 10_000
    rest_between_sets_ms: int = 2 * 60_000
    exercises: tuple[str, ...] = field(default=DEFAULT_EXERCISES)

    def __post_init__(self) -> None:
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass; a checkbox value is never a count
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{name} must be an integer, got {value!r}"
                )
            if value < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {value}")

        if isinstance(self.exercises, str):
            raise ConfigurationError("exercises must be a list of names")
        try:
            names = tuple(self.exercises)
        except TypeError:
            raise ConfigurationError(
                f"exercises must be a list of names, got {self.exercises!r}"
            ) from None
        for name in names:
            if not isinstance(name, str):
                raise ConfigurationError(
                    f"exercise names must be strings, got {name!r}"
                )
        object.__setattr__(self, "exercises", names)

    @classmethod
    def from_user_units(
        cls,
        sets: int,
        exercise_seconds: int,
        rest_seconds: int,
        set_rest_minutes: int,
        exercises: Iterable[str],
    ) -> Configuration:
        """Build from the units the settings editor shows."""
        for value in (exercise_seconds, rest_seconds, set_rest_minutes):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"durations must be integers, got {value!r}"
                )
        return cls(
            set_count=sets,
            exercise_duration_ms=exercise_seconds * 1000,
            rest_between_exercises_ms=rest_seconds * 1000,
            rest_between_sets_ms=set_rest_minutes * 60_000,
            exercises=exercises,
        )

    def total_duration_ms(self, get_ready_ms: int) -> int:
        """Length of a full run, first get-ready included.

        An empty exercise list still spends one exercise period per set
        before the set completes.
        """
        if self.set_count == 0:
            return 0
        per_set_exercises = max(1, len(self.exercises))
        per_set = (
            per_set_exercises * self.exercise_duration_ms
            + (per_set_exercises - 1) * self.rest_between_exercises_ms
        )
        return (
            get_ready_ms
            + self.set_count * per_set
            + (self.set_count - 1) * self.rest_between_sets_ms
        )
