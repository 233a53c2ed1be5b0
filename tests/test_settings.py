"""Tests for settings persistence and conversion to a Configuration."""

import json

import pytest

from hiittimer.settings import (
    MAX_EXERCISE_SECONDS, MAX_REST_SECONDS, MAX_SET_COUNT, MAX_SET_REST_MINUTES,
    Settings, load_settings, save_settings,
)
from hiittimer.timer.config import Configuration, ConfigurationError, DEFAULT_EXERCISES


class TestSettings:

    def test_defaults_match_original_app(self):
        s = Settings()
        assert s.set_count == 3
        assert s.exercise_duration == 20
        assert s.rest_between_exercises == 10
        assert s.rest_between_sets == 2
        assert s.exercises == list(DEFAULT_EXERCISES)

    def test_default_exercise_lists_are_independent(self):
        a, b = Settings(), Settings()
        a.exercises.append("Skater")
        assert "Skater" not in b.exercises

    def test_to_configuration_converts_units(self):
        s = Settings(
            set_count=2, exercise_duration=30, rest_between_exercises=15,
            rest_between_sets=3, exercises=["A", "B"],
        )
        assert s.to_configuration() == Configuration(
            set_count=2, exercise_duration_ms=30_000,
            rest_between_exercises_ms=15_000, rest_between_sets_ms=180_000,
            exercises=("A", "B"),
        )

    def test_to_configuration_rejects_negative(self):
        with pytest.raises(ConfigurationError):
            Settings(set_count=-1).to_configuration()


class TestPersistence:

    def test_round_trip(self, settings_path):
        original = Settings(set_count=5, exercises=["Plank"], window_width=600)
        save_settings(original)
        loaded = load_settings()
        assert loaded == original
        assert settings_path.exists()

    def test_missing_file_returns_defaults(self):
        assert load_settings() == Settings()

    def test_unknown_keys_ignored(self, settings_path):
        settings_path.write_text(json.dumps({"set_count": 4, "volume": 70}))
        assert load_settings().set_count == 4

    def test_corrupt_file_returns_defaults(self, settings_path, caplog):
        settings_path.write_text("{not json")
        with caplog.at_level("WARNING"):
            assert load_settings() == Settings()
        assert "Ignoring settings file" in caplog.text

    def test_invalid_values_return_defaults(self, settings_path):
        settings_path.write_text(json.dumps({"set_count": -2}))
        assert load_settings() == Settings()

    def test_non_object_returns_defaults(self, settings_path):
        settings_path.write_text(json.dumps([1, 2, 3]))
        assert load_settings() == Settings()

    def test_bare_string_exercises_return_defaults(self, settings_path):
        settings_path.write_text(json.dumps({"exercises": "Plank"}))
        loaded = load_settings()
        assert loaded.exercises == list(DEFAULT_EXERCISES)

    def test_values_above_dialog_limits_return_defaults(self, settings_path):
        settings_path.write_text(json.dumps({"set_count": MAX_SET_COUNT + 1}))
        assert load_settings() == Settings()

    def test_values_at_dialog_limits_load(self, settings_path):
        settings_path.write_text(json.dumps({
            "set_count": MAX_SET_COUNT,
            "exercise_duration": MAX_EXERCISE_SECONDS,
            "rest_between_exercises": MAX_REST_SECONDS,
            "rest_between_sets": MAX_SET_REST_MINUTES,
        }))
        loaded = load_settings()
        assert loaded.set_count == MAX_SET_COUNT
        assert loaded.rest_between_sets == MAX_SET_REST_MINUTES


class TestLimits:

    def test_within_limits(self):
        Settings().check_limits()

    @pytest.mark.parametrize("field,value", [
        ("set_count", MAX_SET_COUNT + 1),
        ("exercise_duration", MAX_EXERCISE_SECONDS + 1),
        ("rest_between_exercises", MAX_REST_SECONDS + 1),
        ("rest_between_sets", MAX_SET_REST_MINUTES + 1),
    ])
    def test_above_limit_rejected(self, field, value):
        with pytest.raises(ValueError, match=field):
            Settings(**{field: value}).check_limits()
