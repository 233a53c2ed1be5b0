"""Tests for the fixed-quantum countdown clock."""

import pytest

from hiittimer.timer.clock import Clock, TICK_MS


class TestClock:

    def test_initial_state(self):
        clock = Clock()
        assert clock.remaining_ms == 0
        assert clock.running is False
        assert clock.tick_ms == TICK_MS == 10

    def test_rejects_non_positive_period(self):
        with pytest.raises(ValueError):
            Clock(0)

    def test_start_sets_remaining_and_runs(self):
        clock = Clock()
        clock.start(3000)
        assert clock.remaining_ms == 3000
        assert clock.running is True

    def test_tick_decrements_one_quantum(self):
        clock = Clock()
        clock.start(100)
        assert clock.tick() is False
        assert clock.remaining_ms == 90

    def test_tick_ignored_while_paused(self):
        clock = Clock()
        clock.start(100)
        clock.pause()
        assert clock.tick() is False
        assert clock.remaining_ms == 100

    def test_zero_crossing_reported_once(self):
        clock = Clock()
        clock.start(20)
        assert clock.tick() is False
        assert clock.tick() is True
        assert clock.remaining_ms == 0

    def test_clamps_at_zero(self):
        clock = Clock()
        clock.start(15)
        clock.tick()
        assert clock.tick() is True
        assert clock.remaining_ms == 0

    def test_running_at_zero_reports_exhaustion(self):
        clock = Clock()
        clock.start(0)
        assert clock.tick() is True
        assert clock.remaining_ms == 0

    def test_pause_preserves_remaining(self):
        clock = Clock()
        clock.start(1000)
        clock.tick()
        clock.pause()
        clock.pause()
        assert clock.remaining_ms == 990
        clock.resume()
        clock.resume()
        assert clock.running is True
        assert clock.remaining_ms == 990

    def test_resume_at_zero_is_noop(self):
        clock = Clock()
        clock.start(10)
        clock.tick()
        clock.pause()
        clock.resume()
        assert clock.running is False

    def test_stop_zeroes(self):
        clock = Clock()
        clock.start(500)
        clock.stop()
        assert clock.remaining_ms == 0
        assert clock.running is False
        assert clock.tick() is False
