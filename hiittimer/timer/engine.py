"""Session controller for HIIT Timer.

Couples the countdown ``Clock`` to the pure ``next_phase`` sequencer and
owns the one ``QTimer`` that drives them.

Controls
--------
IDLE/FINISHED → GET_READY          (start)
{running}     → paused             (pause)   phase is kept
paused        → {running}          (resume)  only with time left
Any           → IDLE               (stop, reconfigure)
{running}     → next phase         (clock reaches 0)

Calls that make no sense in the current state are ignored.  The QTimer
is active exactly while the clock is running.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, Qt, QTimer, pyqtSignal

from .clock import Clock, TICK_MS
from .config import Configuration
from .sequencer import (
    GET_READY_MS,
    TERMINAL_PHASES,
    Phase,
    SessionState,
    next_phase,
)

logger = logging.getLogger(__name__)


# ── display helpers ───────────────────────────────────────────────────────


def format_time(ms: int) -> str:
    """Render milliseconds as ``MM:SS.mmm``."""
    ms = max(0, ms)
    minutes, rest = divmod(ms, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes:02d}:{seconds:02d}.{millis:03d}"


def phase_label(state: SessionState, config: Configuration) -> str:
    if state.phase == Phase.GET_READY:
        return f"Get Ready - Set {state.current_set}"
    if state.phase == Phase.EXERCISING:
        if state.current_exercise_index < len(config.exercises):
            return config.exercises[state.current_exercise_index]
        return ""
    if state.phase == Phase.RESTING:
        return "Rest"
    return ""


# ── controller ────────────────────────────────────────────────────────────


class SessionController(QObject):
    """Qt-driven interval session.

    Signals
    -------
    tick(remaining_ms: int)
        Emitted after every tick while running, and on stop.
    phase_changed(phase: Phase)
        Emitted on every phase change, including the transient FINISHED
        right before the reset to IDLE.
    running_changed(running: bool)
        Emitted when the clock starts or stops counting.
    session_finished()
        Emitted once when the last exercise of the last set completes.
    configuration_changed(config: Configuration)
        Emitted after ``reconfigure``.
    """

    tick = pyqtSignal(int)
    phase_changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)
    session_finished = pyqtSignal()
    configuration_changed = pyqtSignal(object)

    def __init__(
        self,
        config: Configuration | None = None,
        parent: QObject | None = None,
        *,
        tick_ms: int = TICK_MS,
        get_ready_ms: int = GET_READY_MS,
    ) -> None:
        super().__init__(parent)

        self._config: Configuration = config if config is not None else Configuration()
        self._get_ready_ms = get_ready_ms

        self._clock = Clock(tick_ms)
        self._phase: Phase = Phase.IDLE
        self._current_set: int = 1
        self._current_exercise_index: int = 0
        self._phase_duration_ms: int = 0

        # Parented, so it cannot outlive the controller.
        self._qt_timer = QTimer(self)
        self._qt_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._qt_timer.setInterval(tick_ms)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def configuration(self) -> Configuration:
        return self._config

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_ms(self) -> int:
        return self._clock.remaining_ms

    @property
    def current_set(self) -> int:
        return self._current_set

    @property
    def current_exercise_index(self) -> int:
        return self._current_exercise_index

    @property
    def is_running(self) -> bool:
        return self._clock.running

    @property
    def is_paused(self) -> bool:
        return (
            not self._clock.running
            and self._phase not in TERMINAL_PHASES
            and self._clock.remaining_ms > 0
        )

    @property
    def is_ticking(self) -> bool:
        """Whether the underlying QTimer is live."""
        return self._qt_timer.isActive()

    @property
    def tick_ms(self) -> int:
        return self._clock.tick_ms

    @property
    def current_exercise(self) -> str | None:
        if self._phase not in (Phase.EXERCISING, Phase.RESTING):
            return None
        if self._current_exercise_index >= len(self._config.exercises):
            return None
        return self._config.exercises[self._current_exercise_index]

    @property
    def label(self) -> str:
        return phase_label(self.snapshot(), self._config)

    @property
    def percent_complete(self) -> float:
        """0.0 → 1.0 progress through the current phase."""
        if self._phase_duration_ms <= 0:
            return 0.0
        elapsed = self._phase_duration_ms - self._clock.remaining_ms
        return max(0.0, min(1.0, elapsed / self._phase_duration_ms))

    def snapshot(self) -> SessionState:
        return SessionState(
            phase=self._phase,
            remaining_ms=self._clock.remaining_ms,
            current_set=self._current_set,
            current_exercise_index=self._current_exercise_index,
            running=self._clock.running,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin a run.  Only valid from IDLE/FINISHED."""
        if self._phase not in TERMINAL_PHASES:
            logger.debug("start() ignored in phase %s", self._phase.value)
            return
        if self._config.set_count == 0:
            logger.warning("start() rejected: configuration has zero sets")
            return

        self._current_set = 1
        self._current_exercise_index = 0
        self._clock.start(self._get_ready_ms)
        self._enter(Phase.GET_READY, self._get_ready_ms)
        self._qt_timer.start()
        logger.info(
            "Session started: %d set(s) of %d exercise(s)",
            self._config.set_count, len(self._config.exercises),
        )
        self.running_changed.emit(True)
        self.tick.emit(self._clock.remaining_ms)

    def pause(self) -> None:
        if not self._clock.running:
            return
        self._clock.pause()
        self._qt_timer.stop()
        logger.debug("Paused with %d ms left", self._clock.remaining_ms)
        self.running_changed.emit(False)

    def resume(self) -> None:
        """Pick up where ``pause`` left off.  Needs time on the clock."""
        if not self.is_paused:
            return
        self._clock.resume()
        self._qt_timer.start()
        logger.debug("Resumed with %d ms left", self._clock.remaining_ms)
        self.running_changed.emit(True)

    def stop(self) -> None:
        """Return to IDLE from anywhere."""
        was_running = self._clock.running
        self._qt_timer.stop()
        self._clock.stop()
        self._current_set = 1
        self._current_exercise_index = 0
        self._phase_duration_ms = 0
        if self._phase != Phase.IDLE:
            self._set_phase(Phase.IDLE)
        if was_running:
            self.running_changed.emit(False)
        self.tick.emit(0)

    def reconfigure(self, config: Configuration) -> None:
        """Swap in *config*.  Any run in progress is stopped first."""
        if not isinstance(config, Configuration):
            raise TypeError(
                f"expected Configuration, got {type(config).__name__}"
            )
        self.stop()
        self._config = config
        logger.info("Configuration replaced: %s", config)
        self.configuration_changed.emit(config)

    def shutdown(self) -> None:
        """Release the tick source.  Call before discarding the controller."""
        self.stop()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: tick mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if self._clock.tick():
            self._advance()
        if self._clock.running:
            self.tick.emit(self._clock.remaining_ms)

    def _advance(self) -> None:
        # Zero-length phases expire immediately, so keep stepping until
        # something has time on it or the run is over.
        while True:
            state = next_phase(self.snapshot(), self._config)
            if state.phase == Phase.FINISHED:
                self._finish()
                return

            self._current_set = state.current_set
            self._current_exercise_index = state.current_exercise_index
            self._clock.start(state.remaining_ms)
            self._enter(state.phase, state.remaining_ms)
            if state.remaining_ms > 0:
                return

    def _finish(self) -> None:
        self._qt_timer.stop()
        self._set_phase(Phase.FINISHED)
        logger.info("Session finished")
        self.session_finished.emit()
        self.stop()

    def _enter(self, phase: Phase, duration_ms: int) -> None:
        self._phase_duration_ms = duration_ms
        self._set_phase(phase)
        logger.info(
            "Phase %s (set %d, exercise %d, %d ms)",
            phase.value, self._current_set,
            self._current_exercise_index, duration_ms,
        )

    def _set_phase(self, phase: Phase) -> None:
        self._phase = phase
        self.phase_changed.emit(phase)
