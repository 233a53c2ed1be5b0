"""Main timer display widget.

Layout (top → bottom):
    - Clock (MM:SS.mmm)
    - Phase label ("Get Ready - Set 2", exercise name, "Rest")
    - Set / exercise counter
    - Button row: Start | Pause | Resume, Stop
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
)

from ..timer.engine import SessionController, format_time
from ..timer.sequencer import Phase
from .styles import phase_color


class TimerWidget(QWidget):
    """The timer card: read-only view plus the run controls."""

    def __init__(
        self, controller: SessionController, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._build_ui()
        self._connect_signals()
        self._refresh()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(8)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._clock_label = QLabel(format_time(0), card)
        self._clock_label.setObjectName("clockLabel")
        self._clock_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._clock_label)

        self._phase_label = QLabel("", card)
        self._phase_label.setObjectName("phaseLabel")
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._phase_label)

        self._progress_label = QLabel("", card)
        self._progress_label.setObjectName("progressLabel")
        self._progress_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._progress_label)

        layout.addSpacing(16)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("Start", card)
        self._start_btn.setObjectName("primaryButton")
        self._pause_btn = QPushButton("Pause", card)
        self._pause_btn.setObjectName("primaryButton")
        self._resume_btn = QPushButton("Resume", card)
        self._resume_btn.setObjectName("primaryButton")
        self._stop_btn = QPushButton("Stop", card)
        self._stop_btn.setObjectName("dangerButton")

        for btn in (
            self._start_btn, self._pause_btn, self._resume_btn, self._stop_btn,
        ):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        c = self._controller
        self._start_btn.clicked.connect(c.start)
        self._pause_btn.clicked.connect(c.pause)
        self._resume_btn.clicked.connect(c.resume)
        self._stop_btn.clicked.connect(c.stop)

        c.tick.connect(self._on_tick)
        c.phase_changed.connect(lambda _phase: self._refresh())
        c.running_changed.connect(lambda _running: self._refresh())
        c.configuration_changed.connect(lambda _config: self._refresh())

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_tick(self, remaining_ms: int) -> None:
        self._clock_label.setText(format_time(remaining_ms))

    def _refresh(self) -> None:
        c = self._controller
        self._clock_label.setText(format_time(c.remaining_ms))
        self._phase_label.setText(c.label)

        if c.phase in (Phase.IDLE, Phase.FINISHED):
            self._progress_label.setText("")
        else:
            config = c.configuration
            text = f"Set {c.current_set} of {config.set_count}"
            if config.exercises:
                text += (
                    f"  ·  Exercise {c.current_exercise_index + 1}"
                    f" of {len(config.exercises)}"
                )
            self._progress_label.setText(text)

        color = phase_color(c.phase, paused=c.is_paused)
        self._phase_label.setStyleSheet(f"color: {color};")

        self._update_button_visibility()

    def _update_button_visibility(self) -> None:
        """Show/hide buttons based on the controller's state."""
        c = self._controller
        has_time = c.remaining_ms > 0
        self._start_btn.setVisible(not c.is_running and not has_time)
        self._pause_btn.setVisible(c.is_running)
        self._resume_btn.setVisible(c.is_paused)
        self._stop_btn.setVisible(has_time)
