"""Main application window for HIIT Timer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QMessageBox,
)

from .timer.config import ConfigurationError
from .timer.engine import SessionController
from .ui.settings_dialog import SettingsDialog
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget
from .settings import Settings, load_settings, save_settings

logger = logging.getLogger(__name__)


class HiitTimerApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("HIIT Timer")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()
        self.resize(self._settings.window_width, self._settings.window_height)
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        # ── controller ────────────────────────────────────────────────
        self._controller = SessionController(
            self._settings.to_configuration(), self,
        )
        self._controller.session_finished.connect(self._on_session_finished)

        self._build_ui()
        self._build_shortcuts()
        self.setStyleSheet(build_stylesheet())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        title = QLabel("HIIT Timer", central)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 24px; font-weight: 700;")
        layout.addWidget(title)

        settings_row = QHBoxLayout()
        settings_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._settings_btn = QPushButton("Settings", central)
        self._settings_btn.setObjectName("secondaryButton")
        self._settings_btn.clicked.connect(self.open_settings)
        settings_row.addWidget(self._settings_btn)
        layout.addLayout(settings_row)

        self._timer_widget = TimerWidget(self._controller, central)
        layout.addWidget(self._timer_widget, 1)

        self.setCentralWidget(central)

    def _build_shortcuts(self) -> None:
        space = QAction(self)
        space.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space.triggered.connect(self._on_space)
        self.addAction(space)

        escape = QAction(self)
        escape.setShortcut(QKeySequence(Qt.Key.Key_Escape))
        escape.triggered.connect(self._controller.stop)
        self.addAction(escape)

    # ── public ────────────────────────────────────────────────────────────

    @property
    def controller(self) -> SessionController:
        return self._controller

    def open_settings(self) -> None:
        """Pause the run, edit settings, and reconfigure on save."""
        self._controller.pause()
        dialog = SettingsDialog(self._settings, self)
        if not dialog.exec():
            return
        self.apply_settings(dialog.settings)

    def apply_settings(self, settings: Settings) -> None:
        try:
            config = settings.to_configuration()
        except ConfigurationError as exc:
            logger.warning("Rejected settings: %s", exc)
            QMessageBox.warning(self, "Invalid settings", str(exc))
            return
        self._settings = settings
        self._controller.reconfigure(config)
        try:
            save_settings(settings)
        except OSError as exc:
            logger.warning("Could not save settings: %s", exc)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_space(self) -> None:
        c = self._controller
        if c.is_running:
            c.pause()
        elif c.is_paused:
            c.resume()
        else:
            c.start()

    def _on_session_finished(self) -> None:
        self.statusBar().showMessage("Workout complete!", 5000)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._controller.shutdown()
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("Could not save window geometry: %s", exc)
        super().closeEvent(event)
