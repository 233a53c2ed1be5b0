"""Settings dialog for HIIT Timer.

Edits a working copy of ``Settings``.  Nothing is written until the user
presses Save; the caller then persists the result and reconfigures the
session.
"""

from __future__ import annotations

from dataclasses import replace

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSpinBox, QPushButton, QComboBox, QListWidget, QWidget,
)

from ..settings import (
    MAX_EXERCISE_SECONDS, MAX_REST_SECONDS, MAX_SET_COUNT, MAX_SET_REST_MINUTES,
    Settings,
)
from ..timer.config import DEFAULT_EXERCISES


EXERCISE_CATALOG: tuple[str, ...] = DEFAULT_EXERCISES + (
    "Mountain Climbers",
    "Lunge Jumps",
    "High Plank",
    "Plank Jacks",
    "Bicycle Crunch",
    "Skater",
)


class SettingsDialog(QDialog):
    """Modal dialog for the session parameters."""

    def __init__(self, settings: Settings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Timer Settings")
        self.setMinimumWidth(420)
        self.setModal(True)

        self._settings = replace(settings, exercises=list(settings.exercises))

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        form = QFormLayout()
        form.setHorizontalSpacing(20)
        form.setVerticalSpacing(10)

        self._sets_spin = QSpinBox()
        self._sets_spin.setRange(0, MAX_SET_COUNT)
        form.addRow("Sets:", self._sets_spin)

        self._rest_spin = QSpinBox()
        self._rest_spin.setRange(0, MAX_REST_SECONDS)
        self._rest_spin.setSuffix(" s")
        form.addRow("Rest between exercises:", self._rest_spin)

        self._set_rest_spin = QSpinBox()
        self._set_rest_spin.setRange(0, MAX_SET_REST_MINUTES)
        self._set_rest_spin.setSuffix(" min")
        form.addRow("Rest between sets:", self._set_rest_spin)

        self._exercise_spin = QSpinBox()
        self._exercise_spin.setRange(0, MAX_EXERCISE_SECONDS)
        self._exercise_spin.setSuffix(" s")
        form.addRow("Exercise duration:", self._exercise_spin)

        root.addLayout(form)

        # ── exercise list ────────────────────────────────────────────
        lbl = QLabel("Exercises")
        lbl.setStyleSheet("font-size: 15px; font-weight: 700;")
        root.addWidget(lbl)

        pick_row = QHBoxLayout()
        self._catalog_combo = QComboBox()
        self._catalog_combo.addItems(EXERCISE_CATALOG)
        add_btn = QPushButton("Add")
        add_btn.setObjectName("secondaryButton")
        add_btn.clicked.connect(self._on_add_exercise)
        pick_row.addWidget(self._catalog_combo, 1)
        pick_row.addWidget(add_btn)
        root.addLayout(pick_row)

        self._exercise_list = QListWidget()
        self._exercise_list.setMinimumHeight(180)
        root.addWidget(self._exercise_list)

        remove_btn = QPushButton("Remove")
        remove_btn.setObjectName("secondaryButton")
        remove_btn.clicked.connect(self._on_remove_exercise)
        root.addWidget(remove_btn)

        # ── save ─────────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        cancel_btn = QPushButton("Cancel")
        cancel_btn.setObjectName("secondaryButton")
        cancel_btn.clicked.connect(self.reject)
        save_btn = QPushButton("Save Changes")
        save_btn.setObjectName("primaryButton")
        save_btn.clicked.connect(self._on_save)
        btn_row.addWidget(cancel_btn)
        btn_row.addWidget(save_btn)
        root.addLayout(btn_row)

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE FROM SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _populate(self) -> None:
        s = self._settings
        self._sets_spin.setValue(s.set_count)
        self._rest_spin.setValue(s.rest_between_exercises)
        self._set_rest_spin.setValue(s.rest_between_sets)
        self._exercise_spin.setValue(s.exercise_duration)
        self._exercise_list.clear()
        self._exercise_list.addItems(s.exercises)

    # ══════════════════════════════════════════════════════════════════
    #  CHANGE HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _on_add_exercise(self) -> None:
        name = self._catalog_combo.currentText()
        if name:
            self._settings.exercises.append(name)
            self._exercise_list.addItem(name)

    def _on_remove_exercise(self) -> None:
        row = self._exercise_list.currentRow()
        if row < 0:
            return
        self._exercise_list.takeItem(row)
        del self._settings.exercises[row]

    def _on_save(self) -> None:
        self._settings.set_count = self._sets_spin.value()
        self._settings.rest_between_exercises = self._rest_spin.value()
        self._settings.rest_between_sets = self._set_rest_spin.value()
        self._settings.exercise_duration = self._exercise_spin.value()
        self.accept()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def settings(self) -> Settings:
        return self._settings
