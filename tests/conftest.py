"""Shared pytest fixtures for HIIT Timer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from hiittimer.timer.config import Configuration
from hiittimer.timer.engine import SessionController

from helpers import SCENARIO


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("hiittimer.settings.SETTINGS_PATH", path)
    monkeypatch.setattr("hiittimer.settings.APP_SUPPORT_DIR", tmp_path)
    yield path


@pytest.fixture
def controller(qapp):
    """Controller running the two-set A/B scenario."""
    c = SessionController(SCENARIO)
    yield c
    c.shutdown()


@pytest.fixture
def make_controller(qapp):
    """Factory for controllers with custom configurations."""
    created = []

    def _make(**kwargs):
        c = SessionController(Configuration(**kwargs))
        created.append(c)
        return c

    yield _make
    for c in created:
        c.shutdown()
