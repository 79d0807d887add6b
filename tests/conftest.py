"""Shared test configuration."""

import os

# Widgets and timers are created without a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qt_app():
    """Provide the single QApplication needed by timers and widgets."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
