"""
Shared fixtures: a Qt application for QTimer-backed objects and the
board window, and a controllable clock for timing tests.
"""

import os
import sys

import pytest
from PySide6.QtWidgets import QApplication

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Create QApplication for Qt objects (required for QTimer and widgets)
@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication instance for the test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


class FakeClock:
    """Monotonic millisecond clock the test moves by hand."""

    def __init__(self, start_ms: float = 10_000.0):
        self.now = start_ms

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
