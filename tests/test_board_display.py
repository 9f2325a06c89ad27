"""
Tests for the board window: snapshot requests and fullscreen keys.
"""

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QKeyEvent

from engine.buzz_engine import BuzzEngine
from gui.board_display import BoardDisplay
from services.event_bus import EventBus


def key(code) -> QKeyEvent:
    return QKeyEvent(QEvent.Type.KeyPress, code, Qt.KeyboardModifier.NoModifier)


class TestBoardSnapshots:
    """A new board asks the bus for the current state."""

    def test_requests_state_on_creation(self, qapp):
        bus = EventBus()
        requested = []
        bus.state_requested.connect(lambda: requested.append(True))

        BoardDisplay(bus)

        assert requested == [True]

    def test_paints_current_round_when_opened_late(self, qapp, clock):
        bus = EventBus()
        engine = BuzzEngine(clock=clock)
        engine.state_changed.connect(bus.state_updated.emit)
        bus.state_requested.connect(engine.request_state)
        engine.open_floor()
        engine.handle_buzz(2)

        board = BoardDisplay(bus)

        assert board.state_label.text() == "OPEN"
        assert board.leader_label.text() == "PLAYER 2"
        engine.reset()


class TestBoardFullscreen:
    """Tests for the F11 / Escape handling."""

    def test_f11_toggles_fullscreen(self, qapp):
        board = BoardDisplay(EventBus())

        board.keyPressEvent(key(Qt.Key.Key_F11))
        assert board.isFullScreen()

        board.keyPressEvent(key(Qt.Key.Key_F11))
        assert not board.isFullScreen()
        board.close()

    def test_escape_leaves_fullscreen(self, qapp):
        board = BoardDisplay(EventBus())
        board.enter_fullscreen()

        board.keyPressEvent(key(Qt.Key.Key_Escape))

        assert not board.isFullScreen()
        board.close()
