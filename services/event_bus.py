"""
Event Bus - Central signal hub for inter-module communication.

The engine, device layer, windows and audio cues all connect to this
single object rather than directly to each other.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for Buzzsaw.

    - BuzzEngine snapshots are re-emitted on state_updated
    - Host console and board display listen and redraw
    - Audio cues listen and play sounds
    - Device layer reports problems on system_message

    Usage:
        # In the application controller
        engine.state_changed.connect(event_bus.state_updated.emit)

        # In BoardDisplay
        self.event_bus.state_updated.connect(self._on_state_updated)
    """

    # ============ Round State ============
    state_updated = Signal(object)      # RoundSnapshot
    state_requested = Signal()          # an observer wants a fresh snapshot

    # ============ Devices ============
    devices_discovered = Signal(int)    # number of buttons opened

    # ============ UI Navigation ============
    board_requested = Signal()          # show / focus the board display
    board_fullscreen_requested = Signal()  # show the board fullscreen
    quit_requested = Signal()

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("error", "Cannot open device")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
