"""
Buzzsaw Application Controller

Top-level controller that wires together all application components.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QRect, QTimer, Qt, Slot
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QApplication, QMainWindow

from config import DEVICE_SETTINGS, PATHS, ROUND_SETTINGS, UI_SETTINGS
from devices.reader import DeviceManager
from engine.buzz_engine import BuzzEngine
from engine.registry import PlayerRegistry
from models.schemas import WindowBounds
from services.audio_cues import AudioCuePlayer
from services.event_bus import EventBus
from services.persistence import ConfigStore

logger = logging.getLogger(__name__)


class BuzzsawApp(QObject):
    """
    Top-level application controller.
    Wires together all application components.
    """

    def __init__(self, store: Optional[ConfigStore] = None):
        super().__init__()

        # Persistence
        self.store = store or ConfigStore(PATHS.database_url)
        registry = self.store.load() or PlayerRegistry.default(ROUND_SETTINGS.default_player_count)

        # Core services
        self.event_bus = EventBus()
        self.engine = BuzzEngine(registry, store=self.store)
        self.engine.state_changed.connect(self.event_bus.state_updated.emit)
        self.event_bus.state_requested.connect(self.engine.request_state)

        # Buttons (started after the windows are up)
        self.devices = DeviceManager(DEVICE_SETTINGS)
        self.devices.pressed.connect(self.engine.handle_device_input)
        self.devices.discovered.connect(self.event_bus.devices_discovered.emit)
        self.devices.error.connect(lambda e: self.event_bus.emit_message("error", e))

        # Sounds
        self.audio = AudioCuePlayer(PATHS.sounds_dir)
        self.event_bus.state_updated.connect(self.audio.on_state_updated)

        # Windows
        from gui.main_window import HostConsole
        from gui.board_display import BoardDisplay
        self.host_console = HostConsole(self.event_bus, self.engine)
        self.board_display: Optional[BoardDisplay] = None

        self.event_bus.board_requested.connect(self.show_board)
        self.event_bus.board_fullscreen_requested.connect(self.show_board_fullscreen)
        self.event_bus.quit_requested.connect(self.quit)
        self.host_console.closing.connect(self.quit)

        self._setup_shortcuts()

    def _setup_shortcuts(self) -> None:
        """Register application-wide floor shortcuts."""
        for sequence, slot in (
            (UI_SETTINGS.open_floor_shortcut, self.engine.open_floor),
            (UI_SETTINGS.reset_shortcut, self.engine.reset),
        ):
            shortcut = QShortcut(QKeySequence(sequence), self.host_console)
            shortcut.setContext(Qt.ShortcutContext.ApplicationShortcut)
            shortcut.activated.connect(slot)

    def show(self) -> None:
        """Show both windows, start buttons after a short delay."""
        self._restore_bounds(self.host_console, "host")
        self.host_console.show()
        self.show_board()

        QTimer.singleShot(DEVICE_SETTINGS.startup_delay_ms, self.devices.start)

        # Initial paint for the host console; the board asks for its own
        self.engine.request_state()

    @Slot()
    def show_board(self) -> None:
        """Open the board display, or focus it if already open."""
        from gui.board_display import BoardDisplay

        if self.board_display is not None:
            self.board_display.raise_()
            self.board_display.activateWindow()
            return

        self.board_display = BoardDisplay(self.event_bus)
        self.board_display.closing.connect(self._on_board_closing)
        self._restore_bounds(self.board_display, "board")
        self.board_display.show()

    @Slot()
    def show_board_fullscreen(self) -> None:
        self.show_board()
        self.board_display.enter_fullscreen()

    @Slot()
    def _on_board_closing(self) -> None:
        if self.board_display is not None:
            self._save_bounds(self.board_display, "board")
        self.board_display = None

    def _restore_bounds(self, window: QMainWindow, role: str) -> None:
        bounds = self.store.load_bounds(role)
        if bounds is not None:
            window.setGeometry(QRect(bounds.x, bounds.y, bounds.width, bounds.height))

    def _save_bounds(self, window: QMainWindow, role: str) -> None:
        rect = window.geometry()
        if rect.width() > 0 and rect.height() > 0:
            self.store.save_bounds(role, WindowBounds(
                x=rect.x(), y=rect.y(), width=rect.width(), height=rect.height()
            ))

    @Slot()
    def quit(self) -> None:
        QApplication.quit()

    @Slot()
    def shutdown(self) -> None:
        """Stop readers and save everything. Connected to aboutToQuit."""
        logger.info("Shutting down")
        self.engine.reset()
        self.devices.stop_all()
        self._save_bounds(self.host_console, "host")
        if self.board_display is not None:
            self._save_bounds(self.board_display, "board")
            self.board_display.close()
        self.store.save(self.engine.registry)
        self.store.close()
