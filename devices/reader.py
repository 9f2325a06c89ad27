"""
Button Reader Threads

One QThread per USB button reads raw reports and emits a signal on
every rising edge. Signals cross into the main thread through Qt's
queued connections; nothing here touches engine state.
"""

import logging

import hid
from PySide6.QtCore import QObject, QThread, Signal

from config import DEVICE_SETTINGS, DeviceSettings
from devices.buttons import ButtonInfo, EdgeDetector, discover_buttons, is_pressed

logger = logging.getLogger(__name__)


class ButtonReaderThread(QThread):
    """
    Reads HID reports from one button in a background thread.

    Usage:
        thread = ButtonReaderThread(button)
        thread.pressed.connect(engine.handle_device_input)
        thread.start()

        # Later
        thread.stop()
    """

    pressed = Signal(str)  # device_id
    error = Signal(str)

    def __init__(self, button: ButtonInfo, settings: DeviceSettings = DEVICE_SETTINGS):
        super().__init__()
        self.button = button
        self.settings = settings
        self._edges = EdgeDetector()

    def run(self) -> None:
        """Main thread loop - reads reports until stopped."""
        device = hid.device()
        try:
            device.open_path(self.button.path)
        except (OSError, IOError) as e:
            logger.error("Failed to open device at %s: %s", self.button.device_id, e)
            self.error.emit(f"Cannot open button: {self.button.device_id}")
            return

        try:
            while not self.isInterruptionRequested():
                try:
                    report = device.read(self.settings.report_size, self.settings.read_timeout_ms)
                except (OSError, IOError, ValueError) as e:
                    logger.error("HID error on %s: %s", self.button.device_id, e)
                    self.error.emit(f"Button read failed: {self.button.device_id}")
                    break
                if report:
                    self.process_report(report)
        finally:
            device.close()

    def process_report(self, report: list[int]) -> None:
        """Emit pressed for a rising edge in this report."""
        logger.debug("[HID %s] %s", self.button.device_id, bytes(report).hex())
        if self._edges.feed(is_pressed(report, self.settings.press_byte_index)):
            self.pressed.emit(self.button.device_id)

    def stop(self) -> None:
        """Stop the reader thread.

        Safe to call while the device is still opening; the request
        survives until run() reaches its loop.
        """
        self.requestInterruption()
        self.wait()


class DeviceManager(QObject):
    """
    Discovers buttons and owns their reader threads.

    Re-emits every reader's pressed/error signal so the rest of the
    application connects in one place.
    """

    pressed = Signal(str)        # device_id
    error = Signal(str)
    discovered = Signal(int)     # number of readers started

    def __init__(self, settings: DeviceSettings = DEVICE_SETTINGS, parent: QObject = None):
        super().__init__(parent)
        self.settings = settings
        self._readers: list[ButtonReaderThread] = []

    @property
    def reader_count(self) -> int:
        return len(self._readers)

    def start(self) -> None:
        """Discover buttons and start one reader each."""
        try:
            buttons = discover_buttons(self.settings.vendor_id, self.settings.product_id)
        except (OSError, IOError) as e:
            logger.error("HID initialization failed: %s", e)
            self.error.emit("Button discovery failed")
            buttons = []

        for button in buttons:
            reader = ButtonReaderThread(button, self.settings)
            reader.pressed.connect(self.pressed)
            reader.error.connect(self.error)
            reader.start()
            self._readers.append(reader)

        self.discovered.emit(len(self._readers))

    def stop_all(self) -> None:
        for reader in self._readers:
            reader.stop()
        self._readers.clear()
