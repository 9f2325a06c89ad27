"""
Tests for button discovery, report decoding, and edge detection.

No real HID hardware is touched: hid.enumerate is patched and reader
threads only run against a patched hid.device.
"""

import time

import pytest
from unittest.mock import patch

from config import DeviceSettings
from devices.buttons import ButtonInfo, EdgeDetector, discover_buttons, is_pressed
from devices.reader import ButtonReaderThread, DeviceManager

VID = 0x0FC5
PID = 0xB080


def hid_entry(path: bytes, vid: int = VID, pid: int = PID) -> dict:
    return {
        "path": path,
        "vendor_id": vid,
        "product_id": pid,
        "product_string": "USB IO Controller",
    }


class SlowOpenDevice:
    """Stand-in for hid.device whose open_path blocks for a while."""

    def __init__(self, open_delay: float):
        self.open_delay = open_delay
        self.opened = False
        self.closed = False

    def open_path(self, path: bytes) -> None:
        time.sleep(self.open_delay)
        self.opened = True

    def read(self, size: int, timeout_ms: int) -> list[int]:
        time.sleep(timeout_ms / 1000)
        return []

    def close(self) -> None:
        self.closed = True


class TestReportDecoding:
    def test_pressed_byte(self):
        assert is_pressed([0, 0, 0, 1], 3)
        assert not is_pressed([0, 0, 0, 0], 3)

    def test_short_report_is_not_pressed(self):
        assert not is_pressed([1, 1, 1], 3)


class TestEdgeDetector:
    def test_rising_edges_only(self):
        edges = EdgeDetector()

        results = [edges.feed(level) for level in (False, True, True, False, True)]

        assert results == [False, True, False, False, True]


class TestDiscovery:
    """Tests for discover_buttons."""

    def test_filters_and_dedupes(self):
        entries = [
            hid_entry(b"/dev/hidraw0"),
            hid_entry(b"/dev/hidraw0"),
            hid_entry(b"/dev/hidraw1"),
            hid_entry(b"/dev/hidraw2", vid=0x1234),
            hid_entry(b""),
        ]
        with patch("devices.buttons.hid.enumerate", return_value=entries):
            buttons = discover_buttons(VID, PID)

        assert [b.device_id for b in buttons] == ["/dev/hidraw0", "/dev/hidraw1"]
        assert buttons[0].path == b"/dev/hidraw0"
        assert buttons[0].product == "USB IO Controller"

    def test_no_devices(self):
        with patch("devices.buttons.hid.enumerate", return_value=[]):
            assert discover_buttons(VID, PID) == []


class TestButtonReaderThread:
    """Tests for report processing and stopping the reader."""

    def test_emits_once_per_press(self, qapp):
        reader = ButtonReaderThread(ButtonInfo(path=b"p", device_id="p"), DeviceSettings())
        received = []
        reader.pressed.connect(lambda device_id: received.append(device_id))

        for report in ([0, 0, 0, 0], [0, 0, 0, 1], [0, 0, 0, 1], [0, 0, 0, 0], [0, 0, 0, 2]):
            reader.process_report(report)

        assert received == ["p", "p"]

    def test_stop_while_device_is_opening(self, qapp):
        """A stop request made during a slow open still ends the loop."""
        device = SlowOpenDevice(open_delay=0.2)
        reader = ButtonReaderThread(ButtonInfo(path=b"p", device_id="p"), DeviceSettings())

        with patch("devices.reader.hid.device", return_value=device):
            reader.start()
            time.sleep(0.05)
            reader.stop()

        assert reader.isFinished()
        assert device.opened
        assert device.closed


class TestDeviceManager:
    def test_start_with_no_buttons(self, qapp):
        manager = DeviceManager(DeviceSettings())
        counts = []
        manager.discovered.connect(lambda n: counts.append(n))

        with patch("devices.reader.discover_buttons", return_value=[]):
            manager.start()

        assert counts == [0]
        assert manager.reader_count == 0

    def test_discovery_failure_reported(self, qapp):
        manager = DeviceManager(DeviceSettings())
        errors = []
        manager.error.connect(lambda e: errors.append(e))

        with patch("devices.reader.discover_buttons", side_effect=OSError("no hidapi")):
            manager.start()

        assert errors == ["Button discovery failed"]
        assert manager.reader_count == 0
