"""
Buzzsaw Devices

USB HID button discovery and background reader threads.
"""

from devices.buttons import ButtonInfo, EdgeDetector, discover_buttons, is_pressed
from devices.reader import ButtonReaderThread, DeviceManager

__all__ = [
    "ButtonInfo",
    "EdgeDetector",
    "discover_buttons",
    "is_pressed",
    "ButtonReaderThread",
    "DeviceManager",
]
