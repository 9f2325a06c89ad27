"""
USB button discovery and report decoding.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import hid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ButtonInfo:
    """A discovered button. device_id is the stable text form of path."""
    path: bytes
    device_id: str
    product: str = ""


def discover_buttons(vendor_id: int, product_id: int) -> list[ButtonInfo]:
    """
    Enumerate HID devices matching vendor/product, one entry per path.

    Composite devices list the same path once per interface; duplicates
    are dropped so each button gets exactly one reader.
    """
    buttons: list[ButtonInfo] = []
    seen: set[bytes] = set()

    for info in hid.enumerate(vendor_id, product_id):
        if info.get("vendor_id") != vendor_id or info.get("product_id") != product_id:
            continue
        path = info.get("path")
        if not path or path in seen:
            continue
        seen.add(path)
        device_id = path.decode("utf-8", errors="replace") if isinstance(path, bytes) else str(path)
        buttons.append(ButtonInfo(
            path=path if isinstance(path, bytes) else str(path).encode(),
            device_id=device_id,
            product=info.get("product_string") or "",
        ))

    logger.info("Found %d unique button device(s)", len(buttons))
    return buttons


def is_pressed(report: Sequence[int], byte_index: int) -> bool:
    """True while the report says the button is held down."""
    return len(report) > byte_index and report[byte_index] > 0


class EdgeDetector:
    """Turns a held/released level into rising-edge events."""

    def __init__(self):
        self._last = False

    def feed(self, pressed: bool) -> bool:
        """Returns True only on the transition released -> pressed."""
        rising = pressed and not self._last
        self._last = pressed
        return rising
