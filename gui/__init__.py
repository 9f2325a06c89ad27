"""
Buzzsaw GUI

PySide6 host console and audience board.
"""

from gui.main_window import HostConsole
from gui.board_display import BoardDisplay

__all__ = [
    "HostConsole",
    "BoardDisplay",
]
