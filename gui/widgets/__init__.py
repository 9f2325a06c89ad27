"""
Buzzsaw GUI Widgets

Reusable widget components for the host console and board.
"""

from gui.widgets.countdown_bar import CountdownBarWidget
from gui.widgets.player_setup import PlayerSetupWidget

__all__ = [
    "CountdownBarWidget",
    "PlayerSetupWidget",
]
