"""
Player Setup Widget

Name editing and buzzer mapping for each player on the host console.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QFrame,
)
from PySide6.QtCore import Qt, Signal, Slot

from gui.styles.theme import MAPPED, UNMAPPED, WARNING
from models.schemas import RoundSnapshot


class PlayerSetupWidget(QFrame):
    """
    One row per player: name field, map button, mapping status.

    A banner with a cancel button is shown while a calibration is
    waiting for a button press.
    """

    name_edited = Signal(int, str)          # player_id, new name
    calibration_requested = Signal(int)     # player_id
    calibration_cancelled = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._rows: dict[int, tuple[QLineEdit, QPushButton, QLabel]] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        self.setStyleSheet("PlayerSetupWidget { border: 1px solid #ddd; border-radius: 8px; }")
        layout = QVBoxLayout(self)

        title = QLabel("Player Setup & Buzzer Mapping")
        title.setStyleSheet("font-size: 13pt; font-weight: bold;")
        layout.addWidget(title)

        hint = QLabel('Click "Map Buzzer" then press the physical button to assign it.')
        hint.setStyleSheet("color: #666;")
        layout.addWidget(hint)

        # Calibration banner
        self.banner = QFrame()
        self.banner.setStyleSheet(f"background-color: {WARNING}; border-radius: 4px;")
        banner_layout = QHBoxLayout(self.banner)
        self.banner_label = QLabel("")
        self.banner_label.setStyleSheet("font-weight: bold;")
        banner_layout.addWidget(self.banner_label)
        banner_layout.addStretch()
        cancel = QPushButton("Cancel")
        cancel.clicked.connect(self.calibration_cancelled.emit)
        banner_layout.addWidget(cancel)
        self.banner.hide()
        layout.addWidget(self.banner)

        self.grid = QGridLayout()
        self.grid.setHorizontalSpacing(10)
        layout.addLayout(self.grid)

    def _add_row(self, player_id: int) -> tuple[QLineEdit, QPushButton, QLabel]:
        row = len(self._rows)
        self.grid.addWidget(QLabel(f"Player {player_id}:"), row, 0)

        name_edit = QLineEdit()
        name_edit.setPlaceholderText("Enter Name")
        name_edit.textEdited.connect(lambda text, pid=player_id: self.name_edited.emit(pid, text))
        self.grid.addWidget(name_edit, row, 1)

        map_button = QPushButton("Map Buzzer")
        map_button.clicked.connect(lambda _=False, pid=player_id: self.calibration_requested.emit(pid))
        self.grid.addWidget(map_button, row, 2)

        status = QLabel("")
        status.setStyleSheet("color: #888;")
        self.grid.addWidget(status, row, 3)

        self._rows[player_id] = (name_edit, map_button, status)
        return self._rows[player_id]

    @Slot(object)
    def update_state(self, snapshot: RoundSnapshot) -> None:
        target: Optional[int] = snapshot.calibration_target
        if target is not None:
            self.banner_label.setText(f"Press the buzzer for Player {target} now...")
            self.banner.show()
        else:
            self.banner.hide()

        for player in snapshot.players:
            name_edit, map_button, status = self._rows.get(player.id) or self._add_row(player.id)

            # Don't fight the cursor while the host is typing
            if not name_edit.hasFocus() and name_edit.text() != player.name:
                name_edit.setText(player.name)

            map_button.setEnabled(target is None)
            map_button.setText("Mapped (Remap)" if player.is_mapped else "Map Buzzer")
            map_button.setStyleSheet(
                f"background-color: {MAPPED if player.is_mapped else UNMAPPED}; border: 1px solid #ccc;"
            )
            status.setText("✓ Ready" if player.is_mapped else "• No Device")
