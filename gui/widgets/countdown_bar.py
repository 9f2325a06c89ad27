"""
Countdown Bar Widget

Segmented countdown display for the board: one lit block per second
remaining, plus the numeric value.
"""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QFrame
from PySide6.QtCore import Qt, Slot

from gui.styles.theme import (
    BOARD_OPEN, DANGER, FONT_BOARD, SEGMENT_ACTIVE_IDLE,
    SEGMENT_ACTIVE_OPEN, SEGMENT_INACTIVE, TEXT_PRIMARY,
)


class CountdownBarWidget(QWidget):
    """
    Segment bar and numeric timer.

    - Segments light white while the floor is open, grey otherwise
    - The number turns red at zero
    """

    def __init__(self, segments: int = 5, parent=None):
        super().__init__(parent)
        self._segment_count = segments
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the countdown UI."""
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(30)
        layout.addStretch()

        segment_row = QHBoxLayout()
        segment_row.setSpacing(15)
        self.segments: list[QFrame] = []
        for _ in range(self._segment_count):
            seg = QFrame()
            seg.setFixedSize(60, 100)
            segment_row.addWidget(seg)
            self.segments.append(seg)
        layout.addLayout(segment_row)

        self.value_label = QLabel(str(self._segment_count))
        self.value_label.setMinimumWidth(100)
        layout.addWidget(self.value_label)
        layout.addStretch()

        self.update_countdown(self._segment_count, is_open=False)

    @Slot(int, bool)
    def update_countdown(self, value: int, is_open: bool) -> None:
        """Redraw for a timer value and whether the floor is open."""
        self.setStyleSheet(
            f"CountdownBarWidget {{ background-color: {BOARD_OPEN if is_open else 'transparent'};"
            f" border-radius: 20px; }}"
        )

        active = SEGMENT_ACTIVE_OPEN if is_open else SEGMENT_ACTIVE_IDLE
        for i, seg in enumerate(self.segments, start=1):
            fill = active if value >= i else SEGMENT_INACTIVE
            seg.setStyleSheet(f"""
                background-color: {fill};
                border: 4px solid #000;
                border-radius: 4px;
            """)

        if value == 0:
            color = DANGER
        else:
            color = TEXT_PRIMARY if is_open else SEGMENT_ACTIVE_IDLE
        self.value_label.setText(str(value))
        self.value_label.setStyleSheet(f"""
            font-size: 96pt;
            font-weight: bold;
            font-family: {FONT_BOARD};
            color: {color};
        """)
