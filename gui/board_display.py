"""
Board Display

Second window for the audience: countdown, round state, penalty rows,
the leader, and the top of the buzz queue with delays.

Read-only; all interaction happens on the host console.
"""

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame,
)
from PySide6.QtCore import Qt, Slot, Signal

from config import UI_SETTINGS
from gui.styles.theme import (
    BOARD_BLUE, BOARD_PANEL, FONT_BOARD, PENALTY, STATE_COLORS, TEXT_PRIMARY, medal,
)
from gui.widgets.countdown_bar import CountdownBarWidget
from models.schemas import RoundSnapshot, RoundState
from services.event_bus import EventBus


class BoardDisplay(QMainWindow):
    """
    Game-show style board.

    Connects to EventBus.state_updated and redraws from each snapshot.
    """

    closing = Signal()

    def __init__(self, event_bus: EventBus):
        super().__init__()
        self.event_bus = event_bus

        self.setWindowTitle("Buzzsaw — Board")
        self.resize(UI_SETTINGS.board_width, UI_SETTINGS.board_height)
        self.setStyleSheet(f"background-color: {BOARD_BLUE}; color: {TEXT_PRIMARY};")

        self._build_ui()
        self.event_bus.state_updated.connect(self._on_state_updated)
        self.event_bus.state_requested.emit()

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)

        self.countdown = CountdownBarWidget()
        layout.addWidget(self.countdown)

        self.state_label = QLabel("READY")
        self.state_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.state_label)

        # Penalty rows are rebuilt on each update
        self.penalty_container = QVBoxLayout()
        layout.addLayout(self.penalty_container)

        self.leader_label = QLabel("")
        self.leader_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.leader_label.setStyleSheet(f"""
            background-color: {BOARD_PANEL};
            border: 4px solid #FFFFFF;
            padding: 15px 30px;
            font-size: 40pt;
            font-weight: bold;
            font-family: {FONT_BOARD};
        """)
        self.leader_label.hide()
        layout.addWidget(self.leader_label)

        self.queue_frame = QFrame()
        self.queue_frame.setStyleSheet("QFrame#queue { background-color: rgba(0,0,0,0.3); border: 2px solid #FFFFFF; }")
        self.queue_frame.setObjectName("queue")
        self.queue_layout = QVBoxLayout(self.queue_frame)
        self.queue_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.queue_frame)
        layout.addStretch()

        self._set_state_text(RoundState.IDLE)

    def _set_state_text(self, state: RoundState) -> None:
        self.state_label.setText("READY" if state is RoundState.IDLE else state.value)
        self.state_label.setStyleSheet(f"""
            font-size: 20pt;
            font-weight: bold;
            letter-spacing: 2px;
            color: {STATE_COLORS[state.value]};
        """)

    def _row(self, icon: str, name: str, right: str, background: str) -> QFrame:
        row = QFrame()
        row.setStyleSheet(f"background-color: {background}; font-size: 22pt; font-family: {FONT_BOARD};")
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(30, 10, 30, 10)
        icon_label = QLabel(icon)
        icon_label.setFixedWidth(50)
        row_layout.addWidget(icon_label)
        row_layout.addWidget(QLabel(name.upper()))
        row_layout.addStretch()
        row_layout.addWidget(QLabel(right))
        return row

    @staticmethod
    def _clear(layout) -> None:
        while layout.count():
            item = layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

    @Slot(object)
    def _on_state_updated(self, snapshot: RoundSnapshot) -> None:
        is_open = snapshot.game_state is RoundState.OPEN
        self.countdown.update_countdown(snapshot.timer, is_open)
        self._set_state_text(snapshot.game_state)

        self._clear(self.penalty_container)
        for pid in snapshot.locked_out:
            self.penalty_container.addWidget(
                self._row("⚠️", snapshot.player_name(pid), "LOCKED", PENALTY)
            )

        if snapshot.buzz_queue:
            self.leader_label.setText(snapshot.player_name(snapshot.buzz_queue[0].player).upper())
            self.leader_label.show()
        else:
            self.leader_label.hide()

        self._clear(self.queue_layout)
        shown = snapshot.buzz_queue[:UI_SETTINGS.board_queue_rows]
        for i, buzz in enumerate(shown):
            background = "rgba(255, 255, 255, 0.1)" if i == 0 else "transparent"
            self.queue_layout.addWidget(
                self._row(medal(i), snapshot.player_name(buzz.player), buzz.label, background)
            )
        self.queue_frame.setVisible(bool(shown))

    def enter_fullscreen(self) -> None:
        self.showFullScreen()

    def exit_fullscreen(self) -> None:
        self.showNormal()

    def toggle_fullscreen(self) -> None:
        if self.isFullScreen():
            self.exit_fullscreen()
        else:
            self.enter_fullscreen()

    def keyPressEvent(self, event) -> None:
        """F11 toggles fullscreen; Escape leaves it."""
        if event.key() == Qt.Key.Key_F11:
            self.toggle_fullscreen()
        elif event.key() == Qt.Key.Key_Escape and self.isFullScreen():
            self.exit_fullscreen()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event) -> None:
        self.closing.emit()
        event.accept()
