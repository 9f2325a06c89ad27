"""
Main Window - Host Console

The operator's control panel: opens and resets the floor, shows the
buzz queue and penalties, and maps buttons to players.
"""

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QListWidget, QGroupBox, QStatusBar, QToolBar,
)
from PySide6.QtCore import Qt, Slot, Signal
from PySide6.QtGui import QAction

from config import UI_SETTINGS
from engine.buzz_engine import BuzzEngine
from gui.styles.theme import OPEN_BUTTON, RESET_BUTTON, DANGER
from gui.widgets.player_setup import PlayerSetupWidget
from models.schemas import RoundSnapshot, RoundState
from services.event_bus import EventBus


class HostConsole(QMainWindow):
    """
    Primary console for the host.

    All buttons call straight into the BuzzEngine; the display is redrawn
    only from snapshots on the event bus.
    """

    closing = Signal()

    def __init__(self, event_bus: EventBus, engine: BuzzEngine):
        super().__init__()
        self.event_bus = event_bus
        self.engine = engine

        self.setWindowTitle("Buzzsaw — Host Console")
        self.resize(UI_SETTINGS.host_width, UI_SETTINGS.host_height)

        self._simulate_buttons: dict[int, QPushButton] = {}

        self._build_toolbar()
        self._build_ui()
        self._build_statusbar()
        self._connect_signals()

    def _build_toolbar(self) -> None:
        tb = QToolBar("Window")
        tb.setMovable(False)
        self.addToolBar(Qt.ToolBarArea.TopToolBarArea, tb)

        self.action_board = QAction("Focus Board", self)
        self.action_board.triggered.connect(self.event_bus.board_requested.emit)
        tb.addAction(self.action_board)

        self.action_fullscreen = QAction("Fullscreen Board", self)
        self.action_fullscreen.triggered.connect(self.event_bus.board_fullscreen_requested.emit)
        tb.addAction(self.action_fullscreen)

        self.action_quit = QAction("Quit App", self)
        self.action_quit.triggered.connect(self.event_bus.quit_requested.emit)
        tb.addAction(self.action_quit)

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(20, 20, 20, 20)

        # Floor controls
        controls = QHBoxLayout()
        controls.addStretch()

        self.btn_open = QPushButton(f"OPEN BUZZERS\n[{UI_SETTINGS.open_floor_shortcut}]")
        self.btn_open.setMinimumHeight(70)
        self.btn_open.clicked.connect(self.engine.open_floor)
        controls.addWidget(self.btn_open)

        self.btn_reset = QPushButton(f"STOP / RESET\n[{UI_SETTINGS.reset_shortcut}]")
        self.btn_reset.setMinimumHeight(70)
        self.btn_reset.setStyleSheet(f"""
            background-color: {RESET_BUTTON};
            color: white;
            font-size: 12pt;
            border: none;
            border-radius: 5px;
            padding: 10px 20px;
        """)
        self.btn_reset.clicked.connect(self.engine.reset)
        controls.addWidget(self.btn_reset)
        controls.addStretch()
        layout.addLayout(controls)

        # State / Timer readouts
        readouts = QHBoxLayout()
        self.state_label = self._readout(readouts, "State", "IDLE")
        self.timer_label = self._readout(readouts, "Timer", "5s")
        layout.addLayout(readouts)

        # Queue and penalties
        lists = QHBoxLayout()
        queue_box = QGroupBox("Buzz Queue")
        queue_layout = QVBoxLayout(queue_box)
        self.queue_list = QListWidget()
        self.queue_list.setStyleSheet("font-size: 13pt;")
        queue_layout.addWidget(self.queue_list)
        lists.addWidget(queue_box)

        penalty_box = QGroupBox("Locked Out (Penalty)")
        penalty_layout = QVBoxLayout(penalty_box)
        self.penalty_list = QListWidget()
        self.penalty_list.setStyleSheet(f"color: {DANGER};")
        penalty_layout.addWidget(self.penalty_list)
        lists.addWidget(penalty_box)
        layout.addLayout(lists)

        # Player setup
        self.player_setup = PlayerSetupWidget()
        self.player_setup.name_edited.connect(self.engine.update_player_name)
        self.player_setup.calibration_requested.connect(self.engine.start_calibration)
        self.player_setup.calibration_cancelled.connect(self.engine.cancel_calibration)
        layout.addWidget(self.player_setup)

        # Manual simulation
        sim_box = QGroupBox("Manual Simulation")
        self.sim_layout = QHBoxLayout(sim_box)
        self.sim_layout.addStretch()
        layout.addWidget(sim_box)

    def _readout(self, parent: QHBoxLayout, title: str, initial: str) -> QLabel:
        column = QVBoxLayout()
        heading = QLabel(title)
        heading.setAlignment(Qt.AlignmentFlag.AlignCenter)
        heading.setStyleSheet("font-size: 13pt;")
        column.addWidget(heading)
        value = QLabel(initial)
        value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        value.setStyleSheet("font-size: 18pt; font-weight: bold;")
        column.addWidget(value)
        parent.addLayout(column)
        return value

    def _build_statusbar(self) -> None:
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready — searching for buzzers...")

    def _connect_signals(self) -> None:
        self.event_bus.state_updated.connect(self._on_state_updated)
        self.event_bus.devices_discovered.connect(self._on_devices_discovered)
        self.event_bus.system_message.connect(self._on_system_message)

    @Slot(object)
    def _on_state_updated(self, snapshot: RoundSnapshot) -> None:
        is_open = snapshot.game_state is RoundState.OPEN
        self.btn_open.setStyleSheet(f"""
            background-color: {'#DDDDDD' if is_open else OPEN_BUTTON};
            color: {'#888888' if is_open else 'white'};
            font-size: 14pt;
            font-weight: bold;
            border: none;
            border-radius: 5px;
            padding: 10px 30px;
        """)

        self.state_label.setText(snapshot.game_state.value)
        self.timer_label.setText(f"{snapshot.timer}s")
        self.timer_label.setStyleSheet(
            f"font-size: 18pt; font-weight: bold; color: {DANGER if snapshot.timer == 0 else 'black'};"
        )

        self.queue_list.clear()
        if not snapshot.buzz_queue:
            self.queue_list.addItem("Waiting for buzz...")
        for i, buzz in enumerate(snapshot.buzz_queue, start=1):
            label = f" ({buzz.label})" if buzz.label else ""
            self.queue_list.addItem(f"{i}. {snapshot.player_name(buzz.player)}{label}")

        self.penalty_list.clear()
        if not snapshot.early_buzzers:
            self.penalty_list.addItem("None")
        for pid in snapshot.early_buzzers:
            self.penalty_list.addItem(snapshot.player_name(pid))

        self.player_setup.update_state(snapshot)
        self._update_simulation_buttons(snapshot)

    def _update_simulation_buttons(self, snapshot: RoundSnapshot) -> None:
        for player in snapshot.players:
            button = self._simulate_buttons.get(player.id)
            if button is None:
                button = QPushButton()
                button.clicked.connect(lambda _=False, pid=player.id: self.engine.handle_buzz(pid))
                self.sim_layout.insertWidget(self.sim_layout.count() - 1, button)
                self._simulate_buttons[player.id] = button
            button.setText(f"Simulate {player.name or f'Player {player.id}'}")

    @Slot(int)
    def _on_devices_discovered(self, count: int) -> None:
        self.status_bar.showMessage(f"Found {count} buzzer(s)")

    @Slot(str, str)
    def _on_system_message(self, level: str, message: str) -> None:
        """Display system message in status bar."""
        self.status_bar.showMessage(f"[{level.upper()}] {message}", 5000)

    def closeEvent(self, event) -> None:
        """Handle window close."""
        self.closing.emit()
        event.accept()
