"""
Buzz Engine - round state machine and buzz arbitration.

The BuzzEngine is the only owner of round and roster state. Every
command runs to completion on the Qt main thread; device readers hand
presses over through queued signal connections, so arrival order on
that thread is the one and only ordering of buzzes.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from PySide6.QtCore import QObject, Signal, Slot

from config import ROUND_SETTINGS, RoundSettings
from engine.calibration import CalibrationMapper
from engine.registry import PlayerRegistry
from engine.router import BuzzRouter, RawPress, Route
from engine.timer import CountdownTimer, ElapsedClock, GraceScheduler
from models.schemas import BuzzSnapshot, PlayerSnapshot, RoundSnapshot, RoundState

logger = logging.getLogger(__name__)


class RosterStore(Protocol):
    """Anything that can persist the roster."""

    def save(self, registry: PlayerRegistry) -> bool: ...


@dataclass(frozen=True)
class Buzz:
    """An accepted press during an open round."""
    player: int
    timestamp: float  # monotonic ms at receipt
    delta: float      # ms after the first buzz in the queue
    label: str


def format_delta(delta_ms: float) -> str:
    """Board label for a buzz that was not first, e.g. '+40 MS'."""
    return f"+{math.floor(delta_ms + 0.5)} MS"


class BuzzEngine(QObject):
    """
    Arbitrates who buzzed first.

    States:
        IDLE   - waiting for the host; presses mark early buzzers
        OPEN   - accepting buzzes while the countdown runs
        LOCKED - countdown hit zero; presses are ignored

    open_floor() and reset() are valid from any state. LOCKED is only
    reached through the countdown.

    Emits state_changed(RoundSnapshot) after every mutation.
    """

    state_changed = Signal(object)  # RoundSnapshot

    def __init__(
        self,
        registry: Optional[PlayerRegistry] = None,
        store: Optional[RosterStore] = None,
        clock: Optional[Callable[[], float]] = None,
        settings: RoundSettings = ROUND_SETTINGS,
        parent: QObject = None,
    ):
        """
        Args:
            registry: Player roster (default: Player 1-3, unmapped)
            store: Persistence for renames and calibrations
            clock: Monotonic clock in milliseconds
            settings: Countdown and grace timings
        """
        super().__init__(parent)
        self.settings = settings
        if registry is None:
            registry = PlayerRegistry.default(settings.default_player_count)
        self.registry = registry
        self.calibration = CalibrationMapper(self.registry)
        self.router = BuzzRouter(self.registry, self.calibration)
        self._store = store
        self._clock = clock or ElapsedClock().now_ms

        self.countdown = CountdownTimer(settings.tick_interval_ms, parent=self)
        self.countdown.tick.connect(self._on_countdown_tick)
        self.grace = GraceScheduler(settings.grace_period_ms, parent=self)
        self.grace.elapsed.connect(self._on_grace_elapsed)

        # Bumped on every open/reset; scheduled callbacks carry the value
        # they were created under
        self._epoch = 0

        self._state = RoundState.IDLE
        self._queue: list[Buzz] = []
        self._early: set[int] = set()
        self._floor_open_ms = 0.0
        self._timer_value = settings.countdown_seconds

    # ============ Read-only state ============

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def buzz_queue(self) -> list[Buzz]:
        return list(self._queue)

    @property
    def early_buzzers(self) -> frozenset[int]:
        return frozenset(self._early)

    @property
    def timer_value(self) -> int:
        return self._timer_value

    @property
    def floor_open_ms(self) -> float:
        return self._floor_open_ms

    @property
    def calibration_target(self) -> Optional[int]:
        return self.calibration.target

    @property
    def epoch(self) -> int:
        return self._epoch

    # ============ Round commands ============

    @Slot()
    def open_floor(self) -> None:
        """Open a fresh round, whatever the current state."""
        self._epoch += 1
        self._state = RoundState.OPEN
        self._queue = []
        self._floor_open_ms = self._clock()
        self._timer_value = self.settings.countdown_seconds

        # Early buzzers stay locked out for the grace period
        self.grace.schedule(self._epoch)
        self.countdown.start(self._epoch)

        logger.info("Floor open (round %d)", self._epoch)
        self._publish()

    @Slot()
    def reset(self) -> None:
        """Return to IDLE and cancel anything scheduled."""
        self._epoch += 1
        self.countdown.stop()
        self.grace.cancel()

        self._state = RoundState.IDLE
        self._queue = []
        self._early.clear()
        self._timer_value = self.settings.countdown_seconds

        logger.info("Round reset")
        self._publish()

    # ============ Arbitration ============

    @Slot(int)
    def handle_buzz(self, player_id: int) -> None:
        """
        Arbitrate one resolved press (device or simulated).

        Drops are silent: no mutation and no snapshot.
        """
        if player_id not in self.registry:
            logger.debug("Buzz from unknown player %s dropped", player_id)
            return

        now = self._clock()

        if self._state is RoundState.IDLE:
            if player_id not in self._early:
                logger.info("Player %d buzzed early", player_id)
                self._early.add(player_id)
                self._publish()
            return

        if self._state is not RoundState.OPEN:
            return

        if player_id in self._early:
            unlock_at = self._floor_open_ms + self.settings.grace_period_ms
            if now < unlock_at:
                logger.debug("Player %d still in penalty", player_id)
                return

        if any(buzz.player == player_id for buzz in self._queue):
            return

        if self._queue:
            delta = now - self._queue[0].timestamp
            label = format_delta(delta)
        else:
            delta = 0.0
            label = ""

        self._queue.append(Buzz(player=player_id, timestamp=now, delta=delta, label=label))
        logger.info("Player %d buzzed in at position %d %s",
                    player_id, len(self._queue), label)
        self._publish()

    # ============ Device input and calibration ============

    @Slot(str)
    def handle_device_input(self, device_id: str) -> None:
        """Entry point for every rising edge from a physical button."""
        self.handle_press(RawPress(device_id))

    def handle_press(self, press: RawPress) -> None:
        result = self.router.route(press)

        if result.route is Route.CALIBRATED:
            self._persist()
            self._publish()
        elif result.route is Route.CALIBRATION_DROPPED:
            self._publish()
        elif result.route is Route.BUZZ:
            self.handle_buzz(result.player_id)

    @Slot(int)
    def start_calibration(self, player_id: int) -> None:
        previous = self.calibration.target
        if self.calibration.start(player_id) or previous is not None:
            self._publish()

    @Slot()
    def cancel_calibration(self) -> None:
        self.calibration.cancel()
        self._publish()

    @Slot(int, str)
    def update_player_name(self, player_id: int, name: str) -> None:
        if not self.registry.rename(player_id, name):
            logger.debug("Rename of unknown player %s ignored", player_id)
            return
        self._persist()
        self._publish()

    # ============ Scheduled callbacks ============

    @Slot(int)
    def _on_countdown_tick(self, epoch: int) -> None:
        if epoch != self._epoch:
            logger.debug("Stale countdown tick from round %d ignored", epoch)
            return

        self._timer_value -= 1
        if self._timer_value <= 0:
            self._timer_value = 0
            self.countdown.stop()
            if self._state is RoundState.OPEN:
                self._state = RoundState.LOCKED
                logger.info("Time up: floor locked with %d buzz(es)", len(self._queue))

        self._publish()

    @Slot(int)
    def _on_grace_elapsed(self, epoch: int) -> None:
        if epoch != self._epoch:
            logger.debug("Stale grace callback from round %d ignored", epoch)
            return
        self._early.clear()
        self._publish()

    # ============ Publishing ============

    def snapshot(self) -> RoundSnapshot:
        """Build a full, independent copy of the current state."""
        return RoundSnapshot(
            game_state=self._state,
            buzz_queue=tuple(
                BuzzSnapshot(player=b.player, timestamp=b.timestamp, delta=b.delta, label=b.label)
                for b in self._queue
            ),
            early_buzzers=tuple(sorted(self._early)),
            timer=self._timer_value,
            players=tuple(
                PlayerSnapshot(id=p.id, name=p.name, device_id=p.device_id)
                for p in self.registry.players
            ),
            calibration_target=self.calibration.target,
        )

    @Slot()
    def request_state(self) -> None:
        """Re-emit the current snapshot for a newly attached observer."""
        self._publish()

    def _publish(self) -> None:
        self.state_changed.emit(self.snapshot())

    def _persist(self) -> None:
        if self._store is not None:
            self._store.save(self.registry)
