"""
Round timing - countdown ticks, the early-buzzer grace window, and the
monotonic clock used to timestamp buzzes.

Every scheduled callback carries the round epoch it was scheduled
under. The engine bumps its epoch on every open/reset and ignores any
callback whose epoch no longer matches.
"""

from PySide6.QtCore import QObject, Qt, Signal, QTimer, QElapsedTimer


class ElapsedClock:
    """
    Monotonic millisecond clock backed by QElapsedTimer.

    Only differences between readings are meaningful.
    """

    def __init__(self):
        self._elapsed = QElapsedTimer()
        self._elapsed.start()

    def now_ms(self) -> float:
        """Milliseconds since the clock was created, with sub-ms precision."""
        return self._elapsed.nsecsElapsed() / 1_000_000


class CountdownTimer(QObject):
    """
    Periodic one-second ticker for the round countdown.

    Emits tick(epoch) on every period until stopped. The timer does not
    track the remaining value itself; the engine owns the round clock.

    Usage:
        countdown = CountdownTimer()
        countdown.tick.connect(engine._on_countdown_tick)
        countdown.start(epoch)
    """

    tick = Signal(int)  # epoch the countdown was started under

    TICK_INTERVAL_MS = 1000

    def __init__(self, interval_ms: int = None, parent: QObject = None):
        super().__init__(parent)
        self._epoch = -1

        self._timer = QTimer(self)
        self._timer.setInterval(self.TICK_INTERVAL_MS if interval_ms is None else interval_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self, epoch: int) -> None:
        """(Re)start ticking under a new epoch, cancelling any earlier run."""
        self._timer.stop()
        self._epoch = epoch
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def _on_timeout(self) -> None:
        self.tick.emit(self._epoch)


class GraceScheduler(QObject):
    """
    One-shot deferred action that lifts the early-buzzer penalty.

    schedule() supersedes any pending action; cancel() drops it.
    """

    elapsed = Signal(int)  # epoch the grace window was scheduled under

    GRACE_PERIOD_MS = 250

    def __init__(self, delay_ms: int = None, parent: QObject = None):
        super().__init__(parent)
        self._epoch = -1

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(self.GRACE_PERIOD_MS if delay_ms is None else delay_ms)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    def schedule(self, epoch: int) -> None:
        self._timer.stop()
        self._epoch = epoch
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()

    def _on_timeout(self) -> None:
        self.elapsed.emit(self._epoch)
