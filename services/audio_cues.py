"""
Audio Cues

Plays a buzz sound for every new entry in the queue and a timeout
sound when the countdown expires with nobody buzzed in.
"""

import enum
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, QUrl, Slot
from PySide6.QtMultimedia import QSoundEffect

from models.schemas import RoundSnapshot

logger = logging.getLogger(__name__)


class Cue(enum.Enum):
    BUZZ = "buzz.wav"
    TIMEOUT = "timeout.wav"


class CueTracker:
    """Decides which cues a new snapshot calls for."""

    def __init__(self, initial_timer: int = 5):
        self._queue_len = 0
        self._timer = initial_timer

    def observe(self, snapshot: RoundSnapshot) -> list[Cue]:
        cues = []
        queue_len = len(snapshot.buzz_queue)

        if queue_len > self._queue_len:
            cues.append(Cue.BUZZ)
        if self._timer > 0 and snapshot.timer == 0 and queue_len == 0:
            cues.append(Cue.TIMEOUT)

        self._queue_len = queue_len
        self._timer = snapshot.timer
        return cues


class AudioCuePlayer(QObject):
    """
    Subscribes to snapshots and plays the matching sound effects.

    Missing sound files are reported once and then ignored.
    """

    def __init__(self, sounds_dir: Path, parent: QObject = None):
        super().__init__(parent)
        self._tracker = CueTracker()
        self._effects: dict[Cue, Optional[QSoundEffect]] = {}

        for cue in Cue:
            path = sounds_dir / cue.value
            if not path.exists():
                logger.warning("Sound file missing: %s", path)
                self._effects[cue] = None
                continue
            effect = QSoundEffect(self)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            self._effects[cue] = effect

    @Slot(object)
    def on_state_updated(self, snapshot: RoundSnapshot) -> None:
        for cue in self._tracker.observe(snapshot):
            effect = self._effects.get(cue)
            if effect is not None:
                effect.stop()
                effect.play()
