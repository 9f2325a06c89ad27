"""
Tests for the audio cue decisions.
"""

from services.audio_cues import Cue, CueTracker
from models.schemas import BuzzSnapshot, RoundSnapshot, RoundState


def snap(timer: int = 5, queued: int = 0, state: RoundState = RoundState.OPEN) -> RoundSnapshot:
    return RoundSnapshot(
        game_state=state,
        timer=timer,
        buzz_queue=tuple(
            BuzzSnapshot(player=i + 1, timestamp=float(i), delta=float(i), label="")
            for i in range(queued)
        ),
    )


class TestCueTracker:
    def test_buzz_cue_on_each_new_entry(self):
        tracker = CueTracker()

        assert tracker.observe(snap(queued=1)) == [Cue.BUZZ]
        assert tracker.observe(snap(queued=1)) == []
        assert tracker.observe(snap(queued=2)) == [Cue.BUZZ]

    def test_timeout_cue_when_nobody_buzzed(self):
        tracker = CueTracker()
        tracker.observe(snap(timer=1))

        assert tracker.observe(snap(timer=0, state=RoundState.LOCKED)) == [Cue.TIMEOUT]

    def test_no_timeout_cue_when_someone_buzzed(self):
        tracker = CueTracker()
        tracker.observe(snap(timer=1, queued=1))

        assert tracker.observe(snap(timer=0, queued=1, state=RoundState.LOCKED)) == []

    def test_timeout_cue_only_once(self):
        tracker = CueTracker()
        tracker.observe(snap(timer=1))
        tracker.observe(snap(timer=0))

        assert tracker.observe(snap(timer=0)) == []

    def test_reset_clears_queue_length(self):
        tracker = CueTracker()
        tracker.observe(snap(queued=2))
        tracker.observe(snap(queued=0, state=RoundState.IDLE))

        assert tracker.observe(snap(queued=1)) == [Cue.BUZZ]
