"""
Tests for the snapshot schema and its wire format.
"""

import pytest
from pydantic import ValidationError

from models.schemas import (
    SNAPSHOT_SCHEMA_VERSION, BuzzSnapshot, PlayerSnapshot, RoundSnapshot,
    RoundState, WindowBounds,
)


def make_snapshot(**overrides) -> RoundSnapshot:
    fields = dict(
        game_state=RoundState.OPEN,
        buzz_queue=(
            BuzzSnapshot(player=2, timestamp=100.0, delta=0, label=""),
            BuzzSnapshot(player=1, timestamp=140.0, delta=40, label="+40 MS"),
        ),
        early_buzzers=(1, 3),
        timer=4,
        players=(
            PlayerSnapshot(id=1, name="Ann", device_id="usb-a"),
            PlayerSnapshot(id=2, name="Ben"),
            PlayerSnapshot(id=3, name="Cal"),
        ),
        calibration_target=None,
    )
    fields.update(overrides)
    return RoundSnapshot(**fields)


class TestRoundSnapshot:
    """Tests for snapshot helpers."""

    def test_defaults(self):
        snap = RoundSnapshot()

        assert snap.schema_version == SNAPSHOT_SCHEMA_VERSION
        assert snap.game_state == RoundState.IDLE
        assert snap.timer == 5
        assert snap.buzz_queue == ()

    def test_player_name_fallback(self):
        snap = make_snapshot()

        assert snap.player_name(2) == "Ben"
        assert snap.player_name(9) == "Player 9"

    def test_locked_out_excludes_queued(self):
        snap = make_snapshot()

        assert snap.queued_players == [2, 1]
        assert snap.locked_out == [3]

    def test_negative_timer_rejected(self):
        with pytest.raises(ValidationError):
            make_snapshot(timer=-1)

    def test_timer_above_countdown_rejected(self):
        with pytest.raises(ValidationError):
            make_snapshot(timer=6)


class TestWireFormat:
    """Tests for the camelCase payload."""

    def test_wire_keys(self):
        wire = make_snapshot().to_wire()

        assert set(wire) == {
            "schemaVersion", "gameState", "buzzQueue", "earlyBuzzers",
            "timer", "players", "calibrationTarget",
        }
        assert wire["gameState"] == "OPEN"
        assert wire["earlyBuzzers"] == [1, 3]
        assert wire["players"][0] == {"id": 1, "name": "Ann", "devicePath": "usb-a"}
        assert wire["buzzQueue"][1]["label"] == "+40 MS"

    def test_from_wire_restores_snapshot(self):
        snap = make_snapshot(calibration_target=2)

        assert RoundSnapshot.from_wire(snap.to_wire()) == snap


class TestWindowBounds:
    def test_positive_size_required(self):
        with pytest.raises(ValidationError):
            WindowBounds(x=0, y=0, width=0, height=600)
