"""
Tests for the PlayerRegistry, CalibrationMapper and BuzzRouter.
"""

import pytest

from engine.calibration import CalibrationMapper
from engine.registry import Player, PlayerRegistry
from engine.router import BuzzRouter, RawPress, Route


class TestPlayerRegistry:
    """Tests for roster lookups and device ownership."""

    def test_default_roster(self):
        registry = PlayerRegistry.default(3)

        assert [p.name for p in registry.players] == ["Player 1", "Player 2", "Player 3"]
        assert not any(p.is_mapped for p in registry.players)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            PlayerRegistry([Player(1, "A"), Player(1, "B")])

    def test_duplicate_devices_collapsed_on_load(self):
        """A device listed twice ends up owned by the last player only."""
        registry = PlayerRegistry([Player(1, "A", "dev"), Player(2, "B", "dev")])

        assert registry.get(1).device_id is None
        assert registry.get(2).device_id == "dev"

    def test_find_by_device(self):
        registry = PlayerRegistry([Player(1, "A", "dev-1"), Player(2, "B", "dev-2")])

        assert registry.find_by_device("dev-2").id == 2
        assert registry.find_by_device("missing") is None

    def test_assign_device_moves_ownership(self):
        registry = PlayerRegistry([Player(1, "A", "dev"), Player(2, "B")])

        assert registry.assign_device(2, "dev")

        owners = [p.id for p in registry.players if p.device_id == "dev"]
        assert owners == [2]

    def test_assign_device_unknown_player(self):
        registry = PlayerRegistry.default(2)

        assert not registry.assign_device(5, "dev")
        assert registry.find_by_device("dev") is None

    def test_players_returns_copies(self):
        registry = PlayerRegistry.default(1)

        registry.players[0].name = "Mutated"

        assert registry.get(1).name == "Player 1"

    def test_rename(self):
        registry = PlayerRegistry.default(2)

        assert registry.rename(2, "Bea")
        assert not registry.rename(9, "Nobody")
        assert registry.get(2).name == "Bea"


class TestBuzzRouter:
    """Tests for routing raw presses."""

    def setup_method(self):
        self.registry = PlayerRegistry([Player(1, "A", "dev-1"), Player(2, "B")])
        self.calibration = CalibrationMapper(self.registry)
        self.router = BuzzRouter(self.registry, self.calibration)

    def test_mapped_device_routes_to_buzz(self):
        result = self.router.route(RawPress("dev-1"))

        assert result.route == Route.BUZZ
        assert result.player_id == 1

    def test_unmapped_device(self):
        result = self.router.route(RawPress("dev-x"))

        assert result.route == Route.UNMAPPED
        assert result.player_id is None

    def test_calibration_consumes_next_press(self):
        self.calibration.start(2)

        result = self.router.route(RawPress("dev-1"))

        assert result.route == Route.CALIBRATED
        assert result.player_id == 2
        assert self.registry.get(2).device_id == "dev-1"
        assert self.registry.get(1).device_id is None
        assert not self.calibration.is_active

    def test_only_one_press_is_consumed(self):
        self.calibration.start(2)
        self.router.route(RawPress("dev-2"))

        result = self.router.route(RawPress("dev-2"))

        assert result.route == Route.BUZZ
        assert result.player_id == 2

    def test_start_overwrites_target(self):
        self.calibration.start(1)
        self.calibration.start(2)

        assert self.calibration.target == 2

    def test_unknown_target_rejected(self):
        assert not self.calibration.start(42)
        assert self.calibration.target is None

    def test_unknown_target_clears_previous(self):
        """A rejected request leaves no older target waiting for a press."""
        self.calibration.start(1)

        assert not self.calibration.start(42)
        assert self.calibration.target is None
        assert self.router.route(RawPress("dev-1")).route == Route.BUZZ

    def test_stale_target_drops_press(self):
        """A target that no longer resolves consumes the press and clears."""
        self.calibration._target = 42

        result = self.router.route(RawPress("dev-1"))

        assert result.route == Route.CALIBRATION_DROPPED
        assert self.calibration.target is None
        assert self.registry.get(1).device_id == "dev-1"
