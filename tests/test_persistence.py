"""
Tests for the SQLite-backed ConfigStore.
"""

import pytest

from engine.registry import Player, PlayerRegistry
from models.schemas import WindowBounds
from services.persistence import ConfigStore


@pytest.fixture
def store(tmp_path):
    store = ConfigStore(f"sqlite:///{tmp_path / 'settings.db'}")
    yield store
    store.close()


class TestRosterPersistence:
    """Tests for saving and loading players."""

    def test_load_empty_returns_none(self, store):
        assert store.load() is None

    def test_save_and_load(self, store):
        registry = PlayerRegistry([
            Player(1, "Ann", "usb-a"),
            Player(2, "Ben", None),
            Player(3, "Cal", "usb-c"),
        ])

        assert store.save(registry)
        loaded = store.load()

        assert [(p.id, p.name, p.device_id) for p in loaded.players] == [
            (1, "Ann", "usb-a"),
            (2, "Ben", None),
            (3, "Cal", "usb-c"),
        ]

    def test_moving_a_device_between_players(self, store):
        """Re-saving after a remap must not trip the unique constraint."""
        registry = PlayerRegistry([Player(1, "Ann", "usb-a"), Player(2, "Ben", "usb-b")])
        store.save(registry)

        registry.assign_device(2, "usb-a")
        registry.assign_device(1, "usb-b")
        assert store.save(registry)

        loaded = store.load()
        assert loaded.get(1).device_id == "usb-b"
        assert loaded.get(2).device_id == "usb-a"

    def test_rename_is_saved(self, store):
        registry = PlayerRegistry.default(2)
        store.save(registry)

        registry.rename(2, "Bea")
        store.save(registry)

        assert store.load().get(2).name == "Bea"

    def test_unreachable_database_is_not_fatal(self, tmp_path):
        """I/O failure is logged; load gives None and save gives False."""
        bad = ConfigStore(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'x.db'}")

        assert bad.load() is None
        assert not bad.save(PlayerRegistry.default(1))
        bad.close()


class TestWindowBounds:
    """Tests for window geometry."""

    def test_bounds_round_trip(self, store):
        bounds = WindowBounds(x=10, y=20, width=900, height=700)

        assert store.save_bounds("host", bounds)

        assert store.load_bounds("host") == bounds
        assert store.load_bounds("board") is None

    def test_bounds_overwrite(self, store):
        store.save_bounds("board", WindowBounds(x=0, y=0, width=800, height=600))
        store.save_bounds("board", WindowBounds(x=5, y=5, width=1024, height=768))

        assert store.load_bounds("board").width == 1024
