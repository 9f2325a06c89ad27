"""
Player Registry

Holds the fixed roster of players and their button mappings.
A device identifier belongs to at most one player at a time.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


@dataclass
class Player:
    """A contestant and the button bound to them."""
    id: int
    name: str
    device_id: Optional[str] = None

    @property
    def is_mapped(self) -> bool:
        return self.device_id is not None


class PlayerRegistry:
    """
    The roster for the session.

    Players are never added or removed after construction; only their
    names and device mappings change.
    """

    def __init__(self, players: Iterable[Player]):
        self._players: list[Player] = []
        for player in players:
            if self.get(player.id) is not None:
                raise ValueError(f"Duplicate player id {player.id}")
            self._players.append(Player(id=player.id, name=player.name))
            # Route through assign_device so a stale duplicate mapping
            # cannot survive a load
            if player.device_id is not None:
                self.assign_device(player.id, player.device_id)

    @classmethod
    def default(cls, count: int = 3) -> "PlayerRegistry":
        """Create the default roster: Player 1..count, nothing mapped."""
        return cls(Player(id=i, name=f"Player {i}") for i in range(1, count + 1))

    @property
    def players(self) -> list[Player]:
        """Copies of all players, in roster order."""
        return [replace(p) for p in self._players]

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: int) -> bool:
        return self.get(player_id) is not None

    def get(self, player_id: int) -> Optional[Player]:
        for player in self._players:
            if player.id == player_id:
                return player
        return None

    def find_by_device(self, device_id: str) -> Optional[Player]:
        """Reverse lookup: which player owns this button."""
        for player in self._players:
            if player.device_id == device_id:
                return player
        return None

    def rename(self, player_id: int, name: str) -> bool:
        player = self.get(player_id)
        if player is None:
            return False
        player.name = name
        return True

    def assign_device(self, player_id: int, device_id: str) -> bool:
        """
        Bind a device to a player.

        Any other player holding the same device loses it first.

        Returns:
            True if the player exists and now owns the device
        """
        player = self.get(player_id)
        if player is None:
            return False

        for other in self._players:
            if other.device_id == device_id and other.id != player_id:
                logger.info("Unmapping device %s from player %d", device_id, other.id)
                other.device_id = None

        player.device_id = device_id
        return True
