"""
Pydantic schemas for the state snapshot pushed to every observer.

Snapshots are frozen and self-contained; each one is enough to redraw
every display from scratch. to_wire() produces the camelCase payload
used by external observers.
"""

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


SNAPSHOT_SCHEMA_VERSION = 1


class RoundState(str, enum.Enum):
    """Round lifecycle states."""
    IDLE = "IDLE"
    OPEN = "OPEN"
    LOCKED = "LOCKED"


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ============ Roster ============

class PlayerSnapshot(_Snapshot):
    """A player and their button mapping."""
    id: int = Field(..., ge=1)
    name: str
    device_id: Optional[str] = Field(None, alias="devicePath")

    @property
    def is_mapped(self) -> bool:
        return self.device_id is not None


# ============ Buzz Queue ============

class BuzzSnapshot(_Snapshot):
    """An accepted buzz, in arrival order."""
    player: int
    timestamp: float
    delta: float = Field(..., ge=0)
    label: str


# ============ Round ============

class RoundSnapshot(_Snapshot):
    """
    Full copy of the round and roster at one instant.
    """
    schema_version: int = Field(SNAPSHOT_SCHEMA_VERSION, alias="schemaVersion")
    game_state: RoundState = Field(RoundState.IDLE, alias="gameState")
    buzz_queue: tuple[BuzzSnapshot, ...] = Field((), alias="buzzQueue")
    early_buzzers: tuple[int, ...] = Field((), alias="earlyBuzzers")
    timer: int = Field(5, ge=0, le=5)
    players: tuple[PlayerSnapshot, ...] = ()
    calibration_target: Optional[int] = Field(None, alias="calibrationTarget")

    def player_name(self, player_id: int) -> str:
        """Display name for a player id, falling back to 'Player N'."""
        for player in self.players:
            if player.id == player_id:
                return player.name
        return f"Player {player_id}"

    @property
    def queued_players(self) -> list[int]:
        return [buzz.player for buzz in self.buzz_queue]

    @property
    def locked_out(self) -> list[int]:
        """Early buzzers that have not made it into the queue."""
        queued = set(self.queued_players)
        return [pid for pid in self.early_buzzers if pid not in queued]

    def to_wire(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) field names."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "RoundSnapshot":
        return cls.model_validate(payload)


# ============ Window Geometry ============

class WindowBounds(_Snapshot):
    """Saved position and size of a window."""
    x: int
    y: int
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
