"""
Buzz Router

Resolves a raw button press into either a calibration binding or a
player's buzz. Calibration always wins.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from engine.calibration import CalibrationMapper
from engine.registry import PlayerRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawPress:
    """A rising edge from a physical button."""
    device_id: str


class Route(Enum):
    """What became of a raw press."""
    CALIBRATED = "calibrated"        # bound to the calibration target
    CALIBRATION_DROPPED = "calibration_dropped"  # consumed, target was stale
    BUZZ = "buzz"                    # forward to arbitration
    UNMAPPED = "unmapped"            # no player owns the device


@dataclass(frozen=True)
class RouteResult:
    route: Route
    player_id: Optional[int] = None


class BuzzRouter:
    """Single resolver for every raw press."""

    def __init__(self, registry: PlayerRegistry, calibration: CalibrationMapper):
        self._registry = registry
        self._calibration = calibration

    def route(self, press: RawPress) -> RouteResult:
        if self._calibration.is_active:
            player_id = self._calibration.bind(press.device_id)
            if player_id is None:
                return RouteResult(Route.CALIBRATION_DROPPED)
            return RouteResult(Route.CALIBRATED, player_id)

        player = self._registry.find_by_device(press.device_id)
        if player is None:
            logger.debug("Press from unmapped device %s dropped", press.device_id)
            return RouteResult(Route.UNMAPPED)
        return RouteResult(Route.BUZZ, player.id)
