"""
Calibration Mapper

Captures the next raw button press and binds it to a waiting player.
"""

import logging
from typing import Optional

from engine.registry import PlayerRegistry

logger = logging.getLogger(__name__)


class CalibrationMapper:
    """
    Tracks the single outstanding calibration request.

    While a target is set, the next press from any device is consumed
    by bind() instead of being treated as a buzz.
    """

    def __init__(self, registry: PlayerRegistry):
        self._registry = registry
        self._target: Optional[int] = None

    @property
    def target(self) -> Optional[int]:
        """Player id waiting for a device, or None."""
        return self._target

    @property
    def is_active(self) -> bool:
        return self._target is not None

    def start(self, player_id: int) -> bool:
        """
        Wait for a press to bind to player_id.

        Overwrites any previous target. An unknown player clears the
        target and is otherwise ignored.
        """
        self._target = None
        if player_id not in self._registry:
            logger.debug("Ignoring calibration for unknown player %s", player_id)
            return False
        self._target = player_id
        logger.info("Calibrating player %d: waiting for a button press", player_id)
        return True

    def cancel(self) -> None:
        self._target = None

    def bind(self, device_id: str) -> Optional[int]:
        """
        Consume a press for the current target.

        The target is cleared whether or not the binding succeeds.

        Returns:
            The player id now owning device_id, or None if the target
            no longer resolves to a player
        """
        target, self._target = self._target, None
        if target is None or not self._registry.assign_device(target, device_id):
            logger.debug("Calibration target %s vanished; press dropped", target)
            return None
        logger.info("Mapped device %s to player %d", device_id, target)
        return target
