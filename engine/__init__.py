"""
Buzzsaw Engine

Buzz arbitration and round timing.
This module contains no GUI dependencies.
"""

from engine.buzz_engine import BuzzEngine, Buzz, format_delta
from engine.calibration import CalibrationMapper
from engine.registry import Player, PlayerRegistry
from engine.router import BuzzRouter, RawPress, Route, RouteResult
from engine.timer import CountdownTimer, GraceScheduler, ElapsedClock

__all__ = [
    "BuzzEngine",
    "Buzz",
    "format_delta",
    "CalibrationMapper",
    "Player",
    "PlayerRegistry",
    "BuzzRouter",
    "RawPress",
    "Route",
    "RouteResult",
    "CountdownTimer",
    "GraceScheduler",
    "ElapsedClock",
]
