"""
Buzzsaw Services

Event hub, settings persistence, logging and audio cues.
"""

from services.event_bus import EventBus
from services.persistence import ConfigStore

__all__ = ["EventBus", "ConfigStore"]
