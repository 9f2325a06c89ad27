"""
Buzzsaw Models

SQLAlchemy settings tables and pydantic snapshot schemas.
"""

from models.base import Base, create_db_engine, make_session_factory, session_scope, init_db
from models.player import PlayerRecord
from models.window_bounds import WindowBoundsRecord
from models.schemas import (
    SNAPSHOT_SCHEMA_VERSION,
    RoundState,
    PlayerSnapshot,
    BuzzSnapshot,
    RoundSnapshot,
    WindowBounds,
)

__all__ = [
    "Base",
    "create_db_engine",
    "make_session_factory",
    "session_scope",
    "init_db",
    "PlayerRecord",
    "WindowBoundsRecord",
    "SNAPSHOT_SCHEMA_VERSION",
    "RoundState",
    "PlayerSnapshot",
    "BuzzSnapshot",
    "RoundSnapshot",
    "WindowBounds",
]
