"""
Settings persistence

Stores the roster (names and button mappings) and window geometry in
the SQLite settings database. Failures are logged and never raised:
the engine keeps running on whatever it has in memory.
"""

import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError

from engine.registry import Player, PlayerRegistry
from models.base import create_db_engine, init_db, make_session_factory, session_scope
from models.player import PlayerRecord
from models.schemas import WindowBounds
from models.window_bounds import WindowBoundsRecord

logger = logging.getLogger(__name__)


class ConfigStore:
    """
    Load/save collaborator for the roster and window bounds.

    Usage:
        store = ConfigStore(PATHS.database_url)
        registry = store.load() or PlayerRegistry.default()
        ...
        store.save(registry)
    """

    def __init__(self, database_url: str):
        self._engine = create_db_engine(database_url)
        self._sessions = make_session_factory(self._engine)
        self._ready = False

    def _ensure_schema(self) -> bool:
        if not self._ready:
            try:
                init_db(self._engine)
            except SQLAlchemyError:
                logger.exception("Failed to initialize settings database")
                return False
            self._ready = True
        return True

    def load(self) -> Optional[PlayerRegistry]:
        """
        Read the saved roster.

        Returns:
            The registry, or None if nothing is saved or the read failed
        """
        if not self._ensure_schema():
            return None
        try:
            with session_scope(self._sessions) as session:
                records = session.scalars(select(PlayerRecord).order_by(PlayerRecord.id)).all()
                players = [Player(id=r.id, name=r.name, device_id=r.device_id) for r in records]
        except SQLAlchemyError:
            logger.exception("Failed to load roster")
            return None

        if not players:
            return None
        logger.info("Loaded %d players from settings", len(players))
        return PlayerRegistry(players)

    def save(self, registry: PlayerRegistry) -> bool:
        """Replace the saved roster with the registry's current contents."""
        if not self._ensure_schema():
            return False
        try:
            with session_scope(self._sessions) as session:
                # Clear mappings first so reassigned devices don't trip
                # the unique constraint mid-update
                session.execute(update(PlayerRecord).values(device_id=None))
                session.flush()
                for player in registry.players:
                    session.merge(PlayerRecord(
                        id=player.id,
                        name=player.name,
                        device_id=player.device_id,
                    ))
        except SQLAlchemyError:
            logger.exception("Failed to save roster")
            return False
        logger.debug("Saved roster (%d players)", len(registry))
        return True

    def load_bounds(self, role: str) -> Optional[WindowBounds]:
        if not self._ensure_schema():
            return None
        try:
            with session_scope(self._sessions) as session:
                record = session.get(WindowBoundsRecord, role)
                if record is None:
                    return None
                return WindowBounds(x=record.x, y=record.y,
                                    width=record.width, height=record.height)
        except SQLAlchemyError:
            logger.exception("Failed to load %s window bounds", role)
            return None

    def save_bounds(self, role: str, bounds: WindowBounds) -> bool:
        if not self._ensure_schema():
            return False
        try:
            with session_scope(self._sessions) as session:
                session.merge(WindowBoundsRecord(
                    role=role,
                    x=bounds.x,
                    y=bounds.y,
                    width=bounds.width,
                    height=bounds.height,
                ))
        except SQLAlchemyError:
            logger.exception("Failed to save %s window bounds", role)
            return False
        return True

    def close(self) -> None:
        self._engine.dispose()
