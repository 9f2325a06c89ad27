"""
Player model - the persisted roster and button mappings.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class PlayerRecord(Base):
    """
    A roster entry as stored on disk.

    device_id is unique so two players can never share a button.
    """
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    device_id: Mapped[Optional[str]] = mapped_column(String(512), nullable=True, unique=True)

    def __repr__(self) -> str:
        return f"<PlayerRecord(id={self.id}, name='{self.name}', device={self.device_id})>"
