"""
Window geometry model - remembers where the host console and board sat.
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class WindowBoundsRecord(Base):
    __tablename__ = "window_bounds"

    role: Mapped[str] = mapped_column(String(20), primary_key=True)  # "host" or "board"
    x: Mapped[int] = mapped_column(Integer, nullable=False)
    y: Mapped[int] = mapped_column(Integer, nullable=False)
    width: Mapped[int] = mapped_column(Integer, nullable=False)
    height: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<WindowBoundsRecord(role='{self.role}', {self.width}x{self.height}+{self.x}+{self.y})>"
