"""SQLAlchemy model for guilds."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from . import Base, utcnow


class Guild(Base):
    """A Discord server that sells roles through BlinkShare."""

    __tablename__ = "guild"
    __table_args__ = (
        Index("guild_visible_recency_idx", "hidden", "create_time"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(Text)
    payment_address: Mapped[Optional[str]] = mapped_column(String(64))
    hidden: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    limited_time_quantity: Mapped[Optional[int]] = mapped_column(Integer)
    limited_time_unit: Mapped[Optional[str]] = mapped_column(String(16))

    roles: Mapped[List["Role"]] = relationship(
        "Role", back_populates="guild", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"Guild(id={self.id!r}, hidden={self.hidden!r})"


__all__ = ["Guild"]
