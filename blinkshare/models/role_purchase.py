"""SQLAlchemy model for paid, time-bounded role grants."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from . import Base, BIGINT_PK, utcnow


class RolePurchase(Base):
    """Represents a user's purchase of a role until ``expires_at``."""

    __tablename__ = "role_purchase"
    __table_args__ = (
        Index("role_purchase_expires_idx", "expires_at"),
        Index("role_purchase_guild_time_idx", "guild_id", "create_time"),
    )

    id: Mapped[int] = mapped_column(BIGINT_PK, primary_key=True, autoincrement=True)
    discord_user_id: Mapped[str] = mapped_column(String(32), nullable=False)
    guild_id: Mapped[Optional[str]] = mapped_column(ForeignKey("guild.id", ondelete="SET NULL"))
    role_id: Mapped[Optional[str]] = mapped_column(ForeignKey("role.id", ondelete="SET NULL"))
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    guild = relationship("Guild")
    role = relationship("Role")

    def __repr__(self) -> str:
        return (
            f"RolePurchase(id={self.id!r}, discord_user_id={self.discord_user_id!r}, "
            f"role_id={self.role_id!r}, expires_at={self.expires_at!r})"
        )


__all__ = ["RolePurchase"]
