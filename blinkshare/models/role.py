"""SQLAlchemy model for purchasable guild roles."""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from . import Base


class Role(Base):
    """A priced tier inside a guild."""

    __tablename__ = "role"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(Text)
    amount: Mapped[Decimal] = mapped_column(Numeric(20, 9), nullable=False)
    guild_id: Mapped[str] = mapped_column(
        ForeignKey("guild.id", ondelete="CASCADE"), nullable=False, index=True
    )

    guild = relationship("Guild", back_populates="roles")

    def __repr__(self) -> str:
        return f"Role(id={self.id!r}, guild_id={self.guild_id!r}, amount={self.amount!r})"


__all__ = ["Role"]
