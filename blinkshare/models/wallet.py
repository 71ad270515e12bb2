"""SQLAlchemy model for user wallet addresses."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from . import Base, BIGINT_PK, utcnow


class Wallet(Base):
    __tablename__ = "wallet"

    id: Mapped[int] = mapped_column(BIGINT_PK, primary_key=True, autoincrement=True)
    address: Mapped[str] = mapped_column(String(64), nullable=False)
    discord_user_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )


__all__ = ["Wallet"]
