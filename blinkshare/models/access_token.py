"""SQLAlchemy model for OAuth exchange codes."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


class AccessToken(Base):
    """A short-lived code handed out after the Discord OAuth exchange."""

    __tablename__ = "access_token"

    code: Mapped[str] = mapped_column(String(255), primary_key=True)
    discord_user_id: Mapped[Optional[str]] = mapped_column(String(32))
    discord_access_token: Mapped[Optional[str]] = mapped_column(Text)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


__all__ = ["AccessToken"]
