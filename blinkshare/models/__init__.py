"""SQLAlchemy base model definitions for the BlinkShare schema."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase, declared_attr


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base class shared by every BlinkShare table."""

    @declared_attr.directive
    def __tablename__(cls) -> str:  # type: ignore[misc]
        return cls.__name__.lower()


BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")


# Register every mapper so string relationships resolve on first use.
from .guild import Guild  # noqa: E402
from .role import Role  # noqa: E402
from .access_token import AccessToken  # noqa: E402
from .role_purchase import RolePurchase  # noqa: E402
from .wallet import Wallet  # noqa: E402

__all__ = [
    "Base",
    "BIGINT_PK",
    "utcnow",
    "Guild",
    "Role",
    "AccessToken",
    "RolePurchase",
    "Wallet",
]
