"""Role purchase persistence and expiry scanning."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import contains_eager, selectinload

from blinkshare.db import DatabaseContext
from blinkshare.models import RolePurchase


log = logging.getLogger("blinkshare.stores.role_purchases")

# The window starts an hour in the past and reaches three days and two hours
# ahead of the current time.
EXPIRY_GRACE = timedelta(hours=1)
EXPIRY_LOOKAHEAD = timedelta(days=3, hours=2)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def expiring_window(now: datetime) -> Tuple[datetime, datetime]:
    """Return the ``(after, until]`` bounds for purchases expiring soon."""
    return now - EXPIRY_GRACE, now + EXPIRY_LOOKAHEAD


class RolePurchaseStore:
    def __init__(self, ctx: DatabaseContext) -> None:
        self.ctx = ctx

    def save_purchase(self, purchase: RolePurchase) -> RolePurchase:
        with self.ctx.session() as session:
            session.add(purchase)
            session.flush()
            log.info(
                "Recorded purchase of role %s in guild %s for user %s",
                purchase.role_id,
                purchase.guild_id,
                purchase.discord_user_id,
            )
            return purchase

    def list_expiring_purchases(self, now: Optional[datetime] = None) -> List[RolePurchase]:
        """Purchases with a live guild and role that expire inside the window."""

        after, until = expiring_window(now or _now())
        with self.ctx.session() as session:
            stmt = (
                select(RolePurchase)
                .join(RolePurchase.guild)
                .join(RolePurchase.role)
                .options(contains_eager(RolePurchase.guild), contains_eager(RolePurchase.role))
                .where(RolePurchase.expires_at <= until)
                .where(RolePurchase.expires_at > after)
                .order_by(RolePurchase.expires_at)
            )
            purchases = list(session.scalars(stmt).unique().all())
        log.debug("Found %d purchases expiring between %s and %s", len(purchases), after, until)
        return purchases

    def list_user_role_purchases(self, discord_user_id: str, guild_id: str, role_id: str) -> List[RolePurchase]:
        with self.ctx.session() as session:
            stmt = select(RolePurchase).where(
                RolePurchase.discord_user_id == discord_user_id,
                RolePurchase.guild_id == guild_id,
                RolePurchase.role_id == role_id,
            )
            return list(session.scalars(stmt).all())

    def list_purchases_by_guild(self, guild_id: str) -> List[RolePurchase]:
        with self.ctx.session() as session:
            stmt = (
                select(RolePurchase)
                .where(RolePurchase.guild_id == guild_id)
                .options(selectinload(RolePurchase.guild), selectinload(RolePurchase.role))
                .order_by(RolePurchase.create_time.desc())
            )
            return list(session.scalars(stmt).all())


__all__ = ["RolePurchaseStore", "expiring_window", "EXPIRY_GRACE", "EXPIRY_LOOKAHEAD"]
