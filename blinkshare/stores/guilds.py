"""Guild and role persistence."""
from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import selectinload

from blinkshare.db import DatabaseContext
from blinkshare.models import Guild, Role
from blinkshare.schemas import Amount, GuildInput, GuildView, RoleInput, RoleView, to_decimal


log = logging.getLogger("blinkshare.stores.guilds")

AMOUNT_PRECISION = Decimal("0.00001")
_TRAILING_ZEROS = re.compile(r"(\.0+|(\.\d+?)0+)$")


def format_amount(value: Amount) -> str:
    """Render an amount with at most five decimals and no trailing zeros.

    ``1.50000`` becomes ``"1.5"`` and ``2.00000`` becomes ``"2"``.
    """
    fixed = format(to_decimal(value).quantize(AMOUNT_PRECISION, rounding=ROUND_HALF_UP), "f")
    return _TRAILING_ZEROS.sub(r"\2", fixed)


def _new_role(role: RoleInput, guild_id: str) -> Role:
    return Role(id=role.id, name=role.name, amount=to_decimal(role.amount), guild_id=guild_id)


def _to_view(guild: Guild) -> GuildView:
    """Snapshot a guild for display.

    ``limited_time_quantity`` becomes a string, but an unset quantity stays
    ``None`` rather than the text ``"null"``.
    """
    roles = sorted(guild.roles, key=lambda role: to_decimal(role.amount))
    quantity = guild.limited_time_quantity
    return GuildView(
        id=guild.id,
        name=guild.name,
        payment_address=guild.payment_address,
        hidden=guild.hidden,
        create_time=guild.create_time,
        limited_time_quantity=None if quantity is None else str(quantity),
        limited_time_unit=guild.limited_time_unit,
        roles=[
            RoleView(id=role.id, guild_id=role.guild_id, name=role.name, amount=format_amount(role.amount))
            for role in roles
        ],
    )


class GuildStore:
    """Reads and writes guilds together with their role sets."""

    def __init__(self, ctx: DatabaseContext) -> None:
        self.ctx = ctx

    def list_guild_ids_by_recency(self) -> List[str]:
        with self.ctx.session() as session:
            stmt = (
                select(Guild.id)
                .where(Guild.hidden.is_(False))
                .order_by(Guild.create_time.desc())
            )
            return list(session.scalars(stmt).all())

    def list_guilds(self) -> List[Guild]:
        with self.ctx.session() as session:
            return list(session.scalars(select(Guild).options(selectinload(Guild.roles))).all())

    def insert_guild(self, guild: GuildInput) -> Guild:
        """Insert the guild and all of its roles in one transaction."""

        with self.ctx.session() as session:
            row = Guild(id=guild.id, **guild.scalar_values())
            row.roles = [_new_role(role, guild.id) for role in guild.roles]
            session.add(row)
            session.flush()
            log.info("Inserted guild %s with %d roles", guild.id, len(guild.roles))
            return row

    def update_guild(self, guild_id: str, guild: GuildInput) -> int:
        """Update scalar fields and reconcile the role set to ``guild.roles``.

        An empty role list leaves the stored roles alone. Returns the number
        of guild rows whose scalar fields were updated.
        """

        with self.ctx.session() as session:
            updated = 0
            values = guild.scalar_values()
            if values:
                result = session.execute(
                    update(Guild).where(Guild.id == guild_id).values(**values)
                )
                updated = result.rowcount or 0
            if not guild.roles:
                return updated

            wanted = {role.id for role in guild.roles}
            existing = session.scalars(select(Role).where(Role.guild_id == guild_id)).all()
            stale = [role for role in existing if role.id not in wanted]
            for role in stale:
                session.delete(role)
            session.flush()

            for role in guild.roles:
                session.merge(_new_role(role, guild_id))
            session.flush()
            log.info(
                "Reconciled roles for guild %s: %d kept or added, %d removed",
                guild_id,
                len(guild.roles),
                len(stale),
            )
            return updated

    def get_guild_by_id(self, guild_id: str) -> Optional[GuildView]:
        with self.ctx.session() as session:
            guild = session.get(Guild, guild_id, options=[selectinload(Guild.roles)])
            if guild is None:
                return None
            return _to_view(guild)


__all__ = ["GuildStore", "format_amount"]
