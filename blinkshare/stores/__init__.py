"""Repositories over the BlinkShare schema."""
from __future__ import annotations

from dataclasses import dataclass

from blinkshare.db import DatabaseContext

from .access_tokens import AccessTokenStore
from .guilds import GuildStore, format_amount
from .role_purchases import RolePurchaseStore
from .wallets import WalletStore


@dataclass
class Stores:
    """All stores sharing one database context."""

    guilds: GuildStore
    access_tokens: AccessTokenStore
    role_purchases: RolePurchaseStore
    wallets: WalletStore

    @classmethod
    def from_context(cls, ctx: DatabaseContext) -> "Stores":
        return cls(
            guilds=GuildStore(ctx),
            access_tokens=AccessTokenStore(ctx),
            role_purchases=RolePurchaseStore(ctx),
            wallets=WalletStore(ctx),
        )


__all__ = [
    "AccessTokenStore",
    "GuildStore",
    "RolePurchaseStore",
    "Stores",
    "WalletStore",
    "format_amount",
]
