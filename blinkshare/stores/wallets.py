"""Wallet address records."""
from __future__ import annotations

import logging

from blinkshare.db import DatabaseContext
from blinkshare.models import Wallet


log = logging.getLogger("blinkshare.stores.wallets")


class WalletStore:
    def __init__(self, ctx: DatabaseContext) -> None:
        self.ctx = ctx

    def create_wallet(self, discord_user_id: str, address: str) -> Wallet:
        with self.ctx.session() as session:
            wallet = Wallet(address=address, discord_user_id=discord_user_id)
            session.add(wallet)
            session.flush()
            log.info("Linked wallet %s to user %s", address, discord_user_id)
            return wallet


__all__ = ["WalletStore"]
