"""Access token lookups for the OAuth code exchange."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select

from blinkshare.db import DatabaseContext
from blinkshare.models import AccessToken


log = logging.getLogger("blinkshare.stores.access_tokens")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AccessTokenStore:
    def __init__(self, ctx: DatabaseContext) -> None:
        self.ctx = ctx

    def find_valid_access_token(self, code: str, now: Optional[datetime] = None) -> Optional[AccessToken]:
        """Return the token for ``code`` unless it has already expired."""

        now = now or _now()
        with self.ctx.session() as session:
            stmt = select(AccessToken).where(
                AccessToken.code == code,
                AccessToken.expires_at > now,
            )
            return session.scalars(stmt).one_or_none()

    def save_access_token(self, token: AccessToken) -> AccessToken:
        with self.ctx.session() as session:
            saved = session.merge(token)
            session.flush()
            log.debug("Saved access token expiring at %s", saved.expires_at)
            return saved


__all__ = ["AccessTokenStore"]
