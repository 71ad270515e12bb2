"""Command line helpers for operating the BlinkShare database."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from typing import Optional, Sequence

from .config import get_settings
from .db import initialize_database
from .logging_config import configure_logging
from .models import RolePurchase
from .stores import Stores

log = logging.getLogger("blinkshare.cli")


def _purchase_record(purchase: RolePurchase) -> dict:
    return {
        "id": purchase.id,
        "discord_user_id": purchase.discord_user_id,
        "guild_id": purchase.guild_id,
        "role_id": purchase.role_id,
        "role_name": purchase.role.name if purchase.role is not None else None,
        "expires_at": purchase.expires_at.isoformat(),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blinkshare", description="BlinkShare database CLI")
    parser.add_argument("--database-url", help="Override DATABASE_URL", default=None)
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("check-db", help="Verify the database is reachable")
    subparsers.add_parser(
        "expiring", help="Print role purchases expiring soon as JSON lines"
    )
    guild_parser = subparsers.add_parser("guild", help="Print a guild with its roles")
    guild_parser.add_argument("guild_id")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.error("Please supply a command. Try --help for options.")

    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        ctx = initialize_database(settings, url=args.database_url)
    except Exception:  # logged by initialize_database
        return 1

    try:
        stores = Stores.from_context(ctx)
        if args.command == "check-db":
            print("ok")
        elif args.command == "expiring":
            for purchase in stores.role_purchases.list_expiring_purchases():
                print(json.dumps(_purchase_record(purchase)))
        elif args.command == "guild":
            guild = stores.guilds.get_guild_by_id(args.guild_id)
            if guild is None:
                log.warning("Guild %s not found", args.guild_id)
                return 1
            print(json.dumps(dataclasses.asdict(guild), indent=2, default=str))
    finally:
        ctx.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
