from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from blinkshare.models import Guild, Role
from blinkshare.schemas import GuildInput, RoleInput
from blinkshare.stores import format_amount


def _guild(guild_id="g1", roles=None, **kwargs):
    if roles is None:
        roles = [
            RoleInput(id="r-gold", amount=Decimal("2.00000"), name="Gold"),
            RoleInput(id="r-bronze", amount="0.25", name="Bronze"),
            RoleInput(id="r-silver", amount=1.5, name="Silver"),
        ]
    return GuildInput(id=guild_id, roles=roles, **kwargs)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1.50000"), "1.5"),
        (Decimal("2.00000"), "2"),
        (Decimal("1.23450"), "1.2345"),
        ("10", "10"),
        (0.1, "0.1"),
        (Decimal("0.000001"), "0"),
        (Decimal("3.000004"), "3"),
        (Decimal("3.000005"), "3.00001"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_insert_then_get_sorts_and_formats_roles(stores):
    stores.guilds.insert_guild(_guild(name="Blink", limited_time_quantity=3, limited_time_unit="Months"))

    guild = stores.guilds.get_guild_by_id("g1")

    assert guild is not None
    assert guild.name == "Blink"
    assert guild.hidden is False
    assert guild.limited_time_quantity == "3"
    assert [role.id for role in guild.roles] == ["r-bronze", "r-silver", "r-gold"]
    assert [role.amount for role in guild.roles] == ["0.25", "1.5", "2"]
    assert all(role.guild_id == "g1" for role in guild.roles)


def test_get_guild_without_quantity_keeps_none(stores):
    stores.guilds.insert_guild(_guild(roles=[]))

    guild = stores.guilds.get_guild_by_id("g1")

    assert guild.limited_time_quantity is None
    assert guild.roles == []


def test_get_missing_guild_returns_none(stores):
    assert stores.guilds.get_guild_by_id("nope") is None


def test_get_guild_is_repeatable(stores):
    stores.guilds.insert_guild(_guild())

    assert stores.guilds.get_guild_by_id("g1") == stores.guilds.get_guild_by_id("g1")


def test_failed_insert_rolls_back_guild(stores, ctx):
    stores.guilds.insert_guild(_guild())

    clash = _guild("g2", roles=[RoleInput(id="r-new", amount=1), RoleInput(id="r-gold", amount=5)])
    with pytest.raises(IntegrityError):
        stores.guilds.insert_guild(clash)

    assert stores.guilds.get_guild_by_id("g2") is None
    with ctx.session() as session:
        assert session.get(Role, "r-new") is None
        assert session.get(Role, "r-gold").guild_id == "g1"


def test_update_reconciles_role_set(stores):
    stores.guilds.insert_guild(_guild())

    updated = stores.guilds.update_guild(
        "g1",
        _guild(
            name="Renamed",
            roles=[
                RoleInput(id="r-silver", amount="1.75", name="Silver"),
                RoleInput(id="r-platinum", amount="10", name="Platinum"),
            ],
        ),
    )

    assert updated == 1
    guild = stores.guilds.get_guild_by_id("g1")
    assert guild.name == "Renamed"
    assert [(role.id, role.amount) for role in guild.roles] == [
        ("r-silver", "1.75"),
        ("r-platinum", "10"),
    ]


def test_update_with_empty_roles_leaves_roles(stores):
    stores.guilds.insert_guild(_guild())

    updated = stores.guilds.update_guild("g1", GuildInput(id="g1", hidden=True, roles=[]))

    assert updated == 1
    guild = stores.guilds.get_guild_by_id("g1")
    assert guild.hidden is True
    assert len(guild.roles) == 3


def test_update_does_not_touch_other_guilds(stores):
    stores.guilds.insert_guild(_guild())
    stores.guilds.insert_guild(_guild("g2", roles=[RoleInput(id="r-other", amount=4)]))

    stores.guilds.update_guild("g1", GuildInput(id="g1", roles=[RoleInput(id="r-gold", amount=3)]))

    assert [role.id for role in stores.guilds.get_guild_by_id("g1").roles] == ["r-gold"]
    assert [role.id for role in stores.guilds.get_guild_by_id("g2").roles] == ["r-other"]


def test_list_guild_ids_by_recency_skips_hidden(ctx, stores):
    base = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    with ctx.session() as session:
        session.add_all(
            [
                Guild(id="old", create_time=base),
                Guild(id="new", create_time=base + timedelta(days=2)),
                Guild(id="secret", hidden=True, create_time=base + timedelta(days=3)),
                Guild(id="mid", create_time=base + timedelta(days=1)),
            ]
        )

    assert stores.guilds.list_guild_ids_by_recency() == ["new", "mid", "old"]


def test_list_guilds_returns_everything(stores, ctx):
    stores.guilds.insert_guild(_guild())
    stores.guilds.insert_guild(_guild("g2", roles=[], hidden=True))

    guilds = {guild.id: guild for guild in stores.guilds.list_guilds()}

    assert set(guilds) == {"g1", "g2"}
    assert len(guilds["g1"].roles) == 3
    with ctx.session() as session:
        assert session.scalars(select(Role).where(Role.guild_id == "g1")).all()


def test_failed_update_leaves_guild_and_roles(stores):
    stores.guilds.insert_guild(
        _guild(name="A", roles=[RoleInput(id="r1", amount=1), RoleInput(id="r2", amount=2)])
    )

    with pytest.raises(InvalidOperation):
        stores.guilds.update_guild(
            "g1", GuildInput(id="g1", name="B", roles=[RoleInput(id="r1", amount=None)])
        )

    guild = stores.guilds.get_guild_by_id("g1")
    assert guild.name == "A"
    assert [role.id for role in guild.roles] == ["r1", "r2"]


def test_update_can_clear_nullable_fields(stores):
    stores.guilds.insert_guild(_guild(name="A", payment_address="addr", limited_time_quantity=2))

    stores.guilds.update_guild("g1", GuildInput(id="g1", name=None, payment_address=None))

    guild = stores.guilds.get_guild_by_id("g1")
    assert guild.name is None
    assert guild.payment_address is None
    assert guild.limited_time_quantity == "2"
    assert len(guild.roles) == 3
