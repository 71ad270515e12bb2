"""Plain records exchanged between API callers and the stores."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

Amount = Union[Decimal, str, int, float]


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# Marks a guild field the caller did not send. ``None`` means NULL.
UNSET: Any = _Unset()

# Guild columns an update may touch. ``id`` and ``roles`` are never written
# through the scalar update.
GUILD_SCALAR_FIELDS = (
    "name",
    "payment_address",
    "hidden",
    "limited_time_quantity",
    "limited_time_unit",
)


def to_decimal(value: Amount) -> Decimal:
    """Coerce an amount to ``Decimal`` without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass
class RoleInput:
    id: str
    amount: Amount
    name: Optional[str] = None


@dataclass
class GuildInput:
    """Guild payload as validated by the API layer.

    Scalar fields left as ``UNSET`` fall back to column defaults on insert and
    are left untouched on update. Passing ``None`` writes NULL, which clears a
    nullable column on update.
    """

    id: str
    roles: List[RoleInput] = field(default_factory=list)
    name: Optional[str] = UNSET
    payment_address: Optional[str] = UNSET
    hidden: bool = UNSET
    limited_time_quantity: Optional[int] = UNSET
    limited_time_unit: Optional[str] = UNSET

    def scalar_values(self) -> Dict[str, Any]:
        values = {}
        for name in GUILD_SCALAR_FIELDS:
            value = getattr(self, name)
            if value is not UNSET:
                values[name] = value
        return values


@dataclass(frozen=True)
class RoleView:
    id: str
    guild_id: str
    name: Optional[str]
    amount: str


@dataclass(frozen=True)
class GuildView:
    """Display-ready guild with its roles ordered by price."""

    id: str
    name: Optional[str]
    payment_address: Optional[str]
    hidden: bool
    create_time: datetime
    limited_time_quantity: Optional[str]
    limited_time_unit: Optional[str]
    roles: List[RoleView]


__all__ = [
    "Amount",
    "UNSET",
    "GUILD_SCALAR_FIELDS",
    "GuildInput",
    "GuildView",
    "RoleInput",
    "RoleView",
    "to_decimal",
]
