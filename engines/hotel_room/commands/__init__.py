"""
Front Desk Hotel Room Engine — Request Commands
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, Optional

from core.config import to_money
from core.errors import ValidationError


def _money(value: Any, field_name: str) -> Decimal:
    try:
        amount = to_money(value, field_name=field_name)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    if amount < 0:
        raise ValidationError(f"{field_name} must be >= 0.")
    return amount


def _text(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be non-empty.")
    return value.strip()


@dataclass(frozen=True)
class CreateRoomRequest:
    short_name:      str
    room_type:       str
    location:        str
    price:           Decimal
    long_name:       str = ""
    breakfast:       bool = False
    breakfast_price: Decimal = Decimal("0.00")

    def __post_init__(self):
        object.__setattr__(self, "short_name", _text(self.short_name, "short_name"))
        object.__setattr__(self, "room_type", _text(self.room_type, "room_type"))
        object.__setattr__(self, "location", _text(self.location, "location"))
        object.__setattr__(self, "price", _money(self.price, "price"))
        object.__setattr__(
            self, "breakfast_price", _money(self.breakfast_price, "breakfast_price")
        )
        object.__setattr__(self, "long_name", (self.long_name or "").strip())
        object.__setattr__(self, "breakfast", bool(self.breakfast))


@dataclass(frozen=True)
class UpdateRoomRequest:
    """Partial update; None means "leave unchanged"."""

    short_name:      Optional[str] = None
    long_name:       Optional[str] = None
    room_type:       Optional[str] = None
    location:        Optional[str] = None
    price:           Optional[Decimal] = None
    breakfast:       Optional[bool] = None
    breakfast_price: Optional[Decimal] = None

    def __post_init__(self):
        for name in ("short_name", "room_type", "location"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _text(value, name))
        if self.long_name is not None:
            object.__setattr__(self, "long_name", self.long_name.strip())
        for name in ("price", "breakfast_price"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _money(value, name))

    def changes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
