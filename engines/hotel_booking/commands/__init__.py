"""
Front Desk Hotel Booking Engine — Request Commands
====================================================
Requests are validated on construction. A request that exists is a
request the service may act on; nothing downstream re-checks shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from core.config import to_money
from core.errors import ValidationError

MIN_GUESTS = 1
MAX_GUESTS = 6
MIN_STAY_NIGHTS = 1
MAX_STAY_NIGHTS = 10


def _money(value: Any, field_name: str) -> Decimal:
    try:
        amount = to_money(value, field_name=field_name)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    if amount < 0:
        raise ValidationError(f"{field_name} must be >= 0.")
    return amount


def _optional_money(value: Any, field_name: str) -> Optional[Decimal]:
    return None if value is None else _money(value, field_name)


def _bounded_int(value: Any, field_name: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer.")
    if not low <= value <= high:
        raise ValidationError(f"{field_name} must be between {low} and {high}.")
    return value


@dataclass(frozen=True)
class CreateBookingRequest:
    room_id:                      int
    guest_name:                   str
    guest_passport:               str
    total_guest:                  int
    stay_duration:                int
    booking_date:                 datetime
    guest_check_in:               datetime
    guest_check_out:              datetime
    guest_origin:                 str = ""
    guest_contact:                str = ""
    guest_emergency_contact_name: str = ""
    guest_emergency_contact_no:   str = ""
    remarks:                      str = ""
    deposit:                      Optional[Decimal] = None
    payment:                      Decimal = Decimal("0.00")

    def __post_init__(self):
        if not isinstance(self.guest_name, str) or not self.guest_name.strip():
            raise ValidationError("Please key in Guest Name")
        if not isinstance(self.guest_passport, str) or not self.guest_passport.strip():
            raise ValidationError("Please key in Guest Passport/IC No")
        object.__setattr__(self, "guest_name", self.guest_name.strip())
        object.__setattr__(self, "guest_passport", self.guest_passport.strip())

        if isinstance(self.room_id, bool) or not isinstance(self.room_id, int) or self.room_id <= 0:
            raise ValidationError("room_id must be a positive integer.")
        _bounded_int(self.total_guest, "total_guest", MIN_GUESTS, MAX_GUESTS)
        _bounded_int(self.stay_duration, "stay_duration", MIN_STAY_NIGHTS, MAX_STAY_NIGHTS)

        for name in ("booking_date", "guest_check_in", "guest_check_out"):
            if not isinstance(getattr(self, name), datetime):
                raise ValidationError(f"{name} must be a datetime.")

        for name in (
            "guest_origin", "guest_contact",
            "guest_emergency_contact_name", "guest_emergency_contact_no", "remarks",
        ):
            object.__setattr__(self, name, (getattr(self, name) or "").strip())

        object.__setattr__(self, "deposit", _optional_money(self.deposit, "deposit"))
        object.__setattr__(self, "payment", _money(self.payment, "payment"))


@dataclass(frozen=True)
class PaymentRequest:
    """Financial field update; deposit/refund of None leave the stored value."""

    payment: Decimal
    deposit: Optional[Decimal] = None
    refund:  Optional[Decimal] = None

    def __post_init__(self):
        object.__setattr__(self, "payment", _money(self.payment, "payment"))
        object.__setattr__(self, "deposit", _optional_money(self.deposit, "deposit"))
        object.__setattr__(self, "refund", _optional_money(self.refund, "refund"))
