"""
Front Desk Hotel Booking Engine — Policies
============================================
Pure rules over bookings. Message-returning policies give the exact
operator-facing text; the service picks the error type.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from django.utils import timezone

from engines.hotel_room.models import RoomStatus


def is_paid(booking) -> bool:
    """Payment must equal sub_total + deposit exactly; over- and under-payment both fail."""
    return booking.payment == booking.sub_total + booking.deposit


def local_hour(moment: datetime) -> int:
    """Hour of day in the configured TIME_ZONE. Naive values are taken as local."""
    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment)
    return timezone.localtime(moment).hour


def is_late_checkout(check_out_time: datetime, late_checkout_hour: int) -> bool:
    return local_hour(check_out_time) >= late_checkout_hour


# ══════════════════════════════════════════════════════════════
# GATES
# ══════════════════════════════════════════════════════════════

def room_must_be_bookable_policy(room) -> Optional[str]:
    if room.status == RoomStatus.MAINTENANCE:
        return "Room is under Maintenance. Please choose another room."
    if room.status != RoomStatus.OPEN:
        return f"Room is currently {room.status}. Cannot create booking."
    return None


def booking_must_be_active_policy(booking) -> Optional[str]:
    if not booking.active:
        return "Booking is not active"
    return None


def booking_must_be_paid_policy(booking) -> Optional[str]:
    if not is_paid(booking):
        return "Please make payment first!"
    return None


def room_must_be_in_status_policy(room, expected: RoomStatus, step: str) -> Optional[str]:
    if room.status != expected:
        return f"Room status is {room.status}, expected {expected.value} for {step}"
    return None
