"""
Front Desk Audit - Trail Writers
==================================
The only write path into LogRoom / LogBooking. Callers pass the
timestamp explicitly (taken from their injected clock) and call these
inside the same transaction as the mutation being recorded.
"""

from __future__ import annotations

from datetime import datetime

from core.audit.models import LogBooking, LogRoom


def append_room_log(
    *,
    room_id: int,
    booking_id: int,
    room_short_name: str,
    room_status: str,
    action: str,
    actor_id: str,
    occurred_at: datetime,
) -> LogRoom:
    return LogRoom.objects.create(
        room_id=room_id,
        booking_id=booking_id or 0,
        room_short_name=room_short_name,
        room_status=str(room_status),
        action=action,
        created_by=actor_id,
        created_date=occurred_at,
    )


def append_booking_log(
    *,
    booking_id: int,
    guest_name: str,
    guest_passport: str,
    action: str,
    actor_id: str,
    occurred_at: datetime,
) -> LogBooking:
    return LogBooking.objects.create(
        booking_id=booking_id,
        guest_name=guest_name,
        guest_passport=guest_passport,
        action=action,
        created_by=actor_id,
        created_date=occurred_at,
    )
