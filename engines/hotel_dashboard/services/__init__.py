"""
Front Desk Hotel Dashboard — Aggregator
=========================================
Derives the room grid from current Room and Booking rows.
Nothing is persisted; alerts are recomputed on every call.

Alert rules (only for a room linked to an active booking):
    Booked    now is past the booking's expected check-in
    Occupied  now is past the booking's expected check-out
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from core.time import Clock, get_default_clock, is_past
from engines.hotel_booking.models import Booking
from engines.hotel_room.models import Room, RoomStatus


@dataclass(frozen=True)
class RoomTile:
    room_id:         int
    short_name:      str
    long_name:       str
    room_type:       str
    location:        str
    price:           Decimal
    breakfast:       bool
    breakfast_price: Decimal
    status:          str
    booking_id:      int
    alert:           bool


@dataclass(frozen=True)
class DashboardView:
    rooms:   List[RoomTile] = field(default_factory=list)
    summary: Dict[str, int] = field(default_factory=dict)


def _room_alert(room: Room, booking: Optional[Booking], now) -> bool:
    if booking is None:
        return False
    if room.status == RoomStatus.BOOKED:
        return is_past(booking.guest_check_in, now)
    if room.status == RoomStatus.OCCUPIED:
        return is_past(booking.guest_check_out, now)
    return False


class DashboardAggregator:
    def __init__(self, *, clock: Optional[Clock] = None):
        self._clock = clock or get_default_clock()

    def compute(self) -> DashboardView:
        rooms = list(Room.objects.filter(active=True).order_by("id"))
        linked_ids = {
            room.booking_id
            for room in rooms
            if room.booking_id > 0
            and room.status in (RoomStatus.BOOKED, RoomStatus.OCCUPIED)
        }
        bookings = {
            booking.pk: booking
            for booking in Booking.objects.filter(pk__in=linked_ids, active=True)
        }

        now = self._clock.now_utc()
        summary = {status.value: 0 for status in RoomStatus}
        tiles = []
        for room in rooms:
            summary[room.status] += 1
            tiles.append(RoomTile(
                room_id=room.pk,
                short_name=room.short_name,
                long_name=room.long_name,
                room_type=room.room_type,
                location=room.location,
                price=room.price,
                breakfast=room.breakfast,
                breakfast_price=room.breakfast_price,
                status=str(room.status),
                booking_id=room.booking_id,
                alert=_room_alert(room, bookings.get(room.booking_id), now),
            ))
        return DashboardView(rooms=tiles, summary=summary)
