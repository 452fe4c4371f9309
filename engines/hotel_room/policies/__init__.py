"""
Front Desk Hotel Room Engine — Policies
=========================================
The transition table and the checks that gate room mutations.
Policies return an error message (or None); the service decides which
error type to raise.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional

from engines.hotel_room.models import RoomStatus

VALID_TRANSITIONS: Dict[RoomStatus, FrozenSet[RoomStatus]] = {
    RoomStatus.OPEN: frozenset({
        RoomStatus.BOOKED, RoomStatus.MAINTENANCE, RoomStatus.HOUSEKEEPING,
    }),
    RoomStatus.BOOKED: frozenset({RoomStatus.OCCUPIED, RoomStatus.OPEN}),
    RoomStatus.OCCUPIED: frozenset({RoomStatus.HOUSEKEEPING}),
    RoomStatus.HOUSEKEEPING: frozenset({RoomStatus.OPEN, RoomStatus.MAINTENANCE}),
    RoomStatus.MAINTENANCE: frozenset({RoomStatus.OPEN}),
}

# Statuses during which a room is tied to a booking.
GUEST_HELD_STATUSES = frozenset({RoomStatus.BOOKED, RoomStatus.OCCUPIED})


def can_transition(current: str, target: str) -> bool:
    return RoomStatus(target) in VALID_TRANSITIONS[RoomStatus(current)]


def parse_room_status(value) -> Optional[RoomStatus]:
    """Return the RoomStatus for a member or its string value, else None."""
    try:
        return RoomStatus(value)
    except ValueError:
        return None


def room_must_be_editable_policy(room) -> Optional[str]:
    if room.status in GUEST_HELD_STATUSES:
        return "Cannot edit a room that is Booked or Occupied"
    return None


def room_must_be_releasable_policy(room) -> Optional[str]:
    if room.status in GUEST_HELD_STATUSES:
        return "Cannot deactivate a room that is Booked or Occupied"
    return None
