"""
Front Desk Hotel Room Engine — Room Lifecycle Service
=======================================================
Sole writer of Room.status. Every status change goes through
transition(), which locks the room row, checks VALID_TRANSITIONS and
appends a LogRoom entry in the same transaction.

Booking-driven transitions (create_booking, check_in, check_out) call
transition() from inside the booking engine's transaction, so a failed
booking step rolls the room change back with it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from django.db import transaction

from core.audit.functions import append_room_log
from core.errors import ConflictError, InvalidTransitionError, NotFoundError, ValidationError
from core.notifications import ChangeNotifier, notify_on_commit
from core.time import Clock, get_default_clock
from engines.hotel_room.commands import CreateRoomRequest, UpdateRoomRequest
from engines.hotel_room.events import (
    ROOM_CREATED,
    ROOM_DEACTIVATED,
    ROOM_UPDATED,
    status_changed_action,
)
from engines.hotel_room.models import Room, RoomStatus, RoomType
from engines.hotel_room.policies import (
    GUEST_HELD_STATUSES,
    VALID_TRANSITIONS,
    parse_room_status,
    room_must_be_editable_policy,
    room_must_be_releasable_policy,
)

logger = logging.getLogger("frontdesk.rooms")


class RoomLifecycleService:
    def __init__(
        self,
        *,
        clock: Optional[Clock] = None,
        notifier: Optional[ChangeNotifier] = None,
    ):
        self._clock = clock or get_default_clock()
        self._notifier = notifier

    # ══════════════════════════════════════════════════════════
    # READS
    # ══════════════════════════════════════════════════════════

    def get_room(self, room_id: int) -> Room:
        try:
            return Room.objects.get(pk=room_id)
        except Room.DoesNotExist as exc:
            raise NotFoundError(f"Room {room_id} not found") from exc

    def list_rooms(self) -> List[Room]:
        return list(Room.objects.filter(active=True).order_by("id"))

    def list_room_types(self) -> List[RoomType]:
        return list(RoomType.objects.filter(active=True).order_by("id"))

    # ══════════════════════════════════════════════════════════
    # STATUS TRANSITIONS
    # ══════════════════════════════════════════════════════════

    def transition(
        self,
        room_id: int,
        target_status: Union[RoomStatus, str],
        actor_id: str,
        booking_id: Optional[int] = None,
    ) -> Room:
        target = parse_room_status(target_status)
        if target is None:
            raise ValidationError(f"Unknown room status: {target_status}")

        with transaction.atomic():
            room = self._lock_room(room_id)
            current = RoomStatus(room.status)
            if target not in VALID_TRANSITIONS[current]:
                raise InvalidTransitionError(current.value, target.value)

            now = self._clock.now_utc()
            held_booking_id = room.booking_id
            room.status = target
            if target == RoomStatus.BOOKED:
                room.booking_id = booking_id or 0
            elif target not in GUEST_HELD_STATUSES:
                room.booking_id = 0
            room.last_modified_by = actor_id
            room.last_modified_date = now
            room.save(update_fields=[
                "status", "booking_id", "last_modified_by", "last_modified_date",
            ])

            append_room_log(
                room_id=room.pk,
                booking_id=room.booking_id or held_booking_id,
                room_short_name=room.short_name,
                room_status=target.value,
                action=status_changed_action(current.value, target.value),
                actor_id=actor_id,
                occurred_at=now,
            )
            notify_on_commit(self._notifier)

        logger.info(
            f"Room {room.short_name} (id={room.pk}) {current.value} → "
            f"{target.value} by {actor_id}"
        )
        return room

    # ══════════════════════════════════════════════════════════
    # ROOM ADMINISTRATION
    # ══════════════════════════════════════════════════════════

    def create_room(self, request: CreateRoomRequest, actor_id: str) -> Room:
        now = self._clock.now_utc()
        with transaction.atomic():
            room = Room.objects.create(
                short_name=request.short_name,
                long_name=request.long_name,
                room_type=request.room_type,
                location=request.location,
                price=request.price,
                breakfast=request.breakfast,
                breakfast_price=request.breakfast_price,
                status=RoomStatus.OPEN,
                booking_id=0,
                active=True,
                created_by=actor_id,
                created_date=now,
            )
            append_room_log(
                room_id=room.pk,
                booking_id=0,
                room_short_name=room.short_name,
                room_status=room.status,
                action=ROOM_CREATED,
                actor_id=actor_id,
                occurred_at=now,
            )
            notify_on_commit(self._notifier)
        logger.info(f"Room {room.short_name} (id={room.pk}) created by {actor_id}")
        return room

    def update_room(
        self, room_id: int, request: UpdateRoomRequest, actor_id: str
    ) -> Room:
        changes = request.changes()
        with transaction.atomic():
            room = self._lock_room(room_id)
            rejection = room_must_be_editable_policy(room)
            if rejection:
                raise ConflictError(rejection)

            now = self._clock.now_utc()
            for field_name, value in changes.items():
                setattr(room, field_name, value)
            room.last_modified_by = actor_id
            room.last_modified_date = now
            room.save(update_fields=[
                *changes.keys(), "last_modified_by", "last_modified_date",
            ])
            append_room_log(
                room_id=room.pk,
                booking_id=room.booking_id,
                room_short_name=room.short_name,
                room_status=room.status,
                action=ROOM_UPDATED,
                actor_id=actor_id,
                occurred_at=now,
            )
            notify_on_commit(self._notifier)
        logger.info(
            f"Room {room.short_name} (id={room.pk}) updated by {actor_id}: "
            f"{sorted(changes)}"
        )
        return room

    def deactivate_room(self, room_id: int, actor_id: str) -> Room:
        with transaction.atomic():
            room = self._lock_room(room_id)
            rejection = room_must_be_releasable_policy(room)
            if rejection:
                raise ConflictError(rejection)

            now = self._clock.now_utc()
            room.active = False
            room.last_modified_by = actor_id
            room.last_modified_date = now
            room.save(update_fields=["active", "last_modified_by", "last_modified_date"])
            append_room_log(
                room_id=room.pk,
                booking_id=room.booking_id,
                room_short_name=room.short_name,
                room_status=room.status,
                action=ROOM_DEACTIVATED,
                actor_id=actor_id,
                occurred_at=now,
            )
            notify_on_commit(self._notifier)
        logger.info(f"Room {room.short_name} (id={room.pk}) deactivated by {actor_id}")
        return room

    # ── internals ─────────────────────────────────────────────

    @staticmethod
    def _lock_room(room_id: int) -> Room:
        try:
            return Room.objects.select_for_update().get(pk=room_id)
        except Room.DoesNotExist as exc:
            raise NotFoundError(f"Room {room_id} not found") from exc
