"""
Tests for engines.hotel_room: status machine and room administration.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from core.audit.models import LogRoom
from core.errors import ConflictError, InvalidTransitionError, NotFoundError, ValidationError
from engines.hotel_room.commands import CreateRoomRequest, UpdateRoomRequest
from engines.hotel_room.models import Room, RoomStatus, RoomType
from engines.hotel_room.policies import VALID_TRANSITIONS, can_transition
from engines.hotel_room.services import RoomLifecycleService

pytestmark = pytest.mark.django_db

ALL_PAIRS = [(a, b) for a in RoomStatus for b in RoomStatus]


def _force_status(room: Room, status: RoomStatus, booking_id: int = 0) -> None:
    Room.objects.filter(pk=room.pk).update(status=status, booking_id=booking_id)


# ══════════════════════════════════════════════════════════════
# TRANSITION TABLE
# ══════════════════════════════════════════════════════════════

class TestTransitionTable:
    def test_table_covers_every_status(self):
        assert set(VALID_TRANSITIONS) == set(RoomStatus)

    @pytest.mark.parametrize("current,target", [
        (RoomStatus.OPEN, RoomStatus.OCCUPIED),
        (RoomStatus.BOOKED, RoomStatus.HOUSEKEEPING),
        (RoomStatus.MAINTENANCE, RoomStatus.BOOKED),
    ])
    def test_forbidden_pairs(self, current, target):
        assert not can_transition(current, target)

    def test_accepts_string_values(self):
        assert can_transition("Open", "Booked")
        assert not can_transition("Occupied", "Open")


class TestTransition:
    @pytest.mark.parametrize("current,target", ALL_PAIRS)
    def test_succeeds_iff_in_table(self, rooms, make_room, current, target):
        room = make_room()
        _force_status(room, current, booking_id=5 if current in (RoomStatus.BOOKED, RoomStatus.OCCUPIED) else 0)

        if target in VALID_TRANSITIONS[current]:
            updated = rooms.transition(room.pk, target, "CLERK", booking_id=9)
            assert Room.objects.get(pk=room.pk).status == target
            assert updated.status == target
        else:
            with pytest.raises(InvalidTransitionError) as exc:
                rooms.transition(room.pk, target, "CLERK")
            assert exc.value.message == (
                f"Invalid room status transition: {current.value} → {target.value}"
            )
            assert Room.objects.get(pk=room.pk).status == current

    def test_booked_stores_booking_id(self, rooms, make_room):
        room = make_room()
        rooms.transition(room.pk, RoomStatus.BOOKED, "CLERK", booking_id=42)
        assert Room.objects.get(pk=room.pk).booking_id == 42

    def test_open_clears_booking_id(self, rooms, make_room):
        room = make_room()
        rooms.transition(room.pk, RoomStatus.BOOKED, "CLERK", booking_id=42)
        rooms.transition(room.pk, RoomStatus.OPEN, "CLERK")
        assert Room.objects.get(pk=room.pk).booking_id == 0

    def test_occupied_keeps_and_housekeeping_clears_booking_id(self, rooms, make_room):
        room = make_room()
        rooms.transition(room.pk, RoomStatus.BOOKED, "CLERK", booking_id=42)
        rooms.transition(room.pk, RoomStatus.OCCUPIED, "CLERK")
        assert Room.objects.get(pk=room.pk).booking_id == 42
        rooms.transition(room.pk, RoomStatus.HOUSEKEEPING, "CLERK")
        assert Room.objects.get(pk=room.pk).booking_id == 0

    def test_stamps_audit_fields(self, rooms, make_room, clock):
        room = make_room()
        clock.advance(3600)
        rooms.transition(room.pk, RoomStatus.MAINTENANCE, "SUPER")
        stored = Room.objects.get(pk=room.pk)
        assert stored.last_modified_by == "SUPER"
        assert stored.last_modified_date == clock.now_utc()

    def test_appends_log_entry(self, rooms, make_room):
        room = make_room()
        rooms.transition(room.pk, "Booked", "CLERK", booking_id=42)
        entry = LogRoom.objects.filter(room_id=room.pk).last()
        assert entry.action == "Status changed: Open → Booked"
        assert entry.room_status == "Booked"
        assert entry.booking_id == 42
        assert entry.created_by == "CLERK"

    def test_failure_leaves_no_log(self, rooms, make_room):
        room = make_room()
        before = LogRoom.objects.count()
        with pytest.raises(InvalidTransitionError):
            rooms.transition(room.pk, RoomStatus.OCCUPIED, "CLERK")
        assert LogRoom.objects.count() == before

    def test_unknown_room(self, rooms):
        with pytest.raises(NotFoundError):
            rooms.transition(999, RoomStatus.BOOKED, "CLERK")

    def test_unknown_status_string(self, rooms, make_room):
        room = make_room()
        with pytest.raises(ValidationError):
            rooms.transition(room.pk, "Demolished", "CLERK")

    def test_notifies_after_commit(self, make_room, clock, django_capture_on_commit_callbacks):
        calls = []

        class Recorder:
            def notify(self):
                calls.append("notified")

        service = RoomLifecycleService(clock=clock, notifier=Recorder())
        room = make_room()
        with django_capture_on_commit_callbacks(execute=True):
            service.transition(room.pk, RoomStatus.HOUSEKEEPING, "CLERK")
        assert calls == ["notified"]

    def test_failing_notifier_does_not_fail_transition(
        self, make_room, clock, django_capture_on_commit_callbacks
    ):
        class Broken:
            def notify(self):
                raise RuntimeError("socket gone")

        service = RoomLifecycleService(clock=clock, notifier=Broken())
        room = make_room()
        with django_capture_on_commit_callbacks(execute=True):
            service.transition(room.pk, RoomStatus.HOUSEKEEPING, "CLERK")
        assert Room.objects.get(pk=room.pk).status == RoomStatus.HOUSEKEEPING

    def test_rejected_transition_schedules_no_notification(
        self, make_room, clock, django_capture_on_commit_callbacks
    ):
        class Recorder:
            def notify(self):
                raise AssertionError("should not be called")

        service = RoomLifecycleService(clock=clock, notifier=Recorder())
        room = make_room()
        with django_capture_on_commit_callbacks() as callbacks:
            with pytest.raises(InvalidTransitionError):
                service.transition(room.pk, RoomStatus.OCCUPIED, "CLERK")
        assert callbacks == []


# ══════════════════════════════════════════════════════════════
# ADMINISTRATION
# ══════════════════════════════════════════════════════════════

class TestCreateRoom:
    def test_new_room_starts_open(self, rooms, clock):
        room = rooms.create_room(
            CreateRoomRequest(
                short_name=" R201 ", room_type="SUITE", location="Level 2",
                price="250", breakfast=True, breakfast_price=15,
            ),
            "ADMIN",
        )
        stored = Room.objects.get(pk=room.pk)
        assert stored.short_name == "R201"
        assert stored.status == RoomStatus.OPEN
        assert stored.booking_id == 0
        assert stored.active is True
        assert stored.price == Decimal("250.00")
        assert stored.breakfast_price == Decimal("15.00")
        assert stored.created_by == "ADMIN"
        assert stored.created_date == clock.now_utc()
        assert LogRoom.objects.filter(room_id=room.pk, action="Room Created").exists()

    @pytest.mark.parametrize("overrides", [
        {"short_name": "  "},
        {"room_type": ""},
        {"location": ""},
        {"price": "-1"},
        {"price": "abc"},
        {"breakfast_price": "-0.01"},
        {"price": "123456789.00"},
        {"price": "1e30"},
    ])
    def test_request_validation(self, overrides):
        fields = {"short_name": "R1", "room_type": "STD", "location": "L1", "price": "10"}
        fields.update(overrides)
        with pytest.raises(ValidationError):
            CreateRoomRequest(**fields)


class TestUpdateRoom:
    def test_partial_update(self, rooms, make_room):
        room = make_room()
        rooms.update_room(room.pk, UpdateRoomRequest(price="120.50", location="Level 3"), "SUPER")
        stored = Room.objects.get(pk=room.pk)
        assert stored.price == Decimal("120.50")
        assert stored.location == "Level 3"
        assert stored.room_type == "DELUXE"
        assert stored.last_modified_by == "SUPER"

    @pytest.mark.parametrize("status", [RoomStatus.BOOKED, RoomStatus.OCCUPIED])
    def test_guest_held_room_cannot_be_edited(self, rooms, make_room, status):
        room = make_room()
        _force_status(room, status, booking_id=1)
        with pytest.raises(ConflictError, match="Cannot edit a room that is Booked or Occupied"):
            rooms.update_room(room.pk, UpdateRoomRequest(price="1"), "SUPER")
        assert Room.objects.get(pk=room.pk).price == Decimal("100.00")

    @pytest.mark.parametrize("status", [RoomStatus.HOUSEKEEPING, RoomStatus.MAINTENANCE])
    def test_other_statuses_editable(self, rooms, make_room, status):
        room = make_room()
        _force_status(room, status)
        rooms.update_room(room.pk, UpdateRoomRequest(long_name="Sea view"), "SUPER")
        assert Room.objects.get(pk=room.pk).long_name == "Sea view"

    def test_unknown_room(self, rooms):
        with pytest.raises(NotFoundError):
            rooms.update_room(404, UpdateRoomRequest(price="1"), "SUPER")

    def test_price_beyond_column_capacity(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            UpdateRoomRequest(price="100000000")


class TestDeactivateAndReads:
    def test_deactivate_hides_from_listing(self, rooms, make_room):
        keep = make_room()
        gone = make_room()
        rooms.deactivate_room(gone.pk, "ADMIN")
        assert [r.pk for r in rooms.list_rooms()] == [keep.pk]
        assert Room.objects.filter(pk=gone.pk).exists()

    def test_cannot_deactivate_booked_room(self, rooms, make_room):
        room = make_room()
        rooms.transition(room.pk, RoomStatus.BOOKED, "CLERK", booking_id=3)
        with pytest.raises(ConflictError):
            rooms.deactivate_room(room.pk, "ADMIN")

    def test_get_room(self, rooms, make_room):
        room = make_room()
        assert rooms.get_room(room.pk).short_name == room.short_name
        with pytest.raises(NotFoundError):
            rooms.get_room(12345)

    def test_list_room_types_active_only(self, rooms):
        RoomType.objects.create(short_name="STD", long_name="Standard")
        RoomType.objects.create(short_name="OLD", long_name="Retired", active=False)
        assert [t.short_name for t in rooms.list_room_types()] == ["STD"]
