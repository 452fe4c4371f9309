"""
Tests for core.audit — append-only room and booking trails.
"""

from datetime import datetime, timezone

import pytest

from core.audit.functions import append_booking_log, append_room_log
from core.audit.models import AppendOnlyViolation, LogBooking, LogRoom

pytestmark = pytest.mark.django_db

NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def _room_entry(**overrides):
    fields = dict(
        room_id=7,
        booking_id=0,
        room_short_name="R101",
        room_status="Booked",
        action="Status changed: Open → Booked",
        actor_id="CLERK",
        occurred_at=NOW,
    )
    fields.update(overrides)
    return append_room_log(**fields)


class TestAppendRoomLog:
    def test_writes_row(self):
        entry = _room_entry(booking_id=42)
        stored = LogRoom.objects.get(pk=entry.pk)
        assert stored.room_id == 7
        assert stored.booking_id == 42
        assert stored.created_by == "CLERK"
        assert stored.created_date == NOW

    def test_missing_booking_id_stored_as_zero(self):
        entry = _room_entry(booking_id=None)
        assert LogRoom.objects.get(pk=entry.pk).booking_id == 0


class TestAppendBookingLog:
    def test_writes_row(self):
        entry = append_booking_log(
            booking_id=3,
            guest_name="Ahmad Ali",
            guest_passport="A1234567",
            action="Check-IN",
            actor_id="CLERK",
            occurred_at=NOW,
        )
        stored = LogBooking.objects.get(pk=entry.pk)
        assert stored.action == "Check-IN"
        assert stored.guest_passport == "A1234567"


class TestAppendOnly:
    def test_resave_is_refused(self):
        entry = _room_entry()
        entry.action = "rewritten"
        with pytest.raises(AppendOnlyViolation):
            entry.save()
        assert LogRoom.objects.get(pk=entry.pk).action == "Status changed: Open → Booked"

    def test_instance_delete_is_refused(self):
        entry = _room_entry()
        with pytest.raises(AppendOnlyViolation):
            entry.delete()
        assert LogRoom.objects.filter(pk=entry.pk).exists()

    def test_bulk_update_is_refused(self):
        _room_entry()
        with pytest.raises(AppendOnlyViolation):
            LogRoom.objects.filter(room_id=7).update(action="x")

    def test_bulk_delete_is_refused(self):
        _room_entry()
        with pytest.raises(AppendOnlyViolation):
            LogRoom.objects.all().delete()
        assert LogRoom.objects.count() == 1
