"""
Front Desk Audit - Append-Only Trail Models
=============================================
Every room status transition and booking lifecycle action leaves one
row here. Rows are never updated and never deleted.
"""

from __future__ import annotations

from django.db import models


class AppendOnlyViolation(Exception):
    """Raised on any attempt to rewrite or remove an audit row."""


class AppendOnlyQuerySet(models.QuerySet):
    def update(self, **kwargs):
        raise AppendOnlyViolation(f"{self.model.__name__} rows cannot be updated.")

    def delete(self):
        raise AppendOnlyViolation(f"{self.model.__name__} rows cannot be deleted.")


class AppendOnlyModel(models.Model):
    objects = AppendOnlyQuerySet.as_manager()

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise AppendOnlyViolation(f"{type(self).__name__} rows cannot be updated.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise AppendOnlyViolation(f"{type(self).__name__} rows cannot be deleted.")


class LogRoom(AppendOnlyModel):
    room_id = models.IntegerField(db_index=True)
    booking_id = models.IntegerField(default=0)
    room_short_name = models.CharField(max_length=50)
    room_status = models.CharField(max_length=20)
    action = models.CharField(max_length=255)
    created_by = models.CharField(max_length=50)
    created_date = models.DateTimeField()

    class Meta:
        db_table = "frontdesk_log_room"
        ordering = ["created_date", "id"]

    def __str__(self) -> str:
        return f"room {self.room_id}: {self.action}"


class LogBooking(AppendOnlyModel):
    booking_id = models.IntegerField(db_index=True)
    guest_name = models.CharField(max_length=255)
    guest_passport = models.CharField(max_length=100)
    action = models.CharField(max_length=255)
    created_by = models.CharField(max_length=50)
    created_date = models.DateTimeField()

    class Meta:
        db_table = "frontdesk_log_booking"
        ordering = ["created_date", "id"]

    def __str__(self) -> str:
        return f"booking {self.booking_id}: {self.action}"
