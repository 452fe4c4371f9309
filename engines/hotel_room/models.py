"""
Front Desk Hotel Room Engine - Persistent Room State
======================================================
Room.status is written only by RoomLifecycleService.transition.
Room.booking_id is non-zero only while the room is Booked or Occupied.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models


class RoomStatus(models.TextChoices):
    OPEN = "Open", "Open"
    BOOKED = "Booked", "Booked"
    OCCUPIED = "Occupied", "Occupied"
    HOUSEKEEPING = "Housekeeping", "Housekeeping"
    MAINTENANCE = "Maintenance", "Maintenance"


class RoomType(models.Model):
    short_name = models.CharField(max_length=50, unique=True)
    long_name = models.CharField(max_length=255, blank=True, default="")
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "frontdesk_room_types"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.short_name


class Room(models.Model):
    short_name = models.CharField(max_length=50)
    long_name = models.CharField(max_length=255, blank=True, default="")
    room_type = models.CharField(max_length=50)
    location = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    breakfast = models.BooleanField(default=False)
    breakfast_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    status = models.CharField(
        max_length=20,
        choices=RoomStatus.choices,
        default=RoomStatus.OPEN,
    )
    booking_id = models.IntegerField(default=0)
    active = models.BooleanField(default=True)
    created_by = models.CharField(max_length=50)
    created_date = models.DateTimeField()
    last_modified_by = models.CharField(max_length=50, blank=True, default="")
    last_modified_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "frontdesk_rooms"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["active", "status"], name="idx_room_active_status"),
        ]

    def __str__(self) -> str:
        return f"{self.short_name} ({self.status})"
