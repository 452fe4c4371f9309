"""
Front Desk Hotel Booking Engine - Persistent Booking State
============================================================
Bookings are never deleted. Room details are snapshotted at creation so
later room edits do not rewrite what the guest was charged.

sub_total = stay_duration × room_price, fixed at creation.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

_ZERO = Decimal("0.00")


def _money_field(**kwargs):
    return models.DecimalField(max_digits=10, decimal_places=2, **kwargs)


class Booking(models.Model):
    # ── guest ─────────────────────────────────────────────────
    guest_name = models.CharField(max_length=255)
    guest_passport = models.CharField(max_length=100)
    guest_origin = models.CharField(max_length=100, blank=True, default="")
    guest_contact = models.CharField(max_length=100, blank=True, default="")
    guest_emergency_contact_name = models.CharField(max_length=255, blank=True, default="")
    guest_emergency_contact_no = models.CharField(max_length=100, blank=True, default="")
    total_guest = models.PositiveSmallIntegerField()
    stay_duration = models.PositiveSmallIntegerField()

    # ── dates ─────────────────────────────────────────────────
    booking_date = models.DateTimeField()
    guest_check_in = models.DateTimeField()
    guest_check_out = models.DateTimeField()
    remarks = models.TextField(blank=True, default="")

    # ── room snapshot ─────────────────────────────────────────
    room = models.ForeignKey(
        "hotel_room.Room",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    room_no = models.CharField(max_length=50)
    room_type = models.CharField(max_length=50)
    room_location = models.CharField(max_length=100)
    room_price = _money_field()
    breakfast = models.BooleanField(default=False)
    breakfast_price = _money_field(default=_ZERO)

    # ── money ─────────────────────────────────────────────────
    sub_total = _money_field()
    deposit = _money_field(default=_ZERO)
    payment = _money_field(default=_ZERO)
    refund = _money_field(default=_ZERO)

    active = models.BooleanField(default=True)
    created_by = models.CharField(max_length=50)
    created_date = models.DateTimeField()
    last_modified_by = models.CharField(max_length=50, blank=True, default="")
    last_modified_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "frontdesk_bookings"
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["active", "created_date"], name="idx_booking_active_created"),
            models.Index(fields=["guest_passport"], name="idx_booking_guest_passport"),
        ]

    def __str__(self) -> str:
        return f"{self.booking_number} {self.guest_name} ({self.room_no})"

    @property
    def booking_number(self) -> str:
        return f"{self.pk or 0:06d}"


class Company(models.Model):
    name = models.CharField(max_length=255)
    street_address = models.CharField(max_length=255, blank=True, default="")
    contact_no = models.CharField(max_length=100, blank=True, default="")
    currency_symbol = models.CharField(max_length=10, default="RM")
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "frontdesk_company"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name
