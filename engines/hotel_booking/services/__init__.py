"""
Front Desk Hotel Booking Engine — Booking Lifecycle Service
============================================================
Sole writer of booking financial fields. Every mutating operation runs
in one transaction with the booking row locked; the room status change
it drives goes through RoomLifecycleService.transition inside that same
transaction, so either everything lands or nothing does.

Lifecycle:
    create_booking   Open → Booked       "Booking Created"
    check_in         Booked → Occupied   "Check-IN"     (must be paid)
    check_out        Occupied → Housekeeping "Check-OUT" (must be paid)
    process_payment  no state gate       "Payment Updated"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from core.audit.functions import append_booking_log
from core.config import MAX_MONEY, FrontDeskConfig, to_money
from core.errors import ConflictError, NotFoundError, ValidationError
from core.time import Clock, get_default_clock
from engines.hotel_booking.commands import CreateBookingRequest, PaymentRequest
from engines.hotel_booking.company import get_active_company
from engines.hotel_booking.events import (
    BOOKING_CREATED,
    GUEST_CHECKED_IN,
    GUEST_CHECKED_OUT,
    PAYMENT_UPDATED,
)
from engines.hotel_booking.models import Booking, Company
from engines.hotel_booking.policies import (
    booking_must_be_active_policy,
    booking_must_be_paid_policy,
    is_late_checkout,
    is_paid,
    room_must_be_bookable_policy,
    room_must_be_in_status_policy,
)
from engines.hotel_room.models import Room, RoomStatus
from engines.hotel_room.services import RoomLifecycleService

logger = logging.getLogger("frontdesk.bookings")


# ══════════════════════════════════════════════════════════════
# RESULTS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BookingCreated:
    booking:   Booking
    total_due: Decimal


@dataclass(frozen=True)
class CheckOutResult:
    booking:       Booking
    refund:        Decimal
    late_checkout: bool


@dataclass(frozen=True)
class Receipt:
    booking_number:  str
    guest_name:      str
    guest_check_in:  datetime
    guest_check_out: datetime
    room_type:       str
    room_no:         str
    sub_total:       Decimal
    deposit:         Decimal
    payment:         Decimal
    refund:          Decimal
    total:           Decimal
    created_date:    datetime
    company:         Optional[Company]


# ══════════════════════════════════════════════════════════════
# SERVICE
# ══════════════════════════════════════════════════════════════

class BookingLifecycleService:
    def __init__(
        self,
        *,
        rooms: RoomLifecycleService,
        clock: Optional[Clock] = None,
        config: Optional[FrontDeskConfig] = None,
    ):
        self._rooms = rooms
        self._clock = clock or get_default_clock()
        self._config = config or FrontDeskConfig.from_settings()

    # ── pure rules ────────────────────────────────────────────

    @staticmethod
    def is_paid(booking: Booking) -> bool:
        return is_paid(booking)

    # ── reads ─────────────────────────────────────────────────

    def get_booking(self, booking_id: int) -> Booking:
        try:
            return Booking.objects.get(pk=booking_id)
        except Booking.DoesNotExist as exc:
            raise NotFoundError(f"Booking {booking_id} not found") from exc

    def list_bookings(
        self,
        active: Optional[bool] = None,
        room_id: Optional[int] = None,
        limit: int = 100,
    ) -> List[Booking]:
        qs = Booking.objects.all()
        if active is not None:
            qs = qs.filter(active=active)
        if room_id:
            qs = qs.filter(room_id=room_id)
        return list(qs.order_by("-id")[:limit])

    def search_by_guest(self, query: str, limit: int = 50) -> List[Booking]:
        term = (query or "").strip()
        if not term:
            raise ValidationError("Search query must be non-empty.")
        qs = Booking.objects.filter(
            Q(guest_name__icontains=term) | Q(guest_passport__icontains=term)
        )
        return list(qs.order_by("-id")[:limit])

    def receipt(self, booking_id: int) -> Receipt:
        booking = self.get_booking(booking_id)
        return Receipt(
            booking_number=booking.booking_number,
            guest_name=booking.guest_name,
            guest_check_in=booking.guest_check_in,
            guest_check_out=booking.guest_check_out,
            room_type=booking.room_type,
            room_no=booking.room_no,
            sub_total=booking.sub_total,
            deposit=booking.deposit,
            payment=booking.payment,
            refund=booking.refund,
            total=booking.payment - booking.refund,
            created_date=booking.created_date,
            company=get_active_company(),
        )

    # ══════════════════════════════════════════════════════════
    # LIFECYCLE
    # ══════════════════════════════════════════════════════════

    def create_booking(self, request: CreateBookingRequest, actor_id: str) -> BookingCreated:
        with transaction.atomic():
            try:
                room = Room.objects.select_for_update().get(pk=request.room_id)
            except Room.DoesNotExist as exc:
                raise NotFoundError(f"Room {request.room_id} not found") from exc

            rejection = room_must_be_bookable_policy(room)
            if rejection:
                raise ConflictError(rejection)

            sub_total = (Decimal(request.stay_duration) * room.price).quantize(Decimal("0.01"))
            if sub_total > MAX_MONEY:
                raise ValidationError(f"sub_total must not exceed {MAX_MONEY}.")
            deposit = (
                request.deposit if request.deposit is not None
                else self._config.default_deposit
            )
            now = self._clock.now_utc()

            booking = Booking.objects.create(
                guest_name=request.guest_name,
                guest_passport=request.guest_passport,
                guest_origin=request.guest_origin,
                guest_contact=request.guest_contact,
                guest_emergency_contact_name=request.guest_emergency_contact_name,
                guest_emergency_contact_no=request.guest_emergency_contact_no,
                total_guest=request.total_guest,
                stay_duration=request.stay_duration,
                booking_date=request.booking_date,
                guest_check_in=request.guest_check_in,
                guest_check_out=request.guest_check_out,
                remarks=request.remarks,
                room=room,
                room_no=room.short_name,
                room_type=room.room_type,
                room_location=room.location,
                room_price=room.price,
                breakfast=room.breakfast,
                breakfast_price=room.breakfast_price,
                sub_total=sub_total,
                deposit=deposit,
                payment=request.payment,
                refund=Decimal("0.00"),
                active=True,
                created_by=actor_id,
                created_date=now,
            )

            self._rooms.transition(room.pk, RoomStatus.BOOKED, actor_id, booking_id=booking.pk)
            self._log(booking, BOOKING_CREATED, actor_id, now)

        total_due = sub_total + deposit
        logger.info(
            f"Booking {booking.booking_number} created for room {room.short_name} "
            f"by {actor_id}: sub_total={sub_total} deposit={deposit}"
        )
        return BookingCreated(booking=booking, total_due=total_due)

    def check_in(self, booking_id: int, actor_id: str) -> Booking:
        with transaction.atomic():
            booking = self._lock_booking(booking_id)
            self._require_active_and_paid(booking)

            room = Room.objects.select_for_update().get(pk=booking.room_id)
            rejection = room_must_be_in_status_policy(room, RoomStatus.BOOKED, "check-in")
            if rejection:
                raise ConflictError(rejection)

            now = self._clock.now_utc()
            booking.guest_check_in = now
            booking.last_modified_by = actor_id
            booking.last_modified_date = now
            booking.save(update_fields=["guest_check_in", "last_modified_by", "last_modified_date"])

            self._rooms.transition(room.pk, RoomStatus.OCCUPIED, actor_id)
            self._log(booking, GUEST_CHECKED_IN, actor_id, now)

        logger.info(f"Booking {booking.booking_number} checked in to room {room.short_name} by {actor_id}")
        return booking

    def check_out(
        self,
        booking_id: int,
        check_out_time: datetime,
        actor_id: str,
        refund_override: Optional[Decimal] = None,
    ) -> CheckOutResult:
        if not isinstance(check_out_time, datetime):
            raise ValidationError("check_out_time must be a datetime.")
        if timezone.is_naive(check_out_time):
            check_out_time = timezone.make_aware(check_out_time)
        override = None
        if refund_override is not None:
            try:
                override = to_money(refund_override, field_name="refund")
            except ValueError as exc:
                raise ValidationError(str(exc)) from exc
            if override < 0:
                raise ValidationError("refund must be >= 0.")

        with transaction.atomic():
            booking = self._lock_booking(booking_id)
            self._require_active_and_paid(booking)

            room = Room.objects.select_for_update().get(pk=booking.room_id)
            rejection = room_must_be_in_status_policy(room, RoomStatus.OCCUPIED, "check-out")
            if rejection:
                raise ConflictError(rejection)

            late = is_late_checkout(check_out_time, self._config.late_checkout_hour)
            if late:
                refund = Decimal("0.00")
            elif override is not None:
                refund = override
            else:
                refund = booking.deposit

            now = self._clock.now_utc()
            booking.guest_check_out = check_out_time
            booking.refund = refund
            booking.last_modified_by = actor_id
            booking.last_modified_date = now
            booking.save(update_fields=[
                "guest_check_out", "refund", "last_modified_by", "last_modified_date",
            ])

            self._rooms.transition(room.pk, RoomStatus.HOUSEKEEPING, actor_id)
            self._log(booking, GUEST_CHECKED_OUT, actor_id, now)

        logger.info(
            f"Booking {booking.booking_number} checked out of room {room.short_name} "
            f"by {actor_id}: refund={refund} late={late}"
        )
        return CheckOutResult(booking=booking, refund=refund, late_checkout=late)

    def process_payment(
        self,
        booking_id: int,
        payment: Decimal,
        deposit: Optional[Decimal] = None,
        refund: Optional[Decimal] = None,
        *,
        actor_id: str,
    ) -> Booking:
        request = PaymentRequest(payment=payment, deposit=deposit, refund=refund)
        with transaction.atomic():
            booking = self._lock_booking(booking_id)
            now = self._clock.now_utc()
            booking.payment = request.payment
            update_fields = ["payment", "last_modified_by", "last_modified_date"]
            if request.deposit is not None:
                booking.deposit = request.deposit
                update_fields.append("deposit")
            if request.refund is not None:
                booking.refund = request.refund
                update_fields.append("refund")
            booking.last_modified_by = actor_id
            booking.last_modified_date = now
            booking.save(update_fields=update_fields)
            self._log(booking, PAYMENT_UPDATED, actor_id, now)

        logger.info(
            f"Booking {booking.booking_number} payment updated by {actor_id}: "
            f"payment={booking.payment} deposit={booking.deposit} refund={booking.refund}"
        )
        return booking

    # ── internals ─────────────────────────────────────────────

    @staticmethod
    def _lock_booking(booking_id: int) -> Booking:
        try:
            return Booking.objects.select_for_update().get(pk=booking_id)
        except Booking.DoesNotExist as exc:
            raise NotFoundError(f"Booking {booking_id} not found") from exc

    @staticmethod
    def _require_active_and_paid(booking: Booking) -> None:
        for policy in (booking_must_be_active_policy, booking_must_be_paid_policy):
            rejection = policy(booking)
            if rejection:
                raise ValidationError(rejection)

    @staticmethod
    def _log(booking: Booking, action: str, actor_id: str, occurred_at: datetime) -> None:
        append_booking_log(
            booking_id=booking.pk,
            guest_name=booking.guest_name,
            guest_passport=booking.guest_passport,
            action=action,
            actor_id=actor_id,
            occurred_at=occurred_at,
        )
