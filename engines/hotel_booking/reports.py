"""
Front Desk Hotel Booking Engine — Report Data
===============================================
Rows and totals behind the daily, date-range and per-staff shift
reports. Days are calendar days in the configured TIME_ZONE. Layout,
printing and export belong to the shell.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import List, Optional

from django.utils import timezone

from core.errors import ValidationError
from engines.hotel_booking.company import get_active_company
from engines.hotel_booking.models import Booking, Company

ALL_STAFF = "ALL"

_ZERO = Decimal("0.00")


@dataclass(frozen=True)
class BookingReportRow:
    booking_number:  str
    guest_name:      str
    room_no:         str
    room_type:       str
    deposit:         Decimal
    payment:         Decimal
    total:           Decimal
    guest_check_in:  datetime
    guest_check_out: datetime
    created_by:      str
    created_date:    datetime


@dataclass(frozen=True)
class BookingReportTotals:
    deposit: Decimal = _ZERO
    payment: Decimal = _ZERO
    total:   Decimal = _ZERO
    count:   int = 0


@dataclass(frozen=True)
class BookingReport:
    title:   str
    start:   date
    end:     date
    company: Optional[Company]
    rows:    List[BookingReportRow] = field(default_factory=list)
    totals:  BookingReportTotals = field(default_factory=BookingReportTotals)


def _day_start(day: date) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.min))


def _row(booking: Booking) -> BookingReportRow:
    return BookingReportRow(
        booking_number=booking.booking_number,
        guest_name=booking.guest_name,
        room_no=booking.room_no,
        room_type=booking.room_type,
        deposit=booking.deposit,
        payment=booking.payment,
        total=booking.payment - booking.refund,
        guest_check_in=booking.guest_check_in,
        guest_check_out=booking.guest_check_out,
        created_by=booking.created_by,
        created_date=booking.created_date,
    )


def _build(title: str, start: date, end: date, created_by: Optional[str] = None) -> BookingReport:
    qs = Booking.objects.filter(
        active=True,
        created_date__gte=_day_start(start),
        created_date__lt=_day_start(end + timedelta(days=1)),
    )
    if created_by is not None:
        qs = qs.filter(created_by=created_by)
    rows = [_row(b) for b in qs.order_by("id")]
    totals = BookingReportTotals(
        deposit=sum((r.deposit for r in rows), _ZERO),
        payment=sum((r.payment for r in rows), _ZERO),
        total=sum((r.total for r in rows), _ZERO),
        count=len(rows),
    )
    return BookingReport(
        title=title,
        start=start,
        end=end,
        company=get_active_company(),
        rows=rows,
        totals=totals,
    )


def daily_report(day: date) -> BookingReport:
    return _build("Daily Booking Report", day, day)


def range_report(start: date, end: date) -> BookingReport:
    """Inclusive of both end days."""
    if end < start:
        raise ValidationError("end must not be before start.")
    return _build("Booking Report", start, end)


def shift_report(day: date, user_id: str) -> BookingReport:
    staff = (user_id or "").strip().upper()
    if not staff:
        raise ValidationError("user_id must be non-empty.")
    if staff == ALL_STAFF:
        return _build("Booking Report by All Staff", day, day)
    return _build(f"Booking Report by {staff}", day, day, created_by=staff)
