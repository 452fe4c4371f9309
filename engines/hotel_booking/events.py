"""
Front Desk Hotel Booking Engine — Trail Actions
=================================================
Action strings written to LogBooking.
"""

from __future__ import annotations

BOOKING_CREATED = "Booking Created"
GUEST_CHECKED_IN = "Check-IN"
GUEST_CHECKED_OUT = "Check-OUT"
PAYMENT_UPDATED = "Payment Updated"
