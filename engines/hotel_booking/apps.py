"""
Front Desk Hotel Booking Engine - App Configuration
=====================================================
Bookings and the hotel company profile.
"""

from django.apps import AppConfig


class HotelBookingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "engines.hotel_booking"
    label = "hotel_booking"
    verbose_name = "Hotel Bookings"
