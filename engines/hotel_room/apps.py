"""
Front Desk Hotel Room Engine - App Configuration
==================================================
Rooms, room types and the status state machine.
"""

from django.apps import AppConfig


class HotelRoomConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "engines.hotel_room"
    label = "hotel_room"
    verbose_name = "Hotel Rooms"
