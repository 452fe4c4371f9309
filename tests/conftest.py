"""
Shared fixtures: a pinned clock, a config, wired services and row factories.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from django.contrib.auth.hashers import make_password

from core.auth.models import FrontDeskModule, ModuleAccess, StaffUser, UserGroup
from core.auth.service import AccessControlService
from core.config import FrontDeskConfig
from core.time import FixedClock
from engines.hotel_booking.commands import CreateBookingRequest
from engines.hotel_booking.services import BookingLifecycleService
from engines.hotel_room.commands import CreateRoomRequest
from engines.hotel_room.services import RoomLifecycleService

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

# (module, description, group1, group2, group3, group4)
SEED_MODULES = [
    (FrontDeskModule.DASHBOARD, "Dashboard", True, False, False, True),
    (FrontDeskModule.BOOKING, "Booking", True, False, False, True),
    (FrontDeskModule.LIST_REPORT, "List Report", True, False, False, True),
    (FrontDeskModule.PRINT_REPORT, "Print Report", True, False, False, False),
    (FrontDeskModule.MAINTAIN_ROOM, "Maintain Room", True, False, False, False),
    (FrontDeskModule.MAINTAIN_USER, "Maintain User", True, False, False, False),
]


@pytest.fixture(autouse=True)
def _fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.TIME_ZONE = "UTC"


@pytest.fixture
def clock():
    return FixedClock(T0)


@pytest.fixture
def config():
    return FrontDeskConfig(
        access_secret="test-access-secret",
        refresh_secret="test-refresh-secret",
    )


@pytest.fixture
def rooms(clock):
    return RoomLifecycleService(clock=clock)


@pytest.fixture
def bookings(rooms, clock, config):
    return BookingLifecycleService(rooms=rooms, clock=clock, config=config)


@pytest.fixture
def access(config, clock):
    return AccessControlService(config=config, clock=clock)


@pytest.fixture
def make_room(rooms):
    counter = {"n": 0}

    def _make(price="100.00", **overrides):
        counter["n"] += 1
        fields = {
            "short_name": f"R{100 + counter['n']}",
            "room_type": "DELUXE",
            "location": "Level 1",
            "price": Decimal(price),
        }
        fields.update(overrides)
        return rooms.create_room(CreateRoomRequest(**fields), "ADMIN")

    return _make


@pytest.fixture
def booking_request():
    def _request(room_id, **overrides):
        fields = {
            "room_id": room_id,
            "guest_name": "Ahmad Ali",
            "guest_passport": "A1234567",
            "total_guest": 2,
            "stay_duration": 3,
            "booking_date": T0,
            "guest_check_in": T0 + timedelta(hours=5),
            "guest_check_out": T0 + timedelta(days=3, hours=3),
        }
        fields.update(overrides)
        return CreateBookingRequest(**fields)

    return _request


@pytest.fixture
def seed_modules():
    for module, description, g1, g2, g3, g4 in SEED_MODULES:
        ModuleAccess.objects.create(
            module_id=module,
            description=description,
            group1=g1,
            group2=g2,
            group3=g3,
            group4=g4,
        )


@pytest.fixture
def make_user():
    def _make(user_id="CLERK", password="secret", group=UserGroup.CLERK, **overrides):
        fields = {
            "user_id": user_id,
            "display_name": user_id.title(),
            "group": group,
            "password_hash": make_password(password),
            "change_password": False,
        }
        fields.update(overrides)
        return StaffUser.objects.create(**fields)

    return _make
