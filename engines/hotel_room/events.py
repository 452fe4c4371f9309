"""
Front Desk Hotel Room Engine — Trail Actions
==============================================
Action strings written to LogRoom. Kept here so tests and any report
reading the trail agree on the wording.
"""

from __future__ import annotations

ROOM_CREATED = "Room Created"
ROOM_UPDATED = "Room Updated"
ROOM_DEACTIVATED = "Room Deactivated"


def status_changed_action(current: str, target: str) -> str:
    return f"Status changed: {current} → {target}"
