"""
Front Desk Core Time — Deadline Checks
========================================
Pure comparisons; the caller supplies `now` from its own clock.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def is_past(deadline: Optional[datetime], now: datetime) -> bool:
    """True when a deadline exists and `now` is strictly after it."""
    return deadline is not None and now > deadline


def has_expired(expires_at: datetime, now: datetime) -> bool:
    """Expiry instants are exclusive: a credential is dead at `expires_at`."""
    return now >= expires_at
