"""
Front Desk Core Time — Injected Clock
=======================================
Engines never read the wall clock themselves. Check-in stamps, audit
timestamps, dashboard alerts and credential expiry all come from a
Clock handed to the service at construction.

A service built without one falls back to the process default, which
is the system clock unless a test swaps it out.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol, Union


class Clock(Protocol):
    def now_utc(self) -> datetime:
        """Current instant, timezone-aware, in UTC."""
        ...  # pragma: no cover


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


def _require_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        raise ValueError("FixedClock requires timezone-aware datetime.")
    return moment.astimezone(timezone.utc)


class FixedClock:
    """
    Pinned clock for tests and replays.

        clock = FixedClock(datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc))
        clock.advance(15 * 60)          # credential now expired
        clock.set(booking.guest_check_out)
    """

    def __init__(self, fixed_dt: datetime) -> None:
        self._current = _require_aware(fixed_dt)

    def now_utc(self) -> datetime:
        return self._current

    def advance(self, seconds: Union[int, float]) -> None:
        self._current += timedelta(seconds=seconds)

    def set(self, fixed_dt: datetime) -> None:
        self._current = _require_aware(fixed_dt)


# ── process default ───────────────────────────────────────────

_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> None:
    global _default_clock
    _default_clock = clock


def get_default_clock() -> Clock:
    return _default_clock


def now_utc() -> datetime:
    return _default_clock.now_utc()
