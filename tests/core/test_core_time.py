"""
Tests for core.time — Clock protocol and temporal helpers.
"""

import pytest
from datetime import datetime, timezone, timedelta

from core.time.clock import (
    FixedClock,
    SystemClock,
    set_default_clock,
    get_default_clock,
    now_utc,
)
from core.time.temporal import has_expired, is_past


# ── Clock Tests ──────────────────────────────────────────────

class TestSystemClock:
    def test_returns_utc_datetime(self):
        dt = SystemClock().now_utc()
        assert dt.tzinfo == timezone.utc

    def test_time_advances(self):
        clock = SystemClock()
        t1 = clock.now_utc()
        t2 = clock.now_utc()
        assert t2 >= t1


class TestFixedClock:
    def test_returns_fixed_time(self):
        fixed = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        assert clock.now_utc() == fixed
        assert clock.now_utc() == fixed

    def test_rejects_naive_datetime(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            FixedClock(datetime(2026, 1, 1))

    def test_advance(self):
        fixed = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
        clock = FixedClock(fixed)
        clock.advance(15 * 60)
        assert clock.now_utc() == fixed + timedelta(minutes=15)

    def test_set_replaces_time(self):
        clock = FixedClock(datetime(2026, 3, 1, tzinfo=timezone.utc))
        later = datetime(2026, 3, 5, 14, 0, tzinfo=timezone.utc)
        clock.set(later)
        assert clock.now_utc() == later

    def test_set_rejects_naive_datetime(self):
        clock = FixedClock(datetime(2026, 3, 1, tzinfo=timezone.utc))
        with pytest.raises(ValueError, match="timezone-aware"):
            clock.set(datetime(2026, 3, 5))


class TestDefaultClock:
    def test_set_and_get_default(self):
        original = get_default_clock()
        fixed = FixedClock(datetime(2026, 1, 1, tzinfo=timezone.utc))
        set_default_clock(fixed)
        try:
            assert get_default_clock() is fixed
            assert now_utc() == datetime(2026, 1, 1, tzinfo=timezone.utc)
        finally:
            set_default_clock(original)


# ── Pure Temporal Functions ──────────────────────────────────

class TestIsPast:
    def test_strictly_after_deadline(self):
        deadline = datetime(2026, 3, 1, 14, 0, tzinfo=timezone.utc)
        assert is_past(deadline, deadline + timedelta(seconds=1))

    def test_at_deadline_is_not_past(self):
        deadline = datetime(2026, 3, 1, 14, 0, tzinfo=timezone.utc)
        assert not is_past(deadline, deadline)

    def test_missing_deadline_is_never_past(self):
        assert not is_past(None, datetime(2026, 3, 1, tzinfo=timezone.utc))


class TestHasExpired:
    def test_before_expiry(self):
        expires_at = datetime(2026, 1, 1, 12, 15, tzinfo=timezone.utc)
        assert not has_expired(expires_at, expires_at - timedelta(seconds=1))

    def test_expiry_instant_is_exclusive(self):
        expires_at = datetime(2026, 1, 1, 12, 15, tzinfo=timezone.utc)
        assert has_expired(expires_at, expires_at)
