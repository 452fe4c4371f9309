"""
Front Desk Core Config — Tunable Thresholds
=============================================
Lockout count, late-checkout hour, default deposit and credential
lifetimes come from admin-configurable settings, not from engine code.

Settings shape (config/settings.py):

    FRONTDESK = {
        "MAX_LOGIN_ATTEMPTS": 3,
        "LATE_CHECKOUT_HOUR": 14,
        "DEFAULT_DEPOSIT": "20.00",
        ...
    }
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

CENT = Decimal("0.01")

# Largest value a DecimalField(max_digits=10, decimal_places=2) column holds.
MAX_MONEY = Decimal("99999999.99")


def to_money(value: Any, *, field_name: str = "amount") -> Decimal:
    """
    Normalize a monetary input to a 2-place Decimal.

    Floats are routed through str() so 0.1 stays 0.10 and never
    0.1000000000000000055511151231257827. Magnitudes beyond MAX_MONEY
    are rejected so nothing reaches a money column it cannot hold.
    """
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be a decimal amount.")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"{field_name} must be a decimal amount.") from exc
    if not amount.is_finite():
        raise ValueError(f"{field_name} must be a decimal amount.")
    if abs(amount) > MAX_MONEY:
        raise ValueError(f"{field_name} must not exceed {MAX_MONEY}.")
    try:
        return amount.quantize(CENT)
    except InvalidOperation as exc:
        raise ValueError(f"{field_name} must be a decimal amount.") from exc


# ══════════════════════════════════════════════════════════════
# FRONT DESK CONFIG
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FrontDeskConfig:
    """Thresholds consulted by the room, booking and access engines."""

    max_login_attempts: int = 3
    late_checkout_hour: int = 14
    default_deposit: Decimal = Decimal("20.00")
    min_password_length: int = 4
    access_credential_ttl: timedelta = timedelta(minutes=15)
    refresh_credential_ttl: timedelta = timedelta(days=7)
    access_secret: str = "frontdesk-access-secret-change-in-production"
    refresh_secret: str = "frontdesk-refresh-secret-change-in-production"

    def __post_init__(self) -> None:
        if not isinstance(self.max_login_attempts, int) or self.max_login_attempts < 1:
            raise ValueError("max_login_attempts must be >= 1.")
        if not isinstance(self.late_checkout_hour, int) or not 0 <= self.late_checkout_hour <= 23:
            raise ValueError("late_checkout_hour must be between 0 and 23.")
        object.__setattr__(
            self,
            "default_deposit",
            to_money(self.default_deposit, field_name="default_deposit"),
        )
        if self.default_deposit < 0:
            raise ValueError("default_deposit must be >= 0.")
        if not isinstance(self.min_password_length, int) or self.min_password_length < 1:
            raise ValueError("min_password_length must be >= 1.")
        if self.access_credential_ttl <= timedelta(0):
            raise ValueError("access_credential_ttl must be positive.")
        if self.refresh_credential_ttl <= timedelta(0):
            raise ValueError("refresh_credential_ttl must be positive.")
        if not self.access_secret or not self.refresh_secret:
            raise ValueError("access_secret and refresh_secret must be non-empty.")
        if self.access_secret == self.refresh_secret:
            raise ValueError("access_secret and refresh_secret must differ.")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "FrontDeskConfig":
        defaults = cls()
        return cls(
            max_login_attempts=int(
                values.get("MAX_LOGIN_ATTEMPTS", defaults.max_login_attempts)
            ),
            late_checkout_hour=int(
                values.get("LATE_CHECKOUT_HOUR", defaults.late_checkout_hour)
            ),
            default_deposit=values.get("DEFAULT_DEPOSIT", defaults.default_deposit),
            min_password_length=int(
                values.get("MIN_PASSWORD_LENGTH", defaults.min_password_length)
            ),
            access_credential_ttl=timedelta(
                seconds=int(
                    values.get(
                        "ACCESS_CREDENTIAL_TTL_SECONDS",
                        defaults.access_credential_ttl.total_seconds(),
                    )
                )
            ),
            refresh_credential_ttl=timedelta(
                seconds=int(
                    values.get(
                        "REFRESH_CREDENTIAL_TTL_SECONDS",
                        defaults.refresh_credential_ttl.total_seconds(),
                    )
                )
            ),
            access_secret=values.get("ACCESS_SECRET", defaults.access_secret),
            refresh_secret=values.get("REFRESH_SECRET", defaults.refresh_secret),
        )

    @classmethod
    def from_settings(cls, settings_obj: Optional[Any] = None) -> "FrontDeskConfig":
        """Build from the FRONTDESK dict in Django settings."""
        if settings_obj is None:
            from django.conf import settings as settings_obj
        return cls.from_mapping(getattr(settings_obj, "FRONTDESK", {}) or {})
