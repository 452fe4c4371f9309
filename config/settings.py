"""
Front Desk – Django Settings (Infrastructure Only)
====================================================
Django serves as the framework container for the front-desk engines:
ORM, transactions, password hashing, signing and settings.
HTTP routing and page rendering live in the shell, not here.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
# BASE_DIR = project root where manage.py lives
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "FRONTDESK_SECRET_KEY", "frontdesk-dev-key-replace-before-deployment"
)

DEBUG = os.environ.get("FRONTDESK_DEBUG", "true").lower() == "true"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    # ── Front Desk Modules (leaves first) ─────────────────
    "core.audit",
    "core.auth",
    "engines.hotel_room",
    "engines.hotel_booking",
]

MIDDLEWARE = []

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured separately.
# SQLite ignores select_for_update, so atomic blocks open with
# BEGIN IMMEDIATE and writers queue on the database lock instead.
# The test database is a file so threads share it through that lock.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("FRONTDESK_DB_PATH", BASE_DIR / "db.sqlite3"),
        "OPTIONS": {
            "transaction_mode": "IMMEDIATE",
            "timeout": 20,
        },
        "TEST": {
            "NAME": BASE_DIR / "test_frontdesk.sqlite3",
        },
    }
}

# ── Passwords ─────────────────────────────────────────────────
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2SHA1PasswordHasher",
]

# ── Internationalization ──────────────────────────────────────
# Late checkout is judged on the hour in this zone.
LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("FRONTDESK_TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Front Desk Rules ──────────────────────────────────────────
# Read by core.config.FrontDeskConfig.from_settings().
FRONTDESK = {
    "MAX_LOGIN_ATTEMPTS": int(os.environ.get("FRONTDESK_MAX_LOGIN_ATTEMPTS", "3")),
    "LATE_CHECKOUT_HOUR": int(os.environ.get("FRONTDESK_LATE_CHECKOUT_HOUR", "14")),
    "DEFAULT_DEPOSIT": os.environ.get("FRONTDESK_DEFAULT_DEPOSIT", "20.00"),
    "MIN_PASSWORD_LENGTH": int(os.environ.get("FRONTDESK_MIN_PASSWORD_LENGTH", "4")),
    "ACCESS_CREDENTIAL_TTL_SECONDS": int(
        os.environ.get("FRONTDESK_ACCESS_CREDENTIAL_TTL_SECONDS", str(15 * 60))
    ),
    "REFRESH_CREDENTIAL_TTL_SECONDS": int(
        os.environ.get("FRONTDESK_REFRESH_CREDENTIAL_TTL_SECONDS", str(7 * 24 * 3600))
    ),
    "ACCESS_SECRET": os.environ.get(
        "FRONTDESK_ACCESS_SECRET", "frontdesk-access-secret-change-in-production"
    ),
    "REFRESH_SECRET": os.environ.get(
        "FRONTDESK_REFRESH_SECRET", "frontdesk-refresh-secret-change-in-production"
    ),
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "frontdesk": {
            "handlers": ["console"],
            "level": os.environ.get("FRONTDESK_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
