"""
Front Desk Auth - App Configuration
=====================================
Staff accounts, module access flags and the login lockout policy.
"""

from django.apps import AppConfig


class CoreAuthConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.auth"
    label = "core_auth"
    verbose_name = "Front Desk Auth"
