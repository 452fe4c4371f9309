"""
Front Desk Audit - App Configuration
======================================
Append-only LogRoom / LogBooking storage.
"""

from django.apps import AppConfig


class CoreAuditConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.audit"
    label = "core_audit"
    verbose_name = "Front Desk Audit Trail"
