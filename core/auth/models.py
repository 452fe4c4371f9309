"""
Front Desk Auth - Staff Accounts and Module Access
====================================================
StaffUser.user_id is stored uppercase. password_hash holds a Django
password hasher string, never the plain password.
"""

from __future__ import annotations

from django.db import models


class UserGroup(models.IntegerChoices):
    ADMINISTRATOR = 1, "Administrator"
    MANAGER = 2, "Manager"
    SUPERVISOR = 3, "Supervisor"
    CLERK = 4, "Clerk"


class FrontDeskModule(models.IntegerChoices):
    DASHBOARD = 1, "Dashboard"
    BOOKING = 2, "Booking"
    LIST_REPORT = 3, "List Report"
    PRINT_REPORT = 4, "Print Report"
    EXPORT_REPORT = 5, "Export Report"
    EDIT_REPORT = 6, "Edit Report"
    EDIT_REPORT_EXPERT = 7, "Edit Report (Expert)"
    FIND_CUSTOMER = 8, "Find Customer"
    MAINTAIN_ROOM = 9, "Maintain Room"
    MAINTAIN_USER = 10, "Maintain User"
    ACCESS_CONTROL = 11, "Access Control"


class StaffUser(models.Model):
    user_id = models.CharField(max_length=50, unique=True, db_index=True)
    display_name = models.CharField(max_length=255)
    group = models.PositiveSmallIntegerField(choices=UserGroup.choices)
    password_hash = models.CharField(max_length=255)
    idle_seconds = models.PositiveIntegerField(default=0)
    login_attempts = models.PositiveSmallIntegerField(default=0)
    active = models.BooleanField(default=True)
    change_password = models.BooleanField(default=True)
    dashboard_blink = models.BooleanField(default=False)
    created_by = models.CharField(max_length=50, blank=True, default="")
    created_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "frontdesk_staff_users"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.user_id} ({self.get_group_display()})"

    @property
    def is_administrator(self) -> bool:
        return self.group == UserGroup.ADMINISTRATOR


class ModuleAccess(models.Model):
    module_id = models.PositiveSmallIntegerField(unique=True)
    description = models.CharField(max_length=255)
    module_type = models.CharField(max_length=50, default="Form")
    group1 = models.BooleanField(default=False)
    group2 = models.BooleanField(default=False)
    group3 = models.BooleanField(default=False)
    group4 = models.BooleanField(default=False)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "frontdesk_module_access"
        ordering = ["module_id"]

    def __str__(self) -> str:
        return f"{self.module_id}: {self.description}"

    def allows(self, group: int) -> bool:
        """Flag for `group`; unknown groups are denied."""
        if group not in UserGroup.values:
            return False
        return bool(getattr(self, f"group{int(group)}"))
