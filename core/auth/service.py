"""
Front Desk Auth - Access Control Service
==========================================
Login with lockout, password change, module access checks, credential
verification and the staff administration operations.

Lockout rules:
1. Frozen (inactive) accounts are refused before anything else
2. An account already at the attempt limit is frozen before the
   password is even compared
3. A wrong password counts against non-administrators only; reaching
   the limit freezes the account
4. Attempt and freeze writes are committed even though login fails
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import List, Optional

from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

from core.auth.credentials import CredentialIssuer, Identity
from core.auth.models import FrontDeskModule, ModuleAccess, StaffUser, UserGroup
from core.config import FrontDeskConfig
from core.errors import (
    ConflictError,
    ForbiddenError,
    FrontDeskError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from core.time import Clock, get_default_clock

logger = logging.getLogger("frontdesk.auth")

FROZEN_MESSAGE = "Your User ID has been frozen. Please contact System Administrator."
TOO_MANY_ATTEMPTS_MESSAGE = "Too many attempts. Your User ID has been frozen."
INVALID_PASSWORD_MESSAGE = "Invalid password, please try again"


@dataclass(frozen=True)
class UserProfile:
    user_id:         str
    display_name:    str
    group:           int
    idle_seconds:    int
    change_password: bool
    dashboard_blink: bool


@dataclass(frozen=True)
class LoginResult:
    access_credential:  str
    refresh_credential: str
    user:               UserProfile


def _normalize_user_id(user_id) -> str:
    return str(user_id or "").strip().upper()


class AccessControlService:
    def __init__(
        self,
        *,
        config: Optional[FrontDeskConfig] = None,
        clock: Optional[Clock] = None,
        issuer: Optional[CredentialIssuer] = None,
    ):
        self._config = config or FrontDeskConfig.from_settings()
        self._clock = clock or get_default_clock()
        self._issuer = issuer or CredentialIssuer(config=self._config, clock=self._clock)

    # ══════════════════════════════════════════════════════════
    # LOGIN
    # ══════════════════════════════════════════════════════════

    def login(self, user_id: str, password: str) -> LoginResult:
        uid = _normalize_user_id(user_id)
        max_attempts = self._config.max_login_attempts
        failure: Optional[FrontDeskError] = None

        with transaction.atomic():
            user = StaffUser.objects.select_for_update().filter(user_id=uid).first()
            if user is None:
                raise NotFoundError("User ID not found")
            if not user.active:
                raise ForbiddenError(FROZEN_MESSAGE)

            if user.login_attempts >= max_attempts:
                user.active = False
                user.save(update_fields=["active"])
                failure = ForbiddenError(FROZEN_MESSAGE)
            elif not check_password(password, user.password_hash):
                if not user.is_administrator:
                    user.login_attempts += 1
                    update_fields = ["login_attempts"]
                    if user.login_attempts >= max_attempts:
                        user.active = False
                        update_fields.append("active")
                        failure = ForbiddenError(TOO_MANY_ATTEMPTS_MESSAGE)
                    user.save(update_fields=update_fields)
                if failure is None:
                    failure = UnauthorizedError(INVALID_PASSWORD_MESSAGE)
            else:
                user.login_attempts = 0
                user.save(update_fields=["login_attempts"])

        # Raised outside the atomic block so the bookkeeping above commits.
        if failure is not None:
            logger.warning(
                f"Login denied for {uid}: {failure.message} "
                f"(attempts={user.login_attempts})"
            )
            raise failure

        if not self.check_module_access(user.group, FrontDeskModule.DASHBOARD):
            logger.warning(f"Login denied for {uid}: dashboard access disabled")
            raise ForbiddenError("Your access has been disabled")

        identity = Identity(
            user_id=user.user_id,
            display_name=user.display_name,
            group=user.group,
        )
        logger.info(f"User {uid} logged in")
        return LoginResult(
            access_credential=self._issuer.issue_access(identity),
            refresh_credential=self._issuer.issue_refresh(identity),
            user=UserProfile(
                user_id=user.user_id,
                display_name=user.display_name,
                group=user.group,
                idle_seconds=user.idle_seconds,
                change_password=user.change_password,
                dashboard_blink=user.dashboard_blink,
            ),
        )

    def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        uid = _normalize_user_id(user_id)
        with transaction.atomic():
            user = StaffUser.objects.select_for_update().filter(user_id=uid).first()
            if user is None:
                raise UnauthorizedError("User not found")
            if not check_password(current_password, user.password_hash):
                raise UnauthorizedError("Current password is incorrect")
            self._require_password_length(new_password)
            user.password_hash = make_password(new_password)
            user.change_password = False
            user.save(update_fields=["password_hash", "change_password"])
        logger.info(f"User {uid} changed password")

    # ══════════════════════════════════════════════════════════
    # AUTHORIZATION
    # ══════════════════════════════════════════════════════════

    def check_module_access(self, group: int, module_id: int) -> bool:
        module = ModuleAccess.objects.filter(module_id=module_id, active=True).first()
        if module is None:
            return False
        return module.allows(group)

    def verify(self, credential: str) -> Identity:
        return self._issuer.verify_access(credential)

    def refresh(self, refresh_credential: str) -> str:
        identity = self._issuer.verify_refresh(refresh_credential)
        return self._issuer.issue_access(identity)

    @staticmethod
    def require_group(identity: Identity, allowed_groups: Iterable[int]) -> None:
        if identity.group not in {int(g) for g in allowed_groups}:
            raise ForbiddenError("Insufficient permissions")

    # ══════════════════════════════════════════════════════════
    # ADMINISTRATION
    # ══════════════════════════════════════════════════════════

    def create_user(
        self,
        user_id: str,
        display_name: str,
        group: int,
        password: str,
        idle_seconds: int = 0,
        *,
        actor_id: str,
    ) -> StaffUser:
        uid = _normalize_user_id(user_id)
        name = (display_name or "").strip()
        if not uid or not name or not group or not password:
            raise ValidationError("All fields are required")
        if group not in UserGroup.values:
            raise ValidationError(f"Unknown user group: {group}")
        if isinstance(idle_seconds, bool) or not isinstance(idle_seconds, int) or idle_seconds < 0:
            raise ValidationError("idle_seconds must be a non-negative integer.")
        self._require_password_length(password)

        if StaffUser.objects.filter(user_id=uid).exists():
            raise ConflictError("User ID already exists")
        try:
            with transaction.atomic():
                user = StaffUser.objects.create(
                    user_id=uid,
                    display_name=name,
                    group=group,
                    password_hash=make_password(password),
                    idle_seconds=idle_seconds,
                    login_attempts=0,
                    active=True,
                    change_password=True,
                    created_by=actor_id,
                    created_date=self._clock.now_utc(),
                )
        except IntegrityError as exc:
            raise ConflictError("User ID already exists") from exc
        logger.info(f"User {uid} created in group {group} by {actor_id}")
        return user

    def reset_user(self, user_id: str) -> StaffUser:
        uid = _normalize_user_id(user_id)
        with transaction.atomic():
            user = StaffUser.objects.select_for_update().filter(user_id=uid).first()
            if user is None:
                raise NotFoundError("User ID not found")
            user.login_attempts = 0
            user.active = True
            user.save(update_fields=["login_attempts", "active"])
        logger.info(f"User {uid} account has been reset")
        return user

    def list_users(self) -> List[StaffUser]:
        return list(StaffUser.objects.order_by("id"))

    def list_modules(self) -> List[ModuleAccess]:
        return list(ModuleAccess.objects.order_by("module_id"))

    def update_module_access(
        self,
        module_id: int,
        *,
        group1: bool,
        group2: bool,
        group3: bool,
        group4: bool,
    ) -> ModuleAccess:
        with transaction.atomic():
            module = ModuleAccess.objects.select_for_update().filter(module_id=module_id).first()
            if module is None:
                raise NotFoundError("Module not found")
            module.group1 = bool(group1)
            module.group2 = bool(group2)
            module.group3 = bool(group3)
            module.group4 = bool(group4)
            module.save(update_fields=["group1", "group2", "group3", "group4"])
        logger.info(
            f"Module {module_id} access set to "
            f"{[module.group1, module.group2, module.group3, module.group4]}"
        )
        return module

    # ── internals ─────────────────────────────────────────────

    def _require_password_length(self, password: str) -> None:
        minimum = self._config.min_password_length
        if not isinstance(password, str) or len(password) < minimum:
            raise ValidationError(f"Password must be at least {minimum} characters")
