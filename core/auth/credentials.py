"""
Front Desk Auth - Session Credentials
=======================================
Signed, self-contained credentials built on django.core.signing.

Two kinds:
    access   short-lived, presented on every operation
    refresh  long-lived, exchanged for a new access credential

Each kind has its own secret and salt, so one can never be verified as
the other. Expiry is an `exp` claim computed from the injected clock
rather than signing's own timestamp, so tests can advance time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from django.core import signing

from core.config import FrontDeskConfig
from core.errors import UnauthorizedError
from core.time import Clock, get_default_clock, has_expired

ACCESS = "access"
REFRESH = "refresh"

_SALTS = {
    ACCESS: "frontdesk.auth.access",
    REFRESH: "frontdesk.auth.refresh",
}


@dataclass(frozen=True)
class Identity:
    """Who a verified credential speaks for."""

    user_id:      str
    display_name: str
    group:        int


class CredentialIssuer:
    def __init__(self, *, config: FrontDeskConfig, clock: Optional[Clock] = None):
        self._config = config
        self._clock = clock or get_default_clock()

    # ── issue ─────────────────────────────────────────────────

    def issue_access(self, identity: Identity) -> str:
        return self._issue(identity, ACCESS, self._config.access_credential_ttl)

    def issue_refresh(self, identity: Identity) -> str:
        return self._issue(identity, REFRESH, self._config.refresh_credential_ttl)

    # ── verify ────────────────────────────────────────────────

    def verify_access(self, credential: str) -> Identity:
        return self._verify(credential, ACCESS)

    def verify_refresh(self, credential: str) -> Identity:
        return self._verify(credential, REFRESH)

    # ── internals ─────────────────────────────────────────────

    def _secret(self, kind: str) -> str:
        if kind == ACCESS:
            return self._config.access_secret
        return self._config.refresh_secret

    def _issue(self, identity: Identity, kind: str, ttl: timedelta) -> str:
        issued_at = self._clock.now_utc()
        claims = {
            "kind": kind,
            "sub": identity.user_id,
            "name": identity.display_name,
            "group": int(identity.group),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + ttl).timestamp()),
        }
        return signing.dumps(claims, key=self._secret(kind), salt=_SALTS[kind])

    def _verify(self, credential: str, kind: str) -> Identity:
        if not isinstance(credential, str) or not credential:
            raise UnauthorizedError("Invalid or expired credential")
        try:
            claims: Dict[str, Any] = signing.loads(
                credential, key=self._secret(kind), salt=_SALTS[kind]
            )
        except signing.BadSignature as exc:
            raise UnauthorizedError("Invalid or expired credential") from exc

        if not isinstance(claims, dict) or claims.get("kind") != kind:
            raise UnauthorizedError("Invalid or expired credential")
        try:
            expires_at = datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc)
            identity = Identity(
                user_id=str(claims["sub"]),
                display_name=str(claims["name"]),
                group=int(claims["group"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise UnauthorizedError("Invalid or expired credential") from exc

        if has_expired(expires_at, self._clock.now_utc()):
            raise UnauthorizedError("Invalid or expired credential")
        return identity
