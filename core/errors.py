"""
Front Desk Core — Error Taxonomy
==================================
Every engine failure is one of these. Each carries a stable
machine-readable code and a message the shell renders verbatim to the
operator or guest.

None of these are retried by the engine.
"""

from __future__ import annotations

from typing import Any, Optional


class FrontDeskError(Exception):
    """Base class for engine failures."""

    code = "FRONTDESK_ERROR"

    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None):
        if not message or not isinstance(message, str):
            raise ValueError("message must be a non-empty string.")
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


class NotFoundError(FrontDeskError):
    """Referenced entity is absent."""

    code = "NOT_FOUND"


class ValidationError(FrontDeskError):
    """Malformed or out-of-range input."""

    code = "VALIDATION_FAILED"


class ConflictError(FrontDeskError):
    """A state precondition does not hold."""

    code = "CONFLICT"


class InvalidTransitionError(ConflictError):
    """Room status change outside the transition table."""

    code = "INVALID_TRANSITION"

    def __init__(self, current: str, target: str):
        self.current = str(current)
        self.target = str(target)
        super().__init__(
            f"Invalid room status transition: {self.current} → {self.target}",
            details={"current": self.current, "target": self.target},
        )


class UnauthorizedError(FrontDeskError):
    """Bad password or an unverifiable credential."""

    code = "UNAUTHORIZED"


class ForbiddenError(FrontDeskError):
    """Authenticated but not allowed (frozen, wrong group, module denied)."""

    code = "FORBIDDEN"
