"""
Front Desk Core Notifications — Change Hook
=============================================
Engines announce "room/booking state changed" through a ChangeNotifier.
They never know who is listening.

Delivery rules:
1. Fire only after the surrounding transaction commits
2. Never raise into the engine
3. A rollback means no notification at all
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from django.db import transaction

logger = logging.getLogger("frontdesk.notifications")


class ChangeNotifier(Protocol):
    def notify(self) -> None:
        ...  # pragma: no cover


def _deliver(notifier: ChangeNotifier) -> None:
    try:
        notifier.notify()
    except Exception as exc:
        logger.error(
            f"Change notifier {type(notifier).__name__} failed: {exc}",
            exc_info=True,
        )


def notify_on_commit(notifier: Optional[ChangeNotifier]) -> None:
    """Schedule a best-effort notification for after the current commit."""
    if notifier is None:
        return
    transaction.on_commit(lambda: _deliver(notifier))
