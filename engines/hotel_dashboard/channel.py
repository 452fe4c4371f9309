"""
Front Desk Hotel Dashboard — Push Channel
===========================================
Connection-scoped subscriber registry owned by the transport shell.

Broadcast behavior:
1. Deliver the view to each subscriber in connection order
2. Catch subscriber exceptions per subscriber
3. Log failure and continue to the next subscriber
4. NEVER raise into the caller

A broadcast failure must never fail the mutation that triggered it.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from engines.hotel_dashboard.services import DashboardAggregator, DashboardView

logger = logging.getLogger("frontdesk.dashboard")

Subscriber = Callable[[DashboardView], None]


class DashboardChannel:
    def __init__(self):
        self._subscribers: Dict[str, Subscriber] = {}

    def connect(self, connection_id: str, subscriber: Subscriber) -> None:
        if not connection_id:
            raise ValueError("connection_id must be non-empty.")
        self._subscribers[connection_id] = subscriber
        logger.info(f"Dashboard client connected: {connection_id}")

    def disconnect(self, connection_id: str) -> None:
        if self._subscribers.pop(connection_id, None) is not None:
            logger.info(f"Dashboard client disconnected: {connection_id}")

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def broadcast(self, view: DashboardView) -> dict:
        """Returns {'delivered': int, 'failed': int}. Never raises."""
        result = {"delivered": 0, "failed": 0}
        for connection_id, subscriber in list(self._subscribers.items()):
            try:
                subscriber(view)
                result["delivered"] += 1
            except Exception as exc:
                result["failed"] += 1
                logger.error(
                    f"Dashboard subscriber failed: {connection_id}: {exc}",
                    exc_info=True,
                )
        logger.debug(
            f"Dashboard broadcast: {result['delivered']} delivered, "
            f"{result['failed']} failed"
        )
        return result


class DashboardPublisher:
    """ChangeNotifier that recomputes the dashboard and pushes it."""

    def __init__(self, *, aggregator: DashboardAggregator, channel: DashboardChannel):
        self._aggregator = aggregator
        self._channel = channel

    def notify(self) -> None:
        if not self._channel.subscriber_count:
            return
        try:
            self._channel.broadcast(self._aggregator.compute())
        except Exception as exc:
            logger.error(f"Dashboard broadcast failed: {exc}", exc_info=True)
