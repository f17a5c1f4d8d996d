from __future__ import annotations

import logging
from typing import Any

from deskbook.application.ports.notifier import NotifierPort


class MockNotifier(NotifierPort):
    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []
        self._logger = logging.getLogger(__name__)

    def post_event(self, payload: dict[str, Any]) -> None:
        self.events.append(payload)
        self._logger.info(
            "Mock webhook event",
            extra={"action": payload.get("action"), "booking_id": payload.get("bookingId")},
        )
