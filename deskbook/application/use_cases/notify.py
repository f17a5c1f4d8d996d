from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from deskbook.application.ports.notifier import NotifierPort
from deskbook.domain.entities.booking import BookingRecord


def build_booking_payload(action: str, record: BookingRecord, **extra: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "action": action,
        "bookingId": record.id,
        "customerData": {
            "name": record.customer_name,
            "email": record.customer_email,
            "phone": record.customer_phone,
            "whatsapp": record.customer_whatsapp,
        },
        "bookingDetails": {
            "workspace_type": record.workspace_type,
            "date": record.date.isoformat(),
            "time_slot": record.time_slot,
            "duration": record.duration,
            "total_price": record.total_price,
            "status": record.status.value,
        },
    }
    payload.update(extra)
    payload["timestamp"] = datetime.now(timezone.utc).isoformat()
    return payload


class NotifyUseCase:
    def __init__(self, notifier: NotifierPort) -> None:
        self._notifier = notifier
        self._logger = logging.getLogger(__name__)

    def booking_event(self, action: str, record: BookingRecord, **extra: Any) -> bool:
        """Push a booking event. Returns False if the notifier failed; never raises."""
        payload = build_booking_payload(action, record, **extra)
        try:
            self._notifier.post_event(payload)
        except Exception as e:
            self._logger.error(
                "Notifier event failed",
                extra={"booking_id": record.id, "action": action, "error": str(e)},
            )
            return False
        self._logger.info("Notifier event sent", extra={"booking_id": record.id, "action": action})
        return True
