from __future__ import annotations

import logging
from typing import Any

import httpx

from deskbook.application.ports.notifier import NotifierPort


class WebhookNotifier(NotifierPort):
    def __init__(self, url: str, timeout: float = 5.0, transport: httpx.BaseTransport | None = None) -> None:
        self._url = url
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._logger = logging.getLogger(__name__)

    def post_event(self, payload: dict[str, Any]) -> None:
        resp = self._client.post(self._url, json=payload)
        if resp.status_code >= 400:
            self._logger.warning(
                "Webhook endpoint returned an error",
                extra={"status": resp.status_code, "action": payload.get("action")},
            )
        resp.raise_for_status()
