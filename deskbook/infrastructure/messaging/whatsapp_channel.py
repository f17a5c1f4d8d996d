from __future__ import annotations

import logging

import httpx

from deskbook.application.ports.code_channel import CodeChannelPort
from deskbook.infrastructure.messaging.whatsapp_client import WhatsAppClient


class WhatsAppCodeChannel(CodeChannelPort):
    def __init__(self, client: WhatsAppClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    def send(self, contact: str, message: str) -> bool:
        try:
            self._client.send_text(to=contact, text=message)
        except httpx.HTTPError as e:
            self._logger.error("Error sending WhatsApp code", extra={"error": str(e)})
            return False
        return True
