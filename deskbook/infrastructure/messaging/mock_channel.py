from __future__ import annotations

import logging

from deskbook.application.ports.code_channel import CodeChannelPort


class MockCodeChannel(CodeChannelPort):
    def __init__(self, succeed: bool = True) -> None:
        self._succeed = succeed
        self.sent: list[tuple[str, str]] = []
        self._logger = logging.getLogger(__name__)

    def send(self, contact: str, message: str) -> bool:
        if not self._succeed:
            self._logger.warning("Mock code channel refusing delivery", extra={"contact": contact})
            return False
        self.sent.append((contact, message))
        self._logger.info("Mock send confirmation code", extra={"contact": contact, "text": message})
        return True
