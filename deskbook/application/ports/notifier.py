from abc import ABC, abstractmethod
from typing import Any


class NotifierPort(ABC):
    @abstractmethod
    def post_event(self, payload: dict[str, Any]) -> None:
        raise NotImplementedError
