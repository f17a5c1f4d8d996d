from abc import ABC, abstractmethod


class CodeChannelPort(ABC):
    @abstractmethod
    def send(self, contact: str, message: str) -> bool:
        """Deliver message to an out-of-band contact address. Returns True on success."""
        raise NotImplementedError
