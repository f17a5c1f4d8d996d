from abc import ABC, abstractmethod

from deskbook.domain.entities.confirmation import PendingConfirmationState


class ConfirmationSessionStorePort(ABC):
    @abstractmethod
    def new_session_id(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> PendingConfirmationState | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, state: PendingConfirmationState) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self, session_id: str) -> None:
        raise NotImplementedError
