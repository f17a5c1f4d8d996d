from __future__ import annotations

from abc import ABC, abstractmethod

from deskbook.domain.entities.workspace import WorkspaceType


class WorkspaceCatalogPort(ABC):
    @abstractmethod
    def list_active(self) -> list[WorkspaceType]:
        """Active workspace types, cheapest first."""
        raise NotImplementedError

    @abstractmethod
    def get_by_name(self, name: str) -> WorkspaceType | None:
        """Get an active workspace type by its display name."""
        raise NotImplementedError
