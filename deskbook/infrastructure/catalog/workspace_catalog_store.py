from __future__ import annotations

from deskbook.application.dto.workspace_row import WORKSPACE_TYPES_TABLE, workspace_from_row
from deskbook.application.ports.record_store import RecordStorePort
from deskbook.application.ports.workspace_catalog import WorkspaceCatalogPort
from deskbook.domain.entities.workspace import WorkspaceType


class WorkspaceCatalogStore(WorkspaceCatalogPort):
    def __init__(self, store: RecordStorePort) -> None:
        self._store = store

    def list_active(self) -> list[WorkspaceType]:
        rows = self._store.select(WORKSPACE_TYPES_TABLE, {"is_active": True}, order_by="price")
        return [workspace_from_row(row) for row in rows]

    def get_by_name(self, name: str) -> WorkspaceType | None:
        rows = self._store.select(WORKSPACE_TYPES_TABLE, {"name": name, "is_active": True})
        if not rows:
            return None
        return workspace_from_row(rows[0])
