from __future__ import annotations

import copy
import threading
import uuid
from typing import Any

from deskbook.application.ports.record_store import RecordStorePort
from deskbook.infrastructure.store.rows import matches, sort_rows, utcnow_iso


class MemoryRecordStore(RecordStorePort):
    def __init__(self) -> None:
        self._tables: dict[str, list[dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        now = utcnow_iso()
        stored = {**row}
        stored.setdefault("id", str(uuid.uuid4()))
        if stored.get("created_at") is None:
            stored["created_at"] = now
        if stored.get("updated_at") is None:
            stored["updated_at"] = now
        with self._lock:
            self._tables.setdefault(table, []).append(stored)
        return copy.deepcopy(stored)

    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        with self._lock:
            rows = [copy.deepcopy(r) for r in self._tables.get(table, []) if matches(r, filters)]
        return sort_rows(rows, order_by, descending)

    def update_by_id(
        self,
        table: str,
        row_id: str,
        patch: dict[str, Any],
        precondition: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        with self._lock:
            for row in self._tables.get(table, []):
                if row.get("id") == row_id and matches(row, precondition):
                    row.update(patch)
                    if "updated_at" not in patch:
                        row["updated_at"] = utcnow_iso()
                    return copy.deepcopy(row)
        return None
