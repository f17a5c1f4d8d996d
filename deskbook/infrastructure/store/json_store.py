from __future__ import annotations

import json
import threading
import uuid
from pathlib import Path
from typing import Any

from deskbook.application.exceptions import PersistenceError
from deskbook.application.ports.record_store import RecordStorePort
from deskbook.infrastructure.store.rows import matches, sort_rows, utcnow_iso


class JsonRecordStore(RecordStorePort):
    """One JSON file per table under data_dir. Suitable for local development."""

    def __init__(self, data_dir: str = "./data/records") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # guards _locks

    def _get_lock(self, table: str) -> threading.Lock:
        with self._lock_lock:
            if table not in self._locks:
                self._locks[table] = threading.Lock()
            return self._locks[table]

    def _get_file_path(self, table: str) -> Path:
        return self._data_dir / f"{table}.json"

    def _load_table(self, table: str) -> list[dict[str, Any]]:
        file_path = self._get_file_path(table)
        if not file_path.exists():
            return []
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise PersistenceError(f"Could not read table {table!r}: {e}") from e
        rows = data.get("rows") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            raise PersistenceError(f"Table file for {table!r} has no rows list")
        return rows

    def _save_table(self, table: str, rows: list[dict[str, Any]]) -> None:
        """Write the table to a temp file and rename it into place."""
        file_path = self._get_file_path(table)
        temp_path = file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump({"table": table, "rows": rows, "version": 1}, f, indent=2, ensure_ascii=False)
            temp_path.replace(file_path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Could not write table {table!r}: {e}") from e

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        now = utcnow_iso()
        stored = {**row}
        stored.setdefault("id", str(uuid.uuid4()))
        if stored.get("created_at") is None:
            stored["created_at"] = now
        if stored.get("updated_at") is None:
            stored["updated_at"] = now
        with self._get_lock(table):
            rows = self._load_table(table)
            rows.append(stored)
            self._save_table(table, rows)
        return dict(stored)

    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        with self._get_lock(table):
            rows = [r for r in self._load_table(table) if matches(r, filters)]
        return sort_rows(rows, order_by, descending)

    def update_by_id(
        self,
        table: str,
        row_id: str,
        patch: dict[str, Any],
        precondition: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        with self._get_lock(table):
            rows = self._load_table(table)
            for row in rows:
                if row.get("id") == row_id and matches(row, precondition):
                    row.update(patch)
                    if "updated_at" not in patch:
                        row["updated_at"] = utcnow_iso()
                    self._save_table(table, rows)
                    return dict(row)
        return None
