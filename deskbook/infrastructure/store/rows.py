from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def matches(row: dict[str, Any], filters: dict[str, Any] | None) -> bool:
    return all(row.get(key) == value for key, value in (filters or {}).items())


def sort_rows(rows: list[dict[str, Any]], order_by: str | None, descending: bool) -> list[dict[str, Any]]:
    if not order_by:
        return rows
    present = [r for r in rows if r.get(order_by) is not None]
    missing = [r for r in rows if r.get(order_by) is None]
    present.sort(key=lambda r: r[order_by], reverse=descending)
    return present + missing
