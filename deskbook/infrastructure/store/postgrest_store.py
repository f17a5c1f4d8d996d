from __future__ import annotations

import logging
from typing import Any

import httpx

from deskbook.application.exceptions import PersistenceError
from deskbook.application.ports.record_store import RecordStorePort
from deskbook.core.config import settings


def _filter_value(value: Any) -> str:
    if value is None:
        return "is.null"
    if isinstance(value, bool):
        return f"eq.{str(value).lower()}"
    return f"eq.{value}"


class PostgrestRecordStore(RecordStorePort):
    """Record store backed by a Supabase/PostgREST endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        url = base_url or settings.SUPABASE_URL
        self._api_key = api_key or settings.SUPABASE_API_KEY
        if not url:
            raise ValueError("SUPABASE_URL is required for the PostgREST record store")
        if not self._api_key:
            raise ValueError("SUPABASE_API_KEY is required for the PostgREST record store")

        self._base_url = f"{url.rstrip('/')}/rest/v1"
        self._client = httpx.Client(
            timeout=timeout or settings.RECORD_STORE_TIMEOUT_SECONDS,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

    def _request(self, method: str, table: str, **kwargs: Any) -> list[dict[str, Any]]:
        url = f"{self._base_url}/{table}"
        try:
            response = self._client.request(method, url, headers=self._headers(), **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Record store rejected request",
                extra={"status": e.response.status_code, "error": e.response.text},
            )
            raise PersistenceError(f"{method} {table} failed with {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Record store unreachable", extra={"error": str(e)})
            raise PersistenceError(f"{method} {table} failed: {e}") from e

        data = response.json() if response.content else []
        if isinstance(data, dict):
            return [data]
        return data

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        payload = {k: v for k, v in row.items() if not (k == "id" and v is None)}
        rows = self._request("POST", table, json=payload)
        if not rows:
            raise PersistenceError(f"Insert into {table} returned no row")
        return rows[0]

    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        params: dict[str, str] = {"select": "*"}
        for key, value in (filters or {}).items():
            params[key] = _filter_value(value)
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        return self._request("GET", table, params=params)

    def update_by_id(
        self,
        table: str,
        row_id: str,
        patch: dict[str, Any],
        precondition: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        params = {"id": _filter_value(row_id)}
        for key, value in (precondition or {}).items():
            params[key] = _filter_value(value)
        rows = self._request("PATCH", table, params=params, json=patch)
        return rows[0] if rows else None
