from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RecordStorePort(ABC):
    @abstractmethod
    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """Insert a row. Returns the stored row including server-assigned id and timestamps."""
        raise NotImplementedError

    @abstractmethod
    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Return rows whose columns equal every value in filters."""
        raise NotImplementedError

    @abstractmethod
    def update_by_id(
        self,
        table: str,
        row_id: str,
        patch: dict[str, Any],
        precondition: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """
        Apply patch to the row with row_id if it also matches precondition.
        Returns the updated row, or None when nothing matched.
        """
        raise NotImplementedError
