from __future__ import annotations

from deskbook.application.dto.content_item_row import (
    CONTENT_ITEMS_TABLE,
    SETTING_ITEM_TYPE,
    content_item_from_row,
)
from deskbook.application.ports.record_store import RecordStorePort
from deskbook.application.ports.site_settings import SiteSettingsPort


class SiteSettingsStore(SiteSettingsPort):
    def __init__(self, store: RecordStorePort) -> None:
        self._store = store

    def get_all(self) -> dict[str, str]:
        rows = self._store.select(
            CONTENT_ITEMS_TABLE,
            {"type": SETTING_ITEM_TYPE, "is_published": True},
            order_by="title",
        )
        items = [content_item_from_row(row) for row in rows]
        return {item.title: item.content for item in items}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.get_all().get(key, default)
