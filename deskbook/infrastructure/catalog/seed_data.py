from __future__ import annotations

import logging
from typing import Any

from deskbook.application.dto.content_item_row import CONTENT_ITEMS_TABLE, SETTING_ITEM_TYPE
from deskbook.application.dto.workspace_row import WORKSPACE_TYPES_TABLE
from deskbook.application.ports.record_store import RecordStorePort


DEFAULT_WORKSPACE_TYPES: list[dict[str, Any]] = [
    {
        "name": "Hot Desk",
        "description": "Any open seat in the shared area.",
        "price": 50,
        "price_unit": "hour",
        "features": ["High-speed Wi-Fi", "Coffee & tea", "Shared lockers"],
        "is_active": True,
    },
    {
        "name": "Meeting Room",
        "description": "Bookable room for up to 8 people with a screen.",
        "price": 200,
        "price_unit": "hour",
        "features": ["4K display", "Whiteboard", "Video conferencing"],
        "is_active": True,
    },
    {
        "name": "Dedicated Desk",
        "description": "Your own desk in a quiet zone.",
        "price": 300,
        "price_unit": "day",
        "features": ["Personal storage", "Ergonomic chair", "24/7 access"],
        "is_active": True,
    },
    {
        "name": "Private Office",
        "description": "Lockable office for small teams.",
        "price": 1500,
        "price_unit": "day",
        "features": ["Lockable door", "Meeting room credits", "Mail handling"],
        "is_active": True,
    },
]


def seed_workspace_types(store: RecordStorePort) -> int:
    """Insert the default workspace types when the table is empty. Returns rows inserted."""
    if store.select(WORKSPACE_TYPES_TABLE):
        return 0
    for row in DEFAULT_WORKSPACE_TYPES:
        store.insert(WORKSPACE_TYPES_TABLE, dict(row, features=list(row["features"])))
    logging.getLogger(__name__).info("Seeded workspace types", extra={"count": len(DEFAULT_WORKSPACE_TYPES)})
    return len(DEFAULT_WORKSPACE_TYPES)


DEFAULT_SITE_SETTINGS: dict[str, str] = {
    "payment_phone": "+20 123 456 7890",
    "contact_phone": "+20 123 456 7890",
    "contact_email": "support@desk4u.com",
}


def seed_site_settings(store: RecordStorePort) -> int:
    """Insert default settings content items when none exist. Returns rows inserted."""
    if store.select(CONTENT_ITEMS_TABLE, {"type": SETTING_ITEM_TYPE}):
        return 0
    for key, value in DEFAULT_SITE_SETTINGS.items():
        store.insert(
            CONTENT_ITEMS_TABLE,
            {
                "title": key,
                "type": SETTING_ITEM_TYPE,
                "content": value,
                "metadata": None,
                "is_published": True,
            },
        )
    return len(DEFAULT_SITE_SETTINGS)
