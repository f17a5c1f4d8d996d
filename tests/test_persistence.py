"""
Tests for the record store adapters that keep rows locally.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from deskbook.application.dto.booking_row import BOOKINGS_TABLE, record_from_row
from deskbook.application.exceptions import PersistenceError
from deskbook.domain.entities.booking import BookingStatus
from deskbook.domain.entities.confirmation import PendingConfirmationState
from deskbook.infrastructure.catalog.seed_data import (
    DEFAULT_SITE_SETTINGS,
    DEFAULT_WORKSPACE_TYPES,
    seed_site_settings,
    seed_workspace_types,
)
from deskbook.infrastructure.catalog.site_settings_store import SiteSettingsStore
from deskbook.infrastructure.catalog.workspace_catalog_store import WorkspaceCatalogStore
from deskbook.infrastructure.session.memory_session_store import MemorySessionStore
from deskbook.infrastructure.store.json_store import JsonRecordStore
from deskbook.infrastructure.store.memory_store import MemoryRecordStore


def _booking_row(**overrides):
    row = {
        "workspace_type": "Hot Desk",
        "date": "2026-11-02",
        "time_slot": "9:00 AM",
        "duration": "1-hour",
        "customer_name": "Nour Hassan",
        "customer_email": "nour@example.com",
        "customer_phone": "+15551234567",
        "customer_whatsapp": "+15551234567",
        "total_price": 50,
        "status": "pending",
        "confirmation_code": None,
        "user_id": None,
    }
    row.update(overrides)
    return row


def test_json_store_persists_across_instances():
    """Rows written by one store instance are visible to a fresh one on the same directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        inserted = store.insert(BOOKINGS_TABLE, _booking_row())

        assert inserted["id"]
        assert inserted["created_at"] and inserted["updated_at"]

        reopened = JsonRecordStore(data_dir=tmpdir)
        rows = reopened.select(BOOKINGS_TABLE, {"id": inserted["id"]})
        assert len(rows) == 1
        record = record_from_row(rows[0])
        assert record.status is BookingStatus.pending
        assert record.customer_name == "Nour Hassan"


def test_json_store_conditional_update():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        row = store.insert(BOOKINGS_TABLE, _booking_row())

        updated = store.update_by_id(
            BOOKINGS_TABLE, row["id"], {"status": "confirmed"}, precondition={"status": "pending"}
        )
        assert updated is not None and updated["status"] == "confirmed"

        again = store.update_by_id(
            BOOKINGS_TABLE, row["id"], {"status": "rejected"}, precondition={"status": "pending"}
        )
        assert again is None
        assert store.select(BOOKINGS_TABLE, {"id": row["id"]})[0]["status"] == "confirmed"


def test_json_store_update_missing_row_returns_none():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        assert store.update_by_id(BOOKINGS_TABLE, "nope", {"status": "confirmed"}) is None


def test_json_store_writes_atomically_formatted_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonRecordStore(data_dir=tmpdir)
        store.insert(BOOKINGS_TABLE, _booking_row())

        path = Path(tmpdir) / f"{BOOKINGS_TABLE}.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["table"] == BOOKINGS_TABLE
        assert len(data["rows"]) == 1
        assert not (Path(tmpdir) / f"{BOOKINGS_TABLE}.json.tmp").exists()


def test_json_store_corrupted_file_raises_persistence_error():
    with tempfile.TemporaryDirectory() as tmpdir:
        (Path(tmpdir) / f"{BOOKINGS_TABLE}.json").write_text("{not json", encoding="utf-8")
        store = JsonRecordStore(data_dir=tmpdir)
        with pytest.raises(PersistenceError):
            store.select(BOOKINGS_TABLE)


def test_memory_store_select_order_and_filters():
    store = MemoryRecordStore()
    store.insert("t", {"name": "b", "price": 2, "is_active": True})
    store.insert("t", {"name": "a", "price": 1, "is_active": True})
    store.insert("t", {"name": "c", "price": 3, "is_active": False})

    assert [r["name"] for r in store.select("t", {"is_active": True}, order_by="price")] == ["a", "b"]
    assert [r["name"] for r in store.select("t", order_by="price", descending=True)] == ["c", "b", "a"]


def test_memory_store_returns_copies():
    store = MemoryRecordStore()
    row = store.insert("t", {"name": "a"})
    row["name"] = "mutated"
    assert store.select("t")[0]["name"] == "a"


def test_seed_workspace_types_only_once():
    store = MemoryRecordStore()
    assert seed_workspace_types(store) == len(DEFAULT_WORKSPACE_TYPES)
    assert seed_workspace_types(store) == 0


def test_catalog_lists_active_cheapest_first():
    store = MemoryRecordStore()
    seed_workspace_types(store)
    store.insert(
        "workspace_types",
        {"name": "Phone Booth", "description": "", "price": 10, "price_unit": "hour", "is_active": False},
    )
    catalog = WorkspaceCatalogStore(store)

    names = [w.name for w in catalog.list_active()]
    assert names == ["Hot Desk", "Meeting Room", "Dedicated Desk", "Private Office"]
    assert catalog.get_by_name("Phone Booth") is None
    hot_desk = catalog.get_by_name("Hot Desk")
    assert hot_desk is not None and hot_desk.price == 50 and hot_desk.price_unit == "hour"


def test_site_settings_reads_published_settings_only():
    store = MemoryRecordStore()
    assert seed_site_settings(store) == len(DEFAULT_SITE_SETTINGS)
    assert seed_site_settings(store) == 0
    store.insert(
        "content_items",
        {"title": "draft_phone", "type": "setting", "content": "+1 000", "is_published": False},
    )
    store.insert(
        "content_items",
        {"title": "About us", "type": "page", "content": "Hello", "is_published": True},
    )

    site_settings = SiteSettingsStore(store)

    assert site_settings.get_all() == DEFAULT_SITE_SETTINGS
    assert site_settings.get("contact_email") == "support@desk4u.com"
    assert site_settings.get("draft_phone") is None
    assert site_settings.get("missing", "n/a") == "n/a"


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_session_store_expires_states_after_ttl():
    clock = FakeClock()
    sessions = MemorySessionStore(ttl_seconds=60, clock=clock)
    sessions.put(PendingConfirmationState(session_id="s1", booking_id="b1", expected_code="123456"))

    clock.now += 60
    assert sessions.get("s1").expected_code == "123456"

    clock.now += 1
    assert sessions.get("s1") is None
    assert len(sessions) == 0


def test_session_store_put_evicts_expired_states():
    clock = FakeClock()
    sessions = MemorySessionStore(ttl_seconds=60, clock=clock)
    sessions.put(PendingConfirmationState(session_id="old", booking_id="b1"))
    clock.now += 30
    sessions.put(PendingConfirmationState(session_id="young", booking_id="b2"))

    clock.now += 45
    sessions.put(PendingConfirmationState(session_id="new", booking_id="b3"))

    assert len(sessions) == 2
    assert sessions.get("old") is None
    assert sessions.get("young").booking_id == "b2"


def test_session_store_put_restarts_the_ttl():
    clock = FakeClock()
    sessions = MemorySessionStore(ttl_seconds=60, clock=clock)
    sessions.put(PendingConfirmationState(session_id="s1", booking_id="b1"))
    clock.now += 50
    sessions.put(PendingConfirmationState(session_id="s1", booking_id="b1", expected_code="654321"))

    clock.now += 50
    state = sessions.get("s1")
    assert state.expected_code == "654321"
    assert state.created_at == 1050.0
