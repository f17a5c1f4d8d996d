"""
Shared fixtures: in-memory adapters wired into the booking use case.
"""
from __future__ import annotations

import os

import pytest

os.environ.setdefault("ENV", "test")
os.environ.setdefault("ADMIN_API_TOKEN", "test-admin-token")

from deskbook.application.use_cases.booking import BookingUseCase
from deskbook.application.use_cases.notify import NotifyUseCase
from deskbook.infrastructure.catalog.seed_data import seed_workspace_types
from deskbook.infrastructure.catalog.workspace_catalog_store import WorkspaceCatalogStore
from deskbook.infrastructure.messaging.mock_channel import MockCodeChannel
from deskbook.infrastructure.session.memory_session_store import MemorySessionStore
from deskbook.infrastructure.store.memory_store import MemoryRecordStore
from deskbook.infrastructure.webhooks.mock_notifier import MockNotifier


@pytest.fixture
def store():
    record_store = MemoryRecordStore()
    seed_workspace_types(record_store)
    return record_store


@pytest.fixture
def channel():
    return MockCodeChannel()


@pytest.fixture
def notifier():
    return MockNotifier()


@pytest.fixture
def sessions():
    return MemorySessionStore()


@pytest.fixture
def build_use_case(store, channel, notifier, sessions):
    def _build(**overrides) -> BookingUseCase:
        kwargs = dict(
            store=store,
            catalog=WorkspaceCatalogStore(store),
            code_channel=channel,
            notify=NotifyUseCase(notifier=notifier),
            sessions=sessions,
            business_name="Desk4U",
        )
        kwargs.update(overrides)
        return BookingUseCase(**kwargs)

    return _build


@pytest.fixture
def use_case(build_use_case):
    return build_use_case()
