from __future__ import annotations

import threading
import time
import uuid
from dataclasses import replace
from typing import Callable

from deskbook.application.ports.session_store import ConfirmationSessionStorePort
from deskbook.domain.entities.confirmation import PendingConfirmationState


class MemorySessionStore(ConfirmationSessionStorePort):
    """Session states expire ttl_seconds after they were last put."""

    def __init__(self, ttl_seconds: float = 1800, clock: Callable[[], float] = time.time) -> None:
        self._states: dict[str, PendingConfirmationState] = {}
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()

    def new_session_id(self) -> str:
        return uuid.uuid4().hex

    def get(self, session_id: str) -> PendingConfirmationState | None:
        with self._lock:
            state = self._states.get(session_id)
            if state is not None and self._is_expired(state, self._clock()):
                del self._states[session_id]
                return None
            return state

    def put(self, state: PendingConfirmationState) -> None:
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            self._states[state.session_id] = replace(state, created_at=now)

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._states.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

    def _is_expired(self, state: PendingConfirmationState, now: float) -> bool:
        return state.created_at is not None and now - state.created_at > self._ttl_seconds

    def _evict_expired(self, now: float) -> None:
        expired = [sid for sid, state in self._states.items() if self._is_expired(state, now)]
        for sid in expired:
            del self._states[sid]
