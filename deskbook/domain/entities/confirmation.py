from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PendingConfirmationState:
    session_id: str
    booking_id: str
    expected_code: str | None = None  # None until a code has been dispatched
    created_at: float | None = None  # stamped by the session store
