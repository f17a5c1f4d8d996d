from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    rejected = "rejected"
    cancelled = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not BookingStatus.pending


@dataclass(frozen=True)
class DraftBooking:
    workspace_type: str
    date: date
    time_slot: str
    duration: str  # one of DURATION_OPTIONS keys
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_whatsapp: str
    total_price: float | None = None  # recomputed server-side


@dataclass(frozen=True)
class BookingRecord:
    id: str
    workspace_type: str
    date: date
    time_slot: str
    duration: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_whatsapp: str
    total_price: float
    status: BookingStatus
    created_at: datetime
    updated_at: datetime
    confirmation_code: str | None = None
    user_id: str | None = None
