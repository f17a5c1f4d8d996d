from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deskbook.application.exceptions import RecordContractError
from deskbook.domain.entities.booking import BookingRecord, BookingStatus, DraftBooking


BOOKINGS_TABLE = "bookings"


class BookingRow(BaseModel):
    """Shape of a row in the bookings table."""

    model_config = ConfigDict(extra="ignore")

    id: str
    workspace_type: str
    date: date
    time_slot: str
    duration: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_whatsapp: str
    total_price: float = Field(ge=0)
    status: BookingStatus
    confirmation_code: str | None = None
    user_id: str | None = None
    created_at: datetime
    updated_at: datetime

    def to_entity(self) -> BookingRecord:
        return BookingRecord(
            id=self.id,
            workspace_type=self.workspace_type,
            date=self.date,
            time_slot=self.time_slot,
            duration=self.duration,
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            customer_phone=self.customer_phone,
            customer_whatsapp=self.customer_whatsapp,
            total_price=self.total_price,
            status=self.status,
            confirmation_code=self.confirmation_code,
            user_id=self.user_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


def record_from_row(row: dict[str, Any]) -> BookingRecord:
    try:
        return BookingRow.model_validate(row).to_entity()
    except ValidationError as e:
        raise RecordContractError(f"Malformed booking row {row.get('id')!r}: {e}") from e


def insert_row_from_draft(draft: DraftBooking, total_price: float, user_id: str | None) -> dict[str, Any]:
    return {
        "workspace_type": draft.workspace_type,
        "date": draft.date.isoformat(),
        "time_slot": draft.time_slot,
        "duration": draft.duration,
        "customer_name": draft.customer_name,
        "customer_email": draft.customer_email,
        "customer_phone": draft.customer_phone,
        "customer_whatsapp": draft.customer_whatsapp,
        "total_price": total_price,
        "status": BookingStatus.pending.value,
        "confirmation_code": None,
        "user_id": user_id,
    }
