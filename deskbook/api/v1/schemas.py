from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from deskbook.domain.entities.booking import BookingRecord, BookingStatus, DraftBooking
from deskbook.domain.entities.workspace import DurationOption, WorkspaceType


class WorkspaceTypeSchema(BaseModel):
    id: str
    name: str
    description: str
    price: float
    price_unit: str
    image_url: str | None = None
    features: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, workspace: WorkspaceType) -> "WorkspaceTypeSchema":
        return cls(
            id=workspace.id,
            name=workspace.name,
            description=workspace.description,
            price=workspace.price,
            price_unit=workspace.price_unit,
            image_url=workspace.image_url,
            features=list(workspace.features),
        )


class DurationSchema(BaseModel):
    value: str
    label: str
    multiplier: int

    @classmethod
    def from_entity(cls, option: DurationOption) -> "DurationSchema":
        return cls(value=option.value, label=option.label, multiplier=option.multiplier)


class CreateBookingRequestSchema(BaseModel):
    workspace_type: str = Field(min_length=1)
    date: date
    time_slot: str = Field(min_length=1)
    duration: str
    customer_name: str = Field(min_length=1)
    customer_email: str = Field(min_length=3)
    customer_phone: str = Field(min_length=1)
    customer_whatsapp: str = Field(min_length=1)
    total_price: float | None = Field(default=None, ge=0)
    user_id: str | None = None

    def to_draft(self) -> DraftBooking:
        return DraftBooking(
            workspace_type=self.workspace_type,
            date=self.date,
            time_slot=self.time_slot,
            duration=self.duration,
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            customer_phone=self.customer_phone,
            customer_whatsapp=self.customer_whatsapp,
            total_price=self.total_price,
        )


class BookingSchema(BaseModel):
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
    user_id: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, record: BookingRecord) -> "BookingSchema":
        return cls(
            id=record.id,
            workspace_type=record.workspace_type,
            date=record.date,
            time_slot=record.time_slot,
            duration=record.duration,
            customer_name=record.customer_name,
            customer_email=record.customer_email,
            customer_phone=record.customer_phone,
            customer_whatsapp=record.customer_whatsapp,
            total_price=record.total_price,
            status=record.status,
            user_id=record.user_id,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class AdminBookingSchema(BookingSchema):
    confirmation_code: str | None = None

    @classmethod
    def from_entity(cls, record: BookingRecord) -> "AdminBookingSchema":
        base = BookingSchema.from_entity(record).model_dump()
        return cls(**base, confirmation_code=record.confirmation_code)


class CreateBookingResponseSchema(BaseModel):
    session_id: str
    booking: BookingSchema


class RequestCodeSchema(BaseModel):
    session_id: str = Field(min_length=1)


class RequestCodeResponseSchema(BaseModel):
    sent: bool
    demo_code: str | None = None


class CancelBookingRequestSchema(BaseModel):
    session_id: str = Field(min_length=1)


class ConfirmBookingRequestSchema(BaseModel):
    session_id: str | None = None
    code: str = Field(min_length=1)


class DashboardStatsSchema(BaseModel):
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    confirmed_revenue: float


class SiteSettingsSchema(BaseModel):
    settings: dict[str, str] = Field(default_factory=dict)
