from __future__ import annotations

from fastapi import APIRouter, Depends

from deskbook.api.v1.admin_auth import require_admin
from deskbook.api.v1.errors import to_http_exception
from deskbook.api.v1.schemas import AdminBookingSchema, DashboardStatsSchema
from deskbook.application.exceptions import BookingError
from deskbook.application.use_cases.booking import BookingUseCase
from deskbook.application.use_cases.dashboard import DashboardUseCase
from deskbook.domain.entities.booking import BookingStatus
from deskbook.wiring.dependencies import get_booking_use_case

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/bookings", response_model=list[AdminBookingSchema])
def list_bookings(
    status: BookingStatus | None = None,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    try:
        records = uc.list_bookings(status)
    except BookingError as e:
        raise to_http_exception(e)
    return [AdminBookingSchema.from_entity(r) for r in records]


@router.get("/stats", response_model=DashboardStatsSchema)
def get_stats(uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        stats = DashboardUseCase(bookings=uc).get_stats()
    except BookingError as e:
        raise to_http_exception(e)
    return DashboardStatsSchema(
        total_bookings=stats.total_bookings,
        pending_bookings=stats.pending_bookings,
        confirmed_bookings=stats.confirmed_bookings,
        confirmed_revenue=stats.confirmed_revenue,
    )


@router.post("/bookings/{booking_id}/approve", response_model=AdminBookingSchema)
def approve_booking(booking_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        record = uc.approve_booking(booking_id)
    except BookingError as e:
        raise to_http_exception(e)
    return AdminBookingSchema.from_entity(record)


@router.post("/bookings/{booking_id}/reject", response_model=AdminBookingSchema)
def reject_booking(booking_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        record = uc.reject_booking(booking_id)
    except BookingError as e:
        raise to_http_exception(e)
    return AdminBookingSchema.from_entity(record)


@router.post("/bookings/{booking_id}/cancel", response_model=AdminBookingSchema)
def cancel_booking(booking_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        record = uc.cancel_booking(booking_id)
    except BookingError as e:
        raise to_http_exception(e)
    return AdminBookingSchema.from_entity(record)
