from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from deskbook.api.v1.errors import to_http_exception
from deskbook.api.v1.schemas import (
    BookingSchema,
    CancelBookingRequestSchema,
    ConfirmBookingRequestSchema,
    CreateBookingRequestSchema,
    CreateBookingResponseSchema,
    DurationSchema,
    RequestCodeResponseSchema,
    RequestCodeSchema,
    SiteSettingsSchema,
    WorkspaceTypeSchema,
)
from deskbook.application.exceptions import BookingError
from deskbook.application.ports.session_store import ConfirmationSessionStorePort
from deskbook.application.ports.site_settings import SiteSettingsPort
from deskbook.application.ports.workspace_catalog import WorkspaceCatalogPort
from deskbook.application.use_cases.booking import BookingUseCase
from deskbook.core.config import settings
from deskbook.domain.entities.confirmation import PendingConfirmationState
from deskbook.domain.entities.workspace import DURATION_OPTIONS
from deskbook.wiring.dependencies import (
    get_booking_use_case,
    get_session_store,
    get_site_settings,
    get_workspace_catalog,
)

router = APIRouter()


def _require_session(
    sessions: ConfirmationSessionStorePort, session_id: str, booking_id: str
) -> PendingConfirmationState:
    # Only the session that created the booking may act on it from the customer side.
    pending = sessions.get(session_id)
    if pending is None or pending.booking_id != booking_id:
        raise HTTPException(status_code=403, detail="Session expired or does not match this booking")
    return pending


@router.get("/workspaces", response_model=list[WorkspaceTypeSchema])
def list_workspaces(catalog: WorkspaceCatalogPort = Depends(get_workspace_catalog)):
    try:
        workspaces = catalog.list_active()
    except BookingError as e:
        raise to_http_exception(e)
    return [WorkspaceTypeSchema.from_entity(w) for w in workspaces]


@router.get("/durations", response_model=list[DurationSchema])
def list_durations():
    return [DurationSchema.from_entity(option) for option in DURATION_OPTIONS.values()]


@router.get("/settings", response_model=SiteSettingsSchema)
def get_settings(site_settings: SiteSettingsPort = Depends(get_site_settings)):
    try:
        values = site_settings.get_all()
    except BookingError as e:
        raise to_http_exception(e)
    return SiteSettingsSchema(settings=values)


@router.post("/bookings", response_model=CreateBookingResponseSchema, status_code=201)
def create_booking(
    req: CreateBookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
    sessions: ConfirmationSessionStorePort = Depends(get_session_store),
):
    try:
        record = uc.create_booking(req.to_draft(), user_id=req.user_id)
    except BookingError as e:
        raise to_http_exception(e)
    session_id = sessions.new_session_id()
    sessions.put(PendingConfirmationState(session_id=session_id, booking_id=record.id))
    return CreateBookingResponseSchema(
        session_id=session_id,
        booking=BookingSchema.from_entity(record),
    )


@router.get("/bookings/{booking_id}", response_model=BookingSchema)
def get_booking(booking_id: str, uc: BookingUseCase = Depends(get_booking_use_case)):
    try:
        record = uc.get_booking(booking_id)
    except BookingError as e:
        raise to_http_exception(e)
    return BookingSchema.from_entity(record)


@router.post("/bookings/{booking_id}/code", response_model=RequestCodeResponseSchema)
def request_code(
    booking_id: str,
    req: RequestCodeSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
    sessions: ConfirmationSessionStorePort = Depends(get_session_store),
):
    _require_session(sessions, req.session_id, booking_id)
    try:
        record = uc.get_booking(booking_id)
        code = uc.request_confirmation_code(
            record.customer_whatsapp,
            session_id=req.session_id,
            booking_id=booking_id,
        )
    except BookingError as e:
        raise to_http_exception(e)
    return RequestCodeResponseSchema(sent=True, demo_code=code if settings.DEMO_RETURN_CODE else None)


@router.post("/bookings/{booking_id}/confirm", response_model=BookingSchema)
def confirm_booking(
    booking_id: str,
    req: ConfirmBookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
    sessions: ConfirmationSessionStorePort = Depends(get_session_store),
):
    pending = sessions.get(req.session_id) if req.session_id else None
    try:
        record = uc.confirm_booking(booking_id, req.code, pending=pending)
    except BookingError as e:
        raise to_http_exception(e)
    return BookingSchema.from_entity(record)


@router.post("/bookings/{booking_id}/cancel", response_model=BookingSchema)
def cancel_booking(
    booking_id: str,
    req: CancelBookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
    sessions: ConfirmationSessionStorePort = Depends(get_session_store),
):
    pending = _require_session(sessions, req.session_id, booking_id)
    try:
        record = uc.cancel_booking(booking_id, pending=pending)
    except BookingError as e:
        raise to_http_exception(e)
    return BookingSchema.from_entity(record)
