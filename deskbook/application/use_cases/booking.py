from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from typing import Any, Callable

from deskbook.application.dto.booking_row import (
    BOOKINGS_TABLE,
    insert_row_from_draft,
    record_from_row,
)
from deskbook.application.exceptions import (
    BookingValidationError,
    DeliveryError,
    InvalidCodeError,
    InvalidStateError,
    NotFoundError,
    PriceMismatchError,
)
from deskbook.application.ports.code_channel import CodeChannelPort
from deskbook.application.ports.record_store import RecordStorePort
from deskbook.application.ports.session_store import ConfirmationSessionStorePort
from deskbook.application.ports.workspace_catalog import WorkspaceCatalogPort
from deskbook.application.use_cases.notify import NotifyUseCase
from deskbook.application.utils.codes import generate_confirmation_code
from deskbook.application.utils.pricing import compute_total_price
from deskbook.domain.entities.booking import BookingRecord, BookingStatus, DraftBooking
from deskbook.domain.entities.confirmation import PendingConfirmationState


class BookingUseCase:
    def __init__(
        self,
        store: RecordStorePort,
        catalog: WorkspaceCatalogPort,
        code_channel: CodeChannelPort,
        notify: NotifyUseCase,
        sessions: ConfirmationSessionStorePort,
        business_name: str = "Desk4U",
        code_generator: Callable[[], str] = generate_confirmation_code,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._code_channel = code_channel
        self._notify = notify
        self._sessions = sessions
        self._business_name = business_name
        self._code_generator = code_generator
        self._logger = logging.getLogger(__name__)

    def create_booking(self, draft: DraftBooking, user_id: str | None = None) -> BookingRecord:
        workspace = self._catalog.get_by_name(draft.workspace_type)
        if workspace is None:
            raise BookingValidationError(f"Unknown workspace type: {draft.workspace_type!r}")

        total_price = compute_total_price(workspace, draft.duration)
        if draft.total_price is not None and not math.isclose(draft.total_price, total_price, abs_tol=0.005):
            raise PriceMismatchError(draft.total_price, total_price)

        row = self._store.insert(BOOKINGS_TABLE, insert_row_from_draft(draft, total_price, user_id))
        record = record_from_row(row)
        self._logger.info("Booking created", extra={"booking_id": record.id, "status": record.status.value})
        return record

    def request_confirmation_code(self, contact: str, *, session_id: str, booking_id: str) -> str:
        """
        Send a fresh one-time code to contact and remember it for session_id.
        Bookings that are no longer pending get no code.
        The returned code must only reach the customer through the code channel
        outside of demo deployments.
        """
        record = self.get_booking(booking_id)
        if record.status.is_terminal:
            raise InvalidStateError(booking_id, record.status.value)

        code = self._code_generator()
        message = f"{self._business_name} booking confirmation code: {code}"
        if not self._code_channel.send(contact, message):
            self._logger.warning(
                "Confirmation code delivery failed",
                extra={"booking_id": booking_id, "session_id": session_id},
            )
            raise DeliveryError(f"Could not deliver confirmation code to {contact}")

        self._sessions.put(
            PendingConfirmationState(
                session_id=session_id,
                booking_id=booking_id,
                expected_code=code,
            )
        )
        self._logger.info("Confirmation code sent", extra={"booking_id": booking_id, "session_id": session_id})
        return code

    def confirm_booking(
        self,
        booking_id: str,
        entered_code: str,
        pending: PendingConfirmationState | None = None,
    ) -> BookingRecord:
        record = self.get_booking(booking_id)
        if record.status.is_terminal:
            raise InvalidStateError(booking_id, record.status.value)

        # A code written onto the record is the only one accepted once present.
        if record.confirmation_code is not None:
            expected = record.confirmation_code
        elif pending is not None and pending.booking_id == booking_id:
            expected = pending.expected_code
        else:
            expected = None

        if expected is None or entered_code != expected:
            self._logger.info("Confirmation code mismatch", extra={"booking_id": booking_id})
            raise InvalidCodeError(booking_id)

        confirmed = self._transition(
            booking_id,
            {"status": BookingStatus.confirmed.value, "confirmation_code": entered_code},
        )
        self._notify.booking_event("confirm", confirmed)
        if pending is not None:
            self._sessions.clear(pending.session_id)
        return confirmed

    def reject_booking(self, booking_id: str) -> BookingRecord:
        rejected = self._transition(booking_id, {"status": BookingStatus.rejected.value})
        self._notify.booking_event("reject", rejected)
        return rejected

    def cancel_booking(
        self,
        booking_id: str,
        pending: PendingConfirmationState | None = None,
    ) -> BookingRecord:
        cancelled = self._transition(booking_id, {"status": BookingStatus.cancelled.value})
        self._notify.booking_event("cancel", cancelled)
        if pending is not None:
            self._sessions.clear(pending.session_id)
        return cancelled

    def approve_booking(self, booking_id: str) -> BookingRecord:
        """Write a fresh code onto a pending booking; the customer confirms with it."""
        code = self._code_generator()
        approved = self._transition(booking_id, {"confirmation_code": code})
        self._notify.booking_event("send_confirmation_code", approved, confirmationCode=code)
        return approved

    def get_booking(self, booking_id: str) -> BookingRecord:
        rows = self._store.select(BOOKINGS_TABLE, {"id": booking_id})
        if not rows:
            raise NotFoundError(booking_id)
        return record_from_row(rows[0])

    def list_bookings(self, status: BookingStatus | None = None) -> list[BookingRecord]:
        filters = {"status": status.value} if status is not None else None
        rows = self._store.select(BOOKINGS_TABLE, filters, order_by="created_at", descending=True)
        return [record_from_row(row) for row in rows]

    def _transition(self, booking_id: str, patch: dict[str, Any]) -> BookingRecord:
        patch = {**patch, "updated_at": datetime.now(timezone.utc).isoformat()}
        row = self._store.update_by_id(
            BOOKINGS_TABLE,
            booking_id,
            patch,
            precondition={"status": BookingStatus.pending.value},
        )
        if row is None:
            # Lost the conditional write: either gone or no longer pending.
            current = self.get_booking(booking_id)
            raise InvalidStateError(booking_id, current.status.value)

        record = record_from_row(row)
        self._logger.info(
            "Booking updated",
            extra={"booking_id": record.id, "status": record.status.value},
        )
        return record
