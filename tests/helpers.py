from __future__ import annotations

from datetime import date

from deskbook.domain.entities.booking import DraftBooking


def make_draft(**overrides) -> DraftBooking:
    fields = dict(
        workspace_type="Hot Desk",
        date=date(2026, 11, 2),
        time_slot="9:00 AM",
        duration="1-hour",
        customer_name="Nour Hassan",
        customer_email="nour@example.com",
        customer_phone="+15551234567",
        customer_whatsapp="+15551234567",
    )
    fields.update(overrides)
    return DraftBooking(**fields)
