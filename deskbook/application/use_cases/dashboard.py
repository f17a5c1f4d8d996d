from __future__ import annotations

from dataclasses import dataclass

from deskbook.application.use_cases.booking import BookingUseCase
from deskbook.domain.entities.booking import BookingStatus


@dataclass(frozen=True)
class DashboardStats:
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    confirmed_revenue: float


class DashboardUseCase:
    def __init__(self, bookings: BookingUseCase) -> None:
        self._bookings = bookings

    def get_stats(self) -> DashboardStats:
        records = self._bookings.list_bookings()
        confirmed = [r for r in records if r.status is BookingStatus.confirmed]
        return DashboardStats(
            total_bookings=len(records),
            pending_bookings=sum(1 for r in records if r.status is BookingStatus.pending),
            confirmed_bookings=len(confirmed),
            confirmed_revenue=round(sum(r.total_price for r in confirmed), 2),
        )
