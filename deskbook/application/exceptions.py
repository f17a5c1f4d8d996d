from __future__ import annotations


class BookingError(Exception):
    """Base class for errors surfaced by the booking lifecycle."""


class BookingValidationError(BookingError, ValueError):
    """Raised when a draft booking cannot be accepted as submitted."""


class PriceMismatchError(BookingValidationError):
    def __init__(self, submitted: float, expected: float) -> None:
        super().__init__(f"Submitted total {submitted} does not match computed total {expected}")
        self.submitted = submitted
        self.expected = expected


class PersistenceError(BookingError):
    """Raised when the record store is unreachable or rejects a write."""


class RecordContractError(PersistenceError):
    """Raised when a stored row does not match the expected shape."""


class NotFoundError(BookingError):
    def __init__(self, booking_id: str) -> None:
        super().__init__(f"Booking {booking_id} not found")
        self.booking_id = booking_id


class InvalidStateError(BookingError):
    def __init__(self, booking_id: str, status: str) -> None:
        super().__init__(f"Booking {booking_id} is already {status}")
        self.booking_id = booking_id
        self.status = status


class InvalidCodeError(BookingError):
    def __init__(self, booking_id: str) -> None:
        super().__init__(f"Invalid confirmation code for booking {booking_id}")
        self.booking_id = booking_id


class DeliveryError(BookingError):
    """Raised when the code channel could not deliver a confirmation code."""
