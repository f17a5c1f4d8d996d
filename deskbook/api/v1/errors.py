from __future__ import annotations

from fastapi import HTTPException

from deskbook.application.exceptions import (
    BookingError,
    BookingValidationError,
    DeliveryError,
    InvalidCodeError,
    InvalidStateError,
    NotFoundError,
    PersistenceError,
)


def to_http_exception(error: BookingError) -> HTTPException:
    if isinstance(error, BookingValidationError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, InvalidStateError):
        return HTTPException(
            status_code=409,
            detail={"message": "Booking already finalized", "status": error.status},
        )
    if isinstance(error, InvalidCodeError):
        return HTTPException(status_code=400, detail="Invalid confirmation code")
    if isinstance(error, DeliveryError):
        return HTTPException(status_code=502, detail="Could not send confirmation code, please try again")
    if isinstance(error, PersistenceError):
        return HTTPException(status_code=503, detail="Booking service unavailable, please try again")
    return HTTPException(status_code=500, detail=str(error))
