import logging
from logging.config import dictConfig

from fastapi import FastAPI

from deskbook.api.v1.admin import router as admin_router
from deskbook.api.v1.bookings import router as bookings_router
from deskbook.core.config import settings


class ContextFormatter(logging.Formatter):
    """Appends the booking context passed through `extra=` as key=value pairs."""

    context_keys = ("booking_id", "session_id", "action", "status", "contact", "count", "error_code", "error")

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = [
            f"{key}={getattr(record, key)}"
            for key in self.context_keys
            if getattr(record, key, None) not in (None, "")
        ]
        if not context:
            return base
        return f"{base} | {' '.join(context)}"


def configure_logging() -> None:
    level = settings.LOG_LEVEL.upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "context": {
                    "()": ContextFormatter,
                    "fmt": "%(levelname)s:%(name)s:%(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "context",
                }
            },
            "root": {"handlers": ["console"], "level": level},
        }
    )


configure_logging()

app = FastAPI(title="Coworking Booking", version="1.0.0")

app.include_router(bookings_router, prefix="/api/v1", tags=["bookings"])
app.include_router(admin_router, prefix="/api/v1/admin", tags=["admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
