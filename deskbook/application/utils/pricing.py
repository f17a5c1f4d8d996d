from __future__ import annotations

from deskbook.application.exceptions import BookingValidationError
from deskbook.domain.entities.workspace import DURATION_OPTIONS, DurationOption, WorkspaceType


def get_duration_option(value: str) -> DurationOption:
    option = DURATION_OPTIONS.get(value)
    if option is None:
        raise BookingValidationError(f"Unknown duration: {value!r}")
    return option


def compute_total_price(workspace: WorkspaceType, duration: str) -> float:
    option = get_duration_option(duration)
    return round(workspace.price * option.multiplier, 2)
