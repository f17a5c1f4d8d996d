from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WorkspaceType:
    id: str
    name: str
    description: str
    price: float
    price_unit: str  # "hour", "day", ...
    image_url: str | None = None
    features: tuple[str, ...] = field(default_factory=tuple)
    is_active: bool = True


@dataclass(frozen=True)
class DurationOption:
    value: str
    label: str
    multiplier: int


DURATION_OPTIONS: dict[str, DurationOption] = {
    option.value: option
    for option in (
        DurationOption("1-hour", "1 Hour", 1),
        DurationOption("2-hours", "2 Hours", 2),
        DurationOption("4-hours", "4 Hours", 4),
        # multiplier applies to the workspace price_unit as-is
        DurationOption("1-day", "1 Day", 1),
        DurationOption("1-week", "1 Week", 7),
        DurationOption("1-month", "1 Month", 30),
    )
}
