from __future__ import annotations

from abc import ABC, abstractmethod


class SiteSettingsPort(ABC):
    @abstractmethod
    def get_all(self) -> dict[str, str]:
        """Published site settings keyed by name, e.g. payment_phone."""
        raise NotImplementedError

    @abstractmethod
    def get(self, key: str, default: str | None = None) -> str | None:
        raise NotImplementedError
