"""Configuration store exposing the Notiheze settings blocks."""

from __future__ import annotations

from typing import Any

from notiheze.config import Settings
from notiheze.domain.exceptions import ConfigurationError


class SettingsConfigStore:
    """Serve configuration blocks by their historical key names."""

    def __init__(self, settings: Settings) -> None:
        self._blocks: dict[str, Any] = {
            "NotihezeIcons": settings.notiheze_icons,
            "Notiheze": settings.notiheze,
        }

    def get(self, key: str) -> Any:
        try:
            return self._blocks[key]
        except KeyError as exc:
            raise ConfigurationError(f"Unknown configuration key '{key}'") from exc


__all__ = ["SettingsConfigStore"]
