"""Category lookup for notification types."""

from __future__ import annotations

from notiheze.domain.exceptions import CategoryNotFoundError
from notiheze.domain.ports import ConfigStore


class ConfigCategorizer:
    """Read the category of a type from the ``Notiheze`` configuration block.

    There is no fallback category: a type without one is reported as a miss.
    """

    def __init__(self, config: ConfigStore) -> None:
        self._config = config

    def map_type_to_category(self, notification_type: str) -> str:
        options = self._config.get("Notiheze").get(notification_type) or {}
        category = options.get("category")
        if not category:
            raise CategoryNotFoundError(notification_type)
        return str(category)


__all__ = ["ConfigCategorizer"]
