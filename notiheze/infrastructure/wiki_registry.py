"""Registry of wikis a notification may originate from."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from notiheze.config import WikiSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WikiReference:
    """Descriptor of a registered wiki."""

    database_name: str
    canonical_server: str

    def canonical_base_url(self) -> str:
        return self.canonical_server.rstrip("/")


class SettingsWikiRegistry:
    """Resolve origin ids against the ``wikis`` configuration."""

    def __init__(self, wikis: Mapping[str, WikiSettings]) -> None:
        self._wikis = {
            database_name: WikiReference(
                database_name=database_name,
                canonical_server=options.canonical_server,
            )
            for database_name, options in wikis.items()
        }

    def resolve(self, origin_id: str) -> WikiReference | None:
        wiki = self._wikis.get(origin_id)
        if wiki is None:
            logger.debug("Origin '%s' is not a registered wiki", origin_id)
        return wiki


__all__ = ["WikiReference", "SettingsWikiRegistry"]
