"""Use cases turning stored notification records into exported views."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from notiheze.domain.entities import NotificationView
from notiheze.domain.ports import (
    Categorizer,
    ConfigStore,
    MessageCatalog,
    UserDirectory,
    WikiRegistry,
)

logger = logging.getLogger(__name__)

RECORD_FIELDS = (
    "id",
    "type",
    "message",
    "canonical_url",
    "creation",
    "read",
    "origin_id",
    "agent_id",
)


@dataclass(frozen=True)
class NotificationCollaborators:
    """Capabilities injected into every :class:`NotificationView`."""

    user_directory: UserDirectory
    wiki_registry: WikiRegistry
    message_catalog: MessageCatalog
    config: ConfigStore
    categorizer: Categorizer


def build_notification_view(
    record: Mapping[str, Any], collaborators: NotificationCollaborators
) -> NotificationView:
    """Create a view from a stored record, ignoring unknown fields."""

    values = {name: record[name] for name in RECORD_FIELDS if name in record}
    return NotificationView(
        **values,
        user_directory=collaborators.user_directory,
        wiki_registry=collaborators.wiki_registry,
        message_catalog=collaborators.message_catalog,
        config=collaborators.config,
        categorizer=collaborators.categorizer,
    )


def export_notification(
    record: Mapping[str, Any], collaborators: NotificationCollaborators
) -> dict[str, Any]:
    """Return the exported representation of a single record."""

    return build_notification_view(record, collaborators).export_view()


def export_notifications(
    records: Iterable[Mapping[str, Any]], collaborators: NotificationCollaborators
) -> list[dict[str, Any]]:
    """Export ``records`` ordered for display.

    More important notifications come first; ties are broken by the most
    recent creation time, then by the highest id.
    """

    exported = [export_notification(record, collaborators) for record in records]
    logger.debug("Exported %s notifications", len(exported))
    return sorted(
        exported,
        key=lambda item: (item["importance"] or 0, item["created_at"], item["id"]),
        reverse=True,
    )


__all__ = [
    "NotificationCollaborators",
    "build_notification_view",
    "export_notification",
    "export_notifications",
]
