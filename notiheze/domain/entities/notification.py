"""Domain entity deriving presentation views from a stored notification."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any

from notiheze.domain.exceptions import (
    AgentNotFoundError,
    MissingDependencyError,
    NotihezeError,
)
from notiheze.domain.lookups import Lookup
from notiheze.domain.parameters import decode_message_parameters, normalize_array_keys
from notiheze.domain.ports import (
    Categorizer,
    ConfigStore,
    MessageCatalog,
    RenderableMessage,
    SiteDescriptor,
    UserDirectory,
    WikiRegistry,
)

logger = logging.getLogger(__name__)

ICONS_CONFIG_KEY = "NotihezeIcons"
TYPES_CONFIG_KEY = "Notiheze"
DEFAULT_IMPORTANCE = 0

EXPORT_KEYS = (
    "icons",
    "category",
    "id",
    "type",
    "header_short",
    "header_long",
    "created_at",
    "read_at",
    "origin_url",
    "agent_url",
    "canonical_url",
    "importance",
)


def _collaborator():
    return field(default=None, repr=False, compare=False, kw_only=True)


@dataclass(frozen=True)
class NotificationView:
    """A single notification and the views derived from it.

    Collaborators are injected at construction and every accessor performs at
    most one call into them.
    """

    type: str
    message: str
    canonical_url: str
    id: int = 0
    creation: int = 0
    read: int = 0
    origin_id: str | None = None
    agent_id: str | None = None

    user_directory: UserDirectory = _collaborator()
    wiki_registry: WikiRegistry = _collaborator()
    message_catalog: MessageCatalog = _collaborator()
    config: ConfigStore = _collaborator()
    categorizer: Categorizer = _collaborator()

    def __post_init__(self) -> None:
        missing = [
            item.name
            for item in fields(self)
            if item.kw_only and getattr(self, item.name) is None
        ]
        if missing:
            raise MissingDependencyError(
                "NotificationView requires collaborators: " + ", ".join(missing)
            )
        if not self.type:
            raise ValueError("Notification type must not be empty")
        for name in ("id", "creation", "read"):
            if getattr(self, name) < 0:
                raise ValueError(f"Notification {name} must be non-negative")

    def get_id(self) -> int:
        return self.id

    def get_type(self) -> str:
        return self.type

    def get_creation(self) -> int:
        """Return when the underlying event occurred."""

        return self.creation

    def get_read(self) -> int:
        """Return when the notification was read (dismissed), 0 when unread."""

        return self.read

    def is_read(self) -> bool:
        return self.read > 0

    def get_canonical_url(self) -> str:
        return self.canonical_url

    def get_origin_id(self) -> str | None:
        return self.origin_id

    def get_agent_id(self) -> str | None:
        return self.agent_id

    def get_agent_url(self) -> Lookup[str]:
        """Return the profile URL of the user who triggered the notification.

        A notification without an agent yields a ``NOT_PROVIDED`` lookup and
        never touches the user directory. Directory misses propagate as
        :class:`AgentNotFoundError`.
        """

        if self.agent_id is None:
            return Lookup.not_provided()

        try:
            agent_id = int(self.agent_id)
        except (TypeError, ValueError) as exc:
            raise AgentNotFoundError(self.agent_id) from exc

        return Lookup.found(self.user_directory.resolve_profile_url(agent_id))

    def get_origin(self) -> Lookup[SiteDescriptor]:
        """Return the wiki the notification originated from.

        ``NOT_PROVIDED`` stands for a local notification and ``NOT_FOUND`` for
        an origin id the registry does not know about.
        """

        if not self.origin_id:
            return Lookup.not_provided()

        site = self.wiki_registry.resolve(self.origin_id)
        if site is None:
            return Lookup.not_found()
        return Lookup.found(site)

    def get_origin_url(self) -> Lookup[str]:
        """Return the canonical server URL of the origin wiki."""

        return self.get_origin().map(lambda site: site.canonical_base_url())

    def get_message_parameters(self) -> dict[int, Any]:
        return decode_message_parameters(self.message)

    def get_header(self, long: bool = False) -> RenderableMessage:
        """Return the header (title) of the notification.

        The message key is ``long-header-<type>`` or ``short-header-<type>``.
        """

        parameters = normalize_array_keys(self.get_message_parameters())
        key = ("long" if long else "short") + "-header-" + self.type
        return self.message_catalog.render(key, list(parameters.values()))

    def _icon_config(self, icon_type: str) -> dict[str, str]:
        return self.config.get(ICONS_CONFIG_KEY).get(icon_type) or {}

    def lookup_notification_icon(self) -> Lookup[str]:
        icon = self._icon_config("notification").get(self.type)
        if icon is None:
            return Lookup.default()
        return Lookup.found(icon)

    def get_notification_icon(self) -> str | None:
        """Return the icon URL configured for this type, if any."""

        return self.lookup_notification_icon().value

    def lookup_importance(self) -> Lookup[int]:
        type_config = self.config.get(TYPES_CONFIG_KEY).get(self.type) or {}
        importance = type_config.get("importance")
        if importance is None:
            return Lookup.default(DEFAULT_IMPORTANCE)
        return Lookup.found(int(importance))

    def get_importance(self) -> int:
        """Return the display priority of this type; higher is more important."""

        return self.lookup_importance().value

    def get_category(self) -> str:
        return self.categorizer.map_type_to_category(self.type)

    def export_view(self) -> dict[str, Any]:
        """Return a flat record of this notification for API consumers.

        Every key in :data:`EXPORT_KEYS` is present. Lookups that degrade or
        fail are reported as ``None``.
        """

        return {
            "icons": {
                "notification": self._safely("icon", self.get_notification_icon),
            },
            "category": self._safely("category", self.get_category),
            "id": self.id,
            "type": self.type,
            "header_short": self._safely("header_short", self.get_header),
            "header_long": self._safely("header_long", lambda: self.get_header(True)),
            "created_at": self.creation,
            "read_at": self.read,
            "origin_url": self._lookup_value("origin_url", self.get_origin_url),
            "agent_url": self._lookup_value("agent_url", self.get_agent_url),
            "canonical_url": self.canonical_url,
            "importance": self._safely("importance", self.get_importance),
        }

    def _lookup_value(self, name: str, accessor) -> Any:
        lookup = self._safely(name, accessor)
        if lookup is None:
            return None
        if not lookup.is_found:
            logger.debug(
                "Notification %s has no %s (%s)", self.id, name, lookup.status.value
            )
        return lookup.value

    def _safely(self, name: str, accessor) -> Any:
        try:
            return accessor()
        except NotihezeError as exc:
            logger.warning(
                "Could not derive %s for notification %s of type '%s': %s",
                name,
                self.id,
                self.type,
                exc,
            )
        except Exception:
            logger.exception(
                "Unexpected error deriving %s for notification %s of type '%s'",
                name,
                self.id,
                self.type,
            )
        return None


__all__ = ["NotificationView", "EXPORT_KEYS", "DEFAULT_IMPORTANCE"]
