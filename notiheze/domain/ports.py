"""Capabilities the notification views depend on.

Implementations live in ``notiheze.infrastructure``; tests use plain stub classes.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class UserDirectory(Protocol):
    def resolve_profile_url(self, agent_id: int) -> str:
        """Return the profile URL for ``agent_id``.

        Raises :class:`~notiheze.domain.exceptions.AgentNotFoundError` when the
        directory has no such user.
        """


@runtime_checkable
class SiteDescriptor(Protocol):
    def canonical_base_url(self) -> str:
        """Return the canonical server URL of the site."""


@runtime_checkable
class WikiRegistry(Protocol):
    def resolve(self, origin_id: str) -> SiteDescriptor | None:
        """Return the site registered under ``origin_id`` or ``None``."""


@runtime_checkable
class RenderableMessage(Protocol):
    key: str

    def text(self, language: str | None = None) -> str:
        """Render the message in ``language``."""


@runtime_checkable
class MessageCatalog(Protocol):
    def render(self, key: str, params: Sequence[Any]) -> RenderableMessage:
        """Return a deferred message for ``key`` with positional ``params``."""


@runtime_checkable
class ConfigStore(Protocol):
    def get(self, key: str) -> Any:
        """Return the configuration block stored under ``key``."""


@runtime_checkable
class Categorizer(Protocol):
    def map_type_to_category(self, notification_type: str) -> str:
        """Return the category a notification type belongs to."""


__all__ = [
    "UserDirectory",
    "SiteDescriptor",
    "WikiRegistry",
    "RenderableMessage",
    "MessageCatalog",
    "ConfigStore",
    "Categorizer",
]
