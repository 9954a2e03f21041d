"""Shared stubs for notification view tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Sequence

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from notiheze.domain.entities import NotificationView
from notiheze.domain.exceptions import AgentNotFoundError, CategoryNotFoundError


class StubUserDirectory:
    def __init__(self, profiles: dict[int, str] | None = None) -> None:
        self.profiles = profiles or {}
        self.calls: list[int] = []

    def resolve_profile_url(self, agent_id: int) -> str:
        self.calls.append(agent_id)
        try:
            return self.profiles[agent_id]
        except KeyError:
            raise AgentNotFoundError(agent_id) from None


class StubSite:
    def __init__(self, url: str) -> None:
        self.url = url

    def canonical_base_url(self) -> str:
        return self.url


class StubWikiRegistry:
    def __init__(self, sites: dict[str, str] | None = None) -> None:
        self.sites = {key: StubSite(url) for key, url in (sites or {}).items()}
        self.calls: list[str] = []

    def resolve(self, origin_id: str) -> StubSite | None:
        self.calls.append(origin_id)
        return self.sites.get(origin_id)


class StubMessage:
    def __init__(self, key: str, params: Sequence[Any]) -> None:
        self.key = key
        self.params = list(params)

    def text(self, language: str | None = None) -> str:
        return f"{self.key}:{self.params}"


class StubMessageCatalog:
    def __init__(self) -> None:
        self.calls: list[tuple[str, list[Any]]] = []

    def render(self, key: str, params: Sequence[Any]) -> StubMessage:
        self.calls.append((key, list(params)))
        return StubMessage(key, params)


class StubConfigStore:
    def __init__(self, blocks: dict[str, Any] | None = None) -> None:
        self.blocks = blocks or {
            "NotihezeIcons": {
                "notification": {"mention": "/icons/mention.svg"},
                "category": {},
                "subcategory": {},
            },
            "Notiheze": {
                "mention": {"importance": 5, "category": "mention"},
                "thank-you-edit": {"category": "thanks"},
            },
        }

    def get(self, key: str) -> Any:
        return self.blocks[key]


class StubCategorizer:
    def __init__(self, categories: dict[str, str] | None = None) -> None:
        self.categories = categories if categories is not None else {"mention": "mention"}

    def map_type_to_category(self, notification_type: str) -> str:
        try:
            return self.categories[notification_type]
        except KeyError:
            raise CategoryNotFoundError(notification_type) from None


@pytest.fixture()
def user_directory() -> StubUserDirectory:
    return StubUserDirectory({7: "https://meta.example.org/wiki/User:Alice"})


@pytest.fixture()
def wiki_registry() -> StubWikiRegistry:
    return StubWikiRegistry({"metawiki": "https://meta.example.org"})


@pytest.fixture()
def message_catalog() -> StubMessageCatalog:
    return StubMessageCatalog()


@pytest.fixture()
def config_store() -> StubConfigStore:
    return StubConfigStore()


@pytest.fixture()
def categorizer() -> StubCategorizer:
    return StubCategorizer()


@pytest.fixture()
def make_view(user_directory, wiki_registry, message_catalog, config_store, categorizer):
    """Return a factory building views wired to the stub collaborators."""

    def factory(**overrides: Any) -> NotificationView:
        values: dict[str, Any] = {
            "type": "mention",
            "message": '[[1, "Bob"], [2, "Alice"]]',
            "canonical_url": "https://meta.example.org/wiki/Talk:Main_Page",
            "id": 42,
            "creation": 1700000000,
            "read": 0,
            "origin_id": None,
            "agent_id": None,
            "user_directory": user_directory,
            "wiki_registry": wiki_registry,
            "message_catalog": message_catalog,
            "config": config_store,
            "categorizer": categorizer,
        }
        values.update(overrides)
        return NotificationView(**values)

    return factory
