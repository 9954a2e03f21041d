"""FastAPI dependency utilities."""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from notiheze.application.use_cases import NotificationCollaborators
from notiheze.config import Settings, get_settings
from notiheze.infrastructure.categorizer import ConfigCategorizer
from notiheze.infrastructure.config_store import SettingsConfigStore
from notiheze.infrastructure.database import get_db
from notiheze.infrastructure.message_catalog import JsonMessageCatalog
from notiheze.infrastructure.user_directory import DatabaseUserDirectory
from notiheze.infrastructure.wiki_registry import SettingsWikiRegistry


@lru_cache
def _message_catalog(messages_dir: str, default_language: str) -> JsonMessageCatalog:
    return JsonMessageCatalog(messages_dir, default_language=default_language)


def get_message_catalog(settings: Settings = Depends(get_settings)) -> JsonMessageCatalog:
    """Return the message catalog shared by every request."""

    return _message_catalog(settings.messages_dir, settings.default_language)


def get_notification_collaborators(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    message_catalog: JsonMessageCatalog = Depends(get_message_catalog),
) -> NotificationCollaborators:
    """Wire the collaborators a notification view needs for this request."""

    config = SettingsConfigStore(settings)
    return NotificationCollaborators(
        user_directory=DatabaseUserDirectory(
            db, user_page_base_url=settings.user_page_base_url
        ),
        wiki_registry=SettingsWikiRegistry(settings.wikis),
        message_catalog=message_catalog,
        config=config,
        categorizer=ConfigCategorizer(config),
    )
