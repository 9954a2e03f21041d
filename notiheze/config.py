"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class WikiSettings(BaseModel):
    """Registry entry describing a wiki notifications may originate from."""

    canonical_server: str = Field(
        description="Canonical server URL of the wiki, e.g. https://meta.example.org",
        min_length=1,
    )


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./notiheze.db",
        description="Database connection URL used by SQLAlchemy for user lookups",
        min_length=1,
    )
    notiheze_icons: dict[str, dict[str, str]] = Field(
        default_factory=lambda: {"notification": {}, "category": {}, "subcategory": {}},
        description="Icon URLs keyed by icon type, then by notification type",
    )
    notiheze: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Per notification type settings such as importance and category",
    )
    wikis: dict[str, WikiSettings] = Field(
        default_factory=dict,
        description="Known origin wikis keyed by database name",
    )
    user_page_base_url: str = Field(
        default="http://localhost/wiki",
        description="Base URL user pages are served from",
        min_length=1,
    )
    messages_dir: str = Field(
        default="i18n",
        description="Directory holding <language>.json message files",
    )
    default_language: str = Field(default="en", min_length=1)

    @field_validator("user_page_base_url")
    @classmethod
    def _validate_user_page_base_url(cls, value: str) -> str:
        if "://" not in value:
            raise ValueError("USER_PAGE_BASE_URL must include a scheme")
        return value.rstrip("/")

    @field_validator("notiheze")
    @classmethod
    def _validate_importance(
        cls, value: dict[str, dict[str, Any]]
    ) -> dict[str, dict[str, Any]]:
        for notification_type, options in value.items():
            importance = options.get("importance")
            if importance is None:
                continue
            if isinstance(importance, bool) or not isinstance(importance, int):
                raise ValueError(
                    f"Importance for '{notification_type}' must be an integer"
                )
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "WikiSettings", "get_settings", "reset_settings_cache"]
