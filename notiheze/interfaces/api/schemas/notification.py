"""Pydantic models describing notification payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class NotificationRecord(BaseModel):
    """Stored notification submitted for export."""

    id: int = Field(default=0, ge=0)
    type: str = Field(..., min_length=1, description="Notification type, e.g. 'mention'")
    message: str = Field(
        default="[]",
        description="JSON encoded list of [position, value] message parameters",
    )
    canonical_url: str = Field(..., description="Deep link to the notification subject")
    creation: int = Field(default=0, ge=0, description="Epoch of the event")
    read: int = Field(default=0, ge=0, description="Epoch the notification was read, 0 if unread")
    origin_id: str | None = Field(default=None, description="Database name of the origin wiki")
    agent_id: str | None = Field(default=None, description="Identifier of the acting user")

    @field_validator("origin_id", "agent_id", mode="before")
    @classmethod
    def _stringify_identifier(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class NotificationIconsRead(BaseModel):
    notification: str | None = None


class NotificationExportRead(BaseModel):
    """Representation of an exported notification delivered to the client."""

    icons: NotificationIconsRead
    category: str | None = None
    id: int
    type: str
    header_short: str | None = None
    header_long: str | None = None
    created_at: int
    read_at: int
    origin_url: str | None = None
    agent_url: str | None = None
    canonical_url: str
    importance: int | None = None


__all__ = ["NotificationRecord", "NotificationIconsRead", "NotificationExportRead"]
