"""Endpoints exporting notifications for API consumers."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from notiheze.application.use_cases import (
    NotificationCollaborators,
    export_notification,
    export_notifications,
)
from notiheze.domain.exceptions import MissingDependencyError
from notiheze.interfaces.api.dependencies import get_notification_collaborators
from notiheze.interfaces.api.schemas import NotificationExportRead, NotificationRecord

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _render(header: Any, language: str | None) -> str | None:
    if header is None:
        return None
    return header.text(language)


def _export_to_schema(exported: dict[str, Any], language: str | None) -> NotificationExportRead:
    return NotificationExportRead(
        icons=exported["icons"],
        category=exported["category"],
        id=exported["id"],
        type=exported["type"],
        header_short=_render(exported["header_short"], language),
        header_long=_render(exported["header_long"], language),
        created_at=exported["created_at"],
        read_at=exported["read_at"],
        origin_url=exported["origin_url"],
        agent_url=exported["agent_url"],
        canonical_url=exported["canonical_url"],
        importance=exported["importance"],
    )


@router.post("/export", response_model=NotificationExportRead)
def export_single_notification(
    record: NotificationRecord,
    lang: str | None = Query(default=None, description="Language of the rendered headers"),
    collaborators: NotificationCollaborators = Depends(get_notification_collaborators),
) -> NotificationExportRead:
    """Return the exported view of ``record`` with headers rendered in ``lang``."""

    try:
        exported = export_notification(record.model_dump(), collaborators)
    except (MissingDependencyError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return _export_to_schema(exported, lang)


@router.post("/export/batch", response_model=list[NotificationExportRead])
def export_notification_batch(
    records: list[NotificationRecord],
    lang: str | None = Query(default=None, description="Language of the rendered headers"),
    collaborators: NotificationCollaborators = Depends(get_notification_collaborators),
) -> list[NotificationExportRead]:
    """Export ``records`` with the most important and most recent first."""

    try:
        exported = export_notifications(
            [record.model_dump() for record in records], collaborators
        )
    except (MissingDependencyError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return [_export_to_schema(item, lang) for item in exported]
