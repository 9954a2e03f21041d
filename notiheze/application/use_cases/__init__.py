"""Aggregate application use cases."""

from .export_notification import (
    NotificationCollaborators,
    build_notification_view,
    export_notification,
    export_notifications,
)

__all__ = [
    "NotificationCollaborators",
    "build_notification_view",
    "export_notification",
    "export_notifications",
]
