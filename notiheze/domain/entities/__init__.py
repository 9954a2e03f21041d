"""Domain entities exposed by the application."""

from .agent import Agent
from .notification import DEFAULT_IMPORTANCE, EXPORT_KEYS, NotificationView

__all__ = ["Agent", "NotificationView", "EXPORT_KEYS", "DEFAULT_IMPORTANCE"]
