from .notification import NotificationExportRead, NotificationIconsRead, NotificationRecord

__all__ = [
    "NotificationExportRead",
    "NotificationIconsRead",
    "NotificationRecord",
]
