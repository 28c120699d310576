from pagequery.models.audit_log import AdminAuditLog
from pagequery.models.inventory import InventoryItem
from pagequery.models.notification import Notification
from pagequery.models.post import Post
from pagequery.models.reply import Reply

__all__ = [
    "AdminAuditLog",
    "InventoryItem",
    "Notification",
    "Post",
    "Reply",
]
