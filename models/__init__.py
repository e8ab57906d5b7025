# models/__init__.py

from .users import User, DEFAULT_NOTIFICATION_PREFERENCES
from .groups import Group, ROLES
from .tasks import Task
from .notifications import Notification

__all__ = [
    "User",
    "Group",
    "Task",
    "Notification",
    "DEFAULT_NOTIFICATION_PREFERENCES",
    "ROLES"
]
