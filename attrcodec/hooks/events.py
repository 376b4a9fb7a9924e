"""Event definitions for the hook system."""

from enum import Enum


class LifecycleEvent(str, Enum):
    """Active record lifecycle points that can trigger hooks"""

    # Read
    AFTER_FIND = "after.find"
    AFTER_REFRESH = "after.refresh"

    # Insert
    BEFORE_INSERT = "before.insert"
    AFTER_INSERT = "after.insert"

    # Update
    BEFORE_UPDATE = "before.update"
    AFTER_UPDATE = "after.update"

    # Delete
    BEFORE_DELETE = "before.delete"
    AFTER_DELETE = "after.delete"
