"""Lifecycle hook system for attrcodec.

Key components:
- LifecycleEvent: Enumeration of active record lifecycle points
- HookContext: Context data passed to hooks
- Hook: Protocol for hook implementations
- HookRegistry: Per-host registry of hooks and handlers
- HookManager: Dispatcher running the handlers for an event
"""

from .base import Hook, HookContext
from .events import LifecycleEvent
from .manager import HookManager
from .registry import HookRegistry


__all__ = ["Hook", "HookContext", "HookManager", "HookRegistry", "LifecycleEvent"]
