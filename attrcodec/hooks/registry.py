"""Registry of lifecycle hooks for a single host object"""

from collections import defaultdict
from collections.abc import Callable

from attrcodec.core.logging import get_logger

from .base import Hook, HookContext
from .events import LifecycleEvent


Handler = Callable[[HookContext], None]


class HookRegistry:
    """Ordered per-event registry of hooks and bare handlers"""

    def __init__(self) -> None:
        self._hooks: dict[LifecycleEvent, list[Handler]] = defaultdict(list)
        self._logger = get_logger(__name__)

    def register(self, hook: Hook) -> None:
        """Register a hook for its events"""
        for event in hook.events:
            self.subscribe(event, hook)
        self._logger.debug("hook_registered", hook=hook.name, events=len(hook.events))

    def unregister(self, hook: Hook) -> None:
        """Remove a hook from all events"""
        for event in hook.events:
            self.unsubscribe(event, hook)

    def subscribe(self, event: LifecycleEvent | str, handler: Handler) -> None:
        """Append a handler to the event's invocation list"""
        self._hooks[LifecycleEvent(event)].append(handler)

    def unsubscribe(self, event: LifecycleEvent | str, handler: Handler) -> bool:
        """Remove the first occurrence of a handler; return whether it was found"""
        handlers = self._hooks.get(LifecycleEvent(event), [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def get_hooks(self, event: LifecycleEvent | str) -> list[Handler]:
        """Get all handlers for an event, in registration order"""
        return list(self._hooks.get(LifecycleEvent(event), []))

    def clear(self) -> None:
        """Remove every handler"""
        self._hooks.clear()
