"""Hook execution manager for attrcodec.

This module provides the HookManager class which runs the handlers registered
for a lifecycle event. Handlers run synchronously in registration order and a
failing handler stops the dispatch: the error belongs to whoever triggered the
event.
"""

from typing import Any

from attrcodec.core.logging import get_logger

from .base import HookContext
from .events import LifecycleEvent
from .registry import HookRegistry


class HookManager:
    """Dispatches lifecycle events to the handlers in a registry."""

    def __init__(self, registry: HookRegistry):
        """Initialize the hook manager.

        Args:
            registry: The hook registry to get handlers from
        """
        self._registry = registry
        self._logger = get_logger(__name__)

    @property
    def registry(self) -> HookRegistry:
        return self._registry

    def emit(
        self,
        event: LifecycleEvent | str,
        sender: Any,
        data: dict[str, Any] | None = None,
    ) -> HookContext:
        """Emit an event to all registered handlers.

        Args:
            event: The event to emit
            sender: The host object the event belongs to
            data: Optional event-specific data

        Returns:
            The context passed to the handlers

        Raises:
            Exception: Whatever the first failing handler raised, unchanged
        """
        context = HookContext(
            event=LifecycleEvent(event),
            sender=sender,
            data=data or {},
        )

        for handler in self._registry.get_hooks(context.event):
            try:
                handler(context)
            except Exception as e:
                self._logger.warning(
                    "hook_failed",
                    hook=_handler_name(handler),
                    hook_event=context.event.value,
                    error=str(e),
                )
                raise

        return context


def _handler_name(handler: Any) -> str:
    name = getattr(handler, "name", None)
    if isinstance(name, str):
        return name
    return getattr(handler, "__qualname__", type(handler).__name__)
