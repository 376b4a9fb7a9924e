"""Structured logging hook implementation."""

from typing import Any

import structlog

from attrcodec.core.logging import get_logger

from ..base import HookContext
from ..events import LifecycleEvent


class LoggingHook:
    """Structured logging for active record lifecycle events"""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        events: list[LifecycleEvent] | None = None,
        include_attributes: bool = False,
    ):
        """Initialize logging hook.

        Args:
            logger: Optional structlog logger instance. If None, creates a new one.
            events: Events to log. Defaults to every lifecycle event.
            include_attributes: Also log the sender's attribute names
        """
        self.logger = logger or get_logger(__name__)
        self._name = "logging_hook"
        self._events = events or list(LifecycleEvent)
        self.include_attributes = include_attributes

    @property
    def name(self) -> str:
        """Hook name for debugging"""
        return self._name

    @property
    def events(self) -> list[LifecycleEvent]:
        """Events this hook listens to"""
        return self._events

    def __call__(self, context: HookContext) -> None:
        """Log event with structured context.

        Args:
            context: Hook context containing event data
        """
        log_data: dict[str, Any] = {
            "hook_event": context.event.value,
            "timestamp": context.timestamp.isoformat(),
            "sender": type(context.sender).__name__,
        }

        if context.data:
            log_data["data"] = context.data

        if self.include_attributes:
            attributes = getattr(context.sender, "attributes", None)
            if isinstance(attributes, dict):
                log_data["attributes"] = sorted(attributes)

        if self._get_log_level(context.event) == "info":
            self.logger.info("hook_event", **log_data)
        else:
            self.logger.debug("hook_event_debug", **log_data)

    def _get_log_level(self, event: LifecycleEvent) -> str:
        """Determine appropriate log level for event.

        Deletes are logged at info, reads and writes at debug since they fire
        on every load and save.
        """
        if event in {LifecycleEvent.BEFORE_DELETE, LifecycleEvent.AFTER_DELETE}:
            return "info"
        return "debug"
