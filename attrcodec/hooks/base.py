"""Base types for hook implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable

from .events import LifecycleEvent


@dataclass
class HookContext:
    """Context passed to hooks when a lifecycle event fires.

    Attributes:
        event: The lifecycle event being emitted
        sender: The host object the event belongs to
        timestamp: When the event was emitted (UTC)
        data: Event-specific data supplied by the host
    """

    event: LifecycleEvent
    sender: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class Hook(Protocol):
    """Protocol for hook implementations"""

    @property
    def name(self) -> str:
        """Hook name for debugging"""
        ...

    @property
    def events(self) -> list[LifecycleEvent]:
        """Events this hook listens to"""
        ...

    def __call__(self, context: HookContext) -> None:
        """Handle a lifecycle event"""
        ...
