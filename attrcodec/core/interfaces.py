"""Core interfaces for attrcodec.

This module consolidates the capability protocols used throughout the package,
providing a single location for the contracts between hooks, transforms and
host objects.
"""

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


__all__ = [
    # Transformation interfaces
    "Transformer",
    # Host interfaces
    "AttributeAccessor",
    "ActiveRecordProtocol",
]


# === Transformation Interfaces ===


@runtime_checkable
class Transformer(Protocol):
    """Protocol for a single value transform (serialize or deserialize)."""

    def transform(self, value: Any) -> Any:
        """Transform a value from one representation to another.

        Args:
            value: The value read from the host object, never None

        Returns:
            The value to write back to the host object
        """
        ...


# === Host Interfaces ===


@runtime_checkable
class AttributeAccessor(Protocol):
    """Keyed read/write access to named attributes of a host object."""

    def get_attribute(self, name: str) -> Any:
        """Return the attribute value, or None when it is absent."""
        ...

    def set_attribute(self, name: str, value: Any) -> None:
        """Write the attribute value."""
        ...


@runtime_checkable
class ActiveRecordProtocol(AttributeAccessor, Protocol):
    """Host object exposing lifecycle events and attribute accessors."""

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        """Subscribe a handler to a named lifecycle event."""
        ...

    def off(self, event: str, handler: Callable[..., Any]) -> None:
        """Unsubscribe a handler from a named lifecycle event."""
        ...
