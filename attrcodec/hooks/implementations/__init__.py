"""Built-in hook implementations for attrcodec.

- SerializeHook: Serializes configured attributes around save and load
- LoggingHook: Structured logging of lifecycle events
"""

from .logging import LoggingHook
from .serialize import EVENT_OPERATIONS, SerializeHook, process_attributes


__all__ = ["EVENT_OPERATIONS", "LoggingHook", "SerializeHook", "process_attributes"]
