"""attrcodec - automatic serialization of active record attributes.

Attach a SerializeHook to an active record and the configured attributes are
encoded before every insert or update and decoded after every find, insert or
update.
"""

from .codecs import CallableTransformer, JsonDeserializer, JsonSerializer
from .exceptions import AttrCodecError, ConfigurationError
from .hooks import HookContext, LifecycleEvent
from .hooks.implementations import LoggingHook, SerializeHook, process_attributes
from .records import ActiveRecord


__version__ = "0.1.0"

__all__ = [
    "ActiveRecord",
    "AttrCodecError",
    "CallableTransformer",
    "ConfigurationError",
    "HookContext",
    "JsonDeserializer",
    "JsonSerializer",
    "LifecycleEvent",
    "LoggingHook",
    "SerializeHook",
    "process_attributes",
]
