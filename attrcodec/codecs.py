"""Value transforms used by the serialize hook.

The default pair encodes attribute values to compact JSON text before a write
and decodes them back after a read. Any plain callable can stand in for either
side through ``CallableTransformer``.
"""

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from attrcodec.core.interfaces import Transformer


if TYPE_CHECKING:
    from attrcodec.config.codec import JsonCodecSettings


__all__ = [
    "CallableTransformer",
    "JsonDeserializer",
    "JsonSerializer",
    "as_transformer",
]


class CallableTransformer:
    """Adapt a plain ``value -> value`` callable to the Transformer interface."""

    def __init__(self, func: Callable[[Any], Any]):
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        self.func = func

    def transform(self, value: Any) -> Any:
        return self.func(value)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", None) or repr(self.func)
        return f"CallableTransformer({name})"


def as_transformer(candidate: Any) -> Transformer:
    """Return ``candidate`` as a Transformer.

    Objects exposing a callable ``transform`` are returned unchanged; other
    callables are wrapped in CallableTransformer.

    Raises:
        TypeError: If the candidate is neither a Transformer nor callable
    """
    if (
        not isinstance(candidate, type)
        and isinstance(candidate, Transformer)
        and callable(getattr(candidate, "transform", None))
    ):
        return candidate
    if callable(candidate):
        return CallableTransformer(candidate)
    raise TypeError(f"{candidate!r} is neither a Transformer nor callable")


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonSerializer:
    """Encode in-memory values to JSON text."""

    def __init__(
        self,
        ensure_ascii: bool = False,
        sort_keys: bool = False,
        compact: bool = True,
    ):
        self.ensure_ascii = ensure_ascii
        self.sort_keys = sort_keys
        self.compact = compact

    @classmethod
    def from_settings(cls, settings: "JsonCodecSettings") -> "JsonSerializer":
        return cls(
            ensure_ascii=settings.ensure_ascii,
            sort_keys=settings.sort_keys,
            compact=settings.compact,
        )

    def transform(self, value: Any) -> str:
        """Encode a value to JSON.

        Raises:
            TypeError: If the value holds objects JSON cannot represent
        """
        separators = (",", ":") if self.compact else None
        return json.dumps(
            value,
            ensure_ascii=self.ensure_ascii,
            sort_keys=self.sort_keys,
            separators=separators,
            default=_json_default,
        )

    def __repr__(self) -> str:
        return (
            f"JsonSerializer(ensure_ascii={self.ensure_ascii}, "
            f"sort_keys={self.sort_keys}, compact={self.compact})"
        )


class JsonDeserializer:
    """Decode JSON text back to in-memory values."""

    def __init__(self, empty_as_none: bool = True):
        self.empty_as_none = empty_as_none

    @classmethod
    def from_settings(cls, settings: "JsonCodecSettings") -> "JsonDeserializer":
        return cls(empty_as_none=settings.empty_as_none)

    def transform(self, value: Any) -> Any:
        """Decode JSON text.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
            TypeError: If the value is not str, bytes or bytearray
        """
        if self.empty_as_none and value in ("", b""):
            return None
        return json.loads(value)

    def __repr__(self) -> str:
        return f"JsonDeserializer(empty_as_none={self.empty_as_none})"
