"""Configuration model for the serialize hook."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from attrcodec.codecs import JsonDeserializer, JsonSerializer, as_transformer
from attrcodec.core.interfaces import Transformer
from attrcodec.exceptions import ConfigurationError

from .settings import get_settings


def _default_serializer() -> Transformer:
    return JsonSerializer.from_settings(get_settings().codec)


def _default_deserializer() -> Transformer:
    return JsonDeserializer.from_settings(get_settings().codec)


class SerializeHookConfig(BaseModel):
    """Validated configuration of a SerializeHook.

    ``attributes`` accepts either a comma-separated string or a sequence of
    names and is normalized to a tuple. ``serialize`` and ``deserialize``
    accept a Transformer or any ``value -> value`` callable.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    attributes: tuple[str, ...] = Field(
        description="Names of the attributes to serialize and deserialize",
    )

    serialize: Any = Field(
        default_factory=_default_serializer,
        description="Transform applied before insert and update",
    )

    deserialize: Any = Field(
        default_factory=_default_deserializer,
        description="Transform applied after find, insert and update",
    )

    @field_validator("attributes", mode="before")
    @classmethod
    def normalize_attributes(cls, v: Any) -> tuple[str, ...]:
        """Split comma-separated strings and reject empty or malformed lists."""
        if not v:
            raise ValueError('The "attributes" property must be set.')

        if isinstance(v, str):
            names = tuple(part.strip() for part in v.split(","))
            names = tuple(name for name in names if name)
            if not names:
                raise ValueError('The "attributes" property must be set.')
            return names

        if isinstance(v, Sequence) and not isinstance(v, bytes | bytearray):
            if not all(isinstance(name, str) for name in v):
                raise ValueError(
                    'The "attributes" property must contain only attribute names.'
                )
            names = tuple(name.strip() for name in v if name.strip())
            if not names:
                raise ValueError('The "attributes" property must be set.')
            return names

        raise ValueError('The "attributes" property must be string or sequence.')

    @field_validator("serialize", "deserialize", mode="before")
    @classmethod
    def validate_transform(cls, v: Any) -> Transformer:
        """Accept Transformers as-is and wrap plain callables."""
        try:
            return as_transformer(v)
        except TypeError as e:
            raise ValueError(
                'The "serialize" and "deserialize" properties must be callable.'
            ) from e

    @classmethod
    def build(
        cls,
        attributes: Any = None,
        serialize: Any = None,
        deserialize: Any = None,
    ) -> "SerializeHookConfig":
        """Validate raw options, converting failures to ConfigurationError.

        Args:
            attributes: Comma-separated string or sequence of attribute names
            serialize: Serialize transform; None selects the JSON default
            deserialize: Deserialize transform; None selects the JSON default

        Raises:
            ConfigurationError: If any option is missing or malformed
        """
        options: dict[str, Any] = {"attributes": attributes}
        if serialize is not None:
            options["serialize"] = serialize
        if deserialize is not None:
            options["deserialize"] = deserialize

        try:
            return cls(**options)
        except ValidationError as e:
            messages = "; ".join(
                str(error.get("ctx", {}).get("error", error["msg"]))
                for error in e.errors()
            )
            raise ConfigurationError(messages) from e
