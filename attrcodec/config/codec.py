"""Default codec configuration settings."""

from pydantic import BaseModel, ConfigDict, Field


class JsonCodecSettings(BaseModel):
    """Options for the default JSON serialize/deserialize transforms."""

    model_config = ConfigDict(validate_assignment=True)

    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in encoded output",
    )

    sort_keys: bool = Field(
        default=False,
        description="Sort object keys in encoded output",
    )

    compact: bool = Field(
        default=True,
        description="Encode without whitespace after separators",
    )

    empty_as_none: bool = Field(
        default=True,
        description="Decode an empty string to None instead of failing",
    )
