import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from attrcodec.core.logging import get_logger
from attrcodec.exceptions import ConfigurationError

from .codec import JsonCodecSettings
from .logging import LoggingSettings


__all__ = ["Settings", "ConfigurationError", "get_settings"]


ENV_PREFIX = "ATTRCODEC_"


class Settings(BaseSettings):
    """
    Package-wide settings for attrcodec.

    Settings are loaded from environment variables (prefixed with ``ATTRCODEC_``),
    .env files and an optional TOML configuration file. Environment variables
    take precedence over TOML values; explicit keyword overrides win over both.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    codec: JsonCodecSettings = Field(
        default_factory=JsonCodecSettings,
        description="Options for the default JSON transforms",
    )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {toml_path}: {e}") from e

    @classmethod
    def from_config(
        cls, config_path: Path | str | None = None, **kwargs: Any
    ) -> "Settings":
        """Create Settings instance from a TOML configuration file.

        Args:
            config_path: Path to a TOML file. Falls back to ``ATTRCODEC_CONFIG_FILE``.
            **kwargs: Section overrides, e.g. ``logging={"level": "DEBUG"}``

        Returns:
            Settings with TOML values applied under environment and keyword overrides
        """
        if config_path is None:
            config_path_env = os.environ.get(f"{ENV_PREFIX}CONFIG_FILE")
            if config_path_env:
                config_path = Path(config_path_env)

        if isinstance(config_path, str):
            config_path = Path(config_path)

        config_data: dict[str, Any] = {}
        if config_path is not None:
            if config_path.suffix.lower() != ".toml":
                raise ConfigurationError(
                    f"Unsupported config file format: {config_path.suffix}. "
                    "Only TOML (.toml) files are supported."
                )
            if config_path.exists():
                config_data = cls.load_toml_config(config_path)
                get_logger(__name__).info(
                    "config_file_loaded", path=str(config_path), category="config"
                )

        settings = cls()

        for key, value in config_data.items():
            if key not in cls.model_fields or not isinstance(value, dict):
                continue
            nested_obj = getattr(settings, key)
            for nested_key, nested_value in value.items():
                env_key = f"{ENV_PREFIX}{key.upper()}__{nested_key.upper()}"
                if os.getenv(env_key) is None:
                    setattr(nested_obj, nested_key, nested_value)

        def _apply_overrides(target: Any, overrides: dict[str, Any]) -> None:
            for k, v in overrides.items():
                if (
                    isinstance(v, dict)
                    and hasattr(target, k)
                    and isinstance(getattr(target, k), BaseModel)
                ):
                    _apply_overrides(getattr(target, k), v)
                else:
                    setattr(target, k, v)

        if kwargs:
            _apply_overrides(settings, kwargs)

        return settings


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings.from_config()
