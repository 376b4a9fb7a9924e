import logging

import pytest

from attrcodec.codecs import JsonDeserializer, JsonSerializer
from attrcodec.config import (
    ConfigurationError,
    LoggingSettings,
    SerializeHookConfig,
    Settings,
    get_settings,
)
from attrcodec.core.logging import setup_logging, setup_logging_from_settings


@pytest.mark.unit
def test_defaults(isolated_environment):
    settings = Settings()
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "auto"
    assert settings.codec.compact is True
    assert settings.codec.ensure_ascii is False
    assert settings.codec.empty_as_none is True


@pytest.mark.unit
def test_env_overrides_defaults(isolated_environment, monkeypatch):
    monkeypatch.setenv("ATTRCODEC_LOGGING__LEVEL", "debug")
    monkeypatch.setenv("ATTRCODEC_CODEC__SORT_KEYS", "true")

    settings = Settings()
    assert settings.logging.level == "DEBUG"
    assert settings.codec.sort_keys is True


@pytest.mark.unit
def test_env_overrides_toml(tmp_path, isolated_environment, monkeypatch):
    cfg = tmp_path / "attrcodec.toml"
    cfg.write_text(
        """
    [codec]
    compact = false
    sort_keys = true
    """,
        encoding="utf-8",
    )

    monkeypatch.setenv("ATTRCODEC_CODEC__COMPACT", "true")

    settings = Settings.from_config(config_path=cfg)
    assert settings.codec.compact is True  # env > toml
    assert settings.codec.sort_keys is True


@pytest.mark.unit
def test_kwargs_override_toml(tmp_path, isolated_environment):
    cfg = tmp_path / "attrcodec.toml"
    cfg.write_text(
        """
    [logging]
    level = "warning"
    """,
        encoding="utf-8",
    )

    settings = Settings.from_config(config_path=cfg, logging={"format": "json"})
    assert settings.logging.level == "WARNING"  # normalized on assignment
    assert settings.logging.format == "json"


@pytest.mark.unit
def test_config_file_from_env(tmp_path, isolated_environment, monkeypatch):
    cfg = tmp_path / "custom.toml"
    cfg.write_text("[codec]\nempty_as_none = false\n", encoding="utf-8")
    monkeypatch.setenv("ATTRCODEC_CONFIG_FILE", str(cfg))

    assert get_settings().codec.empty_as_none is False


@pytest.mark.unit
def test_invalid_toml(tmp_path, isolated_environment):
    cfg = tmp_path / "broken.toml"
    cfg.write_text("[codec\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        Settings.from_config(config_path=cfg)


@pytest.mark.unit
def test_unsupported_config_format(tmp_path, isolated_environment):
    with pytest.raises(ConfigurationError, match="Unsupported config file format"):
        Settings.from_config(config_path=tmp_path / "config.yaml")


@pytest.mark.unit
def test_missing_config_file_uses_defaults(tmp_path, isolated_environment):
    settings = Settings.from_config(config_path=tmp_path / "absent.toml")
    assert settings.codec.compact is True


@pytest.mark.unit
@pytest.mark.parametrize("level", ["verbose", "TRACE"])
def test_invalid_log_level(level):
    with pytest.raises(ValueError, match="Invalid log level"):
        LoggingSettings(level=level)


@pytest.mark.unit
def test_invalid_log_format():
    with pytest.raises(ValueError, match="Invalid log format"):
        LoggingSettings(format="rich")


@pytest.mark.unit
def test_json_logs_resolution():
    assert LoggingSettings(format="json").json_logs is True
    assert LoggingSettings(format="console").json_logs is False


@pytest.mark.unit
def test_hook_config_defaults_follow_settings(isolated_environment, monkeypatch):
    monkeypatch.setenv("ATTRCODEC_CODEC__COMPACT", "false")

    config = SerializeHookConfig.build(attributes="meta")

    assert isinstance(config.serialize, JsonSerializer)
    assert isinstance(config.deserialize, JsonDeserializer)
    assert config.serialize.transform({"a": 1}) == '{"a": 1}'


@pytest.mark.unit
def test_hook_config_is_frozen():
    config = SerializeHookConfig.build(attributes="meta")
    with pytest.raises(ValueError):
        config.attributes = ("other",)  # type: ignore[misc]


@pytest.mark.unit
def test_hook_config_reports_every_problem():
    with pytest.raises(ConfigurationError) as exc_info:
        SerializeHookConfig.build(attributes=None, serialize=1, deserialize=2)

    message = str(exc_info.value)
    assert '"attributes" property must be set' in message
    assert "must be callable" in message


@pytest.mark.unit
def test_setup_logging_from_settings():
    try:
        setup_logging_from_settings(LoggingSettings(level="warning", format="json"))
        assert logging.getLogger().level == logging.WARNING
    finally:
        setup_logging(json_logs=False, log_level_name="DEBUG")
    assert logging.getLogger().level == logging.DEBUG
