"""Shared test fixtures and configuration for attrcodec tests."""

import os
from collections.abc import Generator

import pytest

from attrcodec.config.settings import get_settings
from attrcodec.core.logging import setup_logging


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom settings."""
    # Reuse the package logging pipeline so structlog output matches runtime
    setup_logging(json_logs=False, log_level_name="DEBUG")


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def isolated_environment(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Run the test from an empty directory without ATTRCODEC_* variables."""
    for key in list(os.environ):
        if key.upper().startswith("ATTRCODEC_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
