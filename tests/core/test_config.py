"""Unit tests for src/core/config.py and src/core/logging_config.py"""

from typing import Generator
from unittest.mock import patch

import pytest

from src.core.config import Settings, get_settings
from src.core.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """get_settings is cached: clear it around tests that change the environment."""
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CUBE_SOLVER_TIMEOUT_SECONDS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.solver_timeout_seconds == 10.0
    assert settings.default_scramble_length == 25
    assert settings.database_url.startswith("sqlite")


def test_environment_overrides(
    monkeypatch: pytest.MonkeyPatch, fresh_settings: None
) -> None:
    monkeypatch.setenv("CUBE_SOLVER_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("CUBE_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.solver_timeout_seconds == 2.5
    assert settings.log_level == "debug"
    assert get_settings() is settings


def test_configure_logging(
    monkeypatch: pytest.MonkeyPatch, fresh_settings: None
) -> None:
    """Falls back to the configured level, an explicit level wins."""
    monkeypatch.setenv("CUBE_LOG_LEVEL", "warning")
    with patch("src.core.logging_config.logging.basicConfig") as basic_config:
        configure_logging()
        basic_config.assert_called_once_with(
            level="WARNING", format=LOG_FORMAT, force=True
        )

        basic_config.reset_mock()
        configure_logging("debug")
        basic_config.assert_called_once_with(
            level="DEBUG", format=LOG_FORMAT, force=True
        )
