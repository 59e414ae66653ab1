"""Tests for environment configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

import core.config as config
from core.logging_config import configure_logging


def test_env_overrides_unset(monkeypatch) -> None:
    monkeypatch.delenv(config.ENV_API_KEY, raising=False)
    monkeypatch.delenv(config.ENV_API_BASE_URL, raising=False)

    assert config.get_env_api_key() is None
    assert config.get_env_api_base_url() is None


def test_env_overrides_are_stripped(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_API_KEY, "  key-123 ")
    monkeypatch.setenv(config.ENV_API_BASE_URL, "https://proxy.example/")

    assert config.get_env_api_key() == "key-123"
    assert config.get_env_api_base_url() == "https://proxy.example/"


def test_blank_env_override_counts_as_unset(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_API_KEY, "   ")
    assert config.get_env_api_key() is None


def test_app_dir_under_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert config.get_app_dir() == tmp_path / ".gemini_desk"


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_configure_logging_writes_file(tmp_path: Path, restore_logging) -> None:
    log_file = configure_logging(tmp_path / "logs", file_level="debug", console_level="error")

    logging.getLogger("gemini_desk.test").debug("hello from test")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file == tmp_path / "logs" / "gemini_desk.log"
    assert "hello from test" in log_file.read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_unknown_level_falls_back_to_info(tmp_path: Path, restore_logging) -> None:
    configure_logging(tmp_path, file_level="chatty", console_level="nonsense")
    assert logging.getLogger().level == logging.INFO
