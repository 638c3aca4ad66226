"""Unit tests for application settings configuration."""

import json
import logging
from pathlib import Path

import pytest

from newsdesk import config
from newsdesk.config import Settings


@pytest.fixture
def settings_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "settings.json"
    monkeypatch.setattr(config, "_SETTINGS_FILE", path)
    return path


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_defaults(settings_file: Path):
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_level_scripting == "WARNING"
    assert settings.log_colors is True


def test_settings_read_prefixed_environment(settings_file: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NEWSDESK_LOG_LEVEL_STORE", "DEBUG")
    monkeypatch.setenv("NEWSDESK_LOG_COLORS", "false")
    settings = Settings(_env_file=None)
    assert settings.log_level_store == "DEBUG"
    assert settings.log_colors is False


def test_settings_file_overrides_log_levels_only(settings_file: Path):
    settings_file.write_text(
        json.dumps({"log_level_store": "ERROR", "app_title": "Ignored"}), encoding="utf-8"
    )
    settings = Settings(_env_file=None)
    assert settings.log_level_store == "ERROR"
    assert settings.app_title == "Newsdesk"


def test_unreadable_settings_file_is_reported(settings_file: Path, caplog: pytest.LogCaptureFixture):
    settings_file.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="newsdesk.config"):
        settings = Settings(_env_file=None)
    assert settings.log_level_store == "INFO"
    assert "Could not load settings overrides" in caplog.text
