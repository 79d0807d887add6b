"""Unit tests for SettingsManager."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

from tradutor.services import SettingsManager

SETTINGS_VARS = ("MYMEMORY_EMAIL", "TRANSLATOR_TIMEOUT", "TRANSLATOR_LOG_LEVEL")


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove translator settings from the environment before and after each test."""
    saved = {name: os.environ.pop(name, None) for name in SETTINGS_VARS}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


def make_settings(directory: Path, content: str) -> SettingsManager:
    (directory / ".env").write_text(content)
    return SettingsManager(project_root=directory)


class TestSettingsManagerContactEmail:
    """Tests for the MyMemory contact email."""

    def test_returns_none_when_empty(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "MYMEMORY_EMAIL=\n")
        assert settings.get_contact_email() is None

    def test_reads_value_from_env_file(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "MYMEMORY_EMAIL=dev@example.com\n")
        assert settings.get_contact_email() == "dev@example.com"

    def test_strips_whitespace(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "MYMEMORY_EMAIL='  dev@example.com  '\n")
        assert settings.get_contact_email() == "dev@example.com"

    def test_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "MYMEMORY_EMAIL='   '\n")
        assert settings.get_contact_email() is None

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_contact_email() is None

    def test_reload_env_picks_up_changes(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "MYMEMORY_EMAIL=old@example.com\n")
        assert settings.get_contact_email() == "old@example.com"

        (temp_env_dir / ".env").write_text("MYMEMORY_EMAIL=new@example.com\n")
        settings.reload_env()
        assert settings.get_contact_email() == "new@example.com"


class TestSettingsManagerTimeout:
    """Tests for the request timeout."""

    def test_default_when_unset(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_request_timeout() == SettingsManager.DEFAULT_TIMEOUT

    def test_reads_numeric_value(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "TRANSLATOR_TIMEOUT=2.5\n")
        assert settings.get_request_timeout() == 2.5

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_values_fall_back_to_default(self, temp_env_dir, clean_env, raw):
        settings = make_settings(temp_env_dir, f"TRANSLATOR_TIMEOUT={raw}\n")
        assert settings.get_request_timeout() == SettingsManager.DEFAULT_TIMEOUT


class TestSettingsManagerLogLevel:
    """Tests for the logging level."""

    def test_default_is_info(self, temp_env_dir, clean_env):
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_log_level() == logging.INFO

    def test_level_name_is_case_insensitive(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "TRANSLATOR_LOG_LEVEL=debug\n")
        assert settings.get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "TRANSLATOR_LOG_LEVEL=chatty\n")
        assert settings.get_log_level() == logging.INFO
