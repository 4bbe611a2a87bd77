"""
Tests for settings resolved from the environment.
"""

import pytest

from moonshot_export.config import (
    DEFAULT_BASE_URL,
    DEFAULT_DATABASE_URL,
    DEFAULT_LOG_LEVEL,
    Settings,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "MOONSHOT_EXPORT_DATABASE_URL",
        "MOONSHOT_EXPORT_BASE_URL",
        "MOONSHOT_EXPORT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env()

        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.log_level == DEFAULT_LOG_LEVEL

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("MOONSHOT_EXPORT_DATABASE_URL", "sqlite:///other.db")
        monkeypatch.setenv("MOONSHOT_EXPORT_BASE_URL", "http://localhost:8000")

        settings = Settings.from_env()

        assert settings.database_url == "sqlite:///other.db"
        assert settings.base_url == "http://localhost:8000"

    @pytest.mark.parametrize("value, expected", [
        ("debug", "DEBUG"),
        ("Info", "INFO"),
        ("ERROR", "ERROR"),
    ])
    def test_level_names_are_case_insensitive(self, monkeypatch, value: str, expected: str):
        monkeypatch.setenv("MOONSHOT_EXPORT_LOG_LEVEL", value)

        assert Settings.from_env().log_level == expected

    @pytest.mark.parametrize("value", ["verbose", "", "10", "Level 5"])
    def test_unknown_level_falls_back_to_warning(self, monkeypatch, value: str):
        monkeypatch.setenv("MOONSHOT_EXPORT_LOG_LEVEL", value)

        assert Settings.from_env().log_level == "WARNING"
