"""Tests for global settings."""

import pytest

from config.settings import load_settings
from reminders.errors import ConfigurationError

ENV_VARS = [
    "GOOGLE_CALENDAR_CREDENTIALS_PATH", "GOOGLE_CALENDAR_TOKEN_PATH", "CALENDAR_NAME",
    "EVENT_TITLE", "USER_TIMEZONE", "START_YEAR", "NB_OF_YEARS", "EVENT_HOUR", "CALLBACK_PORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.google_credentials_path == "credentials.json"
        assert settings.google_token_path == "token.json"
        assert settings.calendar_name == "Poubelles"
        assert settings.event_title == "Sortir les poubelles de verre"
        assert settings.user_timezone == "Europe/Paris"
        assert settings.start_year == 2023
        assert settings.nb_of_years == 10
        assert settings.event_hour == 16
        assert settings.callback_port == 3000
        assert settings.redirect_uri == "http://localhost:3000/"

    def test_overrides_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("CALENDAR_NAME", "Recycling")
        monkeypatch.setenv("USER_TIMEZONE", "America/Los_Angeles")
        monkeypatch.setenv("START_YEAR", "2025")
        monkeypatch.setenv("NB_OF_YEARS", "2")
        monkeypatch.setenv("CALLBACK_PORT", "8080")

        settings = load_settings()
        assert settings.calendar_name == "Recycling"
        assert settings.user_timezone == "America/Los_Angeles"
        assert settings.start_year == 2025
        assert settings.nb_of_years == 2
        assert settings.redirect_uri == "http://localhost:8080/"

    def test_non_integer_is_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("START_YEAR", "next year")
        with pytest.raises(ConfigurationError, match="START_YEAR"):
            load_settings()

    def test_zero_years_is_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("NB_OF_YEARS", "0")
        with pytest.raises(ConfigurationError, match="NB_OF_YEARS"):
            load_settings()

    def test_hour_out_of_range(self, monkeypatch) -> None:
        monkeypatch.setenv("EVENT_HOUR", "24")
        with pytest.raises(ConfigurationError, match="EVENT_HOUR"):
            load_settings()
