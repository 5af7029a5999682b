"""Global Settings - Loads configuration from environment variables.

Centralizes all configuration so the reminder modules don't read env vars directly.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from reminders.errors import ConfigurationError

load_dotenv()


@dataclass
class Settings:
    """Application-wide settings loaded from environment variables."""

    # Google Calendar
    google_credentials_path: str = "credentials.json"
    google_token_path: str = "token.json"

    # Calendar being provisioned
    calendar_name: str = "Poubelles"
    event_title: str = "Sortir les poubelles de verre"
    user_timezone: str = "Europe/Paris"

    # Event window
    start_year: int = 2023
    nb_of_years: int = 10
    event_hour: int = 16

    # OAuth redirect listener
    callback_port: int = 3000

    @property
    def redirect_uri(self) -> str:
        return f"http://localhost:{self.callback_port}/"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def load_settings() -> Settings:
    """Load settings from environment variables with sensible defaults.

    Environment variables:
        GOOGLE_CALENDAR_CREDENTIALS_PATH: Path to Google OAuth credentials.json
        GOOGLE_CALENDAR_TOKEN_PATH: Path to saved OAuth token.json
        CALENDAR_NAME: Display name of the calendar to create
        EVENT_TITLE: Title of every reminder event
        USER_TIMEZONE: IANA timezone string
        START_YEAR: First year of the event window
        NB_OF_YEARS: Number of years covered by the event window
        EVENT_HOUR: Local hour (0-23) of every reminder
        CALLBACK_PORT: Port of the local OAuth redirect listener

    Returns:
        A populated Settings instance.

    Raises:
        ConfigurationError: If a numeric variable is malformed or out of range.
    """
    settings = Settings(
        google_credentials_path=os.getenv("GOOGLE_CALENDAR_CREDENTIALS_PATH", "credentials.json"),
        google_token_path=os.getenv("GOOGLE_CALENDAR_TOKEN_PATH", "token.json"),
        calendar_name=os.getenv("CALENDAR_NAME", "Poubelles"),
        event_title=os.getenv("EVENT_TITLE", "Sortir les poubelles de verre"),
        user_timezone=os.getenv("USER_TIMEZONE", "Europe/Paris"),
        start_year=_int_env("START_YEAR", 2023),
        nb_of_years=_int_env("NB_OF_YEARS", 10),
        event_hour=_int_env("EVENT_HOUR", 16),
        callback_port=_int_env("CALLBACK_PORT", 3000),
    )

    if settings.nb_of_years < 1:
        raise ConfigurationError(f"NB_OF_YEARS must be at least 1, got {settings.nb_of_years}")
    if not 0 <= settings.event_hour <= 23:
        raise ConfigurationError(f"EVENT_HOUR must be between 0 and 23, got {settings.event_hour}")

    return settings
