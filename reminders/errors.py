"""Errors raised by the reminder provisioning flow.

Every failure is fatal for the run. Lower-level functions raise one of these
and ``main()`` turns it into a logged diagnostic and a non-zero exit.
"""


class ReminderError(Exception):
    """Base class for all fatal provisioning failures."""


class ConfigurationError(ReminderError):
    """Settings are missing or malformed."""


class AuthorizationError(ReminderError):
    """The OAuth client secret, code exchange, or token cache failed."""


class CalendarApiError(ReminderError):
    """A Google Calendar API call failed."""


class TimeZoneError(ReminderError):
    """The configured time zone could not be loaded."""
