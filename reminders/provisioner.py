"""Reminder Provisioner - Core logic.

Creates the reminder calendar and inserts one zero-duration event per target
date, each with a single popup reminder. Calls are strictly sequential and the
first failure aborts the run.
"""

import logging
import time
from datetime import datetime
from typing import Any, Iterable

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from reminders.audit import log_api_call
from reminders.errors import CalendarApiError

# HTTP failures, transport failures, and token refreshes that fail mid-run
API_ERRORS = (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError)

logger = logging.getLogger(__name__)

REMINDER_MINUTES = 10

# Pause between creating the calendar and inserting into it
CALENDAR_CREATION_DELAY = 2.0


class ReminderProvisioner:
    """Creates a calendar and fills it with reminder events."""

    def __init__(self, service: Any, timezone: str) -> None:
        """Initialize the ReminderProvisioner.

        Args:
            service: An authenticated Google Calendar v3 client.
            timezone: IANA timezone string used for the calendar and its events.
        """
        self.service = service
        self.timezone = timezone

    def create_calendar(self, name: str) -> str:
        """Create a calendar and return its ID.

        Raises:
            CalendarApiError: If the API call fails.
        """
        body = {"summary": name, "timeZone": self.timezone}
        try:
            calendar = self.service.calendars().insert(body=body).execute()
        except API_ERRORS as e:
            log_api_call("calendar", body, error=str(e))
            raise CalendarApiError(f"Unable to create calendar: {e}") from e

        log_api_call("calendar", body, response=calendar)
        calendar_id = calendar["id"]
        print(f"Calendar created: {calendar_id}")
        logger.info("Created calendar '%s' (%s)", name, calendar_id)

        time.sleep(CALENDAR_CREATION_DELAY)
        return calendar_id

    def create_event(self, calendar_id: str, title: str, start: datetime) -> dict[str, Any]:
        """Insert one reminder event starting and ending at ``start``.

        Raises:
            CalendarApiError: If the API call fails.
        """
        body = build_event_body(title, start, self.timezone)
        try:
            event = self.service.events().insert(calendarId=calendar_id, body=body).execute()
        except API_ERRORS as e:
            log_api_call("event", body, error=str(e))
            raise CalendarApiError(f"Unable to create event for {start.isoformat()}: {e}") from e

        log_api_call("event", body, response=event)
        print(f"Event created: {event['start']['dateTime']}")
        return event

    def populate(self, calendar_id: str, title: str, dates: Iterable[datetime]) -> int:
        """Create one event per date, in order.

        Args:
            calendar_id: ID of the calendar to insert into.
            title: Title shared by every event.
            dates: Event start times, one per month.

        Returns:
            Number of events created.
        """
        created = 0
        previous_year = None
        for date in dates:
            if previous_year is not None and date.year != previous_year:
                print()
            previous_year = date.year
            self.create_event(calendar_id, title, date)
            created += 1

        if created:
            print()
        logger.info("Created %d events in calendar %s", created, calendar_id)
        return created


def build_event_body(title: str, start: datetime, timezone: str) -> dict[str, Any]:
    """Build the events.insert body for a zero-duration reminder."""
    when = {"dateTime": start.isoformat(), "timeZone": timezone}
    return {
        "summary": title,
        "location": "",
        "description": "",
        "start": dict(when),
        "end": dict(when),
        "reminders": {
            "useDefault": False,
            "overrides": [{"method": "popup", "minutes": REMINDER_MINUTES}],
        },
    }
