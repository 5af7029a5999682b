"""Reminder date rule.

Computes the Nth occurrence of a weekday in a month (the 4th Wednesday by
default) at a fixed local hour, and the month-by-month window of reminder
dates built from it.
"""

import calendar
import logging
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from reminders.errors import TimeZoneError

logger = logging.getLogger(__name__)

# Bins go out on the 4th Wednesday of every month
REMINDER_WEEKDAY = calendar.WEDNESDAY
REMINDER_OCCURRENCE = 4
REMINDER_DAY_OFFSET = 0

DEFAULT_EVENT_HOUR = 16


def load_timezone(name: str) -> ZoneInfo:
    """Load an IANA time zone.

    Raises:
        TimeZoneError: If the zone name is unknown or no tz data is installed.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimeZoneError(f"Unable to load time location {name!r}: {e}") from e


def nth_weekday(
    year: int,
    month: int,
    weekday: int,
    occurrence: int,
    day_offset: int = 0,
    hour: int = DEFAULT_EVENT_HOUR,
    tz: tzinfo | None = None,
) -> datetime | None:
    """Find the Nth occurrence of a weekday in a month.

    Scans the month from its first day, counting days that fall on
    ``weekday``. Each candidate is built at ``hour`` local time in ``tz``, so
    daylight-saving transitions are applied per day.

    Args:
        year: Calendar year.
        month: Month number, 1-12.
        weekday: Target weekday, Monday is 0 (see the ``calendar`` constants).
        occurrence: Which occurrence to return, 1 for the first.
        day_offset: Days added to the found occurrence (-1 for the day before).
        hour: Local hour of the returned datetime.
        tz: Time zone of the returned datetime, or None for a naive one.

    Returns:
        The shifted datetime, or None if the month has fewer than
        ``occurrence`` such weekdays.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if occurrence < 1:
        raise ValueError(f"occurrence must be at least 1, got {occurrence}")

    _, days_in_month = calendar.monthrange(year, month)
    count = 0
    for day in range(1, days_in_month + 1):
        candidate = datetime(year, month, day, hour, tzinfo=tz)
        if candidate.weekday() != weekday:
            continue
        count += 1
        if count == occurrence:
            # Wall-clock shift: the hour survives a DST change in between
            return candidate + timedelta(days=day_offset)

    return None


def event_window(
    start_year: int,
    nb_of_years: int,
    tz: tzinfo | None,
    hour: int = DEFAULT_EVENT_HOUR,
) -> list[datetime]:
    """Compute one reminder date per month over ``nb_of_years`` years.

    Returns:
        Dates in chronological order, starting January of ``start_year``.
    """
    dates: list[datetime] = []
    for year in range(start_year, start_year + nb_of_years):
        for month in range(1, 13):
            date = nth_weekday(
                year,
                month,
                REMINDER_WEEKDAY,
                REMINDER_OCCURRENCE,
                day_offset=REMINDER_DAY_OFFSET,
                hour=hour,
                tz=tz,
            )
            if date is None:
                logger.warning("No reminder date for %04d-%02d, skipping", year, month)
                continue
            dates.append(date)
    return dates
