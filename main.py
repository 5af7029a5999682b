"""Put The Bins Out - Entry Point.

Starts the OAuth redirect listener in a background thread, authenticates with
Google Calendar, creates the reminder calendar, and inserts one reminder on
the 4th Wednesday of every month of the configured window.

Usage:
    python main.py             # Create the calendar and its events
    python main.py --dry-run   # Only print the computed reminder dates
"""

import argparse
import logging
import sys

from config.settings import Settings, load_settings
from reminders.callback_server import start_callback_listener, wait_for_listener
from reminders.dates import event_window, load_timezone
from reminders.errors import ReminderError
from reminders.google_client import build_calendar_service, get_credentials
from reminders.provisioner import ReminderProvisioner

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("main")


def run(settings: Settings, dry_run: bool = False) -> int:
    """Run the provisioning workflow.

    Args:
        settings: Loaded settings.
        dry_run: If True, print the reminder dates and stop before any network call.

    Returns:
        Number of events created.

    Raises:
        ReminderError: On any failure; nothing is retried.
    """
    tz = load_timezone(settings.user_timezone)
    dates = event_window(settings.start_year, settings.nb_of_years, tz, hour=settings.event_hour)

    if dry_run:
        for date in dates:
            print(date.isoformat())
        return 0

    start_callback_listener(settings.callback_port)
    if not wait_for_listener(settings.callback_port):
        logger.warning("Callback listener is not answering on port %d", settings.callback_port)

    creds = get_credentials(
        settings.google_credentials_path,
        settings.google_token_path,
        settings.redirect_uri,
    )
    service = build_calendar_service(creds)

    provisioner = ReminderProvisioner(service, settings.user_timezone)
    calendar_id = provisioner.create_calendar(settings.calendar_name)
    return provisioner.populate(calendar_id, settings.event_title, dates)


def main() -> None:
    """Parse arguments and run the workflow, exiting non-zero on failure."""
    parser = argparse.ArgumentParser(description="Create a calendar of monthly bin reminders.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the computed reminder dates without authenticating or creating anything.",
    )
    args = parser.parse_args()

    try:
        settings = load_settings()
        created = run(settings, dry_run=args.dry_run)
    except ReminderError as e:
        logger.error("%s", e)
        sys.exit(1)

    if not args.dry_run:
        print(f"Done: {created} reminders created in '{settings.calendar_name}'")


if __name__ == "__main__":
    main()
