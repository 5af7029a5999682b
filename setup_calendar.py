"""Google Calendar OAuth Setup.

Run this once to authenticate with Google Calendar and save a token without
creating anything. Starts the redirect listener, prints the consent URL, and
waits for the authorization code, then saves token.json for main.py.

Usage:
    python setup_calendar.py
"""

import logging
import sys

from config.settings import load_settings
from reminders.callback_server import start_callback_listener, wait_for_listener
from reminders.errors import ReminderError
from reminders.google_client import get_credentials

logger = logging.getLogger("setup_calendar")


def main() -> None:
    """Run the OAuth flow and save the token."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    try:
        settings = load_settings()
        print("Starting Google Calendar authentication...")
        print(f"Using credentials from: {settings.google_credentials_path}")
        print()

        start_callback_listener(settings.callback_port)
        if not wait_for_listener(settings.callback_port):
            logger.warning("Callback listener is not answering on port %d", settings.callback_port)

        get_credentials(
            settings.google_credentials_path,
            settings.google_token_path,
            settings.redirect_uri,
        )
    except ReminderError as e:
        logger.error("%s", e)
        sys.exit(1)

    print()
    print(f"Token ready at: {settings.google_token_path}")
    print("You can now run: python main.py")


if __name__ == "__main__":
    main()
