"""Google Calendar API wrapper.

Handles OAuth token loading, the interactive authorization-code flow, token
caching, and API client initialization. This module isolates all
Google-specific auth code so the provisioning logic stays clean.
"""

import logging
import os
from pathlib import Path
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from reminders.errors import AuthorizationError, CalendarApiError

logger = logging.getLogger(__name__)

# See, edit, share, and permanently delete all the calendars you can access
SCOPES = ["https://www.googleapis.com/auth/calendar"]


def load_cached_credentials(token_path: str) -> Credentials | None:
    """Load or refresh credentials from the token cache.

    Args:
        token_path: Path to the saved token JSON file.

    Returns:
        Valid Credentials, or None if the cache is missing, unreadable, or
        holds a token that can't be refreshed.
    """
    token_file = Path(token_path)
    if not token_file.exists():
        return None

    try:
        creds = Credentials.from_authorized_user_file(str(token_file), SCOPES)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable token cache %s: %s", token_path, e)
        return None

    if creds.valid:
        return creds

    if creds.expired and creds.refresh_token:
        logger.info("Refreshing expired token...")
        try:
            creds.refresh(Request())
        except GoogleAuthError as e:
            logger.warning("Token refresh failed: %s", e)
            return None
        save_token(token_path, creds)
        logger.info("Token refreshed and saved.")
        return creds

    return None


def get_token_from_web(credentials_path: str, redirect_uri: str) -> Credentials:
    """Run the interactive authorization-code flow.

    Prints the consent URL, then blocks until the user types the code that the
    callback listener echoed to the console.

    Args:
        credentials_path: Path to the OAuth client credentials JSON file.
        redirect_uri: Where Google sends the browser after consent.

    Returns:
        Fresh Credentials.

    Raises:
        AuthorizationError: If the client secret is unreadable or malformed,
            no code is entered, or the code exchange fails.
    """
    try:
        flow = Flow.from_client_secrets_file(credentials_path, SCOPES, redirect_uri=redirect_uri)
    except OSError as e:
        raise AuthorizationError(f"Unable to read client secret file: {e}") from e
    except ValueError as e:
        raise AuthorizationError(f"Unable to parse client secret file to config: {e}") from e

    auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")
    print("Go to the following link in your browser then type the authorization code:")
    print(auth_url)

    try:
        code = input("Authorization code: ").strip()
    except EOFError as e:
        raise AuthorizationError("Unable to read authorization code: no input") from e
    if not code:
        raise AuthorizationError("Unable to read authorization code: empty input")

    try:
        flow.fetch_token(code=code)
    except Exception as e:
        raise AuthorizationError(f"Unable to retrieve token from web: {e}") from e

    return flow.credentials


def save_token(token_path: str, creds: Credentials) -> None:
    """Write credentials to the token cache, readable by the owner only.

    Raises:
        AuthorizationError: If the file can't be written.
    """
    print(f"Saving credential file to: {token_path}")
    try:
        fd = os.open(token_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(creds.to_json())
        # O_CREAT's mode is ignored when the file already exists
        os.chmod(token_path, 0o600)
    except OSError as e:
        raise AuthorizationError(f"Unable to cache oauth token: {e}") from e


def get_credentials(credentials_path: str, token_path: str, redirect_uri: str) -> Credentials:
    """Return cached credentials, or authorize interactively and cache them.

    Args:
        credentials_path: Path to the OAuth client credentials JSON file.
        token_path: Path to the token cache.
        redirect_uri: Redirect URI served by the callback listener.

    Returns:
        Valid Credentials.
    """
    creds = load_cached_credentials(token_path)
    if creds is not None:
        logger.info("Using cached token from %s", token_path)
        return creds

    creds = get_token_from_web(credentials_path, redirect_uri)
    save_token(token_path, creds)
    return creds


def build_calendar_service(creds: Credentials) -> Any:
    """Build an authenticated Google Calendar v3 client.

    Raises:
        CalendarApiError: If the client can't be constructed.
    """
    try:
        return build("calendar", "v3", credentials=creds, cache_discovery=False)
    except Exception as e:
        raise CalendarApiError(f"Unable to retrieve Calendar client: {e}") from e
