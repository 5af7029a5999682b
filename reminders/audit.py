"""Calendar API call log.

Logs every calendar and event insert to daily log files as newline-delimited
JSON (NDJSON). A run that dies partway through leaves a record of which
months were created.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

# Directory for API call logs
LOG_DIR = Path(__file__).parent.parent / "logs" / "api_calls"

# Standard Python logger for error-level events
_error_logger = logging.getLogger("reminders.audit")


def _ensure_log_dir() -> None:
    """Create the log directory if it doesn't exist."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def log_api_call(
    kind: str,
    request_body: dict[str, Any],
    response: dict[str, Any] | None = None,
    error: str | None = None,
) -> None:
    """Append one API call to today's log file.

    Args:
        kind: What was inserted, "calendar" or "event".
        request_body: The body sent to the API.
        response: The API response, if the call succeeded.
        error: The failure message, if the call failed.
    """
    try:
        _ensure_log_dir()
        today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        log_file = LOG_DIR / f"{today}.log"

        log_entry = {
            "logged_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "kind": kind,
            "status": "failed" if error else "ok",
            "request": request_body,
            "response_id": (response or {}).get("id"),
            "error": error,
        }

        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, default=str) + "\n")
    except OSError as e:
        _error_logger.error("Failed to write API call log: %s", e)
