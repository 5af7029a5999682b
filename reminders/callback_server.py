"""OAuth redirect listener.

Google redirects the browser here after consent. The listener only echoes the
``code`` query parameter to the console so the user can paste it into the
waiting prompt; it never talks to the main flow directly.
"""

import logging
import time
from threading import Thread

import requests
from flask import Flask, Response, request

logger = logging.getLogger(__name__)

app = Flask(__name__)

REDIRECT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@app.route("/", defaults={"_path": ""}, methods=REDIRECT_METHODS)
@app.route("/<path:_path>", methods=REDIRECT_METHODS)
def handle_redirect(_path: str) -> Response:
    """Print the authorization code carried by the redirect, if any."""
    code = request.args.get("code", "")
    if code:
        print(f"Copy/paste this code and press enter: {code}")
        return Response(
            "Authorization code received. Paste it into the terminal.",
            mimetype="text/plain",
        )
    return Response("Waiting for an authorization code.", mimetype="text/plain")


def start_callback_listener(port: int) -> Thread:
    """Serve the listener in a background daemon thread.

    The thread lives until the process exits. A bind failure is logged from
    inside the thread and does not stop the main flow.

    Args:
        port: Port number to bind to.

    Returns:
        The started Thread.
    """
    def run():
        # Suppress Werkzeug request logs
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
        try:
            app.run(host="127.0.0.1", port=port, debug=False, use_reloader=False)
        except OSError as e:
            logger.error("Callback listener stopped: %s", e)

    thread = Thread(target=run, name="OAuth Callback Listener", daemon=True)
    thread.start()
    return thread


def wait_for_listener(port: int, timeout: int = 5) -> bool:
    """Wait until the listener answers on ``port``.

    Args:
        port: Port the listener was started on.
        timeout: Max seconds to wait.

    Returns:
        True if the listener is up, False on timeout.
    """
    url = f"http://127.0.0.1:{port}/"
    start = time.time()

    while time.time() - start < timeout:
        try:
            resp = requests.get(url, timeout=2)
            if resp.status_code == 200:
                return True
        except requests.RequestException:
            pass
        time.sleep(0.3)

    return False
