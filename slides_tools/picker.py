"""Let a user pick a presentation in the browser.

:func:`choose_presentation` starts a loopback WSGI server that serves the
Google Picker page, opens the browser on it and waits for the page to call
back with ``?slides=<presentation id>``. The server is always shut down and
its socket closed before the function returns or raises.
"""
from __future__ import annotations

import concurrent.futures
import logging
import threading
import time
import webbrowser
from typing import Callable, Optional
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from .auth import AuthState
from .config import SlidesConfig
from .errors import PickerCancelled, PickerError, PickerTimeout
from .templates import render_template

logger = logging.getLogger(__name__)

CALLBACK_PREFIX = "slides="
NO_SELECTION = "NA"


class _QuietHandler(WSGIRequestHandler):
    def log_message(self, format, *args):
        logger.debug("picker: " + format, *args)


class PickerApp:
    """
    WSGI app behind the picker.

    Any request with a query string is the callback; everything else gets the
    picker page (``/`` and ``/index.html``) or a 404.
    """

    def __init__(self, result: concurrent.futures.Future, page: str = ""):
        self.result = result
        self.page = page

    def __call__(self, environ, start_response):
        query = environ.get("QUERY_STRING", "")
        path = environ.get("PATH_INFO", "/")

        if query:
            chosen = query.replace(CALLBACK_PREFIX, "", 1)
            if not self.result.done():
                self.result.set_result(chosen)
                logger.debug("Picker callback received: %s", chosen)
            return self._respond(start_response, "200 OK", "Selection received. You can close this window.")
        if path in ("/", "/index.html"):
            return self._respond(start_response, "200 OK", self.page)
        return self._respond(start_response, "404 Not Found", "Not found")

    @staticmethod
    def _respond(start_response, status, text):
        body = text.encode("utf-8")
        start_response(status, [
            ("Content-Type", "text/html; charset=utf-8"),
            ("Content-Length", str(len(body))),
        ])
        return [body]


def _wait_for_choice(result, timeout, cancel, poll_interval):
    deadline = None if timeout is None else time.monotonic() + timeout
    while True:
        if cancel is not None and cancel.is_set():
            raise PickerCancelled("Presentation picker was cancelled.")
        wait = poll_interval if cancel is not None else None
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise PickerTimeout(f"No presentation chosen within {timeout} seconds.")
            wait = remaining if wait is None else min(wait, remaining)
        try:
            return result.result(timeout=wait)
        except concurrent.futures.TimeoutError:
            continue


def choose_presentation(
    auth: AuthState,
    config: Optional[SlidesConfig] = None,
    *,
    timeout: Optional[float] = None,
    cancel: Optional[threading.Event] = None,
    open_browser: Callable[[str], object] = webbrowser.open,
    poll_interval: float = 0.1,
) -> str:
    """
    Open the Google Picker and return the ID of the chosen presentation.

    Args:
        auth: Supplies the access token, OAuth client and API key for the page
        config: Picker host, port and default timeout; defaults to ``auth.config``
        timeout: Seconds to wait; ``None`` uses ``config.picker_timeout`` (unbounded if unset)
        cancel: Set this event from another thread to abort the wait
        open_browser: Called with the page URL
        poll_interval: How often the cancel event is checked

    Raises:
        PickerError: If the user closed the picker without choosing
        PickerTimeout: If nothing was chosen in time
        PickerCancelled: If *cancel* was set
    """
    config = config or auth.config
    if timeout is None:
        timeout = config.picker_timeout

    creds = auth.token()
    client = auth.oauth_client
    result = concurrent.futures.Future()
    app = PickerApp(result)

    server: WSGIServer = make_server(
        config.picker_host, config.picker_port, app, handler_class=_QuietHandler
    )
    thread = threading.Thread(
        target=server.serve_forever,
        kwargs={"poll_interval": 0.05},
        name="slides-picker",
        daemon=True,
    )
    try:
        base_url = f"http://{config.picker_host}:{server.server_port}"
        app.page = render_template(
            "picker",
            client_id=client.client_id if client else None,
            api_key=auth.api_key,
            app_id=client.app_id if client else None,
            access_token=creds.token if creds is not None else None,
            callback_url=f"{base_url}/",
        )
        thread.start()
        logger.info("Waiting for authentication in browser...")
        open_browser(f"{base_url}/index.html")
        chosen = _wait_for_choice(result, timeout, cancel, poll_interval)
    finally:
        # shutdown() blocks until serve_forever exits, so only call it once serving
        if thread.is_alive():
            server.shutdown()
            thread.join()
        server.server_close()
        logger.debug("Picker server on port %d closed", server.server_port)

    if chosen == NO_SELECTION:
        raise PickerError("Presentation authorisation failed.")
    logger.info("Presentation authorisation complete.")
    return chosen
