"""Test the browser presentation picker against a real loopback socket."""

import concurrent.futures
import socket
import threading
import urllib.error
import urllib.request
from urllib.parse import urlparse

import pytest
from slides_tools.errors import PickerCancelled, PickerError, PickerTimeout
from slides_tools.picker import PickerApp, choose_presentation


def _get(url):
    with urllib.request.urlopen(url, timeout=5) as resp:
        return resp.status, resp.read().decode("utf-8")


def _assert_port_released(url):
    """Binding a new listener on the picker's port must succeed."""
    parsed = urlparse(url)
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((parsed.hostname, parsed.port))
        sock.listen(1)
    finally:
        sock.close()


class FakeBrowser:
    """Plays the part of the picker page: loads it, then calls back."""

    def __init__(self, query=None):
        self.query = query
        self.url = None
        self.page = None

    def __call__(self, url):
        self.url = url
        status, self.page = _get(url)
        assert status == 200
        if self.query is not None:
            _get(url.replace("/index.html", f"/?{self.query}"))


def test_returns_chosen_presentation_id(auth, config):
    browser = FakeBrowser("slides=ABC123")

    chosen = choose_presentation(auth, config, timeout=10, open_browser=browser)

    assert chosen == "ABC123"
    assert browser.url.startswith("http://127.0.0.1:")
    assert browser.url.endswith("/index.html")
    _assert_port_released(browser.url)


def test_page_carries_client_settings(auth, config):
    browser = FakeBrowser("slides=XYZ")

    choose_presentation(auth, config, timeout=10, open_browser=browser)

    assert '"abc"' in browser.page  # access token
    assert '"API-KEY"' in browser.page
    assert '"123456789-demo.apps.googleusercontent.com"' in browser.page
    assert '"123456789"' in browser.page  # app id
    assert "google.picker" in browser.page


def test_no_selection_raises(auth, config):
    browser = FakeBrowser("slides=NA")

    with pytest.raises(PickerError, match="Presentation authorisation failed."):
        choose_presentation(auth, config, timeout=10, open_browser=browser)
    _assert_port_released(browser.url)


def test_server_closed_when_browser_launch_fails(auth, config):
    seen = {}

    def broken_browser(url):
        seen["url"] = url
        raise RuntimeError("no display")

    with pytest.raises(RuntimeError, match="no display"):
        choose_presentation(auth, config, timeout=10, open_browser=broken_browser)
    _assert_port_released(seen["url"])


def test_server_closed_when_page_render_fails(auth, config, monkeypatch):
    from slides_tools import picker

    real_make_server = picker.make_server
    servers = []

    def recording_make_server(*args, **kwargs):
        server = real_make_server(*args, **kwargs)
        servers.append(server)
        return server

    def broken_render(*args, **kwargs):
        raise ValueError("template missing")

    monkeypatch.setattr(picker, "make_server", recording_make_server)
    monkeypatch.setattr(picker, "render_template", broken_render)

    with pytest.raises(ValueError, match="template missing"):
        choose_presentation(auth, config, timeout=10, open_browser=FakeBrowser())

    assert len(servers) == 1
    assert servers[0].socket.fileno() == -1


def test_timeout(auth, config):
    browser = FakeBrowser()

    with pytest.raises(PickerTimeout):
        choose_presentation(auth, config, timeout=0.3, open_browser=browser)
    _assert_port_released(browser.url)


def test_default_timeout_comes_from_config(auth, config):
    config.picker_timeout = 0.3
    browser = FakeBrowser()

    with pytest.raises(PickerTimeout):
        choose_presentation(auth, config, open_browser=browser)


def test_cancel(auth, config):
    cancel = threading.Event()
    seen = {}

    def browser(url):
        seen["url"] = url
        cancel.set()

    with pytest.raises(PickerCancelled):
        choose_presentation(auth, config, timeout=10, cancel=cancel, open_browser=browser)
    _assert_port_released(seen["url"])


def test_timeout_and_cancel_are_picker_errors():
    assert issubclass(PickerTimeout, PickerError)
    assert issubclass(PickerCancelled, PickerError)


def _call(app, path="/", query=""):
    captured = {}

    def start_response(status, headers):
        captured["status"] = status

    body = b"".join(app({"PATH_INFO": path, "QUERY_STRING": query}, start_response))
    return captured["status"], body.decode("utf-8")


def test_app_strips_prefix_without_decoding():
    result = concurrent.futures.Future()
    app = PickerApp(result, page="<html>picker</html>")

    status, _ = _call(app, query="slides=1a%2Fb")

    assert status == "200 OK"
    assert result.result(timeout=0) == "1a%2Fb"


def test_app_keeps_first_callback():
    result = concurrent.futures.Future()
    app = PickerApp(result)

    _call(app, query="slides=first")
    _call(app, query="slides=second")

    assert result.result(timeout=0) == "first"


def test_app_serves_page_and_404():
    result = concurrent.futures.Future()
    app = PickerApp(result, page="<html>picker</html>")

    assert _call(app, "/index.html") == ("200 OK", "<html>picker</html>")
    assert _call(app, "/")[1] == "<html>picker</html>"
    assert _call(app, "/favicon.ico")[0] == "404 Not Found"
    assert not result.done()
