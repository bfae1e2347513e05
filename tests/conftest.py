import json
import sys
from pathlib import Path

import httplib2
import pytest

# Ensure project root is on sys.path so `import slides_tools` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from google.oauth2.credentials import Credentials  # noqa: E402

from slides_tools.auth import AuthState, OAuthClient  # noqa: E402
from slides_tools.config import SlidesConfig  # noqa: E402


class RecordingHttp:
    """Stands in for ``httplib2.Http``: records each call and replays queued replies."""

    def __init__(self):
        self.calls = []
        self.replies = []

    def reply(self, payload=None, status=200):
        self.replies.append((status, payload))
        return self

    def request(self, uri, method="GET", body=None, headers=None, **kwargs):
        self.calls.append({
            "uri": uri,
            "method": method,
            "body": body,
            "headers": dict(headers or {}),
        })
        status, payload = self.replies.pop(0) if self.replies else (200, {})
        content = b"" if payload is None else json.dumps(payload).encode("utf-8")
        return httplib2.Response({"status": str(status)}), content

    @property
    def last(self):
        return self.calls[-1]

    def last_json(self):
        return json.loads(self.last["body"])


@pytest.fixture
def http():
    return RecordingHttp()


@pytest.fixture
def config(tmp_path):
    return SlidesConfig(
        token_cache_path=tmp_path / "token.json",
        picker_port=0,
    )


@pytest.fixture
def auth(config):
    return AuthState(
        config,
        client=OAuthClient("123456789-demo.apps.googleusercontent.com", "secret"),
        api_key="API-KEY",
        credentials=Credentials(token="abc"),
    )
