"""
Build, execute and process REST calls against the Slides API.

Every endpoint goes through the same three steps:

1. :func:`build_request` turns an :class:`ApiRequest` into a
   ``googleapiclient.http.HttpRequest`` (path placeholders expanded, empty
   query parameters dropped, body serialised by ``JsonModel``)
2. :func:`execute` sends it once; no retries
3. :func:`process_response` decodes the JSON reply or raises ``HttpError``
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import httplib2
import uritemplate
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.http import HttpRequest
from googleapiclient.model import JsonModel

from .config import DEFAULT_BASE_URL
from .models import ApiObject

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass
class ApiRequest:
    """One REST call: verb, path template and parameters."""

    method: str
    path: str
    path_params: Dict[str, Any] = field(default_factory=dict)
    query_params: Dict[str, Any] = field(default_factory=dict)
    body: Any = None

    def expand_path(self) -> str:
        """Substitute every ``{name}`` in the path template."""
        missing = [
            name for name in _PLACEHOLDER.findall(self.path)
            if self.path_params.get(name) in (None, "")
        ]
        if missing:
            raise ValueError(f"Missing path parameter(s) for {self.path}: {', '.join(missing)}")
        return uritemplate.expand(self.path, {k: str(v) for k, v in self.path_params.items()})

    def clean_query(self) -> Dict[str, Any]:
        """Query parameters without the unset ones."""
        return {
            k: v for k, v in self.query_params.items()
            if v is not None and v != "" and v != []
        }

    def body_value(self) -> Any:
        if isinstance(self.body, ApiObject):
            return self.body.to_dict()
        return self.body


def build_request(
    api_request: ApiRequest,
    http,
    base_url: str = DEFAULT_BASE_URL,
    api_key: Optional[str] = None,
    model: Optional[JsonModel] = None,
) -> HttpRequest:
    """
    Assemble an executable request.

    Args:
        api_request: What to call
        http: ``httplib2.Http``-compatible object the request will go through
        base_url: API root
        api_key: Sent as the ``key`` query parameter when given
        model: Serialisation model; a fresh ``JsonModel`` by default

    Raises:
        ValueError: If a path placeholder has no value
    """
    model = model or JsonModel()
    path = api_request.expand_path()
    query = api_request.clean_query()
    logger.debug("%s %s %s", api_request.method, path, query)
    if api_key:
        query["key"] = api_key

    headers, _, query_string, body = model.request({}, {}, query, api_request.body_value())
    uri = urljoin(base_url, path) + query_string
    return HttpRequest(
        http,
        model.response,
        uri,
        method=api_request.method,
        body=body,
        headers=headers,
    )


def execute(request: HttpRequest) -> Any:
    """Send *request* exactly once and return its processed response."""
    return request.execute(num_retries=0)


def process_response(resp: httplib2.Response, content: bytes, model: Optional[JsonModel] = None) -> Any:
    """
    Decode a raw reply.

    Returns the parsed JSON body, ``{}`` for 204 No Content.

    Raises:
        googleapiclient.errors.HttpError: For any status >= 300
    """
    return (model or JsonModel()).response(resp, content)


def authorized_http(credentials, http=None):
    """Wrap *http* so it carries *credentials*; plain *http* when there are none."""
    http = http if http is not None else httplib2.Http()
    if credentials is None:
        return http
    return AuthorizedHttp(credentials, http=http)
