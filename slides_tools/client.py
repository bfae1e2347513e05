"""Slides API endpoints.

``SlidesClient`` wraps the five REST methods of the Slides API v1. Each call
is one independent round trip; atomicity of batch updates and revision
checks are enforced by the server.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Iterable, Optional, Union

from .auth import AuthState
from .config import SlidesConfig
from .enums import THUMBNAIL_MIME_TYPES, THUMBNAIL_SIZES
from .models import check_choice
from .page_objects import Page, Presentation, Thumbnail
from .responses import BatchUpdatePresentationResponse
from .transport import ApiRequest, authorized_http, build_request, execute
from .update_requests import BatchUpdatePresentationRequest, Request, WriteControl

logger = logging.getLogger(__name__)


class SlidesClient:
    """
    Typed access to ``presentations`` and ``presentations.pages``.

    Args:
        auth: Credential holder; its token is fetched (and refreshed) per call.
        config: Settings; defaults to ``auth.config``.
        http: Base ``httplib2.Http``-compatible transport, mainly for tests.
    """

    def __init__(self, auth: AuthState, config: Optional[SlidesConfig] = None, http=None):
        self.auth = auth
        self.config = config or auth.config
        self._http = http

    def call(self, api_request: ApiRequest) -> dict:
        """Run one request through build / execute / process and return the decoded JSON."""
        credentials = self.auth.token()
        api_key = None if credentials is not None else self.auth.api_key
        request = build_request(
            api_request,
            authorized_http(credentials, self._http),
            base_url=self.config.base_url,
            api_key=api_key,
        )
        response = execute(request)
        logger.debug("%s %s -> %d top-level keys", api_request.method, api_request.path, len(response))
        return response

    # ------------------------------------------------------------------
    # presentations
    # ------------------------------------------------------------------

    def get_presentation(self, presentationId: str) -> Presentation:
        """Gets the latest version of the specified presentation."""
        data = self.call(ApiRequest(
            "GET",
            "v1/presentations/{presentationId}",
            path_params={"presentationId": presentationId},
        ))
        return Presentation.from_dict(data)

    def batch_update(
        self,
        presentationId: str,
        request: Union[BatchUpdatePresentationRequest, Mapping],
    ) -> BatchUpdatePresentationResponse:
        """
        Applies one or more updates to the presentation.

        The ``requests`` list and ``writeControl.requiredRevisionId`` are sent
        as given. Replies come back in request order; requests without a
        reply get an empty one.
        """
        data = self.call(ApiRequest(
            "POST",
            "v1/presentations/{presentationId}:batchUpdate",
            path_params={"presentationId": presentationId},
            body=request,
        ))
        response = BatchUpdatePresentationResponse.from_dict(data)
        logger.info(
            "Applied batch update to %s (%d replies)",
            presentationId, len(response.replies or []),
        )
        return response

    def create_presentation(self, presentation: Union[Presentation, Mapping]) -> Presentation:
        """
        Creates a blank presentation using the title given in the request.

        A supplied ``presentationId`` is used for the new presentation;
        other content is ignored by the server.
        """
        data = self.call(ApiRequest("POST", "v1/presentations", body=presentation))
        created = Presentation.from_dict(data)
        logger.info("Created presentation %s", created.presentationId)
        return created

    # ------------------------------------------------------------------
    # presentations.pages
    # ------------------------------------------------------------------

    def get_page(self, presentationId: str, pageObjectId: str) -> Page:
        """Gets the latest version of the specified page in the presentation."""
        data = self.call(ApiRequest(
            "GET",
            "v1/presentations/{presentationId}/pages/{pageObjectId}",
            path_params={"presentationId": presentationId, "pageObjectId": pageObjectId},
        ))
        return Page.from_dict(data)

    def get_page_thumbnail(
        self,
        presentationId: str,
        pageObjectId: str,
        thumbnailSize: Optional[str] = None,
        mimeType: Optional[str] = None,
    ) -> Thumbnail:
        """
        Generates a thumbnail of the latest version of the specified page.

        The returned ``contentUrl`` is short-lived.
        """
        check_choice("thumbnailProperties", "thumbnailSize", thumbnailSize, THUMBNAIL_SIZES)
        check_choice("thumbnailProperties", "mimeType", mimeType, THUMBNAIL_MIME_TYPES)
        data = self.call(ApiRequest(
            "GET",
            "v1/presentations/{presentationId}/pages/{pageObjectId}/thumbnail",
            path_params={"presentationId": presentationId, "pageObjectId": pageObjectId},
            query_params={
                "thumbnailProperties.thumbnailSize": thumbnailSize,
                "thumbnailProperties.mimeType": mimeType,
            },
        ))
        return Thumbnail.from_dict(data)

    def batch(self, presentationId: str, required_revision_id: Optional[str] = None) -> "BatchUpdate":
        """Start collecting update requests for *presentationId*."""
        return BatchUpdate(self, presentationId, required_revision_id)


class BatchUpdate:
    """
    Accumulates update requests and sends them in one ``batchUpdate`` call.

    >>> batch = client.batch(presentation_id)
    >>> batch.add(Request(createSlide=CreateSlideRequest(objectId="s1")))
    >>> reply = batch.send()
    """

    def __init__(self, client: SlidesClient, presentation_id: str, required_revision_id: Optional[str] = None):
        self.client = client
        self.presentation_id = presentation_id
        self.required_revision_id = required_revision_id
        self.requests: list[Request] = []

    def __len__(self):
        return len(self.requests)

    def add(self, *requests: Union[Request, Mapping]) -> "BatchUpdate":
        """Append requests; mappings like ``{"createSlide": {...}}`` are decoded to :class:`Request`."""
        for request in requests:
            if isinstance(request, Mapping):
                request = Request.from_dict(request, validate=True)
            elif not isinstance(request, Request):
                raise ValueError(f"Expected a Request, got {type(request).__name__}")
            self.requests.append(request)
        return self

    def extend(self, requests: Iterable[Union[Request, Mapping]]) -> "BatchUpdate":
        return self.add(*requests)

    def pin_revision(self, revision_id: Optional[str]) -> "BatchUpdate":
        """Make the server reject the batch unless the presentation is at *revision_id*."""
        self.required_revision_id = revision_id
        return self

    def build(self) -> BatchUpdatePresentationRequest:
        write_control = None
        if self.required_revision_id:
            write_control = WriteControl(requiredRevisionId=self.required_revision_id)
        return BatchUpdatePresentationRequest(requests=list(self.requests), writeControl=write_control)

    def send(self) -> BatchUpdatePresentationResponse:
        """Send everything collected so far and clear the queue."""
        if not self.requests:
            raise ValueError("Nothing to send: add at least one request first")
        response = self.client.batch_update(self.presentation_id, self.build())
        self.requests.clear()
        return response
