"""Replies returned by ``presentations.batchUpdate``."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

from .models import ApiObject
from .update_requests import WriteControl


@dataclass(frozen=True)
class CreateSlideResponse(ApiObject):
    """The result of creating a slide."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class CreateShapeResponse(ApiObject):
    """The result of creating a shape."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class CreateTableResponse(ApiObject):
    """The result of creating a table."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class CreateImageResponse(ApiObject):
    """The result of creating an image."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class CreateVideoResponse(ApiObject):
    """The result of creating a video."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class CreateSheetsChartResponse(ApiObject):
    """The result of creating an embedded Google Sheets chart."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class CreateLineResponse(ApiObject):
    """The result of creating a line."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class DuplicateObjectResponse(ApiObject):
    """The result of duplicating an object."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class GroupObjectsResponse(ApiObject):
    """The result of grouping objects."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class ReplaceAllTextResponse(ApiObject):
    """The result of replacing text."""
    occurrencesChanged: Optional[int] = None


@dataclass(frozen=True)
class ReplaceAllShapesWithImageResponse(ApiObject):
    """The result of replacing shapes with an image."""
    occurrencesChanged: Optional[int] = None


@dataclass(frozen=True)
class ReplaceAllShapesWithSheetsChartResponse(ApiObject):
    """The result of replacing shapes with a Google Sheets chart."""
    occurrencesChanged: Optional[int] = None


@dataclass(frozen=True)
class Response(ApiObject):
    """
    A single reply to one update request.

    Requests that produce no reply (most ``update*`` and ``delete*`` kinds)
    come back as an empty ``Response()``.
    """
    createSlide: Optional[CreateSlideResponse] = None
    createShape: Optional[CreateShapeResponse] = None
    createTable: Optional[CreateTableResponse] = None
    replaceAllText: Optional[ReplaceAllTextResponse] = None
    createImage: Optional[CreateImageResponse] = None
    createVideo: Optional[CreateVideoResponse] = None
    createSheetsChart: Optional[CreateSheetsChartResponse] = None
    createLine: Optional[CreateLineResponse] = None
    replaceAllShapesWithImage: Optional[ReplaceAllShapesWithImageResponse] = None
    duplicateObject: Optional[DuplicateObjectResponse] = None
    replaceAllShapesWithSheetsChart: Optional[ReplaceAllShapesWithSheetsChartResponse] = None
    groupObjects: Optional[GroupObjectsResponse] = None

    @property
    def kind(self) -> Optional[str]:
        return next((f.name for f in fields(self) if getattr(self, f.name) is not None), None)


@dataclass(frozen=True)
class BatchUpdatePresentationResponse(ApiObject):
    """Response message from a batch update."""
    presentationId: Optional[str] = None
    replies: Optional[list[Response]] = None
    writeControl: Optional[WriteControl] = None

    def object_ids(self) -> list[str]:
        """IDs of every object created or duplicated by the batch, in reply order."""
        ids = []
        for reply in self.replies or []:
            kind = reply.kind
            if kind is None:
                continue
            object_id = getattr(getattr(reply, kind), "objectId", None)
            if object_id:
                ids.append(object_id)
        return ids
