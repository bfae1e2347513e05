"""Builders for common shape requests."""
from __future__ import annotations

import logging
import uuid
from typing import List, Sequence

from .models import AffineTransform, Dimension, OpaqueColor, RgbColor, Size, SolidFill
from .page_objects import Outline, OutlineFill, ShapeBackgroundFill, ShapeProperties
from .update_requests import (
    CreateShapeRequest,
    PageElementProperties,
    Request,
    UpdateShapePropertiesRequest,
)

logger = logging.getLogger(__name__)

RECTANGLE_FIELDS = ",".join([
    "shapeBackgroundFill.solidFill.color",
    "shapeBackgroundFill.solidFill.alpha",
    "outline.outlineFill.solidFill.color",
    "outline.outlineFill.solidFill.alpha",
])


def new_object_id(prefix: str = "OBJ") -> str:
    """A fresh object ID such as ``CIRCLE_3f2a...``; valid for the Slides API (5-50 chars)."""
    return f"{prefix}_{uuid.uuid4().hex}"[:50]


def element_properties(page_id: str, width: float, height: float, x: float, y: float,
                       unit: str = "PT") -> PageElementProperties:
    """Size and position of a new element on *page_id*."""
    return PageElementProperties(
        pageObjectId=page_id,
        size=Size(width=Dimension(width, unit), height=Dimension(height, unit)),
        transform=AffineTransform(1, 1, 0, 0, x, y, unit),
    )


def _solid_fill(rgba: Sequence[float]) -> SolidFill:
    red, green, blue, alpha = rgba
    return SolidFill(color=OpaqueColor(rgbColor=RgbColor(red, green, blue)), alpha=alpha)


def circle_request(page_id: str, x: float, y: float, r: float = 1) -> Request:
    """An ellipse of radius *r* points centred on (x, y)."""
    circle_id = new_object_id("CIRCLE")
    return Request(createShape=CreateShapeRequest(
        objectId=circle_id,
        shapeType="ELLIPSE",
        elementProperties=element_properties(page_id, 2 * r, 2 * r, x - r, y - r),
    ))


def rectangle_requests(page_id: str, object_id: str, x0: float, x1: float, y0: float, y1: float,
                       col: Sequence[float], fill: Sequence[float]) -> List[Request]:
    """
    Create a rectangle and style it.

    Coordinates are in points with ``y0`` the bottom and ``y1`` the top edge;
    *col* (outline) and *fill* are ``(red, green, blue, alpha)`` in 0-1.
    """
    if x1 < x0 or y0 < y1:
        logger.warning("Degenerate rectangle %s: x=(%s, %s) y=(%s, %s)", object_id, x0, x1, y0, y1)
    create = CreateShapeRequest(
        objectId=object_id,
        shapeType="RECTANGLE",
        elementProperties=element_properties(page_id, x1 - x0, y0 - y1, x0, y1),
    )
    style = UpdateShapePropertiesRequest(
        objectId=object_id,
        shapeProperties=ShapeProperties(
            shapeBackgroundFill=ShapeBackgroundFill(solidFill=_solid_fill(fill)),
            outline=Outline(outlineFill=OutlineFill(solidFill=_solid_fill(col))),
        ),
        fields=RECTANGLE_FIELDS,
    )
    return [Request(createShape=create), Request(updateShapeProperties=style)]
