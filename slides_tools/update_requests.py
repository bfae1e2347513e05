"""
Update messages accepted by ``presentations.batchUpdate``.

Each ``*Request`` record describes one kind of change. They are wrapped in a
:class:`Request`, a tagged union whose single populated field name is the
wire key, and sent together in a :class:`BatchUpdatePresentationRequest`.
"""
from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Dict, Optional

from .enums import (
    APPLY_MODES,
    BULLET_PRESETS,
    IMAGE_REPLACE_METHODS,
    LEGACY_LINE_CATEGORIES,
    LINE_CATEGORIES,
    LINKING_MODES,
    PREDEFINED_LAYOUTS,
    RANGE_TYPES,
    REPLACE_METHODS,
    SHAPE_TYPES,
    TABLE_BORDER_POSITIONS,
    VIDEO_SOURCES,
    Z_ORDER_OPERATIONS,
)
from .models import AffineTransform, ApiObject, Size, field_types
from .page_objects import (
    ImageProperties,
    LineProperties,
    PageProperties,
    Placeholder,
    ShapeProperties,
    SlideProperties,
    TableBorderProperties,
    TableCellLocation,
    TableCellProperties,
    TableColumnProperties,
    TableRowProperties,
    VideoProperties,
)
from .text_objects import ParagraphStyle, TextStyle

# ---------------------------------------------------------------------------
# Shared building blocks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PageElementProperties(ApiObject):
    """Common properties for a page element being created."""
    pageObjectId: Optional[str] = None
    size: Optional[Size] = None
    transform: Optional[AffineTransform] = None


@dataclass(frozen=True)
class Range(ApiObject):
    """Specifies a contiguous range of an indexed collection, such as characters in text."""
    startIndex: Optional[int] = None
    endIndex: Optional[int] = None
    type: Optional[str] = None

    _choices = {"type": RANGE_TYPES}


@dataclass(frozen=True)
class TableRange(ApiObject):
    """A table range represents a reference to a subset of a table."""
    location: Optional[TableCellLocation] = None
    rowSpan: Optional[int] = None
    columnSpan: Optional[int] = None


@dataclass(frozen=True)
class SubstringMatchCriteria(ApiObject):
    """A criteria that matches a specific string of text in a shape or table."""
    text: Optional[str] = None
    matchCase: Optional[bool] = None


@dataclass(frozen=True)
class LayoutReference(ApiObject):
    """Slide layout reference: either a predefined layout or a layout ID."""
    predefinedLayout: Optional[str] = None
    layoutId: Optional[str] = None

    _choices = {"predefinedLayout": PREDEFINED_LAYOUTS}


@dataclass(frozen=True)
class LayoutPlaceholderIdMapping(ApiObject):
    """The user-specified ID mapping for a placeholder that will be created on a slide from a specified layout."""
    layoutPlaceholder: Optional[Placeholder] = None
    layoutPlaceholderObjectId: Optional[str] = None
    objectId: Optional[str] = None


@dataclass(frozen=True)
class WriteControl(ApiObject):
    """
    Provides control over how write requests are executed.

    ``requiredRevisionId`` is forwarded verbatim; the server rejects the
    batch if the presentation's current revision differs.
    """
    requiredRevisionId: Optional[str] = None


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CreateSlideRequest(ApiObject):
    """Creates a slide."""
    objectId: Optional[str] = None
    insertionIndex: Optional[int] = None
    slideLayoutReference: Optional[LayoutReference] = None
    placeholderIdMappings: Optional[list[LayoutPlaceholderIdMapping]] = None


@dataclass(frozen=True)
class CreateShapeRequest(ApiObject):
    """Creates a new shape."""
    objectId: Optional[str] = None
    elementProperties: Optional[PageElementProperties] = None
    shapeType: Optional[str] = None

    _choices = {"shapeType": SHAPE_TYPES}


@dataclass(frozen=True)
class CreateTableRequest(ApiObject):
    """Creates a new table."""
    objectId: Optional[str] = None
    elementProperties: Optional[PageElementProperties] = None
    rows: Optional[int] = None
    columns: Optional[int] = None


@dataclass(frozen=True)
class CreateImageRequest(ApiObject):
    """Creates an image."""
    objectId: Optional[str] = None
    elementProperties: Optional[PageElementProperties] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class CreateVideoRequest(ApiObject):
    """Creates a video."""
    objectId: Optional[str] = None
    elementProperties: Optional[PageElementProperties] = None
    source: Optional[str] = None
    id: Optional[str] = None

    _choices = {"source": VIDEO_SOURCES}


@dataclass(frozen=True)
class CreateSheetsChartRequest(ApiObject):
    """Creates an embedded Google Sheets chart."""
    objectId: Optional[str] = None
    elementProperties: Optional[PageElementProperties] = None
    spreadsheetId: Optional[str] = None
    chartId: Optional[int] = None
    linkingMode: Optional[str] = None

    _choices = {"linkingMode": LINKING_MODES}


@dataclass(frozen=True)
class CreateLineRequest(ApiObject):
    """Creates a line. ``lineCategory`` is deprecated in favour of ``category``."""
    objectId: Optional[str] = None
    elementProperties: Optional[PageElementProperties] = None
    lineCategory: Optional[str] = None
    category: Optional[str] = None

    _choices = {"lineCategory": LEGACY_LINE_CATEGORIES, "category": LINE_CATEGORIES}


@dataclass(frozen=True)
class CreateParagraphBulletsRequest(ApiObject):
    """Creates bullets for all of the paragraphs that overlap with the given text index range."""
    objectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    textRange: Optional[Range] = None
    bulletPreset: Optional[str] = None

    _choices = {"bulletPreset": BULLET_PRESETS}


@dataclass(frozen=True)
class DuplicateObjectRequest(ApiObject):
    """
    Duplicates a slide or page element.

    ``objectIds`` maps source object IDs to the IDs the duplicates should get.
    """
    objectId: Optional[str] = None
    objectIds: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class GroupObjectsRequest(ApiObject):
    """Groups objects to create an object group."""
    groupObjectId: Optional[str] = None
    childrenObjectIds: Optional[list[str]] = None


# ---------------------------------------------------------------------------
# Text and tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InsertTextRequest(ApiObject):
    """Inserts text into a shape or a table cell."""
    objectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    text: Optional[str] = None
    insertionIndex: Optional[int] = None


@dataclass(frozen=True)
class DeleteTextRequest(ApiObject):
    """Deletes text from a shape or a table cell."""
    objectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    textRange: Optional[Range] = None


@dataclass(frozen=True)
class ReplaceAllTextRequest(ApiObject):
    """Replaces all instances of text matching a criteria with replace text."""
    replaceText: Optional[str] = None
    pageObjectIds: Optional[list[str]] = None
    containsText: Optional[SubstringMatchCriteria] = None


@dataclass(frozen=True)
class UpdateTextStyleRequest(ApiObject):
    """Update the styling of text in a Shape or Table."""
    objectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    style: Optional[TextStyle] = None
    textRange: Optional[Range] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdateParagraphStyleRequest(ApiObject):
    """Updates the styling for all of the paragraphs within a Shape or Table that overlap with the given text index range."""
    objectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    style: Optional[ParagraphStyle] = None
    textRange: Optional[Range] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class DeleteParagraphBulletsRequest(ApiObject):
    """Deletes bullets from all of the paragraphs that overlap with the given text index range."""
    objectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    textRange: Optional[Range] = None


@dataclass(frozen=True)
class InsertTableRowsRequest(ApiObject):
    """Inserts rows into a table."""
    tableObjectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    insertBelow: Optional[bool] = None
    number: Optional[int] = None


@dataclass(frozen=True)
class InsertTableColumnsRequest(ApiObject):
    """Inserts columns into a table."""
    tableObjectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None
    insertRight: Optional[bool] = None
    number: Optional[int] = None


@dataclass(frozen=True)
class DeleteTableRowRequest(ApiObject):
    """Deletes a row from a table."""
    tableObjectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None


@dataclass(frozen=True)
class DeleteTableColumnRequest(ApiObject):
    """Deletes a column from a table."""
    tableObjectId: Optional[str] = None
    cellLocation: Optional[TableCellLocation] = None


@dataclass(frozen=True)
class UpdateTableCellPropertiesRequest(ApiObject):
    """Update the properties of a TableCell."""
    objectId: Optional[str] = None
    tableRange: Optional[TableRange] = None
    tableCellProperties: Optional[TableCellProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdateTableBorderPropertiesRequest(ApiObject):
    """Updates the properties of the table borders in a Table."""
    objectId: Optional[str] = None
    tableRange: Optional[TableRange] = None
    borderPosition: Optional[str] = None
    tableBorderProperties: Optional[TableBorderProperties] = None
    fields: Optional[str] = None

    _choices = {"borderPosition": TABLE_BORDER_POSITIONS}


@dataclass(frozen=True)
class UpdateTableColumnPropertiesRequest(ApiObject):
    """Updates the properties of a Table column."""
    objectId: Optional[str] = None
    columnIndices: Optional[list[int]] = None
    tableColumnProperties: Optional[TableColumnProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdateTableRowPropertiesRequest(ApiObject):
    """Updates the properties of a Table row."""
    objectId: Optional[str] = None
    rowIndices: Optional[list[int]] = None
    tableRowProperties: Optional[TableRowProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class MergeTableCellsRequest(ApiObject):
    """Merges cells in a Table."""
    objectId: Optional[str] = None
    tableRange: Optional[TableRange] = None


@dataclass(frozen=True)
class UnmergeTableCellsRequest(ApiObject):
    """Unmerges cells in a Table."""
    objectId: Optional[str] = None
    tableRange: Optional[TableRange] = None


# ---------------------------------------------------------------------------
# Objects, pages and properties
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DeleteObjectRequest(ApiObject):
    """Deletes an object, either pages or page elements, from the presentation."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class UpdatePageElementTransformRequest(ApiObject):
    """Updates the transform of a page element."""
    objectId: Optional[str] = None
    transform: Optional[AffineTransform] = None
    applyMode: Optional[str] = None

    _choices = {"applyMode": APPLY_MODES}


@dataclass(frozen=True)
class UpdateSlidesPositionRequest(ApiObject):
    """Updates the position of slides in the presentation."""
    slideObjectIds: Optional[list[str]] = None
    insertionIndex: Optional[int] = None


@dataclass(frozen=True)
class RefreshSheetsChartRequest(ApiObject):
    """Refreshes an embedded Google Sheets chart by replacing it with the latest version of the chart from Google Sheets."""
    objectId: Optional[str] = None


@dataclass(frozen=True)
class UpdateShapePropertiesRequest(ApiObject):
    """Update the properties of a Shape."""
    objectId: Optional[str] = None
    shapeProperties: Optional[ShapeProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdateImagePropertiesRequest(ApiObject):
    """Update the properties of an Image."""
    objectId: Optional[str] = None
    imageProperties: Optional[ImageProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdateVideoPropertiesRequest(ApiObject):
    """Update the properties of a Video."""
    objectId: Optional[str] = None
    videoProperties: Optional[VideoProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdatePagePropertiesRequest(ApiObject):
    """Updates the properties of a Page."""
    objectId: Optional[str] = None
    pageProperties: Optional[PageProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdateLinePropertiesRequest(ApiObject):
    """Updates the properties of a Line."""
    objectId: Optional[str] = None
    lineProperties: Optional[LineProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class UpdateSlidePropertiesRequest(ApiObject):
    """Updates the properties of a Slide."""
    objectId: Optional[str] = None
    slideProperties: Optional[SlideProperties] = None
    fields: Optional[str] = None


@dataclass(frozen=True)
class ReplaceAllShapesWithImageRequest(ApiObject):
    """Replaces all shapes that match the given criteria with the provided image."""
    containsText: Optional[SubstringMatchCriteria] = None
    imageUrl: Optional[str] = None
    replaceMethod: Optional[str] = None
    imageReplaceMethod: Optional[str] = None
    pageObjectIds: Optional[list[str]] = None

    _choices = {
        "replaceMethod": REPLACE_METHODS,
        "imageReplaceMethod": IMAGE_REPLACE_METHODS,
    }


@dataclass(frozen=True)
class ReplaceAllShapesWithSheetsChartRequest(ApiObject):
    """Replaces all shapes that match the given criteria with the provided Google Sheets chart."""
    containsText: Optional[SubstringMatchCriteria] = None
    spreadsheetId: Optional[str] = None
    chartId: Optional[int] = None
    linkingMode: Optional[str] = None
    pageObjectIds: Optional[list[str]] = None

    _choices = {"linkingMode": LINKING_MODES}


@dataclass(frozen=True)
class UngroupObjectsRequest(ApiObject):
    """Ungroups objects, such as groups."""
    objectIds: Optional[list[str]] = None


@dataclass(frozen=True)
class UpdatePageElementAltTextRequest(ApiObject):
    """Updates the alt text title and/or description of a page element."""
    objectId: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class ReplaceImageRequest(ApiObject):
    """Replaces an existing image with a new image."""
    imageObjectId: Optional[str] = None
    url: Optional[str] = None
    imageReplaceMethod: Optional[str] = None

    _choices = {"imageReplaceMethod": IMAGE_REPLACE_METHODS}


@dataclass(frozen=True)
class UpdatePageElementsZOrderRequest(ApiObject):
    """Updates the Z-order of page elements."""
    pageElementObjectIds: Optional[list[str]] = None
    operation: Optional[str] = None

    _choices = {"operation": Z_ORDER_OPERATIONS}


@dataclass(frozen=True)
class UpdateLineCategoryRequest(ApiObject):
    """Updates the category of a line."""
    objectId: Optional[str] = None
    lineCategory: Optional[str] = None

    _choices = {"lineCategory": LINE_CATEGORIES}


@dataclass(frozen=True)
class RerouteLineRequest(ApiObject):
    """Reroutes a line such that it's connected at the two closest connection sites on the connected page elements."""
    objectId: Optional[str] = None


# ---------------------------------------------------------------------------
# The tagged union and the batch envelope
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Request(ApiObject):
    """
    A single kind of update to apply to a presentation.

    Exactly one field must be set; its name is the key the request is sent
    under, e.g. ``Request(createSlide=CreateSlideRequest())`` serialises to
    ``{"createSlide": {}}``. The value must be the matching ``*Request``
    record or a plain mapping.
    """
    createSlide: Optional[CreateSlideRequest] = None
    createShape: Optional[CreateShapeRequest] = None
    createTable: Optional[CreateTableRequest] = None
    insertText: Optional[InsertTextRequest] = None
    insertTableRows: Optional[InsertTableRowsRequest] = None
    insertTableColumns: Optional[InsertTableColumnsRequest] = None
    deleteTableRow: Optional[DeleteTableRowRequest] = None
    deleteTableColumn: Optional[DeleteTableColumnRequest] = None
    replaceAllText: Optional[ReplaceAllTextRequest] = None
    deleteObject: Optional[DeleteObjectRequest] = None
    updatePageElementTransform: Optional[UpdatePageElementTransformRequest] = None
    updateSlidesPosition: Optional[UpdateSlidesPositionRequest] = None
    deleteText: Optional[DeleteTextRequest] = None
    createImage: Optional[CreateImageRequest] = None
    createVideo: Optional[CreateVideoRequest] = None
    createSheetsChart: Optional[CreateSheetsChartRequest] = None
    createLine: Optional[CreateLineRequest] = None
    refreshSheetsChart: Optional[RefreshSheetsChartRequest] = None
    updateShapeProperties: Optional[UpdateShapePropertiesRequest] = None
    updateImageProperties: Optional[UpdateImagePropertiesRequest] = None
    updateVideoProperties: Optional[UpdateVideoPropertiesRequest] = None
    updatePageProperties: Optional[UpdatePagePropertiesRequest] = None
    updateTableCellProperties: Optional[UpdateTableCellPropertiesRequest] = None
    updateLineProperties: Optional[UpdateLinePropertiesRequest] = None
    createParagraphBullets: Optional[CreateParagraphBulletsRequest] = None
    replaceAllShapesWithImage: Optional[ReplaceAllShapesWithImageRequest] = None
    duplicateObject: Optional[DuplicateObjectRequest] = None
    updateTextStyle: Optional[UpdateTextStyleRequest] = None
    replaceAllShapesWithSheetsChart: Optional[ReplaceAllShapesWithSheetsChartRequest] = None
    deleteParagraphBullets: Optional[DeleteParagraphBulletsRequest] = None
    updateParagraphStyle: Optional[UpdateParagraphStyleRequest] = None
    updateTableBorderProperties: Optional[UpdateTableBorderPropertiesRequest] = None
    updateTableColumnProperties: Optional[UpdateTableColumnPropertiesRequest] = None
    updateTableRowProperties: Optional[UpdateTableRowPropertiesRequest] = None
    mergeTableCells: Optional[MergeTableCellsRequest] = None
    unmergeTableCells: Optional[UnmergeTableCellsRequest] = None
    groupObjects: Optional[GroupObjectsRequest] = None
    ungroupObjects: Optional[UngroupObjectsRequest] = None
    updatePageElementAltText: Optional[UpdatePageElementAltTextRequest] = None
    replaceImage: Optional[ReplaceImageRequest] = None
    updateSlideProperties: Optional[UpdateSlidePropertiesRequest] = None
    updatePageElementsZOrder: Optional[UpdatePageElementsZOrderRequest] = None
    updateLineCategory: Optional[UpdateLineCategoryRequest] = None
    rerouteLine: Optional[RerouteLineRequest] = None

    def __post_init__(self):
        super().__post_init__()
        chosen = [f.name for f in fields(self) if getattr(self, f.name) is not None]
        if len(chosen) != 1:
            raise ValueError(
                f"Request needs exactly one update kind, got {len(chosen)}: {chosen}"
            )
        kind = chosen[0]
        expected = typing.get_args(field_types(type(self))[kind])[0]
        value = getattr(self, kind)
        if not isinstance(value, (expected, Mapping)):
            raise ValueError(
                f"Request.{kind} must be a {expected.__name__}, got {type(value).__name__}"
            )

    @property
    def kind(self) -> str:
        """The wire key of the populated variant."""
        return next(f.name for f in fields(self) if getattr(self, f.name) is not None)

    @property
    def body(self):
        """The populated variant itself."""
        return getattr(self, self.kind)

    @classmethod
    def kinds(cls) -> list[str]:
        """All variant names, in schema order."""
        return [f.name for f in fields(cls)]


@dataclass(frozen=True)
class BatchUpdatePresentationRequest(ApiObject):
    """Request message for PresentationsService.BatchUpdatePresentation."""
    requests: Optional[list[Request]] = None
    writeControl: Optional[WriteControl] = None
