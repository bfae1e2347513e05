"""Records describing presentations, pages and the elements placed on them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import (
    AUTOFIT_TYPES,
    CONTENT_ALIGNMENTS,
    DASH_STYLES,
    LINE_CATEGORIES,
    LINE_TYPES,
    PAGE_TYPES,
    PLACEHOLDER_TYPES,
    PROPERTY_STATES,
    RECOLOR_NAMES,
    RECTANGLE_POSITIONS,
    SHADOW_TYPES,
    SHAPE_TYPES,
    THEME_COLOR_TYPES,
    ARROW_STYLES,
    VIDEO_SOURCES,
)
from .models import (
    AffineTransform,
    ApiObject,
    Dimension,
    Link,
    OpaqueColor,
    RgbColor,
    Size,
    SolidFill,
)
from .text_objects import TextContent

# ---------------------------------------------------------------------------
# Fills, outlines and shadows
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ShapeBackgroundFill(ApiObject):
    """The shape background fill."""
    propertyState: Optional[str] = None
    solidFill: Optional[SolidFill] = None

    _choices = {"propertyState": PROPERTY_STATES}


@dataclass(frozen=True)
class OutlineFill(ApiObject):
    """The fill of the outline."""
    solidFill: Optional[SolidFill] = None


@dataclass(frozen=True)
class Outline(ApiObject):
    """The outline of a PageElement."""
    outlineFill: Optional[OutlineFill] = None
    weight: Optional[Dimension] = None
    dashStyle: Optional[str] = None
    propertyState: Optional[str] = None

    _choices = {"dashStyle": DASH_STYLES, "propertyState": PROPERTY_STATES}


@dataclass(frozen=True)
class Shadow(ApiObject):
    """The shadow properties of a page element."""
    type: Optional[str] = None
    transform: Optional[AffineTransform] = None
    alignment: Optional[str] = None
    blurRadius: Optional[Dimension] = None
    color: Optional[OpaqueColor] = None
    alpha: Optional[float] = None
    rotateWithShape: Optional[bool] = None
    propertyState: Optional[str] = None

    _choices = {
        "type": SHADOW_TYPES,
        "alignment": RECTANGLE_POSITIONS,
        "propertyState": PROPERTY_STATES,
    }


@dataclass(frozen=True)
class Autofit(ApiObject):
    """The autofit properties of a Shape."""
    autofitType: Optional[str] = None
    fontScale: Optional[float] = None
    lineSpacingReduction: Optional[float] = None

    _choices = {"autofitType": AUTOFIT_TYPES}


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ShapeProperties(ApiObject):
    """The properties of a Shape."""
    shapeBackgroundFill: Optional[ShapeBackgroundFill] = None
    outline: Optional[Outline] = None
    shadow: Optional[Shadow] = None
    link: Optional[Link] = None
    contentAlignment: Optional[str] = None
    autofit: Optional[Autofit] = None

    _choices = {"contentAlignment": CONTENT_ALIGNMENTS}


@dataclass(frozen=True)
class Placeholder(ApiObject):
    """The placeholder information that uniquely identifies a placeholder shape."""
    type: Optional[str] = None
    index: Optional[int] = None
    parentObjectId: Optional[str] = None

    _choices = {"type": PLACEHOLDER_TYPES}


@dataclass(frozen=True)
class Shape(ApiObject):
    """A PageElement kind representing a generic shape that does not have a more specific classification."""
    shapeType: Optional[str] = None
    text: Optional[TextContent] = None
    shapeProperties: Optional[ShapeProperties] = None
    placeholder: Optional[Placeholder] = None

    _choices = {"shapeType": SHAPE_TYPES}


# ---------------------------------------------------------------------------
# Images and videos
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CropProperties(ApiObject):
    """The crop properties of an object enclosed in a container, as fractional offsets."""
    leftOffset: Optional[float] = None
    rightOffset: Optional[float] = None
    topOffset: Optional[float] = None
    bottomOffset: Optional[float] = None
    angle: Optional[float] = None


@dataclass(frozen=True)
class ColorStop(ApiObject):
    """A color and position in a gradient band."""
    color: Optional[OpaqueColor] = None
    alpha: Optional[float] = None
    position: Optional[float] = None


@dataclass(frozen=True)
class Recolor(ApiObject):
    """A recolor effect applied on an image."""
    recolorStops: Optional[list[ColorStop]] = None
    name: Optional[str] = None

    _choices = {"name": RECOLOR_NAMES}


@dataclass(frozen=True)
class ImageProperties(ApiObject):
    """The properties of the Image."""
    cropProperties: Optional[CropProperties] = None
    transparency: Optional[float] = None
    brightness: Optional[float] = None
    contrast: Optional[float] = None
    recolor: Optional[Recolor] = None
    outline: Optional[Outline] = None
    shadow: Optional[Shadow] = None
    link: Optional[Link] = None


@dataclass(frozen=True)
class Image(ApiObject):
    """A PageElement kind representing an image."""
    contentUrl: Optional[str] = None
    imageProperties: Optional[ImageProperties] = None
    sourceUrl: Optional[str] = None
    placeholder: Optional[Placeholder] = None


@dataclass(frozen=True)
class VideoProperties(ApiObject):
    """The properties of the Video."""
    outline: Optional[Outline] = None
    autoPlay: Optional[bool] = None
    start: Optional[int] = None
    end: Optional[int] = None
    mute: Optional[bool] = None


@dataclass(frozen=True)
class Video(ApiObject):
    """A PageElement kind representing a video."""
    url: Optional[str] = None
    source: Optional[str] = None
    id: Optional[str] = None
    videoProperties: Optional[VideoProperties] = None

    _choices = {"source": VIDEO_SOURCES}


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LineFill(ApiObject):
    """The fill of the line."""
    solidFill: Optional[SolidFill] = None


@dataclass(frozen=True)
class LineConnection(ApiObject):
    """The properties for one end of a Line connection."""
    connectedObjectId: Optional[str] = None
    connectionSiteIndex: Optional[int] = None


@dataclass(frozen=True)
class LineProperties(ApiObject):
    """The properties of the Line."""
    lineFill: Optional[LineFill] = None
    weight: Optional[Dimension] = None
    dashStyle: Optional[str] = None
    startArrow: Optional[str] = None
    endArrow: Optional[str] = None
    link: Optional[Link] = None
    startConnection: Optional[LineConnection] = None
    endConnection: Optional[LineConnection] = None

    _choices = {
        "dashStyle": DASH_STYLES,
        "startArrow": ARROW_STYLES,
        "endArrow": ARROW_STYLES,
    }


@dataclass(frozen=True)
class Line(ApiObject):
    """A PageElement kind representing a non-connector line, straight connector, curved connector, or bent connector."""
    lineProperties: Optional[LineProperties] = None
    lineType: Optional[str] = None
    lineCategory: Optional[str] = None

    _choices = {"lineType": LINE_TYPES, "lineCategory": LINE_CATEGORIES}


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TableCellLocation(ApiObject):
    """A location of a single table cell within a table."""
    rowIndex: Optional[int] = None
    columnIndex: Optional[int] = None


@dataclass(frozen=True)
class TableCellBackgroundFill(ApiObject):
    """The table cell background fill."""
    propertyState: Optional[str] = None
    solidFill: Optional[SolidFill] = None

    _choices = {"propertyState": PROPERTY_STATES}


@dataclass(frozen=True)
class TableCellProperties(ApiObject):
    """The properties of the TableCell."""
    tableCellBackgroundFill: Optional[TableCellBackgroundFill] = None
    contentAlignment: Optional[str] = None

    _choices = {"contentAlignment": CONTENT_ALIGNMENTS}


@dataclass(frozen=True)
class TableCell(ApiObject):
    """Properties and contents of each table cell."""
    location: Optional[TableCellLocation] = None
    rowSpan: Optional[int] = None
    columnSpan: Optional[int] = None
    text: Optional[TextContent] = None
    tableCellProperties: Optional[TableCellProperties] = None


@dataclass(frozen=True)
class TableRowProperties(ApiObject):
    """Properties of each row in a table."""
    minRowHeight: Optional[Dimension] = None


@dataclass(frozen=True)
class TableRow(ApiObject):
    """Properties and contents of each row in a table."""
    rowHeight: Optional[Dimension] = None
    tableRowProperties: Optional[TableRowProperties] = None
    tableCells: Optional[list[TableCell]] = None


@dataclass(frozen=True)
class TableColumnProperties(ApiObject):
    """Properties of each column in a table."""
    columnWidth: Optional[Dimension] = None


@dataclass(frozen=True)
class TableBorderFill(ApiObject):
    """The fill of the border."""
    solidFill: Optional[SolidFill] = None


@dataclass(frozen=True)
class TableBorderProperties(ApiObject):
    """The border styling properties of the TableBorderCell."""
    tableBorderFill: Optional[TableBorderFill] = None
    weight: Optional[Dimension] = None
    dashStyle: Optional[str] = None

    _choices = {"dashStyle": DASH_STYLES}


@dataclass(frozen=True)
class TableBorderCell(ApiObject):
    """The properties of each border cell."""
    location: Optional[TableCellLocation] = None
    tableBorderProperties: Optional[TableBorderProperties] = None


@dataclass(frozen=True)
class TableBorderRow(ApiObject):
    """Contents of each border row in a table."""
    tableBorderCells: Optional[list[TableBorderCell]] = None


@dataclass(frozen=True)
class Table(ApiObject):
    """A PageElement kind representing a table."""
    rows: Optional[int] = None
    columns: Optional[int] = None
    tableRows: Optional[list[TableRow]] = None
    tableColumns: Optional[list[TableColumnProperties]] = None
    horizontalBorderRows: Optional[list[TableBorderRow]] = None
    verticalBorderRows: Optional[list[TableBorderRow]] = None


# ---------------------------------------------------------------------------
# Other page element kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WordArt(ApiObject):
    """A PageElement kind representing word art."""
    renderedText: Optional[str] = None


@dataclass(frozen=True)
class SheetsChartProperties(ApiObject):
    """The properties of the SheetsChart."""
    chartImageProperties: Optional[ImageProperties] = None


@dataclass(frozen=True)
class SheetsChart(ApiObject):
    """A PageElement kind representing a linked chart embedded from Google Sheets."""
    spreadsheetId: Optional[str] = None
    chartId: Optional[int] = None
    contentUrl: Optional[str] = None
    sheetsChartProperties: Optional[SheetsChartProperties] = None


@dataclass(frozen=True)
class SpeakerSpotlightProperties(ApiObject):
    """The properties of the SpeakerSpotlight."""
    outline: Optional[Outline] = None
    shadow: Optional[Shadow] = None


@dataclass(frozen=True)
class SpeakerSpotlight(ApiObject):
    """A PageElement kind representing a Speaker Spotlight."""
    speakerSpotlightProperties: Optional[SpeakerSpotlightProperties] = None


@dataclass(frozen=True)
class Group(ApiObject):
    """A PageElement kind representing a joined collection of PageElements."""
    children: Optional[list[PageElement]] = None


@dataclass(frozen=True)
class PageElement(ApiObject):
    """
    A visual element rendered on a page.

    Exactly one of the kind fields (``elementGroup``, ``shape``, ``image``,
    ``video``, ``line``, ``table``, ``wordArt``, ``sheetsChart``,
    ``speakerSpotlight``) is populated by the server.
    """
    objectId: Optional[str] = None
    size: Optional[Size] = None
    transform: Optional[AffineTransform] = None
    title: Optional[str] = None
    description: Optional[str] = None
    elementGroup: Optional[Group] = None
    shape: Optional[Shape] = None
    image: Optional[Image] = None
    video: Optional[Video] = None
    line: Optional[Line] = None
    table: Optional[Table] = None
    wordArt: Optional[WordArt] = None
    sheetsChart: Optional[SheetsChart] = None
    speakerSpotlight: Optional[SpeakerSpotlight] = None


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NotesProperties(ApiObject):
    """The properties of Page that are only relevant for pages with page_type NOTES."""
    speakerNotesObjectId: Optional[str] = None


@dataclass(frozen=True)
class MasterProperties(ApiObject):
    """The properties of Page that are only relevant for pages with page_type MASTER."""
    displayName: Optional[str] = None


@dataclass(frozen=True)
class LayoutProperties(ApiObject):
    """The properties of Page are only relevant for pages with page_type LAYOUT."""
    masterObjectId: Optional[str] = None
    name: Optional[str] = None
    displayName: Optional[str] = None


@dataclass(frozen=True)
class SlideProperties(ApiObject):
    """The properties of Page that are only relevant for pages with page_type SLIDE."""
    layoutObjectId: Optional[str] = None
    masterObjectId: Optional[str] = None
    notesPage: Optional[Page] = None
    isSkipped: Optional[bool] = None


@dataclass(frozen=True)
class StretchedPictureFill(ApiObject):
    """The stretched picture fill. The page or page element is filled entirely with the specified picture."""
    contentUrl: Optional[str] = None
    size: Optional[Size] = None


@dataclass(frozen=True)
class PageBackgroundFill(ApiObject):
    """The page background fill."""
    propertyState: Optional[str] = None
    solidFill: Optional[SolidFill] = None
    stretchedPictureFill: Optional[StretchedPictureFill] = None

    _choices = {"propertyState": PROPERTY_STATES}


@dataclass(frozen=True)
class ThemeColorPair(ApiObject):
    """A pair mapping a theme color type to the concrete color it represents."""
    type: Optional[str] = None
    color: Optional[RgbColor] = None

    _choices = {"type": THEME_COLOR_TYPES}


@dataclass(frozen=True)
class ColorScheme(ApiObject):
    """The palette of predefined colors for a page."""
    colors: Optional[list[ThemeColorPair]] = None


@dataclass(frozen=True)
class PageProperties(ApiObject):
    """The properties of the Page."""
    pageBackgroundFill: Optional[PageBackgroundFill] = None
    colorScheme: Optional[ColorScheme] = None


@dataclass(frozen=True)
class Page(ApiObject):
    """A page in a presentation."""
    objectId: Optional[str] = None
    pageType: Optional[str] = None
    pageElements: Optional[list[PageElement]] = None
    slideProperties: Optional[SlideProperties] = None
    layoutProperties: Optional[LayoutProperties] = None
    notesProperties: Optional[NotesProperties] = None
    masterProperties: Optional[MasterProperties] = None
    revisionId: Optional[str] = None
    pageProperties: Optional[PageProperties] = None

    _choices = {"pageType": PAGE_TYPES}


@dataclass(frozen=True)
class Presentation(ApiObject):
    """
    A Google Slides presentation.

    ``revisionId`` is output only. It can be pinned on a later batch update
    through :class:`~slides_tools.update_requests.WriteControl` so the server
    rejects the write if the deck changed in between.
    """
    presentationId: Optional[str] = None
    pageSize: Optional[Size] = None
    slides: Optional[list[Page]] = None
    title: Optional[str] = None
    masters: Optional[list[Page]] = None
    layouts: Optional[list[Page]] = None
    locale: Optional[str] = None
    revisionId: Optional[str] = None
    notesMaster: Optional[Page] = None


@dataclass(frozen=True)
class Thumbnail(ApiObject):
    """The thumbnail of a page."""
    width: Optional[int] = None
    height: Optional[int] = None
    contentUrl: Optional[str] = None
