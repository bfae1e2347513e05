"""Text records: runs, paragraphs, bullets, lists and their styles."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .enums import (
    ALIGNMENTS,
    AUTO_TEXT_TYPES,
    BASELINE_OFFSETS,
    SPACING_MODES,
    TEXT_DIRECTIONS,
)
from .models import ApiObject, Dimension, Link, OptionalColor


@dataclass(frozen=True)
class WeightedFontFamily(ApiObject):
    """A font family and its rendered weight (a multiple of 100 between 100 and 900)."""
    fontFamily: Optional[str] = None
    weight: Optional[int] = None


@dataclass(frozen=True)
class TextStyle(ApiObject):
    """
    Represents the styling that can be applied to a TextRun.

    Unset fields inherit from the parent style; which parent depends on
    where the text lives (placeholder shape, list nesting level, ...).
    """
    backgroundColor: Optional[OptionalColor] = None
    foregroundColor: Optional[OptionalColor] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    fontFamily: Optional[str] = None
    fontSize: Optional[Dimension] = None
    link: Optional[Link] = None
    baselineOffset: Optional[str] = None
    smallCaps: Optional[bool] = None
    strikethrough: Optional[bool] = None
    underline: Optional[bool] = None
    weightedFontFamily: Optional[WeightedFontFamily] = None

    _choices = {"baselineOffset": BASELINE_OFFSETS}


@dataclass(frozen=True)
class ParagraphStyle(ApiObject):
    """Styles that apply to a whole paragraph."""
    lineSpacing: Optional[float] = None
    alignment: Optional[str] = None
    indentStart: Optional[Dimension] = None
    indentEnd: Optional[Dimension] = None
    spaceAbove: Optional[Dimension] = None
    spaceBelow: Optional[Dimension] = None
    indentFirstLine: Optional[Dimension] = None
    direction: Optional[str] = None
    spacingMode: Optional[str] = None

    _choices = {
        "alignment": ALIGNMENTS,
        "direction": TEXT_DIRECTIONS,
        "spacingMode": SPACING_MODES,
    }


@dataclass(frozen=True)
class Bullet(ApiObject):
    """Describes the bullet of a paragraph."""
    listId: Optional[str] = None
    nestingLevel: Optional[int] = None
    glyph: Optional[str] = None
    bulletStyle: Optional[TextStyle] = None


@dataclass(frozen=True)
class ParagraphMarker(ApiObject):
    """A TextElement kind that represents the beginning of a new paragraph."""
    style: Optional[ParagraphStyle] = None
    bullet: Optional[Bullet] = None


@dataclass(frozen=True)
class TextRun(ApiObject):
    """A run of text that all has the same styling."""
    content: Optional[str] = None
    style: Optional[TextStyle] = None


@dataclass(frozen=True)
class AutoText(ApiObject):
    """Text that is dynamically replaced with content that can change over time."""
    type: Optional[str] = None
    content: Optional[str] = None
    style: Optional[TextStyle] = None

    _choices = {"type": AUTO_TEXT_TYPES}


@dataclass(frozen=True)
class TextElement(ApiObject):
    """A TextElement describes the content of a range of indices in the text of a shape or table cell."""
    startIndex: Optional[int] = None
    endIndex: Optional[int] = None
    paragraphMarker: Optional[ParagraphMarker] = None
    textRun: Optional[TextRun] = None
    autoText: Optional[AutoText] = None


@dataclass(frozen=True)
class NestingLevel(ApiObject):
    """Properties of a list bullet at a given nesting level."""
    bulletStyle: Optional[TextStyle] = None


@dataclass(frozen=True)
class List(ApiObject):
    """
    A List describes the look and feel of bullets belonging to paragraphs
    associated with a list.

    ``nestingLevel`` maps the level (as a string key, "0" ... "8") to its
    :class:`NestingLevel`.
    """
    listId: Optional[str] = None
    nestingLevel: Optional[Dict[str, NestingLevel]] = None


@dataclass(frozen=True)
class TextContent(ApiObject):
    """The general text content. The text must reside in a compatible shape (e.g. text box or rectangle) or a table cell in a page."""
    textElements: Optional[list[TextElement]] = None
    lists: Optional[Dict[str, List]] = None
