"""
Data models for the Slides API.

Every record is a frozen dataclass whose fields carry the wire (camelCase)
names of the Slides API schema. All fields are optional; ``None`` means
"not set" and is dropped on serialisation.
"""
from __future__ import annotations

import contextvars
import functools
import logging
import typing
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

from .enums import RELATIVE_SLIDE_LINKS, THEME_COLOR_TYPES, UNITS

logger = logging.getLogger(__name__)

_validate_choices = contextvars.ContextVar("validate_choices", default=True)


def check_choice(owner: str, name: str, value: Optional[str], choices: Tuple[str, ...]) -> None:
    """Raise ``ValueError`` if *value* is set and not one of *choices*."""
    if value is None:
        return
    if value not in choices:
        raise ValueError(
            f"Invalid {owner}.{name}: {value!r}. Must be one of {', '.join(choices)}"
        )


def _encode(value: Any) -> Any:
    if isinstance(value, ApiObject):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items() if v is not None}
    return value


def _decode(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(hint)
    if origin is typing.Union:
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        return _decode(args[0], value) if len(args) == 1 else value
    if origin is list:
        args = typing.get_args(hint)
        item = args[0] if args else Any
        return [_decode(item, v) for v in value]
    if origin is dict:
        args = typing.get_args(hint)
        item = args[1] if args else Any
        return {k: _decode(item, v) for k, v in value.items()}
    if isinstance(hint, type) and issubclass(hint, ApiObject) and isinstance(value, dict):
        return hint._decode_record(value)
    return value


@functools.lru_cache(maxsize=None)
def field_types(cls) -> Dict[str, Any]:
    """Resolved type hints of the dataclass fields of *cls*."""
    hints = typing.get_type_hints(cls)
    return {f.name: hints[f.name] for f in fields(cls)}


@dataclass(frozen=True)
class ApiObject:
    """
    Base class of every Slides API record.

    Subclasses list enum-constrained fields in ``_choices`` (a plain class
    attribute, not a dataclass field); membership is checked on construction.
    Records decoded from a server payload with :meth:`from_dict` keep values
    outside ``_choices`` as they are.
    """

    _choices = {}

    def __post_init__(self):
        lenient = not _validate_choices.get()
        for name, choices in self._choices.items():
            value = getattr(self, name)
            if lenient and value is not None and value not in choices:
                logger.debug("Keeping unknown value %s.%s=%r", type(self).__name__, name, value)
                continue
            check_choice(type(self).__name__, name, value, choices)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to the JSON shape the API expects, dropping unset fields."""
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = _encode(value)
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any], validate: bool = False):
        """
        Build a record (and its nested records) from a decoded JSON payload.

        Enum values are only checked when *validate* is true; server replies
        are decoded without it so newer enum values do not break decoding.
        """
        token = _validate_choices.set(validate)
        try:
            return cls._decode_record(data)
        finally:
            _validate_choices.reset(token)

    @classmethod
    def _decode_record(cls, data: Dict[str, Any]):
        hints = field_types(cls)
        kwargs = {}
        for key, value in data.items():
            if key not in hints:
                logger.debug("Ignoring unknown field %s.%s", cls.__name__, key)
                continue
            kwargs[key] = _decode(hints[key], value)
        return cls(**kwargs)


# ---------------------------------------------------------------------------
# Shared primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Dimension(ApiObject):
    """A magnitude in a single direction in the specified units."""
    magnitude: Optional[float] = None
    unit: Optional[str] = None

    _choices = {"unit": UNITS}


@dataclass(frozen=True)
class Size(ApiObject):
    """A width and height."""
    width: Optional[Dimension] = None
    height: Optional[Dimension] = None


@dataclass(frozen=True)
class AffineTransform(ApiObject):
    """
    AffineTransform uses a 3x3 matrix with an implied last row of [ 0 0 1 ]
    to transform source coordinates (x,y) into destination coordinates.
    """
    scaleX: Optional[float] = None
    scaleY: Optional[float] = None
    shearX: Optional[float] = None
    shearY: Optional[float] = None
    translateX: Optional[float] = None
    translateY: Optional[float] = None
    unit: Optional[str] = None

    _choices = {"unit": UNITS}


@dataclass(frozen=True)
class RgbColor(ApiObject):
    """An RGB color, each component in the 0.0-1.0 range."""
    red: Optional[float] = None
    green: Optional[float] = None
    blue: Optional[float] = None


@dataclass(frozen=True)
class OpaqueColor(ApiObject):
    """A themeable solid color value."""
    rgbColor: Optional[RgbColor] = None
    themeColor: Optional[str] = None

    _choices = {"themeColor": THEME_COLOR_TYPES}


@dataclass(frozen=True)
class OptionalColor(ApiObject):
    """A color that can either be fully opaque or fully transparent."""
    opaqueColor: Optional[OpaqueColor] = None


@dataclass(frozen=True)
class SolidFill(ApiObject):
    """A solid color fill."""
    color: Optional[OpaqueColor] = None
    alpha: Optional[float] = None


@dataclass(frozen=True)
class Link(ApiObject):
    """A hypertext link."""
    url: Optional[str] = None
    relativeLink: Optional[str] = None
    pageObjectId: Optional[str] = None
    slideIndex: Optional[int] = None

    _choices = {"relativeLink": RELATIVE_SLIDE_LINKS}
