"""Unit conversions and affine matrices for page element geometry."""
from __future__ import annotations

import math

from .models import AffineTransform, RgbColor

EMU_PER_PT = 12700
EMU_PER_PX = 9525  # 914400 EMU/in / 96 px/in
EMU_PER_INCH = 914400
EMU_PER_CM = 360000


def emu_to_pt(emu: float) -> float:
    return emu / EMU_PER_PT


def pt_to_emu(pt: float) -> float:
    return pt * EMU_PER_PT


def cm_to_pt(cm: float) -> float:
    return cm / 2.54 * 72


def pt_to_cm(pt: float) -> float:
    return pt / 72 * 2.54


def px_to_emu(px: float) -> float:
    return px * EMU_PER_PX


def inch_to_emu(inch: float) -> float:
    return inch * EMU_PER_INCH


def cm_to_emu(cm: float) -> float:
    return cm * EMU_PER_CM


def hex_to_rgb_color(hex_color: str) -> RgbColor:
    """Convert #rrggbb (or #rgb) to an :class:`RgbColor` in the 0-1 range."""
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:  # short form #f00
        hex_color = "".join(c * 2 for c in hex_color)
    if len(hex_color) != 6:
        raise ValueError(f"Invalid hex color: #{hex_color}")
    r, g, b = (int(hex_color[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return RgbColor(red=r, green=g, blue=b)


def translate_matrix(x: float, y: float, unit: str = "PT") -> AffineTransform:
    """A pure translation by (x, y)."""
    return AffineTransform(
        scaleX=1, scaleY=1, shearX=0, shearY=0, translateX=x, translateY=y, unit=unit
    )


def rotation_matrix(deg: float, unit: str = "PT") -> AffineTransform:
    """
    Rotation by *deg* degrees about the origin, counter-clockwise on the
    page (the Slides y axis points down).

    Entries are rounded to three decimals so quarter turns come out exact.
    """
    r = -deg * math.pi / 180
    return AffineTransform(
        scaleX=round(math.cos(r), 3),
        scaleY=round(math.cos(r), 3),
        shearX=round(-math.sin(r), 3),
        shearY=round(math.sin(r), 3),
        translateX=0,
        translateY=0,
        unit=unit,
    )
