"""Coordinate-to-CSS mapping.

SVG user units become percentages of the viewBox so the page scales with its
container. Position and size use 2 decimals, font sizes 3 decimals in vw.
"""

from __future__ import annotations

from app.converter.elements import Dimensions, TextElement
from app.utils.geometry import percent

_TEXT_ALIGN = {"middle": "center", "end": "right"}


def to_percent(value: float, extent: float) -> str:
    return f"{percent(value, extent):.2f}%"


def to_vw(value: float, extent: float) -> str:
    return f"{percent(value, extent):.3f}vw"


def text_align(anchor: str) -> str:
    return _TEXT_ALIGN.get(anchor, "left")


def box_declarations(x: float, y: float, width: float, height: float, dims: Dimensions) -> list[str]:
    """left/top/width/height declarations for an absolutely positioned box."""
    return [
        f"left: {to_percent(x, dims.view_box_width)}",
        f"top: {to_percent(y, dims.view_box_height)}",
        f"width: {to_percent(width, dims.view_box_width)}",
        f"height: {to_percent(height, dims.view_box_height)}",
    ]


def text_declarations(text: TextElement, dims: Dimensions) -> list[str]:
    """Position and typography for a text box anchored at its SVG baseline point.

    The baseline shift itself (translateY(-100%)) lives in the stylesheet's
    .text-element rule.
    """
    return [
        f"left: {to_percent(text.x, dims.view_box_width)}",
        f"top: {to_percent(text.y, dims.view_box_height)}",
        f"font-size: {to_vw(text.font_size, dims.view_box_width)}",
        f"font-family: {text.font_family}",
        f"font-weight: {text.font_weight}",
        f"color: {text.fill}",
        f"text-align: {text_align(text.text_anchor)}",
    ]


def style_attr(declarations: list[str]) -> str:
    return "; ".join(declarations) + ";"
