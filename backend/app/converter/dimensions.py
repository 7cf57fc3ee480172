"""Dimension inference from the root <svg> tag."""

from __future__ import annotations

import math
import re

from app.converter.config import ConverterConfig
from app.converter.elements import Dimensions
from app.svg.attributes import extract_attrs, parse_number

_ROOT_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_VIEWBOX_RE = re.compile(r"""viewBox\s*=\s*["']([^"']*)["']""")
_USER_LENGTH_RE = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*(?:px|pt)?\s*$", re.IGNORECASE)


def infer_dimensions(svg_text: str, config: ConverterConfig | None = None) -> Dimensions:
    """Derive the page coordinate space.

    The viewBox size wins; min-x/min-y are ignored, so drawings with a shifted
    origin land offset. Without a viewBox the root width/height are used when
    given in user units (bare, px or pt), and each missing, non-numeric or
    non-positive value falls back to the default page size. Never raises.
    """
    config = config or ConverterConfig()
    default_w = config.default_page_width
    default_h = config.default_page_height

    root = _ROOT_TAG_RE.search(svg_text)
    root_attrs = extract_attrs(root.group(0)) if root else {}
    attr_w = _user_length(root_attrs.get("width"))
    attr_h = _user_length(root_attrs.get("height"))

    vb_match = _VIEWBOX_RE.search(root.group(0) if root else svg_text)
    if vb_match:
        parts = [p for p in re.split(r"[\s,]+", vb_match.group(1).strip()) if p]
        vb_w = _positive(_token(parts, 2)) or default_w
        vb_h = _positive(_token(parts, 3)) or default_h
    else:
        vb_w = attr_w or default_w
        vb_h = attr_h or default_h

    return Dimensions(
        width=attr_w or vb_w,
        height=attr_h or vb_h,
        view_box_width=vb_w,
        view_box_height=vb_h,
    )


def _token(parts: list[str], index: int) -> float:
    if index >= len(parts):
        return 0.0
    try:
        return float(parts[index])
    except ValueError:
        return 0.0


def _positive(value: float) -> float:
    return value if math.isfinite(value) and value > 0 else 0.0


def _user_length(value: str | None) -> float:
    """Root length in user units; relative or physical units (%, in, mm) count as absent."""
    if value is None or not _USER_LENGTH_RE.match(value):
        return 0.0
    return _positive(parse_number(value, 0.0))
