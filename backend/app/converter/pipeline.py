"""Conversion entry point: decode, measure, hand off to a renderer."""

from __future__ import annotations

import logging
import re
import time

from app.converter.config import ConverterConfig
from app.converter.dimensions import infer_dimensions
from app.converter.elements import ConversionResult
from app.converter.registry import RendererRegistry, get_registry
from app.svg.cleaner import strip_prolog
from app.svg.decode import decode_svg_content

logger = logging.getLogger(__name__)

DEFAULT_MODE = "overlay"
DEFAULT_PAGE_TYPE = "text"

_CLASS_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")


def convert_svg(
    svg_content: str,
    page_type: str = DEFAULT_PAGE_TYPE,
    name: str | None = None,
    mode: str = DEFAULT_MODE,
    config: ConverterConfig | None = None,
    registry: RendererRegistry | None = None,
) -> ConversionResult:
    """Convert an SVG payload into an HTML fragment, CSS and placeholder names.

    Best-effort: unreadable markup yields an empty-looking page rather than an
    error. Only an unknown ``mode`` raises (ValueError).
    """
    config = config or ConverterConfig()
    spec = (registry or get_registry()).get(mode)

    start = time.perf_counter()
    svg_text = decode_svg_content(svg_content)
    dims = infer_dimensions(strip_prolog(svg_text), config)
    page = spec.fn(svg_text, dims, page_class(page_type), config)
    elapsed = (time.perf_counter() - start) * 1000

    logger.info(
        "Converted %d chars (%s, %gx%g) in %.1fms: %d text, %d icon, %d placeholders",
        len(svg_text),
        mode,
        dims.view_box_width,
        dims.view_box_height,
        elapsed,
        page.text_elements,
        page.icon_elements,
        len(page.placeholders),
    )

    return ConversionResult(
        html=page.html,
        css=page.css,
        placeholders=page.placeholders,
        page_type=page_type,
        name=name or f"Template - {page_type}",
        mode=mode,
        text_elements=page.text_elements,
        icon_elements=page.icon_elements,
    )


def page_class(page_type: str) -> str:
    """CSS-safe class token for a page type."""
    token = _CLASS_UNSAFE_RE.sub("-", page_type).strip("-")
    return token or DEFAULT_PAGE_TYPE
