"""Element extraction by regex scans per tag type, no DOM.

Two entry points:
- extract_text_elements() / extract_icon_elements(): flat scans of the whole
  document for the overlay renderer. Output is grouped by tag type (images,
  then circles, then paths), not document order.
- extract_elements(): nesting-aware scan for the decomposed renderer. Each
  nesting level is returned in document order, <g> groups recurse.

Malformed or unmatched tags are skipped; nothing here raises on bad markup.
"""

from __future__ import annotations

import html
import logging
import re
from collections import Counter

from app.converter.config import ConverterConfig
from app.converter.elements import (
    CircleElement,
    DrawingElement,
    GroupElement,
    IconElement,
    ImageElement,
    LineElement,
    Paint,
    PathElement,
    RectElement,
    TextElement,
)
from app.converter.placeholders import match_placeholder
from app.svg.attributes import extract_attrs, href_of, parse_number, parse_translate
from app.svg.tags import GroupSpan, find_top_level_groups, mask_spans
from app.utils.geometry import circle_bounds, path_extent

logger = logging.getLogger(__name__)

# "/" is allowed inside attribute values but "/>" would make it self-closing
_TEXT_RE = re.compile(r"<text\b((?:[^>/]|/(?!>))*)>(.*?)</text\s*>", re.DOTALL | re.IGNORECASE)
_TSPAN_OPEN_RE = re.compile(r"<tspan\b[^>]*>", re.IGNORECASE)
_ANY_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

_IMAGE_RE = re.compile(r"<image\b[^>]*>", re.IGNORECASE)
_CIRCLE_RE = re.compile(r"<circle\b[^>]*>", re.IGNORECASE)
_PATH_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_RECT_RE = re.compile(r"<rect\b[^>]*>", re.IGNORECASE)
_LINE_RE = re.compile(r"<line\b[^>]*>", re.IGNORECASE)

_SHAPE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("text", _TEXT_RE),
    ("rect", _RECT_RE),
    ("line", _LINE_RE),
    ("image", _IMAGE_RE),
    ("circle", _CIRCLE_RE),
    ("path", _PATH_RE),
)


# ── Overlay scans ─────────────────────────────────────────────────────────


def extract_text_elements(svg_text: str, config: ConverterConfig | None = None) -> list[TextElement]:
    """Every non-empty <text> element, tspans flattened into its content."""
    config = config or ConverterConfig()
    texts: list[TextElement] = []
    for m in _TEXT_RE.finditer(svg_text):
        element = _build_text(f"text-{len(texts) + 1}", m, config, (0.0, 0.0))
        if element is not None:
            texts.append(element)
    logger.debug("Extracted %d text elements", len(texts))
    return texts


def extract_icon_elements(svg_text: str, config: ConverterConfig | None = None) -> list[IconElement]:
    """Images, circles and paths with their approximate boxes."""
    config = config or ConverterConfig()
    icons: list[IconElement] = []

    for m in _IMAGE_RE.finditer(svg_text):
        attrs = extract_attrs(m.group(0))
        icons.append(IconElement(
            id=f"icon-{len(icons) + 1}",
            type="image",
            raw_markup=m.group(0),
            x=parse_number(attrs.get("x")),
            y=parse_number(attrs.get("y")),
            width=parse_number(attrs.get("width"), config.default_image_size),
            height=parse_number(attrs.get("height"), config.default_image_size),
        ))

    for m in _CIRCLE_RE.finditer(svg_text):
        attrs = extract_attrs(m.group(0))
        x, y, w, h = circle_bounds(
            parse_number(attrs.get("cx")),
            parse_number(attrs.get("cy")),
            parse_number(attrs.get("r")),
        )
        icons.append(IconElement(
            id=f"icon-{len(icons) + 1}",
            type="circle",
            raw_markup=m.group(0),
            x=x,
            y=y,
            width=w,
            height=h,
        ))

    for m in _PATH_RE.finditer(svg_text):
        attrs = extract_attrs(m.group(0))
        x, y = parse_translate(attrs.get("transform"))
        w, h = path_extent(attrs.get("d", ""), config.path_size_cap)
        icons.append(IconElement(
            id=f"icon-{len(icons) + 1}",
            type="path",
            raw_markup=m.group(0),
            x=x,
            y=y,
            width=w,
            height=h,
        ))

    logger.debug("Extracted %d icon elements", len(icons))
    return icons


# ── Decomposed scan ───────────────────────────────────────────────────────


def extract_elements(svg_text: str, config: ConverterConfig | None = None) -> list[DrawingElement]:
    """Nested element tree, each level in document order."""
    config = config or ConverterConfig()
    return _extract_level(svg_text, config, (0.0, 0.0), Counter())


def _extract_level(
    markup: str,
    config: ConverterConfig,
    offset: tuple[float, float],
    counter: Counter,
) -> list[DrawingElement]:
    groups = find_top_level_groups(markup)
    flat = mask_spans(markup, groups)

    found: list[tuple[int, str, re.Match[str] | GroupSpan]] = []
    for kind, pattern in _SHAPE_PATTERNS:
        for m in pattern.finditer(flat):
            found.append((m.start(), kind, m))
    for span in groups:
        found.append((span.start, "group", span))
    found.sort(key=lambda item: item[0])

    elements: list[DrawingElement] = []
    for _, kind, source in found:
        if isinstance(source, GroupSpan):
            elements.append(_build_group(source, config, offset, counter))
            continue

        if kind == "text":
            element = _build_text(f"text-{counter['text'] + 1}", source, config, offset)
            if element is None:
                continue
        else:
            element = _build_shape(kind, f"{kind}-{counter[kind] + 1}", source.group(0), config, offset)
        counter[kind] += 1
        elements.append(element)

    return elements


def _build_group(span: GroupSpan, config: ConverterConfig, offset: tuple[float, float], counter: Counter) -> GroupElement:
    attrs = extract_attrs(span.open_tag)
    transform = attrs.get("transform", "")
    # Shallow transform handling: a group's own translate replaces the
    # inherited offset instead of composing with it.
    child_offset = parse_translate(transform) if transform else offset
    counter["group"] += 1
    group_id = f"group-{counter['group']}"
    return GroupElement(
        id=group_id,
        transform=transform,
        opacity=_optional_number(attrs.get("opacity")),
        children=_extract_level(span.inner, config, child_offset, counter),
    )


def _build_shape(
    kind: str,
    element_id: str,
    tag: str,
    config: ConverterConfig,
    offset: tuple[float, float],
) -> DrawingElement:
    attrs = extract_attrs(tag)
    ox, oy = offset

    if kind == "rect":
        return RectElement(
            id=element_id,
            x=parse_number(attrs.get("x")) + ox,
            y=parse_number(attrs.get("y")) + oy,
            width=parse_number(attrs.get("width")),
            height=parse_number(attrs.get("height")),
            rx=parse_number(attrs.get("rx"), parse_number(attrs.get("ry"))),
            ry=parse_number(attrs.get("ry"), parse_number(attrs.get("rx"))),
            paint=_paint(attrs),
        )
    if kind == "line":
        return LineElement(
            id=element_id,
            x1=parse_number(attrs.get("x1")) + ox,
            y1=parse_number(attrs.get("y1")) + oy,
            x2=parse_number(attrs.get("x2")) + ox,
            y2=parse_number(attrs.get("y2")) + oy,
            paint=_paint(attrs),
        )
    if kind == "image":
        return ImageElement(
            id=element_id,
            x=parse_number(attrs.get("x")) + ox,
            y=parse_number(attrs.get("y")) + oy,
            width=parse_number(attrs.get("width"), config.default_image_size),
            height=parse_number(attrs.get("height"), config.default_image_size),
            href=href_of(attrs),
            preserve_aspect_ratio=attrs.get("preserveAspectRatio"),
            opacity=_optional_number(attrs.get("opacity")),
        )
    if kind == "circle":
        return CircleElement(
            id=element_id,
            cx=parse_number(attrs.get("cx")) + ox,
            cy=parse_number(attrs.get("cy")) + oy,
            r=parse_number(attrs.get("r")),
            paint=_paint(attrs),
        )
    if kind == "path":
        tx, ty = parse_translate(attrs.get("transform"))
        w, h = path_extent(attrs.get("d", ""), config.path_size_cap)
        return PathElement(
            id=element_id,
            d=attrs.get("d", ""),
            x=tx + ox,
            y=ty + oy,
            width=w,
            height=h,
            paint=_paint(attrs),
        )
    raise ValueError(f"Unknown shape kind: {kind}")


# ── Shared helpers ────────────────────────────────────────────────────────


def _build_text(
    element_id: str,
    m: re.Match[str],
    config: ConverterConfig,
    offset: tuple[float, float],
) -> TextElement | None:
    attrs = extract_attrs(f"<text{m.group(1)}>")
    inner = m.group(2)

    content = html.unescape(_ANY_TAG_RE.sub("", inner))
    content = _WHITESPACE_RE.sub(" ", content).strip()
    if not content:
        return None

    tspan = _TSPAN_OPEN_RE.search(inner)
    tspan_attrs = extract_attrs(tspan.group(0)) if tspan else {}

    def attr(name: str) -> str | None:
        return attrs.get(name) or tspan_attrs.get(name)

    tx, ty = parse_translate(attrs.get("transform"))
    placeholder = match_placeholder(content)

    return TextElement(
        id=element_id,
        content=content,
        x=parse_number(attr("x")) + tx + offset[0],
        y=parse_number(attr("y")) + ty + offset[1],
        font_size=parse_number(attr("font-size"), config.default_font_size),
        font_family=attr("font-family") or config.default_font_family,
        font_weight=attr("font-weight") or config.default_font_weight,
        fill=attr("fill") or config.default_fill,
        text_anchor=attr("text-anchor") or config.default_text_anchor,
        is_placeholder=placeholder is not None,
        placeholder_name=placeholder,
    )


def _paint(attrs: dict[str, str]) -> Paint:
    stroke = attrs.get("stroke")
    has_stroke = bool(stroke) and stroke.lower() != "none"
    return Paint(
        fill=attrs.get("fill"),
        stroke=stroke,
        stroke_width=parse_number(attrs.get("stroke-width"), 1.0 if has_stroke else 0.0),
        opacity=_optional_number(attrs.get("opacity")),
    )


def _optional_number(value: str | None) -> float | None:
    if value is None:
        return None
    return parse_number(value, 1.0)
