"""Attribute helpers for regex-scanned SVG tags."""

from __future__ import annotations

import re

_ATTR_RE = re.compile(r"""([A-Za-z_][\w:.-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_LEADING_NUMBER_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_TRANSLATE_RE = re.compile(
    r"translate\(\s*([-+]?[\d.eE+-]+)(?:[\s,]+([-+]?[\d.eE+-]+))?\s*\)",
    re.IGNORECASE,
)
_MATRIX_RE = re.compile(r"matrix\(([^)]*)\)", re.IGNORECASE)


def extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract key=value attributes from an SVG tag string.

    Only the opening tag is scanned. Declarations in an inline ``style``
    attribute override presentation attributes of the same name.
    """
    opening = tag_text.split(">", 1)[0]
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(opening):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value
    style = attrs.get("style")
    if style:
        attrs.update(parse_style(style))
    return attrs


def parse_style(style: str) -> dict[str, str]:
    """Split an inline CSS declaration list into a dict."""
    declarations: dict[str, str] = {}
    for part in style.split(";"):
        if ":" not in part:
            continue
        key, value = part.split(":", 1)
        key = key.strip().lower()
        value = value.strip()
        if key and value:
            declarations[key] = value
    return declarations


def parse_number(value: str | None, default: float = 0.0) -> float:
    """Leading float of an attribute value ("12px" -> 12.0), else default."""
    if value is None:
        return default
    m = _LEADING_NUMBER_RE.match(value)
    if not m:
        return default
    try:
        return float(m.group(1))
    except ValueError:
        return default


def parse_translate(transform: str | None) -> tuple[float, float]:
    """Offset carried by a transform attribute.

    Reads ``translate(x[, y])`` or the e/f terms of ``matrix(a b c d e f)``.
    Rotation, scale and chained functions are ignored.
    """
    if not transform:
        return (0.0, 0.0)
    m = _TRANSLATE_RE.search(transform)
    if m:
        return (parse_number(m.group(1)), parse_number(m.group(2)))
    m = _MATRIX_RE.search(transform)
    if m:
        terms = [t for t in re.split(r"[\s,]+", m.group(1).strip()) if t]
        if len(terms) == 6:
            return (parse_number(terms[4]), parse_number(terms[5]))
    return (0.0, 0.0)


def href_of(attrs: dict[str, str]) -> str:
    """Image source from ``href`` or the legacy ``xlink:href``."""
    return attrs.get("href") or attrs.get("xlink:href") or ""
