"""Markup clean-up before extraction and before embedding SVG into HTML.

Two levels:
- strip_non_rendered(): removes comments, the XML prolog, DOCTYPE and container
  tags whose children are never drawn in place (defs, symbol, clipPath, ...).
  Used on the copy the extractors scan.
- make_responsive(): rewrites the root <svg> tag so the drawing fills its
  container. Used on the background layer of the overlay renderer.
"""

from __future__ import annotations

import re

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_PROLOG_RE = re.compile(r"<\?xml[^>]*\?>", re.IGNORECASE)
_DOCTYPE_RE = re.compile(r"<!DOCTYPE[^>\[]*(?:\[[^\]]*\])?\s*>", re.IGNORECASE)

_NON_RENDERED_TAGS = (
    "defs", "symbol", "clipPath", "mask", "pattern",
    "metadata", "title", "desc", "style", "script",
)
_NON_RENDERED_RE = re.compile(
    r"<\s*(%s)\b[^>]*>.*?</\s*\1\s*>" % "|".join(_NON_RENDERED_TAGS),
    re.DOTALL | re.IGNORECASE,
)
_NON_RENDERED_SELFCLOSE_RE = re.compile(
    r"<\s*(?:%s)\b[^>]*/\s*>" % "|".join(_NON_RENDERED_TAGS),
    re.IGNORECASE,
)

_TEXT_ELEMENT_RE = re.compile(r"<text\b[^>]*>.*?</text\s*>", re.DOTALL | re.IGNORECASE)
_TEXT_SELFCLOSE_RE = re.compile(r"<text\b[^>]*/\s*>", re.IGNORECASE)

_ROOT_WIDTH_RE = re.compile(r"""(<svg\b[^>]*?)\swidth\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
_ROOT_HEIGHT_RE = re.compile(r"""(<svg\b[^>]*?)\sheight\s*=\s*(?:"[^"]*"|'[^']*')""", re.IGNORECASE)
_ROOT_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)


def strip_prolog(svg_text: str) -> str:
    """Remove comments, the XML declaration and any DOCTYPE."""
    svg_text = _COMMENT_RE.sub("", svg_text)
    svg_text = _PROLOG_RE.sub("", svg_text)
    svg_text = _DOCTYPE_RE.sub("", svg_text)
    return svg_text.strip()


def strip_non_rendered(svg_text: str) -> str:
    """Strip everything the extractors must not treat as a drawn element."""
    svg_text = strip_prolog(svg_text)
    svg_text = _NON_RENDERED_SELFCLOSE_RE.sub("", svg_text)
    return _NON_RENDERED_RE.sub("", svg_text)


def remove_text_elements(svg_text: str) -> str:
    """Drop every <text> element (with its tspans)."""
    svg_text = _TEXT_SELFCLOSE_RE.sub("", svg_text)
    return _TEXT_ELEMENT_RE.sub("", svg_text)


def make_responsive(svg_text: str) -> str:
    """Let the root <svg> scale with its container, keeping its viewBox.

    Fixed width/height are removed from the root tag only, a
    preserveAspectRatio is added when missing, then width/height are set to
    100%.
    """
    svg_text = _ROOT_WIDTH_RE.sub(r"\1", svg_text, count=1)
    svg_text = _ROOT_HEIGHT_RE.sub(r"\1", svg_text, count=1)

    root = _ROOT_TAG_RE.search(svg_text)
    if root is None:
        return svg_text

    tag = root.group(0)
    if "preserveaspectratio" not in tag.lower():
        tag = tag.replace("<svg", '<svg preserveAspectRatio="xMidYMid meet"', 1)
    tag = tag.replace("<svg", '<svg width="100%" height="100%"', 1)
    return svg_text[: root.start()] + tag + svg_text[root.end():]
