"""Overlay renderer: the original drawing stays intact as a background layer.

Text is lifted out of the SVG into absolutely positioned divs so it can be
edited and filled; images, circles and paths remain in the background and are
only marked by empty icon slots over their approximate boxes.
"""

from __future__ import annotations

import logging
import re

from app.converter.config import ConverterConfig
from app.converter.elements import Dimensions
from app.converter.extract import extract_icon_elements, extract_text_elements
from app.converter.fragments import attrs_html, indent, text_div
from app.converter.layout import box_declarations, style_attr
from app.converter.placeholders import detect_placeholders, merge_placeholders
from app.converter.registry import RenderedPage, renderer
from app.converter.stylesheet import assemble, page_rules, print_rules, text_rules
from app.svg.cleaner import make_responsive, remove_text_elements, strip_non_rendered, strip_prolog

logger = logging.getLogger(__name__)

_SVG_DOCUMENT_RE = re.compile(r"<svg\b.*</svg\s*>", re.DOTALL | re.IGNORECASE)

_OVERLAY_RULES = {
    ".svg-background": {
        "position": "absolute",
        "top": "0",
        "left": "0",
        "width": "100%",
        "height": "100%",
        "z-index": "0",
    },
    ".svg-background svg": {
        "width": "100%",
        "height": "100%",
        "display": "block",
    },
    ".content-overlay": {
        "position": "absolute",
        "top": "0",
        "left": "0",
        "width": "100%",
        "height": "100%",
        "z-index": "1",
        "pointer-events": "none",
    },
    ".content-overlay > *": {
        "pointer-events": "auto",
    },
    ".icon-slot": {
        "position": "absolute",
        "box-sizing": "border-box",
    },
}


@renderer("overlay", description="Original SVG as background with an editable text overlay")
def render_overlay(
    svg_text: str,
    dims: Dimensions,
    page_class: str,
    config: ConverterConfig,
) -> RenderedPage:
    scan = strip_non_rendered(svg_text)
    texts = extract_text_elements(scan, config)
    icons = extract_icon_elements(scan, config)

    background = _background_svg(svg_text, config)

    overlay_lines = [text_div(t, dims) for t in texts]
    for icon in icons:
        attrs = attrs_html({
            "id": icon.id,
            "class": f"icon-slot icon-{icon.type}",
            "data-icon-type": icon.type,
            "style": style_attr(box_declarations(icon.x, icon.y, icon.width, icon.height, dims)),
        })
        overlay_lines.append(f"<div {attrs}></div>")

    lines = [f'<div class="page-container page-{page_class}">', '  <div class="svg-background">']
    if background:
        lines.extend(indent(background.splitlines(), 2))
    lines.append("  </div>")
    lines.append('  <div class="content-overlay">')
    lines.extend(indent(overlay_lines, 2))
    lines.append("  </div>")
    lines.append("</div>")

    css = assemble(page_rules(dims, page_class), _OVERLAY_RULES, text_rules(), print_rules(config))
    placeholders = merge_placeholders(
        (t.placeholder_name for t in texts if t.placeholder_name),
        detect_placeholders(scan),
    )

    logger.debug("Overlay: %d text elements, %d icon slots", len(texts), len(icons))
    return RenderedPage(
        html="\n".join(lines),
        css=css,
        placeholders=placeholders,
        text_elements=len(texts),
        icon_elements=len(icons),
    )


def _background_svg(svg_text: str, config: ConverterConfig) -> str:
    """Responsive copy of the root <svg>, or "" when the input holds none."""
    m = _SVG_DOCUMENT_RE.search(strip_prolog(svg_text))
    if m is None:
        return ""
    svg = m.group(0)
    if config.strip_background_text:
        svg = remove_text_elements(svg)
    return make_responsive(svg)
