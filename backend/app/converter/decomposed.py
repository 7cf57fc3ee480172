"""Decomposed renderer: every drawing primitive becomes its own positioned box."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from app.converter.config import ConverterConfig
from app.converter.elements import (
    CircleElement,
    Dimensions,
    DrawingElement,
    GroupElement,
    ImageElement,
    LineElement,
    Paint,
    PathElement,
    RectElement,
    TextElement,
)
from app.converter.extract import extract_elements
from app.converter.fragments import attrs_html, indent, text_div
from app.converter.layout import box_declarations, style_attr, to_vw
from app.converter.placeholders import detect_placeholders, merge_placeholders
from app.converter.registry import RenderedPage, renderer
from app.converter.stylesheet import assemble, page_rules, print_rules, text_rules
from app.svg.cleaner import strip_non_rendered

logger = logging.getLogger(__name__)

_ROOT_INNER_RE = re.compile(r"<svg\b[^>]*>(.*)</svg\s*>", re.DOTALL | re.IGNORECASE)

_DECOMPOSED_RULES = {
    ".svg-element": {
        "position": "absolute",
        "box-sizing": "border-box",
    },
    ".svg-circle": {
        "border-radius": "50%",
    },
    ".svg-line svg, .svg-path svg": {
        "display": "block",
        "width": "100%",
        "height": "100%",
        "overflow": "visible",
    },
    ".svg-group": {
        "position": "absolute",
        "inset": "0",
        "pointer-events": "none",
    },
    ".svg-group > *": {
        "pointer-events": "auto",
    },
}


@renderer("decomposed", description="Every SVG primitive as an independently styleable box")
def render_decomposed(
    svg_text: str,
    dims: Dimensions,
    page_class: str,
    config: ConverterConfig,
) -> RenderedPage:
    scan = strip_non_rendered(svg_text)
    m = _ROOT_INNER_RE.search(scan)
    body = m.group(1) if m else scan
    elements = extract_elements(body, config)

    lines = [f'<div class="page-container page-{page_class} decomposed">']
    for element in elements:
        lines.extend(indent(_render(element, dims), 1))
    lines.append("</div>")

    texts = [e for e in walk(elements) if isinstance(e, TextElement)]
    shapes = [e for e in walk(elements) if not isinstance(e, (TextElement, GroupElement))]
    placeholders = merge_placeholders(
        (t.placeholder_name for t in texts if t.placeholder_name),
        detect_placeholders(scan),
    )

    css = assemble(page_rules(dims, page_class), _DECOMPOSED_RULES, text_rules(), print_rules(config))
    logger.debug("Decomposed: %d text elements, %d shapes", len(texts), len(shapes))
    return RenderedPage(
        html="\n".join(lines),
        css=css,
        placeholders=placeholders,
        text_elements=len(texts),
        icon_elements=len(shapes),
    )


def walk(elements: list[DrawingElement]) -> Iterator[DrawingElement]:
    """Depth-first, groups before their children."""
    for element in elements:
        yield element
        if isinstance(element, GroupElement):
            yield from walk(element.children)


def _render(element: DrawingElement, dims: Dimensions) -> list[str]:
    if isinstance(element, TextElement):
        return [text_div(element, dims)]
    if isinstance(element, GroupElement):
        return _render_group(element, dims)
    if isinstance(element, RectElement):
        return [_render_rect(element, dims)]
    if isinstance(element, CircleElement):
        return [_render_circle(element, dims)]
    if isinstance(element, ImageElement):
        return [_render_image(element, dims)]
    if isinstance(element, LineElement):
        return [_render_line(element, dims)]
    if isinstance(element, PathElement):
        return [_render_path(element, dims)]
    raise TypeError(f"Unsupported element: {type(element).__name__}")


def _render_group(group: GroupElement, dims: Dimensions) -> list[str]:
    attrs = attrs_html({
        "id": group.id,
        "class": "svg-group",
        "data-transform": group.transform or None,
        "style": f"opacity: {group.opacity:g};" if group.opacity is not None else None,
    })
    lines = [f"<div {attrs}>"]
    for child in group.children:
        lines.extend(indent(_render(child, dims), 1))
    lines.append("</div>")
    return lines


def _render_rect(rect: RectElement, dims: Dimensions) -> str:
    decls = box_declarations(rect.x, rect.y, rect.width, rect.height, dims)
    decls.extend(_fill_declarations(rect.paint, dims))
    if rect.rx and rect.width and rect.height:
        decls.append(
            f"border-radius: {rect.rx / rect.width * 100:.2f}% / {rect.ry / rect.height * 100:.2f}%"
        )
    return _box_div(rect.id, "svg-rect", decls)


def _render_circle(circle: CircleElement, dims: Dimensions) -> str:
    x, y, w, h = circle.bounds()
    decls = box_declarations(x, y, w, h, dims)
    decls.extend(_fill_declarations(circle.paint, dims))
    return _box_div(circle.id, "svg-circle", decls)


def _render_image(image: ImageElement, dims: Dimensions) -> str:
    decls = box_declarations(image.x, image.y, image.width, image.height, dims)
    fit = "fill" if (image.preserve_aspect_ratio or "").strip() == "none" else "contain"
    decls.append(f"object-fit: {fit}")
    if image.opacity is not None:
        decls.append(f"opacity: {image.opacity:g}")
    attrs = attrs_html({
        "id": image.id,
        "class": "svg-element svg-image",
        "src": image.href,
        "alt": "",
        "style": style_attr(decls),
    })
    return f"<img {attrs}>"


def _render_line(line: LineElement, dims: Dimensions) -> str:
    stroke_width = line.paint.stroke_width or 1.0
    x, y, w, h = _pad_box(line.bounds(), stroke_width)
    inner = attrs_html({
        "x1": f"{line.x1:g}",
        "y1": f"{line.y1:g}",
        "x2": f"{line.x2:g}",
        "y2": f"{line.y2:g}",
        "stroke": line.paint.stroke or "#000000",
        "stroke-width": f"{stroke_width:g}",
        "opacity": f"{line.paint.opacity:g}" if line.paint.opacity is not None else None,
    })
    svg = (
        f'<svg viewBox="{x:g} {y:g} {w:g} {h:g}" preserveAspectRatio="none">'
        f"<line {inner}/></svg>"
    )
    return _box_div(line.id, "svg-line", box_declarations(x, y, w, h, dims), svg)


def _render_path(path: PathElement, dims: Dimensions) -> str:
    w = path.width or 1.0
    h = path.height or 1.0
    inner = attrs_html({
        "d": path.d,
        "fill": path.paint.fill,
        "stroke": path.paint.stroke,
        "stroke-width": f"{path.paint.stroke_width:g}" if path.paint.stroke_width else None,
        "opacity": f"{path.paint.opacity:g}" if path.paint.opacity is not None else None,
    })
    svg = f'<svg viewBox="0 0 {w:g} {h:g}" preserveAspectRatio="none"><path {inner}/></svg>'
    return _box_div(path.id, "svg-path", box_declarations(path.x, path.y, w, h, dims), svg)


def _box_div(element_id: str, kind_class: str, decls: list[str], content: str = "") -> str:
    attrs = attrs_html({
        "id": element_id,
        "class": f"svg-element {kind_class}",
        "style": style_attr(decls),
    })
    return f"<div {attrs}>{content}</div>"


def _fill_declarations(paint: Paint, dims: Dimensions) -> list[str]:
    """Background/border standing in for SVG fill/stroke. Unset fill is black."""
    fill = paint.fill or "#000000"
    decls = [f"background: {'transparent' if fill.lower() == 'none' else fill}"]
    if paint.stroke and paint.stroke.lower() != "none" and paint.stroke_width > 0:
        decls.append(f"border: {to_vw(paint.stroke_width, dims.view_box_width)} solid {paint.stroke}")
    if paint.opacity is not None:
        decls.append(f"opacity: {paint.opacity:g}")
    return decls


def _pad_box(box: tuple[float, float, float, float], minimum: float) -> tuple[float, float, float, float]:
    """Grow a degenerate box (e.g. a vertical line) to at least `minimum` per side."""
    x, y, w, h = box
    if w < minimum:
        x -= (minimum - w) / 2
        w = minimum
    if h < minimum:
        y -= (minimum - h) / 2
        h = minimum
    return (x, y, w, h)
