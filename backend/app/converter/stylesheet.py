"""CSS generation for converted pages."""

from __future__ import annotations

from app.converter.config import ConverterConfig
from app.converter.elements import Dimensions

Rules = dict[str, dict[str, str]]


def render_rules(rules: Rules, indent: str = "") -> str:
    """Serialize selector -> {property: value} into CSS blocks."""
    blocks = []
    for selector, props in rules.items():
        lines = [f"{indent}{selector} {{"]
        for prop, value in props.items():
            lines.append(f"{indent}  {prop}: {value};")
        lines.append(f"{indent}}}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def page_rules(dims: Dimensions, page_class: str) -> Rules:
    """Responsive page container keeping the drawing's aspect ratio."""
    return {
        ".page-container": {
            "position": "relative",
            "width": "100%",
            "max-width": f"{_num(dims.view_box_width)}px",
            "aspect-ratio": f"{dims.aspect_ratio:.4f}",
            "margin": "0 auto",
            "overflow": "hidden",
            "background": "white",
            "box-sizing": "border-box",
        },
        f".page-container.page-{page_class}": {},
    }


def text_rules() -> Rules:
    """Base text box styling.

    SVG y is the baseline while CSS top is the box's top edge, so the box is
    lifted by its own height. Anchor classes add the horizontal shift.
    """
    return {
        ".text-element": {
            "position": "absolute",
            "margin": "0",
            "line-height": "1",
            "white-space": "nowrap",
            "transform": "translateY(-100%)",
        },
        ".text-element.anchor-middle": {
            "transform": "translate(-50%, -100%)",
        },
        ".text-element.anchor-end": {
            "transform": "translate(-100%, -100%)",
        },
    }


def print_rules(config: ConverterConfig) -> str:
    body = render_rules(
        {
            ".page-container": {
                "width": config.print_page_width,
                "height": config.print_page_height,
                "max-width": "none",
                "aspect-ratio": "auto",
                "page-break-after": "always",
            },
        },
        indent="  ",
    )
    return f"@media print {{\n{body}\n}}"


def assemble(*sections: Rules | str) -> str:
    parts = [s if isinstance(s, str) else render_rules(s) for s in sections]
    return "\n\n".join(p for p in parts if p) + "\n"


def _num(value: float) -> str:
    return f"{value:g}"
