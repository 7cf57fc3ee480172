"""HTML fragment helpers shared by the renderers."""

from __future__ import annotations

import html

from app.converter.elements import Dimensions, TextElement
from app.converter.layout import style_attr, text_declarations


def attrs_html(attrs: dict[str, str | None]) -> str:
    """Serialize attributes, skipping None values. Values are escaped."""
    parts = [f'{k}="{html.escape(v, quote=True)}"' for k, v in attrs.items() if v is not None]
    return " ".join(parts)


def text_div(text: TextElement, dims: Dimensions) -> str:
    """Absolutely positioned box for one text element."""
    classes = ["text-element"]
    if text.text_anchor in ("middle", "end"):
        classes.append(f"anchor-{text.text_anchor}")
    if text.is_placeholder:
        classes.append("placeholder")

    attrs = attrs_html({
        "id": text.id,
        "class": " ".join(classes),
        "data-placeholder": text.placeholder_name,
        "style": style_attr(text_declarations(text, dims)),
    })
    return f"<div {attrs}>{html.escape(text.content, quote=False)}</div>"


def indent(lines: list[str], depth: int) -> list[str]:
    pad = "  " * depth
    return [pad + line for line in lines]
