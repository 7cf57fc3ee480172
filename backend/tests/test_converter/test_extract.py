"""Tests for element extraction."""

from tests.conftest import CENTERED_TEXT_SVG, COVER_SVG, GROUPED_SVG

from app.converter.elements import (
    CircleElement,
    GroupElement,
    ImageElement,
    LineElement,
    PathElement,
    RectElement,
    TextElement,
)
from app.converter.extract import extract_elements, extract_icon_elements, extract_text_elements
from app.svg.cleaner import strip_non_rendered


# ── Text ──


def test_centered_text():
    texts = extract_text_elements(CENTERED_TEXT_SVG)
    assert len(texts) == 1
    text = texts[0]
    assert text.id == "text-1"
    assert text.content == "{{name}}"
    assert (text.x, text.y) == (100.0, 50.0)
    assert text.text_anchor == "middle"
    assert text.is_placeholder
    assert text.placeholder_name == "name"


def test_text_defaults(config):
    text = extract_text_elements('<svg><text>Hello</text></svg>', config)[0]
    assert (text.x, text.y) == (0.0, 0.0)
    assert text.font_size == 16.0
    assert text.font_family == "sans-serif"
    assert text.font_weight == "normal"
    assert text.fill == "#000000"
    assert text.text_anchor == "start"
    assert not text.is_placeholder
    assert text.placeholder_name is None


def test_whitespace_only_text_is_skipped():
    assert extract_text_elements("<svg><text x='1' y='2'>  \n\t </text></svg>") == []
    assert extract_text_elements("<svg><text></text></svg>") == []


def test_tspans_are_concatenated():
    svg = '<svg><text x="5" y="6"><tspan>Hello</tspan><tspan font-weight="bold">World</tspan></text></svg>'
    assert extract_text_elements(svg)[0].content == "HelloWorld"


def test_tspan_position_and_font_fallback():
    svg = '<svg><text><tspan x="12" y="34" font-size="9">Label</tspan></text></svg>'
    text = extract_text_elements(svg)[0]
    assert (text.x, text.y) == (12.0, 34.0)
    assert text.font_size == 9.0


def test_text_matrix_transform_positions_text():
    svg = '<svg><text transform="matrix(1 0 0 1 72 100)" style="font-size:14px;fill:#333">Hi</text></svg>'
    text = extract_text_elements(svg)[0]
    assert (text.x, text.y) == (72.0, 100.0)
    assert text.font_size == 14.0
    assert text.fill == "#333"


def test_entities_are_unescaped():
    text = extract_text_elements("<svg><text>Q&amp;A &lt;3</text></svg>")[0]
    assert text.content == "Q&A <3"


def test_first_matching_placeholder_syntax_wins():
    text = extract_text_elements("<svg><text>[second] {{first}}</text></svg>")[0]
    assert text.placeholder_name == "first"


def test_cover_texts():
    texts = extract_text_elements(strip_non_rendered(COVER_SVG))
    assert [t.content for t in texts] == ["{{title}}", "Prepared for ${client}", "Page %page%"]
    assert [t.placeholder_name for t in texts] == ["title", "client", "page"]
    title = texts[0]
    assert title.font_size == 36.0
    assert title.font_family == "Georgia"
    assert title.font_weight == "bold"
    assert title.fill == "#FFFFFF"


# ── Icons ──


def test_circle_bounding_box():
    icons = extract_icon_elements('<svg><circle cx="50" cy="50" r="10"/></svg>')
    assert len(icons) == 1
    icon = icons[0]
    assert icon.type == "circle"
    assert (icon.x, icon.y, icon.width, icon.height) == (40.0, 40.0, 20.0, 20.0)


def test_image_default_size(config):
    icon = extract_icon_elements('<svg><image x="3" y="4" href="a.png"/></svg>', config)[0]
    assert icon.type == "image"
    assert (icon.x, icon.y, icon.width, icon.height) == (3.0, 4.0, 50.0, 50.0)


def test_path_translate_and_size_heuristic():
    icon = extract_icon_elements('<svg><path d="M10 20 L150 40 L60 300" transform="translate(100, 450)"/></svg>')[0]
    assert icon.type == "path"
    assert (icon.x, icon.y) == (100.0, 450.0)
    # max even token 150, max odd token 300 capped at 200
    assert (icon.width, icon.height) == (150.0, 200.0)


def test_path_without_transform_or_numbers():
    icon = extract_icon_elements('<svg><path d=""/></svg>')[0]
    assert (icon.x, icon.y, icon.width, icon.height) == (0.0, 0.0, 0.0, 0.0)


def test_icons_grouped_by_tag_type():
    svg = '<svg><path d="M0 0"/><circle r="1"/><image/><circle r="2"/></svg>'
    icons = extract_icon_elements(svg)
    assert [i.type for i in icons] == ["image", "circle", "circle", "path"]
    assert [i.id for i in icons] == ["icon-1", "icon-2", "icon-3", "icon-4"]


def test_icon_keeps_raw_markup():
    icon = extract_icon_elements('<svg><circle cx="1" cy="1" r="1" fill="red"/></svg>')[0]
    assert icon.raw_markup == '<circle cx="1" cy="1" r="1" fill="red"/>'


# ── Decomposed tree ──


def test_decomposed_document_order():
    svg = '<rect width="1" height="1"/><text>A</text><circle r="1"/><line x2="1"/><path d="M0 0"/><image/>'
    kinds = [type(e) for e in extract_elements(svg)]
    assert kinds == [RectElement, TextElement, CircleElement, LineElement, PathElement, ImageElement]


def test_decomposed_groups_recurse_with_shallow_translate():
    elements = extract_elements(GROUPED_SVG)
    assert [type(e) for e in elements] == [RectElement, GroupElement, CircleElement]

    header = elements[1]
    assert header.id == "group-1"
    assert header.transform == "translate(20, 30)"
    text, inner = header.children
    assert isinstance(text, TextElement)
    assert (text.x, text.y) == (25.0, 45.0)
    assert text.placeholder_name == "company"

    assert isinstance(inner, GroupElement)
    circle = inner.children[0]
    # inner translate replaces the outer one rather than composing with it
    assert (circle.cx, circle.cy) == (110.0, 110.0)

    outer_circle = elements[2]
    assert (outer_circle.cx, outer_circle.cy) == (200.0, 200.0)


def test_group_without_transform_inherits_offset():
    svg = '<g transform="translate(10 10)"><g><rect x="1" y="1" width="2" height="2"/></g></g>'
    rect = extract_elements(svg)[0].children[0].children[0]
    assert (rect.x, rect.y) == (11.0, 11.0)


def test_decomposed_shape_fields():
    svg = (
        '<rect x="1" y="2" width="3" height="4" rx="1" fill="#abc" stroke="#000" stroke-width="2" opacity="0.5"/>'
        '<line x1="0" y1="5" x2="10" y2="5" stroke="red"/>'
        '<image x="1" y="1" width="10" height="20" xlink:href="pic.png" preserveAspectRatio="none"/>'
    )
    rect, line, image = extract_elements(svg)
    assert rect.bounds() == (1.0, 2.0, 3.0, 4.0)
    assert (rect.rx, rect.ry) == (1.0, 1.0)
    assert rect.paint.fill == "#abc"
    assert rect.paint.stroke_width == 2.0
    assert rect.paint.opacity == 0.5

    assert line.bounds() == (0.0, 5.0, 10.0, 0.0)
    assert line.paint.stroke == "red"
    assert line.paint.stroke_width == 1.0

    assert image.href == "pic.png"
    assert image.preserve_aspect_ratio == "none"


def test_decomposed_ids_are_per_kind_and_skip_empty_text():
    elements = extract_elements("<text> </text><text>a</text><circle/><circle/>")
    assert [e.id for e in elements] == ["text-1", "circle-1", "circle-2"]


def test_malformed_markup_yields_nothing():
    assert extract_elements("<svg><rect") == []
    assert extract_text_elements("<text>unterminated") == []
    assert extract_icon_elements("<<<>>>") == []
