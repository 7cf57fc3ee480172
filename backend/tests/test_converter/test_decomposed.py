"""Tests for the decomposed renderer."""

from tests.conftest import CENTERED_TEXT_SVG, CIRCLE_PAGE_SVG, COVER_SVG, GROUPED_SVG

from app.converter import convert_svg


def test_circle_box_scenario():
    result = convert_svg(CIRCLE_PAGE_SVG, mode="decomposed")
    assert result.mode == "decomposed"
    assert result.icon_elements == 1
    assert 'class="svg-element svg-circle"' in result.html
    assert "left: 20.00%; top: 20.00%; width: 10.00%; height: 10.00%;" in result.html
    assert "background: #FF6B6B" in result.html
    assert ".svg-circle {\n  border-radius: 50%;\n}" in result.css


def test_centered_text_scenario():
    result = convert_svg(CENTERED_TEXT_SVG, mode="decomposed")
    assert result.placeholders == ["name"]
    assert 'data-placeholder="name"' in result.html
    assert "left: 50.00%" in result.html
    assert "top: 50.00%" in result.html
    assert "text-align: center" in result.html


def test_no_background_layer():
    result = convert_svg(COVER_SVG, mode="decomposed")
    assert "svg-background" not in result.html
    assert result.html.startswith('<div class="page-container page-text decomposed">')


def test_cover_elements():
    result = convert_svg(COVER_SVG, mode="decomposed")
    html = result.html
    assert result.text_elements == 3
    # rect, image, circle, path, line
    assert result.icon_elements == 5
    assert 'class="svg-element svg-rect"' in html
    assert "background: #1A2B3C" in html
    assert '<img id="image-1" class="svg-element svg-image" src="logo.png" alt=""' in html
    assert 'class="svg-element svg-line"' in html
    assert 'class="svg-element svg-path"' in html
    # hollow circle: transparent fill, stroke becomes a border
    assert "background: transparent; border: 0.327vw solid #333333" in html
    # clipPath content inside <defs> is not drawn
    assert html.count("svg-rect") == 1


def test_elements_follow_document_order():
    result = convert_svg(COVER_SVG, mode="decomposed")
    html = result.html
    order = [html.index(marker) for marker in ('id="rect-1"', 'id="text-1"', 'id="image-1"', 'id="circle-1"', 'id="path-1"', 'id="line-1"')]
    assert order == sorted(order)


def test_groups_nest_in_html():
    result = convert_svg(GROUPED_SVG, mode="decomposed")
    html = result.html
    assert '<div id="group-1" class="svg-group" data-transform="translate(20, 30)">' in html
    assert '<div id="group-2" class="svg-group" data-transform="translate(100, 100)">' in html
    assert html.index('id="group-2"') > html.index('id="group-1"')
    assert result.placeholders == ["company"]
    # text at (5 + 20, 15 + 30) in a 400x400 page
    assert "left: 6.25%; top: 11.25%;" in html


def test_full_document_placeholder_scan():
    svg = '<svg viewBox="0 0 10 10"><text>{{a}} [b]</text><image href="%logo%"/></svg>'
    result = convert_svg(svg, mode="decomposed")
    assert result.placeholders == ["a", "logo", "b"]
    overlay = convert_svg(svg, mode="overlay")
    assert overlay.placeholders == ["a", "logo", "b"]


def test_path_gets_local_viewbox():
    svg = '<svg viewBox="0 0 100 100"><path d="M0 0 L20 10" transform="translate(5, 5)" fill="red"/></svg>'
    result = convert_svg(svg, mode="decomposed")
    assert '<svg viewBox="0 0 20 10" preserveAspectRatio="none"><path d="M0 0 L20 10" fill="red"/></svg>' in result.html
    assert "left: 5.00%; top: 5.00%; width: 20.00%; height: 10.00%;" in result.html


def test_zero_width_line_is_padded():
    svg = '<svg viewBox="0 0 100 100"><line x1="50" y1="0" x2="50" y2="100" stroke="#000" stroke-width="2"/></svg>'
    result = convert_svg(svg, mode="decomposed")
    assert "left: 49.00%; top: 0.00%; width: 2.00%; height: 100.00%;" in result.html
    assert 'viewBox="49 0 2 100"' in result.html
