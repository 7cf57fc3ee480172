"""Shared test fixtures."""

from __future__ import annotations

import pytest

from app.converter import ConverterConfig


# Sample page designs

CENTERED_TEXT_SVG = '''<svg viewBox="0 0 200 100"><text x="100" y="50" text-anchor="middle">{{name}}</text></svg>'''

CIRCLE_PAGE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <circle cx="50" cy="50" r="10" fill="#FF6B6B"/>
</svg>'''

NO_DIMENSIONS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect x="10" y="10" width="20" height="20"/>
</svg>'''

COVER_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- exported by a design tool -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="612" height="792" viewBox="0 0 612 792">
  <defs>
    <clipPath id="clip"><rect x="0" y="0" width="10" height="10"/></clipPath>
  </defs>
  <rect x="0" y="0" width="612" height="200" fill="#1A2B3C"/>
  <text x="306" y="120" font-size="36" font-family="Georgia" font-weight="bold" fill="#FFFFFF" text-anchor="middle">{{title}}</text>
  <text x="72" y="700" font-size="12">
    <tspan>Prepared for </tspan><tspan>${client}</tspan>
  </text>
  <text x="540" y="760" text-anchor="end">Page %page%</text>
  <text x="10" y="10">   </text>
  <image x="500" y="20" width="80" height="40" xlink:href="logo.png"/>
  <circle cx="306" cy="400" r="50" fill="none" stroke="#333333" stroke-width="2"/>
  <path d="M10 20 L150 40 L60 300" transform="translate(100, 450)" fill="#CCCCCC"/>
  <line x1="72" y1="680" x2="540" y2="680" stroke="#999999"/>
</svg>'''

GROUPED_SVG = '''<svg viewBox="0 0 400 400">
  <rect x="1" y="1" width="10" height="10"/>
  <g id="header" transform="translate(20, 30)">
    <text x="5" y="15">[company]</text>
    <g transform="translate(100, 100)">
      <circle cx="10" cy="10" r="5"/>
    </g>
  </g>
  <circle cx="200" cy="200" r="20"/>
</svg>'''


@pytest.fixture
def config() -> ConverterConfig:
    return ConverterConfig()


@pytest.fixture
def cover_svg() -> str:
    return COVER_SVG


@pytest.fixture
def grouped_svg() -> str:
    return GROUPED_SVG
