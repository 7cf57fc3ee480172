"""Drawing primitives extracted from an SVG page.

Every kind carries explicit fields; renderers dispatch on the concrete class.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from app.utils.geometry import circle_bounds, segment_bounds

Box = tuple[float, float, float, float]  # (x, y, width, height)


@dataclass(frozen=True)
class Dimensions:
    """Page coordinate space. view_box_* is the denominator of every percentage."""

    width: float
    height: float
    view_box_width: float
    view_box_height: float

    @property
    def aspect_ratio(self) -> float:
        return self.view_box_width / self.view_box_height


@dataclass
class Paint:
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float = 0.0
    opacity: float | None = None


@dataclass
class TextElement:
    id: str
    content: str
    x: float
    y: float
    font_size: float
    font_family: str
    font_weight: str
    fill: str
    text_anchor: str
    is_placeholder: bool = False
    placeholder_name: str | None = None

    def bounds(self) -> Box:
        return (self.x, self.y, 0.0, 0.0)


@dataclass
class IconElement:
    """Graphic kept in the overlay background; its box becomes a slot."""

    id: str
    type: Literal["image", "circle", "path"]
    raw_markup: str
    x: float
    y: float
    width: float
    height: float

    def bounds(self) -> Box:
        return (self.x, self.y, self.width, self.height)


@dataclass
class RectElement:
    id: str
    x: float
    y: float
    width: float
    height: float
    rx: float = 0.0
    ry: float = 0.0
    paint: Paint = field(default_factory=Paint)

    def bounds(self) -> Box:
        return (self.x, self.y, self.width, self.height)


@dataclass
class LineElement:
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    paint: Paint = field(default_factory=Paint)

    def bounds(self) -> Box:
        return segment_bounds(self.x1, self.y1, self.x2, self.y2)


@dataclass
class ImageElement:
    id: str
    x: float
    y: float
    width: float
    height: float
    href: str = ""
    preserve_aspect_ratio: str | None = None
    opacity: float | None = None

    def bounds(self) -> Box:
        return (self.x, self.y, self.width, self.height)


@dataclass
class CircleElement:
    id: str
    cx: float
    cy: float
    r: float
    paint: Paint = field(default_factory=Paint)

    def bounds(self) -> Box:
        return circle_bounds(self.cx, self.cy, self.r)


@dataclass
class PathElement:
    """Path with a heuristic box; `d` is kept verbatim for the inline <svg>."""

    id: str
    d: str
    x: float
    y: float
    width: float
    height: float
    paint: Paint = field(default_factory=Paint)

    def bounds(self) -> Box:
        return (self.x, self.y, self.width, self.height)


@dataclass
class GroupElement:
    id: str
    transform: str = ""
    opacity: float | None = None
    children: list[DrawingElement] = field(default_factory=list)

    def bounds(self) -> Box:
        return (0.0, 0.0, 0.0, 0.0)


DrawingElement = Union[
    TextElement,
    RectElement,
    LineElement,
    ImageElement,
    CircleElement,
    PathElement,
    GroupElement,
]


@dataclass
class ConversionResult:
    html: str
    css: str
    placeholders: list[str]
    page_type: str
    name: str
    mode: str
    text_elements: int = 0
    icon_elements: int = 0
