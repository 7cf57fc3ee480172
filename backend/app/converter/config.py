"""Converter configuration, injected per conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.config import Settings


@dataclass(frozen=True)
class ConverterConfig:
    """Defaults used when the SVG leaves a value unspecified."""

    # Page size when neither viewBox nor width/height is usable (A4 in points)
    default_page_width: float = 595.0
    default_page_height: float = 842.0

    # Text
    default_font_size: float = 16.0
    default_font_family: str = "sans-serif"
    default_font_weight: str = "normal"
    default_fill: str = "#000000"
    default_text_anchor: str = "start"

    # Icons
    default_image_size: float = 50.0
    path_size_cap: float = 200.0  # upper bound of the path size heuristic

    # Physical print page
    print_page_width: str = "8.5in"
    print_page_height: str = "11in"

    # Overlay renderer: drop <text> from the background so it only shows once
    strip_background_text: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> ConverterConfig:
        return cls(
            default_page_width=settings.default_page_width,
            default_page_height=settings.default_page_height,
        )
