"""SVG-to-HTML template converter."""

from app.converter.config import ConverterConfig
from app.converter.elements import ConversionResult, Dimensions
from app.converter.pipeline import convert_svg
from app.converter.registry import get_registry, renderer

# Importing the renderer modules registers their modes
from app.converter import decomposed, overlay  # noqa: F401

__all__ = [
    "ConverterConfig",
    "ConversionResult",
    "Dimensions",
    "convert_svg",
    "get_registry",
    "renderer",
]
