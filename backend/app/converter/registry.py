"""Renderer registry: each HTML/CSS rendering strategy registers via decorator.

Usage:
    @renderer("overlay", description="Original SVG behind an editable text layer")
    def render_overlay(svg_text, dims, page_class, config) -> RenderedPage:
        ...

Adding a rendering mode = one module with the decorator, imported from
app.converter.__init__.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from app.converter.config import ConverterConfig
    from app.converter.elements import Dimensions

logger = logging.getLogger(__name__)


@dataclass
class RenderedPage:
    html: str
    css: str
    placeholders: list[str] = field(default_factory=list)
    text_elements: int = 0
    icon_elements: int = 0


RenderFn = Callable[[str, "Dimensions", str, "ConverterConfig"], RenderedPage]


@dataclass
class RendererSpec:
    mode: str
    fn: RenderFn
    description: str = ""


class RendererRegistry:
    """Singleton registry of rendering modes."""

    def __init__(self) -> None:
        self._renderers: dict[str, RendererSpec] = {}

    def register(self, spec: RendererSpec) -> None:
        if spec.mode in self._renderers:
            raise ValueError(f"Duplicate renderer mode: {spec.mode}")
        self._renderers[spec.mode] = spec
        logger.debug("Registered renderer %s", spec.mode)

    def get(self, mode: str) -> RendererSpec:
        try:
            return self._renderers[mode]
        except KeyError:
            known = ", ".join(self.modes) or "none"
            raise ValueError(f"Unknown conversion mode {mode!r} (available: {known})") from None

    @property
    def modes(self) -> list[str]:
        return sorted(self._renderers)

    @property
    def specs(self) -> list[RendererSpec]:
        return [self._renderers[mode] for mode in self.modes]


# Module-level singleton
_registry = RendererRegistry()


def get_registry() -> RendererRegistry:
    return _registry


def renderer(mode: str, *, description: str = ""):
    """Decorator to register a rendering function under a mode name."""

    def decorator(fn: RenderFn) -> RenderFn:
        _registry.register(RendererSpec(mode=mode, fn=fn, description=description))
        return fn

    return decorator
