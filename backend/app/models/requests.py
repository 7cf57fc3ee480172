"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg_content: str | None = Field(
        default=None,
        alias="svgContent",
        description="SVG markup, a data: URI, or bare base64",
    )
    page_type: str = Field(default="text", alias="pageType", description="Document page type")
    name: str | None = Field(default=None, description="Template name")
    mode: str = Field(
        default="overlay",
        description="Rendering mode: overlay (SVG background + text layer) or decomposed",
    )

    model_config = {"populate_by_name": True}
