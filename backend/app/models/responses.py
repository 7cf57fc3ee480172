"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    modes: list[str] = Field(default_factory=list)
    descriptions: dict[str, str] = Field(default_factory=dict)


class ConvertResponse(BaseModel):
    success: bool = True
    html: str
    css: str
    placeholders: list[str] = Field(default_factory=list)
    page_type: str = Field(alias="pageType")
    name: str
    mode: str = "overlay"
    text_elements: int = Field(default=0, alias="textElements")
    icon_elements: int = Field(default=0, alias="iconElements")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    error: str


class PageType(BaseModel):
    value: str
    label: str
