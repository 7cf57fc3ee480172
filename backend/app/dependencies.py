"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from app.config import Settings, settings
from app.converter.config import ConverterConfig


def get_settings():
    return settings


def get_converter_config(settings: Settings = Depends(get_settings)) -> ConverterConfig:
    return ConverterConfig.from_settings(settings)
