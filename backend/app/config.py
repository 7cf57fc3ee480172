"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    converter_env: str = "development"
    converter_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["*"]

    # Fallback page size when an SVG has neither viewBox nor width/height
    default_page_width: float = 595.0
    default_page_height: float = 842.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
