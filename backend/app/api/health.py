"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from app.converter import get_registry
from app.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    registry = get_registry()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        modes=registry.modes,
        descriptions={spec.mode: spec.description for spec in registry.specs},
    )
