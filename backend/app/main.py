"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.converter_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="SVG Template Converter",
        description="SVG page designs to responsive HTML/CSS document templates",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    from app.api.router import api_router

    app.include_router(api_router)

    return app


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body problems as {"error": ...}; unreadable JSON is a server-side failure."""
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        message = errors[0].get("msg", "Invalid JSON body")
        logger.error("Rejected request with malformed JSON: %s", message)
        return JSONResponse(status_code=500, content={"error": message})

    first = errors[0] if errors else {}
    location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"error": f"{location}: {message}" if location else message},
    )


app = create_app()
