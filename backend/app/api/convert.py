"""POST /api/convert-svg-to-html: SVG page design to HTML/CSS template."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.converter import ConverterConfig, convert_svg, get_registry
from app.dependencies import get_converter_config
from app.models.requests import ConvertRequest
from app.models.responses import ConvertResponse, ErrorResponse, PageType

router = APIRouter()
logger = logging.getLogger(__name__)

# Page types offered by the template designer
PAGE_TYPES = [
    PageType(value="cover", label="Cover Page"),
    PageType(value="toc", label="Table of Contents"),
    PageType(value="text", label="Text/Content Page"),
    PageType(value="table", label="Table Page"),
    PageType(value="appendix", label="Appendix"),
]


@router.options("/convert-svg-to-html")
async def convert_preflight() -> Response:
    return Response(status_code=200)


@router.post(
    "/convert-svg-to-html",
    response_model=ConvertResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def convert(
    req: ConvertRequest,
    config: ConverterConfig = Depends(get_converter_config),
):
    if not req.svg_content:
        return JSONResponse(status_code=400, content={"error": "SVG content is required"})

    if req.mode not in get_registry().modes:
        known = ", ".join(get_registry().modes)
        return JSONResponse(
            status_code=400,
            content={"error": f"Unknown conversion mode {req.mode!r} (available: {known})"},
        )

    logger.info("Converting SVG to HTML for page type: %s (%s)", req.page_type, req.mode)

    try:
        result = convert_svg(
            req.svg_content,
            page_type=req.page_type,
            name=req.name,
            mode=req.mode,
            config=config,
        )
    except Exception as e:
        logger.exception("Error converting SVG to HTML")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return ConvertResponse(
        html=result.html,
        css=result.css,
        placeholders=result.placeholders,
        page_type=result.page_type,
        name=result.name,
        mode=result.mode,
        text_elements=result.text_elements,
        icon_elements=result.icon_elements,
    )


@router.get("/page-types", response_model=list[PageType])
async def page_types() -> list[PageType]:
    return PAGE_TYPES
