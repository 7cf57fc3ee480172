"""Decode the svgContent request field (raw markup, data URI or bare base64)."""

from __future__ import annotations

import base64
import binascii
import logging
from urllib.parse import unquote

logger = logging.getLogger(__name__)


def decode_svg_content(content: str) -> str:
    """Return SVG markup for a request payload.

    Tries a ``data:`` URI first, then bare base64 when the payload holds no
    ``<svg`` tag. Anything that fails to decode is returned unchanged; the
    converter then simply finds no elements in it.
    """
    if content.startswith("data:"):
        header, sep, payload = content.partition(",")
        if not sep:
            return content
        if ";base64" in header.lower():
            decoded = _b64_to_text(payload)
            return decoded if decoded is not None else content
        return unquote(payload)

    if "<svg" not in content:
        decoded = _b64_to_text(content)
        if decoded is not None:
            return decoded

    return content


def _b64_to_text(payload: str) -> str | None:
    compact = "".join(payload.split())
    try:
        return base64.b64decode(compact, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        logger.debug("Payload is not base64, using it as-is: %s", e)
        return None
