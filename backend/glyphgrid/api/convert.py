"""POST /api/convert — image bytes in, ASCII art out."""

from __future__ import annotations

import asyncio
import base64
import binascii
import functools
import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from glyphgrid.config import Settings
from glyphgrid.dependencies import get_converter_config, get_settings
from glyphgrid.engine.config import ConverterConfig
from glyphgrid.engine.converter import ConversionResult, convert_detailed
from glyphgrid.engine.errors import ConversionError, InvalidArgument
from glyphgrid.engine.ramp import resolve_ramp
from glyphgrid.models.requests import ConvertRequest
from glyphgrid.models.responses import ConvertResponse, ErrorResponse

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Invalid argument"},
    413: {"model": ErrorResponse, "description": "Image larger than max_image_bytes"},
    422: {"model": ErrorResponse, "description": "Bytes are not a decodable image"},
    500: {"model": ErrorResponse, "description": "Resampling failed"},
}


class PayloadTooLarge(ConversionError):
    code = "payload_too_large"
    status_code = 413


def _check_declared_length(request: Request, settings: Settings) -> None:
    """Reject on Content-Length before the body is buffered."""
    declared = request.headers.get("content-length")
    if declared is None or not declared.isdigit():
        return
    if int(declared) > settings.max_image_bytes:
        raise PayloadTooLarge(
            f"declared Content-Length {declared} exceeds limit of {settings.max_image_bytes} bytes"
        )


async def _read_bounded(request: Request, limit: int) -> bytes:
    """Buffer the body, stopping as soon as it passes ``limit`` bytes."""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLarge(f"image exceeds limit of {limit} bytes")
    return bytes(body)


def _check_limits(image_bytes: bytes, cols: int, settings: Settings) -> None:
    if len(image_bytes) > settings.max_image_bytes:
        raise PayloadTooLarge(
            f"image is {len(image_bytes)} bytes, limit is {settings.max_image_bytes}"
        )
    if isinstance(cols, int) and cols > settings.max_cols:
        raise InvalidArgument(f"cols must be <= {settings.max_cols}, got {cols}")


async def _run_conversion(
    image_bytes: bytes,
    cols: int | None,
    ramp_name: str | None,
    glyphs: str | None,
    settings: Settings,
    config: ConverterConfig,
) -> ConversionResult:
    """Validate against service limits, then convert off the event loop."""
    cols = settings.default_cols if cols is None else cols
    _check_limits(image_bytes, cols, settings)
    ramp = resolve_ramp(name=ramp_name or settings.default_ramp, glyphs=glyphs)
    logger.debug("Converting %d-byte image at %s cols (%s ramp)", len(image_bytes), cols, ramp.name)

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        functools.partial(convert_detailed, image_bytes, cols, ramp, config),
    )


@router.post("/convert", response_model=ConvertResponse, responses=_ERROR_RESPONSES)
async def convert(
    req: ConvertRequest,
    settings: Settings = Depends(get_settings),
    config: ConverterConfig = Depends(get_converter_config),
) -> ConvertResponse:
    try:
        image_bytes = base64.b64decode(req.image_base64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidArgument(f"image_base64 is not valid base64: {e}") from e

    result = await _run_conversion(image_bytes, req.cols, req.ramp, req.glyphs, settings, config)

    return ConvertResponse(
        ascii=result.text,
        cols=result.cols,
        rows=result.rows,
        source_width=result.source_width,
        source_height=result.source_height,
        ramp=result.ramp.name,
        processing_time_ms=result.processing_time_ms,
    )


@router.post("/convert/raw", response_class=PlainTextResponse, responses=_ERROR_RESPONSES)
async def convert_raw(
    request: Request,
    cols: int | None = Query(default=None, description="Output width in characters"),
    ramp: str | None = Query(default=None, description="Preset ramp name"),
    settings: Settings = Depends(get_settings),
    config: ConverterConfig = Depends(get_converter_config),
) -> PlainTextResponse:
    """Raw image body → text/plain art. Mirrors what a browser or curl expects."""
    _check_declared_length(request, settings)
    image_bytes = await _read_bounded(request, settings.max_image_bytes)
    result = await _run_conversion(image_bytes, cols, ramp, None, settings, config)
    return PlainTextResponse(result.text, media_type="text/plain; charset=utf-8")
