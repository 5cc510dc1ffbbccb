"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from glyphgrid import __version__
from glyphgrid.config import settings
from glyphgrid.engine.errors import ConversionError, DecodeError, InvalidArgument, ResampleError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.glyphgrid_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[ConversionError], int] = {
    InvalidArgument: 400,
    DecodeError: 422,
    ResampleError: 500,
}


def create_app() -> FastAPI:
    app = FastAPI(
        title="GlyphGrid",
        description="Image to ASCII art conversion — luminance quantized onto a character ramp",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConversionError, _conversion_error_handler)

    from glyphgrid.api.router import api_router

    app.include_router(api_router)

    return app


async def _conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    status = getattr(exc, "status_code", None) or _STATUS_BY_ERROR.get(type(exc), 500)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.cause)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.cause)
    return JSONResponse(status_code=status, content=exc.to_dict())


app = create_app()
