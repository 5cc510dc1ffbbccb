"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from glyphgrid import __version__
from glyphgrid.config import Settings
from glyphgrid.dependencies import get_settings
from glyphgrid.engine.ramp import get_registry
from glyphgrid.models.responses import HealthResponse, RampsResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        ramps_registered=get_registry().count,
    )


@router.get("/ramps", response_model=RampsResponse)
async def ramps(settings: Settings = Depends(get_settings)) -> RampsResponse:
    return RampsResponse(
        default=settings.default_ramp,
        ramps={r.name: r.glyphs for r in get_registry().all()},
    )
