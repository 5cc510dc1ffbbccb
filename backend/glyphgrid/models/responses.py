"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    ramps_registered: int = 0


class ConvertResponse(BaseModel):
    ascii: str
    cols: int
    rows: int
    source_width: int
    source_height: int
    ramp: str = "standard"
    processing_time_ms: float = 0.0


class RampsResponse(BaseModel):
    default: str = "standard"
    ramps: dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: str
    detail: str
