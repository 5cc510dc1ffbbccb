"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    image_base64: str = Field(..., description="Encoded image (PNG, JPEG, GIF, ...) as base64")
    cols: int | None = Field(default=None, description="Output width in characters")
    ramp: str | None = Field(default=None, description="Preset ramp name (see /api/ramps)")
    glyphs: str | None = Field(
        default=None,
        description="Custom ramp, densest glyph first. Overrides `ramp`.",
    )
