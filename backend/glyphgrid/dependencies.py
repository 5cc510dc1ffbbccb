"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from glyphgrid.config import Settings, settings
from glyphgrid.engine.config import ConverterConfig


def get_settings() -> Settings:
    return settings


def get_converter_config(settings: Settings = Depends(get_settings)) -> ConverterConfig:
    return ConverterConfig.from_settings(settings)
