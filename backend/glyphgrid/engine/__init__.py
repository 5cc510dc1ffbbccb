"""GlyphGrid image-to-text engine."""

from glyphgrid.engine.converter import ConversionResult, Converter, convert, convert_detailed
from glyphgrid.engine.errors import ConversionError, DecodeError, InvalidArgument, ResampleError
from glyphgrid.engine.ramp import DEFAULT_RAMP, CharacterRamp, get_registry, resolve_ramp
from glyphgrid.engine.raster import LuminanceRaster

__all__ = [
    "convert",
    "convert_detailed",
    "Converter",
    "ConversionResult",
    "ConversionError",
    "InvalidArgument",
    "DecodeError",
    "ResampleError",
    "CharacterRamp",
    "DEFAULT_RAMP",
    "get_registry",
    "resolve_ramp",
    "LuminanceRaster",
]
