"""Converter orchestrator — runs preparation then glyph mapping, with timing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from glyphgrid.engine import mapper, preparation
from glyphgrid.engine.config import ConverterConfig
from glyphgrid.engine.ramp import DEFAULT_RAMP, CharacterRamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    text: str
    cols: int
    rows: int
    source_width: int
    source_height: int
    ramp: CharacterRamp
    processing_time_ms: float = 0.0


class Converter:
    """Turns encoded image bytes into ramp text.

    Holds no per-call state; one instance can serve concurrent calls.
    """

    def __init__(
        self,
        ramp: CharacterRamp | None = None,
        config: ConverterConfig | None = None,
    ) -> None:
        self.ramp = ramp or DEFAULT_RAMP
        self.config = config or ConverterConfig()

    def run(self, image_bytes: bytes, width: int) -> ConversionResult:
        start = time.perf_counter()

        raster = preparation.prepare(image_bytes, width, self.config)
        t_prepared = time.perf_counter()
        logger.debug("  prepare completed in %.1fms", (t_prepared - start) * 1000)

        text = mapper.render(raster, self.ramp)
        logger.debug("  map completed in %.1fms", (time.perf_counter() - t_prepared) * 1000)

        elapsed = (time.perf_counter() - start) * 1000
        src_w, src_h = raster.source_size or raster.size
        logger.info(
            "Conversion complete: %dx%d -> %dx%d glyphs (%s) in %.0fms",
            src_w,
            src_h,
            raster.width,
            raster.height,
            self.ramp.name,
            elapsed,
        )
        return ConversionResult(
            text=text,
            cols=raster.width,
            rows=raster.height,
            source_width=src_w,
            source_height=src_h,
            ramp=self.ramp,
            processing_time_ms=round(elapsed, 1),
        )

    def convert(self, image_bytes: bytes, width: int) -> str:
        return self.run(image_bytes, width).text


def create_converter(
    ramp: CharacterRamp | None = None,
    config: ConverterConfig | None = None,
) -> Converter:
    """Factory function for creating a converter instance."""
    return Converter(ramp=ramp, config=config)


def convert(
    image_bytes: bytes,
    width: int,
    ramp: CharacterRamp | None = None,
    config: ConverterConfig | None = None,
) -> str:
    """Render ``image_bytes`` as ``width``-column text.

    Raises:
        InvalidArgument: empty bytes or width <= 0.
        DecodeError: unrecognized, malformed or zero-sized image.
        ResampleError: grayscale/resize step failed.
    """
    return Converter(ramp=ramp, config=config).convert(image_bytes, width)


def convert_detailed(
    image_bytes: bytes,
    width: int,
    ramp: CharacterRamp | None = None,
    config: ConverterConfig | None = None,
) -> ConversionResult:
    return Converter(ramp=ramp, config=config).run(image_bytes, width)
