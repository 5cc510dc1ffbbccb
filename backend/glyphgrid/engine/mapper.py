"""Glyph mapper — luminance samples → ramp characters → text block.

Each sample maps independently:

    ratio = clamp(p / 255, 0, 1)
    idx   = clamp(round_half_up(ratio * (N - 1)), 0, N - 1)

so 0 always lands on the densest glyph and 255 on the sparsest. Rows are
emitted top to bottom, each followed by a single "\\n".
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from glyphgrid.engine.errors import InvalidArgument
from glyphgrid.engine.ramp import DEFAULT_RAMP, CharacterRamp
from glyphgrid.engine.raster import LuminanceRaster

_MAX_INTENSITY = 255.0


def glyph_index(sample: float, ramp_len: int) -> int:
    """Ramp index for a single intensity sample."""
    ratio = min(max(float(sample) / _MAX_INTENSITY, 0.0), 1.0)
    idx = math.floor(ratio * (ramp_len - 1) + 0.5)
    return min(max(idx, 0), ramp_len - 1)


def glyph_indices(samples: ArrayLike, ramp_len: int) -> NDArray[np.intp]:
    """Vectorized ``glyph_index`` over an array of any shape."""
    ratio = np.clip(np.asarray(samples, dtype=np.float64) / _MAX_INTENSITY, 0.0, 1.0)
    idx = np.floor(ratio * (ramp_len - 1) + 0.5).astype(np.intp)
    return np.clip(idx, 0, ramp_len - 1)


def map_sample(sample: float, ramp: CharacterRamp = DEFAULT_RAMP) -> str:
    return ramp.glyphs[glyph_index(sample, len(ramp))]


def _as_grid(raster: LuminanceRaster | ArrayLike) -> NDArray:
    if isinstance(raster, LuminanceRaster):
        return raster.pixels
    grid = np.asarray(raster)
    if grid.ndim != 2:
        raise InvalidArgument(f"raster must be two-dimensional, got {grid.ndim} dims")
    return grid


def iter_rows(
    raster: LuminanceRaster | ArrayLike,
    ramp: CharacterRamp = DEFAULT_RAMP,
) -> Iterator[str]:
    """Yield one line per raster row, without the trailing line break."""
    grid = _as_grid(raster)
    glyphs = ramp.glyphs
    # Index the str itself; a numpy <U1 table drops NUL glyphs as padding
    for row in glyph_indices(grid, len(ramp)).tolist():
        yield "".join(glyphs[i] for i in row)


def render(
    raster: LuminanceRaster | ArrayLike,
    ramp: CharacterRamp = DEFAULT_RAMP,
) -> str:
    """Map a whole raster to newline-terminated text."""
    return "".join(f"{line}\n" for line in iter_rows(raster, ramp))
