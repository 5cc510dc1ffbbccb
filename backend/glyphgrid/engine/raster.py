"""LuminanceRaster — the single immutable grid handed from preparation to mapping."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike, NDArray

from glyphgrid.engine.errors import InvalidArgument


@dataclass(frozen=True)
class LuminanceRaster:
    """H rows × W columns of 8-bit intensities (0 = black, 255 = white)."""

    # Read-only uint8 array, shape (height, width)
    pixels: NDArray[np.uint8]
    # Dimensions of the decoded image before resampling, when known
    source_size: tuple[int, int] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.pixels.ndim != 2:
            raise InvalidArgument(f"raster must be two-dimensional, got {self.pixels.ndim} dims")
        if self.pixels.dtype != np.uint8:
            raise InvalidArgument(f"raster must be uint8, got {self.pixels.dtype}")
        self.pixels.flags.writeable = False

    @classmethod
    def from_array(
        cls,
        values: ArrayLike,
        source_size: tuple[int, int] | None = None,
    ) -> LuminanceRaster:
        """Build a raster from any 2-D array of intensities, clamped into 0..255."""
        arr = np.asarray(values)
        if arr.ndim != 2:
            raise InvalidArgument(f"raster must be two-dimensional, got {arr.ndim} dims")
        if arr.dtype != np.uint8:
            arr = np.clip(np.nan_to_num(arr.astype(np.float64)), 0, 255).astype(np.uint8)
        else:
            arr = arr.copy()
        return cls(pixels=arr, source_size=source_size)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        """(width, height), Pillow order."""
        return (self.width, self.height)
