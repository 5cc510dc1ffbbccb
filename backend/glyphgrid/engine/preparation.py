"""Image preparation — bytes → decoded image → grayscale → resampled raster.

Pillow does the heavy lifting: format sniffing from content, decoding,
luma conversion and the resampling kernel. This module owns the contract
around it (argument checks, target height, error translation).
"""

from __future__ import annotations

import io
import logging
import math

import numpy as np
from PIL import Image, UnidentifiedImageError

from glyphgrid.engine.config import ConverterConfig
from glyphgrid.engine.errors import DecodeError, InvalidArgument, ResampleError
from glyphgrid.engine.raster import LuminanceRaster

logger = logging.getLogger(__name__)

# Smooth kernels only. Nearest, box and bilinear alias badly at the
# reductions typical for text output and the mapper does no smoothing.
_FILTERS: dict[str, Image.Resampling] = {
    "lanczos": Image.Resampling.LANCZOS,
    "bicubic": Image.Resampling.BICUBIC,
    "hamming": Image.Resampling.HAMMING,
}

_SIXTEEN_BIT_PREFIX = "I;16"


def available_filters() -> list[str]:
    return sorted(_FILTERS)


def resolve_filter(name: str) -> Image.Resampling:
    try:
        return _FILTERS[name.lower()]
    except (KeyError, AttributeError):
        raise InvalidArgument(
            f"unsupported resample filter {name!r} (use one of: {', '.join(available_filters())})"
        ) from None


def validate_width(width: int) -> int:
    # bool is an int subclass; True must not read as one column
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidArgument(f"width must be an integer, got {type(width).__name__}")
    if width <= 0:
        raise InvalidArgument("width must be > 0")
    return width


def target_height(src_width: int, src_height: int, width: int, cell_aspect: float = 2.0) -> int:
    """Rows that keep the source aspect ratio once cells are ``cell_aspect`` times taller than wide.

    Never less than one row, however wide and short the source is.
    """
    if src_width <= 0 or src_height <= 0:
        raise DecodeError("decoded image has zero width or height")
    if cell_aspect <= 0:
        raise InvalidArgument("cell aspect must be > 0")
    return max(1, math.floor(src_height * width / src_width / cell_aspect))


def decode_image(image_bytes: bytes) -> Image.Image:
    """Sniff the container format from the bytes themselves and fully decode."""
    if not isinstance(image_bytes, (bytes, bytearray, memoryview)):
        raise InvalidArgument(f"image must be bytes, got {type(image_bytes).__name__}")
    if len(image_bytes) == 0:
        raise InvalidArgument("input bytes are empty")

    try:
        img = Image.open(io.BytesIO(bytes(image_bytes)))
    except UnidentifiedImageError as e:
        raise DecodeError(f"failed to guess image format: {e}") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"image too large to decode: {e}") from e
    except (OSError, SyntaxError, ValueError) as e:
        raise DecodeError(f"failed to open image: {e}") from e

    # Image.open is lazy; force pixel decoding so truncated data fails here
    try:
        img.load()
    except Image.DecompressionBombError as e:
        raise DecodeError(f"image too large to decode: {e}") from e
    except (OSError, SyntaxError, ValueError, EOFError) as e:
        raise DecodeError(f"failed to decode image: {e}") from e

    w, h = img.size
    if w == 0 or h == 0:
        raise DecodeError("decoded image has zero width or height")

    logger.debug("Decoded %s image %dx%d (mode %s)", img.format, w, h, img.mode)
    return img


def to_grayscale(img: Image.Image) -> Image.Image:
    """Single-channel 8-bit luminance image."""
    try:
        if img.mode.startswith(_SIXTEEN_BIT_PREFIX):
            # Pillow's "L" conversion clips 16-bit samples; keep the high byte instead
            wide = np.asarray(img).astype(np.uint16)
            return Image.fromarray((wide >> 8).astype(np.uint8))
        if img.mode == "L":
            return img
        return img.convert("L")
    except (OSError, ValueError, TypeError) as e:
        raise ResampleError(f"failed to convert image to grayscale: {e}") from e


def resample(
    gray: Image.Image,
    width: int,
    height: int,
    resample_filter: str = "lanczos",
) -> LuminanceRaster:
    """Resize to exactly (width, height) and extract the luminance bytes."""
    kernel = resolve_filter(resample_filter)
    try:
        resized = gray.resize((width, height), resample=kernel)
    except (OSError, ValueError, MemoryError) as e:
        raise ResampleError(f"failed to resize image: {e}") from e

    if resized.mode != "L":
        raise ResampleError(f"failed to convert resized image to grayscale pixels (mode {resized.mode})")
    if resized.size != (width, height):
        raise ResampleError(
            f"resize produced {resized.size[0]}x{resized.size[1]}, expected {width}x{height}"
        )

    pixels = np.array(resized, dtype=np.uint8)
    return LuminanceRaster(pixels=pixels, source_size=gray.size)


def prepare(
    image_bytes: bytes,
    width: int,
    config: ConverterConfig | None = None,
) -> LuminanceRaster:
    """Decode, grayscale and resample ``image_bytes`` to ``width`` columns."""
    config = config or ConverterConfig()
    if not image_bytes:
        raise InvalidArgument("input bytes are empty")
    validate_width(width)
    resolve_filter(config.resample_filter)

    img = decode_image(image_bytes)
    src_w, src_h = img.size
    height = target_height(src_w, src_h, width, config.cell_aspect)
    if config.max_rows is not None and height > config.max_rows:
        raise InvalidArgument(
            f"output would be {height} rows, limit is {config.max_rows}"
        )
    gray = to_grayscale(img)

    raster = resample(gray, width, height, config.resample_filter)
    logger.debug(
        "Prepared %dx%d raster from %dx%d source (%s)",
        raster.width,
        raster.height,
        src_w,
        src_h,
        config.resample_filter,
    )
    return raster
