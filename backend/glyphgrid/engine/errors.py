"""Conversion errors — every fallible step raises one of these.

Each error carries a stable ``code`` tag and a human-readable ``cause``.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for all conversion failures."""

    code = "conversion_error"

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code, "detail": self.cause}


class InvalidArgument(ConversionError):
    """Empty input, non-positive width, bad ramp or filter."""

    code = "invalid_argument"


class DecodeError(ConversionError):
    """Bytes are not a recognized image, or the image has no pixels."""

    code = "decode_error"


class ResampleError(ConversionError):
    """Grayscale conversion or resize could not produce a raster."""

    code = "resample_error"
