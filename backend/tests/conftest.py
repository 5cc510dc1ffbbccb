"""Shared test fixtures."""

from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image


def png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def solid_png(width: int, height: int, value: int = 0, mode: str = "L") -> bytes:
    if mode == "RGB":
        return png_bytes(Image.new("RGB", (width, height), (value, value, value)))
    return png_bytes(Image.new(mode, (width, height), value))


def gradient_png(width: int = 64, height: int = 32) -> bytes:
    """Horizontal black → white ramp."""
    row = np.linspace(0, 255, width).astype(np.uint8)
    arr = np.tile(row, (height, 1))
    return png_bytes(Image.fromarray(arr))


BLACK_4X4 = solid_png(4, 4, 0)
WHITE_4X4 = solid_png(4, 4, 255)
GRADIENT = gradient_png()


@pytest.fixture
def black_png() -> bytes:
    return BLACK_4X4


@pytest.fixture
def white_png() -> bytes:
    return WHITE_4X4


@pytest.fixture
def gradient_bytes() -> bytes:
    return GRADIENT
