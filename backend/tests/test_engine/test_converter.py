"""End-to-end tests for convert()."""

import io

import pytest
from PIL import Image

from tests.conftest import BLACK_4X4, GRADIENT, WHITE_4X4, solid_png

from glyphgrid.engine import (
    DEFAULT_RAMP,
    CharacterRamp,
    ConversionError,
    Converter,
    DecodeError,
    InvalidArgument,
    convert,
    convert_detailed,
)
from glyphgrid.engine.config import ConverterConfig
from glyphgrid.engine.converter import create_converter
from glyphgrid.engine.preparation import target_height


def test_solid_black():
    assert convert(BLACK_4X4, 4) == "@@@@\n@@@@\n"


def test_solid_white():
    assert convert(WHITE_4X4, 4) == "    \n    \n"


def test_rgb_source():
    assert convert(solid_png(4, 4, 0, mode="RGB"), 4) == "@@@@\n@@@@\n"


def test_dimension_invariant():
    for width in (1, 7, 32, 100):
        text = convert(GRADIENT, width)
        lines = text.split("\n")
        assert lines[-1] == ""
        assert len(lines) - 1 == target_height(64, 32, width)
        assert all(len(line) == width for line in lines[:-1])


def test_ramp_containment():
    text = convert(GRADIENT, 40)
    assert set(text) <= set(DEFAULT_RAMP.glyphs) | {"\n"}


def test_deterministic():
    assert convert(GRADIENT, 33) == convert(GRADIENT, 33)


def test_gradient_runs_dark_to_light():
    first_row = convert(GRADIENT, 16).split("\n")[0]
    indices = [DEFAULT_RAMP.glyphs.index(c) for c in first_row]
    assert indices == sorted(indices)
    assert indices[0] <= 1
    assert indices[-1] >= len(DEFAULT_RAMP) - 2


def test_degenerate_height_floor():
    text = convert(solid_png(400, 1, 255), 10)
    assert text == " " * 10 + "\n"


def test_custom_ramp():
    ramp = CharacterRamp("XY")
    assert convert(BLACK_4X4, 2, ramp=ramp) == "XX\n"
    assert convert(WHITE_4X4, 2, ramp=ramp) == "YY\n"


def test_gif_source():
    buf = io.BytesIO()
    Image.new("L", (8, 8), 255).save(buf, format="GIF")
    assert convert(buf.getvalue(), 8) == (" " * 8 + "\n") * 4


def test_error_scenarios():
    with pytest.raises(InvalidArgument):
        convert(b"", 10)
    with pytest.raises(InvalidArgument):
        convert(BLACK_4X4, 0)
    with pytest.raises(DecodeError):
        convert(b"not an image", 10)


def test_errors_carry_code_and_cause():
    with pytest.raises(ConversionError) as excinfo:
        convert(b"not an image", 10)
    assert excinfo.value.code == "decode_error"
    assert excinfo.value.cause
    assert excinfo.value.to_dict()["error"] == "decode_error"


def test_convert_detailed():
    result = convert_detailed(solid_png(20, 10, 0), 10)
    assert result.cols == 10
    assert result.rows == 2
    assert (result.source_width, result.source_height) == (20, 10)
    assert result.ramp is DEFAULT_RAMP
    assert result.text == "@" * 10 + "\n" + "@" * 10 + "\n"
    assert result.processing_time_ms >= 0


def test_converter_instance_reuse():
    conv = create_converter(config=ConverterConfig(cell_aspect=1.0))
    assert isinstance(conv, Converter)
    assert conv.convert(BLACK_4X4, 4) == "@@@@\n" * 4
    assert conv.convert(WHITE_4X4, 2) == "  \n" * 2


def test_nul_glyph_ramp_keeps_line_width():
    text = convert(BLACK_4X4, 4, ramp=CharacterRamp("\x00x"))
    lines = text.split("\n")[:-1]
    assert len(lines) == 2
    assert all(line == "\x00" * 4 for line in lines)
