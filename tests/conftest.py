"""Shared fixtures."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

TEST_FONT_PS_NAME = "CirclesTest-Regular"
TEST_FONT_ADVANCE = 600


def build_test_font(path: Path) -> Path:
    """Write a two-glyph TrueType font: "A" is a square, "B" a quadratic arch."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A", "B"])
    fb.setupCharacterMap({ord("A"): "A", ord("B"): "B"})

    square = TTGlyphPen(None)
    square.moveTo((0, 0))
    square.lineTo((0, 500))
    square.lineTo((500, 500))
    square.lineTo((500, 0))
    square.closePath()

    arch = TTGlyphPen(None)
    arch.moveTo((0, 0))
    arch.qCurveTo((250, 700), (500, 0))
    arch.closePath()

    fb.setupGlyf({".notdef": TTGlyphPen(None).glyph(), "A": square.glyph(), "B": arch.glyph()})
    fb.setupHorizontalMetrics({name: (TEST_FONT_ADVANCE, 0) for name in (".notdef", "A", "B")})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "familyName": "Circles Test",
            "styleName": "Regular",
            "psName": TEST_FONT_PS_NAME,
        }
    )
    fb.setupOS2()
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_font(tmp_path: Path) -> Path:
    """Path to a freshly built test font inside its own directory."""
    font_dir = tmp_path / "fonts"
    font_dir.mkdir()
    return build_test_font(font_dir / "CirclesTest-Regular.ttf")
