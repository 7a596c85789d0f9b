"""Shared fixtures for curvedtext tests."""

import numpy as np
import pytest
import skia

from curvedtext import TableTextMetrics

TEST_FONT = "DejaVu Sans"


def _fonts_available() -> bool:
    font = skia.Font(skia.Typeface(TEST_FONT), 24)
    return font.measureText("A") > 0 and all(font.textToGlyphs("AB"))


needs_fonts = pytest.mark.skipif(not _fonts_available(), reason="no usable system font for rasterizing glyphs")


@pytest.fixture
def reference_metrics() -> TableTextMetrics:
    """Line height of one em, 'A' 0.6 em wide, 'B' 0.5 em wide, anything else 0.4 em."""
    return TableTextMetrics(line_height=1.0, widths={"A": 0.6, "B": 0.5}, default_width=0.4)


def rgba(height: int, width: int) -> np.ndarray:
    """Transparent RGBA buffer."""
    return np.zeros((height, width, 4), dtype=np.uint8)
