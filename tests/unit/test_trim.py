"""Unit tests for RasterTrimmer."""

import numpy as np
import pytest
from structlog.testing import capture_logs

from curvedtext import EmptyTrimTarget, RasterAccessError, RasterSurface, RasterTrimmer, trim
from tests.conftest import rgba


def blob_surface() -> RasterSurface:
    pixels = rgba(10, 12)
    pixels[2:5, 3:6] = (0, 0, 0, 255)
    return RasterSurface(pixels)


class BrokenCropSurface(RasterSurface):
    def crop(self, x, y, width, height):
        raise RasterAccessError("pixels are locked")


class UnreadableSurface(RasterSurface):
    @property
    def alpha(self):
        raise RasterAccessError("read denied")


class TestBoundingBox:
    """Tests for RasterTrimmer.bounding_box."""

    def test_single_blob(self):
        assert RasterTrimmer().bounding_box(blob_surface()) == (3, 2, 3, 3)

    def test_single_pixel(self):
        pixels = rgba(5, 5)
        pixels[4, 0, 3] = 1
        assert RasterTrimmer().bounding_box(RasterSurface(pixels)) == (0, 4, 1, 1)

    def test_axes_are_independent(self):
        """Extremes on each axis may come from different pixels."""
        pixels = rgba(10, 10)
        pixels[8, 1, 3] = 255
        pixels[1, 8, 3] = 255
        assert RasterTrimmer().bounding_box(RasterSurface(pixels)) == (1, 1, 8, 8)

    def test_color_without_alpha_is_transparent(self):
        pixels = rgba(4, 4)
        pixels[0, 0] = (255, 255, 255, 0)
        pixels[2, 2, 3] = 10
        assert RasterTrimmer().bounding_box(RasterSurface(pixels)) == (2, 2, 1, 1)

    def test_empty_surface(self):
        with pytest.raises(EmptyTrimTarget) as excinfo:
            RasterTrimmer().bounding_box(RasterSurface.blank(20, 10))
        assert excinfo.value.width == 20
        assert excinfo.value.height == 10


class TestTrim:
    """Tests for RasterTrimmer.trim."""

    def test_crops_to_visible_region(self):
        trimmed = RasterTrimmer().trim(blob_surface())
        assert trimmed.size == (3, 3)
        assert np.all(trimmed.alpha == 255)

    def test_input_is_not_modified(self):
        surface = blob_surface()
        before = surface.pixels.copy()
        trimmed = RasterTrimmer().trim(surface)
        assert trimmed is not surface
        assert surface.size == (12, 10)
        assert np.array_equal(surface.pixels, before)

    def test_idempotent(self):
        pixels = rgba(30, 40)
        pixels[5:20, 7, 3] = 255
        pixels[12, 7:33, 3] = 128
        once = trim(RasterSurface(pixels))
        twice = trim(once)
        assert twice.size == once.size == (26, 15)
        assert np.array_equal(once.pixels, twice.pixels)

    def test_keeps_pixel_values(self):
        pixels = rgba(6, 6)
        pixels[1, 2] = (10, 20, 30, 40)
        pixels[3, 4] = (50, 60, 70, 80)
        trimmed = trim(RasterSurface(pixels))
        assert trimmed.size == (3, 3)
        assert tuple(trimmed.pixels[0, 0]) == (10, 20, 30, 40)
        assert tuple(trimmed.pixels[2, 2]) == (50, 60, 70, 80)

    def test_empty_surface_raises_empty_trim_target(self):
        with pytest.raises(EmptyTrimTarget):
            trim(RasterSurface.blank(200, 200))

    def test_small_blank_surface_raises_empty_trim_target(self):
        with pytest.raises(EmptyTrimTarget):
            trim(RasterSurface.blank(3, 3))

    def test_crop_failure_returns_original(self):
        pixels = rgba(10, 12)
        pixels[2:5, 3:6, 3] = 255
        surface = BrokenCropSurface(pixels)
        assert RasterTrimmer().trim(surface) is surface
        assert surface.size == (12, 10)

    def test_read_failure_returns_original_and_logs(self):
        surface = UnreadableSurface(rgba(4, 4))
        with capture_logs() as logs:
            result = RasterTrimmer().trim(surface)
        assert result is surface
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["reason"] == "read denied"
        assert warnings[0]["width"] == 4
