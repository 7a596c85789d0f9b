"""Unit tests for RasterSurface, SColor and paints."""

import numpy as np
import pytest
import skia

from curvedtext import ConfigurationError, RasterAccessError, RasterSurface, SColor
from curvedtext.canvas import create_paint
from tests.conftest import rgba


class TestRasterSurface:
    """Tests for the RasterSurface pixel buffer."""

    def test_dimensions(self):
        surface = RasterSurface(rgba(7, 11))
        assert surface.width == 11
        assert surface.height == 7
        assert surface.size == (11, 7)

    @pytest.mark.parametrize(
        "pixels",
        [
            np.zeros((4, 4), dtype=np.uint8),
            np.zeros((4, 4, 3), dtype=np.uint8),
            np.zeros((4, 4, 4), dtype=np.float32),
            [[0, 0, 0, 0]],
        ],
    )
    def test_rejects_non_rgba_buffers(self, pixels):
        with pytest.raises(RasterAccessError):
            RasterSurface(pixels)

    def test_blank_is_empty(self):
        assert RasterSurface.blank(5, 5).is_empty
        assert RasterSurface.blank().size == (0, 0)

    def test_pixels_are_read_only(self):
        surface = RasterSurface(rgba(2, 2))
        with pytest.raises(ValueError):
            surface.pixels[0, 0, 3] = 255

    def test_crop_copies(self):
        pixels = rgba(4, 4)
        pixels[1, 1, 3] = 255
        surface = RasterSurface(pixels)
        cropped = surface.crop(1, 1, 2, 2)
        assert cropped.size == (2, 2)
        assert cropped.alpha[0, 0] == 255
        pixels[1, 1, 3] = 0
        assert cropped.alpha[0, 0] == 255

    @pytest.mark.parametrize("region", [(-1, 0, 2, 2), (0, 0, 5, 1), (3, 3, 2, 2), (0, 0, -1, 1)])
    def test_crop_outside_raises(self, region):
        with pytest.raises(RasterAccessError):
            RasterSurface(rgba(4, 4)).crop(*region)

    def test_from_skia_surface_is_rgba(self):
        surface = skia.Surface(4, 3)
        with surface as canvas:
            canvas.clear(skia.Color4f.kTransparent)
            canvas.drawRect(skia.Rect(0, 0, 2, 3), skia.Paint(Color=skia.ColorRED))
        raster = RasterSurface.from_skia_surface(surface)
        assert raster.size == (4, 3)
        assert tuple(raster.pixels[1, 0]) == (255, 0, 0, 255)
        assert tuple(raster.pixels[1, 3]) == (0, 0, 0, 0)

    def test_to_skia_image(self):
        pixels = rgba(3, 5)
        pixels[:, :] = (0, 0, 255, 255)
        image = RasterSurface(pixels).to_skia_image()
        assert (image.width(), image.height()) == (5, 3)

    def test_zero_size_to_skia_image_raises(self):
        with pytest.raises(RasterAccessError):
            RasterSurface.blank().to_skia_image()

    def test_save_zero_size_raises(self, tmp_path):
        with pytest.raises(RasterAccessError):
            RasterSurface.blank(0, 5).save(str(tmp_path / "blank.png"))

    def test_save_png(self, tmp_path):
        pixels = rgba(3, 5)
        pixels[1, 2] = (255, 255, 255, 255)
        path = tmp_path / "surface.png"
        RasterSurface(pixels).save(str(path))
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
        assert RasterSurface(pixels).to_pil().size == (5, 3)


class TestSColor:
    """Tests for color parsing."""

    def test_hex_string(self):
        assert SColor("#ff0000").rgba == (255, 0, 0, 255)

    def test_short_hex(self):
        assert SColor("#000").rgba == (0, 0, 0, 255)

    def test_named(self):
        assert SColor("white").rgba == (255, 255, 255, 255)

    def test_tuple_with_alpha(self):
        assert SColor((0.0, 1.0, 0.0, 0.5)).rgba == (0, 255, 0, 128)

    @pytest.mark.parametrize("color", ["not-a-color", (2.0, 0, 0), (0.1, 0.2), 42])
    def test_invalid(self, color):
        with pytest.raises(ConfigurationError):
            SColor(color)


class TestCreatePaint:
    """Tests for paint construction."""

    def test_stroke_paint(self):
        paint = create_paint("red", width=3, style="stroke", miter=2)
        assert paint.getStyle() == skia.Paint.kStroke_Style
        assert paint.getStrokeWidth() == 3
        assert paint.getStrokeMiter() == 2
        assert paint.isAntiAlias()

    def test_fill_paint(self):
        paint = create_paint("black", antialias=False)
        assert paint.getStyle() == skia.Paint.kFill_Style
        assert not paint.isAntiAlias()
