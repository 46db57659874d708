from __future__ import annotations

from rasterdiff.pixel import (
    BgraPixel,
    PixelLayout,
    RgbaPixel,
    first_pixel,
    iter_pixels,
    pack_pixel,
    pixels_equal,
)


class TestPixelsEqual:
    def test_same_layout(self):
        assert pixels_equal(RgbaPixel(1, 2, 3, 4), RgbaPixel(1, 2, 3, 4))
        assert not pixels_equal(RgbaPixel(1, 2, 3, 4), RgbaPixel(1, 2, 3, 5))

    def test_across_layouts(self):
        rgba = RgbaPixel(r=1, g=2, b=3, a=4)
        bgra = BgraPixel(b=3, g=2, r=1, a=4)
        assert pixels_equal(rgba, bgra)
        assert pixels_equal(bgra, rgba)

    def test_byte_order_is_not_equality(self):
        # same bytes, different meaning
        assert not pixels_equal(RgbaPixel(1, 2, 3, 4), BgraPixel(1, 2, 3, 4))


class TestIterPixels:
    def test_rgba(self):
        data = bytes([1, 2, 3, 4, 5, 6, 7, 8])
        assert list(iter_pixels(data, PixelLayout.RGBA)) == [
            RgbaPixel(1, 2, 3, 4),
            RgbaPixel(5, 6, 7, 8),
        ]

    def test_bgra(self):
        pixels = list(iter_pixels(bytes([1, 2, 3, 4]), PixelLayout.BGRA))
        assert pixels == [BgraPixel(1, 2, 3, 4)]
        assert pixels[0].r == 3
        assert pixels[0].b == 1

    def test_trailing_bytes_ignored(self):
        assert len(list(iter_pixels(bytes(10), PixelLayout.RGBA))) == 2

    def test_first_pixel(self):
        assert first_pixel(bytes([9, 8, 7, 6, 0, 0, 0, 0]), PixelLayout.RGBA) == RgbaPixel(9, 8, 7, 6)
        assert first_pixel(b"\x00\x00", PixelLayout.RGBA) is None


class TestPackPixel:
    def test_rgba(self):
        assert pack_pixel(RgbaPixel(1, 2, 3, 4), PixelLayout.RGBA) == bytes([1, 2, 3, 4])

    def test_bgra_reorders_channels(self):
        assert pack_pixel(RgbaPixel(1, 2, 3, 4), PixelLayout.BGRA) == bytes([3, 2, 1, 4])

    def test_from_bgra_pixel(self):
        pixel = BgraPixel(b=3, g=2, r=1, a=4)
        assert pack_pixel(pixel, PixelLayout.RGBA) == bytes([1, 2, 3, 4])
        assert pack_pixel(pixel, PixelLayout.BGRA) == bytes([3, 2, 1, 4])
