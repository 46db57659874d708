from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple, Protocol

BYTES_PER_PIXEL = 4


class PixelLayout(str, Enum):
    RGBA = "rgba"
    BGRA = "bgra"


class Channels(Protocol):
    @property
    def r(self) -> int: ...

    @property
    def g(self) -> int: ...

    @property
    def b(self) -> int: ...

    @property
    def a(self) -> int: ...


# Field order is the in-memory byte order of each layout.
class RgbaPixel(NamedTuple):
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


class BgraPixel(NamedTuple):
    b: int = 0
    g: int = 0
    r: int = 0
    a: int = 0


Pixel = RgbaPixel | BgraPixel

OPAQUE_BLACK = RgbaPixel(0, 0, 0, 255)
OPAQUE_RED = RgbaPixel(255, 0, 0, 255)
OPAQUE_GREEN = RgbaPixel(0, 255, 0, 255)
OPAQUE_YELLOW = RgbaPixel(255, 255, 0, 255)

_PIXEL_TYPES: dict[PixelLayout, type[RgbaPixel] | type[BgraPixel]] = {
    PixelLayout.RGBA: RgbaPixel,
    PixelLayout.BGRA: BgraPixel,
}


def pixels_equal(left: Channels, right: Channels) -> bool:
    """
    Compare two pixels by their named channels.

    Tuple equality would compare byte positions, which is wrong across
    layouts, so never use ``==`` between pixels of different types.
    """
    return left.r == right.r and left.g == right.g and left.b == right.b and left.a == right.a


def iter_pixels(data: bytes, layout: PixelLayout) -> Iterator[Pixel]:
    pixel_type = _PIXEL_TYPES[layout]
    end = len(data) - len(data) % BYTES_PER_PIXEL
    for offset in range(0, end, BYTES_PER_PIXEL):
        yield pixel_type(*data[offset : offset + BYTES_PER_PIXEL])


def first_pixel(data: bytes, layout: PixelLayout) -> Pixel | None:
    if len(data) < BYTES_PER_PIXEL:
        return None
    return _PIXEL_TYPES[layout](*data[:BYTES_PER_PIXEL])


def pack_pixel(pixel: Channels, layout: PixelLayout) -> bytes:
    if layout is PixelLayout.BGRA:
        return bytes((pixel.b, pixel.g, pixel.r, pixel.a))
    return bytes((pixel.r, pixel.g, pixel.b, pixel.a))
