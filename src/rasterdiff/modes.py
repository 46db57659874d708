from __future__ import annotations

import abc

from rasterdiff.pixel import (
    OPAQUE_BLACK,
    OPAQUE_GREEN,
    OPAQUE_RED,
    OPAQUE_YELLOW,
    Pixel,
    RgbaPixel,
    pixels_equal,
)

# Same requires strictly fewer mismatches than the threshold, so 1 means
# "no mismatched pixel tolerated".
DEFAULT_THRESHOLD = 1


class MismatchTally:
    __slots__ = ("count",)

    def __init__(self, count: int = 0) -> None:
        self.count = count

    def __repr__(self) -> str:
        return f"MismatchTally(count={self.count})"


class PixelComparisonMode(abc.ABC):
    """
    Per-pixel comparison policy.

    ``compare_pixels`` returns the delta color for one pixel pair and updates
    ``tally`` in place. The background is the left image's top-left pixel;
    a differing pixel equal to it is read as content removed (right side) or
    added (left side). This assumes nothing was ever drawn over the top-left
    corner of the expected image.
    """

    name: str = "unknown"

    def __init__(self, threshold: int = DEFAULT_THRESHOLD) -> None:
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")
        self.threshold = threshold

    def __repr__(self) -> str:
        return f"{type(self).__name__}(threshold={self.threshold})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelComparisonMode):
            return NotImplemented
        return type(self) is type(other) and self.threshold == other.threshold

    def __hash__(self) -> int:
        return hash((type(self), self.threshold))

    @abc.abstractmethod
    def compare_pixels(
        self, background: Pixel, left: Pixel, right: Pixel, tally: MismatchTally
    ) -> RgbaPixel:
        raise NotImplementedError


class ExactMode(PixelComparisonMode):
    name = "exact"

    def compare_pixels(
        self, background: Pixel, left: Pixel, right: Pixel, tally: MismatchTally
    ) -> RgbaPixel:
        if pixels_equal(left, right):
            return OPAQUE_BLACK

        tally.count += 1
        if pixels_equal(right, background):
            # in expected, missing from actual
            return OPAQUE_RED
        if pixels_equal(left, background):
            # in actual, missing from expected
            return OPAQUE_GREEN
        return OPAQUE_YELLOW


class MaskMode(PixelComparisonMode):
    """
    Only flags pixels added or removed relative to the background.

    Content present on both sides with a different color is treated as a
    match, so a recolored shape still passes as long as its coverage is
    unchanged.
    """

    name = "mask"

    def compare_pixels(
        self, background: Pixel, left: Pixel, right: Pixel, tally: MismatchTally
    ) -> RgbaPixel:
        if pixels_equal(left, right):
            return OPAQUE_BLACK

        tally.count += 1
        if pixels_equal(right, background):
            return OPAQUE_RED
        if pixels_equal(left, background):
            return OPAQUE_GREEN
        # present on both sides, only the color changed
        tally.count -= 1
        return OPAQUE_BLACK
