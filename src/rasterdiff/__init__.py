from rasterdiff.compare import PixelByPixelImageComparator, compare_images, compare_images_batch
from rasterdiff.modes import DEFAULT_THRESHOLD, ExactMode, MaskMode, PixelComparisonMode
from rasterdiff.pixel import BgraPixel, PixelLayout, RgbaPixel, pixels_equal
from rasterdiff.types import (
    BitmapInfo,
    ImageComparisonResult,
    ImageDelta,
    IncomparableReason,
    RasterImage,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "BgraPixel",
    "BitmapInfo",
    "ExactMode",
    "ImageComparisonResult",
    "ImageDelta",
    "IncomparableReason",
    "MaskMode",
    "PixelByPixelImageComparator",
    "PixelComparisonMode",
    "PixelLayout",
    "RasterImage",
    "RgbaPixel",
    "compare_images",
    "compare_images_batch",
    "pixels_equal",
]
