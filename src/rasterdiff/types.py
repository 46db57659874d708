from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from rasterdiff.pixel import BYTES_PER_PIXEL, PixelLayout


class BitmapInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    color_space: str = "sRGB"
    bits_per_component: int = 8
    bits_per_pixel: int = 32
    # None means tightly packed rows (width * 4)
    bytes_per_row: int | None = Field(default=None, ge=0)
    pixel_layout: PixelLayout = PixelLayout.RGBA
    should_interpolate: bool = False
    rendering_intent: str = "default"


class RasterImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=0)
    height: int = Field(ge=0)
    data: bytes
    info: BitmapInfo = BitmapInfo()

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def row_stride(self) -> int:
        if self.info.bytes_per_row is not None:
            return self.info.bytes_per_row
        return self.width * BYTES_PER_PIXEL


class ImageComparisonResult(str, Enum):
    SAME = "same"
    DIFFERENT = "different"
    INCOMPARABLE = "incomparable"


class IncomparableReason(str, Enum):
    MISSING_IMAGE = "missing_image"
    PIXEL_COUNT_MISMATCH = "pixel_count_mismatch"
    BUFFER_LENGTH_MISMATCH = "buffer_length_mismatch"


class ImageDelta(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: ImageComparisonResult
    changed_pixels: int = 0
    delta_image: RasterImage | None = None
    reason: IncomparableReason | None = None

    @classmethod
    def incomparable(cls, reason: IncomparableReason) -> ImageDelta:
        return cls(result=ImageComparisonResult.INCOMPARABLE, reason=reason)

    @property
    def is_same(self) -> bool:
        return self.result is ImageComparisonResult.SAME
