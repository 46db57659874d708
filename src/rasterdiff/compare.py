from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

import sentry_sdk

from rasterdiff.modes import ExactMode, MismatchTally, PixelComparisonMode
from rasterdiff.pixel import BYTES_PER_PIXEL, Pixel, first_pixel, iter_pixels, pack_pixel
from rasterdiff.types import (
    ImageComparisonResult,
    ImageDelta,
    IncomparableReason,
    RasterImage,
)

logger = logging.getLogger(__name__)


class PixelByPixelImageComparator:
    def __init__(self, mode: PixelComparisonMode | None = None) -> None:
        self.mode = mode if mode is not None else ExactMode()

    def __repr__(self) -> str:
        return f"PixelByPixelImageComparator(mode={self.mode!r})"

    @sentry_sdk.tracing.trace
    def compare_images(self, left: RasterImage | None, right: RasterImage | None) -> ImageDelta:
        if left is None or right is None:
            return self._incomparable(IncomparableReason.MISSING_IMAGE, left, right)

        # Only the product is checked; a WxH and an HxW image pass.
        if left.pixel_count != right.pixel_count:
            return self._incomparable(IncomparableReason.PIXEL_COUNT_MISMATCH, left, right)

        length = len(left.data)
        if length != len(right.data):
            return self._incomparable(IncomparableReason.BUFFER_LENGTH_MISMATCH, left, right)

        if not _holds_pixels(left) or not _holds_pixels(right):
            return self._incomparable(IncomparableReason.BUFFER_LENGTH_MISMATCH, left, right)

        left_layout = left.info.pixel_layout
        delta_buffer = bytearray(left.pixel_count * BYTES_PER_PIXEL)

        background = first_pixel(left.data, left_layout)
        tally = MismatchTally()
        compare_pixels = self.mode.compare_pixels
        for index, (left_pixel, right_pixel) in enumerate(
            zip(_iter_image_pixels(left), _iter_image_pixels(right))
        ):
            offset = index * BYTES_PER_PIXEL
            delta_pixel = compare_pixels(background, left_pixel, right_pixel, tally)
            delta_buffer[offset : offset + BYTES_PER_PIXEL] = pack_pixel(delta_pixel, left_layout)

        # delta rows are always tightly packed
        delta_image = RasterImage(
            width=left.width,
            height=left.height,
            data=bytes(delta_buffer),
            info=left.info.model_copy(update={"bytes_per_row": left.width * BYTES_PER_PIXEL}),
        )

        changed_pixels = tally.count
        result = (
            ImageComparisonResult.SAME
            if changed_pixels < self.mode.threshold
            else ImageComparisonResult.DIFFERENT
        )
        logger.debug(
            "Pixel comparison finished",
            extra={
                "mode": self.mode.name,
                "threshold": self.mode.threshold,
                "changed_pixels": changed_pixels,
                "result": result.value,
            },
        )
        return ImageDelta(result=result, changed_pixels=changed_pixels, delta_image=delta_image)

    def _incomparable(
        self,
        reason: IncomparableReason,
        left: RasterImage | None,
        right: RasterImage | None,
    ) -> ImageDelta:
        logger.info(
            "Images are not comparable",
            extra={
                "reason": reason.value,
                "left_size": (left.width, left.height) if left is not None else None,
                "right_size": (right.width, right.height) if right is not None else None,
                "left_length": len(left.data) if left is not None else None,
                "right_length": len(right.data) if right is not None else None,
            },
        )
        return ImageDelta.incomparable(reason)


def _holds_pixels(image: RasterImage) -> bool:
    if image.pixel_count == 0:
        return True
    row_length = image.width * BYTES_PER_PIXEL
    stride = image.row_stride
    if stride < row_length:
        return False
    return len(image.data) >= stride * (image.height - 1) + row_length


def _iter_image_pixels(image: RasterImage) -> Iterator[Pixel]:
    # row padding beyond width * 4 is skipped
    layout = image.info.pixel_layout
    row_length = image.width * BYTES_PER_PIXEL
    stride = image.row_stride
    for row in range(image.height):
        start = row * stride
        yield from iter_pixels(image.data[start : start + row_length], layout)


def compare_images(
    left: RasterImage | None,
    right: RasterImage | None,
    mode: PixelComparisonMode | None = None,
) -> ImageDelta:
    return PixelByPixelImageComparator(mode).compare_images(left, right)


def compare_images_batch(
    pairs: Sequence[tuple[RasterImage | None, RasterImage | None]],
    mode: PixelComparisonMode | None = None,
) -> list[ImageDelta]:
    comparator = PixelByPixelImageComparator(mode)
    return [comparator.compare_images(left, right) for left, right in pairs]
