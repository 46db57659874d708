from __future__ import annotations

import orjson
from pydantic import BaseModel, ConfigDict

from rasterdiff.imaging import encode_png_base64
from rasterdiff.types import ImageDelta, RasterImage


class ComparisonReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    result: str
    changed_pixels: int
    total_pixels: int | None = None
    width: int | None = None
    height: int | None = None
    reason: str | None = None
    diff_png: str | None = None


def build_report(
    left: RasterImage | None,
    right: RasterImage | None,
    delta: ImageDelta,
    include_diff: bool = True,
) -> ComparisonReport:
    delta_image = delta.delta_image
    sized = delta_image or left or right
    return ComparisonReport(
        result=delta.result.value,
        changed_pixels=delta.changed_pixels,
        total_pixels=sized.pixel_count if sized is not None else None,
        width=sized.width if sized is not None else None,
        height=sized.height if sized is not None else None,
        reason=delta.reason.value if delta.reason is not None else None,
        diff_png=encode_png_base64(delta_image)
        if include_diff and delta_image is not None and delta_image.pixel_count
        else None,
    )


def dumps_report(report: ComparisonReport) -> bytes:
    return orjson.dumps(report.model_dump())
