from __future__ import annotations

import base64
import io

from PIL import Image

from rasterdiff.pixel import PixelLayout
from rasterdiff.types import BitmapInfo, RasterImage


def raster_from_pil(image: Image.Image) -> RasterImage:
    if image.mode == "RGBA":
        rgba = image
    else:
        rgba = image.convert("RGBA")
    try:
        width, height = rgba.size
        return RasterImage(
            width=width,
            height=height,
            data=rgba.tobytes(),
            info=BitmapInfo(pixel_layout=PixelLayout.RGBA),
        )
    finally:
        if rgba is not image:
            rgba.close()


def load_raster(source: bytes | bytearray | memoryview | Image.Image) -> RasterImage:
    if isinstance(source, (bytes, bytearray, memoryview)):
        with Image.open(io.BytesIO(source)) as img:
            img.load()
            return raster_from_pil(img)
    return raster_from_pil(source)


def raster_to_pil(raster: RasterImage) -> Image.Image:
    size = (raster.width, raster.height)
    # raw decoder names follow the in-memory byte order
    raw_mode = "BGRA" if raster.info.pixel_layout is PixelLayout.BGRA else "RGBA"
    return Image.frombytes("RGBA", size, raster.data, "raw", raw_mode, raster.row_stride)


def encode_png_base64(raster: RasterImage) -> str:
    buf = io.BytesIO()
    with raster_to_pil(raster) as img:
        img.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")
