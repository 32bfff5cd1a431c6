"""Raster image normalisation and page placement."""

from __future__ import annotations

import io
import logging

from PIL import Image, ImageSequence, UnidentifiedImageError

from .config import DEFAULT_LAYOUT, DEFAULT_QUALITY, PageLayout, QualityTier
from .exceptions import ConversionError
from .types import ImagePlacement, NormalizedImage

_LOGGER = logging.getLogger("docmerge.images")


def _flatten(img: Image.Image) -> Image.Image:
    """Return an RGB copy of *img* with any transparency composited on white."""

    if img.mode == "P":
        img = img.convert("RGBA")
    if img.mode in {"RGBA", "LA"}:
        background = Image.new("RGB", img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[-1])
        return background
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


def _target_size(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    largest = max(width, height)
    if largest <= max_dimension:
        return width, height
    ratio = max_dimension / largest
    return max(1, round(width * ratio)), max(1, round(height * ratio))


def normalize_image(
    data: bytes,
    quality: QualityTier = DEFAULT_QUALITY,
    *,
    filename: str = "",
) -> NormalizedImage:
    """Downscale and recompress *data* as JPEG according to *quality*.

    Images larger than ``quality.max_dimension`` on either side are resized
    so the larger side equals the cap; smaller images keep their size.
    Animated and multi-page images contribute their first frame.

    Raises:
        ConversionError: If the data cannot be decoded as an image.
    """

    try:
        with Image.open(io.BytesIO(data)) as source:
            frame = next(ImageSequence.Iterator(source))
            frame.load()
            img = _flatten(frame.copy())
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, StopIteration) as exc:
        _LOGGER.warning("Unable to decode image %s: %s", filename or "<bytes>", exc)
        raise ConversionError(filename, f"Unsupported or corrupt image data: {exc}") from exc

    new_size = _target_size(img.width, img.height, quality.max_dimension)
    if new_size != img.size:
        _LOGGER.debug("Resizing %s from %s to %s", filename, img.size, new_size)
        img = img.resize(new_size, Image.LANCZOS)

    output = io.BytesIO()
    img.save(output, format="JPEG", quality=quality.jpeg_quality, optimize=True)
    _LOGGER.debug(
        "Encoded %s as %dx%d JPEG at quality %d",
        filename,
        img.width,
        img.height,
        quality.jpeg_quality,
    )
    return NormalizedImage(data=output.getvalue(), width=img.width, height=img.height)


def compute_placement(width: float, height: float, layout: PageLayout = DEFAULT_LAYOUT) -> ImagePlacement:
    """Return the page and drawing size for an image of *width* x *height* pixels.

    Images are scaled down to fit the layout's page but never scaled up, and
    each page side is at least ``layout.min_image_page`` points.
    """

    if width <= 0 or height <= 0:
        raise ValueError("Image dimensions must be positive")
    scale = min(layout.width / width, layout.height / height, 1.0)
    draw_width = width * scale
    draw_height = height * scale
    return ImagePlacement(
        page_width=max(draw_width, layout.min_image_page),
        page_height=max(draw_height, layout.min_image_page),
        draw_width=draw_width,
        draw_height=draw_height,
    )


__all__ = ["normalize_image", "compute_placement"]
