"""Converter placing raster images on their own page."""

from __future__ import annotations

from typing import List

from pypdf import PageObject

from ..images import compute_placement, normalize_image
from ..rendering import read_pages, render_image_page
from ..types import FileCategory, InputFile
from ..utils import get_logger
from .common.interfaces import BaseConverter
from .common.pipeline import register_converter

LOGGER = get_logger("docmerge.converters.image")


@register_converter(FileCategory.IMAGE)
class ImageConverter(BaseConverter):
    def convert(self, item: InputFile, category: FileCategory) -> List[PageObject]:
        context = self.context
        image = normalize_image(item.data, context.quality, filename=item.name)
        placement = compute_placement(image.width, image.height, context.layout)
        LOGGER.debug(
            "Placing %s (%dx%d px) on a %.1fx%.1f pt page",
            item.name,
            image.width,
            image.height,
            placement.page_width,
            placement.page_height,
        )
        return read_pages(render_image_page(image, placement))
