"""Converter for every format that is rendered as monospace text pages."""

from __future__ import annotations

from typing import List

from pypdf import PageObject

from ..extractors import extract_text
from ..paginator import paginate
from ..rendering import read_pages, render_text_pages
from ..types import FileCategory, InputFile
from ..utils import display_name, get_logger
from .common.interfaces import BaseConverter
from .common.pipeline import register_converter

LOGGER = get_logger("docmerge.converters.text")


@register_converter(*(category for category in FileCategory if category.is_text_like))
class TextDocumentConverter(BaseConverter):
    """Extract plain text and paginate it under a title banner naming the file (without its folder)."""

    def convert(self, item: InputFile, category: FileCategory) -> List[PageObject]:
        layout = self.context.layout
        text = extract_text(category, item.data, item.name)
        pages = paginate(text, layout, title=display_name(item.name) or None)
        LOGGER.debug("Rendering %s (%s) as %d page(s)", item.name, category.value, len(pages))
        return read_pages(render_text_pages(pages, layout))
