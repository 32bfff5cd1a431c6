"""Plain-text extractors for document formats that are not PDFs or images."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from ..types import FileCategory
from ..utils import decode_text
from .markup import html_to_text, markdown_to_text, strip_html
from .presentation import powerpoint_to_text
from .spreadsheet import excel_to_text
from .word import word_to_text

_LOGGER = logging.getLogger("docmerge.extractors")

Extractor = Callable[[bytes, str], str]


def plain_text(data: bytes, filename: str = "") -> str:
    return decode_text(data)


EXTRACTORS: Mapping[FileCategory, Extractor] = MappingProxyType(
    {
        FileCategory.TEXT: plain_text,
        FileCategory.WORD: word_to_text,
        FileCategory.EXCEL: excel_to_text,
        FileCategory.MARKDOWN: markdown_to_text,
        FileCategory.HTML: html_to_text,
        FileCategory.POWERPOINT: powerpoint_to_text,
    }
)


def extract_text(category: FileCategory, data: bytes, filename: str = "") -> str:
    """Return plain text for *data* using the extractor for *category*.

    Extraction failures come back as an error description in the text, so
    the result can always be paginated.
    """

    try:
        extractor = EXTRACTORS[category]
    except KeyError as exc:
        raise ValueError(f"No text extractor for category '{category.value}'") from exc

    try:
        return extractor(data, filename)
    except Exception as exc:  # extractors are third-party parsers; never let them escape
        _LOGGER.warning("Text extraction failed for %s: %s", filename, exc)
        return f"Error extracting text from {filename or 'file'}: {exc}"


__all__ = [
    "EXTRACTORS",
    "Extractor",
    "extract_text",
    "plain_text",
    "strip_html",
    "html_to_text",
    "markdown_to_text",
    "word_to_text",
    "excel_to_text",
    "powerpoint_to_text",
]
