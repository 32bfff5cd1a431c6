"""Converter copying pages from native PDF inputs."""

from __future__ import annotations

import io
from typing import List

from pypdf import PageObject, PdfReader
from pypdf.errors import FileNotDecryptedError

from ..exceptions import EncryptedPDFError, SourceDocumentError
from ..types import FileCategory, InputFile
from ..utils import get_logger
from .common.interfaces import BaseConverter
from .common.pipeline import register_converter

LOGGER = get_logger("docmerge.converters.pdf")


def _load_reader(item: InputFile) -> PdfReader:
    try:
        reader = PdfReader(io.BytesIO(item.data))
    except Exception as exc:  # pypdf exceptions vary
        LOGGER.error("Failed to read PDF %s: %s", item.name, exc)
        raise SourceDocumentError(item.name, f"Unable to read PDF ({exc})") from exc

    if reader.is_encrypted:
        LOGGER.debug("Attempting to decrypt encrypted PDF %s", item.name)
        try:
            decrypted = reader.decrypt("")
        except Exception as exc:  # decrypt errors vary
            LOGGER.error("Failed to decrypt PDF %s: %s", item.name, exc)
            raise EncryptedPDFError(item.name) from exc
        if not decrypted:
            LOGGER.error("PDF %s requires a password", item.name)
            raise EncryptedPDFError(item.name)
    return reader


@register_converter(FileCategory.PDF)
class PdfConverter(BaseConverter):
    """Copy every page of a source PDF, in order."""

    def convert(self, item: InputFile, category: FileCategory) -> List[PageObject]:
        reader = _load_reader(item)
        try:
            pages = list(reader.pages)
        except FileNotDecryptedError as exc:
            LOGGER.error("PDF %s requires a password", item.name)
            raise EncryptedPDFError(item.name) from exc
        except Exception as exc:  # damaged page trees fail in assorted ways
            LOGGER.error("Failed to read pages of %s: %s", item.name, exc)
            raise SourceDocumentError(item.name, f"Unable to read PDF pages ({exc})") from exc

        if not pages:
            LOGGER.error("PDF %s contains no readable pages", item.name)
            raise SourceDocumentError(item.name, "PDF contains no readable pages")
        return pages
