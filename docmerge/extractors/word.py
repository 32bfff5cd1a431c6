"""Word-processor documents to plain text."""

from __future__ import annotations

import io
import logging
import re

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

_LOGGER = logging.getLogger("docmerge.extractors.word")

_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n\r\t]")


def _table_text(table: Table) -> list[str]:
    rows = []
    for row in table.rows:
        cells = [cell.text.strip() for cell in row.cells]
        rows.append("\t".join(cells))
    return rows


def _docx_text(data: bytes) -> str:
    document = Document(io.BytesIO(data))
    blocks: list[str] = []
    for item in document.iter_inner_content():
        if isinstance(item, Paragraph):
            blocks.append(item.text)
        elif isinstance(item, Table):
            blocks.extend(_table_text(item))
    return "\n".join(blocks)


def raw_text_fallback(data: bytes) -> str:
    """Best-effort text from an unparseable buffer: printable ASCII only."""

    return _NON_PRINTABLE_RE.sub(" ", data.decode("utf-8", errors="replace"))


def word_to_text(data: bytes, filename: str = "") -> str:
    """Extract paragraphs and table rows from a ``.docx`` document.

    Legacy ``.doc`` files and damaged archives fall back to
    :func:`raw_text_fallback`.
    """

    try:
        return _docx_text(data)
    except Exception as exc:  # python-docx raises a variety of zip/xml errors
        _LOGGER.debug("Structured extraction failed for %s, using raw text: %s", filename, exc)
        return raw_text_fallback(data)


__all__ = ["word_to_text", "raw_text_fallback"]
