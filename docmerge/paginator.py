"""Word wrapping and pagination of plain text for monospace pages."""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from reportlab.pdfbase.pdfmetrics import stringWidth

from .config import DEFAULT_LAYOUT, PageLayout
from .types import TextPage

_LOGGER = logging.getLogger("docmerge.paginator")

_CONTROL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")

Measure = Callable[[str], float]


def printable(text: str) -> str:
    """Return *text* restricted to what the standard Courier fonts can draw.

    Tabs expand to four columns, control characters become spaces and
    characters outside the WinAnsi repertoire become ``?``.
    """

    text = _CONTROL_RE.sub(" ", text.expandtabs(4))
    return text.encode("cp1252", errors="replace").decode("cp1252")


def font_measure(font_name: str, font_size: float) -> Measure:
    """Return a function measuring rendered string width in points."""

    def measure(text: str) -> float:
        return stringWidth(printable(text), font_name, font_size)

    return measure


def wrap_line(line: str, max_width: float, measure: Measure) -> List[str]:
    """Greedily wrap one line of text at spaces.

    A word that does not fit on an empty line is kept whole and overflows
    the column. Blank and whitespace-only lines wrap to a single empty line.
    """

    wrapped: List[str] = []
    current = ""
    for word in line.split(" "):
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate) > max_width:
            wrapped.append(current)
            current = word
        else:
            current = candidate
    if current:
        wrapped.append(current)
    return wrapped or [""]


def wrap_text(text: str, max_width: float, measure: Measure) -> List[str]:
    """Wrap every line of *text* independently."""

    normalised = text.replace("\r\n", "\n").replace("\r", "\n")
    lines: List[str] = []
    for line in normalised.split("\n"):
        lines.extend(wrap_line(line, max_width, measure))
    return lines


def paginate(
    text: str,
    layout: PageLayout = DEFAULT_LAYOUT,
    title: Optional[str] = None,
) -> List[TextPage]:
    """Split *text* into :class:`TextPage` objects sized for *layout*.

    The title, when given, is placed on the first page only and reduces that
    page's line capacity by ``layout.title_reserved``. At least one page is
    always produced.
    """

    measure = font_measure(layout.font_name, layout.font_size)
    lines = wrap_text(text, layout.text_width, measure)

    pages: List[TextPage] = []
    start = 0
    while start < len(lines) or not pages:
        page_title = title if not pages else None
        capacity = layout.lines_per_page(with_title=page_title is not None)
        pages.append(TextPage(lines=tuple(lines[start:start + capacity]), title=page_title))
        start += capacity

    _LOGGER.debug("Paginated %d line(s) into %d page(s)", len(lines), len(pages))
    return pages


__all__ = ["printable", "font_measure", "wrap_line", "wrap_text", "paginate"]
