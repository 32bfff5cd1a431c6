"""Drawing of freshly constructed pages with reportlab."""

from __future__ import annotations

import io
import logging
from typing import List, Sequence

from pypdf import PageObject, PdfReader
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from .config import DEFAULT_LAYOUT, PageLayout
from .paginator import paginate, printable
from .types import ImagePlacement, NormalizedImage, TextPage

_LOGGER = logging.getLogger("docmerge.rendering")

TITLE_COLOR = (0.2, 0.2, 0.2)
TEXT_COLOR = (0.15, 0.15, 0.15)


def _new_canvas(buffer: io.BytesIO, width: float, height: float) -> canvas.Canvas:
    return canvas.Canvas(buffer, pagesize=(width, height), pageCompression=1)


def render_text_pages(pages: Sequence[TextPage], layout: PageLayout = DEFAULT_LAYOUT) -> bytes:
    """Render *pages* as a standalone PDF and return its bytes."""

    buffer = io.BytesIO()
    pdf = _new_canvas(buffer, layout.width, layout.height)
    for page in pages:
        y = layout.height - layout.margin
        if page.title:
            pdf.setFillColorRGB(*TITLE_COLOR)
            pdf.setFont(layout.title_font_name, layout.title_font_size)
            pdf.drawString(layout.margin, y - layout.title_font_size, printable(page.title))
            y -= layout.title_reserved

        pdf.setFillColorRGB(*TEXT_COLOR)
        pdf.setFont(layout.font_name, layout.font_size)
        for line in page.lines:
            if line:
                pdf.drawString(layout.margin, y - layout.font_size, printable(line))
            y -= layout.line_height
        pdf.showPage()
    pdf.save()
    _LOGGER.debug("Rendered %d text page(s)", len(pages))
    return buffer.getvalue()


def render_image_page(image: NormalizedImage, placement: ImagePlacement) -> bytes:
    """Render a single page holding *image* at the origin."""

    buffer = io.BytesIO()
    pdf = _new_canvas(buffer, placement.page_width, placement.page_height)
    pdf.drawImage(
        ImageReader(io.BytesIO(image.data)),
        0,
        0,
        width=placement.draw_width,
        height=placement.draw_height,
    )
    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def render_error_notice(filename: str, message: str, layout: PageLayout = DEFAULT_LAYOUT) -> bytes:
    """Render the notice that replaces the pages of a file that failed to convert."""

    text = f"Error processing file: {filename}\n\n{message}"
    return render_text_pages(paginate(text, layout, title="Error"), layout)


def read_pages(data: bytes) -> List[PageObject]:
    """Return the pages of an in-memory PDF produced by this module."""

    return list(PdfReader(io.BytesIO(data)).pages)


__all__ = ["render_text_pages", "render_image_page", "render_error_notice", "read_pages"]
