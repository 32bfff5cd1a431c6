"""Best-effort text recovery from presentation files."""

from __future__ import annotations

import io
import logging
import re
import zipfile
from typing import List
from xml.etree import ElementTree as ET
from xml.sax.saxutils import unescape

_LOGGER = logging.getLogger("docmerge.extractors.presentation")

EMPTY_PRESENTATION = "(Could not extract text from presentation)"

_DRAWINGML_NS = "{http://schemas.openxmlformats.org/drawingml/2006/main}"
_SLIDE_RE = re.compile(r"^ppt/slides/slide(\d+)\.xml$")
_TEXT_RUN_RE = re.compile(r"<a:t>([^<]+)</a:t>")


def _slide_names(archive: zipfile.ZipFile) -> List[str]:
    numbered = []
    for name in archive.namelist():
        match = _SLIDE_RE.match(name)
        if match:
            numbered.append((int(match.group(1)), name))
    return [name for _, name in sorted(numbered)]


def _slide_paragraphs(payload: bytes) -> List[str]:
    root = ET.fromstring(payload)
    paragraphs = []
    for paragraph in root.iter(f"{_DRAWINGML_NS}p"):
        runs = [node.text for node in paragraph.iter(f"{_DRAWINGML_NS}t") if node.text]
        text = "".join(runs).strip()
        if text:
            paragraphs.append(text)
    return paragraphs


def structured_text(data: bytes) -> str:
    """Return ``Slide N:`` sections built from the slide XML parts."""

    sections = []
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        for index, name in enumerate(_slide_names(archive), start=1):
            paragraphs = _slide_paragraphs(archive.read(name))
            if paragraphs:
                sections.append(f"Slide {index}:\n" + "\n".join(paragraphs))
    return "\n\n".join(sections).strip()


def scraped_text(data: bytes) -> str:
    """Collect ``<a:t>`` text runs with a regular expression.

    Zip archives are scraped member by member; anything else is scraped as
    raw bytes.
    """

    sources: List[str] = []
    if zipfile.is_zipfile(io.BytesIO(data)):
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            for name in archive.namelist():
                if name.endswith(".xml"):
                    sources.append(archive.read(name).decode("utf-8", errors="ignore"))
    else:
        sources.append(data.decode("utf-8", errors="ignore"))

    runs = [unescape(match) for source in sources for match in _TEXT_RUN_RE.findall(source)]
    return "\n".join(run for run in runs if run.strip())


def powerpoint_to_text(data: bytes, filename: str = "") -> str:
    """Extract slide text, falling back to a regex scrape and then a placeholder."""

    try:
        text = ""
        try:
            text = structured_text(data)
        except (zipfile.BadZipFile, ET.ParseError, KeyError) as exc:
            _LOGGER.debug("Structured slide extraction failed for %s: %s", filename, exc)
        if not text:
            text = scraped_text(data)
        return text or EMPTY_PRESENTATION
    except Exception as exc:  # zipfile raises assorted errors on damaged archives
        _LOGGER.warning("Failed to extract presentation text from %s: %s", filename, exc)
        return f"(PowerPoint extraction error: {exc})"


__all__ = ["EMPTY_PRESENTATION", "structured_text", "scraped_text", "powerpoint_to_text"]
