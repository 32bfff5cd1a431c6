"""Type definitions and dataclasses shared across docmerge."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class FileCategory(str, Enum):
    """Content category of an input file, derived from its extension."""

    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"
    WORD = "word"
    EXCEL = "excel"
    MARKDOWN = "markdown"
    HTML = "html"
    POWERPOINT = "powerpoint"
    UNRECOGNIZED = "unrecognized"

    @property
    def is_text_like(self) -> bool:
        return self in _TEXT_LIKE


_TEXT_LIKE = frozenset(
    {
        FileCategory.TEXT,
        FileCategory.WORD,
        FileCategory.EXCEL,
        FileCategory.MARKDOWN,
        FileCategory.HTML,
        FileCategory.POWERPOINT,
    }
)


@dataclass(frozen=True)
class InputFile:
    """One uploaded file.

    Attributes:
        name: File name, possibly a relative path such as ``scans/page2.png``.
        data: Raw file contents.
        declared_type: MIME type reported by the client. Informational only.
    """

    name: str
    data: bytes = field(repr=False)
    declared_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class NormalizedImage:
    """A recompressed JPEG ready to be embedded in a page."""

    data: bytes = field(repr=False)
    width: int
    height: int


@dataclass(frozen=True)
class ImagePlacement:
    """Page size and drawn image size for an image page, in points."""

    page_width: float
    page_height: float
    draw_width: float
    draw_height: float


@dataclass(frozen=True)
class TextPage:
    """A page of wrapped monospace lines, with an optional bold title."""

    lines: Tuple[str, ...]
    title: Optional[str] = None


@dataclass
class FileOutcome:
    """What happened to one input file during a merge.

    Attributes:
        name: Input file name.
        category: Category the file was classified as.
        status: ``converted``, ``failed`` or ``skipped``.
        pages: Number of pages the file contributed, error notices included.
        error: Failure message when ``status`` is ``failed``.
    """

    name: str
    category: FileCategory
    status: str
    pages: int = 0
    error: Optional[str] = None


@dataclass
class MergeResult:
    """Result of a merge: the serialised PDF and per-file outcomes."""

    data: bytes = field(repr=False)
    page_count: int
    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def failed(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "failed"]

    @property
    def skipped(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "skipped"]

    def __str__(self) -> str:
        return "MergeResult(files={files}, pages={pages}, failed={failed}, skipped={skipped})".format(
            files=len(self.outcomes),
            pages=self.page_count,
            failed=len(self.failed),
            skipped=len(self.skipped),
        )


__all__ = [
    "FileCategory",
    "InputFile",
    "NormalizedImage",
    "ImagePlacement",
    "TextPage",
    "FileOutcome",
    "MergeResult",
]
