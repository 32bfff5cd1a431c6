"""Configuration values for :mod:`docmerge`.

Everything here is immutable and passed into the classifier, normalizer and
merge engine at construction time.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Iterable, Literal

from .types import FileCategory

_LOGGER = logging.getLogger("docmerge.config")

QualityTierName = Literal["low", "medium", "high"]


@dataclasses.dataclass(frozen=True)
class QualityTier:
    """Image recompression settings for one quality preset."""

    name: QualityTierName
    jpeg_quality: int
    max_dimension: int


QUALITY_TIERS: Mapping[str, QualityTier] = MappingProxyType(
    {
        "low": QualityTier("low", jpeg_quality=50, max_dimension=1200),
        "medium": QualityTier("medium", jpeg_quality=75, max_dimension=2000),
        "high": QualityTier("high", jpeg_quality=95, max_dimension=4000),
    }
)

DEFAULT_QUALITY = QUALITY_TIERS["medium"]


def resolve_quality_tier(value: QualityTier | str | None) -> QualityTier:
    """Return the :class:`QualityTier` for *value*.

    Unknown names fall back to ``medium`` rather than failing the request.
    """

    if isinstance(value, QualityTier):
        return value
    if value is None:
        return DEFAULT_QUALITY
    tier = QUALITY_TIERS.get(str(value).strip().lower())
    if tier is None:
        _LOGGER.warning("Unknown quality tier %r; using %s", value, DEFAULT_QUALITY.name)
        return DEFAULT_QUALITY
    return tier


@dataclasses.dataclass(frozen=True)
class PageLayout:
    """Geometry and font metrics used for freshly rendered pages."""

    width: float = 612.0
    height: float = 792.0
    margin: float = 50.0
    font_name: str = "Courier"
    font_size: float = 10.0
    line_spacing: float = 1.5
    title_font_name: str = "Courier-Bold"
    title_font_size: float = 14.0
    title_reserved: float = 40.0
    min_image_page: float = 100.0

    @property
    def line_height(self) -> float:
        return self.font_size * self.line_spacing

    @property
    def text_width(self) -> float:
        return self.width - 2 * self.margin

    def lines_per_page(self, *, with_title: bool = False) -> int:
        usable = self.height - 2 * self.margin
        if with_title:
            usable -= self.title_reserved
        return max(1, int(usable // self.line_height))


DEFAULT_LAYOUT = PageLayout()


class CategoryTable(Mapping[str, FileCategory]):
    """Read-only mapping of dotted, lower-case extensions to categories."""

    def __init__(self, mapping: Mapping[str, FileCategory]) -> None:
        normalised: dict[str, FileCategory] = {}
        for extension, category in mapping.items():
            key = extension.strip().lower()
            if not key.startswith("."):
                key = f".{key}"
            if category is FileCategory.UNRECOGNIZED:
                raise ValueError(f"Extension '{key}' cannot map to the unrecognized category")
            normalised[key] = FileCategory(category)
        self._mapping = MappingProxyType(normalised)
        self.max_dots = max((key.count(".") for key in normalised), default=1)

    @classmethod
    def from_groups(cls, groups: Mapping[FileCategory, Iterable[str]]) -> "CategoryTable":
        mapping: dict[str, FileCategory] = {}
        for category, extensions in groups.items():
            for extension in extensions:
                mapping[extension] = category
        return cls(mapping)

    def __getitem__(self, key: str) -> FileCategory:
        return self._mapping[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def extensions_for(self, category: FileCategory) -> list[str]:
        return sorted(ext for ext, value in self._mapping.items() if value is category)

    def __repr__(self) -> str:
        return f"CategoryTable({dict(self._mapping)!r})"


DEFAULT_CATEGORY_TABLE = CategoryTable.from_groups(
    {
        FileCategory.PDF: [".pdf"],
        FileCategory.IMAGE: [".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tiff", ".tif"],
        FileCategory.WORD: [".docx", ".doc"],
        FileCategory.EXCEL: [".xlsx", ".xls", ".csv"],
        FileCategory.TEXT: [".txt"],
        FileCategory.MARKDOWN: [".md", ".markdown"],
        FileCategory.HTML: [".html", ".htm"],
        FileCategory.POWERPOINT: [".pptx", ".ppt"],
    }
)


@dataclasses.dataclass(frozen=True)
class MergeOptions:
    """Per-request options for the merge engine."""

    quality: QualityTier = DEFAULT_QUALITY
    layout: PageLayout = DEFAULT_LAYOUT
    bookmarks: bool = False
    title: str | None = None


__all__ = [
    "QualityTierName",
    "QualityTier",
    "QUALITY_TIERS",
    "DEFAULT_QUALITY",
    "resolve_quality_tier",
    "PageLayout",
    "DEFAULT_LAYOUT",
    "CategoryTable",
    "DEFAULT_CATEGORY_TABLE",
    "MergeOptions",
]
