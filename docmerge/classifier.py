"""Extension based classification of input files."""

from __future__ import annotations

from .config import DEFAULT_CATEGORY_TABLE, CategoryTable
from .types import FileCategory


class TypeClassifier:
    """Map file names to a :class:`FileCategory` using a :class:`CategoryTable`.

    Only the base name is examined and matching is case-insensitive. Dotted
    suffixes are tried longest first, so ``report.final.PDF`` is a PDF and a
    table entry for ``.tar.gz`` would take precedence over ``.gz``.
    Classification never fails: anything the table does not know is
    :attr:`FileCategory.UNRECOGNIZED`.
    """

    def __init__(self, table: CategoryTable = DEFAULT_CATEGORY_TABLE) -> None:
        self.table = table

    def classify(self, filename: str | None) -> FileCategory:
        base = (filename or "").replace("\\", "/").rsplit("/", 1)[-1].lower()
        parts = base.split(".")
        if len(parts) < 2:
            return FileCategory.UNRECOGNIZED

        first = max(1, len(parts) - self.table.max_dots)
        for index in range(first, len(parts)):
            suffix = "." + ".".join(parts[index:])
            category = self.table.get(suffix)
            if category is not None:
                return category
        return FileCategory.UNRECOGNIZED

    def is_supported(self, filename: str | None) -> bool:
        return self.classify(filename) is not FileCategory.UNRECOGNIZED

    def supported_extensions(self) -> dict[FileCategory, list[str]]:
        groups: dict[FileCategory, list[str]] = {}
        for category in FileCategory:
            extensions = self.table.extensions_for(category)
            if extensions:
                groups[category] = extensions
        return groups


DEFAULT_CLASSIFIER = TypeClassifier()


def classify(filename: str | None) -> FileCategory:
    """Classify *filename* with the default category table."""

    return DEFAULT_CLASSIFIER.classify(filename)


__all__ = ["TypeClassifier", "DEFAULT_CLASSIFIER", "classify"]
