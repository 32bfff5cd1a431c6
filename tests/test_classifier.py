from __future__ import annotations

import pytest

from docmerge.classifier import DEFAULT_CLASSIFIER, TypeClassifier, classify
from docmerge.config import DEFAULT_CATEGORY_TABLE, CategoryTable
from docmerge.types import FileCategory


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("report.pdf", FileCategory.PDF),
        ("REPORT.PDF", FileCategory.PDF),
        ("photo.JpEg", FileCategory.IMAGE),
        ("scan.tif", FileCategory.IMAGE),
        ("letter.docx", FileCategory.WORD),
        ("legacy.doc", FileCategory.WORD),
        ("budget.xlsx", FileCategory.EXCEL),
        ("export.csv", FileCategory.EXCEL),
        ("readme.txt", FileCategory.TEXT),
        ("notes.markdown", FileCategory.MARKDOWN),
        ("page.htm", FileCategory.HTML),
        ("deck.pptx", FileCategory.POWERPOINT),
        ("a.b.c.PDF", FileCategory.PDF),
        ("scans/2024/page1.png", FileCategory.IMAGE),
    ],
)
def test_classify_known_extensions(filename: str, expected: FileCategory) -> None:
    assert classify(filename) is expected


@pytest.mark.parametrize(
    "filename",
    ["", "noext", "archive.zip", "trailing.", ".pdf.bak", "folder.pdf/readme", None],
)
def test_classify_unknown_names_is_unrecognized(filename: str | None) -> None:
    assert classify(filename) is FileCategory.UNRECOGNIZED
    assert not DEFAULT_CLASSIFIER.is_supported(filename)


def test_classify_is_total_over_odd_names() -> None:
    names = ["...", ".", "..pdf", "a..png", "\\windows\\path\\doc.DOCX", "ünïcode.md", " spaced .txt"]
    for name in names:
        assert isinstance(classify(name), FileCategory)
    assert classify("\\windows\\path\\doc.DOCX") is FileCategory.WORD
    assert classify("ünïcode.md") is FileCategory.MARKDOWN


def test_custom_table_prefers_longest_suffix() -> None:
    table = CategoryTable({".gz": FileCategory.TEXT, "TAR.GZ": FileCategory.EXCEL})
    classifier = TypeClassifier(table)

    assert classifier.classify("backup.tar.gz") is FileCategory.EXCEL
    assert classifier.classify("log.gz") is FileCategory.TEXT
    assert classifier.classify("report.pdf") is FileCategory.UNRECOGNIZED


def test_category_table_rejects_unrecognized_and_is_read_only() -> None:
    with pytest.raises(ValueError):
        CategoryTable({".bin": FileCategory.UNRECOGNIZED})

    with pytest.raises(TypeError):
        DEFAULT_CATEGORY_TABLE[".exe"] = FileCategory.PDF  # type: ignore[index]


def test_supported_extensions_groups_every_category() -> None:
    groups = DEFAULT_CLASSIFIER.supported_extensions()

    assert FileCategory.UNRECOGNIZED not in groups
    assert groups[FileCategory.PDF] == [".pdf"]
    assert ".csv" in groups[FileCategory.EXCEL]
    assert set(groups) == {category for category in FileCategory if category is not FileCategory.UNRECOGNIZED}
