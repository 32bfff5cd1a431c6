from __future__ import annotations

from typing import Callable

import pytest

from docmerge.config import QUALITY_TIERS
from docmerge.converters import load_builtin_converters, registry
from docmerge.converters.common.interfaces import BaseConverter, ConversionContext
from docmerge.converters.common.pipeline import ConverterRegistry
from docmerge.converters.image import ImageConverter
from docmerge.converters.pdf import PdfConverter
from docmerge.converters.text import TextDocumentConverter
from docmerge.exceptions import EncryptedPDFError, SourceDocumentError
from docmerge.types import FileCategory, InputFile


def setup_module(module):
    load_builtin_converters()


class _DummyConverter(BaseConverter):
    def convert(self, item, category):
        return []


def test_builtin_registry_covers_every_supported_category() -> None:
    expected = {category for category in FileCategory if category is not FileCategory.UNRECOGNIZED}
    assert set(registry.categories()) == expected
    assert registry.get(FileCategory.PDF) is PdfConverter
    assert registry.get(FileCategory.IMAGE) is ImageConverter
    assert registry.get(FileCategory.MARKDOWN) is TextDocumentConverter
    assert registry.get(FileCategory.UNRECOGNIZED) is None


def test_load_builtin_converters_is_idempotent() -> None:
    load_builtin_converters()
    assert registry.get(FileCategory.TEXT) is TextDocumentConverter


def test_registry_rejects_duplicates_and_unrecognized() -> None:
    local = ConverterRegistry()
    local.register(FileCategory.TEXT, _DummyConverter)

    with pytest.raises(ValueError):
        local.register(FileCategory.TEXT, _DummyConverter)
    with pytest.raises(ValueError):
        local.register(FileCategory.UNRECOGNIZED, _DummyConverter)
    with pytest.raises(KeyError):
        local.create(FileCategory.PDF, ConversionContext())


def test_registry_creates_converters_with_context() -> None:
    context = ConversionContext(quality=QUALITY_TIERS["high"])
    converter = registry.create(FileCategory.IMAGE, context)

    assert isinstance(converter, ImageConverter)
    assert converter.context.quality.name == "high"


def test_pdf_converter_copies_pages(pdf_bytes_factory: Callable[..., bytes]) -> None:
    converter = PdfConverter(ConversionContext())
    pages = converter.convert(InputFile("three.pdf", pdf_bytes_factory(100, 200, 300)), FileCategory.PDF)

    assert [float(page.mediabox.width) for page in pages] == [100, 200, 300]


def test_pdf_converter_rejects_encrypted_and_corrupt_input(encrypted_pdf_bytes: bytes) -> None:
    converter = PdfConverter(ConversionContext())

    with pytest.raises(EncryptedPDFError):
        converter.convert(InputFile("locked.pdf", encrypted_pdf_bytes), FileCategory.PDF)
    with pytest.raises(SourceDocumentError) as excinfo:
        converter.convert(InputFile("broken.pdf", b"%PDF-1.4 nothing useful"), FileCategory.PDF)
    assert excinfo.value.filename == "broken.pdf"


def test_image_converter_sizes_page_to_image(png_factory: Callable[..., bytes]) -> None:
    converter = ImageConverter(ConversionContext())
    pages = converter.convert(InputFile("photo.png", png_factory(150, 120)), FileCategory.IMAGE)

    assert len(pages) == 1
    assert float(pages[0].mediabox.width) == pytest.approx(150)
    assert float(pages[0].mediabox.height) == pytest.approx(120)


def test_text_converter_titles_pages_with_file_name() -> None:
    converter = TextDocumentConverter(ConversionContext())
    item = InputFile("notes/todo.txt", "\n".join(f"item {index}" for index in range(60)).encode("utf-8"))

    pages = converter.convert(item, FileCategory.TEXT)

    assert len(pages) == 2
    first_page = pages[0].extract_text()
    assert "todo.txt" in first_page
    assert "notes/" not in first_page
    assert "item 0" in first_page
    assert float(pages[0].mediabox.width) == pytest.approx(612)


def test_pdf_converter_rejects_pdf_without_pages(pdf_bytes_factory: Callable[..., bytes]) -> None:
    converter = PdfConverter(ConversionContext())
    damaged = pdf_bytes_factory(200).replace(b"/Type /Pages", b"/Type /Pagez").replace(b"/Kids", b"/Kidz")

    with pytest.raises(SourceDocumentError) as excinfo:
        converter.convert(InputFile("hollow.pdf", damaged), FileCategory.PDF)

    assert not isinstance(excinfo.value, EncryptedPDFError)
    assert excinfo.value.filename == "hollow.pdf"
