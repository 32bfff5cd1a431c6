from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from PIL import Image
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

_PRESENTATION_NS = (
    'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main"'
)


def _slide_xml(paragraphs: Sequence[str]) -> bytes:
    body = "".join(f"<a:p><a:r><a:t>{text}</a:t></a:r></a:p>" for text in paragraphs)
    return (
        f'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f"<p:sld {_PRESENTATION_NS}><p:cSld><p:spTree><p:sp><p:txBody>"
        f"{body}</p:txBody></p:sp></p:spTree></p:cSld></p:sld>"
    ).encode("utf-8")


@pytest.fixture()
def pdf_bytes_factory() -> Callable[..., bytes]:
    def _create(*widths: float, height: float = 200, title: str | None = None) -> bytes:
        writer = PdfWriter()
        for width in widths or (200,):
            writer.add_blank_page(width=width, height=height)
        if title is not None:
            writer.add_metadata({"/Title": title})
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

    return _create


@pytest.fixture()
def encrypted_pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    writer.encrypt(user_password="secret", owner_password="owner")
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture()
def png_factory() -> Callable[..., bytes]:
    def _create(width: int, height: int, mode: str = "RGB", color: object = (200, 30, 30)) -> bytes:
        buffer = io.BytesIO()
        Image.new(mode, (width, height), color).save(buffer, format="PNG")
        return buffer.getvalue()

    return _create


@pytest.fixture()
def docx_bytes() -> bytes:
    from docx import Document

    document = Document()
    document.add_paragraph("First paragraph")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Name"
    table.cell(0, 1).text = "Qty"
    table.cell(1, 0).text = "Apple"
    table.cell(1, 1).text = "3"
    document.add_paragraph("After the table")
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


@pytest.fixture()
def xlsx_bytes() -> bytes:
    from openpyxl import Workbook

    workbook = Workbook()
    fruit = workbook.active
    fruit.title = "Fruit"
    fruit.append(["Name", "Qty"])
    fruit.append(["Apple", 3])
    fruit.append(["Pear", 10])
    workbook.create_sheet("Empty")
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture()
def pptx_factory() -> Callable[[dict[str, bytes]], bytes]:
    def _create(parts: dict[str, bytes]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("[Content_Types].xml", "<Types/>")
            for name, payload in parts.items():
                archive.writestr(name, payload)
        return buffer.getvalue()

    return _create


@pytest.fixture()
def pptx_bytes(pptx_factory: Callable[[dict[str, bytes]], bytes]) -> bytes:
    return pptx_factory(
        {
            "ppt/slides/slide1.xml": _slide_xml(["Quarterly review", "Revenue &amp; costs"]),
            "ppt/slides/slide10.xml": _slide_xml(["Questions"]),
            "ppt/slides/slide2.xml": _slide_xml(["Agenda"]),
        }
    )


@pytest.fixture()
def sample_tree(tmp_path: Path, png_factory: Callable[..., bytes], pdf_bytes_factory: Callable[..., bytes]) -> Path:
    root = tmp_path / "scans"
    (root / "appendix").mkdir(parents=True)
    (root / "page10.png").write_bytes(png_factory(120, 80))
    (root / "page2.png").write_bytes(png_factory(150, 90))
    (root / "cover.pdf").write_bytes(pdf_bytes_factory(300))
    (root / "appendix" / "notes.txt").write_text("Appendix notes", encoding="utf-8")
    (root / "thumbs.db").write_bytes(b"\x00\x01")
    return root


@pytest.fixture()
def xls_bytes() -> bytes:
    xlwt = pytest.importorskip("xlwt")

    workbook = xlwt.Workbook()
    sheet = workbook.add_sheet("Legacy")
    for row_index, row in enumerate([["Name", "Qty"], ["Apple", 3], ["Pear", 10]]):
        for column_index, value in enumerate(row):
            sheet.write(row_index, column_index, value)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
