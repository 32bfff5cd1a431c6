"""Spreadsheets and CSV files rendered as fixed-width text tables."""

from __future__ import annotations

import csv
import io
import logging
from datetime import date, datetime, time
from typing import Iterable, List, Sequence, Tuple

import xlrd
from openpyxl import load_workbook

from ..utils import decode_text

_LOGGER = logging.getLogger("docmerge.extractors.spreadsheet")

MAX_CELL_WIDTH = 30
BANNER_WIDTH = 60
COLUMN_SEPARATOR = " | "
RULE_SEPARATOR = "-+-"
EMPTY_SHEET = "(Empty sheet)"

_ZIP_MAGIC = b"PK\x03\x04"
_OLE_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

Sheet = Tuple[str, List[List[str]]]


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime) and value.time() == time(0):
        return value.date().isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def _trim(rows: Iterable[Sequence[object]]) -> List[List[str]]:
    """Stringify cells and drop trailing empty rows and columns."""

    table = [[_cell_text(value) for value in row] for row in rows]
    while table and not any(table[-1]):
        table.pop()
    width = 0
    for row in table:
        for index, cell in enumerate(row):
            if cell:
                width = max(width, index + 1)
    return [(row + [""] * width)[:width] for row in table]


def format_table(rows: Sequence[Sequence[str]]) -> str:
    """Format *rows* as a fixed-width table with a rule under the first row."""

    if not rows:
        return EMPTY_SHEET

    column_count = max(len(row) for row in rows)
    widths = [0] * column_count
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = min(max(widths[index], len(cell)), MAX_CELL_WIDTH)

    lines = []
    for row_index, row in enumerate(rows):
        cells = [cell[:MAX_CELL_WIDTH].ljust(widths[index]) for index, cell in enumerate(row)]
        lines.append(COLUMN_SEPARATOR.join(cells))
        if row_index == 0:
            lines.append(RULE_SEPARATOR.join("-" * width for width in widths))
    return "\n".join(lines)


def _sheet_banner(name: str) -> str:
    rule = "=" * BANNER_WIDTH
    return f"{rule}\n  SHEET: {name}\n{rule}\n"


def format_sheets(sheets: Sequence[Sheet]) -> str:
    """Render every sheet, adding a banner per sheet when there are several."""

    sections = []
    for name, rows in sheets:
        body = format_table(rows)
        if len(sheets) > 1:
            body = f"{_sheet_banner(name)}\n{body}"
        sections.append(body)
    return "\n\n".join(sections).strip()


def _read_workbook(data: bytes) -> List[Sheet]:
    workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    try:
        return [
            (worksheet.title, _trim(worksheet.iter_rows(values_only=True)))
            for worksheet in workbook.worksheets
        ]
    finally:
        workbook.close()


def _legacy_cell(cell: xlrd.sheet.Cell, datemode: int) -> object:
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return None
    if cell.ctype == xlrd.XL_CELL_DATE:
        return xlrd.xldate.xldate_as_datetime(cell.value, datemode)
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.error_text_from_code.get(cell.value, "#ERR")
    return cell.value


def _read_legacy_workbook(data: bytes) -> List[Sheet]:
    """Read a binary BIFF (.xls) workbook."""

    book = xlrd.open_workbook(file_contents=data, on_demand=True)
    try:
        sheets = []
        for index in range(book.nsheets):
            sheet = book.sheet_by_index(index)
            rows = [
                [_legacy_cell(cell, book.datemode) for cell in sheet.row(row_index)]
                for row_index in range(sheet.nrows)
            ]
            sheets.append((sheet.name, _trim(rows)))
        return sheets
    finally:
        book.release_resources()


def _read_csv(data: bytes) -> List[Sheet]:
    text = decode_text(data)
    try:
        dialect = csv.Sniffer().sniff(text[:4096], delimiters=",;\t|")
    except csv.Error:
        dialect = csv.excel
    rows = list(csv.reader(io.StringIO(text), dialect))
    return [("Sheet1", _trim(rows))]


def excel_to_text(data: bytes, filename: str = "") -> str:
    """Render a workbook or CSV file as text tables.

    Failures are reported inside the returned text instead of being raised.
    """

    try:
        if data.startswith(_OLE_MAGIC):
            sheets = _read_legacy_workbook(data)
        elif data.startswith(_ZIP_MAGIC):
            sheets = _read_workbook(data)
        else:
            sheets = _read_csv(data)
        return format_sheets(sheets)
    except Exception as exc:  # openpyxl, xlrd and csv raise assorted errors
        _LOGGER.warning("Failed to read spreadsheet %s: %s", filename, exc)
        return f"Error reading spreadsheet: {exc}"


__all__ = ["format_table", "format_sheets", "excel_to_text"]
