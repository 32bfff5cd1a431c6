from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from pypdf import PdfReader

from docmerge.cli import cli


def test_merge_command_writes_pdf(sample_tree: Path, tmp_path: Path) -> None:
    cover = tmp_path / "cover.txt"
    cover.write_text("Cover page", encoding="utf-8")
    output = tmp_path / "out.pdf"

    result = CliRunner().invoke(
        cli,
        ["merge", str(cover), str(sample_tree), "-o", str(output), "--bookmarks", "--title", "Scans"],
    )

    assert result.exit_code == 0, result.output
    reader = PdfReader(str(output))
    # cover.txt, notes.txt, cover.pdf, page2.png, page10.png
    assert len(reader.pages) == 5
    assert reader.metadata.title == "Scans"
    assert len(reader.outline) == 5
    assert "Merged Files" in result.output


def test_merge_command_fails_on_encrypted_pdf(encrypted_pdf_bytes: bytes, tmp_path: Path) -> None:
    locked = tmp_path / "locked.pdf"
    locked.write_bytes(encrypted_pdf_bytes)

    result = CliRunner().invoke(cli, ["merge", str(locked), "-o", str(tmp_path / "out.pdf")])

    assert result.exit_code == 1
    assert "encrypted" in result.output
    assert not (tmp_path / "out.pdf").exists()


def test_merge_command_without_supported_files(tmp_path: Path) -> None:
    junk = tmp_path / "junk.bin"
    junk.write_bytes(b"\x00")

    result = CliRunner().invoke(cli, ["merge", str(junk), "-o", str(tmp_path / "out.pdf")])

    assert result.exit_code == 1
    assert "No supported files" in result.output


def test_formats_command_lists_extensions() -> None:
    result = CliRunner().invoke(cli, ["formats"])

    assert result.exit_code == 0
    assert ".pdf" in result.output
    assert "powerpoint" in result.output
