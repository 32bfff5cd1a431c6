from __future__ import annotations

from pathlib import Path

import pytest

from docmerge.sources import DirectorySource, load_inputs, partition_supported, read_input
from docmerge.types import InputFile


def test_directory_source_lists_supported_files_naturally(sample_tree: Path) -> None:
    source = DirectorySource(sample_tree)

    assert source.relative_names() == ["appendix/notes.txt", "cover.pdf", "page2.png", "page10.png"]


def test_directory_source_is_restartable(sample_tree: Path) -> None:
    source = DirectorySource(sample_tree)

    first = [item.name for item in source]
    (sample_tree / "page3.png").write_bytes((sample_tree / "page2.png").read_bytes())
    second = [item.name for item in source]

    assert first == ["appendix/notes.txt", "cover.pdf", "page2.png", "page10.png"]
    assert second == ["appendix/notes.txt", "cover.pdf", "page2.png", "page3.png", "page10.png"]


def test_directory_source_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(NotADirectoryError):
        DirectorySource(tmp_path / "missing")


def test_read_input_guesses_declared_type(tmp_path: Path) -> None:
    path = tmp_path / "notes.md"
    path.write_text("# hi", encoding="utf-8")

    item = read_input(path)

    assert item.name == "notes.md"
    assert item.data == b"# hi"
    assert item.size == 4


def test_load_inputs_expands_directories_in_place(sample_tree: Path, tmp_path: Path) -> None:
    cover = tmp_path / "cover.txt"
    cover.write_text("Cover", encoding="utf-8")

    batch = load_inputs([cover, sample_tree])

    assert [item.name for item in batch] == [
        "cover.txt",
        "scans/appendix/notes.txt",
        "scans/cover.pdf",
        "scans/page2.png",
        "scans/page10.png",
    ]


def test_load_inputs_sort_orders_whole_batch(sample_tree: Path, tmp_path: Path) -> None:
    late = tmp_path / "z10.txt"
    early = tmp_path / "z9.txt"
    late.write_text("late", encoding="utf-8")
    early.write_text("early", encoding="utf-8")

    batch = load_inputs([late, sample_tree / "page10.png", early], sort=True)

    assert [item.name for item in batch] == ["page10.png", "z9.txt", "z10.txt"]


def test_partition_supported_keeps_order() -> None:
    files = [InputFile("a.pdf", b""), InputFile("b.exe", b""), InputFile("c.png", b""), InputFile("", b"")]

    supported, rejected = partition_supported(files)

    assert [item.name for item in supported] == ["a.pdf", "c.png"]
    assert [item.name for item in rejected] == ["b.exe", ""]
