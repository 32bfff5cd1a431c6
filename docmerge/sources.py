"""Building ordered batches of :class:`InputFile` objects.

Directories are read lazily: a :class:`DirectorySource` walks its root each
time it is iterated and yields supported files in natural order, named by
their path relative to the root.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple

from .classifier import DEFAULT_CLASSIFIER, TypeClassifier
from .ordering import natural_sorted
from .types import InputFile
from .utils import PathLike, ensure_path

_LOGGER = logging.getLogger("docmerge.sources")


def read_input(path: PathLike, name: str | None = None) -> InputFile:
    """Read *path* into an :class:`InputFile` named *name* (the file name by default)."""

    file_path = ensure_path(path)
    declared_type, _ = mimetypes.guess_type(file_path.name)
    return InputFile(name=name or file_path.name, data=file_path.read_bytes(), declared_type=declared_type)


class DirectorySource:
    """Lazy, restartable sequence of the supported files below *root*."""

    def __init__(self, root: PathLike, classifier: TypeClassifier = DEFAULT_CLASSIFIER) -> None:
        self.root = ensure_path(root)
        if not self.root.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.root}")
        self.classifier = classifier

    def relative_names(self) -> List[str]:
        names = []
        for path in self.root.rglob("*"):
            if not path.is_file():
                continue
            relative = path.relative_to(self.root).as_posix()
            if self.classifier.is_supported(relative):
                names.append(relative)
            else:
                _LOGGER.debug("Ignoring unsupported file %s", relative)
        return natural_sorted(names)

    def __iter__(self) -> Iterator[InputFile]:
        for relative in self.relative_names():
            yield read_input(self.root / relative, name=relative)


def partition_supported(
    files: Iterable[InputFile],
    classifier: TypeClassifier = DEFAULT_CLASSIFIER,
) -> Tuple[List[InputFile], List[InputFile]]:
    """Split *files* into supported and unrecognized files, keeping order."""

    supported: List[InputFile] = []
    rejected: List[InputFile] = []
    for item in files:
        if classifier.is_supported(item.name):
            supported.append(item)
        else:
            _LOGGER.warning("Dropping unsupported file %s", item.name or "<unnamed>")
            rejected.append(item)
    return supported, rejected


def load_inputs(
    paths: Sequence[PathLike],
    classifier: TypeClassifier = DEFAULT_CLASSIFIER,
    *,
    sort: bool = False,
) -> List[InputFile]:
    """Load files and directories into one batch.

    Files keep the order given; each directory expands in place to its
    supported files, named ``<directory>/<relative path>``. With ``sort`` the
    whole batch is ordered naturally by name. Unsupported files are dropped.
    """

    batch: List[InputFile] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            source = DirectorySource(path, classifier)
            prefix = source.root.name
            batch.extend(
                InputFile(f"{prefix}/{item.name}", item.data, item.declared_type) for item in source
            )
        else:
            batch.append(read_input(path))

    batch, _ = partition_supported(batch, classifier)
    if sort:
        batch = natural_sorted(batch, key=lambda item: item.name)
    return batch


__all__ = ["read_input", "DirectorySource", "partition_supported", "load_inputs"]
