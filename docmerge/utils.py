"""Utilities shared by docmerge modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def ensure_path(path: PathLike) -> Path:
    """Return an absolute :class:`~pathlib.Path` for *path*."""

    return Path(path).expanduser().resolve()


def decode_text(data: bytes) -> str:
    """Decode *data* as UTF-8, dropping a BOM and replacing invalid bytes."""

    return data.decode("utf-8-sig", errors="replace")


def display_name(name: str) -> str:
    """Return the last path component of an upload or relative file name."""

    candidate = name.replace("\\", "/").rsplit("/", 1)[-1]
    return candidate or name


def sizeof_fmt(num_bytes: int) -> str:
    """Return *num_bytes* as a short size such as ``812 B`` or ``1.4 MB``."""

    if num_bytes < 1024:
        return f"{num_bytes} B"
    size = num_bytes / 1024
    for unit in ("KB", "MB"):
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


__all__ = ["PathLike", "get_logger", "ensure_path", "decode_text", "display_name", "sizeof_fmt"]
