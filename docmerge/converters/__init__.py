"""Namespace for the per-category docmerge converters."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_converters() -> None:
    from . import image, pdf, text  # noqa: F401  # register converters


__all__ = ["registry", "load_builtin_converters"]
