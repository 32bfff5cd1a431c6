"""Converter registry used by the merge engine to dispatch by category."""

from __future__ import annotations

from typing import Dict, Iterable

from ...types import FileCategory
from .interfaces import BaseConverter, ConversionContext


class ConverterRegistry:
    """Registry mapping file categories to converter classes."""

    def __init__(self) -> None:
        self._converters: Dict[FileCategory, type[BaseConverter]] = {}

    def register(self, category: FileCategory, converter_class: type[BaseConverter]) -> None:
        if category is FileCategory.UNRECOGNIZED:
            raise ValueError("Converters cannot be registered for unrecognized files")
        if category in self._converters:
            raise ValueError(f"Converter for '{category.value}' is already registered")
        self._converters[category] = converter_class

    def create(self, category: FileCategory, context: ConversionContext) -> BaseConverter:
        try:
            converter_class = self._converters[category]
        except KeyError as exc:
            raise KeyError(f"No converter registered for '{category.value}'") from exc
        return converter_class(context)

    def categories(self) -> Iterable[FileCategory]:
        return sorted(self._converters, key=lambda category: category.value)

    def get(self, category: FileCategory) -> type[BaseConverter] | None:
        return self._converters.get(category)


registry = ConverterRegistry()


def register_converter(*categories: FileCategory):
    def decorator(cls: type[BaseConverter]) -> type[BaseConverter]:
        cls.categories = tuple(categories)
        for category in categories:
            registry.register(category, cls)
        return cls

    return decorator


__all__ = [
    "ConverterRegistry",
    "registry",
    "register_converter",
    "ConversionContext",
    "BaseConverter",
]
