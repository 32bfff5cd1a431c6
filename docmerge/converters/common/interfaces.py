"""Core interfaces and context objects shared by docmerge converters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from pypdf import PageObject

from ...config import DEFAULT_LAYOUT, DEFAULT_QUALITY, PageLayout, QualityTier
from ...types import FileCategory, InputFile


@dataclass
class ConversionContext:
    """Holds request-scoped state shared by the converters of one merge."""

    quality: QualityTier = DEFAULT_QUALITY
    layout: PageLayout = DEFAULT_LAYOUT


class BaseConverter:
    """Base class for converters turning one input file into PDF pages."""

    categories: tuple[FileCategory, ...] = ()

    def __init__(self, context: ConversionContext) -> None:
        self.context = context

    def convert(self, item: InputFile, category: FileCategory) -> List[PageObject]:  # pragma: no cover
        raise NotImplementedError

