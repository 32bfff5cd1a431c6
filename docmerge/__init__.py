"""docmerge - merge PDFs, images and office documents into a single PDF.

Quick Start:
    >>> from docmerge import InputFile, merge_files
    >>> pdf_bytes = merge_files([InputFile("notes.txt", b"hello")], quality="medium")

Main entry points:
    - merge_files: ordered inputs in, PDF bytes out
    - merge_documents / DocumentMerger: same, with per-file outcomes
    - classify, natural_compare: the ordering and classification helpers

For CLI usage, use the ``docmerge`` command after installation.
"""

from __future__ import annotations

from .classifier import TypeClassifier, classify
from .config import (
    DEFAULT_CATEGORY_TABLE,
    DEFAULT_LAYOUT,
    QUALITY_TIERS,
    CategoryTable,
    MergeOptions,
    PageLayout,
    QualityTier,
    resolve_quality_tier,
)
from .exceptions import (
    ENCRYPTED_PDF_MESSAGE,
    ConversionError,
    DocMergeError,
    EmptyBatchError,
    EncryptedPDFError,
    SourceDocumentError,
    UnsupportedFormatError,
    describe_failure,
)
from .extractors import extract_text
from .images import compute_placement, normalize_image
from .merger import DocumentMerger, merge_documents, merge_files
from .ordering import natural_compare, natural_key, natural_sorted
from .paginator import paginate, wrap_text
from .sources import DirectorySource, load_inputs, partition_supported
from .types import FileCategory, FileOutcome, InputFile, MergeResult, NormalizedImage, TextPage

__version__ = "1.0.0"

__all__ = [
    "TypeClassifier",
    "classify",
    "CategoryTable",
    "DEFAULT_CATEGORY_TABLE",
    "QualityTier",
    "QUALITY_TIERS",
    "resolve_quality_tier",
    "PageLayout",
    "DEFAULT_LAYOUT",
    "MergeOptions",
    "ENCRYPTED_PDF_MESSAGE",
    "DocMergeError",
    "EmptyBatchError",
    "UnsupportedFormatError",
    "ConversionError",
    "SourceDocumentError",
    "EncryptedPDFError",
    "describe_failure",
    "extract_text",
    "normalize_image",
    "compute_placement",
    "DocumentMerger",
    "merge_documents",
    "merge_files",
    "natural_compare",
    "natural_key",
    "natural_sorted",
    "paginate",
    "wrap_text",
    "DirectorySource",
    "load_inputs",
    "partition_supported",
    "FileCategory",
    "FileOutcome",
    "InputFile",
    "MergeResult",
    "NormalizedImage",
    "TextPage",
    "__version__",
]
