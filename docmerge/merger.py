"""Page assembly: merge an ordered batch of files into one PDF."""

from __future__ import annotations

import io
from typing import Iterable, List, Optional

from pypdf import PageObject, PdfWriter

from .classifier import DEFAULT_CLASSIFIER, TypeClassifier
from .config import MergeOptions, QualityTier, resolve_quality_tier
from .converters import load_builtin_converters, registry
from .converters.common.interfaces import ConversionContext
from .exceptions import (
    ConversionError,
    DocMergeError,
    EmptyBatchError,
    SourceDocumentError,
    UnsupportedFormatError,
)
from .rendering import read_pages, render_error_notice
from .types import FileCategory, FileOutcome, InputFile, MergeResult
from .utils import get_logger

LOGGER = get_logger("docmerge.merge")

PRODUCER = "docmerge"


class DocumentMerger:
    """Sequentially convert files and append their pages to one output PDF.

    Per-file conversion failures are replaced by an error notice page so the
    rest of the batch keeps its positions. Unreadable or encrypted source
    PDFs raise :class:`~docmerge.exceptions.SourceDocumentError` and abort
    the merge.
    """

    def __init__(
        self,
        classifier: Optional[TypeClassifier] = None,
        options: Optional[MergeOptions] = None,
    ) -> None:
        load_builtin_converters()
        self.classifier = classifier or DEFAULT_CLASSIFIER
        self.options = options or MergeOptions()

    def _convert(self, item: InputFile, category: FileCategory, context: ConversionContext) -> List[PageObject]:
        if registry.get(category) is None:
            raise UnsupportedFormatError(item.name)
        converter = registry.create(category, context)
        return converter.convert(item, category)

    def _error_pages(self, item: InputFile, error: ConversionError) -> List[PageObject]:
        return read_pages(render_error_notice(item.name, error.message, self.options.layout))

    def merge(self, files: Iterable[InputFile]) -> MergeResult:
        """Merge *files* in the given order and return the result.

        Raises:
            EmptyBatchError: If *files* is empty.
            SourceDocumentError: If a PDF input cannot be read.
            DocMergeError: If the merged document cannot be written.
        """

        batch = list(files)
        if not batch:
            raise EmptyBatchError()

        options = self.options
        context = ConversionContext(quality=options.quality, layout=options.layout)
        writer = PdfWriter()
        outcomes: List[FileOutcome] = []
        bookmark_targets: list[tuple[str, int]] = []

        for item in batch:
            category = self.classifier.classify(item.name)
            LOGGER.debug("Processing %s as %s", item.name, category.value)

            if category is FileCategory.UNRECOGNIZED:
                LOGGER.warning("Skipping %s: unsupported file type", item.name)
                outcomes.append(FileOutcome(item.name, category, "skipped"))
                continue

            outcome = FileOutcome(item.name, category, "converted")
            try:
                pages = self._convert(item, category, context)
            except SourceDocumentError:
                raise
            except Exception as exc:
                if isinstance(exc, ConversionError):
                    error = exc
                else:
                    error = ConversionError(item.name, str(exc) or type(exc).__name__)
                LOGGER.warning("Error processing %s: %s", item.name, error.message)
                outcome.status = "failed"
                outcome.error = error.message
                pages = self._error_pages(item, error)

            start_page_index = len(writer.pages)
            for page in pages:
                try:
                    writer.add_page(page)
                except Exception as exc:  # pypdf resolves source objects lazily
                    if category is FileCategory.PDF:
                        raise SourceDocumentError(item.name, f"Unable to copy PDF page ({exc})") from exc
                    raise DocMergeError(f"Failed to add page from {item.name}: {exc}") from exc
            outcome.pages = len(writer.pages) - start_page_index
            outcomes.append(outcome)

            if options.bookmarks and outcome.pages:
                bookmark_targets.append((item.name, start_page_index))

        metadata = {"/Producer": PRODUCER}
        if options.title:
            metadata["/Title"] = options.title
        writer.add_metadata(metadata)

        if bookmark_targets:
            LOGGER.debug("Adding %d bookmark(s) to merged PDF", len(bookmark_targets))
            for title, page_index in bookmark_targets:
                writer.add_outline_item(title, writer.pages[page_index])

        buffer = io.BytesIO()
        try:
            writer.write(buffer)
        except Exception as exc:  # pragma: no cover - pypdf write errors vary
            LOGGER.error("Failed to write merged PDF: %s", exc)
            raise DocMergeError(f"Failed to write merged PDF: {exc}") from exc

        result = MergeResult(data=buffer.getvalue(), page_count=len(writer.pages), outcomes=outcomes)
        LOGGER.info("Merged %d file(s) into %d page(s)", len(batch), result.page_count)
        return result


def merge_documents(
    files: Iterable[InputFile],
    *,
    quality: QualityTier | str | None = None,
    bookmarks: bool = False,
    title: str | None = None,
    classifier: Optional[TypeClassifier] = None,
) -> MergeResult:
    """Merge *files* and return a :class:`MergeResult` with per-file outcomes."""

    options = MergeOptions(quality=resolve_quality_tier(quality), bookmarks=bookmarks, title=title)
    return DocumentMerger(classifier, options).merge(files)


def merge_files(files: Iterable[InputFile], quality: QualityTier | str | None = None) -> bytes:
    """Merge *files* in order and return the PDF bytes."""

    return merge_documents(files, quality=quality).data


__all__ = ["DocumentMerger", "merge_documents", "merge_files"]
