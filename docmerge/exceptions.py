"""Custom exception types for :mod:`docmerge`."""

from __future__ import annotations

ENCRYPTED_PDF_MESSAGE = (
    "One or more PDFs are encrypted. Remove password protection and try again."
)


class DocMergeError(Exception):
    """Base exception for all docmerge related errors."""


class EmptyBatchError(DocMergeError):
    """Raised when a merge is requested without any input files."""

    def __init__(self, message: str = "No files uploaded.") -> None:
        super().__init__(message)


class UnsupportedFormatError(DocMergeError):
    """Raised when a file name does not map to a supported category."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Unsupported file type: {filename or '<unnamed>'}")
        self.filename = filename


class ConversionError(DocMergeError):
    """Raised when a single file cannot be converted into pages.

    The merge engine recovers from this error by inserting an error notice in
    place of the file's pages.
    """

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(message)
        self.filename = filename
        self.message = message


class SourceDocumentError(DocMergeError):
    """Raised when a native PDF input cannot be read. Aborts the whole merge."""

    def __init__(self, filename: str, message: str) -> None:
        super().__init__(f"{message}: {filename}" if filename else message)
        self.filename = filename
        self.message = message


class EncryptedPDFError(SourceDocumentError):
    """Raised when a PDF input is password protected."""

    def __init__(self, filename: str) -> None:
        super().__init__(filename, "PDF is encrypted and cannot be opened without a password")


def is_encryption_failure(exc: BaseException) -> bool:
    """Return ``True`` when *exc* reports an encrypted or password protected PDF.

    docmerge errors are classified by type only. The message check applies to
    errors raised by other libraries.
    """

    if isinstance(exc, EncryptedPDFError):
        return True
    if isinstance(exc, DocMergeError):
        return False
    message = str(exc).lower()
    return "encrypt" in message or "password" in message


def describe_failure(exc: BaseException) -> str:
    """Return the user-facing message for a merge that could not complete."""

    if is_encryption_failure(exc):
        return ENCRYPTED_PDF_MESSAGE
    return str(exc) or "Merge failed."


__all__ = [
    "ENCRYPTED_PDF_MESSAGE",
    "DocMergeError",
    "EmptyBatchError",
    "UnsupportedFormatError",
    "ConversionError",
    "SourceDocumentError",
    "EncryptedPDFError",
    "is_encryption_failure",
    "describe_failure",
]
