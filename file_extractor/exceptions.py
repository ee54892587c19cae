"""Custom exceptions for file extractor."""


class FileExtractorError(Exception):
    """Base exception for file extractor errors."""

    pass


class ClassificationError(FileExtractorError):
    """Raised when a file cannot be read for type detection."""

    pass


class FileReadError(FileExtractorError):
    """Raised when a file classified as text cannot be read."""

    pass


class PdfOpenError(FileExtractorError):
    """Raised when a PDF file cannot be opened or stat'ed."""

    pass


class PdfParseError(FileExtractorError):
    """Raised by PDF openers when the input is not a readable PDF."""

    pass
