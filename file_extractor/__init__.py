"""Plain-text extraction from arbitrary files and PDFs."""

from file_extractor.api import extract_text
from file_extractor.config import ExtractorConfig
from file_extractor.detector import (
    TextDetector,
    is_likely_text,
    is_text_by_extension,
    is_text_content_type,
)
from file_extractor.exceptions import (
    ClassificationError,
    FileExtractorError,
    FileReadError,
    PdfOpenError,
    PdfParseError,
)
from file_extractor.extractor import PdfDocument, PdfTextExtractor, PyMuPDFDocument
from file_extractor.handler import FileHandler
from file_extractor.logger import setup_logging
from file_extractor.models import ClassificationVerdict, ExtractedDocument
from file_extractor.sniffer import detect_content_type

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "extract_text",
    # Core classes
    "FileHandler",
    "TextDetector",
    "PdfTextExtractor",
    "PdfDocument",
    "PyMuPDFDocument",
    # Classifiers
    "detect_content_type",
    "is_text_by_extension",
    "is_text_content_type",
    "is_likely_text",
    # Data models
    "ClassificationVerdict",
    "ExtractedDocument",
    # Configuration
    "ExtractorConfig",
    "setup_logging",
    # Exceptions
    "FileExtractorError",
    "ClassificationError",
    "FileReadError",
    "PdfOpenError",
    "PdfParseError",
]
