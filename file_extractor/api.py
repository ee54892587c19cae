"""High-level API for text extraction."""

import os
from typing import Optional

from file_extractor.config import ExtractorConfig
from file_extractor.handler import FileHandler
from file_extractor.models import ExtractedDocument


def extract_text(
    file_path: str | os.PathLike, config: Optional[ExtractorConfig] = None
) -> ExtractedDocument:
    """Extract text content from a file if it holds any.

    PDFs go through page-text extraction; every other file is first
    classified as text or not and, if text, returned whole when it is valid
    UTF-8.

    Args:
        file_path: Path to the file
        config: Extraction settings (optional, uses defaults if not provided)

    Returns:
        ExtractedDocument. ``success`` is False (with empty ``text``) when the
        file holds no extractable text; this is not an error.

    Raises:
        ClassificationError: If the file cannot be read for type detection
        FileReadError: If a text file cannot be read
        PdfOpenError: If a PDF file cannot be opened or stat'ed

    Examples:
        >>> result = extract_text("notes.md")
        >>> if result.success:
        ...     print(result.text)

        >>> # Read longer PDFs
        >>> result = extract_text("book.pdf", ExtractorConfig(max_pdf_pages=1000))
    """
    return FileHandler(config=config).extract(file_path)
