"""PDF page-text extraction backed by PyMuPDF."""

import os
from typing import BinaryIO, Callable, Optional, Protocol

import fitz  # PyMuPDF

from file_extractor.config import ExtractorConfig
from file_extractor.exceptions import PdfOpenError, PdfParseError
from file_extractor.logger import Timer, get_logger
from file_extractor.models import ExtractedDocument

logger = get_logger(__name__)

PDF_MIME_TYPE = "application/pdf"


class PdfDocument(Protocol):
    """The slice of a PDF parser the extractor relies on."""

    @property
    def page_count(self) -> int: ...

    def page_text(self, number: int) -> Optional[str]:
        """Plain text of a 1-based page, or None if the page is absent.

        Raises:
            PdfParseError: If the page exists but its text cannot be extracted
        """
        ...

    def close(self) -> None: ...


PdfOpener = Callable[[BinaryIO, int], PdfDocument]


class PyMuPDFDocument:
    """PdfDocument implementation over a ``fitz.Document``."""

    def __init__(self, document: fitz.Document):
        self._document = document

    @classmethod
    def open(cls, stream: BinaryIO, size: int) -> "PyMuPDFDocument":
        """Parse ``size`` bytes of ``stream`` as a PDF.

        Raises:
            PdfParseError: If the bytes are not a readable PDF
        """
        data = stream.read(size)
        try:
            document = fitz.open(stream=data, filetype="pdf")
        except (RuntimeError, ValueError) as exc:
            # fitz.FileDataError and EmptyFileError derive from RuntimeError
            raise PdfParseError(f"failed to parse PDF: {exc}") from exc
        return cls(document)

    @property
    def page_count(self) -> int:
        return self._document.page_count

    def page_text(self, number: int) -> Optional[str]:
        if not 1 <= number <= self._document.page_count:
            return None
        try:
            page = self._document.load_page(number - 1)
            return page.get_text("text")
        except (RuntimeError, ValueError) as exc:
            # Encrypted documents refuse page access with ValueError
            raise PdfParseError(f"failed to extract page {number}: {exc}") from exc

    def close(self) -> None:
        self._document.close()


class PdfTextExtractor:
    """Extracts embedded text from the leading pages of a PDF.

    Unparseable documents and pages are treated as "no text" rather than
    errors; only filesystem failures raise.
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        opener: Optional[PdfOpener] = None,
    ):
        self.config = config or ExtractorConfig()
        self.opener = opener or PyMuPDFDocument.open

    def extract(self, path: str | os.PathLike) -> ExtractedDocument:
        """Extract text from a PDF file.

        Args:
            path: Path to the PDF file

        Returns:
            ExtractedDocument, unsuccessful when the PDF holds no readable text

        Raises:
            PdfOpenError: If the file cannot be opened or stat'ed
        """
        file_path = os.fspath(path)

        try:
            f = open(path, "rb")
        except OSError as exc:
            logger.error(
                "Failed to open PDF file",
                extra_data={"file_path": file_path, "error": str(exc)},
            )
            raise PdfOpenError(f"failed to open PDF file: {exc}") from exc

        with f:
            try:
                file_size = os.fstat(f.fileno()).st_size
            except OSError as exc:
                logger.error(
                    "Failed to stat PDF file",
                    extra_data={"file_path": file_path, "error": str(exc)},
                )
                raise PdfOpenError(f"failed to get PDF file info: {exc}") from exc

            try:
                document = self.opener(f, file_size)
            except PdfParseError as exc:
                logger.warning(
                    "PDF could not be parsed, treating as non-text",
                    extra_data={
                        "file_path": file_path,
                        "file_size_bytes": file_size,
                        "error": str(exc),
                    },
                )
                return ExtractedDocument.failed(mime_type=PDF_MIME_TYPE)
            except OSError as exc:
                logger.error(
                    "Failed to read PDF file",
                    extra_data={"file_path": file_path, "error": str(exc)},
                )
                raise PdfOpenError(f"failed to open PDF file: {exc}") from exc

        try:
            with Timer("pdf_extraction") as timer:
                page_count = document.page_count
                text = self._read_pages(document, file_path)
        finally:
            document.close()

        truncated = page_count > self.config.max_pdf_pages

        if not text.strip():
            logger.info(
                "No extractable text in PDF",
                extra_data={
                    "file_path": file_path,
                    "page_count": page_count,
                    "extraction_time_ms": timer.get_elapsed_ms(),
                },
            )
            return ExtractedDocument.failed(mime_type=PDF_MIME_TYPE)

        logger.info(
            "Extracted text from PDF",
            extra_data={
                "file_path": file_path,
                "page_count": page_count,
                "pages_read": min(page_count, self.config.max_pdf_pages),
                "character_count": len(text),
                "extraction_time_ms": timer.get_elapsed_ms(),
            },
        )
        return ExtractedDocument.extracted(
            text, mime_type=PDF_MIME_TYPE, truncated=truncated
        )

    def _read_pages(self, document: PdfDocument, file_path: str) -> str:
        """Join the text of pages 1..max_pdf_pages with newlines."""
        last_page = min(document.page_count, self.config.max_pdf_pages)
        page_texts = []

        for number in range(1, last_page + 1):
            try:
                page_text = document.page_text(number)
            except PdfParseError as exc:
                logger.debug(
                    "Skipping unreadable PDF page",
                    extra_data={
                        "file_path": file_path,
                        "page_number": number,
                        "error": str(exc),
                    },
                )
                continue
            if page_text is None:
                continue
            page_texts.append(page_text)

        return "\n".join(page_texts)
