"""File text extraction orchestration."""

import os
from typing import Optional

from file_extractor.config import ExtractorConfig
from file_extractor.detector import TextDetector, file_extension
from file_extractor.exceptions import ClassificationError, FileReadError
from file_extractor.extractor import PdfTextExtractor
from file_extractor.logger import Timer, get_logger
from file_extractor.models import ExtractedDocument

logger = get_logger(__name__)


class FileHandler:
    def __init__(
        self,
        detector: Optional[TextDetector] = None,
        pdf_extractor: Optional[PdfTextExtractor] = None,
        config: Optional[ExtractorConfig] = None,
    ) -> None:
        """Initialize file handler.

        Args:
            detector: Text detector. If None, creates default with config.
            pdf_extractor: PDF extractor. If None, creates default with config.
            config: Extraction settings. Only used for components not supplied.
        """
        config = config or ExtractorConfig()
        self.detector = detector or TextDetector(config=config)
        self.pdf_extractor = pdf_extractor or PdfTextExtractor(config=config)

    def extract(self, path: str | os.PathLike) -> ExtractedDocument:
        """Extract text from a file.

        Args:
            path: Path to the file

        Returns:
            ExtractedDocument; ``success`` is False for files that are not text,
            not valid UTF-8, or PDFs without extractable text

        Raises:
            ClassificationError: If the file cannot be sampled for detection
            FileReadError: If a file detected as text cannot be read
            PdfOpenError: If a PDF file cannot be opened or stat'ed
        """
        file_path = os.fspath(path)

        if file_extension(file_path) == ".pdf":
            return self.pdf_extractor.extract(file_path)

        try:
            verdict = self.detector.classify(file_path)
        except OSError as exc:
            logger.error(
                "Failed to analyze file type",
                extra_data={"file_path": file_path, "error": str(exc)},
            )
            raise ClassificationError(f"failed to analyze file type: {exc}") from exc

        if not verdict.is_text:
            return ExtractedDocument.failed(mime_type=verdict.mime_hint)

        with Timer("read") as timer:
            try:
                with open(file_path, "rb") as f:
                    data = f.read()
            except OSError as exc:
                logger.error(
                    "Failed to read file",
                    extra_data={"file_path": file_path, "error": str(exc)},
                )
                raise FileReadError(f"failed to read file {file_path}: {exc}") from exc

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            logger.info(
                "File content is not valid UTF-8",
                extra_data={
                    "file_path": file_path,
                    "mime_hint": verdict.mime_hint,
                    "file_size_bytes": len(data),
                },
            )
            return ExtractedDocument.failed(mime_type=verdict.mime_hint)

        logger.info(
            "Extracted text from file",
            extra_data={
                "file_path": file_path,
                "mime_hint": verdict.mime_hint,
                "character_count": len(text),
                "read_time_ms": timer.get_elapsed_ms(),
            },
        )
        return ExtractedDocument.extracted(text, mime_type=verdict.mime_hint)
