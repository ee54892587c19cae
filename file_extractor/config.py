"""Configuration classes for file extractor."""

from dataclasses import dataclass


@dataclass
class ExtractorConfig:
    """Configuration for text detection and extraction.

    Examples:
        >>> # Default configuration
        >>> config = ExtractorConfig()

        >>> # Allow longer PDFs at the cost of latency
        >>> config = ExtractorConfig(max_pdf_pages=500)
    """

    sample_size: int = 512
    """Number of leading bytes read for content sniffing and the byte heuristic."""

    printable_ratio_threshold: float = 0.85
    """Share of printable bytes a sample must exceed to count as text.

    Lower values tolerate more control bytes (e.g. ANSI colour codes in logs),
    higher values reject more borderline files.
    """

    max_pdf_pages: int = 100
    """Maximum number of PDF pages read. Later pages are ignored."""
