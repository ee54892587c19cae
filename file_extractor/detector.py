"""Text file detection."""

import os
from functools import cached_property
from typing import Callable, Optional

from file_extractor.config import ExtractorConfig
from file_extractor.logger import Timer, get_logger
from file_extractor.models import ClassificationVerdict
from file_extractor.sniffer import detect_content_type

logger = get_logger(__name__)


TEXT_EXTENSIONS = frozenset(
    {
        # Documents
        ".txt", ".md", ".markdown", ".rst", ".tex", ".bib",
        # Data and config
        ".csv", ".tsv", ".log", ".conf", ".cfg", ".ini",
        ".yaml", ".yml", ".json", ".xml",
        # Web
        ".html", ".htm", ".css", ".js", ".ts",
        # Source code
        ".py", ".go", ".java", ".c", ".cpp", ".h", ".hpp",
        ".sql", ".r", ".rb", ".php", ".pl",
        # Shell scripts
        ".sh", ".bash", ".zsh", ".fish", ".ps1",
        # README, LICENSE, Makefile and friends
        "",
    }
)

TEXT_APPLICATION_TYPES = frozenset(
    {
        "application/json",
        "application/xml",
        "application/javascript",
        "application/x-sh",
        "application/x-python",
        "application/x-perl",
        "application/x-ruby",
        "application/x-php",
        "application/sql",
        "application/yaml",
        "application/x-yaml",
    }
)

PRINTABLE_WHITESPACE = frozenset(b"\t\n\r")


def file_extension(path: str | os.PathLike) -> str:
    """Lower-cased suffix of the base name from its last dot, dot included.

    Dot-files keep their whole name as the extension (".bashrc").
    """
    name = os.path.basename(os.fspath(path))
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:].lower()


def is_text_by_extension(path: str | os.PathLike) -> bool:
    return file_extension(path) in TEXT_EXTENSIONS


def is_text_content_type(mime_type: str) -> bool:
    """Whether a MIME type (parameters allowed) denotes text content."""
    main_type = mime_type.split(";", 1)[0].strip().lower()
    return main_type.startswith("text/") or main_type in TEXT_APPLICATION_TYPES


def is_likely_text(sample: bytes, threshold: float = 0.85) -> bool:
    """Decide from a raw byte sample whether it is probably text.

    The sample must be valid UTF-8 and free of NUL bytes, and more than
    ``threshold`` of its bytes must be printable ASCII or tab/newline/CR.
    An empty sample counts as text.
    """
    if not sample:
        return True

    try:
        bytes(sample).decode("utf-8")
    except UnicodeDecodeError:
        return False

    if 0 in sample:
        return False

    printable = sum(1 for b in sample if 32 <= b <= 126 or b in PRINTABLE_WHITESPACE)
    return printable / len(sample) > threshold


class _FileProbe:
    """Lazily read facts about one file, shared by the detection stages."""

    def __init__(self, path: str | os.PathLike, config: ExtractorConfig):
        self.path = path
        self.config = config

    @cached_property
    def sample(self) -> bytes:
        with open(self.path, "rb") as f:
            return f.read(self.config.sample_size)

    @cached_property
    def content_type(self) -> str:
        return detect_content_type(self.sample)


def _by_extension(probe: _FileProbe) -> Optional[str]:
    if is_text_by_extension(probe.path):
        return "text/plain"
    return None


def _by_content_type(probe: _FileProbe) -> Optional[str]:
    if is_text_content_type(probe.content_type):
        return probe.content_type
    return None


def _by_byte_heuristic(probe: _FileProbe) -> Optional[str]:
    if probe.sample and is_likely_text(
        probe.sample, probe.config.printable_ratio_threshold
    ):
        return "text/plain"
    return None


# Cheapest and most precise first.
DETECTION_STAGES: tuple[tuple[str, Callable[[_FileProbe], Optional[str]]], ...] = (
    ("extension", _by_extension),
    ("content_type", _by_content_type),
    ("byte_heuristic", _by_byte_heuristic),
)


class TextDetector:
    """Decides whether a file holds text using a chain of detection stages."""

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()

    def classify(self, path: str | os.PathLike) -> ClassificationVerdict:
        """Classify a file as text or not.

        Stages run in order and stop at the first positive answer. A negative
        verdict carries the sniffed content type.

        Raises:
            OSError: If the file sample cannot be read
        """
        probe = _FileProbe(path, self.config)

        with Timer("detection") as timer:
            for stage_name, stage in DETECTION_STAGES:
                mime_hint = stage(probe)
                if mime_hint:
                    logger.debug(
                        "File detected as text",
                        extra_data={
                            "file_path": os.fspath(path),
                            "stage": stage_name,
                            "mime_hint": mime_hint,
                            "detection_time_ms": timer.get_elapsed_ms(),
                        },
                    )
                    return ClassificationVerdict(is_text=True, mime_hint=mime_hint)

        logger.debug(
            "File detected as non-text",
            extra_data={
                "file_path": os.fspath(path),
                "sniffed_mime_type": probe.content_type,
                "sample_size_bytes": len(probe.sample),
                "detection_time_ms": timer.get_elapsed_ms(),
            },
        )
        return ClassificationVerdict(is_text=False, mime_hint=probe.content_type)
