"""Data models for file extractor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationVerdict:
    """Outcome of text detection for a single file."""

    is_text: bool
    mime_hint: str  # sniffed type on negative verdicts, for diagnostics


@dataclass(frozen=True)
class ExtractedDocument:
    """Result of text extraction.

    ``text`` is always empty when ``success`` is false.
    """

    success: bool
    text: str = ""
    mime_type: str = ""
    truncated: bool = False  # PDF had more pages than were read

    def __post_init__(self):
        if not self.success and self.text:
            raise ValueError("failed extraction cannot carry text")

    @classmethod
    def failed(cls, mime_type: str = "") -> "ExtractedDocument":
        return cls(success=False, text="", mime_type=mime_type)

    @classmethod
    def extracted(
        cls, text: str, mime_type: str = "", truncated: bool = False
    ) -> "ExtractedDocument":
        return cls(success=True, text=text, mime_type=mime_type, truncated=truncated)

    @property
    def character_count(self) -> int:
        return len(self.text)
