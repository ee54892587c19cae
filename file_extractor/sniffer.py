"""Content-type sniffing from leading file bytes.

Follows the browser MIME sniffing algorithm (WHATWG "MIME Sniffing" standard):
a fixed, ordered signature table is matched against at most the first
``SNIFF_LENGTH`` bytes and the first hit wins.
"""

from dataclasses import dataclass
from typing import Callable, Optional

SNIFF_LENGTH = 512

DEFAULT_CONTENT_TYPE = "application/octet-stream"
PLAIN_TEXT_UTF8 = "text/plain; charset=utf-8"

_WHITESPACE = frozenset(b"\t\n\x0c\r ")


def _first_non_ws(data: bytes) -> int:
    for i, b in enumerate(data):
        if b not in _WHITESPACE:
            return i
    return len(data)


def _is_binary_byte(b: int) -> bool:
    """Control bytes that never appear in text (ESC, FF, CR, LF and TAB excluded)."""
    return b <= 0x08 or b == 0x0B or 0x0E <= b <= 0x1A or 0x1C <= b <= 0x1F


@dataclass(frozen=True)
class ExactSignature:
    prefix: bytes
    content_type: str

    def __call__(self, data: bytes) -> Optional[str]:
        if data.startswith(self.prefix):
            return self.content_type
        return None


@dataclass(frozen=True)
class MaskedSignature:
    mask: bytes
    pattern: bytes
    content_type: str
    skip_ws: bool = False

    def __call__(self, data: bytes) -> Optional[str]:
        if self.skip_ws:
            data = data[_first_non_ws(data):]
        if len(data) < len(self.pattern):
            return None
        for db, mb, pb in zip(data, self.mask, self.pattern):
            if db & mb != pb:
                return None
        return self.content_type


@dataclass(frozen=True)
class HtmlSignature:
    """Case-insensitive tag name that must be followed by a space or ``>``."""

    tag: bytes

    def __call__(self, data: bytes) -> Optional[str]:
        data = data[_first_non_ws(data):]
        if len(data) < len(self.tag) + 1:
            return None
        for db, sb in zip(data, self.tag):
            if ord("A") <= sb <= ord("Z"):
                db &= 0xDF
            if db != sb:
                return None
        if data[len(self.tag)] not in b" >":
            return None
        return "text/html; charset=utf-8"


def _match_mp4(data: bytes) -> Optional[str]:
    """ISO base media file with an ``mp4`` brand in its ``ftyp`` box."""
    if len(data) < 12:
        return None
    box_size = int.from_bytes(data[:4], "big")
    if len(data) < box_size or box_size % 4 != 0:
        return None
    if data[4:8] != b"ftyp":
        return None
    for start in range(8, box_size, 4):
        if start == 12:
            # Bytes 12-15 hold the minor version, not a brand.
            continue
        if data[start:start + 3] == b"mp4":
            return "video/mp4"
    return None


def _match_text(data: bytes) -> Optional[str]:
    data = data[_first_non_ws(data):]
    if any(_is_binary_byte(b) for b in data):
        return None
    return PLAIN_TEXT_UTF8


_RIFF_MASK = b"\xff\xff\xff\xff\x00\x00\x00\x00\xff\xff\xff\xff"

SIGNATURES: tuple[Callable[[bytes], Optional[str]], ...] = (
    HtmlSignature(b"<!DOCTYPE HTML"),
    HtmlSignature(b"<HTML"),
    HtmlSignature(b"<HEAD"),
    HtmlSignature(b"<SCRIPT"),
    HtmlSignature(b"<IFRAME"),
    HtmlSignature(b"<H1"),
    HtmlSignature(b"<DIV"),
    HtmlSignature(b"<FONT"),
    HtmlSignature(b"<TABLE"),
    HtmlSignature(b"<A"),
    HtmlSignature(b"<STYLE"),
    HtmlSignature(b"<TITLE"),
    HtmlSignature(b"<B"),
    HtmlSignature(b"<BODY"),
    HtmlSignature(b"<BR"),
    HtmlSignature(b"<P"),
    HtmlSignature(b"<!--"),
    MaskedSignature(
        mask=b"\xff\xff\xff\xff\xff",
        pattern=b"<?xml",
        content_type="text/xml; charset=utf-8",
        skip_ws=True,
    ),
    ExactSignature(b"%PDF-", "application/pdf"),
    ExactSignature(b"%!PS-Adobe-", "application/postscript"),
    # Byte order marks
    MaskedSignature(
        mask=b"\xff\xff\x00\x00",
        pattern=b"\xfe\xff\x00\x00",
        content_type="text/plain; charset=utf-16be",
    ),
    MaskedSignature(
        mask=b"\xff\xff\x00\x00",
        pattern=b"\xff\xfe\x00\x00",
        content_type="text/plain; charset=utf-16le",
    ),
    MaskedSignature(
        mask=b"\xff\xff\xff\x00",
        pattern=b"\xef\xbb\xbf\x00",
        content_type=PLAIN_TEXT_UTF8,
    ),
    # Images
    ExactSignature(b"\x00\x00\x01\x00", "image/x-icon"),
    ExactSignature(b"\x00\x00\x02\x00", "image/x-icon"),
    ExactSignature(b"BM", "image/bmp"),
    ExactSignature(b"GIF87a", "image/gif"),
    ExactSignature(b"GIF89a", "image/gif"),
    MaskedSignature(
        mask=_RIFF_MASK + b"\xff\xff",
        pattern=b"RIFF\x00\x00\x00\x00WEBPVP",
        content_type="image/webp",
    ),
    ExactSignature(b"\x89PNG\r\n\x1a\n", "image/png"),
    ExactSignature(b"\xff\xd8\xff", "image/jpeg"),
    # Audio and video
    MaskedSignature(
        mask=_RIFF_MASK,
        pattern=b"FORM\x00\x00\x00\x00AIFF",
        content_type="audio/aiff",
    ),
    ExactSignature(b"ID3", "audio/mpeg"),
    ExactSignature(b"OggS\x00", "application/ogg"),
    ExactSignature(b"MThd\x00\x00\x00\x06", "audio/midi"),
    MaskedSignature(
        mask=_RIFF_MASK,
        pattern=b"RIFF\x00\x00\x00\x00AVI ",
        content_type="video/avi",
    ),
    MaskedSignature(
        mask=_RIFF_MASK,
        pattern=b"RIFF\x00\x00\x00\x00WAVE",
        content_type="audio/wave",
    ),
    _match_mp4,
    ExactSignature(b"\x1a\x45\xdf\xa3", "video/webm"),
    # Fonts
    MaskedSignature(
        mask=b"\x00" * 34 + b"\xff\xff",
        pattern=b"\x00" * 34 + b"LP",
        content_type="application/vnd.ms-fontobject",
    ),
    ExactSignature(b"\x00\x01\x00\x00", "font/ttf"),
    ExactSignature(b"OTTO", "font/otf"),
    ExactSignature(b"ttcf", "font/collection"),
    ExactSignature(b"wOFF", "font/woff"),
    ExactSignature(b"wOF2", "font/woff2"),
    # Archives
    ExactSignature(b"\x1f\x8b\x08", "application/x-gzip"),
    ExactSignature(b"PK\x03\x04", "application/zip"),
    ExactSignature(b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    ExactSignature(b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    ExactSignature(b"\x00asm", "application/wasm"),
    _match_text,
)


def detect_content_type(sample: bytes) -> str:
    """Return the canonical MIME type for a leading byte sample.

    Only the first ``SNIFF_LENGTH`` bytes are inspected. Falls back to
    ``application/octet-stream`` when no signature matches.
    """
    data = bytes(sample[:SNIFF_LENGTH])
    for match in SIGNATURES:
        content_type = match(data)
        if content_type:
            return content_type
    return DEFAULT_CONTENT_TYPE
