from pathlib import Path

import fitz
import pytest


@pytest.fixture
def write_file(tmp_path):
    """Write bytes or text into ``tmp_path`` and return the path."""

    def _write(name: str, content: bytes | str) -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8", newline="")
        else:
            path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def make_pdf(tmp_path):
    """Build a PDF with one page per given string using PyMuPDF."""

    def _make(pages: list[str], name: str = "doc.pdf") -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text)
        doc.save(str(path))
        doc.close()
        return path

    return _make


class FakePdfDocument:
    """In-memory PdfDocument with scripted page results."""

    def __init__(self, pages):
        # Each item is page text, None (absent page) or an exception to raise
        self.pages = list(pages)
        self.requested: list[int] = []
        self.closed = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_text(self, number: int):
        self.requested.append(number)
        result = self.pages[number - 1]
        if isinstance(result, Exception):
            raise result
        return result

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_pdf():
    return FakePdfDocument
