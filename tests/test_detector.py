import pytest

from file_extractor.config import ExtractorConfig
from file_extractor.detector import (
    DETECTION_STAGES,
    TextDetector,
    is_likely_text,
    is_text_by_extension,
    is_text_content_type,
)


@pytest.mark.parametrize(
    "file_path, expected",
    [
        ("test.txt", True),
        ("test.md", True),
        ("test.go", True),
        ("test.json", True),
        ("test.yaml", True),
        ("test.yml", True),
        ("test.csv", True),
        ("test.log", True),
        ("test.py", True),
        ("test.js", True),
        ("test.html", True),
        ("test.xml", True),
        ("test.sh", True),
        ("test.sql", True),
        ("test.rb", True),
        ("test.php", True),
        ("notes.TXT", True),
        ("dir.d/README", True),
        ("Makefile", True),
        ("test.bin", False),
        ("test.exe", False),
        ("test.jpg", False),
        ("test.png", False),
        ("test.pdf", False),
        ("test.docx", False),
        ("test.zip", False),
        ("archive.tar.gz", False),
        (".bashrc", False),
        (".cache", False),
        ("config/.DS_Store", False),
    ],
)
def test_is_text_by_extension(file_path, expected):
    assert is_text_by_extension(file_path) is expected


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("text/plain", True),
        ("text/plain; charset=utf-8", True),
        ("text/html", True),
        ("text/css", True),
        ("text/javascript", True),
        ("TEXT/CSV", True),
        ("application/json", True),
        ("application/xml", True),
        ("application/javascript", True),
        ("application/x-sh", True),
        ("application/x-yaml", True),
        (" application/sql ; charset=utf-8", True),
        ("text/anything", True),
        ("image/png", False),
        ("image/jpeg", False),
        ("application/pdf", False),
        ("application/octet-stream", False),
        ("video/mp4", False),
        ("", False),
    ],
)
def test_is_text_content_type(content_type, expected):
    assert is_text_content_type(content_type) is expected


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"This is valid ASCII text with numbers 123 and symbols !@#", True),
        (b"Line 1\nLine 2\tTabbed\rCarriage return", True),
        (b"\x00\x01\x02\x03", False),
        (b"\x89PNG\r\n\x1a\n", False),
        (b"\x01\x02\x03\x04\x05\x06\x07\x08", False),
        (b"", True),
        (b"hello\x00world", False),
        ("Meeting notes, written at the café downstairs.\n".encode("utf-8"), True),
        (b"\xff\xfe\xfd", False),
    ],
    ids=[
        "ascii",
        "whitespace",
        "null bytes",
        "png header",
        "control characters",
        "empty",
        "embedded null",
        "some utf-8",
        "invalid utf-8",
    ],
)
def test_is_likely_text(data, expected):
    assert is_likely_text(data) is expected


def test_is_likely_text_tolerates_ansi_colours():
    line = b"\x1b[32mINFO\x1b[0m server started on port 8080 and is ready\n"
    assert is_likely_text(line * 5)


def test_is_likely_text_ratio_is_strict():
    # 17 printable out of 20 is exactly 0.85
    sample = b"a" * 17 + b"\x01" * 3
    assert not is_likely_text(sample)
    assert is_likely_text(sample, threshold=0.8)


def test_stage_order():
    assert [name for name, _ in DETECTION_STAGES] == [
        "extension",
        "content_type",
        "byte_heuristic",
    ]


class TestTextDetector:
    def test_extension_wins_without_reading(self, tmp_path):
        verdict = TextDetector().classify(tmp_path / "missing.py")

        assert verdict.is_text
        assert verdict.mime_hint == "text/plain"

    def test_sniffed_text_type(self, write_file):
        path = write_file("page.weird", "<!DOCTYPE html><html></html>")

        verdict = TextDetector().classify(path)

        assert verdict.is_text
        assert verdict.mime_hint == "text/html; charset=utf-8"

    def test_byte_heuristic_catches_escape_heavy_text(self, write_file):
        # ESC is fine for the heuristic but 0x01 makes the sniffer say binary
        path = write_file("colored.out", b"\x01" + b"\x1b[1mbold text here\x1b[0m " * 10)

        verdict = TextDetector().classify(path)

        assert verdict.is_text
        assert verdict.mime_hint == "text/plain"

    def test_png_is_not_text(self, write_file):
        path = write_file("image.bin", b"\x89PNG\r\n\x1a\n")

        verdict = TextDetector().classify(path)

        assert not verdict.is_text
        assert verdict.mime_hint == "image/png"

    def test_empty_file_without_text_extension(self, write_file):
        path = write_file("empty.dat", b"")

        verdict = TextDetector().classify(path)

        assert verdict.is_text
        assert verdict.mime_hint == "text/plain; charset=utf-8"

    def test_only_sample_is_read(self, write_file):
        path = write_file("mixed.dat", b"a" * 16 + b"\x00" * 100)

        verdict = TextDetector(ExtractorConfig(sample_size=16)).classify(path)

        assert verdict.is_text

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            TextDetector().classify(tmp_path / "missing.bin")


def test_dot_file_text_is_found_by_sniffing(write_file):
    path = write_file(".bashrc", "export PATH=$HOME/bin:$PATH\n")

    verdict = TextDetector().classify(path)

    assert verdict.is_text
    assert verdict.mime_hint == "text/plain; charset=utf-8"
