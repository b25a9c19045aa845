"""Tests for scanning/scanner.py - serial and concurrent orchestration."""

import io
import logging

import pytest

from srcstat.config import ScanOptions
from srcstat.exceptions import StreamReadError
from srcstat.scanning import STDIN_PATH, Language, Max, Scanner, Totals, scan


def _sorted(records):
    return sorted(records, key=lambda r: str(r.path))


@pytest.fixture
def project(tmp_path, make_file):
    make_file(tmp_path / "README.md", "# Title\nbody  texts\n")
    make_file(tmp_path / "notes.txt", "aaaaaaaaa bbbb cccc\ndddd eeee\nffff gggg\n")
    make_file(tmp_path / "src" / "main.py", "import os\n\nprint(os.getcwd())\n")
    make_file(tmp_path / "src" / "util.py", "def f():\n    return 1\n")
    make_file(tmp_path / "src" / "blob.dat", b"\x00\xff\xfe binary")
    make_file(tmp_path / "docs" / "guide.md", "Read me.\n")
    return tmp_path


class TestScanStrategies:
    def test_serial_and_concurrent_agree(self, project):
        paths = [project / "src", project / "docs", project / "notes.txt"]
        serial = Scanner(ScanOptions(concurrent=False)).scan(paths)
        concurrent = Scanner(ScanOptions(concurrent=True, workers=4)).scan(paths)

        assert serial.total == concurrent.total
        assert serial.max == concurrent.max
        assert _sorted(serial.files) == _sorted(concurrent.files)

    def test_totals_match_records(self, project):
        results = scan([project])
        totals, maxima = Totals(), Max()
        for r in results.files:
            totals.add(r)
            maxima.track(r)
        assert results.total == totals
        assert results.max == maxima

    def test_concurrent_keeps_input_path_blocks_in_order(self, project):
        results = Scanner(ScanOptions(workers=2)).scan(
            [project / "notes.txt", project / "docs", project / "README.md"]
        )
        assert [r.path.name for r in results.files] == ["notes.txt", "guide.md", "README.md"]

    def test_serial_preserves_enumeration_order(self, project):
        results = Scanner(ScanOptions(concurrent=False)).scan([project])
        assert [r.path.relative_to(project).as_posix() for r in results.files] == [
            "README.md",
            "notes.txt",
            "docs/guide.md",
            "src/main.py",
            "src/util.py",
        ]

    def test_empty_path_list(self):
        results = Scanner().scan([])
        assert results.files == []
        assert results.total.files == 0


class TestScanFiltering:
    def test_undecodable_file_dropped(self, project):
        results = scan([project / "src"])
        assert sorted(r.path.name for r in results.files) == ["main.py", "util.py"]

    def test_missing_path_ignored(self, project):
        results = scan([project / "nope", project / "notes.txt"])
        assert [r.path.name for r in results.files] == ["notes.txt"]

    def test_options_reach_the_walker(self, project):
        options = ScanOptions(max_depth=1, exclude_patterns=("*.md",))
        results = Scanner(options).scan([project])
        assert [r.path.name for r in results.files] == ["notes.txt"]

    def test_explicit_file_bypasses_filters(self, project):
        options = ScanOptions(exclude_patterns=("*.md",))
        results = Scanner(options).scan([project / "README.md"])
        assert len(results.files) == 1


class TestStandardInput:
    def test_stream_is_scanned(self):
        scanner = Scanner(stdin=lambda: io.BytesIO(b"We are\nreading this from\na buffered reader"))
        results = scanner.scan(["-"])

        assert len(results.files) == 1
        record = results.files[0]
        assert record.path == STDIN_PATH
        assert record.language is Language.TEXT
        assert (record.lines, record.words, record.chars, record.bytes) == (3, 8, 40, 42)

    def test_sole_stream_error_propagates(self):
        scanner = Scanner(stdin=lambda: io.BytesIO(b"\xff\xfe"))
        with pytest.raises(StreamReadError):
            scanner.scan(["-"])

    @pytest.mark.parametrize("concurrent", [True, False])
    def test_stream_error_dropped_among_other_paths(self, project, caplog, concurrent):
        scanner = Scanner(
            ScanOptions(concurrent=concurrent), stdin=lambda: io.BytesIO(b"\xff\xfe")
        )
        with caplog.at_level(logging.WARNING, logger="srcstat"):
            results = scanner.scan(["-", project / "notes.txt"])

        assert [r.path.name for r in results.files] == ["notes.txt"]
        assert "standard input" in caplog.text


class TestEndToEnd:
    def test_grouped_text_and_markdown(self, tmp_path, make_file):
        make_file(tmp_path / "notes.txt", "aaaaaaaaa bbbb cccc\ndddd eeee\nffff gggg\n")
        make_file(tmp_path / "README.md", "# Title\nbody  texts\n")

        grouped = scan([tmp_path]).group_by_language()

        assert len(grouped.files) == 2
        assert {r.language for r in grouped.files} == {Language.TEXT, Language.MARKDOWN}
        assert all(r.count == 1 for r in grouped.files)
        assert grouped.total.files == 2
        assert (grouped.total.lines, grouped.total.words, grouped.total.bytes) == (5, 11, 60)
        assert (grouped.max.lines, grouped.max.words, grouped.max.bytes) == (3, 7, 40)
