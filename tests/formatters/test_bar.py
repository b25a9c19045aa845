"""Tests for formatters/bar.py - proportional bars."""

import pytest

from srcstat.config import OutputOptions
from srcstat.formatters.ansi import strip_ansi
from srcstat.formatters.bar import bar_length, build_bar
from srcstat.scanning import Language, Metric, ScanResults


class TestBarLength:
    @pytest.mark.parametrize(
        "value, maximum, size, expected",
        [
            (50, 100, 20, 10),
            (100, 100, 20, 20),
            (0, 100, 20, 0),
            (5, 0, 20, 0),
            (0, 0, 20, 0),
            (1, 40, 20, 1),  # exactly half a glyph rounds up
            (1, 41, 20, 0),
            (200, 100, 20, 20),
            (10**15, 3 * 10**15, 30, 10),
        ],
    )
    def test_lengths(self, value, maximum, size, expected):
        assert bar_length(value, maximum, size) == expected


class TestBuildBar:
    def _results(self, make_record):
        return ScanResults.from_files(
            [
                make_record("big.py", lines=1, bytes=100, language=Language.PYTHON),
                make_record("half.py", lines=4, bytes=50, language=Language.PYTHON),
                make_record("empty.py", lines=0, bytes=0, language=Language.PYTHON),
            ]
        )

    def test_half_of_max_is_half_the_bar(self, make_record):
        results = self._results(make_record)
        options = OutputOptions(use_colors=False)
        assert build_bar(results.files[1], results, options) == "▬" * 10 + " " * 10

    def test_zero_record_is_all_blank(self, make_record):
        results = self._results(make_record)
        options = OutputOptions(use_colors=False)
        assert build_bar(results.files[2], results, options) == " " * 20

    def test_all_zero_results(self, make_record):
        results = ScanResults.from_files([make_record("a"), make_record("b")])
        options = OutputOptions(use_colors=False, graph_fill="#", graph_blank=".")
        assert build_bar(results.files[0], results, options) == "." * 20

    def test_graph_by_overrides_sort_metric(self, make_record):
        results = self._results(make_record)
        options = OutputOptions(use_colors=False, sort_by=Metric.BYTES, graph_by=Metric.LINES)
        assert build_bar(results.files[0], results, options) == "▬" * 5 + " " * 15

    def test_custom_glyphs_and_size(self, make_record):
        results = self._results(make_record)
        options = OutputOptions(use_colors=False, graph_size=4, graph_fill="#", graph_blank="-")
        assert build_bar(results.files[1], results, options) == "##--"

    def test_colored_bar_keeps_glyphs(self, make_record):
        results = self._results(make_record)
        bar = build_bar(results.files[1], results, OutputOptions(use_colors=True))
        assert bar.startswith("\x1b[38;2;53;114;165m")
        assert strip_ansi(bar) == "▬" * 10 + " " * 10
