"""Tests for output formatting."""

import io

from suffixtally.aggregator import AggregationStats
from suffixtally.report import format_line, format_summary, write_suffixes


class TestWriteSuffixes:

    def test_one_suffix_per_line(self):
        out = io.StringIO()
        n = write_suffixes(out, [("com", 3), ("foo.com", 2)])
        assert n == 2
        assert out.getvalue() == "com\nfoo.com\n"

    def test_with_counts(self):
        out = io.StringIO()
        write_suffixes(out, [("com", 3)], with_counts=True)
        assert out.getvalue() == "com\t3\n"

    def test_empty(self):
        out = io.StringIO()
        assert write_suffixes(out, []) == 0
        assert out.getvalue() == ""

    def test_format_line_empty_label(self):
        assert format_line(".example.com", 1) == ".example.com\n"


class TestSummary:

    def test_summary_contents(self):
        stats = AggregationStats(
            lines_read=1500, lines_skipped=2, lines_inserted=1498, node_count=42,
        )
        text = format_summary(stats, emitted=7, threshold=2)
        assert text.startswith("=== suffixtally ===")
        assert "1,500" in text
        assert "1,498" in text
        assert "Threshold:         2" in text
        assert "Suffixes emitted:  7" in text
