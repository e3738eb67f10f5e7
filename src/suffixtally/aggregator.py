"""SuffixAggregator: feeds raw domain lines into a SuffixTrie.

Usage:
    agg = SuffixAggregator()
    agg.consume(["a.b.c", "x.b.c", "y.b.c"])
    agg.report(2)
    # ["c", "b.c"]

The aggregator owns its trie for the whole ingestion phase. Nothing
else mutates it; report() and iter_qualifying() only read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from suffixtally.splitter import split_labels
from suffixtally.trie import SuffixTrie

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AggregationStats:
    """Counters describing one ingestion run."""
    lines_read: int
    lines_skipped: int
    lines_inserted: int
    node_count: int


class SuffixAggregator:
    """Split each input line and insert its labels into a private trie."""

    def __init__(self) -> None:
        self._trie = SuffixTrie()
        self._lines_read = 0
        self._lines_skipped = 0

    @property
    def trie(self) -> SuffixTrie:
        return self._trie

    def add_line(self, line: str) -> bool:
        """Process one raw line. Returns False if it was blank and skipped."""
        self._lines_read += 1
        labels = split_labels(line)
        if not labels:
            self._lines_skipped += 1
            return False
        self._trie.insert(labels)
        return True

    def consume(self, lines: Iterable[str]) -> int:
        """Process every line from an iterable, return how many were inserted."""
        inserted = 0
        for line in lines:
            if self.add_line(line):
                inserted += 1
        log.debug("inserted %d lines (%d read so far)", inserted, self._lines_read)
        return inserted

    def iter_qualifying(self, threshold: int) -> Iterator[tuple[str, int]]:
        return self._trie.iter_qualifying(threshold)

    def report(self, threshold: int) -> list[str]:
        return self._trie.report(threshold)

    @property
    def stats(self) -> AggregationStats:
        """Snapshot of the counters. node_count walks the whole trie."""
        return AggregationStats(
            lines_read=self._lines_read,
            lines_skipped=self._lines_skipped,
            lines_inserted=self._trie.total_inserted,
            node_count=self._trie.node_count(),
        )
