"""Output formatting for qualifying suffixes and run summaries."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from suffixtally.aggregator import AggregationStats


def format_line(suffix: str, count: int, with_counts: bool = False) -> str:
    """Format one output line, newline included."""
    if with_counts:
        return f"{suffix}\t{count}\n"
    return f"{suffix}\n"


def write_suffixes(
    out: TextIO,
    items: Iterable[tuple[str, int]],
    with_counts: bool = False,
) -> int:
    """Write one suffix per line. Returns the number of lines written."""
    written = 0
    for suffix, count in items:
        out.write(format_line(suffix, count, with_counts))
        written += 1
    return written


def format_summary(
    stats: AggregationStats, emitted: int, threshold: int, label: str = "suffixtally"
) -> str:
    """Format an AggregationStats snapshot as a readable summary."""
    lines = [
        f"=== {label} ===",
        f"Lines read:        {stats.lines_read:,}",
        f"  Inserted:        {stats.lines_inserted:,}",
        f"  Skipped (blank): {stats.lines_skipped:,}",
        f"Trie nodes:        {stats.node_count:,}",
        f"Threshold:         {threshold}",
        f"Suffixes emitted:  {emitted:,}",
    ]
    return "\n".join(lines)
