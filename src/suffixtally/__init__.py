"""suffixtally: count recurring domain suffixes in large domain lists."""

from suffixtally.aggregator import AggregationStats, SuffixAggregator
from suffixtally.splitter import join_labels, normalize, split_labels
from suffixtally.trie import SuffixNode, SuffixTrie

__all__ = [
    "AggregationStats",
    "SuffixAggregator",
    "SuffixNode",
    "SuffixTrie",
    "join_labels",
    "normalize",
    "split_labels",
]
