"""Counting trie over reversed domain labels.

Domain labels are reversed before insertion so that the top-level
label comes first: ["mail", "example", "com"] is stored along the path
root -> "com" -> "example" -> "mail". Every line that ends in
"example.com" shares the same two nodes, and each node's count is the
number of lines whose reversed labels pass through it.

Because an insertion increments every node on its path, counts never
grow on the way down:

    count("com") >= count("example.com") >= count("mail.example.com")

The reporter relies on that to stop descending as soon as a node
falls below the threshold.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from suffixtally.splitter import join_labels, split_labels


@dataclass(slots=True)
class SuffixNode:
    """One suffix level.

    count is the number of inserted lines passing through this node.
    children maps the next (more specific) label to its node.
    """
    count: int = 0
    children: dict[str, SuffixNode] = field(default_factory=dict)


class SuffixTrie:
    """Trie of reversed domain labels with per-node occurrence counts.

    The root stands for the empty suffix. It is never counted and never
    reported; it only anchors the top-level labels.
    """

    def __init__(self) -> None:
        self._root = SuffixNode()
        self._total_inserted = 0

    @property
    def root(self) -> SuffixNode:
        return self._root

    @property
    def total_inserted(self) -> int:
        """Number of non-empty label sequences inserted so far."""
        return self._total_inserted

    def insert(self, labels: Sequence[str]) -> None:
        """Insert one domain's labels, given most specific label first.

        Walks from the top-level label inward, creating missing nodes
        and adding 1 to the count of every node on the path. An empty
        sequence is a no-op.
        """
        if not labels:
            return
        node = self._root
        for label in reversed(labels):
            child = node.children.get(label)
            if child is None:
                child = SuffixNode()
                node.children[label] = child
            node = child
            node.count += 1
        self._total_inserted += 1

    def iter_qualifying(self, threshold: int) -> Iterator[tuple[str, int]]:
        """Yield (suffix, count) for every node with count >= threshold.

        Depth-first with an explicit stack of (node, path) frames, where
        path holds labels top-level first. A node below the threshold
        is skipped together with its subtree, since no descendant can
        have a higher count.
        """
        stack: list[tuple[SuffixNode, tuple[str, ...]]] = [
            (child, (label,))
            for label, child in reversed(self._root.children.items())
        ]
        while stack:
            node, path = stack.pop()
            if node.count < threshold:
                continue
            yield join_labels(reversed(path)), node.count
            # Reversed so siblings come off the stack in first-seen order.
            for label, child in reversed(node.children.items()):
                stack.append((child, path + (label,)))

    def report(self, threshold: int) -> list[str]:
        """Return every suffix whose count is at least threshold."""
        return [suffix for suffix, _ in self.iter_qualifying(threshold)]

    def lookup(self, domain: str) -> int:
        """Return the count for a suffix written as a normal domain.

        The domain goes through the same splitter as input lines, so
        lookup("Example.COM") finds the "example.com" node. Unknown
        suffixes (and the empty suffix) count as 0.
        """
        labels = split_labels(domain)
        if not labels:
            return 0
        node = self._root
        for label in reversed(labels):
            node = node.children.get(label)
            if node is None:
                return 0
        return node.count

    def node_count(self) -> int:
        """Count total nodes in the trie, root included (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count
