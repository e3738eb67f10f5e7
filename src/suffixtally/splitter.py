"""Label splitting for raw domain lines.

A raw line is trimmed of surrounding whitespace, case-folded, and split
on "." into labels in conventional order (most specific first):
"Mail.Example.COM\\n" becomes ["mail", "example", "com"].

Nothing is validated. Adjacent dots or a leading/trailing dot produce
empty labels, and those empty labels are kept:

    split_labels(".example.com")   # ["", "example", "com"]
    split_labels("a..b")           # ["a", "", "b"]

Case folding only touches ASCII A-Z. Anything else (including bytes
smuggled through as surrogate escapes by the reader) is left alone.
"""

from __future__ import annotations

import string
from collections.abc import Iterable

# Only these four characters are trimmed. str.strip() with no argument
# would also eat form feeds, vertical tabs and Unicode spaces.
WHITESPACE = " \t\r\n"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize(line: str) -> str:
    """Trim surrounding whitespace and fold ASCII letters to lowercase."""
    return line.strip(WHITESPACE).translate(_ASCII_LOWER)


def split_labels(line: str) -> list[str]:
    """Split one raw line into labels, most specific label first.

    Returns an empty list for a blank line. Callers skip those.
    """
    domain = normalize(line)
    if not domain:
        return []
    return domain.split(".")


def join_labels(labels: Iterable[str]) -> str:
    """Join labels (most specific first) back into a dotted domain."""
    return ".".join(labels)
