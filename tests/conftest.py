"""Shared fixtures for suffixtally tests."""

from __future__ import annotations

import random

import pytest

SEED = 42

DOMAINS = [
    "api.openai.com",
    "chat.openai.com",
    "api.stripe.com",
    "dashboard.stripe.com",
    "s3.amazonaws.com",
    "ec2.amazonaws.com",
    "graph.microsoft.com",
    "login.microsoft.com",
    "internal.corp.com",
    "staging.internal.corp.com",
    "api.staging.internal",
    "api.prod.internal",
    "mail.google.com",
    "drive.google.com",
    "bbc.co.uk",
    "www.bbc.co.uk",
    "localhost",
]


def generate_lines(count: int, seed: int = SEED) -> list[str]:
    """Random domain lines with mixed case and stray whitespace."""
    rng = random.Random(seed)
    lines: list[str] = []
    for _ in range(count):
        domain = rng.choice(DOMAINS)
        if rng.random() < 0.3:
            domain = domain.upper()
        if rng.random() < 0.2:
            domain = f"  {domain}\t\r"
        lines.append(domain)
    return lines


@pytest.fixture
def random_lines() -> list[str]:
    return generate_lines(2000)


@pytest.fixture
def input_file(tmp_path):
    """Write lines to a temp file and return its path as a string."""
    def _write(lines: list[str], trailing_newline: bool = True) -> str:
        path = tmp_path / "domains.txt"
        text = "\n".join(lines)
        if trailing_newline and lines:
            text += "\n"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
