"""Line-oriented input and output for the CLI.

Both sides use UTF-8 with surrogateescape, so bytes that are not valid
UTF-8 are read as lone surrogates and written back out unchanged. The
tool never rejects a line because of its encoding.

Input lines are split on LF only. A CR before the LF stays in the line
and is trimmed later by the splitter, the same as any other trailing
whitespace. Python's file iteration has no line-length limit, so very
long lines arrive whole.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

log = logging.getLogger(__name__)

ENCODING = "utf-8"
ERRORS = "surrogateescape"

# Paths that mean "use the standard stream".
STD_STREAM_PATHS = (None, "", "-")


class StreamError(Exception):
    """Opening, reading or writing one of the tool's streams failed."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause.strerror or cause}")


class InputError(StreamError):
    """The input source could not be opened or read."""


class OutputError(StreamError):
    """The output destination could not be created or written."""


def _wrap_std(stream: TextIO, newline: str | None) -> tuple[TextIO, bool]:
    """Rewrap a standard stream's byte buffer with our encoding settings.

    Returns (stream, detach). When the stream has no binary buffer
    (e.g. replaced by a StringIO), it is used as-is.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream, False
    wrapped = io.TextIOWrapper(buffer, encoding=ENCODING, errors=ERRORS, newline=newline)
    return wrapped, True


@contextmanager
def open_input(path: str | None) -> Iterator[TextIO]:
    """Open the named input file, or standard input for None/""/"-".

    Raises InputError if the file cannot be opened. Standard input is
    never closed, only detached from the wrapper.
    """
    if path in STD_STREAM_PATHS:
        stream, detach = _wrap_std(sys.stdin, newline="\n")
        log.debug("reading from stdin")
        try:
            yield stream
        finally:
            if detach:
                stream.detach()
        return

    try:
        stream = open(path, encoding=ENCODING, errors=ERRORS, newline="\n")
    except OSError as exc:
        raise InputError(path, exc) from exc
    log.debug("reading from %s", path)
    with stream:
        yield stream


@contextmanager
def open_output(path: str | None) -> Iterator[TextIO]:
    """Create (or truncate) the named output file, or use standard output.

    Raises OutputError if the file cannot be created. Output is flushed
    on exit; standard output is flushed and detached, not closed.
    """
    if path in STD_STREAM_PATHS:
        sys.stdout.flush()
        stream, detach = _wrap_std(sys.stdout, newline="\n")
        try:
            yield stream
        finally:
            stream.flush()
            if detach:
                stream.detach()
        return

    try:
        stream = open(path, "w", encoding=ENCODING, errors=ERRORS, newline="\n")
    except OSError as exc:
        raise OutputError(path, exc) from exc
    log.debug("writing to %s", path)
    with stream:
        yield stream


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield each line of a text stream without its trailing LF."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        yield line
