"""suffixtally CLI entry point.

Usage: suffixtally [-i INPUT] [-o OUTPUT] [-c COUNT] [--with-counts] [--progress] [-v]

Reads one domain per line (stdin by default), then writes every suffix
seen at least COUNT times (stdout by default), one per line.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

from tqdm import tqdm

from suffixtally.aggregator import SuffixAggregator
from suffixtally.report import format_summary, write_suffixes
from suffixtally.streams import (
    InputError,
    OutputError,
    iter_lines,
    open_input,
    open_output,
)

log = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 2


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Parsed command-line options."""
    input_path: str | None = None
    output_path: str | None = None
    threshold: int = DEFAULT_THRESHOLD
    with_counts: bool = False
    progress: bool = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suffixtally",
        description="Report domain suffixes that occur at least N times in a domain list.",
    )
    parser.add_argument(
        "-i", "--input", dest="input_path", default=None, metavar="PATH",
        help="Input file, one domain per line (default: stdin)",
    )
    parser.add_argument(
        "-o", "--output", dest="output_path", default=None, metavar="PATH",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-c", "--count", dest="threshold", type=int, default=DEFAULT_THRESHOLD,
        metavar="N",
        help=f"Minimum occurrence count (default: {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "--with-counts", action="store_true",
        help="Append a tab and the occurrence count to each output line.",
    )
    parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar on stderr while reading input.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log a run summary (-v) or debug detail (-vv) to stderr.",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("suffixtally").setLevel(level)


def run(config: RunConfig) -> int:
    """Aggregate the input, then write qualifying suffixes. Returns an exit code.

    The output is only opened once all input has been read, so a bad
    input path never truncates an existing output file.
    """
    agg = SuffixAggregator()
    try:
        _ingest(agg, config)
        emitted = _emit(agg, config)
    except InputError as exc:
        log.error("cannot read input %s", exc)
        return 1
    except OutputError as exc:
        log.error("cannot write output %s", exc)
        return 1

    if log.isEnabledFor(logging.INFO):
        log.info("%s", format_summary(agg.stats, emitted, config.threshold))
    return 0


def _ingest(agg: SuffixAggregator, config: RunConfig) -> None:
    try:
        with open_input(config.input_path) as stream:
            with tqdm(
                iter_lines(stream),
                unit=" lines",
                disable=not config.progress,
                file=sys.stderr,
            ) as lines:
                agg.consume(lines)
    except OSError as exc:
        raise InputError(config.input_path or "<stdin>", exc) from exc


def _emit(agg: SuffixAggregator, config: RunConfig) -> int:
    try:
        with open_output(config.output_path) as out:
            return write_suffixes(
                out,
                agg.iter_qualifying(config.threshold),
                with_counts=config.with_counts,
            )
    except OSError as exc:
        raise OutputError(config.output_path or "<stdout>", exc) from exc


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    config = RunConfig(
        input_path=args.input_path,
        output_path=args.output_path,
        threshold=args.threshold,
        with_counts=args.with_counts,
        progress=args.progress,
    )
    return run(config)
