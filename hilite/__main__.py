from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from hilite.config.defaults import DEFAULT_CONFIG, get_palette
from hilite.errors import InvalidPatternError
from hilite.highlight import LineHighlighter, PatternSet
from hilite.stream import highlight_stream
from hilite.utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hilite",
        description="Color regex matches in piped text, one color per pattern",
    )
    parser.add_argument(
        "patterns", nargs="+", metavar="PATTERN", help="Patterns to search for in the input"
    )
    parser.add_argument(
        "-l", "--whole-line", action="store_true", help="Color the whole line"
    )
    parser.add_argument(
        "-c", "--case-sensitive", action="store_true", help="Case-sensitive search"
    )
    parser.add_argument(
        "-b", "--background", action="store_true", help="Color the background"
    )
    parser.add_argument("--log-file", help="Also write diagnostics to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.set_defaults(**DEFAULT_CONFIG["highlight"])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    general = DEFAULT_CONFIG["general"]
    log = setup_logging(
        log_file=args.log_file or general["log_file"],
        log_level=general["log_level"],
        verbose=args.verbose,
    )

    try:
        pattern_set = PatternSet(args.patterns, case_sensitive=args.case_sensitive)
    except InvalidPatternError as exc:
        print(exc, file=sys.stderr)
        return 2

    highlighter = LineHighlighter(
        pattern_set,
        whole_line=args.whole_line,
        background=args.background,
        palette=get_palette(),
    )

    try:
        count = highlight_stream(
            sys.stdin.buffer, sys.stdout.buffer, highlighter, encoding=general["encoding"]
        )
    except BrokenPipeError:
        # Reader went away (e.g. `| head`); silence the flush at interpreter exit.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except KeyboardInterrupt:
        return 130
    log.debug("Processed %d line(s)", count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
