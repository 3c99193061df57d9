"""CLI entry-point for tablen.

Usage:
    python -m tablen -p <dir> [-e EXT ...] [-l N] [-i DIR ...] [-j N] [--json] [-v]
    python -m tablen -h
"""

from __future__ import annotations

import argparse
import logging
import sys

from tablen import __version__
from tablen.core.config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_MAX_LINE_LENGTH,
    MIN_LINE_LENGTH,
    ScanConfig,
    clamp_line_length,
)
from tablen.core.runner import run_scan
from tablen.policy.exit_codes import exit_code_for_report
from tablen.reports.exporters import export_json, export_text
from tablen.utils.exit_codes import ExitCode

_NOT_ENOUGH_ARGUMENTS = (
    'Not enough arguments. use "--help" or "-h" for more information.'
)


def _line_size(value: str) -> int:
    try:
        return clamp_line_length(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid line size: {value!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tablen",
        description="Report tab characters and over-long lines in source files.",
        add_help=False,
    )
    p.add_argument(
        "-h",
        "--help",
        dest="show_help",
        action="store_true",
        default=False,
        help="Show this message and exit without scanning.",
    )
    p.add_argument(
        "-p",
        "--path",
        metavar="DIR",
        default=None,
        help="Root directory to scan.",
    )
    p.add_argument(
        "-e",
        "--extensions",
        nargs="*",
        action="extend",
        default=[],
        metavar="EXT",
        help=(
            "Extra file extensions to scan, each starting with '.'. "
            f"Added to the defaults: {' '.join(DEFAULT_EXTENSIONS)}."
        ),
    )
    p.add_argument(
        "-l",
        "--line_size",
        dest="line_size",
        type=_line_size,
        default=DEFAULT_MAX_LINE_LENGTH,
        metavar="N",
        help=(
            f"Maximum characters per line (default: {DEFAULT_MAX_LINE_LENGTH}, "
            f"minimum: {MIN_LINE_LENGTH})."
        ),
    )
    p.add_argument(
        "-i",
        "--ignore",
        nargs="*",
        action="extend",
        default=[],
        metavar="DIR",
        help="Directory names to skip while walking the tree.",
    )
    p.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        metavar="N",
        help="Number of files to check in parallel (default: 1).",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Also print the JSON report to stdout.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``tablen.utils.exit_codes``)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()

    if not effective_argv:
        parser.print_usage(sys.stderr)
        print(_NOT_ENOUGH_ARGUMENTS, file=sys.stderr)
        return ExitCode.ERROR

    args = parser.parse_args(effective_argv)

    if args.show_help:
        parser.print_help(sys.stderr)
        print(_NOT_ENOUGH_ARGUMENTS, file=sys.stderr)
        return ExitCode.ERROR

    if args.path is None:
        parser.error("the following arguments are required: -p/--path")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = ScanConfig.create(
        args.path,
        extensions=DEFAULT_EXTENSIONS + tuple(args.extensions),
        ignore_dirs=args.ignore,
        max_line_length=args.line_size,
        jobs=args.jobs,
    )
    report = run_scan(cfg)

    sys.stderr.write(export_text(report))
    if args.json_out:
        sys.stdout.write(export_json(report))

    return exit_code_for_report(report)


if __name__ == "__main__":
    raise SystemExit(main())
