"""Batch audit command line: check both dictionaries and every key usage."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .audit import AuditOptions, render_fatal, render_report, run_audit
from .config import EXCLUDED_DIRS, SOURCE_EXTENSIONS
from .exceptions import DictionaryError
from .main import run as run_editor
from .scanner import IdiomSet


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "-r",
        "--root-dir",
        type=Path,
        default=Path("."),
        help="Root directory to search from (default: current directory)",
    )
    parser.add_argument(
        "-p",
        "--primary-file",
        type=Path,
        required=True,
        help="Dictionary that usages are resolved against",
    )
    parser.add_argument(
        "-s",
        "--secondary-file",
        type=Path,
        required=True,
        help="Dictionary that must define the same keys",
    )
    parser.add_argument(
        "--ignore-file",
        type=Path,
        default=None,
        help="Keys that may stay unused, one per line",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Rewrite both dictionaries in sorted order when the audit passes",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Start the translation editor after the audit",
    )
    parser.add_argument(
        "--marker",
        action="append",
        default=[],
        help="Extra bare identifier marker, e.g. 'labelId=' (repeatable)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    options = AuditOptions(
        root_dir=args.root_dir,
        primary_file=args.primary_file,
        secondary_file=args.secondary_file,
        ignore_file=args.ignore_file,
        sort=args.sort,
        extensions=SOURCE_EXTENSIONS,
        excluded_dirs=EXCLUDED_DIRS,
        idioms=IdiomSet.default(args.marker),
    )

    print("Checking translations...")
    try:
        report = run_audit(options)
    except DictionaryError as exc:
        for line in render_fatal(exc):
            print(line)
        return 1
    except OSError as exc:
        print(f"ERROR: {exc}")
        return 1

    for line in render_report(report):
        print(line)
    exit_code = 0 if report.ok else 1

    if args.interactive:
        print("Starting interactive editor...")
        try:
            run_editor(args.primary_file, args.secondary_file)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
