"""Command-line linter for LeonBasic sources."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

from tqdm import tqdm

from leonbasic.config import LintOptions
from leonbasic.diagnostics import count_by_severity, format_diagnostic
from leonbasic.lint import SOURCE_SUFFIX, FileLintResult, collect_source_files, lint_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSTIC_ERRORS = 1
EXIT_UNREADABLE_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leonbasic-lint",
        description="Check LeonBasic sources for bracket, format and terminator problems",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help=f"Files to check, or directories to search for `*{SOURCE_SUFFIX}` files",
    )
    parser.add_argument(
        "--comment-prefix",
        action="append",
        dest="comment_prefixes",
        default=None,
        help="Line comment marker exempt from the semicolon check (repeatable, default: //)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress details to stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = LintOptions(comment_prefixes=tuple(args.comment_prefixes)) if args.comment_prefixes else LintOptions()
    except ValueError as exc:
        parser.error(str(exc))
    files = collect_source_files(args.paths)
    logger.info("Checking %d file(s)", len(files))

    results: list[FileLintResult] = []
    unreadable = 0
    iterator = tqdm(files, desc="leonbasic-lint", unit="file", file=sys.stderr) if not args.no_progress else files
    for path in iterator:
        try:
            results.append(lint_file(path, options))
        except (OSError, UnicodeDecodeError) as exc:
            unreadable += 1
            logger.error("Cannot read %s: %s", path, exc)

    errors = 0
    warnings = 0
    for file_result in results:
        for diagnostic in file_result.result.diagnostics:
            print(format_diagnostic(file_result.source_path, diagnostic))
        counts = count_by_severity(file_result.result.diagnostics)
        errors += counts["error"]
        warnings += counts["warning"]

    print(f"{len(results)} file(s) checked: {errors} error(s), {warnings} warning(s)")

    if unreadable:
        return EXIT_UNREADABLE_INPUT
    if errors:
        return EXIT_DIAGNOSTIC_ERRORS
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
