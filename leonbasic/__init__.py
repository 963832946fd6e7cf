"""Lightweight linting for LeonBasic scripts."""

from leonbasic.config import LintOptions
from leonbasic.diagnostics import Diagnostic
from leonbasic.lint import LintRunResult, run_lint, scan_brackets
from leonbasic.session import LintSession, ScanScheduler

__all__ = [
    "Diagnostic",
    "LintOptions",
    "LintRunResult",
    "LintSession",
    "ScanScheduler",
    "run_lint",
    "scan_brackets",
]
