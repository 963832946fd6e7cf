"""Diagnostics."""

from leonbasic.diagnostics.codes import (
    COMPILER_ERROR,
    SCAN_EXTRA_CLOSING_BRACKET,
    SCAN_MISMATCHED_BRACKET,
    SCAN_MISSING_SEMICOLON,
    SCAN_PRINT_FORMAT,
    SCAN_REQUIRE_FORMAT,
    SCAN_UNCLOSED_BRACKET,
    SCAN_VAR_FORMAT,
    DiagnosticSpec,
    Severity,
)
from leonbasic.diagnostics.diagnostic import Diagnostic
from leonbasic.diagnostics.report import (
    collect_diagnostics,
    count_by_severity,
    format_diagnostic,
    has_errors,
    sort_diagnostics,
)

__all__ = [
    "COMPILER_ERROR",
    "SCAN_EXTRA_CLOSING_BRACKET",
    "SCAN_MISMATCHED_BRACKET",
    "SCAN_MISSING_SEMICOLON",
    "SCAN_PRINT_FORMAT",
    "SCAN_REQUIRE_FORMAT",
    "SCAN_UNCLOSED_BRACKET",
    "SCAN_VAR_FORMAT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "count_by_severity",
    "format_diagnostic",
    "has_errors",
    "sort_diagnostics",
]
