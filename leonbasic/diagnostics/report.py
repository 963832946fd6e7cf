"""Diagnostics helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from leonbasic.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    counts = Counter(d.severity for d in diagnostics)
    return {"error": counts["error"], "warning": counts["warning"]}


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.span.line,
            diagnostic.span.start,
            diagnostic.span.end,
            diagnostic.code,
            diagnostic.message,
        ),
    )


def format_diagnostic(path: str, diagnostic: Diagnostic) -> str:
    """Render one diagnostic as `path:LINE:COL: severity[CODE] message` with 1-based positions."""
    return (
        f"{path}:{diagnostic.span.line + 1}:{diagnostic.span.start + 1}: "
        f"{diagnostic.severity}[{diagnostic.code}] {diagnostic.message}"
    )
