"""Lint runner: line rules plus the bracket scan over one document."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from leonbasic.config import LintOptions
from leonbasic.diagnostics import collect_diagnostics, sort_diagnostics
from leonbasic.lint.brackets import scan_brackets
from leonbasic.lint.results import LintRunResult
from leonbasic.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from leonbasic.text import split_lines

logger = logging.getLogger(__name__)


def run_lint(
    text: str,
    options: LintOptions | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Scan one document and return its diagnostics ordered by position."""
    if rules is not None and options is not None:
        raise ValueError("Pass either rules or options, not both")
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules(options)
    validate_lint_rules(resolved_rules)

    lines = tuple(split_lines(text))
    brackets = scan_brackets(lines)
    diagnostics = collect_diagnostics(
        *(rule.run(lines) for rule in resolved_rules),
        brackets.diagnostics,
    )
    sorted_diagnostics = tuple(sort_diagnostics(diagnostics))
    logger.debug(
        "Scanned %d line(s) with %d rule(s): %d diagnostic(s)",
        len(lines),
        len(resolved_rules),
        len(sorted_diagnostics),
    )

    return LintRunResult(
        source_text=text,
        lines=lines,
        diagnostics=sorted_diagnostics,
        brackets=brackets,
    )
