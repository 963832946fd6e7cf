"""Regex line rules and bracket balance scanning."""

from leonbasic.lint.brackets import (
    CLOSER_BY_OPENER,
    BracketFrame,
    BracketScanResult,
    scan_brackets,
)
from leonbasic.lint.load import (
    SOURCE_SUFFIX,
    FileLintResult,
    collect_source_files,
    lint_file,
)
from leonbasic.lint.results import LintRunResult
from leonbasic.lint.rules import (
    LintConfidence,
    LintDomain,
    LintRule,
    MissingSemicolonRule,
    PrintCallFormatRule,
    RequireFormatRule,
    VarDeclarationFormatRule,
    default_lint_rules,
    validate_lint_rules,
)
from leonbasic.lint.runner import run_lint

__all__ = [
    "CLOSER_BY_OPENER",
    "SOURCE_SUFFIX",
    "BracketFrame",
    "BracketScanResult",
    "FileLintResult",
    "LintConfidence",
    "LintDomain",
    "LintRule",
    "LintRunResult",
    "MissingSemicolonRule",
    "PrintCallFormatRule",
    "RequireFormatRule",
    "VarDeclarationFormatRule",
    "collect_source_files",
    "default_lint_rules",
    "lint_file",
    "run_lint",
    "scan_brackets",
    "validate_lint_rules",
]
