"""Lint run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from leonbasic.diagnostics import Diagnostic, has_errors
from leonbasic.lint.brackets import BracketScanResult


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of one scan pass over a document."""

    source_text: str
    lines: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...]
    brackets: BracketScanResult

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
