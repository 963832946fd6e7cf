"""Line lint rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re
from typing import Final, Literal, Protocol, TypeAlias

from leonbasic.config import LintOptions
from leonbasic.diagnostics import (
    SCAN_MISSING_SEMICOLON,
    SCAN_PRINT_FORMAT,
    SCAN_REQUIRE_FORMAT,
    SCAN_VAR_FORMAT,
    Diagnostic,
)
from leonbasic.text import LineSpan, trimmed_bounds

LintDomain: TypeAlias = Literal["format", "style"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]

PRINT_CALL_NAME: Final[str] = "basic.print"

SEMICOLON_EXEMPT_PREFIXES: Final[tuple[str, ...]] = ("if", "else", "for", "while", "try", "catch")
SEMICOLON_EXEMPT_SUBSTRINGS: Final[tuple[str, ...]] = ("function", "func(")
STATEMENT_TERMINATORS: Final[tuple[str, ...]] = (";", "{", "}")


class LintRule(Protocol):
    """Per-line lint rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, lines: Sequence[str]) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class RequireFormatRule:
    """Flags `require` lines that are not exactly `require("<module>");`."""

    code: str = SCAN_REQUIRE_FORMAT.code
    name: str = "requireFormat"
    category: str = "format"
    domain: LintDomain = "format"
    confidence: LintConfidence = "policy"

    _pattern: re.Pattern[str] = re.compile(r'^require\("[^"]*"\);?$')

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for line_number, line in enumerate(lines):
            trimmed = line.strip()
            if not trimmed.startswith("require") or self._pattern.match(trimmed):
                continue
            start, _ = trimmed_bounds(line)
            diagnostics.append(Diagnostic.from_spec(SCAN_REQUIRE_FORMAT, LineSpan(line_number, start, len(line))))
        return diagnostics


@dataclass(frozen=True, slots=True)
class PrintCallFormatRule:
    """Flags `basic.print` mentions that are not a closed `basic.print(...)` call."""

    code: str = SCAN_PRINT_FORMAT.code
    name: str = "printCallFormat"
    category: str = "format"
    domain: LintDomain = "format"
    confidence: LintConfidence = "heuristic"

    _pattern: re.Pattern[str] = re.compile(r"basic\.print\([^)]*\);?")

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for line_number, line in enumerate(lines):
            column = line.find(PRINT_CALL_NAME)
            if column < 0 or self._pattern.search(line.strip()):
                continue
            diagnostics.append(
                Diagnostic.from_spec(
                    SCAN_PRINT_FORMAT,
                    LineSpan.at(line_number, column, len(PRINT_CALL_NAME)),
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class VarDeclarationFormatRule:
    """Flags `var(` lines that are not `var(<identifier>) = ...`."""

    code: str = SCAN_VAR_FORMAT.code
    name: str = "varDeclarationFormat"
    category: str = "format"
    domain: LintDomain = "format"
    confidence: LintConfidence = "policy"

    _pattern: re.Pattern[str] = re.compile(r"^var\([A-Za-z0-9_]+\)\s*=")

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for line_number, line in enumerate(lines):
            trimmed = line.strip()
            if not trimmed.startswith("var(") or self._pattern.match(trimmed):
                continue
            start, end = trimmed_bounds(line)
            diagnostics.append(Diagnostic.from_spec(SCAN_VAR_FORMAT, LineSpan(line_number, start, end)))
        return diagnostics


@dataclass(frozen=True, slots=True)
class MissingSemicolonRule:
    """Heuristic: statements that do not end in `;`, `{` or `}`.

    Control-flow headers, function definitions and comments are exempt. Multi-line
    statements and string literals ending in a terminator are not understood.
    """

    code: str = SCAN_MISSING_SEMICOLON.code
    name: str = "missingSemicolon"
    category: str = "style"
    domain: LintDomain = "style"
    confidence: LintConfidence = "heuristic"
    comment_prefixes: tuple[str, ...] = ("//",)

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for line_number, line in enumerate(lines):
            trimmed = line.strip()
            if not self._needs_terminator(trimmed):
                continue
            _, end = trimmed_bounds(line)
            diagnostics.append(Diagnostic.from_spec(SCAN_MISSING_SEMICOLON, LineSpan.empty(line_number, end)))
        return diagnostics

    def _needs_terminator(self, trimmed: str) -> bool:
        if not trimmed:
            return False
        if trimmed.endswith(STATEMENT_TERMINATORS):
            return False
        if trimmed.startswith(self.comment_prefixes):
            return False
        if any(marker in trimmed for marker in SEMICOLON_EXEMPT_SUBSTRINGS):
            return False
        return not trimmed.startswith(SEMICOLON_EXEMPT_PREFIXES)


def default_lint_rules(options: LintOptions | None = None) -> tuple[LintRule, ...]:
    resolved = options or LintOptions()
    rules: list[LintRule] = [
        RequireFormatRule(),
        PrintCallFormatRule(),
        VarDeclarationFormatRule(),
        MissingSemicolonRule(comment_prefixes=resolved.comment_prefixes),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_domains = {"format", "style"}
    allowed_confidence = {"policy", "heuristic"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected format/style.")
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code.startswith("SCAN_"):
            raise ValueError(f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `SCAN_` prefix.")
