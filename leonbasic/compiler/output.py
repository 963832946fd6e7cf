"""Mapping interpreter stderr back onto document lines."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re
from typing import Final, Protocol

from leonbasic.diagnostics import COMPILER_ERROR, Diagnostic
from leonbasic.text import LineSpan, split_lines, trimmed_bounds

_LINE_REFERENCE: Final[re.Pattern[str]] = re.compile(r"line\s+(\d+)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class CompilerOutput:
    """Captured interpreter output for one run."""

    stdout: str = ""
    stderr: str = ""


class CompilerOutputSource(Protocol):
    """Runs the interpreter on a source file and returns what it printed."""

    def run(self, compiler_path: str, source_path: str) -> CompilerOutput: ...


def parse_compiler_output(stderr: str, lines: Sequence[str]) -> list[Diagnostic]:
    """Best-effort conversion of interpreter stderr into diagnostics.

    Each stderr line mentioning `line <N>` (1-based) is attached to that document
    line, clamped to the document. When stderr has content but no line
    reference, the first non-blank stderr line is reported on line 0.
    """
    stderr_lines = [line.strip() for line in split_lines(stderr) if line.strip()]
    if not stderr_lines:
        return []

    last_line = max(len(lines) - 1, 0)
    diagnostics: list[Diagnostic] = []
    for message in stderr_lines:
        match = _LINE_REFERENCE.search(message)
        if match is None:
            continue
        line_number = min(max(int(match.group(1)) - 1, 0), last_line)
        diagnostics.append(_compiler_diagnostic(message, line_number, lines))

    if not diagnostics:
        diagnostics.append(_compiler_diagnostic(stderr_lines[0], 0, lines))
    return diagnostics


def _compiler_diagnostic(message: str, line_number: int, lines: Sequence[str]) -> Diagnostic:
    line = lines[line_number] if line_number < len(lines) else ""
    start, end = trimmed_bounds(line)
    return Diagnostic.from_spec(
        COMPILER_ERROR,
        LineSpan(line_number, start, end),
        message=f"{COMPILER_ERROR.message} {message}",
    )
