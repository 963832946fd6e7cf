"""Diagnostics core types."""

from dataclasses import dataclass

from leonbasic.diagnostics.codes import DiagnosticSpec, Severity
from leonbasic.text import LineSpan


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by line rules, the bracket scan and compiler mapping."""

    code: str
    message: str
    span: LineSpan
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def start_column(self) -> int:
        return self.span.start

    @property
    def end_column(self) -> int:
        return self.span.end

    @staticmethod
    def from_spec(spec: DiagnosticSpec, span: LineSpan, *, message: str | None = None) -> "Diagnostic":
        """Build a diagnostic from a catalogue entry, optionally overriding its message."""
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            span=span,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
