"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SCAN_REQUIRE_FORMAT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_REQUIRE_FORMAT",
    message='Invalid require statement. Expected `require("<module>");`.',
    hint="Quote the module name and close the call with `);`.",
    severity="error",
    category="format",
)

SCAN_PRINT_FORMAT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_PRINT_FORMAT",
    message="Possibly malformed `basic.print` call.",
    hint="Use `basic.print(<value>);` with the argument list closed on the same line.",
    severity="warning",
    category="format",
)

SCAN_VAR_FORMAT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_VAR_FORMAT",
    message="Invalid variable declaration. Expected `var(<name>) = <value>`.",
    hint="Variable names may only contain letters, digits and underscores.",
    severity="error",
    category="format",
)

SCAN_MISSING_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_MISSING_SEMICOLON",
    message="Statement may be missing a terminating `;`.",
    hint="End the statement with `;`.",
    severity="warning",
    category="style",
)

SCAN_EXTRA_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_EXTRA_CLOSING_BRACKET",
    message="extra closing bracket",
    hint="Remove the bracket or add the matching opener.",
    severity="error",
    category="bracket",
)

SCAN_MISMATCHED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_MISMATCHED_BRACKET",
    message="mismatched bracket",
    severity="error",
    category="bracket",
)

SCAN_UNCLOSED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SCAN_UNCLOSED_BRACKET",
    message="unclosed bracket",
    hint="Close the bracket before the end of the file.",
    severity="error",
    category="bracket",
)

COMPILER_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILER_ERROR",
    message="Interpreter reported an error.",
    severity="error",
    category="compiler",
)
