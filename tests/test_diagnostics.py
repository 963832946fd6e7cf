from leonbasic.diagnostics import (
    SCAN_MISSING_SEMICOLON,
    SCAN_UNCLOSED_BRACKET,
    Diagnostic,
    collect_diagnostics,
    count_by_severity,
    format_diagnostic,
    has_errors,
)
from leonbasic.text import LineSpan


def test_from_spec_copies_catalogue_fields() -> None:
    diagnostic = Diagnostic.from_spec(SCAN_UNCLOSED_BRACKET, LineSpan.at(3, 4, 1), message="unclosed bracket `{`")

    assert diagnostic.code == "SCAN_UNCLOSED_BRACKET"
    assert diagnostic.severity == "error"
    assert diagnostic.category == "bracket"
    assert diagnostic.hint == SCAN_UNCLOSED_BRACKET.hint
    assert (diagnostic.line, diagnostic.start_column, diagnostic.end_column) == (3, 4, 5)


def test_report_helpers() -> None:
    warning = Diagnostic.from_spec(SCAN_MISSING_SEMICOLON, LineSpan.empty(0, 9))
    error = Diagnostic.from_spec(SCAN_UNCLOSED_BRACKET, LineSpan.at(1, 0, 1))

    merged = collect_diagnostics([warning], (error,))

    assert merged == [warning, error]
    assert has_errors(merged) is True
    assert has_errors([warning]) is False
    assert count_by_severity(merged) == {"error": 1, "warning": 1}
    assert count_by_severity([]) == {"error": 0, "warning": 0}


def test_format_diagnostic_uses_one_based_positions() -> None:
    error = Diagnostic.from_spec(SCAN_UNCLOSED_BRACKET, LineSpan.at(1, 0, 1), message="unclosed bracket `(`")

    assert format_diagnostic("src/main.leon", error) == (
        "src/main.leon:2:1: error[SCAN_UNCLOSED_BRACKET] unclosed bracket `(`"
    )
