from dataclasses import dataclass, field
import logging

import pytest

from leonbasic.compiler import CompilerOutput, StaticCompilerPathResolver
from leonbasic.config import LintOptions
from leonbasic.session import LintSession


@dataclass(slots=True)
class FakeCompiler:
    stderr: str = ""
    calls: list[tuple[str, str]] = field(default_factory=list)

    def run(self, compiler_path: str, source_path: str) -> CompilerOutput:
        self.calls.append((compiler_path, source_path))
        return CompilerOutput(stdout="", stderr=self.stderr)


class FailingCompiler:
    def run(self, compiler_path: str, source_path: str) -> CompilerOutput:
        raise FileNotFoundError(compiler_path)


@dataclass(slots=True)
class CountingResolver:
    path: str | None = "/opt/leon/leonlang"
    resolve_calls: int = 0

    def resolve(self) -> str | None:
        self.resolve_calls += 1
        return self.path

    def persist(self, path: str) -> None:
        self.path = path


def test_scan_publishes_diagnostics_for_document() -> None:
    session = LintSession()

    published = session.scan_document("main.leon", "require(lib);\n")

    assert [d.code for d in published] == ["SCAN_REQUIRE_FORMAT"]
    assert session.diagnostics_for("main.leon") == published
    assert session.documents() == ("main.leon",)


def test_rescan_replaces_previous_generation() -> None:
    session = LintSession()
    session.scan_document("main.leon", "require(lib);\n(\n")

    session.scan_document("main.leon", 'require("lib");\n')

    assert session.diagnostics_for("main.leon") == ()


def test_documents_are_tracked_independently() -> None:
    session = LintSession()
    session.scan_document("a.leon", "var(x)5;\n")
    session.scan_document("b.leon", "var(x) = 5;\n")

    session.clear("a.leon")

    assert session.diagnostics_for("a.leon") == ()
    assert session.diagnostics_for("b.leon") == ()
    assert session.documents() == ("b.leon",)


def test_compiler_is_not_consulted_unless_enabled() -> None:
    compiler = FakeCompiler(stderr="line 1: boom")
    session = LintSession(resolver=CountingResolver(), compiler=compiler)

    session.scan_document("main.leon", "var(x) = 5;\n", source_path="/src/main.leon")

    assert compiler.calls == []


def test_compiler_errors_are_merged_when_enabled() -> None:
    compiler = FakeCompiler(stderr="Error on line 2: undefined function basic.prnt\n")
    session = LintSession(
        LintOptions(use_compiler_errors=True),
        resolver=CountingResolver(),
        compiler=compiler,
    )

    diagnostics = session.scan_document(
        "main.leon",
        'require("basic");\nbasic.prnt(1);\n',
        source_path="/src/main.leon",
    )

    assert compiler.calls == [("/opt/leon/leonlang", "/src/main.leon")]
    assert [(d.code, d.span.line) for d in diagnostics] == [("COMPILER_ERROR", 1)]


def test_compiler_is_skipped_without_source_path_or_interpreter() -> None:
    compiler = FakeCompiler(stderr="line 1: boom")
    options = LintOptions(use_compiler_errors=True)

    LintSession(options, resolver=CountingResolver(), compiler=compiler).scan_document("main.leon", "a;\n")
    LintSession(options, resolver=CountingResolver(path=None), compiler=compiler).scan_document(
        "main.leon", "a;\n", source_path="/src/main.leon"
    )

    assert compiler.calls == []


def test_compiler_failure_is_logged_and_scan_proceeds(caplog: pytest.LogCaptureFixture) -> None:
    session = LintSession(
        LintOptions(use_compiler_errors=True),
        resolver=CountingResolver(),
        compiler=FailingCompiler(),
    )

    with caplog.at_level(logging.WARNING, logger="leonbasic.session.session"):
        diagnostics = session.scan_document("main.leon", "var(x)5;\n", source_path="/src/main.leon")

    assert [d.code for d in diagnostics] == ["SCAN_VAR_FORMAT"]
    assert "failed" in caplog.text


def test_compiler_path_is_resolved_once_and_cached() -> None:
    resolver = CountingResolver()
    session = LintSession(resolver=resolver)

    assert session.compiler_path() == "/opt/leon/leonlang"
    assert session.compiler_path() == "/opt/leon/leonlang"
    assert resolver.resolve_calls == 1

    session.forget_compiler_path()
    session.compiler_path()
    assert resolver.resolve_calls == 2


def test_set_compiler_path_persists_through_resolver() -> None:
    resolver = StaticCompilerPathResolver()
    session = LintSession(resolver=resolver)

    assert session.compiler_path() is None
    session.set_compiler_path("/usr/local/bin/leonlang")

    assert session.compiler_path() == "/usr/local/bin/leonlang"
    assert resolver.persisted == ["/usr/local/bin/leonlang"]

    with pytest.raises(ValueError, match="cannot be empty"):
        session.set_compiler_path("  ")


def test_close_tears_down_state() -> None:
    with LintSession() as session:
        session.scan_document("main.leon", "(\n")
        assert session.documents() == ("main.leon",)

    assert session.closed
    session.close()
    with pytest.raises(RuntimeError, match="closed"):
        session.scan_document("main.leon", "(\n")
    with pytest.raises(RuntimeError, match="closed"):
        session.diagnostics_for("main.leon")
