"""Lint session owning per-document diagnostics and the cached interpreter path."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from types import TracebackType

from leonbasic.compiler import (
    CompilerOutputSource,
    CompilerPathResolver,
    NullCompilerPathResolver,
    parse_compiler_output,
)
from leonbasic.config import LintOptions
from leonbasic.diagnostics import Diagnostic, sort_diagnostics
from leonbasic.lint import run_lint

logger = logging.getLogger(__name__)


class DiagnosticCollection:
    """Current diagnostics per document; at most one generation per document."""

    def __init__(self) -> None:
        self._by_document: dict[str, tuple[Diagnostic, ...]] = {}

    def set(self, document_id: str, diagnostics: Iterable[Diagnostic]) -> None:
        self._by_document[document_id] = tuple(diagnostics)

    def get(self, document_id: str) -> tuple[Diagnostic, ...]:
        return self._by_document.get(document_id, ())

    def clear(self, document_id: str) -> None:
        self._by_document.pop(document_id, None)

    def clear_all(self) -> None:
        self._by_document.clear()

    def documents(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_document))

    def __len__(self) -> int:
        return len(self._by_document)


class LintSession:
    """Created at startup, scanned per document, closed at shutdown."""

    def __init__(
        self,
        options: LintOptions | None = None,
        *,
        resolver: CompilerPathResolver | None = None,
        compiler: CompilerOutputSource | None = None,
    ) -> None:
        self._options = options or LintOptions()
        self._resolver: CompilerPathResolver = resolver or NullCompilerPathResolver()
        self._compiler = compiler
        self._collection = DiagnosticCollection()
        self._compiler_path: str | None = None
        self._closed = False

    @property
    def options(self) -> LintOptions:
        return self._options

    @property
    def closed(self) -> bool:
        return self._closed

    def scan_document(
        self,
        document_id: str,
        text: str,
        *,
        source_path: str | None = None,
    ) -> tuple[Diagnostic, ...]:
        """Scan a document and replace whatever diagnostics it had before."""
        self._ensure_open()
        result = run_lint(text, self._options)
        diagnostics = list(result.diagnostics)
        if self._options.use_compiler_errors:
            diagnostics.extend(self._compiler_diagnostics(result.lines, source_path))

        latest = tuple(sort_diagnostics(diagnostics))
        self._collection.clear(document_id)
        self._collection.set(document_id, latest)
        logger.debug("Published %d diagnostic(s) for %s", len(latest), document_id)
        return latest

    def diagnostics_for(self, document_id: str) -> tuple[Diagnostic, ...]:
        self._ensure_open()
        return self._collection.get(document_id)

    def documents(self) -> tuple[str, ...]:
        self._ensure_open()
        return self._collection.documents()

    def clear(self, document_id: str) -> None:
        self._ensure_open()
        self._collection.clear(document_id)

    def compiler_path(self) -> str | None:
        """Interpreter path, resolved on first use and cached for the session."""
        self._ensure_open()
        if self._compiler_path is None:
            self._compiler_path = self._resolver.resolve()
            if self._compiler_path is not None:
                logger.debug("Resolved interpreter path %s", self._compiler_path)
        return self._compiler_path

    def set_compiler_path(self, path: str) -> None:
        """Use an explicitly chosen interpreter and hand it to the resolver to remember."""
        self._ensure_open()
        if not path.strip():
            raise ValueError("Interpreter path cannot be empty")
        self._compiler_path = path
        self._resolver.persist(path)

    def forget_compiler_path(self) -> None:
        self._ensure_open()
        self._compiler_path = None

    def close(self) -> None:
        if self._closed:
            return
        self._collection.clear_all()
        self._compiler_path = None
        self._closed = True

    def __enter__(self) -> "LintSession":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _compiler_diagnostics(self, lines: tuple[str, ...], source_path: str | None) -> list[Diagnostic]:
        if self._compiler is None or source_path is None:
            return []
        compiler_path = self.compiler_path()
        if compiler_path is None:
            logger.debug("Interpreter errors requested but no interpreter path is configured")
            return []
        try:
            output = self._compiler.run(compiler_path, source_path)
        except OSError as exc:
            logger.warning("Running interpreter %s on %s failed: %s", compiler_path, source_path, exc)
            return []
        return parse_compiler_output(output.stderr, lines)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("LintSession is closed")
