"""Filesystem loaders for LeonBasic sources."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from leonbasic.config import LintOptions
from leonbasic.lint.results import LintRunResult
from leonbasic.lint.runner import run_lint

SOURCE_SUFFIX: Final[str] = ".leon"


@dataclass(frozen=True, slots=True)
class FileLintResult:
    """Scan result for one file on disk."""

    source_path: str
    had_bom: bool
    result: LintRunResult


def lint_file(path: str | Path, options: LintOptions | None = None) -> FileLintResult:
    """Scan one file from disk; raises OSError/UnicodeDecodeError for unreadable input."""
    file_path = Path(path)
    decoded = file_path.read_bytes().decode("utf-8")
    had_bom = decoded.startswith("\ufeff")
    text = decoded[1:] if had_bom else decoded
    return FileLintResult(
        source_path=str(file_path).replace("\\", "/"),
        had_bom=had_bom,
        result=run_lint(text, options),
    )


def collect_source_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand directories to their `*.leon` files; explicit files are kept as given."""
    collected: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        candidates = sorted(path.rglob(f"*{SOURCE_SUFFIX}")) if path.is_dir() else [path]
        for candidate in candidates:
            if path.is_dir() and not candidate.is_file():
                continue
            if candidate in seen:
                continue
            seen.add(candidate)
            collected.append(candidate)
    return collected
