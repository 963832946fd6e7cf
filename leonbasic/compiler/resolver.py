"""Interpreter path resolver contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class CompilerPathResolver(Protocol):
    """Finds the LeonBasic interpreter executable and remembers a chosen path."""

    def resolve(self) -> str | None: ...

    def persist(self, path: str) -> None: ...


@dataclass(frozen=True, slots=True)
class NullCompilerPathResolver:
    """Default resolver when no interpreter is configured."""

    def resolve(self) -> str | None:
        return None

    def persist(self, path: str) -> None:
        return None


@dataclass(slots=True)
class StaticCompilerPathResolver:
    """In-memory resolver for tests and local wiring."""

    path: str | None = None
    persisted: list[str] = field(default_factory=list)

    def resolve(self) -> str | None:
        return _normalize_path(self.path)

    def persist(self, path: str) -> None:
        self.path = path
        self.persisted.append(path)


def _normalize_path(path: str | None) -> str | None:
    if path is None:
        return None
    stripped = path.strip()
    if not stripped:
        return None
    return stripped
