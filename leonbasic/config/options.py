"""Linter configuration options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

USE_COMPILER_ERRORS_KEY: Final[str] = "leonbasic.useCompilerErrors"
COMMENT_PREFIXES_KEY: Final[str] = "leonbasic.commentPrefixes"
DEBOUNCE_SECONDS_KEY: Final[str] = "leonbasic.debounceSeconds"


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Flags controlling which diagnostics are produced and how scans are scheduled."""

    use_compiler_errors: bool = False
    comment_prefixes: tuple[str, ...] = ("//",)
    debounce_seconds: float = 0.3

    def __post_init__(self):
        if self.debounce_seconds < 0:
            raise ValueError("debounce_seconds cannot be negative")
        if any(not prefix for prefix in self.comment_prefixes):
            raise ValueError("comment_prefixes cannot contain empty strings")

    @staticmethod
    def from_settings(settings: Mapping[str, object]) -> "LintOptions":
        """Build options from editor-style `leonbasic.*` settings; unknown keys are ignored."""
        defaults = LintOptions()

        use_compiler_errors = settings.get(USE_COMPILER_ERRORS_KEY, defaults.use_compiler_errors)
        if not isinstance(use_compiler_errors, bool):
            raise ValueError(f"`{USE_COMPILER_ERRORS_KEY}` must be a boolean, got {use_compiler_errors!r}")

        raw_prefixes = settings.get(COMMENT_PREFIXES_KEY, defaults.comment_prefixes)
        if isinstance(raw_prefixes, str) or not isinstance(raw_prefixes, (list, tuple)):
            raise ValueError(f"`{COMMENT_PREFIXES_KEY}` must be a list of strings, got {raw_prefixes!r}")
        if not all(isinstance(prefix, str) for prefix in raw_prefixes):
            raise ValueError(f"`{COMMENT_PREFIXES_KEY}` must be a list of strings, got {raw_prefixes!r}")

        debounce_seconds = settings.get(DEBOUNCE_SECONDS_KEY, defaults.debounce_seconds)
        # bool is an int subclass; reject it explicitly.
        if isinstance(debounce_seconds, bool) or not isinstance(debounce_seconds, (int, float)):
            raise ValueError(f"`{DEBOUNCE_SECONDS_KEY}` must be a number, got {debounce_seconds!r}")

        return LintOptions(
            use_compiler_errors=use_compiler_errors,
            comment_prefixes=tuple(raw_prefixes),
            debounce_seconds=float(debounce_seconds),
        )
