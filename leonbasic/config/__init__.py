"""Configuration."""

from leonbasic.config.options import (
    COMMENT_PREFIXES_KEY,
    DEBOUNCE_SECONDS_KEY,
    USE_COMPILER_ERRORS_KEY,
    LintOptions,
)

__all__ = [
    "COMMENT_PREFIXES_KEY",
    "DEBOUNCE_SECONDS_KEY",
    "USE_COMPILER_ERRORS_KEY",
    "LintOptions",
]
