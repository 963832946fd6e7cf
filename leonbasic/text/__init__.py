"""Text positions and line splitting."""

from leonbasic.text.text import LineSpan, split_lines, trimmed_bounds

__all__ = [
    "LineSpan",
    "split_lines",
    "trimmed_bounds",
]
