from dataclasses import dataclass
import re
from typing import Final

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True, order=True)
class LineSpan:
    """
    Half-open column range [start, end) on a single zero-based line.

    Invariant:
    - 0 <= line
    - 0 <= start <= end
    """

    line: int
    start: int
    end: int

    def __post_init__(self):
        if self.line < 0:
            raise ValueError("LineSpan line cannot be negative")
        if self.start < 0 or self.end < 0:
            raise ValueError("LineSpan columns cannot be negative")
        if self.start > self.end:
            raise ValueError("LineSpan invariant violated: start > end")

    @staticmethod
    def at(line: int, column: int, length: int) -> "LineSpan":
        """Create a LineSpan at column with given length."""
        return LineSpan(line, column, column + length)

    @staticmethod
    def empty(line: int, column: int) -> "LineSpan":
        """Create a zero-width LineSpan at the given column."""
        return LineSpan(line, column, column)

    def len(self) -> int:
        """Get the number of columns covered."""
        return self.end - self.start

    def is_empty(self) -> bool:
        """Check if the span is zero-width."""
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int, int]:
        """Get the span as a tuple of (line, start, end) integers."""
        return (self.line, self.start, self.end)

    def contains(self, column: int) -> bool:
        """Check if the span contains the given column."""
        return self.start <= column < self.end

    def __repr__(self) -> str:
        return f"LineSpan({self.line}, {self.start}, {self.end})"


def split_lines(source: str) -> list[str]:
    """Split source into lines without their terminators.

    A trailing line break does not start an extra empty line, matching how
    editors number the last line of a file.
    """
    if not source:
        return []
    lines = _LINE_BREAK.split(source)
    if lines[-1] == "":
        lines.pop()
    return lines


def trimmed_bounds(line: str) -> tuple[int, int]:
    """Columns of the first and one-past-last non-blank characters of line."""
    stripped = line.strip()
    if not stripped:
        return (0, 0)
    start = len(line) - len(line.lstrip())
    return (start, start + len(stripped))
