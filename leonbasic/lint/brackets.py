"""Whole-document bracket balance scan."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Literal, Mapping, TypeAlias

from leonbasic.diagnostics import (
    SCAN_EXTRA_CLOSING_BRACKET,
    SCAN_MISMATCHED_BRACKET,
    SCAN_UNCLOSED_BRACKET,
    Diagnostic,
)
from leonbasic.text import LineSpan

OpeningBracket: TypeAlias = Literal["(", "{", "["]

CLOSER_BY_OPENER: Final[Mapping[str, str]] = MappingProxyType({"(": ")", "{": "}", "[": "]"})
_CLOSERS: Final[frozenset[str]] = frozenset(CLOSER_BY_OPENER.values())


@dataclass(frozen=True, slots=True)
class BracketFrame:
    """An opening bracket still waiting for its closer."""

    character: OpeningBracket
    line: int
    column: int

    @property
    def expected_closer(self) -> str:
        return CLOSER_BY_OPENER[self.character]


@dataclass(frozen=True, slots=True)
class BracketScanResult:
    diagnostics: tuple[Diagnostic, ...]
    unclosed: tuple[BracketFrame, ...]

    @property
    def is_balanced(self) -> bool:
        return not self.diagnostics


def scan_brackets(lines: Sequence[str]) -> BracketScanResult:
    """Match `()`, `{}` and `[]` across every character of every line in order.

    Extra and mismatched closers are reported as they are met. Openers left on
    the stack are reported after the pass, in the order they were opened.
    Brackets inside strings and comments are counted like any other.
    """
    diagnostics: list[Diagnostic] = []
    stack: list[BracketFrame] = []

    for line_number, line in enumerate(lines):
        for column, ch in enumerate(line):
            if ch in CLOSER_BY_OPENER:
                stack.append(BracketFrame(character=ch, line=line_number, column=column))  # type: ignore[arg-type]
                continue
            if ch not in _CLOSERS:
                continue

            span = LineSpan.at(line_number, column, 1)
            if not stack:
                diagnostics.append(Diagnostic.from_spec(SCAN_EXTRA_CLOSING_BRACKET, span))
                continue

            frame = stack.pop()
            if frame.expected_closer != ch:
                diagnostics.append(
                    Diagnostic.from_spec(
                        SCAN_MISMATCHED_BRACKET,
                        span,
                        message=f"{SCAN_MISMATCHED_BRACKET.message}, expected `{frame.expected_closer}`",
                    )
                )

    unclosed = tuple(stack)
    for frame in unclosed:
        diagnostics.append(
            Diagnostic.from_spec(
                SCAN_UNCLOSED_BRACKET,
                LineSpan.at(frame.line, frame.column, 1),
                message=f"{SCAN_UNCLOSED_BRACKET.message} `{frame.character}`",
            )
        )

    return BracketScanResult(diagnostics=tuple(diagnostics), unclosed=unclosed)
