"""Tokenizer turning a KiCad placement report into collector events."""
from typing import Iterable, Iterator, Optional, TextIO

from rpt2paste.errors import ReportSyntaxError

from .models import (
    ComponentEnd, ComponentStart, Drill, Event, Orientation,
    PadEnd, PadStart, Position, Size
)

# Keywords carrying numeric operands, with the number of operands
NUMERIC_KEYWORDS = {
    "position": 2,
    "size": 2,
    "drill": 1,
    "orientation": 1,
}


class _Tokens:
    """Whitespace-separated tokens with one token of lookahead."""

    def __init__(self, lines: Iterable[str]):
        self._iter = (tok for line in lines for tok in line.split())
        self._peeked: Optional[str] = None

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if self._peeked is not None:
            tok, self._peeked = self._peeked, None
            return tok
        return next(self._iter)

    def peek(self) -> Optional[str]:
        if self._peeked is None:
            self._peeked = next(self._iter, None)
        return self._peeked


def _read_numbers(tokens: _Tokens, keyword: str, count: int) -> list[float]:
    """Read the numeric operands following a keyword."""
    values = []
    for _ in range(count):
        tok = next(tokens, None)
        if tok is None:
            raise ReportSyntaxError(f"'{keyword}' is missing an operand at end of report")
        try:
            values.append(float(tok))
        except ValueError:
            raise ReportSyntaxError(f"'{keyword}' expects a number, got {tok!r}") from None
    return values


def _read_quoted_name(tokens: _Tokens) -> str:
    """Consume a quoted name like ``"R12"`` if one follows."""
    tok = tokens.peek()
    if tok is None or not tok.startswith('"'):
        return ""
    next(tokens)
    return tok.strip('"')


def tokenize_report(stream: TextIO | Iterable[str]) -> Iterator[Event]:
    """
    Yield collector events for a report text stream.

    Tokens outside the known vocabulary are skipped, so header sections and
    per-pad fields like ``shape`` or ``layer`` pass through unnoticed.
    """
    tokens = _Tokens(stream)
    for tok in tokens:
        if tok == "$MODULE":
            yield ComponentStart(reference=_read_quoted_name(tokens))
        elif tok == "$EndMODULE":
            yield ComponentEnd()
        elif tok == "$PAD":
            yield PadStart(name=_read_quoted_name(tokens))
        elif tok == "$EndPAD":
            yield PadEnd()
        elif tok in NUMERIC_KEYWORDS:
            values = _read_numbers(tokens, tok, NUMERIC_KEYWORDS[tok])
            if tok == "position":
                yield Position(values[0], values[1])
            elif tok == "size":
                yield Size(values[0], values[1])
            elif tok == "drill":
                yield Drill(values[0])
            else:
                yield Orientation(values[0])
