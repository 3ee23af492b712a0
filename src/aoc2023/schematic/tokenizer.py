"""Row tokenizer for the engine schematic grid."""

from __future__ import annotations

from collections.abc import Iterator

from aoc2023.errors import ParseError
from aoc2023.schematic.models import Filler, NumberToken, SymbolToken, Token

FILLER_CHAR = "."
_DIGITS = frozenset("0123456789")


def is_symbol_char(ch: str) -> bool:
    """Whether *ch* is a symbol cell: printable, not blank, not a digit or dot."""
    return (
        ch != FILLER_CHAR
        and ch not in _DIGITS
        and ch.isprintable()
        and not ch.isspace()
    )


def _run_end(line: str, start: int, chars: frozenset[str] | str) -> int:
    end = start
    while end < len(line) and line[end] in chars:
        end += 1
    return end


class RowTokens:
    """Lazy token sequence for a single grid row.

    Iterating scans the row from column 0 every time, so the same instance can
    be walked more than once. A character that fits no token class raises
    :class:`ParseError` when the scan reaches it.
    """

    __slots__ = ("line",)

    def __init__(self, line: str) -> None:
        self.line = line

    def __iter__(self) -> Iterator[Token]:
        line = self.line
        if not line:
            raise ParseError("Empty schematic row", line, column=0)
        col = 0
        while col < len(line):
            ch = line[col]
            if ch == FILLER_CHAR:
                end = _run_end(line, col, FILLER_CHAR)
                yield Filler(end - col)
            elif ch in _DIGITS:
                end = _run_end(line, col, _DIGITS)
                yield NumberToken(line[col:end])
            elif is_symbol_char(ch):
                end = col + 1
                yield SymbolToken(ch)
            else:
                raise ParseError("Unexpected character", line[col:], column=col)
            col = end

    def __repr__(self) -> str:
        return f"RowTokens({self.line!r})"


def tokenize_row(line: str) -> RowTokens:
    """Split one row (without its newline) into filler, number and symbol tokens."""
    return RowTokens(line)
