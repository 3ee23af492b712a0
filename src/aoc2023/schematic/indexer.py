"""Build a :class:`Schematic` from puzzle text."""

from __future__ import annotations

import logging

from aoc2023.errors import ParseError
from aoc2023.schematic.models import (
    Coordinate,
    Filler,
    GridNumber,
    NumberToken,
    Schematic,
    SymbolToken,
)
from aoc2023.schematic.tokenizer import tokenize_row

_LOGGER = logging.getLogger(__name__)


def parse_schematic(text: str) -> Schematic:
    """Parse every row of *text* into numbers and a sparse symbol map."""
    numbers: list[GridNumber] = []
    symbols: dict[Coordinate, str] = {}
    rows = text.splitlines()
    width = 0

    for row, line in enumerate(rows):
        col = 0
        try:
            for token in tokenize_row(line):
                if isinstance(token, Filler):
                    col += token.length
                elif isinstance(token, SymbolToken):
                    symbols[(row, col)] = token.char
                    col += 1
                elif isinstance(token, NumberToken):
                    numbers.append(GridNumber(token.value, row, col, token.length))
                    col += token.length
        except ParseError as exc:
            raise exc.at_row(row) from None
        width = max(width, col)

    _LOGGER.debug(
        "Parsed schematic: %d rows, %d numbers, %d symbols",
        len(rows),
        len(numbers),
        len(symbols),
    )
    return Schematic(tuple(numbers), symbols, height=len(rows), width=width)
