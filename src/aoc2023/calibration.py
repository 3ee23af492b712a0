"""Trebuchet calibration values (day 1)."""

from __future__ import annotations

import logging
from types import MappingProxyType

from aoc2023.errors import ParseError

_LOGGER = logging.getLogger(__name__)

SPELLED_DIGITS = MappingProxyType(
    {
        "zero": 0,
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
    }
)
_SPELLED_LENGTHS = sorted({len(word) for word in SPELLED_DIGITS})


def _ascii_digit(ch: str) -> int | None:
    return ord(ch) - ord("0") if "0" <= ch <= "9" else None


def digits_in(text: str, spelled: bool = False) -> list[int]:
    """Digits of *text* in reading order.

    With *spelled*, words such as ``"seven"`` also count. A spelled word may
    share its last letter with the next one, so ``"oneight"`` yields 1 and 8.
    """
    digits: list[int] = []
    i = 0
    while i < len(text):
        digit = _ascii_digit(text[i])
        if digit is not None:
            digits.append(digit)
            i += 1
            continue
        if spelled:
            for size in _SPELLED_LENGTHS:
                word_digit = SPELLED_DIGITS.get(text[i : i + size])
                if word_digit is not None:
                    digits.append(word_digit)
                    i += size - 1
                    break
            else:
                i += 1
            continue
        i += 1
    return digits


def calibration_value(line: str, spelled: bool = False) -> int:
    """Two-digit number formed by the first and last digit of *line*."""
    digits = digits_in(line, spelled=spelled)
    if not digits:
        raise ParseError("No digits found", line)
    return digits[0] * 10 + digits[-1]


def sum_calibration_values(text: str, spelled: bool = False) -> int:
    lines = text.rstrip().split("\n")
    total = 0
    for row, line in enumerate(lines):
        try:
            total += calibration_value(line.rstrip("\r"), spelled=spelled)
        except ParseError as exc:
            raise exc.at_row(row) from None
    _LOGGER.debug("Summed %d calibration values", len(lines))
    return total
