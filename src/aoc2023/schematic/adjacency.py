"""Adjacency queries over a parsed schematic: part numbers and gear ratios.

A number's adjacency rectangle spans one row above and below it and one
column either side of its digits::

    rows  max(row - 1, 0) .. row + 1
    cols  max(col - 1, 0) .. col + length      (both inclusive)

Coordinates are clipped at 0 so numbers on the first row or column never
look at negative cells.
"""

from __future__ import annotations

from collections.abc import Iterator

from aoc2023.schematic.models import Coordinate, GridNumber, Schematic

GEAR_SYMBOL = "*"


def neighbourhood(number: GridNumber) -> Iterator[Coordinate]:
    """Every cell of the adjacency rectangle around *number*, digits included."""
    for row in range(max(number.row - 1, 0), number.row + 2):
        for col in range(max(number.col - 1, 0), number.end_col + 1):
            yield row, col


def is_adjacent(number: GridNumber, row: int, col: int) -> bool:
    """Whether the cell ``(row, col)`` lies inside *number*'s adjacency rectangle."""
    return (
        max(number.row - 1, 0) <= row <= number.row + 1
        and max(number.col - 1, 0) <= col <= number.end_col
    )


# ── Part numbers ────────────────────────────────────────────────────────────


def is_part_number(schematic: Schematic, number: GridNumber) -> bool:
    symbols = schematic.symbols
    return any(cell in symbols for cell in neighbourhood(number))


def part_numbers(schematic: Schematic) -> list[GridNumber]:
    """Numbers touching at least one symbol, in scan order."""
    return [n for n in schematic.numbers if is_part_number(schematic, n)]


def sum_part_numbers(schematic: Schematic) -> int:
    """Sum of all part numbers; each number counts once however many symbols it touches."""
    return sum(n.value for n in part_numbers(schematic))


# ── Gears ───────────────────────────────────────────────────────────────────


def adjacent_numbers(schematic: Schematic, row: int, col: int) -> list[GridNumber]:
    """Distinct numbers whose adjacency rectangle contains ``(row, col)``."""
    return [n for n in schematic.numbers if is_adjacent(n, row, col)]


def gears(
    schematic: Schematic,
) -> Iterator[tuple[Coordinate, tuple[GridNumber, GridNumber]]]:
    """Yield each ``*`` cell that touches exactly two numbers, with those numbers."""
    for cell, symbol in schematic.symbols.items():
        if symbol != GEAR_SYMBOL:
            continue
        found = adjacent_numbers(schematic, *cell)
        if len(found) == 2:
            yield cell, (found[0], found[1])


def gear_ratio(pair: tuple[GridNumber, GridNumber]) -> int:
    first, second = pair
    return first.value * second.value


def sum_gear_ratios(schematic: Schematic) -> int:
    """Sum of ``a * b`` over every gear; stars with 0, 1 or 3+ neighbours add nothing."""
    return sum(gear_ratio(pair) for _cell, pair in gears(schematic))
