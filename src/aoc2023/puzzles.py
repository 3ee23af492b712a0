"""Registry of puzzle solvers keyed by ``(day, part)``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import partial
from types import MappingProxyType
from typing import TypeAlias

from aoc2023.calibration import sum_calibration_values
from aoc2023.camel import total_winnings
from aoc2023.cubes import sum_of_powers, sum_possible_game_numbers
from aoc2023.schematic import parse_schematic, sum_gear_ratios, sum_part_numbers

Solver: TypeAlias = Callable[[str], int]
PuzzleId: TypeAlias = tuple[int, int]


class UnknownPuzzleError(KeyError):
    """No solver is registered for the requested day and part."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown puzzle"


def _part_numbers(text: str) -> int:
    return sum_part_numbers(parse_schematic(text))


def _gear_ratios(text: str) -> int:
    return sum_gear_ratios(parse_schematic(text))


SOLVERS: Mapping[PuzzleId, Solver] = MappingProxyType(
    {
        (1, 1): sum_calibration_values,
        (1, 2): partial(sum_calibration_values, spelled=True),
        (2, 1): sum_possible_game_numbers,
        (2, 2): sum_of_powers,
        (3, 1): _part_numbers,
        (3, 2): _gear_ratios,
        (7, 1): total_winnings,
        (7, 2): partial(total_winnings, jokers=True),
    }
)


def solver_for(day: int, part: int) -> Solver:
    try:
        return SOLVERS[(day, part)]
    except KeyError:
        raise UnknownPuzzleError(f"No solver for day {day} part {part}") from None


def solve(day: int, part: int, text: str) -> int:
    """Answer for puzzle ``(day, part)`` given its input *text*."""
    return solver_for(day, part)(text)
