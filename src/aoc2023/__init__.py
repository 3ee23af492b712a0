"""Advent of Code 2023 solutions: one pure text-to-integer solver per puzzle.

Quick start::

    from pathlib import Path

    from aoc2023.puzzles import solve

    print(solve(3, 1, Path("puzzle_inputs/input.txt").read_text()))
"""

from aoc2023.errors import ParseError
from aoc2023.puzzles import SOLVERS, UnknownPuzzleError, solve

__all__ = [
    "ParseError",
    "SOLVERS",
    "UnknownPuzzleError",
    "solve",
]
