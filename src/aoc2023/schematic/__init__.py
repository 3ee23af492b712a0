"""Engine schematic (day 3): grid tokenizer, indexer and adjacency queries.

Quick start::

    from aoc2023.schematic import parse_schematic, sum_part_numbers

    schematic = parse_schematic(text)
    print(sum_part_numbers(schematic))
"""

from aoc2023.schematic.adjacency import (
    GEAR_SYMBOL,
    adjacent_numbers,
    gears,
    is_adjacent,
    is_part_number,
    neighbourhood,
    part_numbers,
    sum_gear_ratios,
    sum_part_numbers,
)
from aoc2023.schematic.indexer import parse_schematic
from aoc2023.schematic.models import (
    Coordinate,
    Filler,
    GridNumber,
    NumberToken,
    Schematic,
    SymbolMap,
    SymbolToken,
    Token,
)
from aoc2023.schematic.tokenizer import RowTokens, tokenize_row

__all__ = [
    # Models
    "Coordinate",
    "Filler",
    "GridNumber",
    "NumberToken",
    "Schematic",
    "SymbolMap",
    "SymbolToken",
    "Token",
    # Parsing
    "RowTokens",
    "parse_schematic",
    "tokenize_row",
    # Queries
    "GEAR_SYMBOL",
    "adjacent_numbers",
    "gears",
    "is_adjacent",
    "is_part_number",
    "neighbourhood",
    "part_numbers",
    "sum_gear_ratios",
    "sum_part_numbers",
]
