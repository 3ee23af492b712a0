"""Cube games (day 2): record parser, bag limits and minimum bags."""

from aoc2023.cubes.models import MAX_DICE, Color, Dice, Game, ImpossibleGameError
from aoc2023.cubes.parse import (
    game_from_line,
    game_number,
    parse_draw,
    parse_game,
    parse_games,
    quantity_color,
    quantity_color_multiple,
    sum_of_powers,
    sum_possible_game_numbers,
)

__all__ = [
    "MAX_DICE",
    "Color",
    "Dice",
    "Game",
    "ImpossibleGameError",
    "game_from_line",
    "game_number",
    "parse_draw",
    "parse_game",
    "parse_games",
    "quantity_color",
    "quantity_color_multiple",
    "sum_of_powers",
    "sum_possible_game_numbers",
]
