"""Combinator-style parser for cube-game records.

Every parser takes the remaining input and returns ``(remaining, value)``, or
raises :class:`ParseError` carrying the input it could not consume::

    Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from aoc2023.cubes.models import MAX_DICE, Color, Dice, Game, ImpossibleGameError
from aoc2023.errors import ParseError

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
Parser = Callable[[str], tuple[str, T]]


# ── Primitives ──────────────────────────────────────────────────────────────


def _tag(text: str, prefix: str) -> str:
    if not text.startswith(prefix):
        raise ParseError(f"Expected {prefix!r}", text)
    return text[len(prefix) :]


def _optional_tag(text: str, prefix: str) -> str:
    return text[len(prefix) :] if text.startswith(prefix) else text


def _take_while(text: str, predicate: Callable[[str], bool]) -> tuple[str, str]:
    end = 0
    while end < len(text) and predicate(text[end]):
        end += 1
    return text[end:], text[:end]


def _space0(text: str) -> str:
    return _take_while(text, str.isspace)[0]


def _digit1(text: str) -> tuple[str, int]:
    rest, digits = _take_while(text, lambda ch: "0" <= ch <= "9")
    if not digits:
        raise ParseError("Expected digits", text)
    return rest, int(digits)


def _many1(parser: Parser[T], text: str) -> tuple[str, list[T]]:
    text, first = parser(text)
    items = [first]
    while True:
        try:
            text, item = parser(text)
        except ParseError:
            return text, items
        items.append(item)


# ── Grammar ─────────────────────────────────────────────────────────────────


def game_number(text: str) -> tuple[str, int]:
    """``"Game 12"`` up to (not including) the colon."""
    rest = _tag(text, "Game ")
    try:
        rest, number = _digit1(rest)
    except ParseError:
        raise ParseError("Expected game number", text) from None
    if not rest.startswith(":"):
        raise ParseError("Expected game number", text)
    return rest, number


def quantity_color(text: str) -> tuple[str, tuple[int, Color]]:
    """``" 3 blue,"`` -> ``(3, Color.BLUE)``; the trailing comma is optional."""
    rest, quantity = _digit1(_space0(text))
    rest, word = _take_while(_space0(rest), str.isalpha)
    color = Color.parse(word)
    return _optional_tag(rest, ","), (quantity, color)


def quantity_color_multiple(text: str) -> tuple[str, list[tuple[int, Color]]]:
    return _many1(quantity_color, text)


def parse_draw(text: str) -> tuple[str, Dice]:
    """One draw, ending at an optional ``;``."""
    rest, counts = quantity_color_multiple(text)
    return _optional_tag(rest, ";"), Dice.from_counts(counts)


def parse_game(text: str) -> tuple[str, Game]:
    """One ``Game N: ...`` record, consuming an optional trailing newline."""
    rest, number = game_number(text)
    rest = _tag(rest, ":")
    rest, draws = _many1(parse_draw, rest)
    rest = _optional_tag(rest, "\n")
    return rest, Game(number, tuple(draws))


def game_from_line(line: str) -> Game:
    """Parse a whole line, rejecting unconsumed input."""
    rest, game = parse_game(line)
    if rest.strip():
        raise ParseError("Unexpected trailing input", rest, column=len(line) - len(rest))
    return game


def parse_games(text: str) -> list[Game]:
    games: list[Game] = []
    for row, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        try:
            games.append(game_from_line(line))
        except ParseError as exc:
            raise exc.at_row(row) from None
    _LOGGER.debug("Parsed %d games", len(games))
    return games


# ── Answers ─────────────────────────────────────────────────────────────────


def sum_possible_game_numbers(text: str, limit: Dice = MAX_DICE) -> int:
    """Sum of the numbers of games that fit in a bag holding *limit* cubes."""
    total = 0
    for game in parse_games(text):
        try:
            total += game.validate(limit).number
        except ImpossibleGameError as exc:
            _LOGGER.debug("Skipping impossible game: %s", exc)
    return total


def sum_of_powers(text: str) -> int:
    """Sum over games of the power of the smallest bag that fits the game."""
    return sum(game.most_dice_shown().power for game in parse_games(text))
