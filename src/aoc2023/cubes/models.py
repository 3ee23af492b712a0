"""Cube-game value objects (day 2)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from aoc2023.errors import ParseError


class ImpossibleGameError(ValueError):
    """A game shows more cubes of some colour than the bag can hold."""


class Color(StrEnum):
    """Cube colour."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @classmethod
    def parse(cls, word: str) -> Color:
        try:
            return cls(word.lower())
        except ValueError:
            raise ParseError("Unknown cube colour", word) from None


@dataclass(frozen=True, slots=True)
class Dice:
    """Cube counts per colour for one draw (or one bag)."""

    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def from_counts(cls, counts: Iterable[tuple[int, Color]]) -> Dice:
        """Build from ``(quantity, colour)`` pairs; the first pair per colour wins."""
        seen: dict[Color, int] = {}
        for quantity, color in counts:
            seen.setdefault(color, quantity)
        return cls(
            red=seen.get(Color.RED, 0),
            green=seen.get(Color.GREEN, 0),
            blue=seen.get(Color.BLUE, 0),
        )

    def fits_within(self, limit: Dice) -> bool:
        return (
            self.red <= limit.red
            and self.green <= limit.green
            and self.blue <= limit.blue
        )

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue


# Bag contents the elf asks about in part one.
MAX_DICE = Dice(red=12, green=13, blue=14)


@dataclass(frozen=True, slots=True)
class Game:
    """A numbered game and the draws revealed during it."""

    number: int
    draws: tuple[Dice, ...]

    def validate(self, limit: Dice) -> Game:
        """Return ``self`` or raise :class:`ImpossibleGameError`."""
        for idx, draw in enumerate(self.draws):
            if not draw.fits_within(limit):
                raise ImpossibleGameError(
                    f"Game {self.number}: draw {idx + 1} {draw} exceeds {limit}"
                )
        return self

    def most_dice_shown(self) -> Dice:
        """Smallest bag that could have produced every draw."""
        return Dice(
            red=max((d.red for d in self.draws), default=0),
            green=max((d.green for d in self.draws), default=0),
            blue=max((d.blue for d in self.draws), default=0),
        )
