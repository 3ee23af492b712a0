"""Camel Cards card and hand-type enumerations (day 7)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from enum import IntEnum

from aoc2023.errors import ParseError


class Card(IntEnum):
    """Card ranks valued by strength; ``JOKER`` replaces ``JACK`` under the joker rule."""

    JOKER = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def from_char(cls, char: str, jokers: bool = False) -> Card:
        """Card for a label such as ``'T'``; ``'J'`` is a joker when *jokers* is set."""
        if jokers and char == "J":
            return cls.JOKER
        try:
            return _LABELS[char]
        except KeyError:
            raise ParseError(f"{char!r} is not a valid Camel Card", char) from None

    def __str__(self) -> str:
        return "J" if self is Card.JOKER else _CHARS[self]


_LABELS: dict[str, Card] = {
    "A": Card.ACE,
    "K": Card.KING,
    "Q": Card.QUEEN,
    "J": Card.JACK,
    "T": Card.TEN,
    "9": Card.NINE,
    "8": Card.EIGHT,
    "7": Card.SEVEN,
    "6": Card.SIX,
    "5": Card.FIVE,
    "4": Card.FOUR,
    "3": Card.THREE,
    "2": Card.TWO,
}
_CHARS: dict[Card, str] = {v: k for k, v in _LABELS.items()}

# Cards a joker may stand in for.
SUBSTITUTES: tuple[Card, ...] = tuple(card for card in Card if card is not Card.JOKER)


class HandType(IntEnum):
    """Hand categories ordered from weakest to strongest."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7


def determine_hand_type(cards: Iterable[Card]) -> HandType:
    """Classify *cards* by how many of each rank they hold."""
    counts = sorted(Counter(cards).values(), reverse=True)
    if not counts:
        raise ValueError("Cannot classify an empty hand")
    top = counts[0]
    second = counts[1] if len(counts) > 1 else 0
    if top >= 5:
        return HandType.FIVE_OF_A_KIND
    if top == 4:
        return HandType.FOUR_OF_A_KIND
    if top == 3:
        return HandType.FULL_HOUSE if second == 2 else HandType.THREE_OF_A_KIND
    if top == 2:
        return HandType.TWO_PAIR if second == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


def best_hand_type(cards: Iterable[Card]) -> HandType:
    """Strongest type reachable by turning every joker into one other card."""
    hand = tuple(cards)
    if Card.JOKER not in hand:
        return determine_hand_type(hand)
    return max(
        determine_hand_type(sub if card is Card.JOKER else card for card in hand)
        for sub in SUBSTITUTES
    )
