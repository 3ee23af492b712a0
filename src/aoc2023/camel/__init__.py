"""Camel Cards (day 7): hand ranking with and without jokers."""

from aoc2023.camel.cards import (
    SUBSTITUTES,
    Card,
    HandType,
    best_hand_type,
    determine_hand_type,
)
from aoc2023.camel.hands import Hand, parse_hand, parse_hands, total_winnings

__all__ = [
    "SUBSTITUTES",
    "Card",
    "Hand",
    "HandType",
    "best_hand_type",
    "determine_hand_type",
    "parse_hand",
    "parse_hands",
    "total_winnings",
]
