"""Camel Cards hands, bids and total winnings (day 7)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from aoc2023.camel.cards import Card, HandType, best_hand_type
from aoc2023.errors import ParseError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Hand:
    """Five cards with a bid; hands order by type, then card by card."""

    cards: tuple[Card, ...]
    bid: int
    hand_type: HandType

    @classmethod
    def new(cls, cards: tuple[Card, ...], bid: int) -> Hand:
        return cls(cards, bid, best_hand_type(cards))

    @property
    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        return int(self.hand_type), tuple(int(card) for card in self.cards)

    def __lt__(self, other: Hand) -> bool:
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{''.join(str(card) for card in self.cards)} {self.bid}"


def parse_hand(line: str, jokers: bool = False) -> Hand:
    """Parse ``"32T3K 765"``: card labels, whitespace, decimal bid."""
    stripped = line.rstrip("\r\n")
    end = 0
    while end < len(stripped) and stripped[end].isalnum() and stripped[end].isascii():
        end += 1
    labels = stripped[:end]
    if not labels:
        raise ParseError("Expected card labels", line, column=0)
    cards = tuple(Card.from_char(ch, jokers=jokers) for ch in labels)

    rest = stripped[end:]
    bid_text = rest.strip()
    if not rest[:1].isspace() or not bid_text.isdecimal() or not bid_text.isascii():
        raise ParseError("Expected whitespace and a bid", rest, column=end)
    return Hand.new(cards, int(bid_text))


def parse_hands(text: str, jokers: bool = False) -> list[Hand]:
    hands: list[Hand] = []
    for row, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        try:
            hands.append(parse_hand(line, jokers=jokers))
        except ParseError as exc:
            raise exc.at_row(row) from None
    _LOGGER.debug("Parsed %d hands (jokers=%s)", len(hands), jokers)
    return hands


def total_winnings(text: str, jokers: bool = False) -> int:
    """Sum of ``rank * bid`` with hands ranked from weakest (rank 1) upward."""
    hands = sorted(parse_hands(text, jokers=jokers))
    return sum(rank * hand.bid for rank, hand in enumerate(hands, start=1))
