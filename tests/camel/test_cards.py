"""Tests for Camel Cards ranks and hand types."""

import pytest

from aoc2023.camel.cards import (
    SUBSTITUTES,
    Card,
    HandType,
    best_hand_type,
    determine_hand_type,
)
from aoc2023.errors import ParseError

A, K, Q, J, T = Card.ACE, Card.KING, Card.QUEEN, Card.JACK, Card.TEN
TWO, THREE, FOUR, FIVE, SIX = Card.TWO, Card.THREE, Card.FOUR, Card.FIVE, Card.SIX
JOKER = Card.JOKER


class TestCard:
    def test_from_char(self) -> None:
        assert Card.from_char("T") == Card.TEN
        assert Card.from_char("9") == Card.NINE

    def test_jack_or_joker(self) -> None:
        assert Card.from_char("J") == Card.JACK
        assert Card.from_char("J", jokers=True) == Card.JOKER

    def test_invalid_label(self) -> None:
        with pytest.raises(ParseError, match="not a valid Camel Card"):
            Card.from_char("X")

    def test_strength_order(self) -> None:
        assert JOKER < TWO < T < J < Q < K < A

    def test_str(self) -> None:
        assert str(Card.TEN) == "T"
        assert str(JOKER) == "J"

    def test_substitutes_exclude_joker(self) -> None:
        assert JOKER not in SUBSTITUTES
        assert len(SUBSTITUTES) == 13


class TestHandType:
    def test_five_of_a_kind(self) -> None:
        assert determine_hand_type([A, A, A, A, A]) == HandType.FIVE_OF_A_KIND

    def test_four_of_a_kind(self) -> None:
        assert determine_hand_type([A, A, Card.EIGHT, A, A]) == HandType.FOUR_OF_A_KIND

    def test_full_house(self) -> None:
        assert determine_hand_type([TWO, THREE, THREE, THREE, TWO]) == HandType.FULL_HOUSE

    def test_three_of_a_kind(self) -> None:
        assert (
            determine_hand_type([T, T, T, Card.NINE, Card.EIGHT])
            == HandType.THREE_OF_A_KIND
        )

    def test_two_pair(self) -> None:
        assert determine_hand_type([TWO, THREE, FOUR, THREE, TWO]) == HandType.TWO_PAIR

    def test_one_pair(self) -> None:
        assert determine_hand_type([A, TWO, THREE, A, FOUR]) == HandType.ONE_PAIR

    def test_high_card(self) -> None:
        assert determine_hand_type([TWO, THREE, FOUR, FIVE, SIX]) == HandType.HIGH_CARD

    def test_type_order(self) -> None:
        assert HandType.HIGH_CARD < HandType.FULL_HOUSE < HandType.FIVE_OF_A_KIND


class TestJokers:
    def test_without_jokers_matches_plain_type(self) -> None:
        assert best_hand_type([TWO, THREE, FOUR, THREE, TWO]) == HandType.TWO_PAIR

    def test_joker_promotes_pair(self) -> None:
        assert best_hand_type([K, T, JOKER, JOKER, T]) == HandType.FOUR_OF_A_KIND

    def test_joker_makes_full_house(self) -> None:
        assert best_hand_type([TWO, TWO, JOKER, THREE, THREE]) == HandType.FULL_HOUSE

    def test_all_jokers(self) -> None:
        assert best_hand_type([JOKER] * 5) == HandType.FIVE_OF_A_KIND
