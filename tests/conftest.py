"""Shared pytest fixtures: the worked examples from each puzzle description."""

from __future__ import annotations

import pytest

SCHEMATIC_SAMPLE = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""

CALIBRATION_SAMPLE = """\
1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet
"""

SPELLED_CALIBRATION_SAMPLE = """\
two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""

CUBE_SAMPLE = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""

CAMEL_SAMPLE = """\
32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


@pytest.fixture
def schematic_text() -> str:
    return SCHEMATIC_SAMPLE


@pytest.fixture
def calibration_text() -> str:
    return CALIBRATION_SAMPLE


@pytest.fixture
def spelled_calibration_text() -> str:
    return SPELLED_CALIBRATION_SAMPLE


@pytest.fixture
def cube_text() -> str:
    return CUBE_SAMPLE


@pytest.fixture
def camel_text() -> str:
    return CAMEL_SAMPLE
