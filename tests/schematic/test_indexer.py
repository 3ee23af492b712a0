"""Tests for building a Schematic from puzzle text."""

import pytest

from aoc2023.errors import ParseError
from aoc2023.schematic.indexer import parse_schematic
from aoc2023.schematic.models import GridNumber


class TestParseSample:
    def test_number_count(self, schematic_text: str) -> None:
        assert len(parse_schematic(schematic_text).numbers) == 10

    def test_first_row_numbers(self, schematic_text: str) -> None:
        schematic = parse_schematic(schematic_text)
        assert schematic.numbers[0] == GridNumber(467, 0, 0, 3)
        assert schematic.numbers[1] == GridNumber(114, 0, 5, 3)

    def test_numbers_in_scan_order(self, schematic_text: str) -> None:
        schematic = parse_schematic(schematic_text)
        positions = [(n.row, n.col) for n in schematic.numbers]
        assert positions == sorted(positions)

    def test_symbols(self, schematic_text: str) -> None:
        schematic = parse_schematic(schematic_text)
        assert dict(schematic.symbols) == {
            (1, 3): "*",
            (3, 6): "#",
            (4, 3): "*",
            (5, 5): "+",
            (8, 3): "$",
            (8, 5): "*",
        }

    def test_dimensions(self, schematic_text: str) -> None:
        schematic = parse_schematic(schematic_text)
        assert schematic.height == 10
        assert schematic.width == 10

    def test_number_spans_match_source(self, schematic_text: str) -> None:
        """Each recorded span reads back as the number's digits, and is maximal."""
        lines = schematic_text.splitlines()
        for number in parse_schematic(schematic_text).numbers:
            line = lines[number.row]
            assert int(line[number.col : number.end_col]) == number.value
            assert all(line[c].isdigit() for c in number.span)
            if number.col > 0:
                assert not line[number.col - 1].isdigit()
            if number.end_col < len(line):
                assert not line[number.end_col].isdigit()

    def test_no_overlapping_numbers_in_a_row(self, schematic_text: str) -> None:
        numbers = parse_schematic(schematic_text).numbers
        for a in numbers:
            for b in numbers:
                if a is not b and a.row == b.row:
                    assert not set(a.span) & set(b.span)


class TestParseEdgeCases:
    def test_empty_text(self) -> None:
        schematic = parse_schematic("")
        assert schematic.numbers == ()
        assert len(schematic.symbols) == 0
        assert (schematic.height, schematic.width) == (0, 0)

    def test_windows_line_endings(self) -> None:
        schematic = parse_schematic("1.\r\n.#\r\n")
        assert schematic.numbers == (GridNumber(1, 0, 0, 1),)
        assert schematic.symbol_at(1, 1) == "#"

    def test_ragged_rows(self) -> None:
        schematic = parse_schematic("1\n..#..\n")
        assert schematic.width == 5
        assert schematic.symbol_at(1, 2) == "#"

    def test_symbol_map_is_read_only(self, schematic_text: str) -> None:
        schematic = parse_schematic(schematic_text)
        with pytest.raises(TypeError):
            schematic.symbols[(0, 0)] = "@"  # type: ignore[index]

    def test_schematic_is_frozen(self) -> None:
        schematic = parse_schematic("1")
        with pytest.raises(AttributeError):
            schematic.numbers = ()  # type: ignore[misc]


class TestParseErrors:
    def test_error_reports_row_and_column(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_schematic("1..\n.\t.\n")
        assert info.value.row == 1
        assert info.value.column == 1
        assert "row 1" in str(info.value)

    def test_blank_line_inside_grid(self) -> None:
        with pytest.raises(ParseError, match="Empty schematic row"):
            parse_schematic("1..\n\n..#\n")


class TestTranslate:
    def test_shift_moves_every_cell(self) -> None:
        schematic = parse_schematic("1*")
        shifted = schematic.translated(2, 3)
        assert shifted.numbers == (GridNumber(1, 2, 3, 1),)
        assert shifted.symbol_at(2, 4) == "*"

    def test_negative_shift_rejected(self) -> None:
        with pytest.raises(ValueError, match="Cannot shift"):
            parse_schematic("1*").translated(-1, 0)
