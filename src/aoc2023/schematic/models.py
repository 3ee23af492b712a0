"""Value objects for the engine schematic grid."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

Coordinate: TypeAlias = tuple[int, int]  # (row, col), both 0-based
SymbolMap: TypeAlias = Mapping[Coordinate, str]


# ── Row tokens ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Filler:
    """A maximal run of ``.`` cells."""

    length: int

    @property
    def text(self) -> str:
        return "." * self.length


@dataclass(frozen=True, slots=True)
class NumberToken:
    """A maximal run of ASCII digits."""

    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def value(self) -> int:
        return int(self.text)


@dataclass(frozen=True, slots=True)
class SymbolToken:
    """Any single cell that is neither a digit nor ``.``."""

    char: str

    @property
    def length(self) -> int:
        return 1

    @property
    def text(self) -> str:
        return self.char


Token: TypeAlias = Filler | NumberToken | SymbolToken


# ── Parsed grid ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GridNumber:
    """A multi-digit numeral and the cells it occupies."""

    value: int
    row: int
    col: int
    length: int

    @property
    def end_col(self) -> int:
        """Column one past the last digit."""
        return self.col + self.length

    @property
    def span(self) -> range:
        """Half-open column range ``[col, col + length)``."""
        return range(self.col, self.end_col)


def _freeze(symbols: Mapping[Coordinate, str]) -> MappingProxyType[Coordinate, str]:
    return MappingProxyType(dict(symbols))


@dataclass(frozen=True, slots=True)
class Schematic:
    """All numbers and symbol cells of one engine schematic.

    ``numbers`` is kept in row-major scan order. ``symbols`` is a read-only
    view keyed by ``(row, col)``.
    """

    numbers: tuple[GridNumber, ...] = ()
    symbols: SymbolMap = field(default_factory=dict)
    height: int = 0
    width: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "numbers", tuple(self.numbers))
        object.__setattr__(self, "symbols", _freeze(self.symbols))

    def symbol_at(self, row: int, col: int) -> str | None:
        return self.symbols.get((row, col))

    def translated(self, rows: int, cols: int) -> Schematic:
        """Copy of the schematic with every cell shifted by ``(rows, cols)``."""
        if rows < 0 or cols < 0:
            raise ValueError(f"Cannot shift a schematic by ({rows}, {cols})")
        numbers = tuple(
            GridNumber(n.value, n.row + rows, n.col + cols, n.length)
            for n in self.numbers
        )
        symbols = {(r + rows, c + cols): ch for (r, c), ch in self.symbols.items()}
        return Schematic(numbers, symbols, self.height + rows, self.width + cols)
