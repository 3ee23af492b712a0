"""Exceptions shared by the puzzle parsers."""

from __future__ import annotations


class ParseError(ValueError):
    """Input text does not match a puzzle grammar.

    Args:
        message: Human-readable description of what was expected.
        text: The offending input (usually the unconsumed remainder).
        column: 0-based column of the failure within its row, if known.
        row: 0-based row of the failure, if known.
    """

    def __init__(
        self,
        message: str,
        text: str = "",
        column: int | None = None,
        row: int | None = None,
    ) -> None:
        self.message = message
        self.text = text
        self.column = column
        self.row = row
        super().__init__(self._describe())

    def _describe(self) -> str:
        where: list[str] = []
        if self.row is not None:
            where.append(f"row {self.row}")
        if self.column is not None:
            where.append(f"column {self.column}")
        location = f" at {', '.join(where)}" if where else ""
        return f"{self.message}{location}: {self.text!r}"

    def at_row(self, row: int) -> ParseError:
        """Copy of this error annotated with the row it occurred in."""
        return ParseError(self.message, self.text, self.column, row)
