"""Command-line entry point: ``aoc2023 DAY PART [INPUT]``."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from aoc2023.errors import ParseError
from aoc2023.puzzles import UnknownPuzzleError, solve

_LOGGER = logging.getLogger(__name__)

DEFAULT_INPUT = Path("puzzle_inputs/input.txt")
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_USAGE = "usage: aoc2023 DAY PART [INPUT]"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _configure_logging() -> None:
    logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT, stream=sys.stderr)


def run(argv: list[str] | None = None) -> int:
    """Solve one puzzle and print the answer; returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (2, 3):
        _LOGGER.error(_USAGE)
        return EXIT_USAGE
    try:
        day, part = int(args[0]), int(args[1])
    except ValueError:
        _LOGGER.error("DAY and PART must be integers. %s", _USAGE)
        return EXIT_USAGE
    input_path = Path(args[2]) if len(args) == 3 else DEFAULT_INPUT

    _LOGGER.debug("Solving day %d part %d from %s", day, part, input_path)
    try:
        text = input_path.read_text(encoding="utf-8")
        answer = solve(day, part, text)
    except OSError as exc:
        _LOGGER.error("Cannot read %s: %s", input_path, exc.strerror or exc)
        return EXIT_FAILURE
    except (ParseError, UnicodeDecodeError) as exc:
        _LOGGER.error("Invalid input in %s: %s", input_path, exc)
        return EXIT_FAILURE
    except UnknownPuzzleError as exc:
        _LOGGER.error("%s", exc)
        return EXIT_USAGE

    print(answer)
    return EXIT_OK


def main() -> None:
    """Console-script entry point."""
    _configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
