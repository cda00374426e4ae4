"""Reading puzzles from text and character streams."""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, TextIO, Union

from .core.codec import char_to_digit, is_puzzle_char
from .core.grid import CandidateGrid

log = logging.getLogger(__name__)


def _stream_chars(stream: TextIO) -> Iterator[str]:
    while True:
        c = stream.read(1)
        if not c:
            return
        yield c


def read_puzzle(source: Union[str, TextIO], size: int = 9) -> CandidateGrid:
    """
    Read one puzzle of size*size cells in row-major order.

    Digits, letters, '.' and ' ' each fill one cell ('0', '.', ' ' and
    digits too large for the grid are blanks). Any other character, such
    as newlines or box separators, is skipped. A stream is read only up
    to the last cell.

    Args:
        source: Puzzle text, or a text stream such as sys.stdin.
        size: Grid size.

    Returns:
        A grid with every clue assigned.

    Raises:
        ValueError: If the input ends before every cell is read.
    """
    grid = CandidateGrid(size)
    total = size * size
    chars = iter(source) if isinstance(source, str) else _stream_chars(source)

    index = 0
    for c in chars:
        if not is_puzzle_char(c):
            continue
        digit = char_to_digit(c, size)
        if digit:
            row, col = divmod(index, size)
            if not grid.assign(row, col, digit):
                log.debug("Clue %s at (%d,%d) conflicts with earlier clues; ignored",
                          c, row + 1, col + 1)
        index += 1
        if index == total:
            return grid

    raise ValueError(f"Puzzle needs {total} cells, input ended after {index}")


def read_puzzles(lines: Iterable[str], size: int = 9) -> Iterator[CandidateGrid]:
    """
    Read one puzzle per line, skipping blank lines and '#' comments.

    Trailing whitespace is ignored when checking for extra cells.

    Raises:
        ValueError: If a line holds fewer or more than size*size cells.
    """
    total = size * size
    for line_no, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        cells = sum(1 for c in line.rstrip() if is_puzzle_char(c))
        if cells > total:
            raise ValueError(f"Line {line_no}: puzzle needs {total} cells, got {cells}")
        yield read_puzzle(line.rstrip("\r\n"), size)
