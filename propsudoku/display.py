"""Text rendering of candidate grids."""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .core.codec import BLANK, digit_to_char

if TYPE_CHECKING:
    from .core.grid import CandidateGrid

log = logging.getLogger(__name__)

NOT_SOLVED = "Not solved"


def render_grid(grid: CandidateGrid) -> str:
    """
    Render the grid box by box.

    Boxes in a line are followed by a space and each band of boxes by a
    blank line, e.g. for 4x4::

        12 34
        34 12

        21 43
        43 2.

    Unassigned cells are shown as '.'.
    """
    step = grid.box_size
    lines = []
    for band in range(0, grid.size, step):
        for row in range(band, band + step):
            line = ""
            for stack in range(0, grid.size, step):
                for col in range(stack, stack + step):
                    digit = grid.get(row, col)
                    line += digit_to_char(digit) if digit else BLANK
                line += " "
            lines.append(line + "\n")
        lines.append("\n")
    return "".join(lines)


def render_unresolved(grid: CandidateGrid) -> str:
    """
    List every unassigned cell with its remaining candidates.

    One line per cell, ``(row,col) = d1 d2 ...`` with 1-indexed
    coordinates; each grid row is closed by a blank line.
    """
    lines = []
    for row in range(grid.size):
        for col in range(grid.size):
            if grid.is_assigned(row, col):
                continue
            digits = "".join(f" {d}" for d in grid.candidate_list(row, col))
            lines.append(f"({row + 1},{col + 1}) ={digits}\n")
        lines.append("\n")
    return "".join(lines)


def log_trace(grid: CandidateGrid, pass_no: int) -> None:
    """Log the grid after a solver pass (DEBUG level only)."""
    if log.isEnabledFor(logging.DEBUG):
        log.debug("After pass %d (%d left):\n%s", pass_no, grid.unresolved, render_grid(grid))
