"""Consistency and solution checks for candidate grids."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import CandidateGrid


def _has_duplicates(values: np.ndarray) -> bool:
    non_zero = values[values != 0]
    return len(non_zero) != len(set(non_zero.tolist()))


def is_valid_grid(grid: CandidateGrid) -> bool:
    """
    Check that no row, column or box holds the same assigned digit twice.

    Unassigned cells are ignored, so a partially solved grid can be valid.
    """
    for i in range(grid.size):
        if _has_duplicates(grid.assigned[i, :]):
            return False
        if _has_duplicates(grid.assigned[:, i]):
            return False

    for box_row, box_col in grid.box_origins():
        box = grid.assigned[box_row:box_row + grid.box_size,
                            box_col:box_col + grid.box_size].flatten()
        if _has_duplicates(box):
            return False

    return True


def is_valid_solution(grid: CandidateGrid) -> bool:
    """Check that every cell is assigned and all peers hold distinct digits."""
    return grid.count_unassigned() == 0 and is_valid_grid(grid)


def is_consistent(grid: CandidateGrid) -> bool:
    """
    Check the bookkeeping of a grid.

    - Every assigned cell has exactly its own digit as candidate.
    - The unresolved counter matches the number of unassigned cells.
    """
    if grid.unresolved != grid.count_unassigned():
        return False

    for row in range(grid.size):
        for col in range(grid.size):
            digit = grid.get(row, col)
            if digit and int(grid.candidates[row, col]) != 1 << digit:
                return False

    return True


def respects_clues(puzzle: CandidateGrid, solution: CandidateGrid) -> bool:
    """
    Check that a solution keeps every clue of the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The (possibly partial) solved grid.

    Returns:
        True if every assigned cell of the puzzle holds the same digit in the solution.
    """
    if puzzle.size != solution.size:
        return False

    clues = puzzle.assigned != 0
    return bool(np.array_equal(puzzle.assigned[clues], solution.assigned[clues]))
