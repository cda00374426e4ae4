"""Candidate grid: the mutable solving state for one puzzle."""

from __future__ import annotations
import numpy as np
from typing import Iterator, List, Sequence, Tuple

from .codec import MAX_DIGIT, BLANK, digit_to_char


class CandidateGrid:
    """
    Assigned digits and remaining candidates for every cell of a puzzle.

    Standard Sudoku is 9x9 with 3x3 boxes; any perfect square size from
    4 (2x2 boxes) up to 25 (5x5 boxes) is supported.

    Candidates are stored as one bit set per cell: bit ``d`` is set while
    digit ``d`` is still possible. An assigned cell keeps exactly the bit
    of its own digit.
    """

    def __init__(self, size: int = 9):
        """
        Initialize an empty grid: nothing assigned, every digit possible.

        Args:
            size: Grid size (4, 9, 16 or 25). Must be a perfect square.
        """
        box_size = int(np.sqrt(size))
        if size < 4 or box_size * box_size != size:
            raise ValueError(f"Size must be a perfect square of at least 4, got {size}")
        if size > MAX_DIGIT:
            raise ValueError(f"Size must be at most {MAX_DIGIT}, got {size}")

        self.size = size
        self.box_size = box_size
        self.full_mask = sum(1 << d for d in range(1, size + 1))

        self.assigned = np.zeros((size, size), dtype=np.int32)
        self.candidates = np.full((size, size), self.full_mask, dtype=np.int64)
        self.unresolved = size * size

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[int]]) -> CandidateGrid:
        """Create a grid from rows of digits, 0 meaning blank."""
        grid = cls(len(data))
        for row, values in enumerate(data):
            for col, digit in enumerate(values):
                if digit:
                    grid.assign(row, col, digit)
        return grid

    def copy(self) -> CandidateGrid:
        """Create a deep copy of the grid."""
        new_grid = CandidateGrid(self.size)
        new_grid.assigned = self.assigned.copy()
        new_grid.candidates = self.candidates.copy()
        new_grid.unresolved = self.unresolved
        return new_grid

    def get(self, row: int, col: int) -> int:
        """Get the digit assigned at (row, col). 0 means unassigned."""
        return int(self.assigned[row, col])

    def is_assigned(self, row: int, col: int) -> bool:
        return bool(self.assigned[row, col] != 0)

    def has_candidate(self, row: int, col: int, digit: int) -> bool:
        """Check if digit is still possible at (row, col)."""
        if digit < 1 or digit > self.size:
            return False
        return bool((int(self.candidates[row, col]) >> digit) & 1)

    def candidate_list(self, row: int, col: int) -> List[int]:
        """Digits still possible at (row, col), in ascending order."""
        mask = int(self.candidates[row, col])
        return [d for d in range(1, self.size + 1) if (mask >> d) & 1]

    def candidate_count(self, row: int, col: int) -> int:
        return bin(int(self.candidates[row, col])).count("1")

    def box_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left cell of the box containing (row, col)."""
        return row - row % self.box_size, col - col % self.box_size

    def box_origins(self) -> Iterator[Tuple[int, int]]:
        """Top-left cells of all boxes, box-rows top to bottom, left to right."""
        for box_row in range(0, self.size, self.box_size):
            for box_col in range(0, self.size, self.box_size):
                yield box_row, box_col

    def box_cells(self, box_row: int, box_col: int) -> List[Tuple[int, int]]:
        """Cells of the box whose top-left corner is (box_row, box_col), row-major."""
        return [
            (box_row + i, box_col + j)
            for i in range(self.box_size)
            for j in range(self.box_size)
        ]

    def assign(self, row: int, col: int, digit: int) -> bool:
        """
        Assign digit to (row, col) and remove it from every peer.

        Does nothing if the cell is already assigned or digit is no longer
        a candidate there, so several rules may safely deduce the same
        placement in one pass.

        Returns:
            True if the cell changed.
        """
        if self.is_assigned(row, col) or not self.has_candidate(row, col, digit):
            return False

        keep = ~(1 << digit)

        # Peers first; the cell's own bit is restored below
        self.candidates[row, :] &= keep
        self.candidates[:, col] &= keep
        box_row, box_col = self.box_origin(row, col)
        self.candidates[box_row:box_row + self.box_size,
                        box_col:box_col + self.box_size] &= keep

        self.candidates[row, col] = 1 << digit
        self.assigned[row, col] = digit
        self.unresolved -= 1
        return True

    def eliminate(self, row: int, col: int, digit: int) -> bool:
        """
        Remove digit from the candidates of an unassigned cell.

        Assigned cells are left alone.

        Returns:
            True if a candidate was removed.
        """
        if self.is_assigned(row, col) or not self.has_candidate(row, col, digit):
            return False
        self.candidates[row, col] = int(self.candidates[row, col]) & ~(1 << digit)
        return True

    def unresolved_cells(self) -> List[Tuple[int, int]]:
        """Positions of all unassigned cells in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.assigned == 0)]

    def count_unassigned(self) -> int:
        """Count unassigned cells directly from the grid."""
        return int(np.sum(self.assigned == 0))

    def is_complete(self) -> bool:
        return self.unresolved == 0

    def to_string(self) -> str:
        """Row-major digits, '.' for unassigned cells."""
        return ''.join(
            digit_to_char(int(d)) if d else BLANK
            for d in self.assigned.flatten()
        )

    def __str__(self) -> str:
        from ..display import render_grid
        return render_grid(self)

    def __repr__(self) -> str:
        return f"CandidateGrid(size={self.size}, unresolved={self.unresolved})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateGrid):
            return False
        return (
            self.size == other.size
            and np.array_equal(self.assigned, other.assigned)
            and np.array_equal(self.candidates, other.candidates)
        )

    __hash__ = None  # type: ignore[assignment]
