"""
Deduction rules for constraint propagation.

Each rule scans the grid once and mutates it in place, either through
``CandidateGrid.assign`` or by removing candidates. Every rule returns the
number of changes it made (placements or removed candidates).

Rules only encode logically valid deductions, so they can run in any order;
the order of ``DEFAULT_RULES`` only affects how quickly a grid converges.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

import numpy as np

from ..core.grid import CandidateGrid

log = logging.getLogger(__name__)

Cell = Tuple[int, int]
Rule = Callable[[CandidateGrid], int]


# =============================================================================
# Units and candidate snapshots
# =============================================================================

def _row_units(grid: CandidateGrid) -> List[List[Cell]]:
    return [[(row, col) for col in range(grid.size)] for row in range(grid.size)]


def _column_units(grid: CandidateGrid) -> List[List[Cell]]:
    return [[(row, col) for row in range(grid.size)] for col in range(grid.size)]


def _box_units(grid: CandidateGrid) -> List[List[Cell]]:
    return [grid.box_cells(box_row, box_col) for box_row, box_col in grid.box_origins()]


def _snapshot(grid: CandidateGrid, cells: Sequence[Cell]) -> Tuple[np.ndarray, np.ndarray]:
    """Candidate bits and an open-cell mask for the cells of one unit, taken now."""
    rows = [r for r, _ in cells]
    cols = [c for _, c in cells]
    # Fancy indexing copies, so later mutations do not leak into the counts
    bits = grid.candidates[rows, cols]
    open_cells = grid.assigned[rows, cols] == 0
    return bits, open_cells


def _holders(bits: np.ndarray, open_cells: np.ndarray, digit: int) -> np.ndarray:
    """Indices of open cells whose candidates include digit."""
    return np.flatnonzero(open_cells & (((bits >> digit) & 1) == 1))


# =============================================================================
# Singles
# =============================================================================

def naked_single(grid: CandidateGrid) -> int:
    """Assign every unassigned cell that has exactly one candidate left."""
    changes = 0
    for row, col in grid.unresolved_cells():
        if grid.is_assigned(row, col):
            continue
        if grid.candidate_count(row, col) == 1:
            digit = grid.candidate_list(row, col)[0]
            changes += grid.assign(row, col, digit)
    return changes


def _hidden_singles(grid: CandidateGrid, units: List[List[Cell]]) -> int:
    """Place each digit that has a single possible cell within a unit."""
    changes = 0
    for cells in units:
        bits, open_cells = _snapshot(grid, cells)
        for digit in range(1, grid.size + 1):
            holders = _holders(bits, open_cells, digit)
            if len(holders) == 1:
                row, col = cells[holders[0]]
                changes += grid.assign(row, col, digit)
    return changes


def hidden_single_row(grid: CandidateGrid) -> int:
    """Place digits that fit in only one cell of their row."""
    return _hidden_singles(grid, _row_units(grid))


def hidden_single_column(grid: CandidateGrid) -> int:
    """Place digits that fit in only one cell of their column."""
    return _hidden_singles(grid, _column_units(grid))


def hidden_single_block(grid: CandidateGrid) -> int:
    """Place digits that fit in only one cell of their box."""
    return _hidden_singles(grid, _box_units(grid))


# =============================================================================
# Pointing pairs / triples
# =============================================================================

def _pointing(grid: CandidateGrid, axis: int) -> int:
    """
    Remove candidates confined to one line of a box from the rest of that line.

    Args:
        axis: 0 for rows, 1 for columns.
    """
    changes = 0
    for box_row, box_col in grid.box_origins():
        cells = grid.box_cells(box_row, box_col)
        bits, open_cells = _snapshot(grid, cells)
        box_start = box_col if axis == 0 else box_row

        for digit in range(1, grid.size + 1):
            lines = {cells[i][axis] for i in _holders(bits, open_cells, digit)}
            if len(lines) != 1:
                continue
            line = lines.pop()
            for k in range(grid.size):
                if box_start <= k < box_start + grid.box_size:
                    continue
                if axis == 0:
                    changes += grid.eliminate(line, k, digit)
                else:
                    changes += grid.eliminate(k, line, digit)
    return changes


def pointing_row(grid: CandidateGrid) -> int:
    """If a digit's candidates in a box share one row, clear it from that row outside the box."""
    return _pointing(grid, axis=0)


def pointing_column(grid: CandidateGrid) -> int:
    """If a digit's candidates in a box share one column, clear it from that column outside the box."""
    return _pointing(grid, axis=1)


# =============================================================================
# Rule sets
# =============================================================================

RULES: Dict[str, Rule] = {
    "pointing-row": pointing_row,
    "pointing-column": pointing_column,
    "hidden-block": hidden_single_block,
    "hidden-row": hidden_single_row,
    "hidden-column": hidden_single_column,
    "naked-single": naked_single,
}

DEFAULT_RULES: Tuple[Rule, ...] = tuple(RULES.values())

SINGLE_RULES: Tuple[Rule, ...] = tuple(
    rule for name, rule in RULES.items() if not name.startswith("pointing")
)


def select_rules(disabled: Iterable[str] = ()) -> Tuple[Rule, ...]:
    """
    Build a rule sequence in default order without the named rules.

    Raises:
        ValueError: If a name is not a known rule.
    """
    disabled = set(disabled)
    unknown = disabled - set(RULES)
    if unknown:
        raise ValueError(
            f"Unknown rule(s): {', '.join(sorted(unknown))}; "
            f"choose from {', '.join(RULES)}"
        )
    return tuple(rule for name, rule in RULES.items() if name not in disabled)


def apply_all_rules(grid: CandidateGrid, rules: Sequence[Rule] = DEFAULT_RULES) -> int:
    """
    Run each rule once, in order, against the same grid.

    Returns:
        Total number of changes made by all rules.
    """
    total = 0
    for rule in rules:
        changes = rule(grid)
        if changes:
            log.debug("%s: %d change(s), %d cell(s) left",
                      rule.__name__, changes, grid.unresolved)
        total += changes
    return total
