"""Fixpoint solver that drives the deduction rules until the grid stops changing."""

from __future__ import annotations
import logging
from typing import Optional, Sequence

from .base_solver import BaseSolver
from .rules import DEFAULT_RULES, Rule, apply_all_rules
from ..core.grid import CandidateGrid
from ..display import log_trace

log = logging.getLogger(__name__)


class PropagationSolver(BaseSolver):
    """
    Sudoku solver using pure constraint propagation.

    Each pass applies every rule once. Passes repeat while the number of
    unassigned cells keeps shrinking. When a pass places nothing the
    solver runs one extra pass (pointing eliminations made late in a
    pass can still unlock singles) and then stops, whatever that pass
    achieved. With ``until_fixpoint`` set, progress in the extra pass
    resumes the loop instead, so the solver only stops on a true fixpoint.
    There is no guessing, so a stalled grid is returned as is.
    """

    name = "Constraint Propagation"

    def __init__(
        self,
        rules: Sequence[Rule] = DEFAULT_RULES,
        extra_pass: bool = True,
        max_passes: Optional[int] = None,
        until_fixpoint: bool = False
    ):
        """
        Args:
            rules: Rules to apply on every pass, in order.
            extra_pass: Retry once after a pass that placed nothing.
            max_passes: Optional cap on the number of passes.
            until_fixpoint: Keep going if the extra pass placed digits.
        """
        super().__init__()
        self.rules = tuple(rules)
        self.extra_pass = extra_pass
        self.max_passes = max_passes
        self.until_fixpoint = until_fixpoint

    def _solve(self, grid: CandidateGrid) -> CandidateGrid:
        """Apply the rules until the grid is solved or propagation stalls."""
        while grid.unresolved:
            if self.max_passes is not None and self.stats.passes >= self.max_passes:
                log.warning("Pass limit %d reached with %d cell(s) left",
                            self.max_passes, grid.unresolved)
                break

            before = grid.unresolved
            self._run_pass(grid)

            if grid.unresolved == before:
                if self.extra_pass:
                    self._run_pass(grid)
                if grid.unresolved == before or not self.until_fixpoint:
                    break

        if grid.unresolved:
            log.info("Propagation stalled after %d pass(es) with %d cell(s) left",
                     self.stats.passes, grid.unresolved)
        else:
            log.info("Solved in %d pass(es)", self.stats.passes)
        return grid

    def _run_pass(self, grid: CandidateGrid) -> None:
        before = grid.unresolved
        changes = apply_all_rules(grid, self.rules)
        placed = before - grid.unresolved

        self.stats.passes += 1
        self.stats.assignments += placed
        self.stats.eliminations += changes - placed
        log_trace(grid, self.stats.passes)
