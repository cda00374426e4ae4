"""Solvers module: deduction rules and the propagation loop."""

from .base_solver import BaseSolver, SolverStats, Outcome
from .propagation_solver import PropagationSolver
from .rules import (
    RULES,
    DEFAULT_RULES,
    SINGLE_RULES,
    apply_all_rules,
    select_rules,
)

__all__ = [
    "BaseSolver",
    "SolverStats",
    "Outcome",
    "PropagationSolver",
    "RULES",
    "DEFAULT_RULES",
    "SINGLE_RULES",
    "apply_all_rules",
    "select_rules",
]
