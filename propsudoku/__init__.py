"""Sudoku solving by constraint propagation, without guessing."""

from .core import CandidateGrid
from .reader import read_puzzle, read_puzzles
from .display import render_grid, render_unresolved
from .solvers import PropagationSolver, Outcome, apply_all_rules

__version__ = "1.0.0"

__all__ = [
    "CandidateGrid",
    "read_puzzle",
    "read_puzzles",
    "render_grid",
    "render_unresolved",
    "PropagationSolver",
    "Outcome",
    "apply_all_rules",
]
