"""Core module for the candidate grid, digit codec and validation."""

from .codec import digit_to_char, char_to_digit, is_puzzle_char
from .grid import CandidateGrid
from .validator import is_valid_grid, is_valid_solution, is_consistent, respects_clues

__all__ = [
    "CandidateGrid",
    "digit_to_char",
    "char_to_digit",
    "is_puzzle_char",
    "is_valid_grid",
    "is_valid_solution",
    "is_consistent",
    "respects_clues",
]
