"""Shared puzzles and grid states for the test suite."""

import pytest
from propsudoku.core.grid import CandidateGrid


# Solvable with singles alone
EASY_PUZZLE = (
    "003020600"
    "900305001"
    "001806400"
    "008102900"
    "700000008"
    "006708200"
    "002609500"
    "800203009"
    "005010300"
)

EASY_SOLUTION = (
    "483921657"
    "967345821"
    "251876493"
    "548132976"
    "729564138"
    "136798245"
    "372689514"
    "814253769"
    "695417382"
)

EASY_SOLUTION_RENDERED = (
    "483 921 657 \n"
    "967 345 821 \n"
    "251 876 493 \n"
    "\n"
    "548 132 976 \n"
    "729 564 138 \n"
    "136 798 245 \n"
    "\n"
    "372 689 514 \n"
    "814 253 769 \n"
    "695 417 382 \n"
    "\n"
)


@pytest.fixture
def easy_puzzle():
    return EASY_PUZZLE


@pytest.fixture
def easy_solution():
    return EASY_SOLUTION


@pytest.fixture
def easy_solution_rendered():
    return EASY_SOLUTION_RENDERED


# Solvable with all rules, stuck when the pointing rules are disabled
POINTING_PUZZLE = (
    "...6.4..."
    ".2..8.5.."
    "..45...63"
    ".....7..."
    "9.6......"
    "4.29.5..."
    "3....61.."
    "..8.1.92."
    "....4..5."
)


@pytest.fixture
def pointing_puzzle():
    return POINTING_PUZZLE


@pytest.fixture
def pointing_row_grid():
    """Empty 9x9 grid except that digit 5 in box 0 is left only in row 0."""
    grid = CandidateGrid()
    for row in (1, 2):
        for col in range(3):
            grid.eliminate(row, col, 5)
    return grid
