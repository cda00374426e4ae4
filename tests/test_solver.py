"""Tests for the propagation solver loop."""

import pytest
from propsudoku.core.grid import CandidateGrid
from propsudoku.core.validator import is_valid_solution, respects_clues, is_consistent
from propsudoku.display import render_grid, render_unresolved
from propsudoku.reader import read_puzzle
from propsudoku.solvers import PropagationSolver, Outcome, SINGLE_RULES


class TestPropagationSolver:
    """Tests for PropagationSolver."""

    def test_solve_easy_puzzle(self, easy_puzzle, easy_solution):
        """Singles alone are enough for this puzzle."""
        puzzle = read_puzzle(easy_puzzle)
        solver = PropagationSolver()

        solution, stats = solver.solve(puzzle)

        assert stats.solved
        assert stats.outcome is Outcome.SOLVED
        assert stats.unresolved == 0
        assert solution.to_string() == easy_solution
        assert is_valid_solution(solution)
        assert respects_clues(puzzle, solution)
        assert is_consistent(solution)

    def test_singles_only_solve_easy_puzzle(self, easy_puzzle, easy_solution):
        solution, stats = PropagationSolver(rules=SINGLE_RULES).solve(read_puzzle(easy_puzzle))
        assert stats.solved
        assert solution.to_string() == easy_solution

    def test_stats_collected(self, easy_puzzle):
        puzzle = read_puzzle(easy_puzzle)
        solution, stats = PropagationSolver().solve(puzzle)

        assert stats.passes > 0
        assert stats.assignments == puzzle.unresolved
        assert stats.eliminations >= 0
        assert stats.time_seconds > 0
        assert stats.to_dict()["outcome"] == "solved"

    def test_input_grid_untouched(self, easy_puzzle):
        puzzle = read_puzzle(easy_puzzle)
        before = puzzle.copy()
        PropagationSolver().solve(puzzle)
        assert puzzle == before

    def test_empty_grid_is_stuck(self):
        """An empty grid gives nothing to propagate."""
        solution, stats = PropagationSolver().solve(CandidateGrid())

        assert not stats.solved
        assert stats.outcome is Outcome.STUCK
        assert stats.unresolved == 81
        assert stats.passes == 2

        listing = [line for line in render_unresolved(solution).splitlines() if line]
        assert len(listing) == 81
        assert all(line.endswith("= 1 2 3 4 5 6 7 8 9") for line in listing)

    def test_empty_grid_without_extra_pass(self):
        _, stats = PropagationSolver(extra_pass=False).solve(CandidateGrid())
        assert stats.outcome is Outcome.STUCK
        assert stats.passes == 1

    def test_full_grid_solved_without_passes(self, easy_solution, easy_solution_rendered):
        solution, stats = PropagationSolver().solve(read_puzzle(easy_solution))

        assert stats.solved
        assert stats.passes == 0
        assert stats.assignments == 0
        assert render_grid(solution) == easy_solution_rendered

    def test_max_passes(self, easy_puzzle):
        puzzle = read_puzzle(easy_puzzle)
        solution, stats = PropagationSolver(max_passes=0).solve(puzzle)
        assert stats.outcome is Outcome.STUCK
        assert stats.passes == 0
        assert solution == puzzle

    def test_small_grid(self):
        """4x4 grids use 2x2 boxes."""
        solution, stats = PropagationSolver().solve(read_puzzle("1.3434.22.43432.", size=4))
        assert stats.solved
        assert solution.to_string() == "1234341221434321"

    def test_contradictory_clues_do_not_raise(self):
        """Two 5s in one row: the second clue is dropped and solving carries on."""
        puzzle = read_puzzle("55" + "." * 79)
        assert puzzle.unresolved == 80
        _, stats = PropagationSolver().solve(puzzle)
        assert stats.outcome is Outcome.STUCK

    def test_pointing_rules_make_the_difference(self, pointing_row_grid):
        """
        Starting from a state where only a pointing elimination leads
        anywhere, singles alone stall at once.
        """
        grid = pointing_row_grid
        for digit in (1, 2, 3, 4, 6, 8, 9):
            grid.eliminate(0, 5, digit)

        full, full_stats = PropagationSolver().solve(grid)
        singles, singles_stats = PropagationSolver(rules=SINGLE_RULES).solve(grid)

        assert full.get(0, 5) == 7
        assert full_stats.unresolved < 81
        assert singles_stats.outcome is Outcome.STUCK
        assert singles_stats.unresolved == 81
        assert singles_stats.assignments == 0

    def test_puzzle_needs_pointing_rules(self, pointing_puzzle):
        """All rules solve this puzzle; singles alone get stuck on it."""
        puzzle = read_puzzle(pointing_puzzle)

        solution, stats = PropagationSolver().solve(puzzle)
        assert stats.outcome is Outcome.SOLVED
        assert is_valid_solution(solution)
        assert respects_clues(puzzle, solution)

        stuck, stuck_stats = PropagationSolver(rules=SINGLE_RULES).solve(puzzle)
        assert stuck_stats.outcome is Outcome.STUCK
        assert stuck_stats.unresolved > 0
        assert is_consistent(stuck)


def late_pointing_grid():
    """
    A state where the extra pass places a digit that unlocks one more.

    Digit 5 in box 3 sits only in column 0, which later confines 5 in
    box 0 to row 0 and leaves (0, 5) = {7} and then (0, 4) = {8}.
    """
    grid = CandidateGrid()
    for row, col in ((1, 1), (1, 2), (2, 1), (2, 2)):
        grid.eliminate(row, col, 5)
    for row in range(3, 6):
        grid.eliminate(row, 1, 5)
        grid.eliminate(row, 2, 5)
    for digit in range(1, 10):
        if digit not in (5, 7):
            grid.eliminate(0, 5, digit)
        if digit not in (7, 8):
            grid.eliminate(0, 4, digit)
    return grid


class TestExtraPass:
    """Tests for what happens after a pass that places nothing."""

    def test_stops_after_extra_pass(self):
        """Progress made by the extra pass does not resume the loop."""
        solution, stats = PropagationSolver().solve(late_pointing_grid())

        assert stats.outcome is Outcome.STUCK
        assert stats.passes == 2
        assert stats.unresolved == 80
        assert solution.get(0, 5) == 7
        assert solution.candidate_list(0, 4) == [8]
        assert not solution.is_assigned(0, 4)

    def test_until_fixpoint_keeps_going(self):
        solution, stats = PropagationSolver(until_fixpoint=True).solve(late_pointing_grid())

        assert stats.outcome is Outcome.STUCK
        assert stats.passes == 5
        assert stats.unresolved == 79
        assert solution.get(0, 4) == 8
        assert is_consistent(solution)

    def test_without_extra_pass(self):
        solution, stats = PropagationSolver(extra_pass=False).solve(late_pointing_grid())

        assert stats.passes == 1
        assert stats.unresolved == 81
        assert stats.assignments == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
