"""Benchmarking framework for comparing rule configurations over puzzle batches."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

from tqdm import tqdm

from ..core.grid import CandidateGrid
from ..reader import read_puzzles
from ..solvers import BaseSolver, PropagationSolver, SINGLE_RULES

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    algorithm: str
    solved: bool
    outcome: str
    time_seconds: float
    memory_bytes: int
    passes: int
    assignments: int
    eliminations: int
    unresolved: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "outcome": self.outcome,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "passes": self.passes,
            "assignments": self.assignments,
            "eliminations": self.eliminations,
            "unresolved": self.unresolved,
            **self.extra
        }


def load_puzzles(path: str, size: int = 9) -> List[CandidateGrid]:
    """Load a puzzle file with one puzzle per line."""
    with open(path, "r") as f:
        return list(read_puzzles(f, size))


class Benchmark:
    """
    Runs several solver configurations over a batch of puzzles.

    The default configurations compare the full rule set with singles
    only, which shows how many puzzles need the pointing rules.
    """

    def __init__(
        self,
        puzzles: List[CandidateGrid],
        solvers: Optional[Dict[str, BaseSolver]] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzles to solve; they are not modified.
            solvers: Dict of config_name -> solver_instance (default: all-rules and singles-only).
        """
        self.puzzles = puzzles

        if solvers is None:
            self.solvers = {
                "all-rules": PropagationSolver(),
                "singles-only": PropagationSolver(rules=SINGLE_RULES),
            }
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []
        self.stuck_grids: Dict[str, List[CandidateGrid]] = {}

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run every solver on every puzzle.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        self.stuck_grids = {name: [] for name in self.solvers}

        total_tests = len(self.puzzles) * len(self.solvers)
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_id, puzzle in enumerate(self.puzzles):
            for solver_name, solver in self.solvers.items():
                result = self._run_single(puzzle, puzzle_id, solver_name, solver)
                self.results.append(result)
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: CandidateGrid,
        puzzle_id: int,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        final, stats = solver.solve(puzzle)
        if not stats.solved:
            self.stuck_grids[solver_name].append(final)
            log.debug("Puzzle %d stuck under %s with %d cell(s) left",
                      puzzle_id, solver_name, stats.unresolved)

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            algorithm=solver_name,
            solved=stats.solved,
            outcome=stats.outcome.value,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            passes=stats.passes,
            assignments=stats.assignments,
            eliminations=stats.eliminations,
            unresolved=stats.unresolved,
            extra={"clues": puzzle.size * puzzle.size - puzzle.unresolved}
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "results_by_algorithm": {}
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                passes = [r.passes for r in solver_results]
                unresolved = [r.unresolved for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "solve_rate": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "avg_passes": sum(passes) / len(passes),
                    "avg_unresolved": sum(unresolved) / len(unresolved),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
