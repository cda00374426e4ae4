"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Tuple
import time
import tracemalloc

from ..core.grid import CandidateGrid


class Outcome(Enum):
    """How a solver run ended."""
    SOLVED = "solved"
    STUCK = "stuck"


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    outcome: Optional[Outcome] = None
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Propagation metrics
    passes: int = 0
    assignments: int = 0
    eliminations: int = 0
    unresolved: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "outcome": self.outcome.value if self.outcome else None,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "passes": self.passes,
            "assignments": self.assignments,
            "eliminations": self.eliminations,
            "unresolved": self.unresolved,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for grid solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: CandidateGrid) -> Tuple[CandidateGrid, SolverStats]:
        """
        Solve a puzzle with timing and memory tracking.

        The given grid is left untouched; the solver works on a copy.

        Args:
            grid: The puzzle to solve.

        Returns:
            Tuple of (final grid, stats). The final grid is partial when
            the run ends stuck.
        """
        self.stats = SolverStats(algorithm=self.name)

        # Start memory tracking
        tracemalloc.start()

        # Start timing
        start_time = time.perf_counter()

        try:
            result = self._solve(grid.copy())
        finally:
            # End timing
            self.stats.time_seconds = time.perf_counter() - start_time

            # Get memory usage
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.unresolved = result.unresolved
        self.stats.solved = result.is_complete()
        self.stats.outcome = Outcome.SOLVED if self.stats.solved else Outcome.STUCK

        return result, self.stats

    @abstractmethod
    def _solve(self, grid: CandidateGrid) -> CandidateGrid:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            grid: A copy of the puzzle to solve (can be modified).

        Returns:
            The grid in its final state.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
