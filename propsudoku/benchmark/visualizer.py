"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List, Optional

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult
from ..core.grid import CandidateGrid


class Visualizer:
    """
    Visualization generator for propagation benchmark results.

    Creates charts comparing rule configurations, plus a candidate map
    for grids where propagation stalled.
    """

    # Color palette for rule configurations
    COLORS = {
        "all-rules": "#2ecc71",     # Green
        "singles-only": "#e74c3c",  # Red
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        # Set style
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def generate_all(self, stuck_grid: Optional[CandidateGrid] = None) -> List[str]:
        """
        Generate all charts.

        Args:
            stuck_grid: Optional stalled grid to draw a candidate map for.

        Returns:
            List of paths to generated chart files.
        """
        charts = [
            self.plot_solve_rate(),
            self.plot_passes_distribution(),
        ]
        if stuck_grid is not None:
            charts.append(self.plot_candidate_heatmap(stuck_grid))
        return charts

    def plot_solve_rate(self) -> str:
        """Create bar chart comparing the share of puzzles solved."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        rates = []
        colors = []

        for algo in algorithms:
            algo_results = [r for r in self.results if r.algorithm == algo]
            solved = sum(1 for r in algo_results if r.solved)
            rates.append(solved / len(algo_results) * 100)
            colors.append(self.COLORS.get(algo, "#95a5a6"))

        bars = ax.bar(algorithms, rates, color=colors, edgecolor='black', linewidth=0.5)

        for bar, rate in zip(bars, rates):
            height = bar.get_height()
            ax.annotate(f'{rate:.0f}%',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Rule set', fontsize=12)
        ax.set_ylabel('Solved (%)', fontsize=12)
        ax.set_title('Puzzles Solved by Propagation Alone', fontsize=14, fontweight='bold')
        ax.set_ylim(0, 115)
        ax.axhline(y=100, color='gray', linestyle='--', alpha=0.3)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "solve_rate.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_passes_distribution(self) -> str:
        """Create box plot showing how many passes each rule set needed."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        data = [[r.passes for r in self.results if r.algorithm == algo] for algo in algorithms]

        bp = ax.boxplot(data, patch_artist=True)
        ax.set_xticks(range(1, len(algorithms) + 1), algorithms)

        for patch, algo in zip(bp['boxes'], algorithms):
            patch.set_facecolor(self.COLORS.get(algo, "#95a5a6"))
            patch.set_alpha(0.7)

        ax.set_xlabel('Rule set', fontsize=12)
        ax.set_ylabel('Passes', fontsize=12)
        ax.set_title('Rule Passes until Solved or Stalled', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "passes_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_candidate_heatmap(self, grid: CandidateGrid) -> str:
        """Create heatmap of remaining candidate counts; assigned cells show 0."""
        counts = np.zeros((grid.size, grid.size), dtype=int)
        for row, col in grid.unresolved_cells():
            counts[row, col] = grid.candidate_count(row, col)

        fig, ax = plt.subplots(figsize=(8, 7))
        sns.heatmap(counts, annot=True, fmt="d", cmap="YlOrRd", square=True,
                    vmin=0, vmax=grid.size, linewidths=0.3, linecolor='white',
                    xticklabels=list(range(1, grid.size + 1)),
                    yticklabels=list(range(1, grid.size + 1)),
                    cbar_kws={"label": "Candidates"}, ax=ax)

        # Box borders
        for k in range(0, grid.size + 1, grid.box_size):
            ax.axhline(k, color='black', linewidth=2)
            ax.axvline(k, color='black', linewidth=2)

        ax.tick_params(axis="y", rotation=0)
        ax.set_title(f'Candidates Left ({grid.unresolved} unresolved cells)',
                     fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "candidate_heatmap.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Rule set | Solved | Avg Time | Avg Passes | Avg Unresolved |",
            "|----------|--------|----------|------------|----------------|"
        ]

        for algo in self._algorithms():
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            rate = (solved / len(algo_results)) * 100 if algo_results else 0

            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_passes = np.mean([r.passes for r in algo_results])
            avg_unresolved = np.mean([r.unresolved for r in algo_results])

            lines.append(
                f"| {algo} | {rate:.1f}% | {avg_time:.4f}s | {avg_passes:.1f} | {avg_unresolved:.1f} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
