"""Benchmark module for comparing rule configurations."""

from .benchmark import Benchmark, BenchmarkResult, load_puzzles
from .visualizer import Visualizer

__all__ = ["Benchmark", "BenchmarkResult", "Visualizer", "load_puzzles"]
