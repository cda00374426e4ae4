"""Command-line interface for the propagation solver."""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import Benchmark, Visualizer, load_puzzles
from .display import NOT_SOLVED, render_grid, render_unresolved
from .reader import read_puzzle
from .solvers import PropagationSolver, RULES, select_rules

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="propsudoku",
        description="Sudoku solver by pure constraint propagation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle from stdin
  propsudoku solve < puzzle.txt

  # Solve without the pointing rules
  propsudoku solve --puzzle "003020600..." --disable pointing-row --disable pointing-column

  # Compare rule sets over a file of puzzles (one per line)
  propsudoku benchmark --file puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log every rule pass and the grid after it"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a single puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle text (digits/letters, '.', '0' or ' ' for blanks)"
    )
    source.add_argument(
        "--file", "-f", type=str, default=None,
        help="File holding the puzzle (default: read stdin)"
    )
    solve_parser.add_argument(
        "--size", "-s", type=int, default=9,
        help="Grid size, a perfect square (default: 9)"
    )
    solve_parser.add_argument(
        "--disable", "-d", action="append", default=[], metavar="RULE",
        help=f"Rule to leave out, may repeat ({', '.join(RULES)})"
    )
    solve_parser.add_argument(
        "--no-extra-pass", action="store_true",
        help="Stop as soon as a pass places nothing"
    )
    solve_parser.add_argument(
        "--until-fixpoint", action="store_true",
        help="Keep going while the extra pass still places digits"
    )
    solve_parser.add_argument(
        "--max-passes", type=int, default=None,
        help="Upper bound on rule passes"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Compare rule sets over a puzzle file")
    bench_parser.add_argument(
        "--file", "-f", type=str, required=True,
        help="Puzzle file, one puzzle per line ('#' starts a comment)"
    )
    bench_parser.add_argument(
        "--size", "-s", type=int, default=9,
        help="Grid size, a perfect square (default: 9)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    bench_parser.add_argument(
        "--quiet", "-q", action="store_true",
        help="Hide the progress bar"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        0 when solved, 1 when propagation stalled, 2 on bad input.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        return 2

    try:
        if args.command == "solve":
            return cmd_solve(args)
        return cmd_benchmark(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def cmd_solve(args) -> int:
    """Handle the solve command."""
    if args.puzzle is not None:
        grid = read_puzzle(args.puzzle, args.size)
    elif args.file is not None:
        with open(args.file, "r") as f:
            grid = read_puzzle(f, args.size)
    else:
        grid = read_puzzle(sys.stdin, args.size)

    solver = PropagationSolver(
        rules=select_rules(args.disable),
        extra_pass=not args.no_extra_pass,
        max_passes=args.max_passes,
        until_fixpoint=args.until_fixpoint
    )
    final, stats = solver.solve(grid)
    log.info("%s after %d pass(es): %d placed, %d eliminated, %.4fs",
             stats.outcome.value, stats.passes, stats.assignments,
             stats.eliminations, stats.time_seconds)

    if not stats.solved:
        print(render_unresolved(final), end="")
    print()
    print(render_grid(final), end="")
    if not stats.solved:
        print(NOT_SOLVED)
        print()
        return 1
    return 0


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    puzzles = load_puzzles(args.file, args.size)

    print("=" * 60)
    print("PROPAGATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")

    benchmark = Benchmark(puzzles)

    print(f"Rule sets: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run(show_progress=not args.quiet)
    summary = benchmark.get_summary()

    print("\nBy Rule Set:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Solved: {stats['solve_rate']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Passes: {stats['avg_passes']:.1f}")
        print(f"  Avg Unresolved: {stats['avg_unresolved']:.1f}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")

    benchmark.save_results(args.output)

    if not args.no_charts and results:
        print("\nGenerating charts...")
        stuck = benchmark.stuck_grids.get("all-rules") or benchmark.stuck_grids.get("singles-only")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all(stuck_grid=stuck[0] if stuck else None)
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
