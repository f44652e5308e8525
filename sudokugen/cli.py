"""Command-line interface for the Sudoku generator."""

import argparse
import json
import logging
import sys

from .core.board import SudokuBoard
from .core.validator import check_complete
from .errors import SudokuError
from .generator import DEFAULT_HOLE_COUNT, Difficulty, SudokuGenerator


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 puzzles with 45 holes each
  python -m sudokugen.cli generate --count 5 --holes 45

  # Complete a partial grid
  python -m sudokugen.cli solve --puzzle "0030206..."

  # Check the player's board against the solution
  python -m sudokugen.cli check --values "5346789..." --solution "534678912..."

  # Time generation for several hole counts
  python -m sudokugen.cli benchmark --holes 40 45 80 --runs 20 --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    group = gen_parser.add_mutually_exclusive_group()
    group.add_argument(
        "--holes", type=int, default=None,
        help=f"Number of cells to clear, 0-80 (default: {DEFAULT_HOLE_COUNT})"
    )
    group.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Hole-count preset: easy=40, medium=45, hard=50, expert=55"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--show-solution", action="store_true",
        help="Print the solution under each puzzle"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Complete a partial grid")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a board against its solution")
    check_parser.add_argument(
        "--values", type=str, required=True,
        help="Current board (81 chars, 0 or . for empty cells)"
    )
    check_parser.add_argument(
        "--solution", type=str, required=True,
        help="Solution string (81 chars)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Time puzzle generation")
    bench_parser.add_argument(
        "--holes", type=int, nargs="+", default=None,
        help="Hole counts to time (default: every difficulty preset)"
    )
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=10,
        help="Generations per hole count (default: 10)"
    )
    bench_parser.add_argument(
        "--time-limit", type=float, default=2.0,
        help="Seconds after which a run counts as slow (default: 2.0)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "generate": cmd_generate,
        "solve": cmd_solve,
        "check": cmd_check,
        "benchmark": cmd_benchmark,
    }

    try:
        commands[args.command](args)
    except SudokuError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)
    difficulty = Difficulty(args.difficulty) if args.difficulty else None
    holes = generator.resolve_hole_count(args.holes, difficulty)

    puzzles = generator.generate_batch(args.count, hole_count=holes)

    all_puzzles = []
    for i, generated in enumerate(puzzles, 1):
        all_puzzles.append({"index": i, **generated.to_dict()})

        print(f"\n--- Puzzle {i} ({generated.clues} clues, {generated.hole_count} holes) ---")
        print(generated.puzzle)
        if args.show_solution:
            print("Solution:")
            print(generated.solution)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_solve(args):
    """Handle the solve command."""
    board = SudokuBoard.from_string(args.puzzle)

    print("Input puzzle:")
    print(board)
    print()

    solution = SudokuGenerator(seed=args.seed).complete_grid(board)

    print("Completed grid:")
    print(solution)
    print(solution.to_string())


def cmd_check(args):
    """Handle the check command."""
    status = check_complete(args.values, args.solution)

    print(f"Full:    {'yes' if status.is_full else 'no'}")
    print(f"Correct: {'yes' if status.is_correct else 'no'}")
    if status.is_won:
        print("Solved!")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationBenchmark

    benchmark = GenerationBenchmark(
        hole_counts=args.holes,
        runs=args.runs,
        time_limit_seconds=args.time_limit,
        seed=args.seed,
    )

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Hole counts: {benchmark.hole_counts}")
    print(f"Runs per hole count: {args.runs}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy hole count:")
    print("-" * 50)
    for holes, stats in summary["results_by_hole_count"].items():
        print(f"\n{holes} holes:")
        print(f"  OK: {stats['ok']}/{stats['runs']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Max Time: {stats['max_time_seconds']:.4f}s")
        if stats["slow"]:
            print(f"  Slower than {args.time_limit}s: {stats['slow']}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        from .benchmark.visualizer import Visualizer

        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
