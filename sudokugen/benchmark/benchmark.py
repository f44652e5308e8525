"""Timing harness for puzzle generation."""

from __future__ import annotations
import json
import logging
import os
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ..core.validator import validate_solution
from ..errors import SudokuError
from ..generator import Difficulty, GeneratedPuzzle, SudokuGenerator, generate

log = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Results from a single generation run."""
    hole_count: int
    run: int
    time_seconds: float
    holes_cleared: int
    solution_valid: bool
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.solution_valid and self.holes_cleared == self.hole_count

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hole_count": self.hole_count,
            "run": self.run,
            "time_seconds": self.time_seconds,
            "holes_cleared": self.holes_cleared,
            "solution_valid": self.solution_valid,
            "ok": self.ok,
            **self.extra
        }


class GenerationBenchmark:
    """
    Times ``generate`` across several hole counts.

    Each run checks that the solution is a valid completed grid, that
    the puzzle keeps every clue of it, and that exactly the requested
    number of cells was cleared.
    """

    def __init__(
        self,
        hole_counts: Optional[List[int]] = None,
        runs: int = 10,
        time_limit_seconds: float = 2.0,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            hole_counts: Hole counts to time (default: every Difficulty preset).
            runs: Generations per hole count.
            time_limit_seconds: Runs slower than this are counted as slow.
            seed: Random seed for reproducibility.
        """
        self.hole_counts = hole_counts or [d.hole_count for d in Difficulty]
        self.runs = runs
        self.time_limit_seconds = time_limit_seconds
        self.seed = seed

        self.results: List[GenerationResult] = []
        self.puzzles: Dict[int, List[GeneratedPuzzle]] = {}

    def run(self, show_progress: bool = True) -> List[GenerationResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of GenerationResult objects.
        """
        rng = random.Random(self.seed)
        self.results = []
        self.puzzles = {}

        pbar = tqdm(
            total=len(self.hole_counts) * self.runs,
            desc="Generating",
            disable=not show_progress,
        )

        for hole_count in self.hole_counts:
            self.puzzles[hole_count] = []
            for run in range(self.runs):
                self.results.append(self._run_single(hole_count, run, rng))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, hole_count: int, run: int, rng: random.Random) -> GenerationResult:
        """Generate and check a single puzzle."""
        start = time.perf_counter()
        try:
            generated = generate(hole_count, rng=rng)
        except SudokuError as e:
            log.error("Generation with %d holes failed: %s", hole_count, e)
            return GenerationResult(
                hole_count=hole_count,
                run=run,
                time_seconds=time.perf_counter() - start,
                holes_cleared=0,
                solution_valid=False,
                extra={"error": str(e)}
            )
        elapsed = time.perf_counter() - start

        self.puzzles[hole_count].append(generated)
        if elapsed > self.time_limit_seconds:
            log.warning("Generation with %d holes took %.3fs", hole_count, elapsed)

        return GenerationResult(
            hole_count=hole_count,
            run=run,
            time_seconds=elapsed,
            holes_cleared=generated.puzzle.count_empty(),
            solution_valid=validate_solution(generated.puzzle, generated.solution),
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_runs": len(self.results),
            "hole_counts": list(self.hole_counts),
            "time_limit_seconds": self.time_limit_seconds,
            "results_by_hole_count": {}
        }

        for hole_count in self.hole_counts:
            group = [r for r in self.results if r.hole_count == hole_count]
            if not group:
                continue

            times = [r.time_seconds for r in group]
            summary["results_by_hole_count"][str(hole_count)] = {
                "runs": len(group),
                "ok": sum(1 for r in group if r.ok),
                "slow": sum(1 for t in times if t > self.time_limit_seconds),
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for hole_count, puzzles in self.puzzles.items():
            hole_dir = os.path.join(puzzles_dir, f"holes_{hole_count}")
            SudokuGenerator.save_to_folder(puzzles, hole_dir, prefix=f"puzzle_{hole_count}")

        log.info("Results and puzzles saved to %s", output_dir)
