"""Sudoku puzzle generator: fill a grid, then carve holes out of it."""

from __future__ import annotations
import logging
import os
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..core.board import CELL_COUNT, SudokuBoard
from .carver import carve, check_hole_count
from .filler import complete_grid

log = logging.getLogger(__name__)


DEFAULT_HOLE_COUNT = 45


class Difficulty(Enum):
    """Named hole-count presets. These are not a rating of the puzzle."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def hole_count(self) -> int:
        """Number of cells cleared for this preset."""
        holes = {
            Difficulty.EASY: 40,
            Difficulty.MEDIUM: 45,
            Difficulty.HARD: 50,
            Difficulty.EXPERT: 55,
        }
        return holes[self]


@dataclass(frozen=True)
class GeneratedPuzzle:
    """A puzzle and the solution it was carved from."""
    puzzle: SudokuBoard
    solution: SudokuBoard
    hole_count: int
    # True where the player may type, fixed when the puzzle is created
    editable: Tuple[bool, ...] = field(default=())

    def __post_init__(self):
        if not self.editable:
            mask = tuple(self.puzzle.is_empty(i) for i in range(CELL_COUNT))
            object.__setattr__(self, "editable", mask)

    @property
    def clues(self) -> int:
        """Filled cells actually left in the puzzle."""
        return self.puzzle.count_filled()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "puzzle": self.puzzle.to_string(),
            "solution": self.solution.to_string(),
            "hole_count": self.hole_count,
            "clues": self.clues,
        }


def generate(
    hole_count: int = DEFAULT_HOLE_COUNT,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GeneratedPuzzle:
    """
    Generate a fresh puzzle/solution pair.

    Args:
        hole_count: Number of cells to clear, 0-80.
        rng: Random source shared by the filler and the carver.
        seed: Seed for a new random source when ``rng`` is not given.

    Raises:
        InvalidParameterError: If hole_count is outside 0-80. Nothing is
            generated in that case.
        GenerationFailedError: If the filler cannot complete the grid.
    """
    hole_count = check_hole_count(hole_count)
    if rng is None:
        rng = random.Random(seed)

    start = time.perf_counter()
    solution = complete_grid(SudokuBoard(), rng)
    puzzle = carve(solution, hole_count, rng)
    log.debug(
        "Generated puzzle with %d holes in %.4fs",
        hole_count, time.perf_counter() - start,
    )

    return GeneratedPuzzle(puzzle=puzzle, solution=solution, hole_count=hole_count)


class SudokuGenerator:
    """
    Generator for Sudoku puzzles.

    Algorithm:
    1. Fill an empty grid with randomized backtracking
    2. Clear a fixed number of distinct cells to create the puzzle

    The puzzle is not checked for a unique solution.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Random source to use instead of seeding a new one.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(
        self,
        hole_count: Optional[int] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> GeneratedPuzzle:
        """
        Generate a puzzle along with its solution.

        Args:
            hole_count: Cells to clear. Takes precedence over difficulty.
            difficulty: Preset used when hole_count is None.
        """
        return generate(self.resolve_hole_count(hole_count, difficulty), rng=self.rng)

    def generate_batch(
        self,
        count: int,
        hole_count: Optional[int] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> List[GeneratedPuzzle]:
        """Generate multiple puzzles with the same hole count."""
        holes = self.resolve_hole_count(hole_count, difficulty)
        return [generate(holes, rng=self.rng) for _ in range(count)]

    def complete_grid(self, grid: Any) -> SudokuBoard:
        """Fill the empty cells of a partial grid."""
        return complete_grid(grid, self.rng)

    @staticmethod
    def resolve_hole_count(
        hole_count: Optional[int] = None,
        difficulty: Optional[Difficulty] = None,
    ) -> int:
        """Pick the explicit hole count, else the preset's, else the default."""
        if hole_count is not None:
            return hole_count
        if difficulty is not None:
            return difficulty.hole_count
        return DEFAULT_HOLE_COUNT

    @staticmethod
    def save_to_folder(
        puzzles: List[GeneratedPuzzle],
        folder_path: str,
        prefix: str = "puzzle",
    ) -> List[str]:
        """
        Save puzzles to a folder as individual text files.

        Args:
            puzzles: Generated puzzles.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").

        Returns:
            Paths of the written files.
        """
        os.makedirs(folder_path, exist_ok=True)

        paths = []
        for i, generated in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(generated.puzzle.to_string())
                f.write("\n")
                f.write(generated.solution.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(generated.puzzle))
                f.write("\n")
            paths.append(file_path)

        return paths
