"""Generator module for creating Sudoku puzzles."""

from .carver import carve, MAX_HOLE_COUNT
from .filler import fill, complete_grid
from .generator import (
    DEFAULT_HOLE_COUNT,
    Difficulty,
    GeneratedPuzzle,
    SudokuGenerator,
    generate,
)

__all__ = [
    "carve",
    "MAX_HOLE_COUNT",
    "fill",
    "complete_grid",
    "DEFAULT_HOLE_COUNT",
    "Difficulty",
    "GeneratedPuzzle",
    "SudokuGenerator",
    "generate",
]
