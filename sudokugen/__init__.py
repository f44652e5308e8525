"""Sudoku puzzle generation and validation."""

from .core import (
    SudokuBoard,
    CompletionStatus,
    check_complete,
    is_cell_editable,
    is_placement_valid,
)
from .errors import (
    SudokuError,
    InvalidParameterError,
    InvalidGridError,
    GenerationFailedError,
)
from .generator import Difficulty, GeneratedPuzzle, SudokuGenerator, generate
from .game import EntryResult, GameRound

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "CompletionStatus",
    "check_complete",
    "is_cell_editable",
    "is_placement_valid",
    "SudokuError",
    "InvalidParameterError",
    "InvalidGridError",
    "GenerationFailedError",
    "Difficulty",
    "GeneratedPuzzle",
    "SudokuGenerator",
    "generate",
    "EntryResult",
    "GameRound",
]
