"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, as_board, GRID_SIZE, BOX_SIZE, CELL_COUNT
from .validator import (
    CompletionStatus,
    check_complete,
    is_cell_editable,
    is_placement_valid,
    is_valid,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "as_board",
    "GRID_SIZE",
    "BOX_SIZE",
    "CELL_COUNT",
    "CompletionStatus",
    "check_complete",
    "is_cell_editable",
    "is_placement_valid",
    "is_valid",
    "validate_solution",
]
