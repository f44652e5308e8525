"""Validation utilities for Sudoku grids."""

from __future__ import annotations
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np

from .board import (
    CELL_COUNT,
    GRID_SIZE,
    SudokuBoard,
    as_board,
    box_origin,
    check_index,
    col_of,
    row_of,
)
from ..errors import InvalidGridError, InvalidParameterError


@dataclass(frozen=True)
class CompletionStatus:
    """Result of comparing the player's values against the solution."""
    is_full: bool
    is_correct: bool

    @property
    def is_won(self) -> bool:
        """The round is won when every cell is filled and matches the solution."""
        return self.is_full and self.is_correct

    def to_dict(self) -> Dict[str, bool]:
        """Convert status to dictionary."""
        return {
            "is_full": self.is_full,
            "is_correct": self.is_correct,
            "is_won": self.is_won,
        }


def is_valid(board: SudokuBoard, digit: int, index: int) -> bool:
    """
    Check if ``digit`` can go at ``index`` without a row, column or box clash.

    The target cell is part of every scan. It is expected to be empty, and
    0 never equals a digit 1-9, so it cannot collide with itself.

    Args:
        board: The Sudoku board.
        digit: Candidate digit (1-9).
        index: Flat cell index (0-80).

    Returns:
        True if all three checks pass.
    """
    row = row_of(index)
    col = col_of(index)

    # Check row
    if digit in board.get_row(row):
        return False

    # Check column
    if digit in board.get_col(col):
        return False

    # Check box
    box_row, box_col = box_origin(index)
    if digit in board.get_box(box_row, box_col):
        return False

    return True


def is_placement_valid(grid: Any, digit: int, index: int) -> bool:
    """
    Check a single placement on any grid-shaped value.

    Args:
        grid: A SudokuBoard, 81-char string, or 81 (or 9x9) integers.
        digit: Digit to place, 1-9.
        index: Flat cell index, 0-80.

    Raises:
        InvalidGridError: If the grid is malformed.
        InvalidParameterError: If digit or index is out of range.
    """
    board = as_board(grid)
    if isinstance(digit, bool) or not isinstance(digit, (int, np.integer)):
        raise InvalidParameterError(f"Digit must be an integer, got {digit!r}")
    if digit < 1 or digit > GRID_SIZE:
        raise InvalidParameterError(f"Digit must be 1-{GRID_SIZE}, got {digit}")
    return is_valid(board, int(digit), check_index(index))


def is_cell_editable(puzzle: Any, index: int) -> bool:
    """A cell is editable by the player iff the puzzle leaves it empty."""
    board = as_board(puzzle)
    return board.is_empty(check_index(index))


_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _parse_cell(value: Any) -> int:
    """
    Read one player-facing cell value.

    Strings are read like a text field: leading whitespace and sign are
    allowed, and trailing junk after the digits is ignored ("7abc" is 7).
    Missing or non-numeric entries (None, "", "x", NaN) read as empty.
    Numbers outside 0-9 are rejected.
    """
    if value is None:
        return 0
    if isinstance(value, str):
        match = _LEADING_INT.match(value.strip())
        if match is None:
            return 0
        number = int(match.group())
    elif isinstance(value, (bool, np.bool_)):
        raise InvalidGridError(f"Cell value must be a digit, got {value!r}")
    elif isinstance(value, (int, np.integer)):
        number = int(value)
    elif isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return 0
        if not float(value).is_integer():
            raise InvalidGridError(f"Cell value must be a whole number, got {value!r}")
        number = int(value)
    else:
        raise InvalidGridError(f"Unsupported cell value {value!r}")

    if number < 0 or number > GRID_SIZE:
        raise InvalidGridError(f"Cell value must be 0-{GRID_SIZE}, got {number}")
    return number


def _flatten_values(current_values: Any) -> List[Any]:
    """
    Turn a board, string, array, or flat/nested sequence into 81 raw cells.

    Arrays must be shaped (81,) or (9, 9). Nested sequences must be nine
    rows of nine cells.
    """
    if current_values is None:
        raise InvalidGridError("Grid is missing")
    if isinstance(current_values, SudokuBoard):
        return current_values.to_list()
    if isinstance(current_values, np.ndarray):
        if current_values.shape not in ((CELL_COUNT,), (GRID_SIZE, GRID_SIZE)):
            raise InvalidGridError(
                f"Grid must have shape ({CELL_COUNT},) or ({GRID_SIZE}, {GRID_SIZE}), "
                f"got {current_values.shape}"
            )
        return current_values.reshape(-1).tolist()
    if not isinstance(current_values, (str, list, tuple)):
        raise InvalidGridError(
            f"Grid must be a sequence of cells, got {type(current_values).__name__}"
        )

    values = list(current_values)
    rows = [v for v in values if isinstance(v, (list, tuple, np.ndarray))]
    if rows:
        if len(rows) != len(values) or len(values) != GRID_SIZE:
            raise InvalidGridError(f"Nested grid must be {GRID_SIZE} rows")
        if any(len(row) != GRID_SIZE for row in rows):
            raise InvalidGridError(f"Every row must hold {GRID_SIZE} cells")
        values = [cell for row in rows for cell in row]

    if len(values) != CELL_COUNT:
        raise InvalidGridError(f"Grid must hold {CELL_COUNT} cells, got {len(values)}")
    return values


def check_complete(current_values: Any, solution: Any) -> CompletionStatus:
    """
    Compare the player's current values against the solution.

    Args:
        current_values: 81 cells as shown to the player. Entries that are
            missing or not numeric count as empty.
        solution: The complete answer grid.

    Returns:
        CompletionStatus with ``is_full`` (no empty cell) and
        ``is_correct`` (every cell matches the solution).

    Raises:
        InvalidGridError: If either grid is malformed, or the solution is
            not complete.
    """
    answer = as_board(solution)
    if not answer.is_complete():
        raise InvalidGridError("Solution grid must not contain empty cells")

    values = [_parse_cell(v) for v in _flatten_values(current_values)]
    expected = answer.to_list()

    is_full = all(v != 0 for v in values)
    is_correct = all(v == e for v, e in zip(values, expected))

    return CompletionStatus(is_full=is_full, is_correct=is_correct)


def validate_solution(puzzle: Any, solution: Any) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The puzzle grid.
        solution: The proposed solution grid.

    Returns:
        True if the solution is complete, conflict-free, and keeps every
        clue of the puzzle.
    """
    puzzle_board = as_board(puzzle)
    solution_board = as_board(solution)

    clues = puzzle_board.cells != 0
    if not np.array_equal(puzzle_board.cells[clues], solution_board.cells[clues]):
        return False

    return solution_board.is_solved()
