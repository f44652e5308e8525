"""Derive a playable puzzle from a solved grid by clearing cells."""

from __future__ import annotations
import random
from typing import Any, Optional

import numpy as np

from ..core.board import CELL_COUNT, SudokuBoard, as_board
from ..errors import InvalidParameterError


MAX_HOLE_COUNT = CELL_COUNT - 1


def check_hole_count(hole_count: Any) -> int:
    """Return hole_count as an int, or raise if it is not in 0-80."""
    if isinstance(hole_count, (bool, np.bool_)) or not isinstance(hole_count, (int, np.integer)):
        raise InvalidParameterError(f"Hole count must be an integer, got {hole_count!r}")
    if hole_count < 0 or hole_count > MAX_HOLE_COUNT:
        raise InvalidParameterError(
            f"Hole count must be 0-{MAX_HOLE_COUNT}, got {hole_count}"
        )
    return int(hole_count)


def carve(solution: Any, hole_count: int, rng: Optional[random.Random] = None) -> SudokuBoard:
    """
    Clear exactly ``hole_count`` distinct cells of a copy of ``solution``.

    Indices are drawn uniformly from 0-80. A draw that lands on a cell
    already cleared is drawn again and not counted. The puzzle is not
    checked for a unique solution.

    Args:
        solution: The solved grid. Left untouched.
        hole_count: Number of cells to clear, 0-80.
        rng: Random source; only ``randrange`` is used.

    Returns:
        The puzzle board.

    Raises:
        InvalidParameterError: If hole_count is outside 0-80, or larger
            than the number of filled cells.
    """
    hole_count = check_hole_count(hole_count)
    if rng is None:
        rng = random.Random()

    puzzle = as_board(solution).copy()
    if puzzle.count_filled() < hole_count:
        raise InvalidParameterError(
            f"Cannot clear {hole_count} cells, only {puzzle.count_filled()} are filled"
        )

    removed = 0
    while removed < hole_count:
        index = rng.randrange(CELL_COUNT)
        if not puzzle.is_empty(index):
            puzzle.clear(index)
            removed += 1

    return puzzle
