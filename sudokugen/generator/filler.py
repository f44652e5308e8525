"""Randomized backtracking filler for complete Sudoku grids."""

from __future__ import annotations
import logging
import random
from typing import Any, Optional

from ..core.board import GRID_SIZE, SudokuBoard, as_board
from ..core.validator import is_valid
from ..errors import GenerationFailedError

log = logging.getLogger(__name__)


def fill(board: SudokuBoard, rng: Optional[random.Random] = None) -> bool:
    """
    Fill every empty cell of ``board`` in place using randomized backtracking.

    The lowest-index empty cell is filled first. Its candidates 1-9 are
    shuffled on every call, so repeated fills of an empty board give
    different solutions.

    Args:
        board: Board to complete. Owned by the caller and mutated.
        rng: Random source. Defaults to a fresh ``random.Random()``.

    Returns:
        True if the board is now complete, False if no digit fits somewhere
        (the board is then left exactly as it was passed in).
    """
    if rng is None:
        rng = random.Random()

    index = board.find_empty()
    if index is None:
        return True

    candidates = list(range(1, GRID_SIZE + 1))
    rng.shuffle(candidates)

    for digit in candidates:
        if is_valid(board, digit, index):
            board.set(index, digit)
            if fill(board, rng):
                return True
            board.clear(index)

    return False


def complete_grid(grid: Any, rng: Optional[random.Random] = None) -> SudokuBoard:
    """
    Return a completed copy of a partial grid.

    Args:
        grid: Any grid-shaped value. Non-zero cells are kept as given.
        rng: Random source for the candidate order.

    Raises:
        InvalidGridError: If the grid is malformed.
        GenerationFailedError: If the givens already clash, or no completion
            exists.
    """
    board = as_board(grid).copy()
    if not board.is_valid():
        log.warning("Givens already clash in a row, column or box")
        raise GenerationFailedError("Grid already has a row, column or box conflict")

    empty = board.count_empty()
    if not fill(board, rng):
        log.warning("Backtracking exhausted on a grid with %d empty cells", empty)
        raise GenerationFailedError("Grid cannot be completed to a valid solution")

    log.debug("Completed grid with %d empty cells", empty)
    return board
