"""Flat 81-cell Sudoku board representation."""

from __future__ import annotations
import numpy as np
from typing import Any, List, Optional, Sequence, Tuple

from ..errors import InvalidGridError, InvalidParameterError


GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE


def row_of(index: int) -> int:
    """Row (0-8) of a flat cell index."""
    return index // GRID_SIZE


def col_of(index: int) -> int:
    """Column (0-8) of a flat cell index."""
    return index % GRID_SIZE


def box_origin(index: int) -> Tuple[int, int]:
    """Top-left (row, col) of the 3x3 box containing a flat cell index."""
    return ((row_of(index) // BOX_SIZE) * BOX_SIZE,
            (col_of(index) // BOX_SIZE) * BOX_SIZE)


def check_index(index: Any) -> int:
    """Return index as an int, or raise if it is not a cell index 0-80."""
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise InvalidParameterError(f"Cell index must be an integer, got {index!r}")
    if index < 0 or index >= CELL_COUNT:
        raise InvalidParameterError(f"Cell index must be 0-{CELL_COUNT - 1}, got {index}")
    return int(index)


class SudokuBoard:
    """
    A 9x9 Sudoku grid stored as 81 cells in row-major order.

    Cell ``i`` sits at row ``i // 9``, column ``i % 9``. The value 0 means
    empty and 1-9 are placed digits.
    """

    def __init__(self, cells: Optional[Sequence[int]] = None):
        """
        Initialize a board.

        Args:
            cells: Optional 81 values (flat sequence, or a 9x9 nested
                   sequence / array). If None, creates an empty board.

        Raises:
            InvalidGridError: If the shape or the values are not a valid grid.
        """
        if cells is None:
            self.cells = np.zeros(CELL_COUNT, dtype=np.int32)
            return

        try:
            arr = np.asarray(cells)
        except ValueError as e:
            raise InvalidGridError(f"Grid is not a rectangular sequence: {e}") from e

        if arr.shape == (GRID_SIZE, GRID_SIZE):
            arr = arr.reshape(CELL_COUNT)
        if arr.shape != (CELL_COUNT,):
            raise InvalidGridError(
                f"Grid must hold {CELL_COUNT} cells, got shape {arr.shape}"
            )
        if arr.dtype.kind not in "iu":
            raise InvalidGridError(f"Grid values must be integers, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() > GRID_SIZE:
            raise InvalidGridError(f"Grid values must be 0-{GRID_SIZE}")

        self.cells = arr.astype(np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.cells = self.cells.copy()
        return new_board

    def get(self, index: int) -> int:
        """Get value at a flat index. 0 means empty."""
        return int(self.cells[index])

    def set(self, index: int, value: int) -> None:
        """Set value at a flat index. Use 0 to clear."""
        if value < 0 or value > GRID_SIZE:
            raise InvalidParameterError(f"Value must be 0-{GRID_SIZE}, got {value}")
        self.cells[index] = value

    def clear(self, index: int) -> None:
        """Clear the cell at a flat index."""
        self.cells[index] = 0

    def is_empty(self, index: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return bool(self.cells[index] == 0)

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        start = row * GRID_SIZE
        return self.cells[start:start + GRID_SIZE]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.cells[col::GRID_SIZE]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        square = self.cells.reshape(GRID_SIZE, GRID_SIZE)
        return square[box_row:box_row + BOX_SIZE,
                      box_col:box_col + BOX_SIZE].flatten()

    def find_empty(self) -> Optional[int]:
        """Lowest index holding 0, or None if the board is full."""
        empty = np.flatnonzero(self.cells == 0)
        if empty.size == 0:
            return None
        return int(empty[0])

    def get_empty_cells(self) -> List[int]:
        """Get list of all empty cell indices."""
        return [int(i) for i in np.flatnonzero(self.cells == 0)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.cells == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.cells != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if the board is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(GRID_SIZE)]
        units += [self.get_col(j) for j in range(GRID_SIZE)]
        units += [
            self.get_box(box_row, box_col)
            for box_row in range(0, GRID_SIZE, BOX_SIZE)
            for box_col in range(0, GRID_SIZE, BOX_SIZE)
        ]

        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        return True

    def is_solved(self) -> bool:
        """Check if the board is completely and correctly filled."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[int]:
        """Return the 81 cell values as a list of ints."""
        return self.cells.tolist()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.cells.tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
        """
        if len(s) != CELL_COUNT:
            raise InvalidGridError(f"String length must be {CELL_COUNT}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(0)
            elif c in '123456789':
                values.append(int(c))
            else:
                raise InvalidGridError(f"Unexpected character {c!r} in grid string")

        return cls(values)

    @classmethod
    def from_list(cls, data: Sequence[Any]) -> SudokuBoard:
        """Create a board from a flat or nested list of ints."""
        return cls(data)

    def __len__(self) -> int:
        return CELL_COUNT

    def __getitem__(self, index: int) -> int:
        return int(self.cells[index])

    def __iter__(self):
        return iter(self.cells.tolist())

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(GRID_SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j, val in enumerate(self.get_row(i).tolist()):
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash(self.to_string())


def as_board(grid: Any) -> SudokuBoard:
    """
    Coerce a grid-shaped value into a SudokuBoard.

    Accepts a SudokuBoard (returned as-is, not copied), an 81-character
    string, or anything ``SudokuBoard(...)`` accepts. None is not a grid;
    use ``SudokuBoard()`` for an empty board.
    """
    if grid is None:
        raise InvalidGridError("Grid is missing")
    if isinstance(grid, SudokuBoard):
        return grid
    if isinstance(grid, str):
        return SudokuBoard.from_string(grid)
    return SudokuBoard(grid)
