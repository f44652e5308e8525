"""Exceptions raised by the Sudoku generation and validation core."""


class SudokuError(Exception):
    """Base class for all errors raised by sudokugen."""


class InvalidParameterError(SudokuError, ValueError):
    """A scalar argument (hole count, digit, cell index) is out of range."""


class InvalidGridError(SudokuError, ValueError):
    """A grid has the wrong shape or holds values outside 0-9."""


class GenerationFailedError(SudokuError, RuntimeError):
    """Backtracking could not complete the given grid."""
