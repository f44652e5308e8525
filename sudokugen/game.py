"""Per-round game state for a presentation layer to drive."""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .core.board import CELL_COUNT, GRID_SIZE, check_index
from .core.validator import CompletionStatus, check_complete
from .errors import InvalidParameterError
from .generator import DEFAULT_HOLE_COUNT, GeneratedPuzzle, generate

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryResult:
    """Outcome of typing a digit into a cell."""
    index: Optional[int]
    digit: int
    accepted: bool
    is_error: bool
    status: CompletionStatus


class GameRound:
    """
    One round of play: the generated pair plus the player's entries.

    A new game means a new GameRound; nothing carries over between rounds.
    The puzzle and solution are never modified, player entries live in
    ``values``.
    """

    def __init__(self, generated: GeneratedPuzzle):
        self.generated = generated
        self.values: List[int] = generated.puzzle.to_list()
        self.selected: Optional[int] = None

    @classmethod
    def new(
        cls,
        hole_count: int = DEFAULT_HOLE_COUNT,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> GameRound:
        """Start a round with a freshly generated puzzle."""
        return cls(generate(hole_count, rng=rng, seed=seed))

    @property
    def puzzle(self):
        return self.generated.puzzle

    @property
    def solution(self):
        return self.generated.solution

    def is_editable(self, index: int) -> bool:
        return self.generated.editable[check_index(index)]

    def is_initial(self, index: int) -> bool:
        return not self.is_editable(index)

    def select(self, index: int) -> None:
        """Select a cell. Initial cells can be selected but not edited."""
        self.selected = check_index(index)

    def deselect(self) -> None:
        self.selected = None

    def _target(self, index: Optional[int]) -> Optional[int]:
        if index is None:
            return self.selected
        return check_index(index)

    def enter(self, digit: int, index: Optional[int] = None) -> EntryResult:
        """
        Put a digit into the selected cell, or into ``index`` if given.

        Entries on initial cells, or with nothing selected, are ignored and
        reported with ``accepted=False``. A wrong digit is kept and flagged
        with ``is_error=True``.
        """
        if isinstance(digit, bool) or not isinstance(digit, (int, np.integer)):
            raise InvalidParameterError(f"Digit must be an integer, got {digit!r}")
        if digit < 1 or digit > GRID_SIZE:
            raise InvalidParameterError(f"Digit must be 1-{GRID_SIZE}, got {digit}")
        digit = int(digit)

        target = self._target(index)
        if target is None or not self.is_editable(target):
            return EntryResult(
                index=target, digit=digit, accepted=False,
                is_error=False, status=self.status(),
            )

        self.values[target] = digit
        is_error = digit != self.solution.get(target)
        if is_error:
            log.debug("Wrong digit %d at cell %d", digit, target)

        return EntryResult(
            index=target, digit=digit, accepted=True,
            is_error=is_error, status=self.status(),
        )

    def erase(self, index: Optional[int] = None) -> bool:
        """Clear the selected (or given) cell. Returns False if it is not editable."""
        target = self._target(index)
        if target is None or not self.is_editable(target):
            return False
        self.values[target] = 0
        return True

    def error_cells(self) -> List[int]:
        """Indices holding a player digit that differs from the solution."""
        solution = self.solution.to_list()
        return [
            i for i in range(CELL_COUNT)
            if self.values[i] != 0 and self.values[i] != solution[i]
        ]

    def reveal_solution(self) -> CompletionStatus:
        """Fill every editable cell from the solution."""
        solution = self.solution.to_list()
        for i in range(CELL_COUNT):
            if self.generated.editable[i]:
                self.values[i] = solution[i]
        return self.status()

    def restart(self) -> None:
        """Drop all player entries, keeping the same puzzle."""
        self.values = self.puzzle.to_list()
        self.selected = None

    def status(self) -> CompletionStatus:
        return check_complete(self.values, self.solution)

    @property
    def is_won(self) -> bool:
        return self.status().is_won
