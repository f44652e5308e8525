"""Unit tests for filling, carving and puzzle generation."""

import random
import time

import pytest
from sudokugen.core.board import SudokuBoard
from sudokugen.errors import GenerationFailedError, InvalidGridError, InvalidParameterError
from sudokugen.generator import (
    Difficulty,
    GeneratedPuzzle,
    SudokuGenerator,
    carve,
    complete_grid,
    fill,
    generate,
)


TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class ScriptedRandom:
    """Random source whose randrange returns a fixed sequence."""

    def __init__(self, picks):
        self.picks = iter(picks)
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        return next(self.picks)


def assert_units_are_permutations(board):
    digits = list(range(1, 10))
    for i in range(9):
        assert sorted(board.get_row(i).tolist()) == digits
        assert sorted(board.get_col(i).tolist()) == digits
    for box_row in range(0, 9, 3):
        for box_col in range(0, 9, 3):
            assert sorted(board.get_box(box_row, box_col).tolist()) == digits


class TestFill:
    """Tests for the backtracking filler."""

    def test_fills_empty_board(self):
        board = SudokuBoard()
        assert fill(board, random.Random(1))
        assert_units_are_permutations(board)

    def test_full_board_is_base_case(self):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        assert fill(board)
        assert board.to_string() == TEST_SOLUTION

    def test_keeps_givens(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        assert fill(board, random.Random(7))
        assert board.to_string() == TEST_SOLUTION

    def test_failure_leaves_board_unchanged(self):
        """Cell 8 has no candidate: 1-8 are in its row, 9 is in its column."""
        board = SudokuBoard.from_string("123456780" + "000000009" + "0" * 63)
        before = board.to_string()
        assert not fill(board)
        assert board.to_string() == before

    def test_seeded_fills_are_reproducible(self):
        a, b = SudokuBoard(), SudokuBoard()
        fill(a, random.Random(99))
        fill(b, random.Random(99))
        assert a == b


class TestCompleteGrid:
    """Tests for completing a caller's grid."""

    def test_returns_copy(self):
        puzzle = SudokuBoard.from_string(TEST_PUZZLE)
        solution = complete_grid(puzzle)
        assert solution.to_string() == TEST_SOLUTION
        assert puzzle.to_string() == TEST_PUZZLE

    def test_unsolvable_grid_raises(self):
        with pytest.raises(GenerationFailedError):
            complete_grid("123456780" + "000000009" + "0" * 63)

    def test_conflicting_givens_raise(self):
        """Clashing givens cannot be completed, so generation fails."""
        with pytest.raises(GenerationFailedError):
            complete_grid("11" + "0" * 79)

    def test_malformed_grid_raises(self):
        with pytest.raises(InvalidGridError):
            complete_grid([0] * 80)
        with pytest.raises(InvalidGridError):
            complete_grid(None)


class TestCarve:
    """Tests for the puzzle carver."""

    def test_duplicate_draws_are_retried(self):
        """Picking index 5 twice still clears three distinct cells."""
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        rng = ScriptedRandom([5, 5, 10, 40])

        puzzle = carve(solution, 3, rng)

        assert puzzle.get_empty_cells() == [5, 10, 40]
        assert rng.calls == 4
        assert solution.to_string() == TEST_SOLUTION

    def test_clears_exact_count(self):
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        for holes in (0, 1, 40, 45, 80):
            puzzle = carve(solution, holes, random.Random(holes))
            assert puzzle.count_empty() == holes

    @pytest.mark.parametrize("holes", [-1, 81, 100, 4.5, None])
    def test_rejects_bad_hole_count(self, holes):
        rng = ScriptedRandom([])
        with pytest.raises(InvalidParameterError):
            carve(TEST_SOLUTION, holes, rng)
        assert rng.calls == 0

    def test_rejects_more_holes_than_clues(self):
        with pytest.raises(InvalidParameterError):
            carve(TEST_PUZZLE, 60)


class TestGenerate:
    """Tests for the generate operation."""

    def test_solution_is_complete(self):
        generated = generate(45)
        assert generated.solution.is_solved()
        assert_units_are_permutations(generated.solution)

    def test_puzzle_is_sub_assignment(self):
        generated = generate(42, seed=3)
        puzzle, solution = generated.puzzle, generated.solution

        assert puzzle.count_empty() == 42
        for i in range(81):
            if not puzzle.is_empty(i):
                assert puzzle.get(i) == solution.get(i)

    def test_zero_holes(self):
        generated = generate(0)
        assert generated.puzzle == generated.solution
        assert not any(generated.editable)

    def test_eighty_holes_is_fast(self):
        start = time.perf_counter()
        generated = generate(80)
        elapsed = time.perf_counter() - start

        assert generated.puzzle.count_filled() == 1
        assert sum(generated.editable) == 80
        assert elapsed < 2.0

    @pytest.mark.parametrize("holes", [-1, 81])
    def test_rejects_bad_hole_count(self, holes):
        with pytest.raises(InvalidParameterError):
            generate(holes)

    def test_editable_mask_matches_holes(self):
        generated = generate(40, seed=11)
        for i in range(81):
            assert generated.editable[i] == generated.puzzle.is_empty(i)

    def test_seed_is_reproducible(self):
        assert generate(40, seed=5) == generate(40, seed=5)

    def test_to_dict(self):
        data = generate(45, seed=1).to_dict()
        assert data["hole_count"] == 45
        assert data["clues"] == 36
        assert data["puzzle"].count("0") == 45
        assert len(data["solution"]) == 81

    def test_clues_count_the_puzzle(self):
        """Clue count comes from the puzzle, not from the stated hole count."""
        solution = SudokuBoard.from_string(TEST_SOLUTION)
        puzzle = solution.copy()
        puzzle.clear(0)
        generated = GeneratedPuzzle(puzzle=puzzle, solution=solution, hole_count=45)
        assert generated.clues == 80
        assert generated.to_dict()["clues"] == 80


class TestSudokuGenerator:
    """Tests for SudokuGenerator class."""

    def test_difficulty_presets(self):
        generator = SudokuGenerator(seed=42)
        generated = generator.generate(difficulty=Difficulty.EASY)
        assert generated.hole_count == 40
        assert generated.puzzle.count_empty() == 40

    def test_hole_count_wins_over_difficulty(self):
        generator = SudokuGenerator(seed=42)
        generated = generator.generate(hole_count=10, difficulty=Difficulty.EXPERT)
        assert generated.puzzle.count_empty() == 10

    def test_default_hole_count(self):
        assert SudokuGenerator(seed=42).generate().hole_count == 45

    def test_generate_batch(self):
        generator = SudokuGenerator(seed=42)
        puzzles = generator.generate_batch(3, hole_count=30)

        assert len(puzzles) == 3
        for generated in puzzles:
            assert isinstance(generated, GeneratedPuzzle)
            assert generated.puzzle.count_empty() == 30
            assert generated.solution.is_solved()

    def test_complete_grid(self):
        generator = SudokuGenerator(seed=42)
        assert generator.complete_grid(TEST_PUZZLE).to_string() == TEST_SOLUTION

    def test_save_to_folder(self, tmp_path):
        generator = SudokuGenerator(seed=42)
        puzzles = generator.generate_batch(2, hole_count=40)

        paths = SudokuGenerator.save_to_folder(puzzles, str(tmp_path / "out"), prefix="p")

        assert [p.split("/")[-1] for p in paths] == ["p_1.txt", "p_2.txt"]
        lines = (tmp_path / "out" / "p_1.txt").read_text().splitlines()
        assert lines[0] == puzzles[0].puzzle.to_string()
        assert lines[1] == puzzles[0].solution.to_string()


class TestDifficultyLevels:
    """Test difficulty hole-count presets."""

    def test_presets_increase(self):
        holes = [d.hole_count for d in Difficulty]
        assert holes == sorted(holes)
        assert Difficulty.EASY.hole_count == 40
        assert Difficulty.MEDIUM.hole_count == 45


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
