"""Tests for the command-line interface."""

import json

import pytest
from sudokugen.cli import main


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


class TestCLI:
    """Tests for CLI commands."""

    def test_no_command_exits(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1

    def test_generate_json(self, tmp_path, capsys):
        out = tmp_path / "puzzles.json"
        main(["generate", "--count", "2", "--holes", "30", "--seed", "1", "--output", str(out)])

        data = json.loads(out.read_text())
        assert len(data) == 2
        assert data[0]["hole_count"] == 30
        assert data[0]["puzzle"].count("0") == 30
        assert "Total puzzles generated: 2" in capsys.readouterr().out

    def test_generate_difficulty(self, capsys):
        main(["generate", "--difficulty", "easy", "--seed", "2"])
        assert "41 clues, 40 holes" in capsys.readouterr().out

    def test_generate_bad_holes(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["generate", "--holes", "81"])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_solve(self, capsys):
        main(["solve", "--puzzle", TEST_PUZZLE])
        assert TEST_SOLUTION in capsys.readouterr().out

    def test_solve_unsolvable(self, capsys):
        with pytest.raises(SystemExit):
            main(["solve", "--puzzle", "123456780" + "000000009" + "0" * 63])
        assert "Error:" in capsys.readouterr().out

    def test_check(self, capsys):
        main(["check", "--values", TEST_SOLUTION, "--solution", TEST_SOLUTION])
        assert "Solved!" in capsys.readouterr().out

        main(["check", "--values", "." + TEST_SOLUTION[1:], "--solution", TEST_SOLUTION])
        out = capsys.readouterr().out
        assert "Full:    no" in out
        assert "Solved!" not in out

    def test_benchmark_without_charts(self, tmp_path, capsys):
        main([
            "benchmark", "--holes", "40", "80", "--runs", "2",
            "--output", str(tmp_path), "--no-charts",
        ])
        assert (tmp_path / "generation_results.json").exists()
        assert "Benchmark complete!" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
