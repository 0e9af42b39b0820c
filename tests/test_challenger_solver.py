"""
Smoke tests for the command-line application.
"""

import sys

import numpy as np
import pytest

from challenger.challenger_solver import (
    EXIT_BUDGET_EXHAUSTED,
    EXIT_INVALID,
    EXIT_NO_SOLUTION,
    ChallengerSolver,
    main,
)
from challenger.solver import SolveStatus
from challenger.table_io import load_table, save_table


def test_process_table_saves_outputs(tmp_path, puzzle_table, solved_table):
    table_path = tmp_path / "puzzle.csv"
    save_table(table_path, puzzle_table)
    output_dir = tmp_path / "out"

    solver = ChallengerSolver(render=True, cell_size=30)
    result = solver.process_table(str(table_path), str(output_dir))

    assert result['status'] is SolveStatus.SOLVED
    assert np.array_equal(result['solution'], np.array(solved_table))
    assert np.array_equal(load_table(output_dir / "puzzle_solution.csv"), np.array(solved_table))
    assert (output_dir / "puzzle_solution.png").exists()


def test_process_table_no_save(tmp_path, puzzle_table):
    table_path = tmp_path / "puzzle.csv"
    save_table(table_path, puzzle_table)
    output_dir = tmp_path / "out"

    ChallengerSolver(save_output=False).process_table(str(table_path), str(output_dir))
    assert not output_dir.exists()


def test_process_table_invalid(tmp_path, capsys):
    table_path = tmp_path / "small.csv"
    save_table(table_path, [[1, 2], [3, 4]])

    result = ChallengerSolver().process_table(str(table_path), str(tmp_path / "out"))
    assert result['solution'] is None
    assert "Invalid table" in capsys.readouterr().out


def test_main_exits_on_no_solution(tmp_path, monkeypatch, puzzle_table, capsys):
    puzzle_table[1][4] = 1
    table_path = tmp_path / "puzzle.csv"
    save_table(table_path, puzzle_table)

    monkeypatch.setattr(sys, "argv", ["challenger", "--table", str(table_path), "--no-save"])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == EXIT_NO_SOLUTION
    assert "No solution." in capsys.readouterr().out


def test_main_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["challenger", "--table", str(tmp_path / "missing.csv")])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == EXIT_INVALID


def test_main_solves(tmp_path, monkeypatch, puzzle_table, capsys):
    table_path = tmp_path / "puzzle.csv"
    save_table(table_path, puzzle_table)

    monkeypatch.setattr(sys, "argv", [
        "challenger", "-t", str(table_path), "-o", str(tmp_path / "out"), "-m", "0",
    ])
    main()
    assert "Solved puzzle (Solved in 7 steps)" in capsys.readouterr().out


def test_process_table_budget_exhausted(tmp_path, puzzle_table, capsys):
    table_path = tmp_path / "puzzle.csv"
    save_table(table_path, puzzle_table)

    result = ChallengerSolver(max_steps=2, save_output=False).process_table(
        str(table_path), str(tmp_path / "out"))
    assert result['status'] is SolveStatus.BUDGET_EXHAUSTED
    assert result['solution'] is None
    out = capsys.readouterr().out
    assert "Search gave up" in out
    assert "No solution." not in out


def test_main_exits_on_step_limit(tmp_path, monkeypatch, puzzle_table, capsys):
    table_path = tmp_path / "puzzle.csv"
    save_table(table_path, puzzle_table)

    monkeypatch.setattr(sys, "argv", ["challenger", "-t", str(table_path), "-m", "2", "--no-save"])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == EXIT_BUDGET_EXHAUSTED
    out = capsys.readouterr().out
    assert "Step limit reached" in out
    assert "No solution." not in out


def test_main_invalid_table_exit_code(tmp_path, monkeypatch, capsys):
    table_path = tmp_path / "small.csv"
    save_table(table_path, [[1, 2], [3, 4]])

    monkeypatch.setattr(sys, "argv", ["challenger", "-t", str(table_path), "--no-save"])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == EXIT_INVALID
    assert "No solution." not in capsys.readouterr().out


def test_main_writes_blank_template(tmp_path, monkeypatch):
    template_path = tmp_path / "blank.csv"

    monkeypatch.setattr(sys, "argv", ["challenger", "--template", str(template_path)])
    main()
    table = load_table(template_path)
    assert table.shape == (6, 5)
    assert not table.any()
