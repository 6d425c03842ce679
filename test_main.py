"""
Tests for the command-line entry point.
"""

import io

from main import main, play


def test_play_returns_finished_model():
    out = io.StringIO()
    model = play(io.StringIO("1 1 2 1 1 2 2 2 1 3"), out)
    assert model.is_game_over()
    assert out.getvalue().endswith("Game is over! X wins.\n")


def test_main_reads_input_file(tmp_path, capsys):
    moves = tmp_path / "moves.txt"
    moves.write_text("2 2 1 1 3 3 1 2 1 3 2 3 2 1 3 1 3 2\n", encoding="utf-8")

    assert main(["--input", str(moves)]) == 0

    captured = capsys.readouterr()
    assert captured.out.endswith("Game is over! Tie game.\n")


def test_main_quit_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))

    assert main([]) == 0

    captured = capsys.readouterr()
    assert "Game quit! Ending game state:" in captured.out
    # No banner when stdin is not a terminal
    assert "TicTacToe" not in captured.out


def test_main_exhausted_input(tmp_path, capsys):
    moves = tmp_path / "moves.txt"
    moves.write_text("2 2\n", encoding="utf-8")

    assert main(["--input", str(moves)]) == 1

    captured = capsys.readouterr()
    assert "Ran out of input" in captured.err


def test_main_missing_input_file(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1

    captured = capsys.readouterr()
    assert "could not read moves" in captured.err
    assert captured.out == ""
