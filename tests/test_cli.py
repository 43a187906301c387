"""Tests for the batch simulation command line."""

import pytest

import simulate_games


def test_defaults():
    assert simulate_games.parse_arguments([]) == (10, 2, 4, None)


def test_positional_and_render():
    assert simulate_games.parse_arguments(["3", "5", "--render", "out.png", "2"]) == (3, 5, 2, "out.png")


def test_bad_arguments():
    with pytest.raises(ValueError):
        simulate_games.parse_arguments(["many"])
    with pytest.raises(ValueError):
        simulate_games.parse_arguments(["1", "2", "3", "4"])
    with pytest.raises(ValueError):
        simulate_games.parse_arguments(["--render"])


def test_main_prints_report(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["simulate_games.py", "2", "2", "2"])
    simulate_games.main()
    out = capsys.readouterr().out
    assert "Games played:    2" in out
    assert "[AI] Red" in out
