"""
Unit tests for the command line front-end.

Tests input parsing, argument validation and scripted terminal games.
"""
from typing import Iterable

import pytest
import main
from minefield import Board, GameState


def feed_input(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> None:
    """Answer ``input()`` calls from a script, then signal end of input."""
    script = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(script)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


# ============================================================================
# Command Parsing Tests
# ============================================================================

class TestParseCommand:
    """Test player input parsing."""

    @pytest.mark.parametrize(
        "line, expected",
        [("r 1 2", ("r", 1, 2)), ("F 3 0", ("f", 3, 0)),
         ("  r 0 0  ", ("r", 0, 0)), ("n", ("n", -1, -1)),
         ("q", ("q", -1, -1))],
    )
    def test_valid_lines(self, line: str, expected: tuple) -> None:
        assert main.parse_command(line) == expected

    @pytest.mark.parametrize(
        "line", ["", "   ", "r 1", "f a b", "x 1 2", "n 1", "r 1 2 3"]
    )
    def test_invalid_lines(self, line: str) -> None:
        """Unknown or malformed commands are not understood."""
        assert main.parse_command(line) is None


# ============================================================================
# Argument Tests
# ============================================================================

class TestArguments:
    """Test command line argument validation."""

    def test_positive_int_accepts_positive(self) -> None:
        assert main.positive_int("3") == 3

    @pytest.mark.parametrize("args", [
        ["demo", "--games", "0"],
        ["demo", "--size", "-2"],
        ["play", "--width", "0"],
    ])
    def test_non_positive_values_rejected(self, args: list) -> None:
        with pytest.raises(SystemExit):
            main.build_parser().parse_args(args)

    def test_play_defaults(self) -> None:
        args = main.build_parser().parse_args(["play"])
        assert (args.width, args.height, args.mines) == (16, 16, 40)


# ============================================================================
# Terminal Game Tests
# ============================================================================

class TestRunGame:
    """Test scripted terminal games."""

    def test_ignore_and_flag_after_loss(
        self, walled_board: Board, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Answering yes flags the mine and play goes on."""
        feed_input(monkeypatch, ["r 2 1", "y", "q"])
        main.run_game(walled_board)

        assert walled_board.get_cell(2, 1).flagged is True
        assert walled_board.flagged_count == 1
        assert walled_board.game_state == GameState.PLAYING

    def test_decline_after_loss_resets(
        self, walled_board: Board, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Answering no starts a new game."""
        feed_input(monkeypatch, ["f 0 0", "r 1 1", "r 2 1", "n", "q"])
        main.run_game(walled_board)

        assert walled_board.game_state == GameState.PLAYING
        assert walled_board.lost_at is None
        assert walled_board.flagged_count == 0
        assert walled_board.revealed_safe_count == 0
        assert all(cell.is_hidden for _, cell in walled_board.iter_cells())

    def test_win_reports_and_resets(
        self, walled_board: Board, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        feed_input(monkeypatch, ["r 0 0", "r 4 1", "q"])
        main.run_game(walled_board)

        assert "*** WIN! ***" in capsys.readouterr().out
        assert walled_board.revealed_safe_count == 0
        assert walled_board.is_playing is True

    def test_rejected_actions_are_reported(
        self, walled_board: Board, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        feed_input(monkeypatch, ["r 9 9", "r 1 1", "f 1 1", "bogus"])
        main.run_game(walled_board)

        out = capsys.readouterr().out
        assert "Cannot reveal (9, 9): OUT_OF_BOUNDS" in out
        assert "Cannot flag (1, 1): ILLEGAL_ACTION" in out
        assert main.HELP in out

    def test_flag_updates_title(
        self, walled_board: Board, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        feed_input(monkeypatch, ["f 3 1", "q"])
        main.run_game(walled_board)
        assert "Minesweeper 1/3" in capsys.readouterr().out

    def test_play_with_seed(
        self, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        """play builds a seeded board and quits on request."""
        args = main.build_parser().parse_args(
            ["play", "--width", "5", "--height", "3", "--mines", "3", "--seed", "1"]
        )
        feed_input(monkeypatch, ["q"])
        main.play(args)
        assert capsys.readouterr().out.count(". . . . .") == 3


# ============================================================================
# Demo Tests
# ============================================================================

class TestDemo:
    """Test the random-play demo."""

    def test_demo_runs_to_summary(self, capsys) -> None:
        args = main.build_parser().parse_args(
            ["demo", "--games", "2", "--size", "4", "--mines", "2", "--seed", "0"]
        )
        main.demo(args)
        out = capsys.readouterr().out
        assert "=== Game 2/2" in out
        assert "=== Final:" in out
