"""
Unit tests for the command line entry point.
"""
import pytest
import numpy as np
from minesweeper import BoardConfig
from minesweeper import cli


class TestMain:
    """Test argument handling and subcommands."""

    def test_no_command_prints_help(self, capsys) -> None:
        """Without a subcommand the help text is shown."""
        assert cli.main([]) == 0
        assert "usage: minesweeper" in capsys.readouterr().out

    def test_play_passes_board_config(self, monkeypatch, capsys) -> None:
        """play builds the board config from the arguments."""
        calls = []
        monkeypatch.setattr(
            cli, "play_game", lambda config, rng: calls.append((config, rng))
        )

        assert cli.main(["play", "--size", "5", "--mines", "3", "--seed", "9"]) == 0

        (config, rng), = calls
        assert config == BoardConfig(5, 3)
        assert rng.integers(0, 1000) == np.random.default_rng(9).integers(0, 1000)
        assert "Board: 5x5 with 3 mines" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv", [["play", "--size", "0"], ["demo", "--size", "2", "--mines", "4"]]
    )
    def test_invalid_board_rejected(self, argv, capsys) -> None:
        """Bad sizes or mine counts exit with status 2."""
        assert cli.main(argv) == 2
        assert "Invalid board" in capsys.readouterr().out

    def test_demo_plays_every_game(self, capsys) -> None:
        """demo runs the requested number of games and reports wins."""
        argv = [
            "demo", "--games", "2", "--size", "4", "--mines", "2",
            "--seed", "3", "--delay", "0",
        ]
        assert cli.main(argv) == 0

        out = capsys.readouterr().out
        assert "=== Game 1/2 | Step 1 ===" in out
        assert "=== Game 2/2 | Step 1 ===" in out
        assert "=== Final: " in out
        assert "/2 wins ===" in out

    def test_demo_is_repeatable_with_seed(self, capsys) -> None:
        """The same seed replays the same games."""
        argv = [
            "demo", "--games", "1", "--size", "5", "--mines", "4",
            "--seed", "12", "--delay", "0",
        ]
        cli.main(argv)
        first = capsys.readouterr().out
        cli.main(argv)
        assert capsys.readouterr().out == first
