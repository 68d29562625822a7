"""Tests for the command-line entrypoint."""

import pytest

from bgengine import __version__
from bgengine.main import build_parser, config_from_args, main


class TestCli:
    """Tests for argument parsing and the play command."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "play" in capsys.readouterr().out

    def test_config_from_args(self):
        args = build_parser().parse_args(
            ["play", "--seed", "4", "--white", "random", "--max-turns", "50"]
        )
        config = config_from_args(args)
        assert config.seed == 4
        assert config.white_agent == "random"
        assert config.black_agent == "random"
        assert config.max_turns == 50
        assert config.verbose is False

    def test_play(self, capsys):
        assert main(["play", "--seed", "1", "--max-turns", "3000"]) == 0
        out = capsys.readouterr().out
        assert "wins after" in out

    def test_play_turn_cap(self, capsys):
        assert main(["play", "--seed", "1", "--max-turns", "1"]) == 1
        assert "No winner" in capsys.readouterr().out
