"""Tests for the command line entry point."""

import json

from dragoncrow.game.controller import GameController
from dragoncrow.game.scoring import determine_winner
from dragoncrow.game.validator import RejectReason
from dragoncrow.main import main, run_command


class TestRunCommand:
    """Tests for text command parsing."""

    def test_turn_commands(self):
        game = GameController()
        game.start()

        assert run_command(game, "d").accepted
        assert run_command(game, "h 2").accepted
        assert run_command(game, "p 1").accepted
        assert game.current_player == 1
        assert game.piles[1].top() is not None

    def test_take_and_decline(self):
        game = GameController()
        game.start()
        run_command(game, "d")
        run_command(game, "r")
        run_command(game, "p 0")

        assert run_command(game, "t 0").accepted
        assert run_command(game, "r").accepted

    def test_rejected_command(self):
        game = GameController()
        game.start()
        result = run_command(game, "h 0")
        assert result.reason == RejectReason.WRONG_STEP

    def test_unknown_or_incomplete(self, capsys):
        game = GameController()
        game.start()

        assert run_command(game, "") is None
        assert run_command(game, "p") is None
        assert run_command(game, "h x") is None
        assert run_command(game, "help") is None
        assert "Commands:" in capsys.readouterr().out


class TestScoring:
    """Tests for the winner rule."""

    def test_lowest_wins(self):
        assert determine_winner([12, 21, 0, 13]) == 2

    def test_first_minimum_wins_ties(self):
        assert determine_winner([5, 3, 3, 7]) == 1
        assert determine_winner([0, 0, 0, 0]) == 0


class TestMain:
    """Tests for main()."""

    def test_auto_game(self, capsys):
        assert main(["--auto", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "GAME OVER" in out
        assert "winner" in out

    def test_auto_game_with_log(self, tmp_path):
        assert main(["--auto", "-s", "4", "--game-log", str(tmp_path)]) == 0

        logs = list(tmp_path.glob("*.jsonl"))
        assert len(logs) == 1
        events = [json.loads(line) for line in logs[0].read_text().splitlines()]
        assert events[0]["type"] == "game_start"
        assert events[-1]["type"] == "game_end"

    def test_bad_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("deck:\n  dragon_assets: []\n")
        assert main(["--auto", "-c", str(path)]) == 2

    def test_invalid_config_value(self, tmp_path):
        """Test a badly typed config value exits with the config error code."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  num_discard_piles: none\n")
        assert main(["--auto", "-c", str(path)]) == 2

    def test_interactive_quit(self, monkeypatch, capsys):
        commands = iter(["d", "r", "p 0", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

        assert main(["-s", "1"]) == 0
        assert "Player 1's turn" in capsys.readouterr().out
