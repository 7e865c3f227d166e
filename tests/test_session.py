"""Tests for the session loop and entry point."""

import pytest

from src.shootout import session
from src.shootout.session import SessionLoop, main

ONE_MATCH = ["2", "1", "50", "2", "50"]


class TestSessionLoop:
    def test_single_match_then_quit(self, scripted_console, seeded_rng):
        console = scripted_console(ONE_MATCH + ["0"])
        results = SessionLoop(console, seeded_rng).run()

        assert len(results) == 1
        assert console.lines.count("Thanks for playing!") == 1
        assert console.lines[-1] == "Thanks for playing!"
        assert console.prompts[-1] == "Do you want to play again? (1-yes, 0-no): "
        assert console.answers == []

    def test_play_again_runs_another_match(self, scripted_console, seeded_rng):
        console = scripted_console(ONE_MATCH + ["1"] + ONE_MATCH + ["0"])
        results = SessionLoop(console, seeded_rng).run()
        assert len(results) == 2
        assert console.lines.count("Thanks for playing!") == 1

    def test_invalid_play_again_reprompts(self, scripted_console, seeded_rng):
        console = scripted_console(ONE_MATCH + ["2", "yes", "0"])
        SessionLoop(console, seeded_rng).run()
        assert console.lines.count("Sorry, that's not a valid input.") == 2

    def test_too_few_players_restarts_without_play_again(self, scripted_console, seeded_rng):
        console = scripted_console(["1"] + ONE_MATCH + ["0"])
        results = SessionLoop(console, seeded_rng).run()

        assert len(results) == 1
        assert console.lines[0] == "Number of players must be at least 2."
        assert console.prompts[:2] == [
            "Enter the number of players: ",
            "Enter the number of players: ",
        ]
        assert console.prompts.count("Do you want to play again? (1-yes, 0-no): ") == 1

    def test_eof_propagates(self, scripted_console, seeded_rng):
        console = scripted_console(["2", "1"])
        with pytest.raises(EOFError):
            SessionLoop(console, seeded_rng).run()


# ── Entry point ──────────────────────────────────────────────────────

class TestMain:
    @pytest.fixture(autouse=True)
    def _no_log_files(self, monkeypatch):
        monkeypatch.setattr(session, "setup_logging", lambda level: None)

    def _feed(self, monkeypatch, answers):
        answers = list(answers)

        def fake_input(prompt=""):
            if not answers:
                raise EOFError
            return answers.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)

    def test_plays_and_exits_zero(self, monkeypatch, capsys):
        self._feed(monkeypatch, ONE_MATCH + ["0"])
        assert main() == 0
        out = capsys.readouterr().out
        assert "Highest score is:" in out
        assert out.count("Thanks for playing!") == 1

    def test_eof_exits_zero_with_farewell(self, monkeypatch, capsys):
        self._feed(monkeypatch, [])
        assert main() == 0
        assert "Thanks for playing!" in capsys.readouterr().out

    def test_unexpected_error_exits_one(self, monkeypatch):
        def boom(self):
            raise RuntimeError("boom")

        monkeypatch.setattr(SessionLoop, "run", boom)
        assert main() == 1

    def test_logging_setup_failure_exits_one(self, monkeypatch):
        def unwritable(level):
            raise PermissionError("logs")

        monkeypatch.setattr(session, "setup_logging", unwritable)
        self._feed(monkeypatch, ONE_MATCH + ["0"])
        assert main() == 1

    def test_log_level_from_environment(self, monkeypatch):
        levels = []
        monkeypatch.setattr(session, "setup_logging", levels.append)
        monkeypatch.setenv("SHOOTOUT_LOG_LEVEL", "DEBUG")
        self._feed(monkeypatch, [])
        main()
        assert levels == ["DEBUG"]
