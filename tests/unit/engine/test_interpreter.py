"""Tests for the line interpreter."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from pathlib import Path

import pytest

from witcher_tracker.core.config import ReplSettings
from witcher_tracker.core.logging import configure_logging
from witcher_tracker.engine.interpreter import Interpreter, execute_line
from witcher_tracker.models.enums import Outcome, SentenceKind
from witcher_tracker.models.world import WorldState


class TestExecuteLine:
    """Tests for Interpreter.execute_line."""

    def test_trims_line(self, interpreter: Interpreter) -> None:
        """Test that surrounding whitespace and the newline are ignored."""
        result = interpreter.execute_line("  Geralt loots 3 mandrake \n")
        assert result.response == "Alchemy ingredients obtained"
        assert result.kind == SentenceKind.LOOT

    @pytest.mark.parametrize("line", ["", "   ", "\n"])
    def test_empty_line_is_invalid(self, interpreter: Interpreter, line: str) -> None:
        """Test that blank lines are invalid."""
        result = interpreter.execute_line(line)
        assert result.response == "INVALID"
        assert result.outcome == Outcome.INVALID
        assert result.kind is None

    def test_unrecognized_line_is_invalid(self, interpreter: Interpreter) -> None:
        """Test that grammar errors become the invalid response."""
        assert interpreter.execute_line("Geralt dances").response == "INVALID"

    def test_comma_spacing_is_invalid(self, interpreter: Interpreter, world: WorldState) -> None:
        """Test that a comma spacing error rejects the whole line."""
        assert interpreter.execute_line("Geralt loots 1 Rebis,2 Vitriol").response == "INVALID"
        assert world.ingredients == {}

    def test_over_long_line_is_invalid(self, world: WorldState) -> None:
        """Test that lines over the limit are rejected."""
        interpreter = Interpreter(world, ReplSettings(max_line_length=16))
        assert interpreter.execute_line("Geralt loots 1 Rebis").response == "INVALID"
        assert world.ingredients == {}

    def test_custom_invalid_response(self, world: WorldState) -> None:
        """Test that the invalid response is configurable."""
        interpreter = Interpreter(world, ReplSettings(invalid_response="?"))
        assert interpreter.execute_line("nonsense").response == "?"

    def test_exit_keyword(self, interpreter: Interpreter) -> None:
        """Test that the exit keyword stops the interpreter."""
        result = interpreter.execute_line("  Exit ")
        assert result.should_exit is True
        assert result.outcome == Outcome.EXIT

    def test_defaults_to_fresh_world(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an interpreter without arguments owns a new world."""
        monkeypatch.chdir(tmp_path)
        interpreter = Interpreter()
        assert interpreter.world.ingredients == {}
        assert interpreter.settings.exit_keyword == "Exit"


class TestRun:
    """Tests for Interpreter.run."""

    def test_stops_at_exit(self, run_script: Callable[[str], list[str]]) -> None:
        """Test that lines after Exit are not processed."""
        responses = run_script("Geralt loots 1 Rebis\nExit\nGeralt loots 1 Rebis\n")
        assert responses == ["Alchemy ingredients obtained"]

    def test_stops_at_end_of_input(self, run_script: Callable[[str], list[str]]) -> None:
        """Test that the loop ends with the input."""
        assert run_script("Total ingredient ?\nfoo") == ["None", "INVALID"]

    def test_counts_answered_lines(self, interpreter: Interpreter) -> None:
        """Test that run returns the number of answered lines."""
        written: list[str] = []
        assert interpreter.run(["Total potion ?", "", "Exit"], written.append) == 2
        assert written == ["None", "INVALID"]

    def test_custom_exit_keyword(self, world: WorldState) -> None:
        """Test that a configured exit keyword ends the loop."""
        interpreter = Interpreter(world, ReplSettings(exit_keyword="Quit"))
        written: list[str] = []
        interpreter.run(["Quit", "Total potion ?"], written.append)
        assert written == []


class TestModuleExecuteLine:
    """Tests for the module-level helper."""

    def test_shares_world(self, world: WorldState) -> None:
        """Test that successive calls see the same world."""
        assert execute_line(world, "Geralt loots 3 mandrake") == "Alchemy ingredients obtained"
        assert execute_line(world, "Total ingredient mandrake ?") == "3"


class TestExecutionLogging:
    """Tests for the per-line debug event."""

    def test_logs_whether_world_changed(
        self,
        interpreter: Interpreter,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that mutations and queries are told apart in the log."""
        stderr = io.StringIO()
        monkeypatch.setattr("sys.stderr", stderr)
        configure_logging(level="DEBUG", json_format=True)

        interpreter.execute_line("Geralt loots 3 Rebis")
        interpreter.execute_line("Total ingredient Rebis ?")
        interpreter.execute_line("Geralt brews Swallow")

        events = [json.loads(line) for line in stderr.getvalue().splitlines()]
        executed = [event for event in events if event["event"] == "Line executed"]
        assert [(e["kind"], e["outcome"], e["changed_world"]) for e in executed] == [
            ("loot", Outcome.APPLIED.value, True),
            ("total_one", Outcome.QUERY.value, False),
            ("brew", Outcome.NOOP.value, False),
        ]
