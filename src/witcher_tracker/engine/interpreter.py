"""Line interpreter: trim, classify, execute.

The Interpreter owns one WorldState for the whole session and turns each
input line into exactly one ExecutionResult. Grammar failures are the only
exceptions handled here; they become the invalid response. Any other
exception is a bug and propagates.

Example:
    >>> interpreter = Interpreter()
    >>> interpreter.execute_line("Geralt loots 3 Rebis").response
    'Alchemy ingredients obtained'
    >>> interpreter.execute_line("Total ingredient Rebis ?").response
    '3'
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from witcher_tracker.core.config import ReplSettings, get_settings
from witcher_tracker.core.exceptions import GrammarError
from witcher_tracker.core.logging import bind_context, clear_context, get_logger
from witcher_tracker.engine.executors import ExecutionResult, execute
from witcher_tracker.grammar.validators import classify
from witcher_tracker.models.enums import Outcome, SentenceKind
from witcher_tracker.models.world import WorldState


logger = get_logger(__name__)


class Interpreter:
    """Processes sentences against a single world.

    Attributes:
        world: The session's world model.
        settings: REPL settings (invalid response, exit keyword, line limit).
    """

    def __init__(
        self,
        world: WorldState | None = None,
        settings: ReplSettings | None = None,
    ) -> None:
        self.world = world if world is not None else WorldState()
        self.settings = settings if settings is not None else get_settings().repl

    def _invalid(self, line: str, reason: str) -> ExecutionResult:
        logger.debug("Line invalid", line=line, reason=reason)
        return ExecutionResult(
            kind=None,
            outcome=Outcome.INVALID,
            response=self.settings.invalid_response,
        )

    def is_exit(self, line: str) -> bool:
        """Check whether a line is the exit keyword, ignoring surrounding whitespace."""
        return line.strip() == self.settings.exit_keyword

    def execute_line(self, line: str) -> ExecutionResult:
        """Process one raw input line.

        Args:
            line: The line as read, possibly with its newline.

        Returns:
            The result; ``outcome`` is INVALID for empty, over-long or
            unrecognized lines.
        """
        text = line.strip()
        if not text:
            return self._invalid(text, reason="empty")
        if len(text) > self.settings.max_line_length:
            return self._invalid(text[:32], reason="too_long")
        if text == self.settings.exit_keyword:
            return ExecutionResult(
                kind=SentenceKind.EXIT,
                outcome=Outcome.EXIT,
                response="",
                should_exit=True,
            )

        try:
            command = classify(text)
        except GrammarError as e:
            return self._invalid(text, reason=e.details.get("reason", "no_match"))

        result = execute(self.world, command)
        logger.debug(
            "Line executed",
            kind=command.kind.value,
            outcome=result.outcome.value,
            changed_world=result.changed_world,
        )
        return result

    def run(self, lines: Iterable[str], write: Callable[[str], None]) -> int:
        """Process lines until the exit keyword or the end of input.

        Args:
            lines: Input lines.
            write: Called once with the response of every processed line.

        Returns:
            Number of lines answered.
        """
        answered = 0
        try:
            for line_number, line in enumerate(lines, start=1):
                bind_context(line_number=line_number)
                if self.is_exit(line):
                    logger.debug("Exit requested")
                    break
                result = self.execute_line(line)
                if result.should_exit:
                    break
                write(result.response)
                answered += 1
        finally:
            clear_context()
        return answered


def execute_line(world: WorldState, line: str) -> str:
    """Process one line against ``world`` and return the response text."""
    return Interpreter(world).execute_line(line).response


__all__ = [
    "ExecutionResult",
    "Interpreter",
    "execute_line",
]
