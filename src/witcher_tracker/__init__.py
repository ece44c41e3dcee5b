"""Witcher Tracker - a sentence interpreter for Geralt's alchemy and bestiary.

Lines of a small fixed English grammar are tokenized, classified and
applied to an in-memory world of ingredients, trophies, potion formulas,
signs and beasts. Each line gets exactly one answer.

Example:
    >>> from witcher_tracker import Interpreter
    >>> interpreter = Interpreter()
    >>> interpreter.execute_line("Geralt learns Igni sign is effective against Harpy").response
    'New bestiary entry added: Harpy'
    >>> interpreter.execute_line("Geralt encounters a Harpy").response
    'Geralt defeats Harpy'

Modules:
    core: Configuration, constants, logging and exceptions.
    models: Pydantic models for the world and for parsed commands.
    grammar: Scanner, family lexers and sentence validators.
    engine: Command executors, query formatter and the interpreter.
    cli: argparse entry point and REPL loop.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from witcher_tracker.core.config import Settings, get_settings
from witcher_tracker.core.exceptions import GrammarError, WitcherTrackerError
from witcher_tracker.core.logging import configure_logging, get_logger

# Engine
from witcher_tracker.engine.executors import ExecutionResult
from witcher_tracker.engine.interpreter import Interpreter, execute_line

# Grammar
from witcher_tracker.grammar.validators import classify

# Models
from witcher_tracker.models.enums import Outcome, SentenceKind
from witcher_tracker.models.world import WorldState


__all__ = [
    # Version info
    "__version__",
    # Core
    "WitcherTrackerError",
    "GrammarError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "ExecutionResult",
    "Interpreter",
    "execute_line",
    # Grammar
    "classify",
    # Models
    "Outcome",
    "SentenceKind",
    "WorldState",
]
