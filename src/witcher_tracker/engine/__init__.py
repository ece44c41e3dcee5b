"""Execution engine: command handlers, query formatting and the interpreter.

Modules:
    executors: One registered handler per sentence kind.
    formatter: Deterministic rendering of query answers.
    interpreter: Line-level entry point owning the world.
"""

from __future__ import annotations

from witcher_tracker.engine.executors import (
    ExecutionResult,
    ExecutorDefinition,
    execute,
    executor,
    get_all_executors,
    get_executor,
)
from witcher_tracker.engine.formatter import (
    format_counters,
    format_listing,
    format_quantity,
    format_requirements,
)
from witcher_tracker.engine.interpreter import Interpreter, execute_line


__all__ = [
    # Executors
    "ExecutionResult",
    "ExecutorDefinition",
    "execute",
    "executor",
    "get_all_executors",
    "get_executor",
    # Formatter
    "format_counters",
    "format_listing",
    "format_quantity",
    "format_requirements",
    # Interpreter
    "Interpreter",
    "execute_line",
]
