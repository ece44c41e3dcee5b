"""Custom exception hierarchy for the Witcher Tracker interpreter.

This module defines the exceptions raised across the application. All
exceptions inherit from WitcherTrackerError, so the REPL boundary can
handle every application failure in one place while each error still
carries its domain-specific context.

Grammar failures are the only errors the interpreter expects during
normal operation; they are reported to the user as ``INVALID``. Lines that
are grammatically valid but cannot be fulfilled (unknown formula, missing
trophies, duplicate knowledge) are not errors at all and never raise.

Example:
    >>> from witcher_tracker.core.exceptions import GrammarError
    >>> raise GrammarError("No sentence matched", line="Geralt dances")
"""

from __future__ import annotations

from typing import Any


class WitcherTrackerError(Exception):
    """Base exception for all Witcher Tracker errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Grammar Exceptions
# =============================================================================


class GrammarError(WitcherTrackerError):
    """Raised when a line matches none of the sentence productions.

    The whole line is rejected; no part of it is ever executed.
    """

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize grammar error with line context.

        Args:
            message: Human-readable error description.
            line: The rejected input line.
            reason: Short machine-friendly reason for the rejection.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if line is not None:
            combined_details["line"] = line
        if reason:
            combined_details["reason"] = reason
        super().__init__(message, details=combined_details)


class LexError(GrammarError):
    """Raised when a sentence-family lexer cannot tokenize its input."""

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        position: int | None = None,
        reason: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize lex error with cursor position.

        Args:
            message: Human-readable error description.
            line: The input line being tokenized.
            position: Character offset where lexing failed.
            reason: Short machine-friendly reason for the failure.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if position is not None:
            combined_details["position"] = position
        super().__init__(message, line=line, reason=reason, details=combined_details)


class CommaSpacingError(LexError):
    """Raised when a comma is directly followed by the next word.

    List items must be separated by ``", "``; ``"1 a,2 b"`` is a user
    error that rejects the line rather than tokenizing leniently.
    """


# =============================================================================
# World Model & Engine Exceptions
# =============================================================================


class WorldStateError(WitcherTrackerError):
    """Raised when a world model invariant would be violated.

    Executors check feasibility before mutating, so this indicates a
    programming error rather than bad user input.
    """

    def __init__(
        self,
        message: str,
        *,
        record: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize world state error with the offending record name.

        Args:
            message: Human-readable error description.
            record: Name of the record involved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if record is not None:
            combined_details["record"] = record
        super().__init__(message, details=combined_details)


class ExecutionError(WitcherTrackerError):
    """Raised when a classified command cannot be dispatched."""

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize execution error with the sentence kind.

        Args:
            message: Human-readable error description.
            kind: The sentence kind that failed to dispatch.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if kind:
            combined_details["kind"] = kind
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(WitcherTrackerError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(WitcherTrackerError):
    """Raised when a value handed to the world model fails validation."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "WitcherTrackerError",
    # Grammar exceptions
    "GrammarError",
    "LexError",
    "CommaSpacingError",
    # World model & engine exceptions
    "WorldStateError",
    "ExecutionError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
]
