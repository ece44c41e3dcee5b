"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        WitcherTrackerError: Base exception for all application errors.
        GrammarError: A line matched no sentence production.
        LexError / CommaSpacingError: Tokenization failures.
        WorldStateError: A world model invariant would be broken.
        ExecutionError: A command could not be dispatched.
        ConfigurationError / ValidationError: Bad settings or values.

    Configuration:
        Settings / ReplSettings: Application settings classes.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging, get_logger, bind_context, clear_context.
"""

from __future__ import annotations

from witcher_tracker.core.config import (
    ReplSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from witcher_tracker.core.exceptions import (
    CommaSpacingError,
    ConfigurationError,
    ExecutionError,
    GrammarError,
    LexError,
    ValidationError,
    WitcherTrackerError,
    WorldStateError,
)
from witcher_tracker.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


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
    # Configuration
    "Settings",
    "ReplSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
