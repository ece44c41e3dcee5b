"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Witcher Tracker test suite.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest
import structlog


if TYPE_CHECKING:
    from collections.abc import Generator

    from witcher_tracker.core.config import ReplSettings
    from witcher_tracker.engine.interpreter import Interpreter
    from witcher_tracker.models.world import WorldState


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from witcher_tracker.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults and drop installed log handlers after each test."""
    from witcher_tracker.core.logging import HANDLER_PREFIX

    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)


@pytest.fixture
def repl_settings() -> ReplSettings:
    """Provide REPL settings with their defaults.

    Returns:
        ReplSettings instance.
    """
    from witcher_tracker.core.config import ReplSettings

    return ReplSettings()


# =============================================================================
# World Fixtures
# =============================================================================


@pytest.fixture
def world() -> WorldState:
    """Provide an empty world.

    Returns:
        WorldState instance.
    """
    from witcher_tracker.models.world import WorldState

    return WorldState()


@pytest.fixture
def stocked_world(world: WorldState) -> WorldState:
    """Provide a world with ingredients, a formula, trophies and a beast.

    Holdings:
        Ingredients: 5 Rebis, 3 Vitriol, 2 Aether.
        Formula: Black Blood = 2 Rebis, 1 Vitriol.
        Trophies: 2 Harpy.
        Bestiary: Harpy (Igni sign), Ghoul (Black Blood potion).

    Returns:
        The populated WorldState.
    """
    world.add_ingredients([("Rebis", 5), ("Vitriol", 3), ("Aether", 2)])
    world.learn_formula("Black Blood", [("Rebis", 2), ("Vitriol", 1)])
    world.ensure_trophy("Harpy").add(2)

    harpy, _ = world.ensure_beast("Harpy")
    harpy.add_sign(world.ensure_sign("Igni"))
    ghoul, _ = world.ensure_beast("Ghoul")
    ghoul.add_potion(world.potion_ref("Black Blood"))
    return world


# =============================================================================
# Interpreter Fixtures
# =============================================================================


@pytest.fixture
def interpreter(world: WorldState, repl_settings: ReplSettings) -> Interpreter:
    """Provide an interpreter over the ``world`` fixture.

    Returns:
        Interpreter instance.
    """
    from witcher_tracker.engine.interpreter import Interpreter

    return Interpreter(world=world, settings=repl_settings)


@pytest.fixture
def run_script(interpreter: Interpreter) -> Callable[[str], list[str]]:
    """Provide a helper that feeds a multi-line script to the interpreter.

    Returns:
        Function taking the script text and returning the responses.
    """

    def run(script: str) -> list[str]:
        responses: list[str] = []
        interpreter.run(script.splitlines(keepends=True), responses.append)
        return responses

    return run
