"""Enumerations shared across the grammar, models and engine."""

from __future__ import annotations

from enum import StrEnum


class SentenceKind(StrEnum):
    """Every sentence form the interpreter recognizes.

    Declaration order is the order in which the classifier tries the
    validators; the first full match wins.
    """

    LOOT = "loot"
    TRADE = "trade"
    BREW = "brew"
    LEARN_EFFECTIVENESS = "learn_effectiveness"
    LEARN_FORMULA = "learn_formula"
    ENCOUNTER = "encounter"
    TOTAL_ONE = "total_one"
    TOTAL_ALL = "total_all"
    WHAT_EFFECTIVE = "what_effective"
    WHAT_IN = "what_in"
    EXIT = "exit"


class Category(StrEnum):
    """Inventory categories that ``Total`` queries can list."""

    INGREDIENT = "ingredient"
    POTION = "potion"
    TROPHY = "trophy"


class CounterKind(StrEnum):
    """What kind of counter an effectiveness sentence talks about."""

    SIGN = "sign"
    POTION = "potion"


class Outcome(StrEnum):
    """How a processed line ended."""

    APPLIED = "applied"
    """The world model was changed."""

    NOOP = "noop"
    """Valid sentence that could not be fulfilled; nothing changed."""

    QUERY = "query"
    """Read-only question answered."""

    EXIT = "exit"
    """The interpreter was asked to stop."""

    INVALID = "invalid"
    """The line matched no sentence production."""


__all__ = [
    "SentenceKind",
    "Category",
    "CounterKind",
    "Outcome",
]
