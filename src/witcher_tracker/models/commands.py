"""Immutable command models produced by the grammar validators.

Each recognized sentence becomes exactly one command object carrying the
already-validated arguments, so executors never look at raw tokens.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from witcher_tracker.models.enums import Category, CounterKind, SentenceKind
from witcher_tracker.models.inventory import PositiveQuantity, RecordName


class ItemAmount(BaseModel):
    """A ``<quantity> <name>`` pair from an item list."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: RecordName
    quantity: PositiveQuantity

    def as_pair(self) -> tuple[str, int]:
        """Return the pair as a plain tuple."""
        return self.name, self.quantity


class Command(BaseModel):
    """Base class for all parsed sentences."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[SentenceKind]


class LootCommand(Command):
    """``Geralt loots 3 Rebis, 1 Vitriol``."""

    kind: ClassVar[SentenceKind] = SentenceKind.LOOT

    items: tuple[ItemAmount, ...] = Field(min_length=1)


class TradeCommand(Command):
    """``Geralt trades 2 Harpy trophy for 8 Vitriol``."""

    kind: ClassVar[SentenceKind] = SentenceKind.TRADE

    trophies: tuple[ItemAmount, ...] = Field(min_length=1)
    ingredients: tuple[ItemAmount, ...] = Field(min_length=1)


class BrewCommand(Command):
    """``Geralt brews Black Blood``."""

    kind: ClassVar[SentenceKind] = SentenceKind.BREW

    potion: RecordName


class LearnEffectivenessCommand(Command):
    """``Geralt learns Igni sign is effective against Harpy``."""

    kind: ClassVar[SentenceKind] = SentenceKind.LEARN_EFFECTIVENESS

    counter: RecordName
    counter_kind: CounterKind
    beast: RecordName


class LearnFormulaCommand(Command):
    """``Geralt learns Swallow potion consists of 3 Rebis, 2 Vitriol``."""

    kind: ClassVar[SentenceKind] = SentenceKind.LEARN_FORMULA

    potion: RecordName
    requirements: tuple[ItemAmount, ...] = Field(min_length=1)


class EncounterCommand(Command):
    """``Geralt encounters a Harpy``."""

    kind: ClassVar[SentenceKind] = SentenceKind.ENCOUNTER

    beast: RecordName


class TotalOneCommand(Command):
    """``Total ingredient Rebis ?``."""

    kind: ClassVar[SentenceKind] = SentenceKind.TOTAL_ONE

    category: Category
    name: RecordName


class TotalAllCommand(Command):
    """``Total trophy ?``."""

    kind: ClassVar[SentenceKind] = SentenceKind.TOTAL_ALL

    category: Category


class WhatEffectiveCommand(Command):
    """``What is effective against Harpy ?``."""

    kind: ClassVar[SentenceKind] = SentenceKind.WHAT_EFFECTIVE

    beast: RecordName


class WhatInCommand(Command):
    """``What is in Black Blood ?``."""

    kind: ClassVar[SentenceKind] = SentenceKind.WHAT_IN

    potion: RecordName


class ExitCommand(Command):
    """``Exit``."""

    kind: ClassVar[SentenceKind] = SentenceKind.EXIT


__all__ = [
    "ItemAmount",
    "Command",
    "LootCommand",
    "TradeCommand",
    "BrewCommand",
    "LearnEffectivenessCommand",
    "LearnFormulaCommand",
    "EncounterCommand",
    "TotalOneCommand",
    "TotalAllCommand",
    "WhatEffectiveCommand",
    "WhatInCommand",
    "ExitCommand",
]
