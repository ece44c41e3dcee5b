"""Pydantic models for the world state and parsed commands.

Modules:
    enums: SentenceKind, Category, CounterKind, Outcome.
    inventory: Ingredient/trophy stock and potion formulas.
    bestiary: Signs, tagged potion references and beast knowledge.
    world: WorldState, the single mutable container for a session.
    commands: One immutable model per recognized sentence.
"""

from __future__ import annotations

from witcher_tracker.models.bestiary import (
    BeastKnowledge,
    KnownPotion,
    NameOnlyPotion,
    PotionRef,
    Sign,
)
from witcher_tracker.models.commands import (
    BrewCommand,
    Command,
    EncounterCommand,
    ExitCommand,
    ItemAmount,
    LearnEffectivenessCommand,
    LearnFormulaCommand,
    LootCommand,
    TotalAllCommand,
    TotalOneCommand,
    TradeCommand,
    WhatEffectiveCommand,
    WhatInCommand,
)
from witcher_tracker.models.enums import Category, CounterKind, Outcome, SentenceKind
from witcher_tracker.models.inventory import (
    IngredientStock,
    PotionFormula,
    Requirement,
    Stock,
    TrophyStock,
)
from witcher_tracker.models.world import WorldState, sum_amounts


__all__ = [
    # Enums
    "SentenceKind",
    "Category",
    "CounterKind",
    "Outcome",
    # Inventory
    "Stock",
    "IngredientStock",
    "TrophyStock",
    "Requirement",
    "PotionFormula",
    # Bestiary
    "Sign",
    "KnownPotion",
    "NameOnlyPotion",
    "PotionRef",
    "BeastKnowledge",
    # World
    "WorldState",
    "sum_amounts",
    # Commands
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
