"""Tests for the command executors."""

from __future__ import annotations

import pytest

from witcher_tracker.core.exceptions import ExecutionError
from witcher_tracker.engine import executors
from witcher_tracker.engine.executors import (
    ExecutionResult,
    execute,
    get_all_executors,
    get_executor,
)
from witcher_tracker.models.commands import (
    BrewCommand,
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
from witcher_tracker.models.world import WorldState


def items(*pairs: tuple[int, str]) -> tuple[ItemAmount, ...]:
    """Build an item tuple from (quantity, name) pairs."""
    return tuple(ItemAmount(name=name, quantity=quantity) for quantity, name in pairs)


class TestRegistry:
    """Tests for executor registration."""

    def test_every_kind_has_an_executor(self) -> None:
        """Test that all sentence kinds are handled."""
        assert {d.kind for d in get_all_executors()} == set(SentenceKind)

    def test_lookup(self) -> None:
        """Test looking up a handler by kind."""
        definition = get_executor(SentenceKind.LOOT)
        assert definition is not None
        assert definition.function is executors.loot

    def test_missing_executor(self, world: WorldState, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unregistered kind raises ExecutionError."""
        monkeypatch.delitem(executors._executor_registry, SentenceKind.LOOT)

        with pytest.raises(ExecutionError) as exc_info:
            execute(world, LootCommand(items=items((1, "Rebis"))))
        assert exc_info.value.details["kind"] == "loot"


class TestLoot:
    """Tests for looting."""

    def test_loot_accumulates(self, world: WorldState) -> None:
        """Test that looted quantities add up per name."""
        execute(world, LootCommand(items=items((3, "Rebis"), (1, "Vitriol"))))
        result = execute(world, LootCommand(items=items((2, "Rebis"))))

        assert result == ExecutionResult(
            kind=SentenceKind.LOOT,
            outcome=Outcome.APPLIED,
            response="Alchemy ingredients obtained",
        )
        assert world.ingredient_quantity("Rebis") == 5
        assert world.ingredient_quantity("Vitriol") == 1


class TestTrade:
    """Tests for trading."""

    def test_trade_without_trophies(self, world: WorldState) -> None:
        """Test that a trade with no trophies is a no-op."""
        command = TradeCommand(trophies=items((1, "Forktail")), ingredients=items((2, "mandrake")))
        before = world.model_dump()

        result = execute(world, command)

        assert result.response == "Not enough trophies"
        assert result.outcome == Outcome.NOOP
        assert world.model_dump() == before

    def test_trade_success(self, stocked_world: WorldState) -> None:
        """Test a successful trade."""
        command = TradeCommand(trophies=items((2, "Harpy")), ingredients=items((8, "Vitriol")))

        result = execute(stocked_world, command)

        assert result.response == "Trade successful"
        assert result.changed_world
        assert stocked_world.trophy_quantity("Harpy") == 0
        assert stocked_world.ingredient_quantity("Vitriol") == 11


class TestBrew:
    """Tests for brewing."""

    def test_no_formula(self, world: WorldState) -> None:
        """Test brewing an unknown potion."""
        result = execute(world, BrewCommand(potion="Swallow"))
        assert result.response == "No formula for Swallow"
        assert result.outcome == Outcome.NOOP

    def test_not_enough_ingredients(self, world: WorldState) -> None:
        """Test brewing without enough ingredients."""
        world.learn_formula("Swallow", [("Rebis", 2)])
        world.add_ingredients([("Rebis", 1)])

        result = execute(world, BrewCommand(potion="Swallow"))

        assert result.response == "Not enough ingredients"
        assert world.ingredient_quantity("Rebis") == 1
        assert world.potion_stock("Swallow") == 0

    def test_brew(self, stocked_world: WorldState) -> None:
        """Test a successful brew."""
        result = execute(stocked_world, BrewCommand(potion="Black Blood"))
        assert result.response == "Alchemy item created: Black Blood"
        assert stocked_world.potion_stock("Black Blood") == 1


class TestLearnEffectiveness:
    """Tests for learning effectiveness."""

    def test_new_then_known(self, world: WorldState) -> None:
        """Test the first and repeated sign learning responses."""
        command = LearnEffectivenessCommand(
            counter="Igni",
            counter_kind=CounterKind.SIGN,
            beast="Harpy",
        )

        first = execute(world, command)
        second = execute(world, command)

        assert first.response == "New bestiary entry added: Harpy"
        assert second.response == "Already known effectiveness"
        assert second.outcome == Outcome.NOOP
        assert "Igni" in world.signs

    def test_update_existing_beast(self, world: WorldState) -> None:
        """Test adding a second counter to a known beast."""
        execute(world, LearnEffectivenessCommand(
            counter="Igni", counter_kind=CounterKind.SIGN, beast="Harpy",
        ))
        result = execute(world, LearnEffectivenessCommand(
            counter="Black Blood", counter_kind=CounterKind.POTION, beast="Harpy",
        ))

        assert result.response == "Bestiary entry updated: Harpy"
        assert world.beasts["Harpy"].counter_names == ["Black Blood", "Igni"]

    def test_potion_tag_follows_formula(self, stocked_world: WorldState) -> None:
        """Test that a potion with a known formula is stored as known."""
        execute(stocked_world, LearnEffectivenessCommand(
            counter="Black Blood", counter_kind=CounterKind.POTION, beast="Harpy",
        ))
        execute(stocked_world, LearnEffectivenessCommand(
            counter="Swallow", counter_kind=CounterKind.POTION, beast="Harpy",
        ))

        tags = [ref.tag for ref in stocked_world.beasts["Harpy"].effective_potions]
        assert tags == ["known", "name_only"]


class TestLearnFormula:
    """Tests for learning formulas."""

    def test_new_then_known(self, world: WorldState) -> None:
        """Test that a second learn keeps the first requirements."""
        first = execute(world, LearnFormulaCommand(
            potion="Swallow", requirements=items((2, "mandrake"), (1, "ruby")),
        ))
        second = execute(world, LearnFormulaCommand(
            potion="Swallow", requirements=items((9, "Rebis")),
        ))

        assert first.response == "New alchemy formula obtained: Swallow"
        assert second.response == "Already known formula"
        assert world.potions["Swallow"].totals() == {"mandrake": 2, "ruby": 1}


class TestEncounter:
    """Tests for encounters."""

    def test_unknown_beast(self, world: WorldState) -> None:
        """Test that an unknown beast makes Geralt flee without a trophy."""
        result = execute(world, EncounterCommand(beast="Wyvern"))

        assert result.response == "Geralt is unprepared and barely escapes with his life"
        assert "Wyvern" not in world.trophies

    def test_known_beast_without_counters_at_hand(self, stocked_world: WorldState) -> None:
        """Test fleeing when the only counter is an unbrewed potion."""
        result = execute(stocked_world, EncounterCommand(beast="Ghoul"))

        assert result.response == "Geralt is unprepared and barely escapes with his life"
        assert stocked_world.trophy_quantity("Ghoul") == 0

    def test_sign_wins_without_consuming(self, stocked_world: WorldState) -> None:
        """Test that a sign is enough and is never consumed."""
        result = execute(stocked_world, EncounterCommand(beast="Harpy"))
        execute(stocked_world, EncounterCommand(beast="Harpy"))

        assert result.response == "Geralt defeats Harpy"
        assert stocked_world.trophy_quantity("Harpy") == 4

    def test_potion_consumed_once_per_fight(self, stocked_world: WorldState) -> None:
        """Test that every usable potion loses exactly one unit."""
        stocked_world.brew("Black Blood")
        stocked_world.brew("Black Blood")

        result = execute(stocked_world, EncounterCommand(beast="Ghoul"))

        assert result.response == "Geralt defeats Ghoul"
        assert stocked_world.potion_stock("Black Blood") == 1
        assert stocked_world.trophy_quantity("Ghoul") == 1


class TestQueries:
    """Tests for read-only questions."""

    def test_total_one(self, stocked_world: WorldState) -> None:
        """Test a named total."""
        result = execute(stocked_world, TotalOneCommand(category=Category.INGREDIENT, name="Rebis"))
        assert result.response == "5"
        assert result.outcome == Outcome.QUERY

    def test_total_all(self, stocked_world: WorldState) -> None:
        """Test a category listing."""
        result = execute(stocked_world, TotalAllCommand(category=Category.INGREDIENT))
        assert result.response == "2 Aether, 5 Rebis, 3 Vitriol"

    def test_total_potion_none(self, world: WorldState) -> None:
        """Test that no brewed potions reads None."""
        assert execute(world, TotalAllCommand(category=Category.POTION)).response == "None"

    def test_what_effective(self, stocked_world: WorldState) -> None:
        """Test the effectiveness listing."""
        result = execute(stocked_world, WhatEffectiveCommand(beast="Harpy"))
        assert result.response == "Igni"

    def test_what_effective_unknown(self, world: WorldState) -> None:
        """Test asking about an unknown beast."""
        result = execute(world, WhatEffectiveCommand(beast="Leshen"))
        assert result.response == "No knowledge of Leshen"

    def test_what_in(self, stocked_world: WorldState) -> None:
        """Test the formula listing."""
        result = execute(stocked_world, WhatInCommand(potion="Black Blood"))
        assert result.response == "2 Rebis, 1 Vitriol"

    def test_what_in_unknown(self, world: WorldState) -> None:
        """Test asking about an unknown formula."""
        assert execute(world, WhatInCommand(potion="Swallow")).response == "No formula for Swallow"

    def test_queries_do_not_mutate(self, stocked_world: WorldState) -> None:
        """Test that questions never change the world."""
        before = stocked_world.model_dump()
        execute(stocked_world, TotalOneCommand(category=Category.TROPHY, name="Nekker"))
        execute(stocked_world, WhatEffectiveCommand(beast="Leshen"))
        assert stocked_world.model_dump() == before


class TestExit:
    """Tests for the exit command."""

    def test_exit(self, world: WorldState) -> None:
        """Test that exit asks the interpreter to stop."""
        result = execute(world, ExitCommand())
        assert result.should_exit is True
        assert result.outcome == Outcome.EXIT
