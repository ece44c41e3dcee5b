"""Command executors: one handler per sentence kind.

Handlers are registered with ``@executor`` and looked up by the command's
kind. Each handler receives the session WorldState and an already-validated
command, applies the effect and returns the canonical response.

Unfulfillable commands (unknown formula, missing stock, duplicate
knowledge) are not errors: they return an ExecutionResult with
``Outcome.NOOP`` after checking feasibility and before touching the world.

Executors:
    loot: Credit ingredients.
    trade: Exchange trophies for ingredients, all or nothing.
    brew: Turn ingredients into one potion, all or nothing.
    learn_effectiveness: Record a sign or potion against a beast.
    learn_formula: Record a potion formula.
    encounter: Fight a beast with the counters at hand.
    total_one / total_all: Inventory questions.
    what_effective / what_in: Knowledge questions.
    exit: Stop the interpreter.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from witcher_tracker.core.constants import (
    BESTIARY_NEW,
    BESTIARY_UPDATED,
    BREW_OK,
    BREW_SHORT,
    EFFECTIVENESS_KNOWN,
    ENCOUNTER_FLEE,
    ENCOUNTER_WIN,
    FORMULA_KNOWN,
    FORMULA_NEW,
    LOOT_OK,
    NO_FORMULA,
    NO_KNOWLEDGE,
    TRADE_OK,
    TRADE_SHORT,
)
from witcher_tracker.core.exceptions import ExecutionError
from witcher_tracker.core.logging import get_logger
from witcher_tracker.engine.formatter import (
    format_counters,
    format_listing,
    format_quantity,
    format_requirements,
)
from witcher_tracker.models.commands import (
    BrewCommand,
    Command,
    EncounterCommand,
    ExitCommand,
    LearnEffectivenessCommand,
    LearnFormulaCommand,
    LootCommand,
    TotalAllCommand,
    TotalOneCommand,
    TradeCommand,
    WhatEffectiveCommand,
    WhatInCommand,
)
from witcher_tracker.models.enums import CounterKind, Outcome, SentenceKind
from witcher_tracker.models.world import WorldState, sum_amounts


logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., "ExecutionResult"])


# =============================================================================
# Results & Registry
# =============================================================================


@dataclass
class ExecutionResult:
    """Result of processing one line.

    Attributes:
        kind: Sentence kind, None for an invalid line.
        outcome: How the line ended.
        response: Text printed for the line.
        should_exit: Whether the interpreter must stop after this line.
    """

    kind: SentenceKind | None
    outcome: Outcome
    response: str
    should_exit: bool = False

    @property
    def changed_world(self) -> bool:
        """Whether the line mutated the world."""
        return self.outcome == Outcome.APPLIED


@dataclass
class ExecutorDefinition:
    """A registered command handler.

    Attributes:
        kind: Sentence kind handled.
        function: Handler taking (world, command).
    """

    kind: SentenceKind
    function: Callable[[WorldState, Any], ExecutionResult]


_executor_registry: dict[SentenceKind, ExecutorDefinition] = {}


def executor(kind: SentenceKind) -> Callable[[F], F]:
    """Decorator to register a function as the handler of a sentence kind.

    Args:
        kind: Sentence kind the function handles.

    Returns:
        Decorated function.
    """

    def decorator(func: F) -> F:
        _executor_registry[kind] = ExecutorDefinition(kind=kind, function=func)
        return func

    return decorator


def get_executor(kind: SentenceKind) -> ExecutorDefinition | None:
    """Get the handler registered for a sentence kind."""
    return _executor_registry.get(kind)


def get_all_executors() -> list[ExecutorDefinition]:
    """Get all registered handlers."""
    return list(_executor_registry.values())


def execute(world: WorldState, command: Command) -> ExecutionResult:
    """Run the handler for a classified command.

    Raises:
        ExecutionError: If no handler is registered for the command's kind.
    """
    definition = get_executor(command.kind)
    if definition is None:
        raise ExecutionError(
            f"No executor registered for {command.kind.value}",
            kind=command.kind.value,
        )
    return definition.function(world, command)


def _applied(kind: SentenceKind, response: str) -> ExecutionResult:
    return ExecutionResult(kind=kind, outcome=Outcome.APPLIED, response=response)


def _noop(kind: SentenceKind, response: str, **context: Any) -> ExecutionResult:
    logger.info("Command not fulfilled", kind=kind.value, outcome=Outcome.NOOP.value, **context)
    return ExecutionResult(kind=kind, outcome=Outcome.NOOP, response=response)


def _query(kind: SentenceKind, response: str) -> ExecutionResult:
    return ExecutionResult(kind=kind, outcome=Outcome.QUERY, response=response)


# =============================================================================
# Actions
# =============================================================================


@executor(SentenceKind.LOOT)
def loot(world: WorldState, command: LootCommand) -> ExecutionResult:
    """Add every looted ingredient to the stock."""
    world.add_ingredients([item.as_pair() for item in command.items])
    logger.info("Ingredients looted", items=len(command.items))
    return _applied(command.kind, LOOT_OK)


@executor(SentenceKind.TRADE)
def trade(world: WorldState, command: TradeCommand) -> ExecutionResult:
    """Give trophies for ingredients if every trophy is available."""
    trophies = [item.as_pair() for item in command.trophies]
    missing = world.missing_trophies(sum_amounts(trophies))
    if missing:
        return _noop(command.kind, TRADE_SHORT, missing=missing)

    world.trade(trophies, [item.as_pair() for item in command.ingredients])
    logger.info(
        "Trade committed",
        trophies=len(command.trophies),
        ingredients=len(command.ingredients),
    )
    return _applied(command.kind, TRADE_OK)


@executor(SentenceKind.BREW)
def brew(world: WorldState, command: BrewCommand) -> ExecutionResult:
    """Brew one potion from a known formula."""
    formula = world.get_formula(command.potion)
    if formula is None:
        return _noop(command.kind, NO_FORMULA.format(name=command.potion), potion=command.potion)
    missing = world.missing_ingredients(formula)
    if missing:
        return _noop(command.kind, BREW_SHORT, potion=command.potion, missing=missing)

    world.brew(command.potion)
    logger.info("Potion brewed", potion=command.potion, stock=formula.stock)
    return _applied(command.kind, BREW_OK.format(name=command.potion))


@executor(SentenceKind.ENCOUNTER)
def encounter(world: WorldState, command: EncounterCommand) -> ExecutionResult:
    """Fight a beast.

    Geralt wins when at least one effective potion is in stock or at least
    one effective sign is known. A win uses one unit of every effective
    potion in stock and yields one trophy.
    """
    beast = world.get_beast(command.beast)
    if beast is None:
        return _noop(command.kind, ENCOUNTER_FLEE, beast=command.beast, known=False)

    potions = world.usable_potions(beast)
    if not potions and not beast.has_signs:
        return _noop(command.kind, ENCOUNTER_FLEE, beast=command.beast, known=True)

    for formula in potions:
        formula.consume()
    world.record_kill(command.beast)
    logger.info(
        "Beast defeated",
        beast=command.beast,
        potions_used=[formula.name for formula in potions],
    )
    return _applied(command.kind, ENCOUNTER_WIN.format(name=command.beast))


# =============================================================================
# Knowledge
# =============================================================================


@executor(SentenceKind.LEARN_EFFECTIVENESS)
def learn_effectiveness(world: WorldState, command: LearnEffectivenessCommand) -> ExecutionResult:
    """Record that a sign or potion works against a beast."""
    existing = world.get_beast(command.beast)
    if command.counter_kind == CounterKind.SIGN:
        known = existing is not None and existing.knows_sign(command.counter)
    else:
        known = existing is not None and existing.knows_potion(command.counter)
    if known:
        return _noop(
            command.kind,
            EFFECTIVENESS_KNOWN,
            beast=command.beast,
            counter=command.counter,
        )

    beast, created = world.ensure_beast(command.beast)
    if command.counter_kind == CounterKind.SIGN:
        beast.add_sign(world.ensure_sign(command.counter))
    else:
        beast.add_potion(world.potion_ref(command.counter))
    logger.info(
        "Bestiary updated",
        beast=command.beast,
        counter=command.counter,
        counter_kind=command.counter_kind.value,
        created=created,
    )
    template = BESTIARY_NEW if created else BESTIARY_UPDATED
    return _applied(command.kind, template.format(name=command.beast))


@executor(SentenceKind.LEARN_FORMULA)
def learn_formula(world: WorldState, command: LearnFormulaCommand) -> ExecutionResult:
    """Record a new potion formula."""
    if world.get_formula(command.potion) is not None:
        return _noop(command.kind, FORMULA_KNOWN, potion=command.potion)

    world.learn_formula(command.potion, [item.as_pair() for item in command.requirements])
    logger.info("Formula learned", potion=command.potion, requirements=len(command.requirements))
    return _applied(command.kind, FORMULA_NEW.format(name=command.potion))


# =============================================================================
# Questions
# =============================================================================


@executor(SentenceKind.TOTAL_ONE)
def total_one(world: WorldState, command: TotalOneCommand) -> ExecutionResult:
    """Amount held of one named record."""
    return _query(command.kind, format_quantity(world.quantity(command.category, command.name)))


@executor(SentenceKind.TOTAL_ALL)
def total_all(world: WorldState, command: TotalAllCommand) -> ExecutionResult:
    """Everything held in a category."""
    return _query(command.kind, format_listing(world.holdings(command.category)))


@executor(SentenceKind.WHAT_EFFECTIVE)
def what_effective(world: WorldState, command: WhatEffectiveCommand) -> ExecutionResult:
    """Counters known to work against a beast."""
    beast = world.get_beast(command.beast)
    if beast is None:
        return _query(command.kind, NO_KNOWLEDGE.format(name=command.beast))
    return _query(command.kind, format_counters(beast.counter_names))


@executor(SentenceKind.WHAT_IN)
def what_in(world: WorldState, command: WhatInCommand) -> ExecutionResult:
    """Ingredients of a known formula."""
    formula = world.get_formula(command.potion)
    if formula is None:
        return _query(command.kind, NO_FORMULA.format(name=command.potion))
    return _query(command.kind, format_requirements(formula.requirements))


@executor(SentenceKind.EXIT)
def exit_session(world: WorldState, command: ExitCommand) -> ExecutionResult:
    """Stop the interpreter."""
    return ExecutionResult(kind=command.kind, outcome=Outcome.EXIT, response="", should_exit=True)


__all__ = [
    "ExecutionResult",
    "ExecutorDefinition",
    "brew",
    "encounter",
    "execute",
    "executor",
    "exit_session",
    "get_all_executors",
    "get_executor",
    "learn_effectiveness",
    "learn_formula",
    "loot",
    "total_all",
    "total_one",
    "trade",
    "what_effective",
    "what_in",
]
