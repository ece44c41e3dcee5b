"""Sentence validators and the classifier.

Each validator checks a token list against one production and returns the
matching command, or None. Validators are registered with ``@sentence``
and tried in SentenceKind declaration order; the first full match wins.
A line that matches only a prefix of some production matches nothing.

Lexical rules:
    Integer: ASCII digits, no leading zero, value above zero.
    Name: one or more ASCII letters.
    Potion name: names separated by single spaces.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from witcher_tracker.core.constants import (
    AGAINST_KEYWORD,
    ARTICLE,
    BREW_VERB,
    CATEGORIES,
    COMMA,
    CONSISTS_KEYWORD,
    EFFECTIVE_KEYWORD,
    ENCOUNTER_VERB,
    EXIT_KEYWORD,
    FOR_KEYWORD,
    IN_KEYWORD,
    IS_KEYWORD,
    LEARN_VERB,
    LOOT_VERB,
    OF_KEYWORD,
    POTION_KEYWORD,
    QUESTION_MARK,
    SIGN_KEYWORD,
    SUBJECT,
    TOTAL_KEYWORD,
    TRADE_VERB,
    TROPHY_KEYWORD,
    WHAT_KEYWORD,
)
from witcher_tracker.core.exceptions import GrammarError
from witcher_tracker.core.logging import get_logger
from witcher_tracker.grammar.lexer import tokenize
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
from witcher_tracker.models.enums import Category, CounterKind, SentenceKind


logger = get_logger(__name__)

Tokens = Sequence[str]
Validator = Callable[[Tokens], Command | None]


# =============================================================================
# Lexical Rules
# =============================================================================


def is_positive_integer(token: str) -> bool:
    """Check for a strictly positive integer without a leading zero."""
    return token.isascii() and token.isdigit() and token[0] != "0"


def is_name(token: str) -> bool:
    """Check for a single ASCII alphabetic word."""
    return token.isascii() and token.isalpha()


def is_potion_name(token: str) -> bool:
    """Check for alphabetic words separated by exactly one space."""
    return all(is_name(word) for word in token.split(" "))


def split_on_commas(tokens: Tokens) -> list[list[str]]:
    """Group tokens into comma-separated entries.

    A trailing comma produces a trailing empty entry, which every list
    parser rejects.
    """
    entries: list[list[str]] = [[]]
    for token in tokens:
        if token == COMMA:
            entries.append([])
        else:
            entries[-1].append(token)
    return entries


def parse_item_list(tokens: Tokens) -> tuple[ItemAmount, ...] | None:
    """Parse ``<int> <name> (, <int> <name>)*``.

    Returns:
        The items in input order, or None if the list is malformed.
    """
    if not tokens:
        return None
    items: list[ItemAmount] = []
    for entry in split_on_commas(tokens):
        if len(entry) != 2:
            return None
        quantity, name = entry
        if not is_positive_integer(quantity) or not is_name(name):
            return None
        items.append(ItemAmount(name=name, quantity=int(quantity)))
    return tuple(items)


def parse_trophy_list(tokens: Tokens) -> tuple[ItemAmount, ...] | None:
    """Parse ``<int> <name>+ [trophy] (, <int> <name>+ [trophy])*``.

    The ``trophy`` keyword may close any entry and must close the last one.
    Trophy names may span several words, which are joined by single spaces.
    """
    if not tokens:
        return None
    entries = split_on_commas(tokens)
    trophies: list[ItemAmount] = []
    for index, entry in enumerate(entries):
        if len(entry) < 2 or not is_positive_integer(entry[0]):
            return None
        words = entry[1:]
        if words[-1] == TROPHY_KEYWORD:
            words = words[:-1]
        elif index == len(entries) - 1:
            return None
        if not words or not all(is_name(w) and w != TROPHY_KEYWORD for w in words):
            return None
        trophies.append(ItemAmount(name=" ".join(words), quantity=int(entry[0])))
    return tuple(trophies)


# =============================================================================
# Validator Registry
# =============================================================================


@dataclass
class SentenceDefinition:
    """A registered sentence production.

    Attributes:
        kind: The sentence kind the validator recognizes.
        validator: Function turning a token list into a command or None.
    """

    kind: SentenceKind
    validator: Validator


_sentence_registry: dict[SentenceKind, SentenceDefinition] = {}


def sentence(kind: SentenceKind) -> Callable[[Validator], Validator]:
    """Decorator to register a validator for a sentence kind."""

    def decorator(func: Validator) -> Validator:
        _sentence_registry[kind] = SentenceDefinition(kind=kind, validator=func)
        return func

    return decorator


def get_validators() -> list[SentenceDefinition]:
    """All registered validators in priority order."""
    return [_sentence_registry[kind] for kind in SentenceKind if kind in _sentence_registry]


# =============================================================================
# Actions
# =============================================================================


@sentence(SentenceKind.LOOT)
def match_loot(tokens: Tokens) -> LootCommand | None:
    """``Geralt loots <item list>``."""
    if list(tokens[:2]) != [SUBJECT, LOOT_VERB]:
        return None
    items = parse_item_list(tokens[2:])
    return LootCommand(items=items) if items else None


@sentence(SentenceKind.TRADE)
def match_trade(tokens: Tokens) -> TradeCommand | None:
    """``Geralt trades <trophy list> for <item list>``."""
    if list(tokens[:2]) != [SUBJECT, TRADE_VERB]:
        return None
    tail = list(tokens[2:])
    if FOR_KEYWORD not in tail:
        return None
    split = tail.index(FOR_KEYWORD)
    trophies = parse_trophy_list(tail[:split])
    ingredients = parse_item_list(tail[split + 1:])
    if not trophies or not ingredients:
        return None
    return TradeCommand(trophies=trophies, ingredients=ingredients)


@sentence(SentenceKind.BREW)
def match_brew(tokens: Tokens) -> BrewCommand | None:
    """``Geralt brews <potion name>``."""
    if len(tokens) != 3 or list(tokens[:2]) != [SUBJECT, BREW_VERB]:
        return None
    return BrewCommand(potion=tokens[2]) if is_potion_name(tokens[2]) else None


# =============================================================================
# Knowledge
# =============================================================================


@sentence(SentenceKind.LEARN_EFFECTIVENESS)
def match_learn_effectiveness(tokens: Tokens) -> LearnEffectivenessCommand | None:
    """``Geralt learns <counter> sign|potion is effective against <beast>``."""
    if len(tokens) != 8:
        return None
    subject, verb, counter, counter_kind, *clause, beast = tokens
    if [subject, verb] != [SUBJECT, LEARN_VERB]:
        return None
    if clause != [IS_KEYWORD, EFFECTIVE_KEYWORD, AGAINST_KEYWORD]:
        return None
    if counter_kind == SIGN_KEYWORD:
        counter_ok = is_name(counter)
    elif counter_kind == POTION_KEYWORD:
        counter_ok = is_potion_name(counter)
    else:
        return None
    if not counter_ok or not is_name(beast):
        return None
    return LearnEffectivenessCommand(
        counter=counter,
        counter_kind=CounterKind(counter_kind),
        beast=beast,
    )


@sentence(SentenceKind.LEARN_FORMULA)
def match_learn_formula(tokens: Tokens) -> LearnFormulaCommand | None:
    """``Geralt learns <potion> potion consists of <item list>``."""
    head = [SUBJECT, LEARN_VERB, POTION_KEYWORD, CONSISTS_KEYWORD, OF_KEYWORD]
    if len(tokens) < 8 or [tokens[0], tokens[1], *tokens[3:6]] != head:
        return None
    if not is_potion_name(tokens[2]):
        return None
    requirements = parse_item_list(tokens[6:])
    if not requirements:
        return None
    return LearnFormulaCommand(potion=tokens[2], requirements=requirements)


@sentence(SentenceKind.ENCOUNTER)
def match_encounter(tokens: Tokens) -> EncounterCommand | None:
    """``Geralt encounters a <beast>``."""
    if len(tokens) != 4 or list(tokens[:3]) != [SUBJECT, ENCOUNTER_VERB, ARTICLE]:
        return None
    return EncounterCommand(beast=tokens[3]) if is_name(tokens[3]) else None


# =============================================================================
# Questions
# =============================================================================


@sentence(SentenceKind.TOTAL_ONE)
def match_total_one(tokens: Tokens) -> TotalOneCommand | None:
    """``Total <category> <name> ?``."""
    if len(tokens) != 4 or tokens[0] != TOTAL_KEYWORD or tokens[3] != QUESTION_MARK:
        return None
    category, name = tokens[1], tokens[2]
    if category not in CATEGORIES:
        return None
    name_ok = is_potion_name(name) if category == Category.POTION else is_name(name)
    return TotalOneCommand(category=Category(category), name=name) if name_ok else None


@sentence(SentenceKind.TOTAL_ALL)
def match_total_all(tokens: Tokens) -> TotalAllCommand | None:
    """``Total <category> ?``."""
    if len(tokens) != 3 or tokens[0] != TOTAL_KEYWORD or tokens[2] != QUESTION_MARK:
        return None
    if tokens[1] not in CATEGORIES:
        return None
    return TotalAllCommand(category=Category(tokens[1]))


@sentence(SentenceKind.WHAT_EFFECTIVE)
def match_what_effective(tokens: Tokens) -> WhatEffectiveCommand | None:
    """``What is effective against <beast> ?``."""
    head = [WHAT_KEYWORD, IS_KEYWORD, EFFECTIVE_KEYWORD, AGAINST_KEYWORD]
    if len(tokens) != 6 or list(tokens[:4]) != head or tokens[5] != QUESTION_MARK:
        return None
    return WhatEffectiveCommand(beast=tokens[4]) if is_name(tokens[4]) else None


@sentence(SentenceKind.WHAT_IN)
def match_what_in(tokens: Tokens) -> WhatInCommand | None:
    """``What is in <potion> ?``."""
    head = [WHAT_KEYWORD, IS_KEYWORD, IN_KEYWORD]
    if len(tokens) != 5 or list(tokens[:3]) != head or tokens[4] != QUESTION_MARK:
        return None
    return WhatInCommand(potion=tokens[3]) if is_potion_name(tokens[3]) else None


@sentence(SentenceKind.EXIT)
def match_exit(tokens: Tokens) -> ExitCommand | None:
    """``Exit``."""
    return ExitCommand() if list(tokens) == [EXIT_KEYWORD] else None


# =============================================================================
# Classifier
# =============================================================================


def classify_tokens(tokens: Tokens, line: str | None = None) -> Command:
    """Find the first production that the whole token list matches.

    Args:
        tokens: Tokens of one line.
        line: The source line, carried by the error when nothing matches.

    Raises:
        GrammarError: If no production matches.
    """
    for definition in get_validators():
        command = definition.validator(tokens)
        if command is not None:
            logger.debug("Sentence classified", kind=definition.kind.value)
            return command
    raise GrammarError("No sentence matched", line=line, reason="no_match")


def classify(line: str) -> Command:
    """Tokenize and classify one line.

    Args:
        line: Raw input line.

    Returns:
        The command for the single matching production.

    Raises:
        GrammarError: If the line cannot be tokenized or matches nothing.
    """
    try:
        tokens = tokenize(line)
        return classify_tokens(tokens, line=line)
    except GrammarError as e:
        logger.debug("Line rejected", reason=e.details.get("reason"))
        raise


__all__ = [
    "SentenceDefinition",
    "Tokens",
    "Validator",
    "classify",
    "classify_tokens",
    "get_validators",
    "is_name",
    "is_positive_integer",
    "is_potion_name",
    "match_brew",
    "match_encounter",
    "match_exit",
    "match_learn_effectiveness",
    "match_learn_formula",
    "match_loot",
    "match_total_all",
    "match_total_one",
    "match_trade",
    "match_what_effective",
    "match_what_in",
    "parse_item_list",
    "parse_trophy_list",
    "sentence",
    "split_on_commas",
]
