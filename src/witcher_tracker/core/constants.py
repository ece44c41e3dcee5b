"""Application-wide constants for the Witcher Tracker interpreter.

This module defines the fixed vocabulary of the sentence grammar and the
canonical response texts. Responses are part of the external interface and
must be reproduced byte for byte.
"""

from __future__ import annotations

# =============================================================================
# Sentence Vocabulary
# =============================================================================

SUBJECT = "Geralt"
"""Leading keyword of every action and knowledge sentence."""

LOOT_VERB = "loots"
TRADE_VERB = "trades"
BREW_VERB = "brews"
LEARN_VERB = "learns"
ENCOUNTER_VERB = "encounters"

TOTAL_KEYWORD = "Total"
WHAT_KEYWORD = "What"
EXIT_KEYWORD = "Exit"

TROPHY_KEYWORD = "trophy"
FOR_KEYWORD = "for"
SIGN_KEYWORD = "sign"
POTION_KEYWORD = "potion"
IS_KEYWORD = "is"
IN_KEYWORD = "in"
EFFECTIVE_KEYWORD = "effective"
AGAINST_KEYWORD = "against"
CONSISTS_KEYWORD = "consists"
OF_KEYWORD = "of"
ARTICLE = "a"

COMMA = ","
QUESTION_MARK = "?"

CATEGORIES = ("ingredient", "potion", "trophy")
"""Inventory categories accepted by ``Total`` queries."""

COUNTER_KEYWORDS = (SIGN_KEYWORD, POTION_KEYWORD)
"""Keywords that close the counter name in an effectiveness sentence."""

# =============================================================================
# Responses
# =============================================================================

INVALID_RESPONSE = "INVALID"
"""Answer for any line that matches no sentence production."""

LOOT_OK = "Alchemy ingredients obtained"
TRADE_OK = "Trade successful"
TRADE_SHORT = "Not enough trophies"
BREW_OK = "Alchemy item created: {name}"
BREW_SHORT = "Not enough ingredients"
NO_FORMULA = "No formula for {name}"
BESTIARY_NEW = "New bestiary entry added: {name}"
BESTIARY_UPDATED = "Bestiary entry updated: {name}"
EFFECTIVENESS_KNOWN = "Already known effectiveness"
FORMULA_NEW = "New alchemy formula obtained: {name}"
FORMULA_KNOWN = "Already known formula"
ENCOUNTER_WIN = "Geralt defeats {name}"
ENCOUNTER_FLEE = "Geralt is unprepared and barely escapes with his life"
NO_KNOWLEDGE = "No knowledge of {name}"
EMPTY_LISTING = "None"
LIST_SEPARATOR = ", "

# =============================================================================
# REPL
# =============================================================================

DEFAULT_PROMPT = ">> "
"""Prompt printed before each interactive read."""

MAX_LINE_LENGTH = 1024
"""Longest accepted input line, in characters."""


__all__ = [
    # Vocabulary
    "SUBJECT",
    "LOOT_VERB",
    "TRADE_VERB",
    "BREW_VERB",
    "LEARN_VERB",
    "ENCOUNTER_VERB",
    "TOTAL_KEYWORD",
    "WHAT_KEYWORD",
    "EXIT_KEYWORD",
    "TROPHY_KEYWORD",
    "FOR_KEYWORD",
    "SIGN_KEYWORD",
    "POTION_KEYWORD",
    "IS_KEYWORD",
    "IN_KEYWORD",
    "EFFECTIVE_KEYWORD",
    "AGAINST_KEYWORD",
    "CONSISTS_KEYWORD",
    "OF_KEYWORD",
    "ARTICLE",
    "COMMA",
    "QUESTION_MARK",
    "CATEGORIES",
    "COUNTER_KEYWORDS",
    # Responses
    "INVALID_RESPONSE",
    "LOOT_OK",
    "TRADE_OK",
    "TRADE_SHORT",
    "BREW_OK",
    "BREW_SHORT",
    "NO_FORMULA",
    "BESTIARY_NEW",
    "BESTIARY_UPDATED",
    "EFFECTIVENESS_KNOWN",
    "FORMULA_NEW",
    "FORMULA_KNOWN",
    "ENCOUNTER_WIN",
    "ENCOUNTER_FLEE",
    "NO_KNOWLEDGE",
    "EMPTY_LISTING",
    "LIST_SEPARATOR",
    # REPL
    "DEFAULT_PROMPT",
    "MAX_LINE_LENGTH",
]
