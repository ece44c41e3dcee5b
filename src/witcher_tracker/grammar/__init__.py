"""Sentence grammar: scanning, tokenizing and classifying input lines.

Modules:
    scanner: Cursor-based lexer combinators.
    lexer: Family-specific tokenizers behind ``tokenize``.
    validators: One validator per sentence kind and the ``classify`` entry point.
"""

from __future__ import annotations

from witcher_tracker.grammar.lexer import tokenize
from witcher_tracker.grammar.scanner import Scanner
from witcher_tracker.grammar.validators import (
    classify,
    classify_tokens,
    get_validators,
    is_name,
    is_positive_integer,
    is_potion_name,
    parse_item_list,
    parse_trophy_list,
)


__all__ = [
    "Scanner",
    "tokenize",
    "classify",
    "classify_tokens",
    "get_validators",
    "is_name",
    "is_positive_integer",
    "is_potion_name",
    "parse_item_list",
    "parse_trophy_list",
]
