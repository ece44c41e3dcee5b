"""Line tokenizer.

The first word of a line selects a family-specific lexer, because the
families disagree on what a token is:

- ``What`` questions keep the subject (a potion or beast name) as one raw
  token up to the ``?``.
- ``Total`` questions keep an optional item name as one raw token.
- ``Geralt brews`` keeps the whole potion name as one token.
- ``Geralt learns`` keeps the counter name as one token and then either the
  beast name or a formula list.
- Everything else is split into words with ``,`` and ``?`` isolated.

Multi-word names stay single tokens so the validators can apply the
potion-name rule (single spaces between alphabetic words) to them.
"""

from __future__ import annotations

from collections.abc import Callable

from witcher_tracker.core.constants import (
    AGAINST_KEYWORD,
    BREW_VERB,
    CONSISTS_KEYWORD,
    COUNTER_KEYWORDS,
    EFFECTIVE_KEYWORD,
    ENCOUNTER_VERB,
    IN_KEYWORD,
    IS_KEYWORD,
    LEARN_VERB,
    LOOT_VERB,
    OF_KEYWORD,
    QUESTION_MARK,
    SUBJECT,
    TOTAL_KEYWORD,
    TRADE_VERB,
    WHAT_KEYWORD,
)
from witcher_tracker.core.logging import get_logger
from witcher_tracker.grammar.scanner import Scanner


logger = get_logger(__name__)

FamilyLexer = Callable[[Scanner], list[str]]


def _question_tail(scanner: Scanner) -> list[str]:
    """Tokenize from the closing ``?`` to the end of the line."""
    if scanner.peek() != QUESTION_MARK:
        return []
    return scanner.read_list_tokens()


def lex_what(scanner: Scanner) -> list[str]:
    """``What is in <potion> ?`` and ``What is effective against <beast> ?``."""
    scanner.expect_keyword(IS_KEYWORD)
    if scanner.keyword(IN_KEYWORD):
        head = [IS_KEYWORD, IN_KEYWORD]
    elif scanner.keyword(EFFECTIVE_KEYWORD):
        scanner.expect_keyword(AGAINST_KEYWORD)
        head = [IS_KEYWORD, EFFECTIVE_KEYWORD, AGAINST_KEYWORD]
    else:
        raise scanner.error(f"expected {IN_KEYWORD!r} or {EFFECTIVE_KEYWORD!r}")
    subject = scanner.read_until(QUESTION_MARK)
    return [*head, subject, *_question_tail(scanner)]


def lex_total(scanner: Scanner) -> list[str]:
    """``Total <category> [<name>] ?``."""
    tokens = [scanner.read_word(stops=QUESTION_MARK)]
    scanner.skip_whitespace()
    if scanner.at_end:
        return tokens
    if scanner.peek() != QUESTION_MARK:
        tokens.append(scanner.read_until(QUESTION_MARK))
    return tokens + _question_tail(scanner)


def lex_knowledge(scanner: Scanner) -> list[str]:
    """The tail of ``Geralt learns``.

    The counter name runs to the first ``sign`` or ``potion`` word that has
    at least one word before it.
    """
    found = scanner.read_span_until_keyword(COUNTER_KEYWORDS)
    if found is None:
        raise scanner.error(f"expected {' or '.join(COUNTER_KEYWORDS)} after the name")
    name, counter = found
    mark = scanner.pos
    if (
        scanner.keyword(IS_KEYWORD)
        and scanner.keyword(EFFECTIVE_KEYWORD)
        and scanner.keyword(AGAINST_KEYWORD)
    ):
        beast = scanner.read_rest()
        tokens = [name, counter, IS_KEYWORD, EFFECTIVE_KEYWORD, AGAINST_KEYWORD]
        return tokens + [beast] if beast else tokens
    scanner.reset(mark)
    if scanner.keyword(CONSISTS_KEYWORD) and scanner.keyword(OF_KEYWORD):
        return [name, counter, CONSISTS_KEYWORD, OF_KEYWORD, *scanner.read_list_tokens()]
    raise scanner.error(
        f"expected '{IS_KEYWORD} {EFFECTIVE_KEYWORD} {AGAINST_KEYWORD}' "
        f"or '{CONSISTS_KEYWORD} {OF_KEYWORD}'"
    )


def lex_action(scanner: Scanner) -> list[str]:
    """Sentences starting with ``Geralt``."""
    if scanner.keyword(BREW_VERB):
        potion = scanner.read_rest()
        return [BREW_VERB, potion] if potion else [BREW_VERB]
    if scanner.keyword(LEARN_VERB):
        return [LEARN_VERB, *lex_knowledge(scanner)]
    for verb in (LOOT_VERB, TRADE_VERB, ENCOUNTER_VERB):
        if scanner.keyword(verb):
            return [verb, *scanner.read_list_tokens()]
    return scanner.read_list_tokens()


_FAMILIES: dict[str, FamilyLexer] = {
    WHAT_KEYWORD: lex_what,
    TOTAL_KEYWORD: lex_total,
    SUBJECT: lex_action,
}


def tokenize(line: str) -> list[str]:
    """Split one input line into tokens.

    Args:
        line: Raw line without its terminator.

    Returns:
        The token list; empty for a blank line.

    Raises:
        LexError: If a family lexer cannot make sense of the line.
        CommaSpacingError: If a list separator is not followed by a space.
    """
    scanner = Scanner(line)
    scanner.skip_whitespace()
    for keyword, lexer in _FAMILIES.items():
        if scanner.keyword(keyword):
            tokens = [keyword, *lexer(scanner)]
            break
    else:
        tokens = scanner.read_list_tokens()

    logger.debug("Line tokenized", token_count=len(tokens))
    return tokens


__all__ = [
    "FamilyLexer",
    "lex_action",
    "lex_knowledge",
    "lex_total",
    "lex_what",
    "tokenize",
]
