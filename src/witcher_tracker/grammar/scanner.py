"""Cursor-based lexer combinators shared by every sentence family.

Sentence families tokenize their tails differently (potion names span
several words, item lists isolate commas, questions end at ``?``), but
they are all built from the same few moves over one cursor:

- ``skip_whitespace``: advance past blanks.
- ``keyword``: consume a whole word if it is exactly the expected one.
- ``read_word``: read one word, optionally stopping at punctuation.
- ``read_until``: read raw text up to a terminator character.
- ``read_span_until_keyword``: read a multi-word span up to a closing keyword.
- ``read_list_tokens``: split the rest into words, ``,`` and ``?``.
"""

from __future__ import annotations

from collections.abc import Collection

from witcher_tracker.core.constants import COMMA, QUESTION_MARK
from witcher_tracker.core.exceptions import CommaSpacingError, LexError


PUNCTUATION = COMMA + QUESTION_MARK


class Scanner:
    """A read cursor over one input line.

    Every reader leaves the cursor just past what it consumed. Failed
    ``keyword`` and ``read_span_until_keyword`` calls leave it untouched.

    Example:
        >>> scanner = Scanner("Total potion Black Blood ?")
        >>> scanner.keyword("Total"), scanner.read_word()
        (True, 'potion')
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        """Whether the cursor has consumed the whole line."""
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the character under the cursor, or ``""`` at the end."""
        return self.text[self.pos] if not self.at_end else ""

    def reset(self, pos: int) -> None:
        """Move the cursor back to a saved position."""
        self.pos = pos

    def error(self, reason: str) -> LexError:
        """Build a LexError pointing at the cursor."""
        return LexError(
            f"Cannot tokenize line: {reason}",
            line=self.text,
            position=self.pos,
            reason=reason,
        )

    def skip_whitespace(self) -> int:
        """Advance past whitespace.

        Returns:
            Number of characters skipped.
        """
        start = self.pos
        while not self.at_end and self.text[self.pos].isspace():
            self.pos += 1
        return self.pos - start

    def keyword(self, word: str) -> bool:
        """Consume ``word`` and the whitespace after it.

        The word must be followed by whitespace or the end of the line, so
        ``"is"`` does not match the start of ``"isle"``.

        Returns:
            True if the keyword was consumed.
        """
        end = self.pos + len(word)
        if not self.text.startswith(word, self.pos):
            return False
        if end < len(self.text) and not self.text[end].isspace():
            return False
        self.pos = end
        self.skip_whitespace()
        return True

    def expect_keyword(self, word: str) -> None:
        """Consume ``word`` or fail.

        Raises:
            LexError: If the next word is not ``word``.
        """
        if not self.keyword(word):
            raise self.error(f"expected {word!r}")

    def read_word(self, stops: str = "") -> str:
        """Read up to the next whitespace or any character in ``stops``."""
        start = self.pos
        while not self.at_end:
            char = self.text[self.pos]
            if char.isspace() or char in stops:
                break
            self.pos += 1
        return self.text[start:self.pos]

    def read_until(self, terminator: str) -> str:
        """Read raw text up to ``terminator`` or the end of the line.

        Inner whitespace is kept as written; trailing whitespace is dropped.
        The cursor stops on the terminator itself.
        """
        start = self.pos
        end = self.text.find(terminator, start)
        if end == -1:
            end = len(self.text)
        self.pos = end
        return self.text[start:end].rstrip()

    def read_rest(self) -> str:
        """Read everything left on the line, without trailing whitespace."""
        rest = self.text[self.pos:].rstrip()
        self.pos = len(self.text)
        return rest

    def read_span_until_keyword(self, keywords: Collection[str]) -> tuple[str, str] | None:
        """Read a multi-word span closed by one of ``keywords``.

        At least one word must precede the closing keyword, so a keyword
        in first position is treated as part of the span.

        Returns:
            The raw span (inner whitespace kept) and the keyword that closed
            it, or None if no keyword follows; the cursor is then unchanged.
        """
        start = self.pos
        words_seen = 0
        while True:
            self.skip_whitespace()
            if self.at_end:
                self.reset(start)
                return None
            word_start = self.pos
            word = self.read_word()
            if words_seen and word in keywords:
                span = self.text[start:word_start].rstrip()
                self.skip_whitespace()
                return span, word
            words_seen += 1

    def read_list_tokens(self) -> list[str]:
        """Split the rest of the line into words, commas and question marks.

        ``,`` and ``?`` are always tokens of their own. A comma may touch
        the word before it but must be followed by whitespace (or end the
        line).

        Raises:
            CommaSpacingError: If a comma runs straight into the next word.
        """
        tokens: list[str] = []
        while True:
            self.skip_whitespace()
            if self.at_end:
                return tokens
            char = self.peek()
            if char == COMMA:
                following = self.text[self.pos + 1:self.pos + 2]
                if following and not following.isspace():
                    raise CommaSpacingError(
                        "Missing space after comma",
                        line=self.text,
                        position=self.pos,
                        reason="comma_spacing",
                    )
                tokens.append(COMMA)
                self.pos += 1
            elif char == QUESTION_MARK:
                tokens.append(QUESTION_MARK)
                self.pos += 1
            else:
                tokens.append(self.read_word(stops=PUNCTUATION))


__all__ = [
    "PUNCTUATION",
    "Scanner",
]
