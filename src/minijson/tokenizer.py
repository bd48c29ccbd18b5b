"""Tokenizer: classifies the next significant position of a JSON text.

The tokenizer owns the cursor, whitespace skipping and one-token
lookahead.  It never builds values; the parser asks it what comes next
and reads string and number bodies itself from the cursor.

Consumption rules for ``next_token``:

- delimiters ``{ } [ ] : ,`` are consumed
- ``STRING`` consumes only the opening quote
- ``NUMBER`` consumes nothing; the body is read with ``read_numeral``
- ``true`` / ``false`` / ``null`` are consumed
- ``NONE`` (end of input or an unrecognised character) consumes nothing
"""

from __future__ import annotations

from enum import Enum, auto


# ---------------------------------------------------------------------------
# TokenKind
# ---------------------------------------------------------------------------

class TokenKind(Enum):
    NONE = auto()          # end of input / unrecognised
    OBJECT_OPEN = auto()   # {
    OBJECT_CLOSE = auto()  # }
    ARRAY_OPEN = auto()    # [
    ARRAY_CLOSE = auto()   # ]
    COLON = auto()         # :
    COMMA = auto()         # ,
    STRING = auto()        # "
    NUMBER = auto()        # 0-9 or -
    TRUE = auto()
    FALSE = auto()
    NULL = auto()


_DELIMITER_MAP: dict[str, TokenKind] = {
    "{": TokenKind.OBJECT_OPEN,
    "}": TokenKind.OBJECT_CLOSE,
    "[": TokenKind.ARRAY_OPEN,
    "]": TokenKind.ARRAY_CLOSE,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    '"': TokenKind.STRING,
}

_KEYWORDS: tuple[tuple[str, TokenKind], ...] = (
    ("true", TokenKind.TRUE),
    ("false", TokenKind.FALSE),
    ("null", TokenKind.NULL),
)

WHITESPACE = frozenset(" \t\n\r")
NUMBER_START = frozenset("0123456789-")
NUMERAL_CHARS = frozenset("0123456789+-.eE")


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

class Tokenizer:
    """Cursor over a JSON text."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_whitespace(self) -> None:
        text = self.text
        pos = self.pos
        end = len(text)
        while pos < end and text[pos] in WHITESPACE:
            pos += 1
        self.pos = pos

    def peek_token(self) -> TokenKind:
        """Classify the next token without moving the cursor."""
        saved = self.pos
        try:
            return self.next_token()
        finally:
            self.pos = saved

    def next_token(self) -> TokenKind:
        self.skip_whitespace()
        if self.at_end:
            return TokenKind.NONE

        ch = self.text[self.pos]
        kind = _DELIMITER_MAP.get(ch)
        if kind is not None:
            self.pos += 1
            return kind
        if ch in NUMBER_START:
            return TokenKind.NUMBER

        for word, kind in _KEYWORDS:
            if self.text.startswith(word, self.pos):
                self.pos += len(word)
                return kind

        return TokenKind.NONE

    def read_numeral(self) -> str:
        """Consume and return the maximal run of numeral characters."""
        self.skip_whitespace()
        text = self.text
        start = self.pos
        pos = start
        end = len(text)
        while pos < end and text[pos] in NUMERAL_CHARS:
            pos += 1
        self.pos = pos
        return text[start:pos]
