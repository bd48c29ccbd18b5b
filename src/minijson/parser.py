"""Recursive-descent parser: JSON text -> Value tree."""

from __future__ import annotations

import logging
import math
import re

from .errors import DecodeFailure
from .options import DecodeOptions
from .tokenizer import Tokenizer, TokenKind
from .values import (
    INT64_MAX,
    INT64_MIN,
    JArray,
    JBool,
    JFloat,
    JInteger,
    JObject,
    JString,
    Null,
    Value,
)

logger = logging.getLogger(__name__)


_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_STRING_RUN = re.compile(r'[^"\\]+')
_FLOAT_MARKERS = frozenset(".eE")


class _Abort(Exception):
    """Unwinds the descent; converted to a DecodeFailure by ``decode``."""

    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(reason)
        self.offset = offset
        self.reason = reason


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def decode(text: str | None, options: DecodeOptions | None = None) -> Value | DecodeFailure:
    """Parse *text* into a Value tree.

    Returns a ``DecodeFailure`` instead of raising when the text is not
    valid JSON.  A successfully decoded ``null`` is the ``Null`` value,
    never ``None``.
    """
    if text is None:
        return DecodeFailure(offset=0, snippet="", reason="no input")
    if not isinstance(text, str):
        return DecodeFailure(
            offset=0, snippet="", reason=f"expected text, got {type(text).__name__}"
        )

    parser = Parser(text, options or DecodeOptions())
    try:
        return parser.parse_document()
    except _Abort as exc:
        failure = DecodeFailure.at(text, exc.offset, exc.reason)
    except RecursionError:
        failure = DecodeFailure.at(text, parser.pos, "nesting too deep for the interpreter stack")

    logger.debug("decode failed at offset %d: %s", failure.offset, failure.reason)
    return failure


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class Parser:
    """Single-use parser over one text.

    Every ``parse_*`` method expects the cursor at (or before whitespace
    preceding) the construct it reads and leaves the cursor just past it.
    """

    def __init__(self, text: str, options: DecodeOptions | None = None) -> None:
        self._tokens = Tokenizer(text)
        self._options = options or DecodeOptions()
        self._depth = 0

    @property
    def pos(self) -> int:
        return self._tokens.pos

    # -- Failure helpers --------------------------------------------------

    def _fail(self, reason: str, offset: int | None = None):
        raise _Abort(self._tokens.pos if offset is None else offset, reason)

    def _fail_unexpected(self, kind: TokenKind, context: str):
        if kind is TokenKind.NONE:
            if self._tokens.at_end:
                self._fail(f"unexpected end of input in {context}")
            self._fail(f"unexpected character {self._tokens.text[self._tokens.pos]!r} in {context}")
        self._fail(f"unexpected {kind.name} in {context}")

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._options.max_depth:
            self._fail(f"maximum nesting depth {self._options.max_depth} exceeded")

    def _leave(self) -> None:
        self._depth -= 1

    # -- Grammar ----------------------------------------------------------

    def parse_document(self) -> Value:
        value = self.parse_value()
        if self._options.strict_grammar:
            self._tokens.skip_whitespace()
            if not self._tokens.at_end:
                self._fail("unexpected data after the root value")
        return value

    def parse_value(self) -> Value:
        self._tokens.skip_whitespace()
        kind = self._tokens.peek_token()

        if kind is TokenKind.STRING:
            return JString(self.parse_string())
        if kind is TokenKind.NUMBER:
            return self.parse_number()
        if kind is TokenKind.OBJECT_OPEN:
            return self.parse_object()
        if kind is TokenKind.ARRAY_OPEN:
            return self.parse_array()
        if kind is TokenKind.TRUE:
            self._tokens.next_token()
            return JBool(True)
        if kind is TokenKind.FALSE:
            self._tokens.next_token()
            return JBool(False)
        if kind is TokenKind.NULL:
            self._tokens.next_token()
            return Null

        self._fail_unexpected(kind, "value")

    def parse_object(self) -> JObject:
        """``{ "key": value, ... }``.

        Commas are skipped wherever they appear unless ``strict_grammar``
        is set.  A repeated key overwrites the earlier value.
        """
        self._tokens.skip_whitespace()
        self._enter()
        self._tokens.next_token()  # {

        obj = JObject()
        count = 0
        after_item = False
        strict = self._options.strict_grammar

        while True:
            self._tokens.skip_whitespace()
            kind = self._tokens.peek_token()

            if kind is TokenKind.COMMA:
                if strict and not after_item:
                    self._fail("unexpected ',' in object")
                self._tokens.next_token()
                after_item = False
                continue

            if kind is TokenKind.OBJECT_CLOSE:
                if strict and count and not after_item:
                    self._fail("trailing ',' in object")
                self._tokens.next_token()
                break

            if kind is not TokenKind.STRING:
                self._fail_unexpected(kind, "object")
            if strict and after_item:
                self._fail("expected ',' or '}' in object")

            key = self.parse_string()

            self._tokens.skip_whitespace()
            if self._tokens.next_token() is not TokenKind.COLON:
                self._fail("expected ':' after object key")

            obj.set(key, self.parse_value())
            count += 1
            after_item = True

        self._leave()
        return obj

    def parse_array(self) -> JArray:
        self._tokens.skip_whitespace()
        self._enter()
        self._tokens.next_token()  # [

        array = JArray()
        after_item = False
        strict = self._options.strict_grammar

        while True:
            self._tokens.skip_whitespace()
            kind = self._tokens.peek_token()

            if kind is TokenKind.NONE:
                self._fail_unexpected(kind, "array")

            if kind is TokenKind.COMMA:
                if strict and not after_item:
                    self._fail("unexpected ',' in array")
                self._tokens.next_token()
                after_item = False
                continue

            if kind is TokenKind.ARRAY_CLOSE:
                if strict and array.items and not after_item:
                    self._fail("trailing ',' in array")
                self._tokens.next_token()
                break

            if strict and after_item:
                self._fail("expected ',' or ']' in array")

            array.append(self.parse_value())
            after_item = True

        self._leave()
        return array

    def parse_string(self) -> str:
        """Read a quoted string, translating escapes.

        ``\\uXXXX`` needs exactly four hex digits.  A high surrogate escape
        directly followed by a low surrogate escape becomes one code point;
        a lone surrogate is kept as-is.
        """
        self._tokens.skip_whitespace()
        self._tokens.next_token()  # "

        text = self._tokens.text
        end = len(text)
        pos = self._tokens.pos
        chunks: list[str] = []

        while True:
            if pos >= end:
                self._fail("unterminated string", pos)

            run = _STRING_RUN.match(text, pos)
            if run is not None:
                chunks.append(run.group())
                pos = run.end()
                continue

            ch = text[pos]
            if ch == '"':
                pos += 1
                break

            # backslash
            pos += 1
            if pos >= end:
                self._fail("unterminated escape sequence", pos)
            esc = text[pos]

            if esc == "u":
                unit = _hex4(text, pos + 1)
                if unit is None:
                    self._fail("invalid \\u escape", pos - 1)
                pos += 5
                if 0xD800 <= unit <= 0xDBFF and text.startswith("\\u", pos):
                    low = _hex4(text, pos + 2)
                    if low is not None and 0xDC00 <= low <= 0xDFFF:
                        chunks.append(chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00)))
                        pos += 6
                        continue
                chunks.append(chr(unit))
                continue

            replacement = _ESCAPES.get(esc)
            if replacement is None:
                self._fail(f"invalid escape '\\{esc}'", pos - 1)
            chunks.append(replacement)
            pos += 1

        self._tokens.pos = pos
        return "".join(chunks)

    def parse_number(self) -> JInteger | JFloat:
        """Read a numeral.

        A numeral with ``.``, ``e`` or ``E`` is a float, anything else an
        integer.  The run is not validated beyond what ``int()`` and
        ``float()`` accept.
        """
        self._tokens.skip_whitespace()
        start = self._tokens.pos
        numeral = self._tokens.read_numeral()

        if not _FLOAT_MARKERS.isdisjoint(numeral):
            try:
                number = float(numeral)
            except ValueError:
                self._fail(f"malformed number {numeral!r}", start)
            if not math.isfinite(number):
                self._fail(f"number {numeral!r} out of range", start)
            return JFloat(number)

        try:
            integer = int(numeral)
        except ValueError:
            self._fail(f"malformed number {numeral!r}", start)
        if not INT64_MIN <= integer <= INT64_MAX:
            self._fail(f"integer {numeral!r} out of 64-bit range", start)
        return JInteger(integer)


def _hex4(text: str, pos: int) -> int | None:
    digits = text[pos:pos + 4]
    if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
        return None
    return int(digits, 16)
