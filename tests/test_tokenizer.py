"""Tests for minijson.tokenizer."""

import pytest

from minijson.tokenizer import Tokenizer, TokenKind


# ---------------------------------------------------------------------------
# skip_whitespace
# ---------------------------------------------------------------------------

def test_skip_whitespace():
    t = Tokenizer(" \t\r\n x")
    t.skip_whitespace()
    assert t.pos == 5

def test_skip_whitespace_at_end():
    t = Tokenizer("   ")
    t.skip_whitespace()
    assert t.at_end


# ---------------------------------------------------------------------------
# classification
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, kind",
    [
        ("{", TokenKind.OBJECT_OPEN),
        ("}", TokenKind.OBJECT_CLOSE),
        ("[", TokenKind.ARRAY_OPEN),
        ("]", TokenKind.ARRAY_CLOSE),
        (":", TokenKind.COLON),
        (",", TokenKind.COMMA),
        ('"', TokenKind.STRING),
        ("7", TokenKind.NUMBER),
        ("-1", TokenKind.NUMBER),
        ("true", TokenKind.TRUE),
        ("false", TokenKind.FALSE),
        ("null", TokenKind.NULL),
        ("", TokenKind.NONE),
        ("   ", TokenKind.NONE),
    ],
)
def test_peek_token(text, kind):
    assert Tokenizer(text).peek_token() is kind

@pytest.mark.parametrize("text", ["tru", "nul", "fals", "True", "NULL", "x", "+1", ".5"])
def test_unmatched_words_are_none(text):
    t = Tokenizer(text)
    assert t.next_token() is TokenKind.NONE
    assert t.pos == 0

def test_peek_does_not_move():
    t = Tokenizer("  {")
    assert t.peek_token() is TokenKind.OBJECT_OPEN
    assert t.pos == 0


# ---------------------------------------------------------------------------
# consumption
# ---------------------------------------------------------------------------

def test_delimiters_are_consumed():
    t = Tokenizer(" [ , ] ")
    assert t.next_token() is TokenKind.ARRAY_OPEN
    assert t.next_token() is TokenKind.COMMA
    assert t.next_token() is TokenKind.ARRAY_CLOSE
    assert t.next_token() is TokenKind.NONE

def test_string_consumes_opening_quote_only():
    t = Tokenizer(' "ab"')
    assert t.next_token() is TokenKind.STRING
    assert t.pos == 2

def test_number_consumes_nothing():
    t = Tokenizer("  12")
    assert t.next_token() is TokenKind.NUMBER
    assert t.pos == 2

def test_keyword_consumed():
    t = Tokenizer("false,")
    assert t.next_token() is TokenKind.FALSE
    assert t.next_token() is TokenKind.COMMA


# ---------------------------------------------------------------------------
# read_numeral
# ---------------------------------------------------------------------------

def test_read_numeral_maximal_run():
    t = Tokenizer("-12.5e+3,")
    assert t.read_numeral() == "-12.5e+3"
    assert t.next_token() is TokenKind.COMMA

def test_read_numeral_stops_at_other_chars():
    t = Tokenizer("42]")
    assert t.read_numeral() == "42"
    assert t.pos == 2
