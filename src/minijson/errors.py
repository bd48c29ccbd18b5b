"""Failure results and exceptions for minijson.

``decode`` and ``encode`` report problems by returning a ``DecodeFailure``
or ``EncodeFailure`` instead of raising. The exception classes are used by
the raising wrappers in :mod:`minijson.api`.
"""

from __future__ import annotations

from dataclasses import dataclass


SNIPPET_BEFORE = 5
SNIPPET_AFTER = 15


class MiniJSONError(Exception):
    """Base class for all minijson exceptions."""


class DecodeError(MiniJSONError):
    def __init__(self, reason: str, offset: int, snippet: str) -> None:
        super().__init__(f"{reason} at offset {offset}: {snippet!r}")
        self.reason = reason
        self.offset = offset
        self.snippet = snippet


class EncodeError(MiniJSONError):
    def __init__(self, reason: str, path: str) -> None:
        super().__init__(f"{reason} at {path}")
        self.reason = reason
        self.path = path


def error_snippet(text: str, offset: int) -> str:
    """Return the text around *offset*: 5 chars before to 15 after, inclusive.

    Both ends are clamped to the bounds of *text*.
    """
    if not text:
        return ""
    start = max(offset - SNIPPET_BEFORE, 0)
    end = min(offset + SNIPPET_AFTER, len(text) - 1)
    if start > end:
        return ""
    return text[start:end + 1]


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Result of a decode that did not produce a value.

    Test for it with ``isinstance``: valid results such as ``Null`` and
    empty containers are falsy too.
    """

    offset: int
    snippet: str
    reason: str

    @classmethod
    def at(cls, text: str, offset: int, reason: str) -> "DecodeFailure":
        return cls(offset=offset, snippet=error_snippet(text, offset), reason=reason)

    def to_error(self) -> DecodeError:
        return DecodeError(self.reason, self.offset, self.snippet)


@dataclass(frozen=True, slots=True)
class EncodeFailure:
    """Result of an encode that could not produce text."""

    reason: str
    path: str = "$"

    def __bool__(self) -> bool:
        return False

    def to_error(self) -> EncodeError:
        return EncodeError(self.reason, self.path)
