"""Raising wrappers around ``decode`` / ``encode``."""

from __future__ import annotations

from .errors import DecodeFailure, EncodeFailure
from .options import DecodeOptions, EncodeOptions
from .parser import decode
from .serializer import encode
from .values import Value


def loads(text: str, options: DecodeOptions | None = None) -> Value:
    """Like ``decode`` but raises ``DecodeError`` on failure."""
    result = decode(text, options)
    if isinstance(result, DecodeFailure):
        raise result.to_error()
    return result


def dumps(value: Value, options: EncodeOptions | None = None) -> str:
    """Like ``encode`` but raises ``EncodeError`` on failure."""
    result = encode(value, options)
    if isinstance(result, EncodeFailure):
        raise result.to_error()
    return result
