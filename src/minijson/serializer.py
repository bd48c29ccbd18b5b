"""Serializer: Value tree -> compact JSON text."""

from __future__ import annotations

import logging
import math

from .errors import EncodeFailure
from .options import EncodeOptions
from .values import (
    INT64_MAX,
    INT64_MIN,
    JArray,
    JBool,
    JFloat,
    JInteger,
    JObject,
    JString,
    Value,
    _NullType,
)

logger = logging.getLogger(__name__)


_ESCAPES: dict[str, str] = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class _Unsupported(Exception):
    def __init__(self, reason: str, path: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.path = path


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def encode(value: Value, options: EncodeOptions | None = None) -> str | EncodeFailure:
    """Serialize *value* to compact JSON text.

    In STRICT mode (the default) a node that is not one of the seven value
    variants, or carries a payload JSON cannot represent, produces an
    ``EncodeFailure``.  In LENIENT mode such a node is written as a string
    holding ``str(node)`` and a warning is logged.
    """
    serializer = Serializer(options or EncodeOptions())
    try:
        return serializer.serialize(value)
    except _Unsupported as exc:
        failure = EncodeFailure(exc.reason, exc.path)
    except RecursionError:
        failure = EncodeFailure("nesting too deep for the interpreter stack", "$")

    logger.debug("encode failed at %s: %s", failure.path, failure.reason)
    return failure


def escape_string(text: str) -> str:
    """Quote *text* as a JSON string literal.

    Printable ASCII is kept, the short escapes are used where they exist,
    and everything else becomes ``\\uXXXX`` per UTF-16 code unit.
    """
    parts = ['"']
    for ch in text:
        escaped = _ESCAPES.get(ch)
        if escaped is not None:
            parts.append(escaped)
            continue
        code = ord(ch)
        if 0x20 <= code <= 0x7E:
            parts.append(ch)
        elif code > 0xFFFF:
            code -= 0x10000
            parts.append("\\u%04x\\u%04x" % (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF)))
        else:
            parts.append("\\u%04x" % code)
    parts.append('"')
    return "".join(parts)


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------

class Serializer:
    """Single-use tree walker; output is accumulated in ``self._parts``."""

    def __init__(self, options: EncodeOptions | None = None) -> None:
        self._options = options or EncodeOptions()
        self._parts: list[str] = []
        self._depth = 0

    def serialize(self, value: Value) -> str:
        self._parts = []
        self._depth = 0
        self._write(value, "$")
        return "".join(self._parts)

    def _write(self, value: Value, path: str) -> None:
        out = self._parts

        if isinstance(value, _NullType):
            out.append("null")
        elif isinstance(value, JBool):
            if not isinstance(value.value, bool):
                self._unsupported(value, "JBool payload is not a bool", path)
                return
            out.append("true" if value.value else "false")
        elif isinstance(value, JInteger):
            self._write_integer(value, path)
        elif isinstance(value, JFloat):
            self._write_float(value, path)
        elif isinstance(value, JString):
            if not isinstance(value.value, str):
                self._unsupported(value, "JString payload is not a str", path)
                return
            out.append(escape_string(value.value))
        elif isinstance(value, JArray):
            self._write_array(value, path)
        elif isinstance(value, JObject):
            self._write_object(value, path)
        else:
            self._unsupported(value, f"unsupported type {type(value).__name__}", path)

    def _write_integer(self, value: JInteger, path: str) -> None:
        number = value.value
        if isinstance(number, bool) or not isinstance(number, int):
            self._unsupported(value, "JInteger payload is not an int", path)
            return
        if not INT64_MIN <= number <= INT64_MAX:
            self._unsupported(value, "integer out of 64-bit range", path)
            return
        self._parts.append(str(number))

    def _write_float(self, value: JFloat, path: str) -> None:
        number = value.value
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            self._unsupported(value, "JFloat payload is not a float", path)
            return
        try:
            number = float(number)
        except OverflowError:
            self._unsupported(value, "float out of range", path)
            return
        if not math.isfinite(number):
            self._unsupported(value, "non-finite float", path)
            return
        self._parts.append(repr(number))

    def _write_array(self, value: JArray, path: str) -> None:
        self._enter(path)
        out = self._parts
        out.append("[")
        for i, item in enumerate(value.items):
            if i:
                out.append(",")
            self._write(item, f"{path}[{i}]")
        out.append("]")
        self._leave()

    def _write_object(self, value: JObject, path: str) -> None:
        self._enter(path)
        out = self._parts
        out.append("{")
        first = True
        for key, item in value.entries.items():
            if not first:
                out.append(",")
            first = False
            if not isinstance(key, str):
                if not self._options.lenient:
                    raise _Unsupported(f"object key {key!r} is not a str", path)
                logger.warning("lenient encode: object key %r at %s written as str()", key, path)
                key = str(key)
            out.append(escape_string(key))
            out.append(":")
            self._write(item, f"{path}.{key}")
        out.append("}")
        self._leave()

    def _enter(self, path: str) -> None:
        self._depth += 1
        if self._depth > self._options.max_depth:
            raise _Unsupported(f"maximum nesting depth {self._options.max_depth} exceeded", path)

    def _leave(self) -> None:
        self._depth -= 1

    def _unsupported(self, node: object, reason: str, path: str) -> None:
        """Fail in STRICT mode; write ``str(node)`` as a string in LENIENT mode."""
        if not self._options.lenient:
            raise _Unsupported(reason, path)
        logger.warning("lenient encode: %s at %s written as str()", reason, path)
        self._parts.append(escape_string(str(node)))
