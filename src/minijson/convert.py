"""Bridges between Value trees and native Python containers."""

from __future__ import annotations

from typing import Any

from .values import (
    JArray,
    JBool,
    JFloat,
    JInteger,
    JObject,
    JString,
    Null,
    Value,
    _NullType,
)


def from_python(obj: Any) -> Value:
    """Build a Value tree from plain Python data.

    - ``None`` → Null, ``bool`` → JBool, ``int`` → JInteger,
      ``float`` → JFloat, ``str`` → JString
    - ``list`` / ``tuple`` → JArray
    - ``dict`` with ``str`` keys → JObject (iteration order kept)

    Anything else raises ``TypeError``.
    """
    if obj is None:
        return Null
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return JBool(obj)
    if isinstance(obj, int):
        return JInteger(obj)
    if isinstance(obj, float):
        return JFloat(obj)
    if isinstance(obj, str):
        return JString(obj)
    if isinstance(obj, (list, tuple)):
        return JArray([from_python(item) for item in obj])
    if isinstance(obj, dict):
        obj_value = JObject()
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be str, not {type(key).__name__}")
            obj_value.set(key, from_python(item))
        return obj_value
    raise TypeError(f"cannot convert {type(obj).__name__} to a JSON value")


def to_python(value: Value) -> Any:
    """Return the plain Python equivalent of a Value tree."""
    if isinstance(value, _NullType):
        return None
    if isinstance(value, (JBool, JInteger, JFloat, JString)):
        return value.value
    if isinstance(value, JArray):
        return [to_python(item) for item in value.items]
    if isinstance(value, JObject):
        return {key: to_python(item) for key, item in value.entries.items()}
    raise TypeError(f"not a JSON value: {type(value).__name__}")
