"""minijson — JSON text to value tree and back."""

from .api import dumps, loads
from .convert import from_python, to_python
from .errors import (
    DecodeError,
    DecodeFailure,
    EncodeError,
    EncodeFailure,
    MiniJSONError,
)
from .options import DecodeOptions, EncodeMode, EncodeOptions
from .parser import decode
from .serializer import encode
from .tokenizer import TokenKind, Tokenizer
from .values import (
    JArray,
    JBool,
    JFloat,
    JInteger,
    JObject,
    JString,
    Null,
    Value,
)

__all__ = [
    "decode",
    "encode",
    "loads",
    "dumps",
    "from_python",
    "to_python",
    "Value",
    "Null",
    "JBool",
    "JInteger",
    "JFloat",
    "JString",
    "JArray",
    "JObject",
    "DecodeOptions",
    "EncodeOptions",
    "EncodeMode",
    "DecodeFailure",
    "EncodeFailure",
    "MiniJSONError",
    "DecodeError",
    "EncodeError",
    "Tokenizer",
    "TokenKind",
]
