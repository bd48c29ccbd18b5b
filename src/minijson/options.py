"""Per-call configuration for decoding and encoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


DEFAULT_MAX_DEPTH = 256


class EncodeMode(Enum):
    STRICT = auto()    # unsupported nodes fail the encode
    LENIENT = auto()   # unsupported nodes become str(node) strings


@dataclass(frozen=True, slots=True)
class DecodeOptions:
    """Decoder settings.

    ``strict_grammar`` off (the default) tolerates stray, doubled, trailing
    and missing commas inside containers and ignores anything after the
    root value. On, separators must follow the JSON grammar exactly and
    trailing non-whitespace is a failure.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    strict_grammar: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


@dataclass(frozen=True, slots=True)
class EncodeOptions:
    mode: EncodeMode = EncodeMode.STRICT
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @property
    def lenient(self) -> bool:
        return self.mode is EncodeMode.LENIENT
