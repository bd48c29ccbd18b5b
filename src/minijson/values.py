"""Value types for minijson."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class _NullType:
    """Singleton for the JSON ``null`` literal."""

    _instance: "_NullType | None" = None

    def __new__(cls) -> "_NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _NullType()


@dataclass(slots=True)
class JBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(slots=True)
class JInteger:
    value: int  # signed 64-bit

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class JFloat:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(slots=True)
class JString:
    value: str

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class JArray:
    items: list["Value"] = field(default_factory=list)

    def append(self, value: "Value") -> None:
        self.items.append(value)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]


@dataclass(slots=True)
class JObject:
    """Mapping of text keys to values.

    Keys keep their first insertion position; setting an existing key
    replaces its value in place (last write wins).
    """

    entries: dict[str, "Value"] = field(default_factory=dict)

    def set(self, key: str, value: "Value") -> None:
        self.entries[key] = value

    def get(self, key: str, default: "Value | None" = None) -> "Value | None":
        return self.entries.get(key, default)

    def items(self):
        return self.entries.items()

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]


Value = Union[_NullType, JBool, JInteger, JFloat, JString, JArray, JObject]
