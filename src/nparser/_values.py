"""
Tagged value tree produced by the JSON-subset grammar.

Every parsed value is exactly one of the variants below, so consumers match
on the variant instead of probing Python types at runtime.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import field
from typing import Any


@dataclass(frozen=True)
class JsonNull:
    """The null literal, or an unrecognized scalar in lenient mode."""


@dataclass(frozen=True)
class JsonBool:
    value: bool


@dataclass(frozen=True)
class JsonInt:
    value: int


@dataclass(frozen=True)
class JsonFloat:
    value: float


@dataclass(frozen=True)
class JsonString:
    """
    Quoted string content exactly as it appeared in the source.

    Escape sequences are kept verbatim, so `"a\\"b"` holds `a\\"b`.
    """

    value: str


@dataclass
class JsonArray:
    """Ordered sequence of values. Filled in place while parsing."""

    items: list[Value] = field(default_factory=list)

    def append(self, value: Value) -> None:
        self.items.append(value)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class JsonObject:
    """
    Ordered mapping from key to value. Filled in place while parsing.

    Keys are unique; assigning an existing key replaces its value.
    """

    members: dict[str, Value] = field(default_factory=dict)

    def __setitem__(self, key: str, value: Value) -> None:
        self.members[key] = value

    def __getitem__(self, key: str) -> Value:
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __len__(self) -> int:
        return len(self.members)


type Scalar = JsonNull | JsonBool | JsonInt | JsonFloat | JsonString
type Container = JsonArray | JsonObject
type Value = Scalar | Container

NULL = JsonNull()

# Plain Python rendering of a value tree
PyValue = (
    str | int | float | bool | None | dict[str, "PyValue"] | list["PyValue"]
)


def to_python(value: Value) -> PyValue:
    """Converts a value tree into plain dicts, lists and scalars."""
    match value:
        case JsonNull():
            return None
        case JsonBool(flag):
            return flag
        case JsonInt(number) | JsonFloat(number):
            return number
        case JsonString(text):
            return text
        case JsonArray(items):
            return [to_python(item) for item in items]
        case JsonObject(members):
            return {key: to_python(item) for key, item in members.items()}
        case _:
            raise TypeError(f"not a parsed value: {type(value).__name__}")


def from_python(obj: Any) -> Value:
    """
    Builds a value tree from plain Python data.

    Strings are stored as-is, so they must already be in source form.
    """
    if obj is None:
        return NULL
    elif isinstance(obj, bool):
        return JsonBool(obj)
    elif isinstance(obj, int):
        return JsonInt(obj)
    elif isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            raise ValueError("Out of range float values are not supported")
        return JsonFloat(obj)
    elif isinstance(obj, str):
        return JsonString(obj)
    elif isinstance(obj, list | tuple):
        return JsonArray([from_python(item) for item in obj])
    elif isinstance(obj, dict):
        result = JsonObject()
        for key, item in obj.items():
            if not isinstance(key, str):
                msg = f"keys must be strings, not {type(key).__name__}"
                raise TypeError(msg)
            result[key] = from_python(item)
        return result
    else:
        msg = f"Object of type {type(obj).__name__} is not representable"
        raise TypeError(msg)
