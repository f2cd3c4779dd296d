"""Serialization of parsed value trees back to JSON-subset text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import IO

from ._values import JsonArray
from ._values import JsonBool
from ._values import JsonFloat
from ._values import JsonInt
from ._values import JsonNull
from ._values import JsonObject
from ._values import JsonString
from ._values import Value


@dataclass(frozen=True)
class DumpConfig:
    """
    Configures value-tree serialization with immutable settings.

    indent of None writes everything on one line; an int indents by that
    many spaces per level and a str repeats that string per level.
    """

    indent: str | int | None = None
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if self.indent is not None and not isinstance(self.indent, str | int):
            raise TypeError("indent must be None, an int or a str")


def _encode_string(s: str) -> str:
    # Parsed strings already hold source-form escapes
    return f'"{s}"'


def _encode_float(n: float) -> str:
    if math.isnan(n) or math.isinf(n):
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    return repr(n)


def _get_indent_string(indent: str | int | None, level: int) -> str:
    """Generate indentation string for given level."""
    if indent is None:
        return ""
    elif isinstance(indent, int):
        return " " * (indent * level)
    else:
        return indent * level


def _wrap(
    opener: str, items: list[str], closer: str, config: DumpConfig, level: int
) -> str:
    """Joins encoded items, one per line when indenting."""
    if not items:
        return opener + closer

    if config.indent is None:
        return opener + ", ".join(items) + closer

    inner_indent = _get_indent_string(config.indent, level + 1)
    outer_indent = _get_indent_string(config.indent, level)
    body = ",\n".join(f"{inner_indent}{item}" for item in items)
    return f"{opener}\n{body}\n{outer_indent}{closer}"


def _encode_value(value: Value, config: DumpConfig, level: int) -> str:
    """Encode any parsed value."""
    match value:
        case JsonNull():
            return "null"
        case JsonBool(flag):
            return "true" if flag else "false"
        case JsonInt(number):
            return str(number)
        case JsonFloat(number):
            return _encode_float(number)
        case JsonString(text):
            return _encode_string(text)
        case JsonArray(items):
            encoded = [
                _encode_value(item, config, level + 1) for item in items
            ]
            return _wrap("[", encoded, "]", config, level)
        case JsonObject(members):
            keys = sorted(members) if config.sort_keys else list(members)
            encoded = [
                f"{_encode_string(key)}: "
                f"{_encode_value(members[key], config, level + 1)}"
                for key in keys
            ]
            return _wrap("{", encoded, "}", config, level)
        case _:
            msg = (
                f"Object of type {type(value).__name__} is not a parsed value"
            )
            raise TypeError(msg)


def dumps(value: Value, **kwargs: object) -> str:
    """
    Serializes a value tree to text with configurable formatting.

    Accepts the DumpConfig fields as keyword arguments.
    """
    config = DumpConfig(**kwargs)  # type: ignore[arg-type]
    return _encode_value(value, config, 0)


def dump(value: Value, fp: IO[str], **kwargs: object) -> None:
    """Serializes a value tree to a file-like object."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(value, **kwargs))
