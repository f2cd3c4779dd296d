"""
Hand-written scanning toolkit with a JSON-subset grammar.

Provides a character-at-a-time Scanner with position tracking and comment,
whitespace, quoted-string and delimiter primitives, a recursive-descent
parser for a JSON subset built on it, and a pass that strips whitespace and
comments while preserving quoted strings.
"""

import logging
from typing import IO
from typing import Any

from ._cleaner import Cleaner
from ._cleaner import CleanResult
from ._config import DEFAULT_TAB_WIDTH
from ._config import ParseConfig
from ._dump import DumpConfig
from ._dump import dump
from ._dump import dumps
from ._errors import FailedExpectation
from ._errors import ParseFault
from ._errors import UnrecognizedScalar
from ._grammar import JsonParser
from ._grammar import Outcome
from ._grammar import ParseResult
from ._grammar import ParseStatus
from ._position_map import PositionMap
from ._position_map import SourceRef
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._scanner import CaptureMode
from ._scanner import Scanner
from ._values import NULL
from ._values import JsonArray
from ._values import JsonBool
from ._values import JsonFloat
from ._values import JsonInt
from ._values import JsonNull
from ._values import JsonObject
from ._values import JsonString
from ._values import PyValue
from ._values import Value
from ._values import from_python
from ._values import to_python

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(
    source: str | IO[str], config: ParseConfig | None = None, **kwargs: Any
) -> ParseResult:
    """
    Parses a JSON-subset document into a value tree.

    Accepts either a ParseConfig or its fields as keyword arguments. Never
    raises for malformed input; check the result's status and errors.
    """
    if config is None:
        config = ParseConfig(**kwargs)
    elif kwargs:
        raise TypeError("pass either config or keyword settings, not both")

    scanner = Scanner(source, config.tab_width)
    return JsonParser(scanner, config).parse()


def loads(s: str, **kwargs: Any) -> PyValue:
    """
    Parses a JSON-subset string into plain Python objects.

    Raises the ParseFault that aborted the parse. Input that ends inside an
    open structure returns the part that was read.
    """
    if not isinstance(s, str):
        raise TypeError(f"the document must be str, not {type(s).__name__}")

    result = parse(s, **kwargs)
    if result.fault is not None:
        raise result.fault
    return None if result.value is None else to_python(result.value)


def load(fp: IO[str], **kwargs: Any) -> PyValue:
    """
    Parses a JSON-subset document from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


def clean_all(
    source: str | IO[str],
    *,
    tab_width: int = DEFAULT_TAB_WIDTH,
    track_positions: bool = True,
) -> CleanResult:
    """Strips whitespace and comments, keeping quoted strings verbatim."""
    scanner = Scanner(source, tab_width)
    return Cleaner(scanner, track_positions).run()


__all__ = [
    "DEFAULT_TAB_WIDTH",
    "NULL",
    "CaptureMode",
    "CleanResult",
    "Cleaner",
    "DumpConfig",
    "FailedExpectation",
    "HotPathStats",
    "JsonArray",
    "JsonBool",
    "JsonFloat",
    "JsonInt",
    "JsonNull",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "Outcome",
    "ParseConfig",
    "ParseFault",
    "ParseResult",
    "ParseStatus",
    "PositionMap",
    "PyValue",
    "Scanner",
    "SourceRef",
    "UnrecognizedScalar",
    "Value",
    "clean_all",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "from_python",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "to_python",
]
