"""
Recursive-descent grammar for the JSON subset.

Objects, arrays, quoted strings, integers, floats, booleans and null, with
C-style comments allowed anywhere whitespace is. The parser owns one Scanner
and every production borrows it; productions report whether their closing
delimiter was reached or the input ran out first, and raise ParseFault
subclasses for malformed input.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from functools import partial

from ._config import ParseConfig
from ._errors import FailedExpectation
from ._errors import ParseFault
from ._errors import UnrecognizedScalar
from ._profile import ProfileContext
from ._scanner import Scanner
from ._values import NULL
from ._values import Container
from ._values import JsonArray
from ._values import JsonBool
from ._values import JsonFloat
from ._values import JsonInt
from ._values import JsonObject
from ._values import JsonString
from ._values import Scalar
from ._values import Value

logger = logging.getLogger(__name__)

# Characters that end a bare (unquoted) scalar token
SCALAR_DELIMITERS = ",}] \t\r\n\v\f"

NUMBER_CHARS = frozenset("0123456789.-+eE")


class Outcome(Enum):
    """How a production finished."""

    CLOSED = "closed"
    END_OF_INPUT = "end_of_input"


class ParseStatus(Enum):
    """
    Overall result of a parse attempt.

    COMPLETE: the root container was closed.
    END_OF_INPUT: the source ran out first; the value holds whatever was
    committed up to that point.
    FAILED: a fault aborted the parse and no value is returned.
    """

    COMPLETE = "complete"
    END_OF_INPUT = "end_of_input"
    FAILED = "failed"


@dataclass(frozen=True)
class ParseResult:
    """Value tree, status and error log of one parse attempt."""

    value: Container | None
    status: ParseStatus
    errors: tuple[str, ...] = ()
    fault: ParseFault | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.status is not ParseStatus.FAILED


class JsonParser:
    """
    Recursive-descent parser for the JSON subset.

    Bare tokens that are neither keywords nor numbers become null unless
    strict_scalars is set. Trailing commas before a closing bracket are
    accepted unless allow_trailing_commas is cleared, which also rejects
    an empty element or member value such as `[1,,2]` or `{"a":,}`.
    """

    def __init__(
        self, scanner: Scanner, config: ParseConfig | None = None
    ) -> None:
        self.scanner = scanner
        self.config = config or ParseConfig()
        self.errors: list[str] = []

    def parse(self) -> ParseResult:
        """Parses one top-level object or array."""
        scanner = self.scanner
        root: Container | None = None

        try:
            scanner.clean()
            if scanner.at_end:
                logger.debug("No input to parse")
                return ParseResult(None, ParseStatus.END_OF_INPUT)

            match scanner.current:
                case "{":
                    root = JsonObject()
                    scanner.advance()
                    outcome = self._parse_object(root)
                case "[":
                    root = JsonArray()
                    scanner.advance()
                    outcome = self._parse_array(root)
                case _:
                    raise FailedExpectation(
                        "Bad top level type, expecting '{' or '[' but found "
                        f"{scanner.describe_current()}",
                        scanner.line,
                        scanner.column,
                    )
        except ParseFault as fault:
            diagnostic = fault.diagnostic()
            logger.warning("Parse failed: %s", diagnostic)
            self.errors.append(diagnostic)
            return ParseResult(
                None, ParseStatus.FAILED, tuple(self.errors), fault
            )

        if outcome is Outcome.CLOSED:
            status = ParseStatus.COMPLETE
        else:
            status = ParseStatus.END_OF_INPUT
            logger.debug(
                "Input ended inside an open structure at line %d",
                scanner.line,
            )
        return ParseResult(root, status)

    def _parse_value(self, commit: Callable[[Value], None]) -> Outcome:
        """
        Parses the value at the cursor and hands it to commit.

        Containers are committed before they are filled so that a truncated
        document keeps the part already read.
        """
        scanner = self.scanner

        match scanner.current:
            case "{":
                obj = JsonObject()
                commit(obj)
                scanner.advance()
                return self._parse_object(obj)
            case "[":
                arr = JsonArray()
                commit(arr)
                scanner.advance()
                return self._parse_array(arr)
            case _:
                value = self._parse_scalar()
                if value is None:
                    return Outcome.END_OF_INPUT
                commit(value)
                return Outcome.CLOSED

    def _parse_object(self, result: JsonObject) -> Outcome:
        """Parses members up to and including the closing brace."""
        scanner = self.scanner

        with ProfileContext("parse_object"):
            while scanner.current != "}":
                scanner.clean()
                if scanner.at_end:
                    return Outcome.END_OF_INPUT

                scanner.expect(
                    '"}',
                    "Expecting property name enclosed in double quotes, "
                    f"found {scanner.describe_current()}",
                )
                if scanner.current == '"':
                    if self._parse_member(result) is Outcome.END_OF_INPUT:
                        return Outcome.END_OF_INPUT

            scanner.expect("}")
            scanner.advance()
            scanner.clean()
            return Outcome.CLOSED

    def _parse_member(self, result: JsonObject) -> Outcome:
        """Parses `"key": value` and an optional trailing comma."""
        scanner = self.scanner

        if not scanner.consume_quoted_string():
            return Outcome.END_OF_INPUT
        key = scanner.capture

        scanner.clean()
        if scanner.at_end:
            return Outcome.END_OF_INPUT
        scanner.expect(
            ":", f"Expecting ':' delimiter, found {scanner.describe_current()}"
        )
        scanner.advance()
        scanner.clean()
        if scanner.at_end:
            return Outcome.END_OF_INPUT

        store = partial(result.__setitem__, key)
        if self._parse_value(store) is Outcome.END_OF_INPUT:
            return Outcome.END_OF_INPUT

        scanner.clean()
        if scanner.at_end:
            return Outcome.END_OF_INPUT
        self._skip_comma("}")
        return Outcome.CLOSED

    def _parse_array(self, result: JsonArray) -> Outcome:
        """Parses elements up to and including the closing bracket."""
        scanner = self.scanner

        with ProfileContext("parse_array"):
            while scanner.current != "]":
                scanner.clean()
                if scanner.at_end:
                    return Outcome.END_OF_INPUT
                if scanner.current == "]":
                    break
                if scanner.current == "}":
                    raise FailedExpectation(
                        "Unexpected '}' inside array",
                        scanner.line,
                        scanner.column,
                    )

                if self._parse_value(result.append) is Outcome.END_OF_INPUT:
                    return Outcome.END_OF_INPUT

                scanner.clean()
                if scanner.at_end:
                    return Outcome.END_OF_INPUT
                self._skip_comma("]")
                scanner.clean()
                if scanner.at_end:
                    return Outcome.END_OF_INPUT

            scanner.expect("]")
            scanner.advance()
            scanner.clean()
            return Outcome.CLOSED

    def _skip_comma(self, closer: str) -> None:
        """Steps over one comma, rejecting it before closer when configured."""
        scanner = self.scanner
        if scanner.current != ",":
            return

        line, column = scanner.line, scanner.column
        scanner.advance()

        if not self.config.allow_trailing_commas:
            scanner.clean()
            if not scanner.at_end and scanner.current == closer:
                container = "object" if closer == "}" else "array"
                raise FailedExpectation(
                    f"Illegal trailing comma before end of {container}",
                    line,
                    column,
                )

    def _parse_scalar(self) -> Scalar | None:
        """
        Parses a quoted string or a bare token.

        The character that ends a bare token is left at the cursor. Returns
        None if the input ran out before the scalar was complete.
        """
        scanner = self.scanner

        with ProfileContext("parse_scalar"):
            scanner.clean()
            scanner.clear_capture()
            line, column = scanner.line, scanner.column

            if scanner.current == '"':
                if not scanner.consume_quoted_string():
                    return None
                return JsonString(scanner.capture)

            if not scanner.consume_until_char(
                SCALAR_DELIMITERS, skip_delimiter=False
            ):
                return None
            if not scanner.capture and not self.config.allow_trailing_commas:
                raise FailedExpectation(
                    f"Expecting a value, found {scanner.describe_current()}",
                    line,
                    column,
                )
            return self._classify(scanner.capture, line, column)

    def _classify(self, token: str, line: int, column: int) -> Scalar:
        """Turns a bare token into a keyword or number scalar."""
        match token:
            case "true":
                return JsonBool(True)
            case "false":
                return JsonBool(False)
            case "null":
                return NULL

        if token and all(c in NUMBER_CHARS for c in token):
            try:
                return JsonInt(int(token))
            except ValueError:
                pass
            try:
                number = float(token)
            except ValueError:
                pass
            else:
                if math.isfinite(number):
                    return JsonFloat(number)

        if self.config.strict_scalars:
            raise UnrecognizedScalar(
                f"Unrecognized scalar {token!r}", line, column
            )

        logger.debug(
            "Unrecognized scalar %r at line %d col %d read as null",
            token,
            line,
            column,
        )
        return NULL
