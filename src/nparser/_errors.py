"""Fault types raised while scanning and parsing."""

from __future__ import annotations


class ParseFault(ValueError):
    """
    Handles fatal scanning and parsing failures with source position.

    Carries the 1-based line and the column of the character the scanner
    was positioned on when the failure was detected.
    """

    kind = "ParseFault"

    def __init__(self, msg: str, line: int = -1, column: int = -1) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")

        self.msg = msg
        self.line = line
        self.column = column

        super().__init__(self.diagnostic())

    def diagnostic(self) -> str:
        """Formats the fault as a single error-log entry."""
        return f"{self.kind} line:{self.line} col:{self.column} msg:{self.msg}"


class FailedExpectation(ParseFault):
    """Required syntax is missing or the wrong character was found."""

    kind = "FailedExpectation"


class UnrecognizedScalar(FailedExpectation):
    """A bare token is neither a keyword nor a number (strict mode only)."""

    kind = "UnrecognizedScalar"
