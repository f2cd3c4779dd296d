"""
Whitespace and comment stripper built on the scanner.

Quoted strings are copied through untouched and a `/` that does not open
a comment is kept, so `5 / 2 /* half */` cleans to `5/2`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ._errors import ParseFault
from ._position_map import PositionMap
from ._position_map import SourceRef
from ._profile import ProfileContext
from ._scanner import WHITESPACE
from ._scanner import Scanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanResult:
    """Cleaned text, its source references and any error."""

    text: str
    positions: tuple[SourceRef, ...] = ()
    errors: tuple[str, ...] = ()

    def position_map(self) -> PositionMap:
        return PositionMap(self.positions, len(self.text))


class Cleaner:
    """
    Strips whitespace and comments from whatever the scanner reads.

    Each retained unit, either a single character or a whole quoted string,
    is recorded with the line and column of its first source character when
    track_positions is set.
    """

    def __init__(self, scanner: Scanner, track_positions: bool = True) -> None:
        self.scanner = scanner
        self.track_positions = track_positions
        self._output: list[str] = []
        self._length = 0
        self._positions: list[SourceRef] = []
        self._errors: list[str] = []

    def _retain(self, text: str, line: int, column: int) -> None:
        if self.track_positions:
            self._positions.append(SourceRef(self._length, line, column))
        self._output.append(text)
        self._length += len(text)

    def run(self) -> CleanResult:
        scanner = self.scanner

        with ProfileContext("clean_all"):
            try:
                scanner.advance()
                while not scanner.at_end:
                    char = scanner.current
                    line, column = scanner.line, scanner.column

                    if char == "/":
                        if not scanner.consume_line_or_block_comment():
                            self._retain(char, line, column)
                            scanner.advance()
                    elif char == '"':
                        scanner.consume_quoted_string(include_quotes=True)
                        self._retain(scanner.capture, line, column)
                    elif char in WHITESPACE:
                        scanner.advance()
                    else:
                        self._retain(char, line, column)
                        scanner.advance()
            except ParseFault as fault:
                logger.warning("Clean failed: %s", fault.diagnostic())
                self._errors.append(fault.diagnostic())

        return CleanResult(
            "".join(self._output),
            tuple(self._positions),
            tuple(self._errors),
        )
