"""
Character-at-a-time scanner with position tracking.

The scanner owns a single read cursor over a text source and exposes the
consumption primitives every grammar is built from. End of input is an
explicit state: advance() returns False and the scanner stays exhausted.
"""

from __future__ import annotations

import io
from collections import deque
from enum import Enum
from typing import IO

from ._config import DEFAULT_TAB_WIDTH
from ._errors import FailedExpectation

# Current character once the source is exhausted
EOF = ""
NUL = "\0"

WHITESPACE = " \t\n\r\v\f\0"
LINE_END = "\n"
BLOCK_COMMENT_END = "*/"


class CaptureMode(Enum):
    """Whether a primitive keeps what it consumes."""

    SKIP = "skip"
    CAPTURE = "capture"


class Scanner:
    """
    Reads a text source one character at a time.

    Line numbers are 1-based. The column starts at 0 on each line and is
    bumped as each character is read, so the first character of a line sits
    at column 1. Before the first advance() the current character is NUL,
    which consume_whitespace() skips, so a leading clean() primes the cursor.
    """

    def __init__(
        self, source: str | IO[str], tab_width: int = DEFAULT_TAB_WIDTH
    ) -> None:
        if isinstance(source, str):
            source = io.StringIO(source)
        elif not hasattr(source, "read"):
            raise TypeError("source must be str or have a read() method")

        self.tab_width = tab_width
        self._reader = source
        self._lookahead: str | None = None
        self._current = NUL
        self._line = 1
        self._column = 0
        self._index = 0
        self._exhausted = False
        self._capture: list[str] = []

    @property
    def current(self) -> str:
        return self._current

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def index(self) -> int:
        """Number of characters read from the source so far."""
        return self._index

    @property
    def at_end(self) -> bool:
        return self._exhausted

    @property
    def capture(self) -> str:
        """Text accumulated by the most recent primitive."""
        return "".join(self._capture)

    def clear_capture(self) -> None:
        self._capture.clear()

    def capture_current(self) -> None:
        self._capture.append(self._current)

    def describe_current(self) -> str:
        return "end of input" if self._exhausted else repr(self._current)

    def _read(self) -> str:
        if self._lookahead is not None:
            char, self._lookahead = self._lookahead, None
            return char
        return self._reader.read(1)

    def advance(self) -> bool:
        """
        Moves to the next character and updates the position.

        Returns False once the source is exhausted; the current character is
        then EOF and every later call returns False as well.
        """
        if self._exhausted:
            return False

        char = self._read()
        if char == EOF:
            self._exhausted = True
            self._current = EOF
            return False

        self._current = char
        self._index += 1

        if char == "\n":
            self._line += 1
            self._column = 0
        elif char == "\r":
            self._column = 0
        elif char == "\t":
            if self.tab_width > 0:
                self._column = (self._column // self.tab_width + 1) * (
                    self.tab_width
                )
        else:
            self._column += 1

        return True

    def peek(self) -> str:
        """Returns the next character without consuming it, EOF at the end."""
        if self._exhausted:
            return EOF
        if self._lookahead is None:
            self._lookahead = self._reader.read(1)
        return self._lookahead

    def expect(self, charset: str, msg: str = "") -> None:
        """Raises FailedExpectation unless the current character matches."""
        if self._exhausted or self._current not in charset:
            raise FailedExpectation(
                msg
                or f"Expecting one of {charset!r}, "
                f"found {self.describe_current()}",
                self._line,
                self._column,
            )

    def consume_until_char(
        self,
        delimiters: str,
        mode: CaptureMode = CaptureMode.CAPTURE,
        *,
        skip_delimiter: bool = True,
    ) -> bool:
        """
        Consumes up to, but never including, one of the delimiters.

        The cursor is left after the delimiter, or on it when skip_delimiter
        is false. Returns False if the source ran out first.
        """
        self.clear_capture()

        while not self._exhausted and self._current not in delimiters:
            if mode is CaptureMode.CAPTURE:
                self.capture_current()
            self.advance()

        if self._exhausted:
            return False

        if skip_delimiter:
            self.advance()
        return True

    def consume_until_string(
        self, needle: str, mode: CaptureMode = CaptureMode.CAPTURE
    ) -> bool:
        """
        Consumes through the first occurrence of needle.

        Captures everything before the needle and leaves the cursor just past
        it. Returns False if the source ran out first.
        """
        if not needle:
            raise ValueError("needle must not be empty")

        self.clear_capture()
        recent: deque[str] = deque(maxlen=len(needle))

        while not self._exhausted:
            recent.append(self._current)
            if mode is CaptureMode.CAPTURE:
                self.capture_current()

            if "".join(recent) == needle:
                if mode is CaptureMode.CAPTURE:
                    del self._capture[-len(needle) :]
                self.advance()
                return True

            self.advance()

        return False

    def consume_quoted_string(self, include_quotes: bool = False) -> bool:
        """
        Captures a double-quoted string with its escapes left verbatim.

        A backslash protects the character after it, so `\\"` does not end
        the string. The cursor is left just past the closing quote. Returns
        False if the current character is not a quote or the source ran out
        before the string was closed.
        """
        self.clear_capture()

        if self._exhausted or self._current != '"':
            return False

        if include_quotes:
            self.capture_current()

        escaped = False
        while self.advance():
            char = self._current
            if escaped:
                self.capture_current()
                escaped = False
            elif char == "\\":
                self.capture_current()
                escaped = True
            elif char == '"':
                if include_quotes:
                    self.capture_current()
                self.advance()
                return True
            else:
                self.capture_current()

        return False

    def consume_whitespace(self) -> bool:
        """Skips whitespace and NUL. Returns True if anything was skipped."""
        self.clear_capture()
        skipped = False

        while not self._exhausted and self._current in WHITESPACE:
            skipped = True
            self.advance()

        return skipped

    def consume_line_or_block_comment(
        self, mode: CaptureMode = CaptureMode.SKIP
    ) -> bool:
        """
        Consumes a `/* ... */` or `// ...` comment starting at the cursor.

        A `/` not followed by `*` or `/` is left in place, since it is
        ordinary content such as division. Captures the comment body in
        capture mode. Returns True if a comment was consumed.
        """
        self.clear_capture()

        if self._exhausted or self._current != "/":
            return False

        match self.peek():
            case "*":
                terminator = BLOCK_COMMENT_END
            case "/":
                terminator = LINE_END
            case _:
                return False

        # Step over the opener so `/*/` does not close itself
        self.advance()
        self.advance()
        self.consume_until_string(terminator, mode)
        return True

    def clean(self) -> bool:
        """
        Skips any run of whitespace and comments, in any order.

        Returns True if anything was skipped.
        """
        skipped = False
        progressed = True

        while progressed and not self._exhausted:
            skipped_space = self.consume_whitespace()
            skipped_comment = self.consume_line_or_block_comment()
            progressed = skipped_space or skipped_comment
            skipped = skipped or progressed

        self.clear_capture()
        return skipped
