"""Mapping from cleaned-text offsets back to source positions."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class SourceRef:
    """Where a retained unit of cleaned text came from."""

    offset: int
    line: int
    column: int


class PositionMap:
    """
    Resolves cleaned-text offsets to the source position of their unit.

    A unit is a single retained character or a whole quoted string; every
    offset inside a string resolves to the string's opening quote.
    """

    def __init__(
        self, positions: Sequence[SourceRef], text_length: int | None = None
    ) -> None:
        """
        Initialize position map from the cleaner's references.

        Args:
            positions: References in ascending offset order
            text_length: Length of the cleaned text (default: one past the
                last unit's offset)
        """
        self.positions: Final = tuple(positions)
        self._offsets: Final = [ref.offset for ref in self.positions]
        if text_length is None:
            text_length = self._offsets[-1] + 1 if self._offsets else 0
        self.text_length: Final = text_length

    def __len__(self) -> int:
        return len(self.positions)

    def lookup(self, offset: int) -> SourceRef:
        """
        Finds the reference for an offset in the cleaned text.

        Args:
            offset: Character offset in the cleaned text

        Returns:
            Reference of the unit that produced that character

        Raises:
            IndexError: offset is outside the cleaned text
        """
        if not 0 <= offset < self.text_length or not self._offsets:
            raise IndexError(f"offset {offset} outside cleaned text")

        return self.positions[bisect_right(self._offsets, offset) - 1]

    def line_column(self, offset: int) -> tuple[int, int]:
        """Returns the source (line, column) for a cleaned-text offset."""
        ref = self.lookup(offset)
        return ref.line, ref.column
