"""Parsing configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TAB_WIDTH = 4


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures scanning and parsing behavior with immutable settings.

    tab_width controls column advancement on tab characters; zero or a
    negative value leaves the column unchanged on tabs. strict_scalars turns
    bare tokens that are neither keywords nor numbers into faults instead of
    null. allow_trailing_commas accepts `[1,]` and `{"a":1,}`.
    """

    tab_width: int = DEFAULT_TAB_WIDTH
    strict_scalars: bool = False
    allow_trailing_commas: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.tab_width, int) or isinstance(
            self.tab_width, bool
        ):
            raise TypeError("tab_width must be an integer")
        if not isinstance(self.strict_scalars, bool):
            raise TypeError("strict_scalars must be a boolean")
        if not isinstance(self.allow_trailing_commas, bool):
            raise TypeError("allow_trailing_commas must be a boolean")
