"""
Scanner primitive tests.

Validates position tracking, lookahead, expectations and every consumption
primitive, including how each behaves when the source runs out.
"""

from io import StringIO

import pytest

from nparser import CaptureMode
from nparser import FailedExpectation
from nparser import Scanner


def _primed(source: str, tab_width: int = 4) -> Scanner:
    scanner = Scanner(source, tab_width)
    scanner.advance()
    return scanner


def _positions(scanner: Scanner) -> list[tuple[str, int, int]]:
    seen = []
    while scanner.advance():
        seen.append((scanner.current, scanner.line, scanner.column))
    return seen


def test_line_and_column_tracking() -> None:
    """
    Validates newlines bump the line and reset the column.
    """
    assert _positions(Scanner("ab\ncd")) == [
        ("a", 1, 1),
        ("b", 1, 2),
        ("\n", 2, 0),
        ("c", 2, 1),
        ("d", 2, 2),
    ]


def test_crlf_counts_one_line() -> None:
    """
    Validates a carriage return resets the column without a new line.
    """
    assert _positions(Scanner("a\r\nb")) == [
        ("a", 1, 1),
        ("\r", 1, 0),
        ("\n", 2, 0),
        ("b", 2, 1),
    ]


@pytest.mark.parametrize(
    "source,tab_width,columns",
    [
        ("a\tb", 4, [1, 4, 5]),
        ("abcd\tx", 4, [1, 2, 3, 4, 8, 9]),
        ("\t\tx", 8, [8, 16, 17]),
        ("a\tb", 0, [1, 1, 2]),
        ("a\tb", -3, [1, 1, 2]),
    ],
)
def test_tab_expansion(source: str, tab_width: int, columns: list[int]) -> None:
    """
    Validates tabs advance to the next multiple of the tab width.

    A tab width of zero or less leaves the column unchanged on tabs.
    """
    seen = _positions(Scanner(source, tab_width))
    assert [column for _, _, column in seen] == columns


def test_end_of_input_is_sticky() -> None:
    """
    Validates an exhausted scanner keeps reporting end of input.
    """
    scanner = Scanner("a")

    assert scanner.advance()
    assert scanner.index == 1
    assert not scanner.at_end

    assert not scanner.advance()
    assert scanner.at_end
    assert scanner.current == ""
    assert scanner.describe_current() == "end of input"

    assert not scanner.advance()
    assert scanner.index == 1
    assert scanner.peek() == ""


def test_peek_does_not_move() -> None:
    """
    Validates peek looks one character ahead without consuming it.
    """
    scanner = _primed("ab")

    assert scanner.peek() == "b"
    assert scanner.peek() == "b"
    assert (scanner.current, scanner.column, scanner.index) == ("a", 1, 1)

    assert scanner.advance()
    assert scanner.current == "b"
    assert scanner.peek() == ""
    assert not scanner.advance()


def test_stream_source() -> None:
    """
    Validates any object with read() can be scanned.
    """
    scanner = Scanner(StringIO("xy"))

    assert _positions(scanner) == [("x", 1, 1), ("y", 1, 2)]


def test_rejects_unreadable_source() -> None:
    """
    Validates the source must be text or a readable stream.
    """
    with pytest.raises(TypeError):
        Scanner(42)  # type: ignore[arg-type]


def test_expect() -> None:
    """
    Validates expect passes on a member and fails with the position.
    """
    scanner = _primed("\n  x")
    scanner.consume_whitespace()
    scanner.expect("xyz")

    with pytest.raises(FailedExpectation) as exc_info:
        scanner.expect("{[")

    assert (exc_info.value.line, exc_info.value.column) == (2, 3)
    assert exc_info.value.diagnostic().startswith(
        "FailedExpectation line:2 col:3 msg:"
    )


def test_expect_at_end_of_input() -> None:
    """
    Validates expect never matches once the source is exhausted.
    """
    scanner = _primed("")

    with pytest.raises(FailedExpectation, match="end of input"):
        scanner.expect("}")


def test_consume_until_char() -> None:
    """
    Validates capture stops before the delimiter and steps over it.
    """
    scanner = _primed("abc,def")

    assert scanner.consume_until_char(",;")
    assert scanner.capture == "abc"
    assert scanner.current == "d"


def test_consume_until_char_skip_mode() -> None:
    """
    Validates skip mode discards what it passes.
    """
    scanner = _primed("abc;def")

    assert scanner.consume_until_char(",;", CaptureMode.SKIP)
    assert scanner.capture == ""
    assert scanner.current == "d"


def test_consume_until_char_keeps_delimiter() -> None:
    """
    Validates the delimiter can be left at the cursor.
    """
    scanner = _primed("42]")

    assert scanner.consume_until_char(",]", skip_delimiter=False)
    assert scanner.capture == "42"
    assert scanner.current == "]"


def test_consume_until_char_runs_out() -> None:
    """
    Validates a missing delimiter reports end of input.
    """
    scanner = _primed("abc")

    assert not scanner.consume_until_char(",")
    assert scanner.at_end


@pytest.mark.parametrize(
    "source,needle,captured,after",
    [
        ("hello*/world", "*/", "hello", "w"),
        ("a**/b", "*/", "a*", "b"),
        ("line one\nnext", "\n", "line one", "n"),
        ("xxabcabd!", "abd", "xxabc", "!"),
    ],
)
def test_consume_until_string(
    source: str, needle: str, captured: str, after: str
) -> None:
    """
    Validates the rolling match stops just past the needle.
    """
    scanner = _primed(source)

    assert scanner.consume_until_string(needle)
    assert scanner.capture == captured
    assert scanner.current == after


def test_consume_until_string_runs_out() -> None:
    """
    Validates a missing needle reports end of input.
    """
    scanner = _primed("no terminator *")

    assert not scanner.consume_until_string("*/", CaptureMode.SKIP)
    assert scanner.at_end


def test_consume_until_string_rejects_empty_needle() -> None:
    with pytest.raises(ValueError):
        _primed("abc").consume_until_string("")


def test_quoted_string_escapes() -> None:
    """
    Validates escapes are captured verbatim and do not end the string.
    """
    source = r'"a\"b\\c" tail'

    scanner = _primed(source)
    assert scanner.consume_quoted_string()
    assert scanner.capture == r"a\"b\\c"
    assert scanner.current == " "

    scanner = _primed(source)
    assert scanner.consume_quoted_string(include_quotes=True)
    assert scanner.capture == r'"a\"b\\c"'


def test_quoted_string_escaped_backslash_before_quote() -> None:
    """
    Validates an escaped backslash does not protect the closing quote.
    """
    scanner = _primed(r'"a\\" rest')

    assert scanner.consume_quoted_string()
    assert scanner.capture == r"a\\"
    assert scanner.current == " "


def test_quoted_string_requires_quote() -> None:
    """
    Validates nothing is consumed when the cursor is not on a quote.
    """
    scanner = _primed("abc")

    assert not scanner.consume_quoted_string()
    assert scanner.current == "a"


def test_quoted_string_unterminated() -> None:
    """
    Validates an unclosed string reports end of input.
    """
    scanner = _primed('"abc')

    assert not scanner.consume_quoted_string()
    assert scanner.at_end


def test_consume_whitespace() -> None:
    """
    Validates ASCII whitespace is skipped and reported.
    """
    scanner = _primed(" \t\r\n\v\f x")

    assert scanner.consume_whitespace()
    assert scanner.current == "x"
    assert not scanner.consume_whitespace()


def test_initial_nul_is_whitespace() -> None:
    """
    Validates the unprimed cursor is skipped like whitespace.
    """
    scanner = Scanner("x")

    assert scanner.current == "\0"
    assert scanner.consume_whitespace()
    assert scanner.current == "x"


def test_block_comment() -> None:
    """
    Validates a block comment is skipped or captured.
    """
    scanner = _primed("/* note */x")
    assert scanner.consume_line_or_block_comment()
    assert scanner.current == "x"

    scanner = _primed("/* note */x")
    assert scanner.consume_line_or_block_comment(CaptureMode.CAPTURE)
    assert scanner.capture == " note "


def test_block_comment_opener_does_not_close_itself() -> None:
    """
    Validates `/*/` starts a comment that `*/` later closes.
    """
    scanner = _primed("/*/ still comment */x")

    assert scanner.consume_line_or_block_comment()
    assert scanner.current == "x"


def test_line_comment() -> None:
    """
    Validates a line comment runs through the end of the line.
    """
    scanner = _primed("// note\nx")

    assert scanner.consume_line_or_block_comment(CaptureMode.CAPTURE)
    assert scanner.capture == " note"
    assert (scanner.current, scanner.line) == ("x", 2)


def test_line_comment_at_end_of_input() -> None:
    scanner = _primed("// no newline")

    assert scanner.consume_line_or_block_comment()
    assert scanner.at_end


def test_lone_slash_is_not_a_comment() -> None:
    """
    Validates division is left for the caller.
    """
    scanner = _primed("/ 2")

    assert not scanner.consume_line_or_block_comment()
    assert scanner.current == "/"
    assert scanner.index == 1


def test_clean_mixed_runs() -> None:
    """
    Validates any interleaving of whitespace and comments is skipped.
    """
    scanner = _primed(" /* a */ // b\n  /*c*//*d*/\t x")

    assert scanner.clean()
    assert scanner.current == "x"
    assert not scanner.clean()


def test_clean_to_end_of_input() -> None:
    scanner = _primed("  /* trailing */  ")

    assert scanner.clean()
    assert scanner.at_end
