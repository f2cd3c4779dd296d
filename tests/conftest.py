"""
Pytest configuration and shared fixtures for nparser tests.

Provides immutable test data fixtures for the grammar: documents that parse,
documents that end early, and documents that must fail at a known position.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from nparser import ParseStatus


@dataclass(frozen=True)
class ParseCase:
    """
    Immutable container for a document that parses without error.

    Holds the input, the expected plain-Python rendering of the tree and the
    expected status.
    """

    description: str
    input_data: str
    expected_output: Any = None
    status: ParseStatus = ParseStatus.COMPLETE


@dataclass(frozen=True)
class FaultCase:
    """
    Immutable container for a document that must fail.

    Holds the input and the line and column the fault must report.
    """

    description: str
    input_data: str
    line: int
    column: int
    kind: str = "FailedExpectation"


@pytest.fixture
def subset_pass_cases() -> list[ParseCase]:
    """
    Provides documents inside the supported subset.

    Covers nesting, comments, trailing commas, duplicate keys and the
    verbatim handling of string escapes.
    """
    return [
        ParseCase(
            "mixed nested document",
            '{"x": [1, 2.5, "s", true, null], "y": {"z": 9}}',
            {"x": [1, 2.5, "s", True, None], "y": {"z": 9}},
        ),
        ParseCase("empty object", "{}", {}),
        ParseCase("empty array", "[]", []),
        ParseCase("blank object", "{ \n }", {}),
        ParseCase("blank array", "[ \t ]", []),
        ParseCase("object trailing comma", '{"a":1,}', {"a": 1}),
        ParseCase("array trailing comma", "[1,2,]", [1, 2]),
        ParseCase(
            "comments everywhere",
            '/* header */ { // first\n "a": /* inline */ 1,\n'
            ' "b": [ /* empty */ ] // last\n}',
            {"a": 1, "b": []},
        ),
        ParseCase(
            "deep nesting",
            '[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            [[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]],
        ),
        ParseCase(
            "escapes kept verbatim",
            r'{"quote": "a\"b", "slash": "c\\"}',
            {"quote": r"a\"b", "slash": "c\\\\"},
        ),
        ParseCase(
            "comment markers inside strings",
            '{"comment": "// /* not a comment */"}',
            {"comment": "// /* not a comment */"},
        ),
        ParseCase("duplicate key last wins", '{"a": 1, "a": 2}', {"a": 2}),
        ParseCase(
            "whitespace before comma",
            '{"a" : 1 , "b" : 2 }',
            {"a": 1, "b": 2},
        ),
        ParseCase(
            "windows line endings",
            '{\r\n  "a": [1,\r\n 2]\r\n}\r\n',
            {"a": [1, 2]},
        ),
        ParseCase("elements without commas", "[1 2 3]", [1, 2, 3]),
        ParseCase("text after the root", '{"a": 1} trailing', {"a": 1}),
        ParseCase(
            "objects inside arrays",
            '[{"id": 1}, {"id": 2, "tags": ["a", "b"]}]',
            [{"id": 1}, {"id": 2, "tags": ["a", "b"]}],
        ),
    ]


@pytest.fixture
def truncated_cases() -> list[ParseCase]:
    """
    Provides documents whose source runs out inside an open structure.

    These keep whatever was committed before the end and report no error.
    """
    return [
        ParseCase(
            "unclosed nested object",
            '{"a": {"b": 1',
            {"a": {}},
            ParseStatus.END_OF_INPUT,
        ),
        ParseCase(
            "unclosed array", "[1, 2", [1], ParseStatus.END_OF_INPUT
        ),
        ParseCase(
            "unclosed root after full member",
            '{"a": 1, "b": [1, 2, 3]',
            {"a": 1, "b": [1, 2, 3]},
            ParseStatus.END_OF_INPUT,
        ),
        ParseCase(
            "unterminated key",
            '{"a": 1, "b',
            {"a": 1},
            ParseStatus.END_OF_INPUT,
        ),
        ParseCase(
            "unterminated string value",
            '["done", "not done',
            ["done"],
            ParseStatus.END_OF_INPUT,
        ),
        ParseCase(
            "open brace only", "{", {}, ParseStatus.END_OF_INPUT
        ),
    ]


@pytest.fixture
def subset_fault_cases() -> list[FaultCase]:
    """
    Provides documents with a wrong delimiter at a known position.

    Columns count from 1 for the first character of a line.
    """
    return [
        FaultCase("missing colon", '{"a" 1}', 1, 6),
        FaultCase("unquoted key", '{"a": 1, b: 2}', 1, 10),
        FaultCase("equals instead of colon", '{\n  "a": 1,\n  "b" = 2\n}', 3, 7),
        FaultCase("string at top level", '"just a string"', 1, 1),
        FaultCase("number at top level", "  42", 1, 3),
        FaultCase("brace closes array", "[1, 2}", 1, 6),
        FaultCase("bracket closes object", '{"a": 1]', 1, 8),
        FaultCase("tab-expanded column", '{\t"a"\t1}', 1, 9),
    ]
