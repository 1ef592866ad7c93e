"""Tests for the literal and operator forms shared with Python."""

import pytest

from culebra.portability import (
    PORTABLE_ASSIGNMENT_OPERATORS,
    PORTABLE_BINARY_OPERATORS,
    is_portable_literal,
    is_portable_operator,
)


class TestPortableLiterals:
    """The accepted literal grammar is an explicit boundary."""

    @pytest.mark.parametrize(
        "raw",
        [
            "0",
            "42",
            "3.14",
            "1.",
            ".5",
            "1e10",
            "2.5E-3",
            "0xff",
            "0XAB",
            "0o17",
            "0b1010",
            "'hi'",
            '"hi"',
            "''",
            r"'it\'s'",
            r'"tab\tnew\nline"',
            r"'\x41é'",
            r"'\0'",
        ],
    )
    def test_portable(self, raw: str) -> None:
        assert is_portable_literal(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "true",
            "false",
            "null",
            "undefined",
            "017",
            "00",
            "1_000",
            "/ab+c/g",
            "10n",
            r"'\u{1F600}'",
            r"'\01'",
            r"'\q'",
            "'unterminated",
            "'a' + 'b'",
        ],
    )
    def test_not_portable(self, raw: str) -> None:
        assert not is_portable_literal(raw)


class TestPortableOperators:
    """Operators forwarded verbatim only when Python spells them alike."""

    @pytest.mark.parametrize("op", ["+", "-", "*", "/", "%", "**", "<", ">=", "==", "!=", "<<", "^"])
    def test_binary_portable(self, op: str) -> None:
        assert is_portable_operator(op)

    @pytest.mark.parametrize("op", ["=", "+=", "-=", "**=", "|=", ">>="])
    def test_assignment_portable(self, op: str) -> None:
        assert is_portable_operator(op)

    @pytest.mark.parametrize(
        "op", ["===", "!==", ">>>", "instanceof", "in", ">>>=", "&&=", "||=", "??=", "&&", "||"]
    )
    def test_not_portable(self, op: str) -> None:
        assert not is_portable_operator(op)

    def test_sets_are_disjoint(self) -> None:
        assert not PORTABLE_BINARY_OPERATORS & PORTABLE_ASSIGNMENT_OPERATORS
