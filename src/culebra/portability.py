"""Literal and operator forms shared by JavaScript and Python.

The renderer forwards literal source text and operators verbatim. That is
only correct when both languages spell the construct the same way, so the
accepted grammar is spelled out here and checked for every Literal and
operator the renderer emits. Forms outside it are either logged and passed
through, or rejected in strict mode.

Nothing here translates: ``true``, ``null`` or ``===`` are reported, never
rewritten.

Example:
    >>> is_portable_literal("42")
    True
    >>> is_portable_literal("true")
    False
    >>> is_portable_operator("===")
    False

"""

import re

# 0, 7, 1234 (no leading zeros: 017 is a legacy octal in JS, a SyntaxError in Python)
_DECIMAL_INT = r"(?:0|[1-9][0-9]*)"
_EXPONENT = r"(?:[eE][+-]?[0-9]+)"
_DECIMAL = (
    rf"(?:{_DECIMAL_INT}\.[0-9]*{_EXPONENT}?"
    rf"|\.[0-9]+{_EXPONENT}?"
    rf"|{_DECIMAL_INT}{_EXPONENT}?)"
)
_RADIX_INT = r"(?:0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+)"

_NUMBER_RE = re.compile(rf"(?:{_RADIX_INT}|{_DECIMAL})")

# Escapes both languages read identically. Excluded: \u{...} code points,
# \0 followed by a digit, unknown escapes such as "\q", and line continuations.
_STRING_ESCAPE = r"""\\(?:[\\'"bfnrtv]|0(?![0-9])|x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4})"""
_STRING_RE = re.compile(
    rf"""(?:"(?:[^"\\\n\r]|{_STRING_ESCAPE})*"|'(?:[^'\\\n\r]|{_STRING_ESCAPE})*')"""
)

# Binary operators spelled and evaluated alike (for numbers and strings)
PORTABLE_BINARY_OPERATORS: frozenset[str] = frozenset(
    {
        "+",
        "-",
        "*",
        "/",
        "%",
        "**",
        "<",
        ">",
        "<=",
        ">=",
        "==",
        "!=",
        "<<",
        ">>",
        "&",
        "|",
        "^",
    }
)

PORTABLE_ASSIGNMENT_OPERATORS: frozenset[str] = frozenset(
    {
        "=",
        "+=",
        "-=",
        "*=",
        "/=",
        "%=",
        "**=",
        "<<=",
        ">>=",
        "&=",
        "|=",
        "^=",
    }
)

PORTABLE_OPERATORS: frozenset[str] = PORTABLE_BINARY_OPERATORS | PORTABLE_ASSIGNMENT_OPERATORS


def is_portable_literal(raw: str) -> bool:
    """Return True if ``raw`` reads as the same value in Python.

    Args:
        raw: Literal text exactly as written in the JavaScript source

    """
    return bool(_NUMBER_RE.fullmatch(raw) or _STRING_RE.fullmatch(raw))


def is_portable_operator(operator: str) -> bool:
    """Return True if ``operator`` can be emitted unchanged."""
    return operator in PORTABLE_OPERATORS


__all__ = [
    "PORTABLE_ASSIGNMENT_OPERATORS",
    "PORTABLE_BINARY_OPERATORS",
    "PORTABLE_OPERATORS",
    "is_portable_literal",
    "is_portable_operator",
]
