"""Immutable indentation context for the Python renderer.

A Margin is the left-hand prefix of every line emitted at one nesting depth.
Rules never modify a margin: they pass ``margin.enter()`` to the children
that sit inside a block and keep using their own value afterwards, so the
enclosing indentation is restored on every exit path, including exceptions.

Example:
    >>> m = Margin()
    >>> m.enter().text
    '  '
    >>> m.enter().enter().leave() == m.enter()
    True
    >>> m.next
    '  '

Thread Safety:
Margin is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_INDENT_UNIT = "  "


@dataclass(frozen=True, slots=True)
class Margin:
    """Indentation at a given depth.

    Attributes:
        unit: Text of one indentation level
        depth: Number of enclosing blocks

    """

    unit: str = DEFAULT_INDENT_UNIT
    depth: int = 0

    def __post_init__(self) -> None:
        if self.depth < 0:
            msg = f"Margin depth cannot be negative, got {self.depth}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.text

    @property
    def text(self) -> str:
        """Current left margin."""
        return self.unit * self.depth

    @property
    def next(self) -> str:
        """Margin one level deeper, without producing a new context."""
        return self.unit * (self.depth + 1)

    def enter(self) -> Margin:
        """Margin for lines inside a block opened at this depth."""
        return Margin(self.unit, self.depth + 1)

    def leave(self) -> Margin:
        """Margin of the enclosing block."""
        if self.depth == 0:
            msg = "Cannot leave the top-level margin"
            raise ValueError(msg)
        return Margin(self.unit, self.depth - 1)

    def indent(self, line: str) -> str:
        """Prefix a single line with the current margin."""
        return f"{self.text}{line}"
