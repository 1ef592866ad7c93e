"""Exception classes for Culebra.

Provides standardized exceptions for error handling throughout Culebra.
Every failure propagates to the caller immediately; there is no partial
output and no recovery inside the converter.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from culebra.location import SourceLocation


class CulebraError(Exception):
    """Base exception for all Culebra errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(CulebraError):
    """Error during JavaScript parsing.

    Raised when the parser rejects the source text.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class MalformedNode(CulebraError):
    """A tree node without a ``type`` discriminant reached the converter.

    Indicates a contract violation between the parser and the printer.
    Fatal, never recovered.
    """

    def __init__(self, message: str, node: Any = None) -> None:
        self.node = node
        super().__init__(message)


class UnsupportedConstruct(CulebraError):
    """A well-formed node whose kind has no rendering rule.

    Also raised for literals and operators outside the portable subset
    when strict conversion is enabled.
    """

    def __init__(
        self,
        kind: str,
        *,
        known: Iterable[str] = (),
        location: SourceLocation | None = None,
        detail: str | None = None,
    ) -> None:
        """Initialize unsupported construct error.

        Args:
            kind: Node kind (ESTree ``type``) that could not be handled
            known: Kinds that do have a rule, listed in the message
            location: Position of the offending node (optional)
            detail: Extra description, e.g. the offending literal text
        """
        self.kind = kind
        self.known = tuple(sorted(known))
        self.location = location
        self.detail = detail

        message = f"Unsupported construct {kind!r}"
        if detail:
            message += f": {detail}"
        if location is not None and location.lineno:
            message += f" at {location}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)
