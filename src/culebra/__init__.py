"""
Culebra — JavaScript to Python source converter

Converts a subset of ECMAScript into equivalent Python source text: classes,
conditionals, counting loops rewritten to ``range()``, declarations, calls,
member access, arrays and arithmetic. JavaScript is parsed by esprima; the
result is rendered from a typed, immutable AST.

Quick Start:
    >>> from culebra import convert
    >>> print(convert("for (let i = 0; i < 3; i++) { console.log(i) }"))
    for i in range(0, 3):
      console.log(i)

    >>> # Or use the reusable Converter
    >>> from culebra import Converter, ConvertConfig
    >>> to_python = Converter(ConvertConfig(indent_unit="    "))
    >>> print(to_python("if (ready) { go() }"))
    if ready:
        go()

Already parsed trees (ESTree JSON from espree, acorn, esprima) can be
rendered with ``convert_tree``.

Installation:
    pip install culebra
"""

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from culebra.config import (
    ConvertConfig,
    convert_config_context,
    get_convert_config,
    reset_convert_config,
    set_convert_config,
)
from culebra.errors import CulebraError, MalformedNode, ParseError, UnsupportedConstruct
from culebra.location import SourceLocation
from culebra.margin import Margin
from culebra.nodes import (
    ArrayExpression,
    ArrayPattern,
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    ClassBody,
    ClassDeclaration,
    Expression,
    ExpressionStatement,
    ForStatement,
    Identifier,
    IfStatement,
    Literal,
    MemberExpression,
    Node,
    Pattern,
    Program,
    Statement,
    UpdateExpression,
    VariableDeclaration,
    VariableDeclarator,
)
from culebra.parser import parse as _parse
from culebra.portability import is_portable_literal, is_portable_operator
from culebra.renderers.python import PythonRenderer, is_counting_loop
from culebra.serialization import from_estree, from_json, to_dict, to_json
from culebra.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def _resolve_config(config: ConvertConfig | None, source_file: str | None) -> ConvertConfig:
    config = config or get_convert_config()
    if source_file is not None:
        config = dataclasses.replace(config, source_file=source_file)
    return config


def parse(
    source: str,
    *,
    config: ConvertConfig | None = None,
    source_file: str | None = None,
) -> Program:
    """Parse JavaScript source into a typed AST.

    Args:
        source: JavaScript source text
        config: Conversion config (context config if None)
        source_file: Optional source file path for error messages

    Returns:
        Program AST root node

    Raises:
        ParseError: The source is not valid JavaScript
        UnsupportedConstruct: The source uses a construct culebra cannot render

    """
    config = _resolve_config(config, source_file)
    return _parse(source, source_type=config.source_type, source_file=config.source_file)


def convert(
    source: str,
    *,
    config: ConvertConfig | None = None,
    source_file: str | None = None,
) -> str:
    """Convert JavaScript source text to Python source text.

    Args:
        source: JavaScript source text
        config: Conversion config (context config if None)
        source_file: Optional source file path for error messages

    Returns:
        Python source text

    Raises:
        ParseError: The source is not valid JavaScript
        UnsupportedConstruct: A node kind (or, in strict mode, a literal or
            operator) has no Python rendering
        MalformedNode: The parser produced a node without a type

    Example:
        >>> convert("class Dog extends Animal {}")
        'class Dog(Animal):\\n  pass'

    """
    config = _resolve_config(config, source_file)
    program = _parse(source, source_type=config.source_type, source_file=config.source_file)
    logger.debug("rendering %d top-level statements", len(program.body))
    return PythonRenderer(config).render(program)


def convert_tree(
    tree: Node | Mapping[str, Any] | str | Any,
    *,
    config: ConvertConfig | None = None,
) -> str:
    """Render an already parsed tree as Python source text.

    Args:
        tree: A typed node, an ESTree dict or node object, or ESTree JSON text
        config: Conversion config (context config if None)

    Returns:
        Python source text

    Raises:
        MalformedNode: A node without ``type`` was found
        UnsupportedConstruct: A node kind has no Python rendering

    """
    config = _resolve_config(config, None)
    if isinstance(tree, str):
        tree = from_json(tree, source_file=config.source_file)
    elif not isinstance(tree, Node):
        tree = from_estree(tree, source_file=config.source_file)
    return PythonRenderer(config).render(tree)


class Converter:
    """High-level converter combining parser and renderer.

    Usage:
        >>> to_python = Converter()
        >>> to_python("let [a, b] = pair")
        '[ a, b ] = pair'

        >>> # Access the AST
        >>> program = to_python.parse("x = 1")
        >>> type(program.body[0]).__name__
        'ExpressionStatement'

    Thread Safety:
        Holds only an immutable config and a stateless renderer. Safe to share
        one Converter across threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, config: ConvertConfig | None = None) -> None:
        self._config = config or ConvertConfig()
        self._renderer = PythonRenderer(self._config)

    @property
    def config(self) -> ConvertConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(source, source_file=source_file))

    def parse(self, source: str, *, source_file: str | None = None) -> Program:
        """Parse JavaScript source into a typed AST."""
        return _parse(
            source,
            source_type=self._config.source_type,
            source_file=source_file or self._config.source_file,
        )

    def render(self, node: Node) -> str:
        """Render a typed AST as Python source text."""
        return self._renderer.render(node)

    def convert_many(self, sources: Iterable[str]) -> list[str]:
        """Convert several sources; the first failure propagates."""
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "convert",
    "convert_tree",
    "parse",
    "Converter",
    # Errors
    "CulebraError",
    "MalformedNode",
    "ParseError",
    "UnsupportedConstruct",
    # Nodes
    "Node",
    "Program",
    "Expression",
    "Pattern",
    "Statement",
    "ArrayExpression",
    "ArrayPattern",
    "AssignmentExpression",
    "BinaryExpression",
    "CallExpression",
    "Identifier",
    "Literal",
    "MemberExpression",
    "UpdateExpression",
    "BlockStatement",
    "ClassBody",
    "ClassDeclaration",
    "ExpressionStatement",
    "ForStatement",
    "IfStatement",
    "VariableDeclaration",
    "VariableDeclarator",
    # Rendering
    "Margin",
    "PythonRenderer",
    "is_counting_loop",
    # Portability
    "is_portable_literal",
    "is_portable_operator",
    # Serialization
    "from_estree",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "ConvertConfig",
    "get_convert_config",
    "set_convert_config",
    "reset_convert_config",
    "convert_config_context",
    # Location
    "SourceLocation",
]
