"""JavaScript parsing via esprima.

The parser is an external collaborator: esprima turns source text into an
ESTree tree (ECMAScript 2017), and this module only fixes its options,
translates its failures into ParseError, and loads the result into typed
nodes.

Example:
    >>> from culebra.parser import parse
    >>> program = parse("let x = 1")
    >>> program.body[0].kind
    'let'

"""

import esprima
from esprima.error_handler import Error as EsprimaError

from culebra.config import SourceType
from culebra.errors import ParseError
from culebra.nodes import Program
from culebra.serialization import from_estree
from culebra.utils.logger import get_logger

logger = get_logger(__name__)

# Options handed to esprima for every parse
PARSE_OPTIONS: dict[str, bool] = {
    "loc": True,
    "range": True,
    "tolerant": False,
}


def parse_estree(
    source: str,
    *,
    source_type: SourceType = "script",
    source_file: str | None = None,
):
    """Parse source text into esprima's own ESTree node objects.

    Args:
        source: JavaScript source text
        source_type: ``"script"`` or ``"module"``
        source_file: Optional file name for error messages

    Returns:
        esprima Program node

    Raises:
        ParseError: If esprima rejects the source.

    """
    parse_fn = esprima.parseModule if source_type == "module" else esprima.parseScript
    try:
        return parse_fn(source, dict(PARSE_OPTIONS))
    except EsprimaError as e:
        # esprima prefixes messages with "Line N: "; keep the bare description
        description = getattr(e, "description", None) or str(e)
        raise ParseError(
            description,
            lineno=getattr(e, "lineNumber", None),
            col_offset=getattr(e, "column", None),
            source_file=source_file,
        ) from e


def parse(
    source: str,
    *,
    source_type: SourceType = "script",
    source_file: str | None = None,
) -> Program:
    """Parse JavaScript source into the typed AST.

    Args:
        source: JavaScript source text
        source_type: ``"script"`` or ``"module"``
        source_file: Optional file name recorded in locations and errors

    Returns:
        Program root node

    Raises:
        ParseError: If the source is not valid JavaScript.
        UnsupportedConstruct: If the source uses a construct without a typed node.
        MalformedNode: If esprima hands back a node without a type.

    """
    tree = parse_estree(source, source_type=source_type, source_file=source_file)
    logger.debug("parsed %d characters (%s)", len(source), source_type)
    program = from_estree(tree, source_file=source_file)
    if not isinstance(program, Program):
        msg = f"Parser returned {type(program).__name__}, expected Program"
        raise ParseError(msg, source_file=source_file)
    return program


__all__ = ["PARSE_OPTIONS", "parse", "parse_estree"]
