"""ESTree loading and JSON output for Culebra AST nodes.

Converts parser output into the typed node set of ``culebra.nodes`` and back
to ESTree-shaped dicts. Input trees may be esprima node objects or plain
dicts (as produced by esprima's ``toDict()``, espree, acorn or any other
ESTree parser). Useful for:
- Loading the tree handed over by the parser
- Converting trees produced by other ESTree tools (``--tree`` on the CLI)
- Debugging and inspection (``--dump-ast``)

This is where node kinds only known at parse time are checked: a node
without ``type`` raises MalformedNode, a ``type`` with no typed counterpart
raises UnsupportedConstruct.

Example:
    from culebra.serialization import from_estree, to_json

    tree = from_estree({"type": "Program", "body": []})
    print(to_json(tree, indent=2))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Mapping
from dataclasses import MISSING, fields
from typing import Any

from culebra.errors import MalformedNode, UnsupportedConstruct
from culebra.location import SourceLocation
from culebra.nodes import (
    ArrayExpression,
    ArrayPattern,
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    CallExpression,
    ClassBody,
    ClassDeclaration,
    ExpressionStatement,
    ForStatement,
    Identifier,
    IfStatement,
    Literal,
    MemberExpression,
    Node,
    Program,
    UpdateExpression,
    VariableDeclaration,
    VariableDeclarator,
)

# Registry of ESTree type names to classes
NODE_TYPES: dict[str, type[Node]] = {
    "Program": Program,
    "Identifier": Identifier,
    "Literal": Literal,
    "ArrayExpression": ArrayExpression,
    "ArrayPattern": ArrayPattern,
    "BinaryExpression": BinaryExpression,
    "MemberExpression": MemberExpression,
    "CallExpression": CallExpression,
    "AssignmentExpression": AssignmentExpression,
    "UpdateExpression": UpdateExpression,
    "ExpressionStatement": ExpressionStatement,
    "BlockStatement": BlockStatement,
    "ClassDeclaration": ClassDeclaration,
    "ClassBody": ClassBody,
    "IfStatement": IfStatement,
    "ForStatement": ForStatement,
    "VariableDeclaration": VariableDeclaration,
    "VariableDeclarator": VariableDeclarator,
}

# ESTree property names that differ from dataclass field names
_ESTREE_NAMES: dict[str, str] = {
    "superclass": "superClass",
    "source_type": "sourceType",
}

_PRIMITIVES = (str, int, float, bool)


def _get(raw: Any, key: str) -> Any:
    """Read a property from a dict-shaped or attribute-shaped ESTree node."""
    if isinstance(raw, Mapping):
        return raw.get(key)
    return getattr(raw, key, None)


def _has(raw: Any, key: str) -> bool:
    if isinstance(raw, Mapping):
        return key in raw
    try:
        return key in vars(raw)
    except TypeError:
        return hasattr(raw, key)


def _location(raw: Any, source_file: str | None) -> SourceLocation:
    """Build a SourceLocation from ESTree ``loc``/``range`` data.

    ESTree columns are 0-indexed; SourceLocation columns are 1-indexed.
    """
    loc = _get(raw, "loc")
    span = _get(raw, "range")
    offset, end_offset = (span[0], span[1]) if span and len(span) == 2 else (0, 0)
    if loc is None:
        if source_file is None and not end_offset:
            return SourceLocation.unknown()
        return SourceLocation(
            lineno=0,
            col_offset=0,
            offset=offset,
            end_offset=end_offset,
            source_file=source_file,
        )

    start = _get(loc, "start")
    end = _get(loc, "end")
    end_line = _get(end, "line") if end is not None else None
    end_column = _get(end, "column") if end is not None else None
    return SourceLocation(
        lineno=_get(start, "line") or 0,
        col_offset=(_get(start, "column") or 0) + 1,
        offset=offset,
        end_offset=end_offset,
        end_lineno=end_line,
        end_col_offset=end_column + 1 if end_column is not None else None,
        source_file=source_file,
    )


def from_estree(raw: Any, *, source_file: str | None = None) -> Node:
    """Reconstruct a typed AST node from an ESTree node.

    Uses the ``type`` discriminator to determine the node class and
    recursively loads child nodes.

    Args:
        raw: ESTree node, either a mapping or an object with attributes.
        source_file: File name recorded in every node location.

    Returns:
        Typed AST node (frozen dataclass).

    Raises:
        MalformedNode: If ``type`` is missing or a required property is absent.
        UnsupportedConstruct: If ``type`` names a kind without a typed node.

    """
    type_name = _get(raw, "type")
    if not isinstance(type_name, str):
        msg = f"Not an ESTree node (no 'type'): {raw!r}"
        raise MalformedNode(msg, raw)

    location = _location(raw, source_file)
    node_cls = NODE_TYPES.get(type_name)
    if node_cls is None:
        raise UnsupportedConstruct(type_name, known=NODE_TYPES, location=location)

    kwargs: dict[str, Any] = {"location": location}
    for f in fields(node_cls):
        if f.name == "location":
            continue
        key = _ESTREE_NAMES.get(f.name, f.name)
        if not _has(raw, key):
            if f.default is MISSING:
                msg = f"{type_name} node at {location} is missing {key!r}"
                raise MalformedNode(msg, raw)
            continue
        kwargs[f.name] = _load_value(_get(raw, key), f.name, source_file)

    if node_cls is Literal:
        if not isinstance(kwargs["raw"], str):
            msg = f"Literal at {location} has no source text"
            raise MalformedNode(msg, raw)
        if not isinstance(kwargs.get("value"), _PRIMITIVES):
            # regex and bigint values have no portable Python form
            kwargs["value"] = None

    return node_cls(**kwargs)


def _load_value(value: Any, field_name: str, source_file: str | None) -> Any:
    """Load a single property value."""
    if value is None or isinstance(value, _PRIMITIVES):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(
            None if item is None else from_estree(item, source_file=source_file)
            for item in value
        )
    if field_name == "value":
        # Literal values that are objects (compiled regex, bigint wrappers)
        return None
    return from_estree(value, source_file=source_file)


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to an ESTree-shaped, JSON-compatible dict.

    Includes the ``type`` discriminator and a ``loc`` entry when the node
    location is known, so the result loads back with ``from_estree``.

    """
    result: dict[str, Any] = {"type": type(node).__name__}

    for f in fields(node):
        if f.name == "location":
            continue
        key = _ESTREE_NAMES.get(f.name, f.name)
        result[key] = _serialize_value(getattr(node, f.name))

    loc = node.location
    if loc.lineno:
        result["loc"] = {
            "start": {"line": loc.lineno, "column": loc.col_offset - 1},
            "end": {
                "line": loc.end_lineno if loc.end_lineno is not None else loc.lineno,
                "column": (loc.end_col_offset or loc.col_offset) - 1,
            },
        }
    if loc.end_offset:
        result["range"] = [loc.offset, loc.end_offset]
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, float, bool, None
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize an AST to a JSON string.

    Output is deterministic (sorted keys).

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str, *, source_file: str | None = None) -> Program:
    """Load a Program from an ESTree JSON document.

    Raises:
        MalformedNode: If the JSON doesn't represent a Program.

    """
    node = from_estree(json.loads(data), source_file=source_file)
    if not isinstance(node, Program):
        msg = f"Expected Program, got {type(node).__name__}"
        raise MalformedNode(msg, node)
    return node


__all__ = [
    "NODE_TYPES",
    "from_estree",
    "from_json",
    "to_dict",
    "to_json",
]
