"""Tests for culebra.serialization — ESTree loading and JSON output."""

import json

import pytest

from culebra.errors import MalformedNode, UnsupportedConstruct
from culebra.location import SourceLocation
from culebra.nodes import (
    ArrayPattern,
    BinaryExpression,
    ClassDeclaration,
    ExpressionStatement,
    ForStatement,
    Identifier,
    Literal,
    Program,
    VariableDeclaration,
)
from culebra.serialization import NODE_TYPES, from_estree, from_json, to_dict, to_json


def _ident(name: str, line: int = 1, column: int = 0) -> dict:
    return {
        "type": "Identifier",
        "name": name,
        "loc": {"start": {"line": line, "column": column}, "end": {"line": line, "column": column + len(name)}},
        "range": [column, column + len(name)],
    }


class TestFromEstree:
    """Loading dict-shaped ESTree trees."""

    def test_identifier(self) -> None:
        node = from_estree(_ident("x"))
        assert isinstance(node, Identifier)
        assert node.name == "x"

    def test_columns_become_one_indexed(self) -> None:
        node = from_estree(_ident("x", line=3, column=4))
        assert node.location.lineno == 3
        assert node.location.col_offset == 5
        assert node.location.end_col_offset == 6
        assert (node.location.offset, node.location.end_offset) == (4, 5)

    def test_missing_loc_is_unknown(self) -> None:
        node = from_estree({"type": "Identifier", "name": "x"})
        assert node.location == SourceLocation.unknown()

    def test_source_file_recorded(self) -> None:
        node = from_estree(_ident("x"), source_file="app.js")
        assert node.location.source_file == "app.js"

    def test_program_with_statements(self) -> None:
        tree = {
            "type": "Program",
            "sourceType": "script",
            "body": [{"type": "ExpressionStatement", "expression": _ident("a")}],
        }
        program = from_estree(tree)
        assert isinstance(program, Program)
        assert isinstance(program.body[0], ExpressionStatement)
        assert program.body == (ExpressionStatement(location=SourceLocation.unknown(), expression=from_estree(_ident("a"))),)

    def test_super_class_renamed(self) -> None:
        tree = {
            "type": "ClassDeclaration",
            "id": _ident("Dog"),
            "superClass": _ident("Animal"),
            "body": {"type": "ClassBody", "body": []},
        }
        node = from_estree(tree)
        assert isinstance(node, ClassDeclaration)
        assert isinstance(node.superclass, Identifier)
        assert node.superclass.name == "Animal"

    def test_null_clauses_kept(self) -> None:
        tree = {
            "type": "ForStatement",
            "init": None,
            "test": None,
            "update": None,
            "body": {"type": "BlockStatement", "body": []},
        }
        node = from_estree(tree)
        assert isinstance(node, ForStatement)
        assert node.init is None and node.test is None and node.update is None

    def test_array_holes_kept(self) -> None:
        node = from_estree({"type": "ArrayPattern", "elements": [None, _ident("b")]})
        assert isinstance(node, ArrayPattern)
        assert node.elements[0] is None

    def test_regex_literal_value_dropped(self) -> None:
        node = from_estree({"type": "Literal", "value": {}, "raw": "/x/g", "regex": {"pattern": "x", "flags": "g"}})
        assert isinstance(node, Literal)
        assert node.raw == "/x/g"
        assert node.value is None

    def test_attribute_shaped_nodes(self) -> None:
        class Obj:
            def __init__(self, **kwargs) -> None:  # type: ignore[no-untyped-def]
                self.__dict__.update(kwargs)

        raw = Obj(
            type="BinaryExpression",
            operator="+",
            left=Obj(type="Identifier", name="a"),
            right=Obj(type="Literal", value=1, raw="1"),
        )
        node = from_estree(raw)
        assert isinstance(node, BinaryExpression)
        assert node.right == Literal(location=SourceLocation.unknown(), raw="1", value=1)


class TestLoadFailures:
    """Parse-time kinds are checked while loading."""

    def test_missing_type_is_malformed(self) -> None:
        with pytest.raises(MalformedNode, match="no 'type'"):
            from_estree({"name": "x"})

    def test_nested_missing_type_is_malformed(self) -> None:
        with pytest.raises(MalformedNode):
            from_estree({"type": "ExpressionStatement", "expression": {"name": "x"}})

    def test_unknown_type_is_unsupported(self) -> None:
        tree = {
            "type": "WhileStatement",
            "test": _ident("x"),
            "body": {"type": "BlockStatement", "body": []},
            "loc": {"start": {"line": 2, "column": 0}, "end": {"line": 2, "column": 13}},
        }
        with pytest.raises(UnsupportedConstruct) as exc_info:
            from_estree(tree)
        err = exc_info.value
        assert err.kind == "WhileStatement"
        assert set(err.known) == set(NODE_TYPES)
        assert err.location is not None and err.location.lineno == 2
        assert "2:1" in str(err)

    def test_missing_required_property(self) -> None:
        with pytest.raises(MalformedNode, match="missing 'name'"):
            from_estree({"type": "Identifier"})

    def test_literal_without_raw(self) -> None:
        with pytest.raises(MalformedNode):
            from_estree({"type": "Literal", "value": 1})


class TestJson:
    """ESTree-shaped JSON output and input."""

    def test_to_dict_uses_estree_names(self) -> None:
        node = from_estree(
            {
                "type": "ClassDeclaration",
                "id": _ident("A"),
                "superClass": None,
                "body": {"type": "ClassBody", "body": []},
            }
        )
        data = to_dict(node)
        assert data["type"] == "ClassDeclaration"
        assert "superClass" in data and data["superClass"] is None
        assert data["id"]["loc"]["start"] == {"line": 1, "column": 0}

    def test_to_dict_loads_back(self) -> None:
        tree = {
            "type": "Program",
            "sourceType": "script",
            "body": [
                {
                    "type": "VariableDeclaration",
                    "kind": "let",
                    "declarations": [
                        {"type": "VariableDeclarator", "id": _ident("x"), "init": {"type": "Literal", "value": 1, "raw": "1"}}
                    ],
                }
            ],
        }
        program = from_estree(tree)
        assert from_estree(to_dict(program)) == program

    def test_to_json_is_deterministic(self) -> None:
        node = from_estree(_ident("x"))
        assert to_json(node) == to_json(node)
        assert json.loads(to_json(node))["name"] == "x"

    def test_from_json_requires_program(self) -> None:
        with pytest.raises(MalformedNode, match="Expected Program"):
            from_json(json.dumps(_ident("x")))

    def test_from_json_program(self) -> None:
        program = from_json('{"type": "Program", "body": [], "sourceType": "module"}')
        assert program.source_type == "module"
        assert program.body == ()

    def test_declaration_kind(self) -> None:
        node = from_estree(
            {"type": "VariableDeclaration", "kind": "const", "declarations": []}
        )
        assert isinstance(node, VariableDeclaration)
        assert node.kind == "const"
