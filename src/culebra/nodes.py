"""Typed AST nodes for Culebra.

The closed set of ECMAScript constructs the converter understands, mirroring
the ESTree shape produced by the parser. Anything outside this set is
rejected when the tree is loaded.

All AST nodes are frozen dataclasses with slots for:
- Type safety: a new kind without a rendering rule is flagged by type checkers
- Immutability: the printer holds a read-only view of the tree
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Program
├── Statements
│   ├── ExpressionStatement
│   ├── BlockStatement
│   ├── ClassDeclaration
│   ├── ClassBody
│   ├── IfStatement
│   ├── ForStatement
│   ├── VariableDeclaration
│   └── VariableDeclarator
└── Expressions
    ├── Identifier
    ├── Literal
    ├── ArrayExpression
    ├── ArrayPattern
    ├── BinaryExpression
    ├── MemberExpression
    ├── CallExpression
    ├── AssignmentExpression
    └── UpdateExpression

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal as Choice
from typing import TypeAlias

from culebra.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Identifier(Node):
    """A name.

    JavaScript: x
    Python: x

    """

    name: str


@dataclass(frozen=True, slots=True)
class Literal(Node):
    """A literal value, kept as its original source text.

    ``raw`` is what gets rendered; ``value`` is informational only.

    """

    raw: str
    value: str | int | float | bool | None = None


@dataclass(frozen=True, slots=True)
class ArrayExpression(Node):
    """Array literal.

    JavaScript: [a, , b]
    Python: [ a, None, b ]

    ``None`` entries are elisions (holes).

    """

    elements: tuple[Expression | None, ...]


@dataclass(frozen=True, slots=True)
class ArrayPattern(Node):
    """Array destructuring target.

    JavaScript: let [a, b] = pair
    Python: [ a, b ] = pair

    """

    elements: tuple[Pattern | None, ...]


@dataclass(frozen=True, slots=True)
class BinaryExpression(Node):
    """Binary operation, including comparisons."""

    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class MemberExpression(Node):
    """Property access.

    ``computed`` is kept for inspection; rendering always uses dot access.

    """

    object: Expression
    property: Expression
    computed: bool = False


@dataclass(frozen=True, slots=True)
class CallExpression(Node):
    """Function or method call."""

    callee: Expression
    arguments: tuple[Expression, ...]


@dataclass(frozen=True, slots=True)
class AssignmentExpression(Node):
    """Assignment, plain or compound (``+=``, ``-=``...)."""

    operator: str
    left: Pattern
    right: Expression


@dataclass(frozen=True, slots=True)
class UpdateExpression(Node):
    """Increment or decrement.

    JavaScript: i++ / --i
    Python: i += 1 / i -= 1

    """

    operator: Choice["++", "--"]
    argument: Expression
    prefix: bool = False


# =============================================================================
# Statement Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class ExpressionStatement(Node):
    """An expression used as a statement."""

    expression: Expression


@dataclass(frozen=True, slots=True)
class BlockStatement(Node):
    """Braced statement list.

    An empty block renders as ``pass``.

    """

    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class ClassBody(Node):
    """Members of a class declaration."""

    body: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class ClassDeclaration(Node):
    """Class declaration.

    JavaScript: class Name extends Base { }
    Python: class Name(Base):

    """

    id: Identifier
    superclass: Expression | None
    body: ClassBody


@dataclass(frozen=True, slots=True)
class IfStatement(Node):
    """Conditional with optional else branch."""

    test: Expression
    consequent: Statement
    alternate: Statement | None = None


@dataclass(frozen=True, slots=True)
class VariableDeclarator(Node):
    """One ``name = init`` entry of a declaration."""

    id: Pattern
    init: Expression | None = None


@dataclass(frozen=True, slots=True)
class VariableDeclaration(Node):
    """``var``/``let``/``const`` declaration with one or more declarators."""

    kind: Choice["var", "let", "const"]
    declarations: tuple[VariableDeclarator, ...]


@dataclass(frozen=True, slots=True)
class ForStatement(Node):
    """C-style three clause loop. Every clause is optional."""

    init: VariableDeclaration | Expression | None
    test: Expression | None
    update: Expression | None
    body: Statement


@dataclass(frozen=True, slots=True)
class Program(Node):
    """Root node holding the top-level statements."""

    body: tuple[Statement, ...]
    source_type: Choice["script", "module"] = "script"


# PEP 695 type aliases closing each category
Expression: TypeAlias = (
    Identifier
    | Literal
    | ArrayExpression
    | BinaryExpression
    | MemberExpression
    | CallExpression
    | AssignmentExpression
    | UpdateExpression
)

Pattern: TypeAlias = Identifier | ArrayPattern | MemberExpression

Statement: TypeAlias = (
    ExpressionStatement
    | BlockStatement
    | ClassDeclaration
    | IfStatement
    | ForStatement
    | VariableDeclaration
)

AnyNode: TypeAlias = Program | ClassBody | VariableDeclarator | ArrayPattern | Statement | Expression
