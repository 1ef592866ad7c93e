"""Python renderer: typed JavaScript AST to Python source text.

Expression rules return a single fragment without newline. Statement rules
return one or more newline-joined lines, each prefixed with the margin the
statement was rendered at, without a trailing newline.

Indentation is an explicit, immutable Margin argument: a rule hands
``margin.enter()`` to the children inside its block and never changes its own
value, so nothing has to be restored when a child render fails.

Thread Safety:
The renderer keeps only its configuration. Multiple threads can safely share
a single PythonRenderer instance and call render() concurrently.

Example:
    >>> from culebra.parser import parse
    >>> print(PythonRenderer().render(parse("if (a) { b() } else { c() }")))
    if a:
      b()
    else:
      c()

"""

from culebra.config import ConvertConfig
from culebra.errors import MalformedNode, UnsupportedConstruct
from culebra.margin import Margin
from culebra.nodes import (
    AnyNode,
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
from culebra.portability import is_portable_literal, is_portable_operator
from culebra.serialization import NODE_TYPES
from culebra.utils.logger import get_logger

logger = get_logger(__name__)

PLACEHOLDER = "pass"

# Rendering of a declarator without initializer (`let x;`) and of array holes
UNINITIALIZED = "None"

# Skipped position in a destructuring target: `let [, b] = pair`
IGNORED_TARGET = "_"


class PythonRenderer:
    """Render a typed JavaScript AST to Python source.

    Usage:
        >>> renderer = PythonRenderer()
        >>> renderer.render(program)
        'for i in range(0, 10):\\n  f(i)'

    """

    __slots__ = ("_config",)

    def __init__(self, config: ConvertConfig | None = None) -> None:
        self._config = config or ConvertConfig()

    @property
    def config(self) -> ConvertConfig:
        return self._config

    def render(self, node: AnyNode | None, margin: Margin | None = None) -> str:
        """Render any node at ``margin`` (top level when omitted).

        Args:
            node: Node to render, or None for an absent optional child
            margin: Indentation of the first rendered line (depth 0 of the
                configured indent unit when None)

        Returns:
            Rendered text; empty string for ``None``

        Raises:
            UnsupportedConstruct: Node kind without a rule, or a non-portable
                literal/operator in strict mode
            MalformedNode: ``node`` is not an AST node at all

        """
        if margin is None:
            margin = Margin(self._config.indent_unit)
        return self._dispatch(node, margin)

    def _dispatch(self, node: AnyNode | None, margin: Margin) -> str:
        match node:
            case None:
                return ""
            # Expressions
            case Identifier():
                return node.name
            case Literal():
                return self._literal(node)
            case ArrayExpression() | ArrayPattern():
                return self._array(node, margin)
            case BinaryExpression():
                return self._binary(node, margin)
            case MemberExpression():
                return f"{self._dispatch(node.object, margin)}.{self._dispatch(node.property, margin)}"
            case CallExpression():
                args = ", ".join(self._dispatch(arg, margin) for arg in node.arguments)
                return f"{self._dispatch(node.callee, margin)}({args})"
            case AssignmentExpression():
                operator = self._operator(node.operator, node)
                left = self._dispatch(node.left, margin)
                return f"{left} {operator} {self._dispatch(node.right, margin)}"
            case UpdateExpression():
                # `i += 1` is a Python statement, so `x = i++` has no rendering
                raise UnsupportedConstruct(
                    "UpdateExpression",
                    location=node.location,
                    detail="only valid as a statement",
                )
            case VariableDeclarator():
                init = self._dispatch(node.init, margin) if node.init is not None else UNINITIALIZED
                return f"{self._dispatch(node.id, margin)} = {init}"
            # Statements
            case Program():
                return "\n".join(self._dispatch(stmt, margin) for stmt in node.body)
            case BlockStatement() | ClassBody():
                return self._block(node.body, margin)
            case ExpressionStatement():
                return margin.indent(self._statement_expression(node.expression, margin))
            case VariableDeclaration():
                return "\n".join(
                    margin.indent(self._dispatch(decl, margin)) for decl in node.declarations
                )
            case ClassDeclaration():
                return self._class(node, margin)
            case IfStatement():
                return self._if(node, margin)
            case ForStatement():
                return self._for(node, margin)
            case Node():
                # A Node subclass outside the closed set
                raise UnsupportedConstruct(
                    type(node).__name__, known=NODE_TYPES, location=node.location
                )
            case _:
                msg = f"Not an AST node: {node!r}"
                raise MalformedNode(msg, node)

    # =========================================================================
    # Expression rules
    # =========================================================================

    def _literal(self, node: Literal) -> str:
        if not is_portable_literal(node.raw):
            if self._config.strict:
                raise UnsupportedConstruct(
                    "Literal",
                    location=node.location,
                    detail=f"{node.raw} has no identical Python spelling",
                )
            logger.warning("Literal %s at %s forwarded verbatim", node.raw, node.location)
        return node.raw

    def _operator(self, operator: str, node: Node) -> str:
        if not is_portable_operator(operator):
            if self._config.strict:
                raise UnsupportedConstruct(
                    type(node).__name__,
                    location=node.location,
                    detail=f"operator {operator!r} has no identical Python spelling",
                )
            logger.warning("Operator %r at %s forwarded verbatim", operator, node.location)
        return operator

    def _array(self, node: ArrayExpression | ArrayPattern, margin: Margin) -> str:
        hole = IGNORED_TARGET if isinstance(node, ArrayPattern) else UNINITIALIZED
        elems = [self._dispatch(e, margin) if e is not None else hole for e in node.elements]
        return f"[ {', '.join(elems)} ]"

    def _binary(self, node: BinaryExpression, margin: Margin) -> str:
        # Nested binary operands are always wrapped, whatever the precedence
        left = self._dispatch(node.left, margin)
        if isinstance(node.left, BinaryExpression):
            left = f"({left})"
        right = self._dispatch(node.right, margin)
        if isinstance(node.right, BinaryExpression):
            right = f"({right})"
        return f"{left} {self._operator(node.operator, node)} {right}"

    # =========================================================================
    # Statement rules
    # =========================================================================

    def _statement_expression(self, expr: AnyNode, margin: Margin) -> str:
        """Render an expression in statement position (statement or loop step)."""
        if isinstance(expr, UpdateExpression):
            step = "+=" if expr.operator == "++" else "-="
            return f"{self._dispatch(expr.argument, margin)} {step} 1"
        return self._dispatch(expr, margin)

    def _block(self, body: tuple, margin: Margin) -> str:
        if not body:
            return margin.indent(PLACEHOLDER)
        return "\n".join(self._dispatch(stmt, margin) for stmt in body)

    def _nested(self, stmt: AnyNode, margin: Margin) -> str:
        """Render a statement one level deeper than ``margin``."""
        return self._dispatch(stmt, margin.enter())

    def _class(self, node: ClassDeclaration, margin: Margin) -> str:
        base = f"({self._dispatch(node.superclass, margin)})" if node.superclass is not None else ""
        header = margin.indent(f"class {self._dispatch(node.id, margin)}{base}:")
        return f"{header}\n{self._nested(node.body, margin)}"

    def _if(self, node: IfStatement, margin: Margin) -> str:
        lines = [
            margin.indent(f"if {self._dispatch(node.test, margin)}:"),
            self._nested(node.consequent, margin),
        ]
        if node.alternate is not None:
            lines.append(margin.indent("else:"))
            lines.append(self._nested(node.alternate, margin))
        return "\n".join(lines)

    def _for(self, node: ForStatement, margin: Margin) -> str:
        if is_counting_loop(node):
            declarator = node.init.declarations[0]
            low = self._dispatch(declarator.init, margin)
            high = self._dispatch(node.test.right, margin)
            header = f"for {declarator.id.name} in range({low}, {high}):"
            logger.debug("counting loop over %s at %s", declarator.id.name, node.location)
            return f"{margin.indent(header)}\n{self._nested(node.body, margin)}"

        lines = []
        if node.init is not None:
            init = self._dispatch(node.init, margin)
            # Expression initializers (`for (i = 0; ...)`) carry no margin of their own
            lines.append(init if isinstance(node.init, VariableDeclaration) else margin.indent(init))
        test = self._dispatch(node.test, margin) if node.test is not None else "True"
        lines.append(margin.indent(f"while {test}:"))
        lines.append(self._nested(node.body, margin))
        if node.update is not None:
            lines.append(f"{margin.next}{self._statement_expression(node.update, margin)}")
        return "\n".join(lines)


def is_counting_loop(node: ForStatement) -> bool:
    """Return True if ``node`` can be rewritten to ``for ... in range(...)``.

    Matches ``for (let i = <low>; <i> <op> <high>; i++)``: a single declared
    identifier with an initializer, a binary test and a ``++`` update. The
    match is syntactic only; the test operator and the loop body are not
    inspected.

    """
    init, test, update = node.init, node.test, node.update
    if not isinstance(init, VariableDeclaration) or len(init.declarations) != 1:
        return False
    declarator = init.declarations[0]
    return (
        isinstance(declarator.id, Identifier)
        and declarator.init is not None
        and isinstance(test, BinaryExpression)
        and isinstance(update, UpdateExpression)
        and update.operator == "++"
    )


def render_python(node: AnyNode, *, config: ConvertConfig | None = None) -> str:
    """Render an AST to Python source text.

    Args:
        node: AST to render, usually a Program
        config: Conversion configuration (defaults when omitted)

    Returns:
        Python source text

    """
    renderer = PythonRenderer(config)
    return renderer.render(node)
